from __future__ import annotations

import numpy as np

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1, lng1, lat2, lng2):
    """
    Great-circle distance in kilometres using the haversine formula.

    Inputs are decimal degrees. Works on plain floats as well as numpy
    arrays / pandas Series, so the pipeline can annotate a whole frame in
    one call. Coordinate ranges are not validated.
    """
    d_lat = np.radians(lat2 - lat1)
    d_lng = np.radians(lng2 - lng1)
    a = (
        np.sin(d_lat / 2) ** 2
        + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(d_lng / 2) ** 2
    )
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    result = EARTH_RADIUS_KM * c
    if np.ndim(result) == 0:
        return float(result)
    return result
