from __future__ import annotations

import pandas as pd

from ..catalog.models import Court
from .geo import distance_km
from .hours import OpenState, current_minutes, is_open_now
from .models import ALL, Coordinates, CourtWithDistance, FilterCriteria, TypeFilter


def _to_frame(courts: list[Court]) -> pd.DataFrame:
    return pd.DataFrame({
        "id": [c.id for c in courts],
        "name_lower": [c.name.lower() for c in courts],
        "area": [c.area for c in courts],
        "surface_type": [c.surface_type for c in courts],
        "indoor": [c.indoor for c in courts],
        "number_of_courts": [c.number_of_courts for c in courts],
        "hours": [c.hours for c in courts],
        "lat": [c.coordinates.lat for c in courts],
        "lng": [c.coordinates.lng for c in courts],
    })


def _filter_mask(
    df: pd.DataFrame,
    filters: FilterCriteria,
    favorites: list[str],
    now_minutes: int | None,
) -> pd.Series:
    mask = pd.Series(True, index=df.index)

    if filters.search:
        mask &= df["name_lower"].str.contains(filters.search.lower(), regex=False)

    if filters.type_filter == TypeFilter.indoor:
        mask &= df["indoor"]
    elif filters.type_filter == TypeFilter.outdoor:
        mask &= ~df["indoor"]

    if filters.area_filter != ALL:
        mask &= df["area"] == filters.area_filter

    if filters.surface_filter != ALL:
        mask &= df["surface_type"] == filters.surface_filter

    if filters.show_favorites_only:
        mask &= df["id"].isin(set(favorites))

    if filters.open_now:
        # Unparseable hours count as not open.
        now = current_minutes() if now_minutes is None else now_minutes
        mask &= df["hours"].map(lambda h: is_open_now(h, now) is OpenState.open).astype(bool)

    if filters.min_courts > 0:
        mask &= df["number_of_courts"] >= filters.min_courts

    return mask


def discover(
    courts: list[Court],
    filters: FilterCriteria,
    favorites: list[str],
    user_location: Coordinates | None,
    sort_by_distance: bool,
    now_minutes: int | None = None,
) -> list[CourtWithDistance]:
    """
    Filter the catalog and annotate the survivors with distance.

    All predicates are ANDed and each is skipped at its default value.
    Distances are only attached when *user_location* is known; sorting by
    distance is stable, so ties keep catalog order.
    """
    if not courts:
        return []

    df = _to_frame(courts)
    candidates = df.loc[_filter_mask(df, filters, favorites, now_minutes)].copy()

    if user_location is not None:
        candidates["distance"] = distance_km(
            user_location.latitude,
            user_location.longitude,
            candidates["lat"],
            candidates["lng"],
        )
        if sort_by_distance:
            candidates = candidates.sort_values("distance", kind="stable", na_position="last")

    results: list[CourtWithDistance] = []
    for position, row in candidates.iterrows():
        distance = row.get("distance")
        results.append(CourtWithDistance.model_validate({
            **courts[position].model_dump(),
            "distance": float(distance) if distance is not None and pd.notna(distance) else None,
        }))
    return results
