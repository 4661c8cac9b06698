"""
Court discovery pipeline.

Responsibilities:
- Compute great-circle distances between the user and each court.
- Decide whether a court is open right now from its free-text hours.
- Filter the catalog by search text, type, area, surface, favorites,
  open-now and minimum court count.
- Annotate survivors with distance and optionally sort by proximity.
"""
