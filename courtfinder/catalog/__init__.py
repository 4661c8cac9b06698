"""
Static court catalog.

Responsibilities:
- Load the bundled court dataset once and validate it into Court models.
- Guarantee court identifiers are unique.
- Derive the area and surface-type options offered by the filters.
"""
