from __future__ import annotations

import logging

from pydantic import TypeAdapter

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Court

logger = logging.getLogger(__name__)

_COURTS_ADAPTER = TypeAdapter(list[Court])

_courts: list[Court] | None = None
_by_id: dict[str, Court] = {}


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[Court]:
    """
    Read and validate the court dataset.

    Raises ``ValueError`` when two records share an identifier.
    """
    courts = _COURTS_ADAPTER.validate_json(config.dataset_path.read_bytes())

    seen: set[str] = set()
    for court in courts:
        if court.id in seen:
            raise ValueError(f"Duplicate court id in catalog: {court.id!r}")
        seen.add(court.id)

    logger.info("Loaded %d courts from %s", len(courts), config.dataset_path)
    return courts


def get_catalog() -> list[Court]:
    """Return the in-memory catalog, loading it on first call."""
    global _courts
    if _courts is None:
        _courts = load_catalog()
        _by_id.update({c.id: c for c in _courts})
    return _courts


def get_court(court_id: str) -> Court | None:
    get_catalog()
    return _by_id.get(court_id)


def list_areas(courts: list[Court]) -> list[str]:
    return sorted({c.area for c in courts if c.area})


def list_surface_types(courts: list[Court]) -> list[str]:
    return sorted({c.surface_type for c in courts if c.surface_type})
