from __future__ import annotations

import logging

from .config import DEFAULT_STORAGE_CONFIG, StorageConfig
from .local_storage import read_json, write_json

logger = logging.getLogger(__name__)


def load_favorites(config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> list[str]:
    """
    Return the stored favorite court ids.

    Missing, corrupt or non-list data yields an empty list; non-string
    entries are dropped.
    """
    parsed = read_json(config.favorites_key, config)
    if parsed is None:
        return []
    if not isinstance(parsed, list):
        logger.warning("Favorites slot does not hold a list, ignoring it")
        return []
    return [item for item in parsed if isinstance(item, str)]


def save_favorites(favorites: list[str], config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> None:
    write_json(config.favorites_key, list(favorites), config)


def is_favorite(court_id: str, favorites: list[str]) -> bool:
    return court_id in favorites


def toggle_favorite(court_id: str, config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> list[str]:
    """
    Add *court_id* to the favorites, or remove it if already present.

    This is a plain load-modify-save; it is not atomic across writers.
    """
    current = load_favorites(config)
    if court_id in current:
        updated = [fid for fid in current if fid != court_id]
    else:
        updated = [*current, court_id]
    save_favorites(updated, config)
    return updated
