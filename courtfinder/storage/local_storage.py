from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any

from .config import DEFAULT_STORAGE_CONFIG, StorageConfig

logger = logging.getLogger(__name__)


def get_item(key: str, config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> str | None:
    """Return the raw text stored under *key*, or ``None`` if nothing is there."""
    path = config.path_for(key)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError):
        logger.warning("Could not read storage slot %r at %s", key, path, exc_info=True)
        return None


def set_item(key: str, value: str, config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> None:
    """Replace the contents of *key*. The old contents stay intact if the write fails."""
    config.data_dir.mkdir(parents=True, exist_ok=True)
    path = config.path_for(key)
    fd, tmp_name = tempfile.mkstemp(dir=config.data_dir, prefix=f".{key}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(value)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def read_json(key: str, config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> Any | None:
    """
    Parse the JSON stored under *key*.

    Returns ``None`` for a missing slot and for content that is not valid
    JSON; callers decide what an empty value looks like.
    """
    raw = get_item(key, config)
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning("Storage slot %r holds unreadable JSON, ignoring it", key)
        return None


def write_json(key: str, value: Any, config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> None:
    set_item(key, json.dumps(value), config)
