from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class StorageConfig:
    """
    Where device-local annotations are kept and under which slot names.
    """

    data_dir: Path = Path(os.getenv("COURTFINDER_DATA_DIR", str(Path.home() / ".courtfinder")))
    favorites_key: str = "pickleball-favorites"
    reviews_key: str = "pickleball-reviews"

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"


DEFAULT_STORAGE_CONFIG = StorageConfig()
