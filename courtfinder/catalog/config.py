from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_DATASET = Path(__file__).resolve().parent.parent / "data" / "courts.json"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for the static court dataset.
    """

    dataset_path: Path = Path(os.getenv("COURTFINDER_CATALOG_PATH", str(_BUNDLED_DATASET)))
    base_url: str = os.getenv("COURTFINDER_BASE_URL", "https://pickleball-dashboard.vercel.app")


DEFAULT_CATALOG_CONFIG = CatalogConfig()
