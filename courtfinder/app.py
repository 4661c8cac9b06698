from __future__ import annotations

import math

from fastapi import Depends, FastAPI, HTTPException

from .catalog.config import DEFAULT_CATALOG_CONFIG
from .catalog.data_store import get_catalog, get_court, list_areas, list_surface_types
from .catalog.models import Court
from .discovery.display import (
    court_page_url,
    directions_url,
    format_distance,
    format_rating,
    share_text,
)
from .discovery.hours import current_minutes, is_open_now
from .discovery.models import (
    CourtDetailResponse,
    DiscoveredCourt,
    DiscoverRequest,
    DiscoverResponse,
)
from .discovery.pipeline import discover
from .storage.config import DEFAULT_STORAGE_CONFIG, StorageConfig
from .storage.favorites import is_favorite, load_favorites, toggle_favorite
from .storage.models import (
    FavoritesResponse,
    Review,
    ReviewListResponse,
    ReviewRequest,
    ToggleFavoriteResponse,
)
from .storage.reviews import (
    add_review,
    average_rating,
    delete_review,
    get_all_reviews,
    get_reviews,
)

app = FastAPI(title="Court Finder API", version="1.0.0")


def get_storage_config() -> StorageConfig:
    return DEFAULT_STORAGE_CONFIG


def _require_court(court_id: str) -> Court:
    court = get_court(court_id)
    if court is None:
        raise HTTPException(status_code=404, detail="Court not found")
    return court


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    courts = get_catalog()
    return {
        "areas": list_areas(courts),
        "surface_types": list_surface_types(courts),
        "total_courts": len(courts),
    }


@app.get("/sitemap")
def sitemap() -> dict:
    base_url = DEFAULT_CATALOG_CONFIG.base_url
    urls = [base_url] + [court_page_url(c, base_url) for c in get_catalog()]
    return {"urls": urls}


# ── Discovery ────────────────────────────────────────────────────────────


@app.post("/discover", response_model=DiscoverResponse)
def discover_courts(
    body: DiscoverRequest,
    config: StorageConfig = Depends(get_storage_config),
) -> DiscoverResponse:
    favorites = load_favorites(config)
    all_reviews = get_all_reviews(config)
    now = current_minutes() if body.now_minutes is None else body.now_minutes

    results = discover(
        get_catalog(),
        body.filters,
        favorites,
        body.location,
        body.sort_by_distance,
        now_minutes=now,
    )

    items: list[DiscoveredCourt] = []
    for court in results:
        reviews = all_reviews.get(court.id, [])
        avg = average_rating(reviews)
        items.append(DiscoveredCourt(
            court=court,
            open_state=is_open_now(court.hours, now),
            is_favorite=is_favorite(court.id, favorites),
            average_rating=avg,
            review_count=len(reviews),
            distance_label=format_distance(court.distance),
            rating_label=format_rating(avg, len(reviews)),
        ))

    return DiscoverResponse(courts=items, total=len(items))


@app.get("/courts/{court_id}", response_model=CourtDetailResponse)
def court_detail(
    court_id: str,
    config: StorageConfig = Depends(get_storage_config),
) -> CourtDetailResponse:
    court = _require_court(court_id)
    reviews = get_reviews(court_id, config)
    return CourtDetailResponse(
        court=court,
        open_state=is_open_now(court.hours, current_minutes()),
        is_favorite=is_favorite(court_id, load_favorites(config)),
        reviews=reviews,
        average_rating=average_rating(reviews),
        directions_url=directions_url(court),
        share_text=share_text(court, DEFAULT_CATALOG_CONFIG.base_url),
    )


# ── Favorites ────────────────────────────────────────────────────────────


@app.get("/favorites", response_model=FavoritesResponse)
def favorites(config: StorageConfig = Depends(get_storage_config)) -> FavoritesResponse:
    return FavoritesResponse(favorites=load_favorites(config))


@app.post("/favorites/{court_id}/toggle", response_model=ToggleFavoriteResponse)
def toggle(
    court_id: str,
    config: StorageConfig = Depends(get_storage_config),
) -> ToggleFavoriteResponse:
    _require_court(court_id)
    updated = toggle_favorite(court_id, config)
    return ToggleFavoriteResponse(
        court_id=court_id,
        is_favorite=is_favorite(court_id, updated),
        favorites=updated,
    )


# ── Reviews ──────────────────────────────────────────────────────────────


@app.get("/courts/{court_id}/reviews", response_model=ReviewListResponse)
def list_reviews(
    court_id: str,
    config: StorageConfig = Depends(get_storage_config),
) -> ReviewListResponse:
    _require_court(court_id)
    reviews = get_reviews(court_id, config)
    return ReviewListResponse(
        reviews=reviews,
        average_rating=average_rating(reviews),
        count=len(reviews),
    )


@app.post("/courts/{court_id}/reviews", response_model=Review)
def create_review(
    court_id: str,
    body: ReviewRequest,
    config: StorageConfig = Depends(get_storage_config),
) -> Review:
    _require_court(court_id)
    # Non-finite input cannot be echoed back in a JSON validation error body.
    if not math.isfinite(body.rating):
        raise HTTPException(status_code=422, detail="rating must be a finite number")
    return add_review(court_id, body.author, body.rating, body.comment, config)


@app.delete("/courts/{court_id}/reviews/{review_id}")
def remove_review(
    court_id: str,
    review_id: str,
    config: StorageConfig = Depends(get_storage_config),
) -> dict[str, str]:
    delete_review(court_id, review_id, config)
    return {"status": "deleted"}
