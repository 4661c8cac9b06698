from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from .config import DEFAULT_STORAGE_CONFIG, StorageConfig
from .local_storage import read_json, write_json
from .models import Review

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _validate_collection(raw: Any) -> dict[str, list[Review]]:
    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning("Reviews slot does not hold an object, ignoring it")
        return {}

    result: dict[str, list[Review]] = {}
    dropped = 0
    for court_id, records in raw.items():
        if not isinstance(records, list):
            dropped += 1
            continue
        reviews: list[Review] = []
        for record in records:
            try:
                reviews.append(Review.model_validate(record))
            except ValidationError as exc:
                dropped += 1
                logger.debug("Dropping malformed review for %r: %s", court_id, exc)
        if reviews:
            result[court_id] = reviews

    if dropped:
        logger.warning("Dropped %d malformed review entries from storage", dropped)
    return result


def _load_all(config: StorageConfig) -> dict[str, list[Review]]:
    return _validate_collection(read_json(config.reviews_key, config))


def _save_all(all_reviews: dict[str, list[Review]], config: StorageConfig) -> None:
    payload = {
        court_id: [r.model_dump(by_alias=True) for r in reviews]
        for court_id, reviews in all_reviews.items()
        if reviews
    }
    write_json(config.reviews_key, payload, config)


def get_all_reviews(config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> dict[str, list[Review]]:
    """Every stored review, keyed by court id, newest first per court."""
    return _load_all(config)


def get_reviews(court_id: str, config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> list[Review]:
    return _load_all(config).get(court_id, [])


def add_review(
    court_id: str,
    author: str,
    rating: float,
    comment: str = "",
    config: StorageConfig = DEFAULT_STORAGE_CONFIG,
) -> Review:
    """
    Store a new review at the front of *court_id*'s list.

    The rating is rounded and clamped to 1-5. Raises ``ValueError`` if the
    author is blank.
    """
    author = (author or "").strip()
    if not author:
        raise ValueError("author must not be blank")

    review = Review(
        id=uuid.uuid4().hex,
        court_id=court_id,
        author=author,
        rating=rating,
        comment=(comment or "").strip(),
        created_at=_utc_now_iso(),
    )

    all_reviews = _load_all(config)
    all_reviews[court_id] = [review, *all_reviews.get(court_id, [])]
    _save_all(all_reviews, config)
    return review


def delete_review(court_id: str, review_id: str, config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> None:
    """Remove one review. Unknown courts or review ids are ignored."""
    all_reviews = _load_all(config)
    existing = all_reviews.get(court_id)
    if not existing:
        return

    index = next((i for i, r in enumerate(existing) if r.id == review_id), None)
    if index is None:
        return
    remaining = existing[:index] + existing[index + 1:]
    if remaining:
        all_reviews[court_id] = remaining
    else:
        del all_reviews[court_id]
    _save_all(all_reviews, config)


def average_rating(reviews: list[Review]) -> float | None:
    if not reviews:
        return None
    return sum(r.rating for r in reviews) / len(reviews)
