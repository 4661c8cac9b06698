from __future__ import annotations

import math

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

MIN_RATING = 1
MAX_RATING = 5


def clamp_rating(value: float | int | str) -> int:
    """Round to the nearest whole star (halves round up), then clamp to 1-5."""
    if isinstance(value, bool):
        raise ValueError("rating must be a number")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            value = float(value)
    # Whole numbers of any size clamp without a float round trip.
    if isinstance(value, int):
        rounded = value
    else:
        rounded = math.floor(float(value) + 0.5)
    return min(MAX_RATING, max(MIN_RATING, rounded))


class Review(BaseModel):
    """A single device-local review. Stored with camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    court_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("courtId", "itemId", "court_id"),
        serialization_alias="courtId",
    )
    author: str = Field(..., min_length=1)
    rating: int
    comment: str = ""
    created_at: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )

    @field_validator("rating", mode="before")
    @classmethod
    def _coerce_rating(cls, v):
        try:
            return clamp_rating(v)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"rating is not a number: {v!r}") from exc

    @field_validator("comment", mode="before")
    @classmethod
    def _none_comment(cls, v):
        return "" if v is None else v


class ReviewRequest(BaseModel):
    author: str = Field(..., min_length=1, max_length=100)
    rating: float = Field(..., description="Star rating; rounded and clamped to 1-5")
    comment: str = Field(default="", max_length=2000)

    @field_validator("author", "comment", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v


class ReviewListResponse(BaseModel):
    reviews: list[Review]
    average_rating: float | None
    count: int


class FavoritesResponse(BaseModel):
    favorites: list[str]


class ToggleFavoriteResponse(BaseModel):
    court_id: str
    is_favorite: bool
    favorites: list[str]
