from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..catalog.models import Court
from ..storage.models import Review
from .hours import OpenState

ALL = "all"


class TypeFilter(str, Enum):
    all = "all"
    indoor = "indoor"
    outdoor = "outdoor"


class FilterCriteria(BaseModel):
    search: str = ""
    type_filter: TypeFilter = TypeFilter.all
    area_filter: str = Field(default=ALL, description='Exact area name, or "all"')
    surface_filter: str = Field(default=ALL, description='Exact surface type, or "all"')
    show_favorites_only: bool = False
    open_now: bool = False
    min_courts: int = Field(default=0, ge=0)


def default_filters() -> FilterCriteria:
    return FilterCriteria()


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class CourtWithDistance(Court):
    distance: float | None = Field(default=None, description="Kilometres from the user")


class DiscoverRequest(BaseModel):
    filters: FilterCriteria = Field(default_factory=FilterCriteria)
    location: Coordinates | None = None
    sort_by_distance: bool = False
    now_minutes: int | None = Field(
        default=None, ge=0, lt=1440,
        description="Minutes since midnight for the open-now check; defaults to the server clock",
    )


class DiscoveredCourt(BaseModel):
    court: CourtWithDistance
    open_state: OpenState
    is_favorite: bool
    average_rating: float | None = None
    review_count: int = 0
    distance_label: str | None = None
    rating_label: str | None = None


class DiscoverResponse(BaseModel):
    courts: list[DiscoveredCourt]
    total: int


class CourtDetailResponse(BaseModel):
    court: Court
    open_state: OpenState
    is_favorite: bool
    reviews: list[Review]
    average_rating: float | None
    directions_url: str
    share_text: str
