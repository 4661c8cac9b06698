from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Court(BaseModel):
    """One facility record from the static dataset."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str
    address: str = ""
    area: str = ""
    coordinates: LatLng
    hours: str = ""
    number_of_courts: int = Field(default=0, ge=0, alias="numberOfCourts")
    indoor: bool = False
    surface_type: str = Field(default="", alias="surfaceType")
    contact: str | None = None
    description: str = ""
    image: str = ""
    booking_url: str | None = Field(default=None, alias="bookingUrl")
    place_id: str | None = Field(default=None, alias="placeId")
