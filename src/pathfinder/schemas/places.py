"""Place search and waypoint board schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class PlaceResponse(BaseModel):
    location: str


class GeocodeResponse(BaseModel):
    reference: str
    coordinates: str


class NearbyResponse(BaseModel):
    reference: str
    coordinates: str
    locations: List[str]


class AddWaypointRequest(BaseModel):
    location: str = Field(..., min_length=1)
    index: int = Field(
        default=0,
        ge=-1,
        description="-1 starts a new first group, the group count appends a new last group, "
        "any other index adds the location to that existing group.",
    )


class WaypointBoardResponse(BaseModel):
    groups: List[List[str]]
    lines: List[str]
    message: Optional[str] = None
