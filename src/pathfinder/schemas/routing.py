"""Route-finding request/response schemas."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class RoutingRequest(BaseModel):
    groups: List[List[str]] = Field(
        ...,
        description="Ordered waypoint groups. One location is chosen from each group, in group order.",
    )


class RankedRouteModel(BaseModel):
    route: List[str]
    total_distance: float
    total_time: float


class RoutingResponse(BaseModel):
    shortest_distance: RankedRouteModel
    shortest_time: RankedRouteModel
    routes_evaluated: int
    oracle_calls: int
    cache_hits: int
    distance_unit: Literal["mi", "km"]
    report: str
