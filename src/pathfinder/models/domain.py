"""Domain models for waypoint routing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

# A location is the "'Name' at Address" string produced by a place lookup.
Location = str
Route = Tuple[Location, ...]


@dataclass(frozen=True, slots=True)
class Leg:
    """Directed pair of consecutive locations. A->B and B->A are different legs."""

    origin: Location
    destination: Location


@dataclass(frozen=True, slots=True)
class LegCost:
    distance: float
    duration: float


@dataclass(frozen=True, slots=True)
class RouteTotal:
    distance: float = 0.0
    duration: float = 0.0

    def __add__(self, other: LegCost | RouteTotal) -> RouteTotal:
        return RouteTotal(self.distance + other.distance, self.duration + other.duration)


@dataclass(slots=True)
class BestSoFar:
    """Running minimum for one optimisation criterion.

    Only a strictly smaller value replaces the current record, so the first
    route to reach a minimum keeps it.
    """

    route: Optional[Route] = None
    total: Optional[RouteTotal] = None
    value: float = math.inf

    def offer(self, route: Route, total: RouteTotal, value: float) -> bool:
        if value < self.value:
            self.route = route
            self.total = total
            self.value = value
            return True
        return False

    @property
    def is_empty(self) -> bool:
        return self.route is None


@dataclass(slots=True)
class RouteSelection:
    shortest_distance: BestSoFar
    shortest_time: BestSoFar
    routes_evaluated: int


@dataclass(frozen=True, slots=True)
class RankedRoute:
    route: Route
    total: RouteTotal


@dataclass(frozen=True, slots=True)
class RouteReport:
    """Outcome of a complete route-finding calculation."""

    shortest_distance: RankedRoute
    shortest_time: RankedRoute
    routes_evaluated: int
    oracle_calls: int
    cache_hits: int
