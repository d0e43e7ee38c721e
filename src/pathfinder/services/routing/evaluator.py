"""Route total computation."""

from __future__ import annotations

from ...models.domain import Route, RouteTotal
from .cache import LegCostCache


def evaluate_route(route: Route, cache: LegCostCache) -> RouteTotal:
    """Sum the cost of every consecutive leg in ``route``.

    Routes with fewer than two locations have no legs and cost nothing. A
    failed leg lookup propagates unchanged.
    """
    total = RouteTotal()
    for origin, destination in zip(route, route[1:]):
        total = total + cache.cost(origin, destination)
    return total
