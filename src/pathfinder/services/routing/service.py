"""Route-finding orchestration service."""

from __future__ import annotations

import logging
from functools import partial
from typing import Sequence

from ...config import settings
from ...models.domain import Location, RankedRoute, RouteReport
from ...schemas.routing import RankedRouteModel, RoutingRequest, RoutingResponse
from ..outputs.report_formatter import format_report, report_to_json, unit_labels
from .cache import CostOracle, LegCostCache
from .enumerator import RouteEnumerator, count_routes
from .errors import PreconditionFailure, ServiceNotConfigured
from .evaluator import evaluate_route
from .maps_client import GoogleMapsClient
from .selector import select_best_routes

logger = logging.getLogger(__name__)


def validate_groups(
    groups: Sequence[Sequence[Location]],
    max_combinations: int | None = None,
) -> list[list[Location]]:
    """Check that ``groups`` can form at least one route of two or more stops."""
    if len(groups) == 0:
        raise PreconditionFailure("There are no selected places to generate routes for.")
    if len(groups) < 2:
        raise PreconditionFailure("There are not enough places to generate routes for.")
    for index, group in enumerate(groups):
        if len(group) == 0:
            raise PreconditionFailure(f"Waypoint group {index} is empty.")

    limit = max_combinations if max_combinations is not None else settings.max_route_combinations
    combinations = count_routes(groups)
    if combinations > limit:
        raise PreconditionFailure(
            f"{combinations} candidate routes exceed the limit of {limit}. "
            "Remove some locations or groups and try again."
        )
    return [list(group) for group in groups]


def find_best_routes(
    groups: Sequence[Sequence[Location]],
    oracle: CostOracle,
    *,
    max_workers: int | None = None,
    window: int | None = None,
    max_combinations: int | None = None,
) -> RouteReport:
    """Choose one location per group minimising total distance and, separately, total time.

    Raises PreconditionFailure before any oracle call when fewer than two
    groups are supplied or a group is empty. Any LookupFailure aborts the
    calculation; no partial result is returned.
    """
    checked = validate_groups(groups, max_combinations)
    enumerator = RouteEnumerator(checked)
    cache = LegCostCache(oracle)
    workers = max_workers if max_workers is not None else settings.max_parallel_requests

    logger.info(
        f"Finding best routes over {enumerator.group_count} groups "
        f"({len(enumerator)} combinations, {workers} worker(s))"
    )
    selection = select_best_routes(
        enumerator,
        partial(evaluate_route, cache=cache),
        max_workers=workers,
        window=window or settings.evaluation_window,
    )

    best_distance = selection.shortest_distance
    best_time = selection.shortest_time
    if best_distance.is_empty or best_time.is_empty:
        # validate_groups guarantees at least one route
        raise PreconditionFailure("No candidate routes could be formed from the waypoint groups.")

    report = RouteReport(
        shortest_distance=RankedRoute(best_distance.route, best_distance.total),
        shortest_time=RankedRoute(best_time.route, best_time.total),
        routes_evaluated=selection.routes_evaluated,
        oracle_calls=cache.misses,
        cache_hits=cache.hits,
    )
    logger.info(
        f"Evaluated {report.routes_evaluated} routes with {report.oracle_calls} oracle calls "
        f"and {report.cache_hits} cache hits; shortest distance {best_distance.value}, "
        f"shortest time {best_time.value}"
    )
    return report


def _build_oracle() -> GoogleMapsClient:
    try:
        return GoogleMapsClient()
    except ValueError as e:
        logger.error(f"Google Maps client initialization failed: {e}")
        raise ServiceNotConfigured(
            "Google Maps is not configured. Please check the PATHFINDER_GOOGLE_MAPS_API_KEY setting."
        ) from e


def _to_response(report: RouteReport) -> RoutingResponse:
    distance_label, time_label = unit_labels(settings.distance_unit)
    payload = report_to_json(report)
    return RoutingResponse(
        shortest_distance=RankedRouteModel(**payload["shortest_distance"]),
        shortest_time=RankedRouteModel(**payload["shortest_time"]),
        routes_evaluated=payload["routes_evaluated"],
        oracle_calls=payload["oracle_calls"],
        cache_hits=payload["cache_hits"],
        distance_unit=settings.distance_unit,
        report=format_report(report, distance_label, time_label),
    )


def optimize_groups(groups: Sequence[Sequence[Location]]) -> RoutingResponse:
    # Reject bad input before requiring a configured provider.
    validate_groups(groups)
    oracle = _build_oracle()
    return _to_response(find_best_routes(groups, oracle))


def optimize_routes(payload: RoutingRequest) -> RoutingResponse:
    return optimize_groups(payload.groups)
