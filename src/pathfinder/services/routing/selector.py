"""Single-pass selection of the shortest-distance and shortest-time routes."""

from __future__ import annotations

import itertools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable

from ...models.domain import BestSoFar, Route, RouteSelection, RouteTotal

logger = logging.getLogger(__name__)

DEFAULT_EVALUATION_WINDOW = 64


def _record(selection: RouteSelection, route: Route, total: RouteTotal) -> None:
    selection.routes_evaluated += 1
    selection.shortest_distance.offer(route, total, total.distance)
    selection.shortest_time.offer(route, total, total.duration)


def select_best_routes(
    routes: Iterable[Route],
    evaluate: Callable[[Route], RouteTotal],
    *,
    max_workers: int = 1,
    window: int = DEFAULT_EVALUATION_WINDOW,
) -> RouteSelection:
    """Stream ``routes`` through ``evaluate`` and keep both running minima.

    With ``max_workers > 1`` routes are evaluated on a thread pool, at most
    ``window`` at a time. Totals are consumed in enumeration order either way,
    so ties resolve to the earliest route regardless of completion order. Any
    evaluation failure aborts the whole selection.
    """
    selection = RouteSelection(
        shortest_distance=BestSoFar(),
        shortest_time=BestSoFar(),
        routes_evaluated=0,
    )

    if max_workers <= 1:
        for route in routes:
            _record(selection, route, evaluate(route))
        return selection

    iterator = iter(routes)
    executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="route-eval")
    try:
        while True:
            batch = list(itertools.islice(iterator, max(1, window)))
            if not batch:
                break
            for route, total in zip(batch, executor.map(evaluate, batch)):
                _record(selection, route, total)
            logger.debug(f"Evaluated {selection.routes_evaluated} routes so far")
    finally:
        executor.shutdown(wait=True, cancel_futures=True)
    return selection
