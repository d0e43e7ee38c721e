import pytest

from src.pathfinder.models.domain import RouteTotal
from src.pathfinder.services.routing.errors import LookupFailure
from src.pathfinder.services.routing.selector import select_best_routes


TOTALS = {
    ("A", "C"): RouteTotal(5.0, 10.0),
    ("A", "D"): RouteTotal(3.0, 20.0),
    ("B", "C"): RouteTotal(8.0, 5.0),
    ("B", "D"): RouteTotal(3.0, 5.0),
}


def _evaluate(route):
    return TOTALS[route]


@pytest.mark.parametrize("max_workers", [1, 3])
def test_tracks_each_criterion_independently(max_workers):
    selection = select_best_routes(list(TOTALS), _evaluate, max_workers=max_workers, window=2)

    assert selection.routes_evaluated == 4
    assert selection.shortest_distance.route == ("A", "D")
    assert selection.shortest_distance.value == 3.0
    assert selection.shortest_time.route == ("B", "C")
    assert selection.shortest_time.value == 5.0
    assert selection.shortest_time.total == RouteTotal(8.0, 5.0)


@pytest.mark.parametrize("max_workers", [1, 4])
def test_ties_keep_the_first_route_seen(max_workers):
    routes = [("R", str(i)) for i in range(10)]

    selection = select_best_routes(routes, lambda route: RouteTotal(1.0, 2.0), max_workers=max_workers, window=3)

    assert selection.shortest_distance.route == ("R", "0")
    assert selection.shortest_time.route == ("R", "0")


def test_no_routes_leaves_records_empty():
    selection = select_best_routes([], _evaluate)

    assert selection.routes_evaluated == 0
    assert selection.shortest_distance.is_empty
    assert selection.shortest_time.is_empty


def test_consumes_routes_lazily():
    consumed = []

    def routes():
        for key in TOTALS:
            consumed.append(key)
            yield key

    def evaluate(route):
        # only the current route has been pulled from the generator
        assert consumed[-1] == route
        return TOTALS[route]

    select_best_routes(routes(), evaluate)

    assert consumed == list(TOTALS)


@pytest.mark.parametrize("max_workers", [1, 2])
def test_evaluation_failure_aborts_selection(max_workers):
    def evaluate(route):
        if route == ("B", "C"):
            raise LookupFailure("no route")
        return TOTALS[route]

    with pytest.raises(LookupFailure):
        select_best_routes(list(TOTALS), evaluate, max_workers=max_workers)
