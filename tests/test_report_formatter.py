from src.pathfinder.models.domain import RankedRoute, RouteReport, RouteTotal
from src.pathfinder.services.outputs.report_formatter import (
    format_report,
    format_total,
    report_to_json,
    unit_labels,
)


def _report() -> RouteReport:
    return RouteReport(
        shortest_distance=RankedRoute(("'Home' at 1 Main St", "'Cafe' at 9 Oak Ave"), RouteTotal(12.5, 40.0)),
        shortest_time=RankedRoute(("'Home' at 1 Main St", "'Diner' at 3 Elm Rd"), RouteTotal(14.25, 31.0)),
        routes_evaluated=2,
        oracle_calls=2,
        cache_hits=0,
    )


def test_format_report_lists_both_routes():
    text = format_report(_report())

    assert text == (
        "Shortest Distance Route: 12.5 miles\n"
        "1. 'Home' at 1 Main St\n"
        "2. 'Cafe' at 9 Oak Ave\n"
        "\n"
        "Shortest Time Route: 31 minutes\n"
        "1. 'Home' at 1 Main St\n"
        "2. 'Diner' at 3 Elm Rd\n"
    )


def test_format_report_uses_given_labels():
    text = format_report(_report(), *unit_labels("km"))

    assert text.startswith("Shortest Distance Route: 12.5 km\n")


def test_format_total_trims_trailing_zeros():
    assert format_total(3.0) == "3"
    assert format_total(0.0) == "0"
    assert format_total(10.0) == "10"
    assert format_total(2.345) in {"2.35", "2.34"}
    assert format_total(0.1 + 0.2) == "0.3"


def test_report_to_json():
    payload = report_to_json(_report())

    assert payload["shortest_distance"] == {
        "route": ["'Home' at 1 Main St", "'Cafe' at 9 Oak Ave"],
        "total_distance": 12.5,
        "total_time": 40.0,
    }
    assert payload["shortest_time"]["total_time"] == 31.0
    assert payload["routes_evaluated"] == 2
    assert payload["oracle_calls"] == 2
    assert payload["cache_hits"] == 0
