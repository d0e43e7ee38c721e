"""Serializers for route-finding reports."""

from __future__ import annotations

from ...models.domain import RankedRoute, RouteReport

UNIT_LABELS = {
    "mi": ("miles", "minutes"),
    "km": ("km", "minutes"),
}


def unit_labels(distance_unit: str) -> tuple[str, str]:
    return UNIT_LABELS.get(distance_unit, (distance_unit, "minutes"))


def format_total(value: float) -> str:
    """Two decimals at most, trailing zeros dropped (``12.5``, ``3``)."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _format_section(title: str, value: float, label: str, ranked: RankedRoute) -> list[str]:
    lines = [f"{title}: {format_total(value)} {label}"]
    lines.extend(f"{position}. {location}" for position, location in enumerate(ranked.route, start=1))
    return lines


def format_report(report: RouteReport, distance_label: str = "miles", time_label: str = "minutes") -> str:
    lines = _format_section(
        "Shortest Distance Route",
        report.shortest_distance.total.distance,
        distance_label,
        report.shortest_distance,
    )
    lines.append("")
    lines.extend(
        _format_section(
            "Shortest Time Route",
            report.shortest_time.total.duration,
            time_label,
            report.shortest_time,
        )
    )
    return "\n".join(lines) + "\n"


def _ranked_to_json(ranked: RankedRoute) -> dict:
    return {
        "route": list(ranked.route),
        "total_distance": ranked.total.distance,
        "total_time": ranked.total.duration,
    }


def report_to_json(report: RouteReport) -> dict:
    return {
        "shortest_distance": _ranked_to_json(report.shortest_distance),
        "shortest_time": _ranked_to_json(report.shortest_time),
        "routes_evaluated": report.routes_evaluated,
        "oracle_calls": report.oracle_calls,
        "cache_hits": report.cache_hits,
    }
