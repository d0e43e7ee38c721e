import math

from src.pathfinder.services.routing.enumerator import RouteEnumerator, count_routes


def test_enumerates_full_product_in_group_order():
    groups = [["A", "B"], ["C", "D", "E"], ["F"]]
    routes = list(RouteEnumerator(groups))

    assert len(routes) == math.prod(len(group) for group in groups) == 6
    assert len(set(routes)) == len(routes)
    assert all(len(route) == len(groups) for route in routes)
    for route in routes:
        for location, group in zip(route, groups):
            assert location in group


def test_last_group_advances_fastest():
    routes = list(RouteEnumerator([["A", "B"], ["C", "D"]]))

    assert routes == [("A", "C"), ("A", "D"), ("B", "C"), ("B", "D")]


def test_enumeration_is_restartable():
    enumerator = RouteEnumerator([["A", "B"], ["C"], ["D", "E"]])

    assert list(enumerator) == list(enumerator)
    assert len(enumerator) == 4


def test_empty_group_yields_no_routes():
    enumerator = RouteEnumerator([["A", "B"], [], ["C"]])

    assert list(enumerator) == []
    assert len(enumerator) == 0
    assert count_routes([["A"], []]) == 0


def test_enumerator_does_not_alias_caller_groups():
    groups = [["A"], ["B"]]
    enumerator = RouteEnumerator(groups)
    groups[1].append("C")

    assert list(enumerator) == [("A", "B")]
