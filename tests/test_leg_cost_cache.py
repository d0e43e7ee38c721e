import threading
import time

import pytest

from src.pathfinder.models.domain import Leg, LegCost
from src.pathfinder.services.routing.cache import LegCostCache
from src.pathfinder.services.routing.errors import LookupFailure


class CountingOracle:
    def __init__(self, costs=None):
        self.costs = costs or {}
        self.calls = []

    def resolve_leg_cost(self, origin, destination):
        self.calls.append((origin, destination))
        return self.costs.get((origin, destination), LegCost(1.0, 1.0))


def test_second_lookup_is_served_from_cache():
    oracle = CountingOracle({("A", "B"): LegCost(4.0, 7.0)})
    cache = LegCostCache(oracle)

    assert cache.cost("A", "B") == LegCost(4.0, 7.0)
    assert cache.cost("A", "B") == LegCost(4.0, 7.0)
    assert oracle.calls == [("A", "B")]
    assert cache.misses == 1
    assert cache.hits == 1
    assert Leg("A", "B") in cache


def test_reverse_leg_is_a_different_entry():
    oracle = CountingOracle({("A", "B"): LegCost(1.0, 1.0), ("B", "A"): LegCost(9.0, 9.0)})
    cache = LegCostCache(oracle)

    assert cache.cost("A", "B").distance == 1.0
    assert cache.cost("B", "A").distance == 9.0
    assert len(oracle.calls) == 2


def test_keys_are_not_ambiguous_for_names_with_spaces():
    oracle = CountingOracle({("a b", "c"): LegCost(1.0, 1.0), ("a", "b c"): LegCost(2.0, 2.0)})
    cache = LegCostCache(oracle)

    assert cache.cost("a b", "c").distance == 1.0
    assert cache.cost("a", "b c").distance == 2.0
    assert len(oracle.calls) == 2


def test_failed_lookup_is_reraised_without_another_call():
    class FlakyOracle:
        calls = 0

        def resolve_leg_cost(self, origin, destination):
            self.calls += 1
            if self.calls == 1:
                raise LookupFailure("temporarily unavailable")
            return LegCost(2.0, 3.0)

    oracle = FlakyOracle()
    cache = LegCostCache(oracle)

    with pytest.raises(LookupFailure, match="temporarily unavailable"):
        cache.cost("A", "B")
    with pytest.raises(LookupFailure, match="temporarily unavailable"):
        cache.cost("A", "B")
    assert oracle.calls == 1
    assert cache.misses == 1

    # a new calculation starts with an empty cache and asks again
    assert LegCostCache(oracle).cost("A", "B") == LegCost(2.0, 3.0)
    assert oracle.calls == 2


def test_unexpected_oracle_error_becomes_lookup_failure():
    class BrokenOracle:
        def resolve_leg_cost(self, origin, destination):
            raise KeyError("rows")

    cache = LegCostCache(BrokenOracle())

    with pytest.raises(LookupFailure) as excinfo:
        cache.cost("A", "B")
    assert excinfo.value.origin == "A"
    assert excinfo.value.destination == "B"
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_concurrent_requests_share_one_in_flight_lookup():
    entered = threading.Event()
    release = threading.Event()

    class SlowOracle:
        calls = 0

        def resolve_leg_cost(self, origin, destination):
            self.calls += 1
            entered.set()
            release.wait(timeout=5)
            return LegCost(5.0, 6.0)

    oracle = SlowOracle()
    cache = LegCostCache(oracle)
    results = []

    def worker():
        results.append(cache.cost("A", "B"))

    threads = [threading.Thread(target=worker) for _ in range(5)]
    for thread in threads:
        thread.start()
    assert entered.wait(timeout=5)

    deadline = time.monotonic() + 5
    while cache.hits < 4 and time.monotonic() < deadline:
        time.sleep(0.01)
    release.set()
    for thread in threads:
        thread.join(timeout=5)

    assert oracle.calls == 1
    assert results == [LegCost(5.0, 6.0)] * 5
    assert cache.misses == 1
    assert cache.hits == 4


def test_waiters_receive_the_in_flight_failure():
    entered = threading.Event()
    release = threading.Event()

    class FailingOracle:
        def resolve_leg_cost(self, origin, destination):
            entered.set()
            release.wait(timeout=5)
            raise LookupFailure("no route")

    cache = LegCostCache(FailingOracle())
    errors = []

    def worker():
        try:
            cache.cost("A", "B")
        except LookupFailure as exc:
            errors.append(exc)

    first = threading.Thread(target=worker)
    first.start()
    assert entered.wait(timeout=5)
    second = threading.Thread(target=worker)
    second.start()

    deadline = time.monotonic() + 5
    while cache.hits < 1 and time.monotonic() < deadline:
        time.sleep(0.01)
    release.set()
    first.join(timeout=5)
    second.join(timeout=5)

    assert len(errors) == 2
