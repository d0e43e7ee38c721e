"""Memoisation of leg costs for a single route-finding calculation."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Protocol

from ...models.domain import Leg, LegCost, Location
from .errors import LookupFailure

logger = logging.getLogger(__name__)


class CostOracle(Protocol):
    def resolve_leg_cost(self, origin: Location, destination: Location) -> LegCost:
        ...


class LegCostCache:
    """Resolves each distinct ordered leg through the oracle at most once.

    Safe to share between evaluator threads: the first requester of a leg
    performs the lookup while later requesters block on the same future.
    A failed lookup is remembered as a failure, never as a cost, and
    re-raised to every later requester of that leg.
    """

    def __init__(self, oracle: CostOracle) -> None:
        self._oracle = oracle
        self._lock = threading.Lock()
        self._entries: dict[Leg, Future] = {}
        self._hits = 0
        self._misses = 0

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        """Number of oracle calls issued."""
        return self._misses

    def __contains__(self, leg: Leg) -> bool:
        with self._lock:
            return leg in self._entries

    def cost(self, origin: Location, destination: Location) -> LegCost:
        leg = Leg(origin, destination)
        with self._lock:
            future = self._entries.get(leg)
            owner = future is None
            if owner:
                future = Future()
                self._entries[leg] = future
                self._misses += 1
            else:
                self._hits += 1

        if not owner:
            return future.result()

        try:
            logger.debug(f"Resolving leg cost: {origin!r} -> {destination!r}")
            leg_cost = self._oracle.resolve_leg_cost(origin, destination)
        except Exception as exc:
            failure = exc if isinstance(exc, LookupFailure) else LookupFailure(
                f"Could not resolve leg {origin!r} -> {destination!r}: {exc}",
                origin=origin,
                destination=destination,
            )
            # The failed future stays in place: later requesters in this
            # calculation re-raise it without another oracle call.
            future.set_exception(failure)
            if failure is exc:
                raise
            raise failure from exc

        future.set_result(leg_cost)
        return leg_cost
