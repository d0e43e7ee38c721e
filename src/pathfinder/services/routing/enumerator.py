"""Candidate route enumeration over waypoint groups."""

from __future__ import annotations

import itertools
import math
from typing import Iterator, Sequence

from ...models.domain import Location, Route


class RouteEnumerator:
    """Lazy, restartable Cartesian product of waypoint groups.

    Routes are produced with the first group as the most significant position,
    i.e. the last group advances fastest. Iterating twice yields the same
    routes in the same order. An empty group yields no routes at all.
    """

    def __init__(self, groups: Sequence[Sequence[Location]]) -> None:
        self._groups: tuple[tuple[Location, ...], ...] = tuple(tuple(group) for group in groups)

    @property
    def group_count(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[Route]:
        return itertools.product(*self._groups)

    def __len__(self) -> int:
        return math.prod(len(group) for group in self._groups)


def count_routes(groups: Sequence[Sequence[Location]]) -> int:
    return math.prod(len(group) for group in groups)
