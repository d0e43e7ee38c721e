"""In-memory ordered waypoint groups selected by the user."""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import List, Optional

from ...models.domain import Location

logger = logging.getLogger(__name__)

BEGINNING = -1


class WaypointError(ValueError):
    """Raised for an invalid add/remove on the waypoint board."""


class WaypointBoard:
    """Ordered list of waypoint groups; each group holds unique locations.

    Group order is the visiting order. Groups are never left empty: removing
    the last location of a group removes the group.
    """

    def __init__(self) -> None:
        self._groups: List[List[Location]] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._groups)

    def groups(self) -> List[List[Location]]:
        with self._lock:
            return [list(group) for group in self._groups]

    def add(self, location: Location, index: int = 0) -> None:
        """Add ``location`` at ``index``.

        ``-1`` inserts a new first group and ``len(self)`` appends a new last
        group; any index in between extends that existing group.
        """
        location = location.strip()
        if not location:
            raise WaypointError("Location must not be empty.")
        with self._lock:
            count = len(self._groups)
            if index == BEGINNING:
                self._groups.insert(0, [location])
            elif index == count:
                self._groups.append([location])
            elif 0 <= index < count:
                group = self._groups[index]
                if location in group:
                    raise WaypointError("Address is a duplicate. Not added.")
                group.append(location)
            else:
                raise WaypointError(f"Waypoint index {index} is out of range (-1..{count}).")
        logger.info(f"Added {location!r} at waypoint index {index}")

    def remove(self, group_index: int, location: Optional[Location] = None) -> None:
        """Remove a location from a group, dropping the group once it is empty."""
        with self._lock:
            if not 0 <= group_index < len(self._groups):
                raise WaypointError(f"Waypoint group {group_index} does not exist.")
            group = self._groups[group_index]
            if len(group) == 1 and (location is None or location == group[0]):
                del self._groups[group_index]
            elif location is None:
                raise WaypointError(
                    f"Waypoint group {group_index} has {len(group)} locations; choose one to remove."
                )
            elif location not in group:
                raise WaypointError(f"{location!r} is not in waypoint group {group_index}.")
            else:
                group.remove(location)
                if not group:
                    del self._groups[group_index]
        logger.info(f"Removed {location or 'group'!r} from waypoint group {group_index}")

    def clear(self) -> None:
        with self._lock:
            self._groups.clear()

    def describe(self) -> List[str]:
        with self._lock:
            if not self._groups:
                return ["There are no current selections."]
            return [f"{index}. {'; '.join(group)}" for index, group in enumerate(self._groups)]


@lru_cache(maxsize=1)
def get_waypoint_board() -> WaypointBoard:
    return WaypointBoard()
