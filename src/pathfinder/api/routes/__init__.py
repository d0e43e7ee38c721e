"""Route group exports."""

from . import health, places, routes, waypoints

__all__ = ["health", "places", "routes", "waypoints"]
