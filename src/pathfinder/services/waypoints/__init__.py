"""Waypoint board helpers."""

from .board import WaypointBoard, WaypointError, get_waypoint_board

__all__ = ["WaypointBoard", "WaypointError", "get_waypoint_board"]
