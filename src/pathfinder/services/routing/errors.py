"""Failures raised while finding the best routes."""

from __future__ import annotations


class PreconditionFailure(ValueError):
    """Raised before enumeration when the waypoint groups cannot form a route."""


class LookupFailure(RuntimeError):
    """Raised when the cost of a leg cannot be resolved."""

    def __init__(self, message: str, origin: str | None = None, destination: str | None = None) -> None:
        super().__init__(message)
        self.origin = origin
        self.destination = destination


class ServiceNotConfigured(RuntimeError):
    """Raised when the mapping provider cannot be used with the current settings."""


class PlaceNotFound(LookupFailure):
    """Raised when a place search or geocode returns no match."""
