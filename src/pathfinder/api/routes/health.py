"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_maps_health_check():
    """Lazy import to avoid startup failures."""
    from ...services.routing.maps_client import check_health as maps_health_check
    return maps_health_check


@router.get("/health/maps", status_code=status.HTTP_200_OK)
def health_maps() -> dict:
    """Check that Google Maps accepts the configured key."""
    try:
        maps_health_check = _get_maps_health_check()
        return {"service": "google_maps", "healthy": maps_health_check()}
    except Exception as e:
        return {"service": "google_maps", "healthy": False, "error": str(e)}
