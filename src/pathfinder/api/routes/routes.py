"""Route-finding endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import RoutingRequest, RoutingResponse
from ...services.routing.errors import LookupFailure, PreconditionFailure, ServiceNotConfigured
from ...services.routing.service import optimize_groups, optimize_routes
from ...services.waypoints import get_waypoint_board

router = APIRouter(prefix="/routes", tags=["routes"])
logger = logging.getLogger(__name__)


def _run(action, *args) -> RoutingResponse:
    try:
        return action(*args)
    except PreconditionFailure as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ServiceNotConfigured as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except LookupFailure as exc:
        logger.warning(f"Route calculation aborted: {exc}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error finding best routes: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to find best routes: {str(exc)}",
        ) from exc


@router.post("/best", response_model=RoutingResponse, status_code=status.HTTP_200_OK)
def best_routes(payload: RoutingRequest) -> RoutingResponse:
    return _run(optimize_routes, payload)


@router.post("/waypoints", response_model=RoutingResponse, status_code=status.HTTP_200_OK)
def best_routes_for_waypoints() -> RoutingResponse:
    """Calculate the shortest routes over the current waypoint board."""
    return _run(optimize_groups, get_waypoint_board().groups())
