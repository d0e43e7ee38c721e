"""Waypoint board endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.places import AddWaypointRequest, WaypointBoardResponse
from ...services.waypoints import WaypointError, get_waypoint_board

router = APIRouter(prefix="/waypoints", tags=["waypoints"])


def _board_response(message: Optional[str] = None) -> WaypointBoardResponse:
    board = get_waypoint_board()
    return WaypointBoardResponse(groups=board.groups(), lines=board.describe(), message=message)


@router.get("", response_model=WaypointBoardResponse)
def list_waypoints() -> WaypointBoardResponse:
    return _board_response()


@router.post("", response_model=WaypointBoardResponse, status_code=status.HTTP_201_CREATED)
def add_waypoint(payload: AddWaypointRequest) -> WaypointBoardResponse:
    try:
        get_waypoint_board().add(payload.location, payload.index)
    except WaypointError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _board_response("Address added successfully.")


@router.delete("/{group_index}", response_model=WaypointBoardResponse)
def remove_waypoint(
    group_index: int,
    location: Optional[str] = Query(default=None, description="Location to remove from the group"),
) -> WaypointBoardResponse:
    try:
        get_waypoint_board().remove(group_index, location)
    except WaypointError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _board_response("Address removed successfully.")


@router.delete("", response_model=WaypointBoardResponse)
def clear_waypoints() -> WaypointBoardResponse:
    get_waypoint_board().clear()
    return _board_response()
