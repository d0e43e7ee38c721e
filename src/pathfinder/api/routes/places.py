"""Place search endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.places import GeocodeResponse, NearbyResponse, PlaceResponse
from ...services.routing.errors import LookupFailure, PlaceNotFound
from ...services.routing.maps_client import GoogleMapsClient

router = APIRouter(prefix="/places", tags=["places"])
logger = logging.getLogger(__name__)

INVALID_LOCATION = "Invalid location, please try again."


def _client() -> GoogleMapsClient:
    try:
        return GoogleMapsClient()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


def _bad_gateway(action: str, exc: LookupFailure) -> HTTPException:
    logger.warning(f"{action} failed: {exc}")
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


@router.get("/search", response_model=PlaceResponse)
def search_place(query: str = Query(..., min_length=1, description="Place to look up")) -> PlaceResponse:
    try:
        return PlaceResponse(location=_client().search_place(query))
    except PlaceNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except LookupFailure as exc:
        raise _bad_gateway(f"Place search for {query!r}", exc) from exc


@router.get("/geocode", response_model=GeocodeResponse)
def geocode(
    reference: str = Query(..., min_length=1, description="City name, ZIP code or address"),
) -> GeocodeResponse:
    try:
        return GeocodeResponse(reference=reference, coordinates=_client().geocode(reference))
    except PlaceNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=INVALID_LOCATION) from exc
    except LookupFailure as exc:
        raise _bad_gateway(f"Geocoding {reference!r}", exc) from exc


@router.get("/nearby", response_model=NearbyResponse)
def nearby(
    keyword: str = Query(..., min_length=1, description="Place to search for"),
    reference: str = Query(..., min_length=1, description="Reference location to search around"),
) -> NearbyResponse:
    client = _client()
    try:
        coordinates = client.geocode(reference)
        locations = client.nearby_search(keyword, coordinates)
    except PlaceNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=INVALID_LOCATION) from exc
    except LookupFailure as exc:
        raise _bad_gateway(f"Nearby search for {keyword!r}", exc) from exc
    return NearbyResponse(reference=reference, coordinates=coordinates, locations=locations)
