"""HTTP client for the Google Maps web services used by the route planner."""

from __future__ import annotations

import logging
import math
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import httpx

from ...config import settings
from ...models.domain import LegCost, Location
from .errors import LookupFailure, PlaceNotFound

METERS_TO_MILES = 0.000621371192
PLACE_SEPARATOR = "' at "
# Google statuses worth retrying; every other non-OK status is final.
RETRYABLE_STATUSES = frozenset({"OVER_QUERY_LIMIT", "UNKNOWN_ERROR"})

logger = logging.getLogger(__name__)


class _RetryableStatus(Exception):
    pass


def format_place(name: str, address: str) -> Location:
    """Render a place the way locations are stored in waypoint groups."""
    return f"'{name}' at {address}".strip()


def extract_address(location: Location) -> str:
    """Return the address part of a ``'Name' at Address`` location string."""
    index = location.find(PLACE_SEPARATOR)
    if index == -1:
        return location
    return location[index + len(PLACE_SEPARATOR):]


def _round_half_up(value: float, places: str) -> Decimal:
    return Decimal(value).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def meters_to_unit(meters: float, unit: str) -> float:
    """Convert meters and round to two decimals, halves rounding away from zero."""
    value = meters / 1000.0 if unit == "km" else meters * METERS_TO_MILES
    return float(_round_half_up(value, "0.01"))


def seconds_to_minutes(seconds: float) -> int:
    """Whole minutes, with an exact half minute rounding up."""
    return math.floor(seconds / 60 + 0.5)


class GoogleMapsClient:
    """Cost oracle and place search backed by Google Maps.

    Every request opens its own short-lived ``httpx.Client`` so the instance
    can be shared by route evaluator threads.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        distance_unit: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.google_maps_api_key
        if not self.api_key:
            raise ValueError("Google Maps API key is not configured.")
        self.base_url = (base_url or settings.google_maps_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.maps_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.maps_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.maps_backoff_seconds
        self.distance_unit = distance_unit or settings.distance_unit
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 10.0)),
            transport=self._transport,
        )

    def _get_json(self, endpoint: str, params: dict[str, Any]) -> dict:
        """GET a Maps endpoint, retrying transient failures, and return the OK payload."""
        url = f"{self.base_url}/{endpoint}/json"
        query = {**params, "key": self.api_key}

        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(url, params=query)
                    response.raise_for_status()
                    data = response.json()
                    status = data.get("status")
                    if status in RETRYABLE_STATUSES:
                        raise _RetryableStatus(status)
                    if status not in ("OK", "ZERO_RESULTS"):
                        message = data.get("error_message") or status or "missing status"
                        raise LookupFailure(f"Google Maps {endpoint} request failed: {message}")
                    return data
                except httpx.HTTPStatusError as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise LookupFailure(
                            f"Google Maps {endpoint} returned HTTP {e.response.status_code}"
                        ) from e
                    wait_time = self.backoff_seconds * attempt
                    logger.warning(
                        f"Google Maps {endpoint} returned HTTP {e.response.status_code}, "
                        f"retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries})"
                    )
                    time.sleep(wait_time)
                except _RetryableStatus as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise LookupFailure(
                            f"Google Maps {endpoint} still reporting {e} after {self.max_retries} retries"
                        ) from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.warning(f"Google Maps {endpoint} returned {e}, retrying in {wait_time:.1f}s")
                    time.sleep(wait_time)
                except httpx.TimeoutException as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"Google Maps request timed out after {self.max_retries} retries: {e}")
                        raise LookupFailure(f"Google Maps {endpoint} request timed out") from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"Google Maps timeout, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries})")
                    time.sleep(wait_time)
                except (httpx.TransportError, OSError) as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise LookupFailure(
                            f"Failed to connect to Google Maps at {self.base_url}: {e}"
                        ) from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"Google Maps network error, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries}): {e}")
                    time.sleep(wait_time)
                except ValueError as e:
                    raise LookupFailure(f"Google Maps {endpoint} returned an invalid response: {e}") from e
        finally:
            client.close()

    def resolve_leg_cost(self, origin: Location, destination: Location) -> LegCost:
        """Driving distance and duration from ``origin`` to ``destination``.

        Distance is expressed in ``distance_unit`` rounded to two decimals and
        duration in whole minutes.
        """
        data = self._get_json(
            "distancematrix",
            {"origins": extract_address(origin), "destinations": extract_address(destination)},
        )
        try:
            element = data["rows"][0]["elements"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise LookupFailure(
                f"Distance Matrix response has no element for {origin!r} -> {destination!r}",
                origin=origin,
                destination=destination,
            ) from e

        element_status = element.get("status")
        if element_status != "OK":
            raise LookupFailure(
                f"No route from {origin!r} to {destination!r} ({element_status})",
                origin=origin,
                destination=destination,
            )
        try:
            meters = element["distance"]["value"]
            seconds = element["duration"]["value"]
        except (KeyError, TypeError) as e:
            raise LookupFailure(
                f"Distance Matrix element for {origin!r} -> {destination!r} is missing distance/duration",
                origin=origin,
                destination=destination,
            ) from e

        return LegCost(
            distance=meters_to_unit(meters, self.distance_unit),
            duration=seconds_to_minutes(seconds),
        )

    def search_place(self, query: str) -> Location:
        """Find a single place from free text."""
        data = self._get_json(
            "place/findplacefromtext",
            {"input": query, "inputtype": "textquery", "fields": "formatted_address,name"},
        )
        candidates = data.get("candidates") or []
        if not candidates:
            raise PlaceNotFound(f"No place found for {query!r}")
        candidate = candidates[0]
        return format_place(candidate.get("name", ""), candidate.get("formatted_address", ""))

    def geocode(self, reference: str) -> str:
        """Return ``"lat,lng"`` for a reference location such as a city or ZIP code."""
        data = self._get_json(
            "geocode",
            {"address": reference, "region": settings.google_maps_region},
        )
        results = data.get("results") or []
        if not results:
            raise PlaceNotFound(f"Could not geocode {reference!r}")
        try:
            coords = results[0]["geometry"]["location"]
            return f"{coords['lat']},{coords['lng']}"
        except (KeyError, TypeError) as e:
            raise LookupFailure(f"Geocoding result for {reference!r} has no coordinates") from e

    def nearby_search(self, keyword: str, coordinates: str, radius: int | None = None) -> list[Location]:
        """Places matching ``keyword`` around ``coordinates`` (from :meth:`geocode`)."""
        data = self._get_json(
            "place/nearbysearch",
            {
                "keyword": keyword,
                "location": coordinates,
                "radius": radius or settings.nearby_search_radius_meters,
            },
        )
        return [
            format_place(result.get("name", ""), result.get("vicinity", ""))
            for result in data.get("results") or []
        ]


def check_health(api_key: str | None = None) -> bool:
    """Check that the Maps API accepts our key with a minimal geocode call."""
    key = api_key or settings.google_maps_api_key
    if not key:
        return False
    try:
        url = f"{settings.google_maps_base_url.rstrip('/')}/geocode/json"
        response = httpx.get(url, params={"address": "New York", "key": key}, timeout=5.0)
        response.raise_for_status()
        return response.json().get("status") == "OK"
    except httpx.HTTPError:
        return False
    except ValueError:
        return False
