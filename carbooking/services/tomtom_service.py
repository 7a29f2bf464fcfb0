"""
TomTom adapter: fuzzy place search and car routing.

Failures never propagate. Search degrades to an empty list and routing to
None, with the provider error logged.
"""
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Optional
from urllib.parse import quote

import requests
from flask import current_app

logger = logging.getLogger(__name__)

SEARCH_BASE_URL = "https://api.tomtom.com/search/2"
ROUTING_BASE_URL = "https://api.tomtom.com/routing/1"
METERS_PER_MILE = 1609.344
MIN_QUERY_LENGTH = 2


def _round1(value: float) -> float:
    # half-up, so 2.25 -> 2.3
    return math.floor(value * 10 + 0.5) / 10


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'}"


def format_duration(seconds) -> str:
    """3660 -> '1 hour 1 min', 7200 -> '2 hours', 300 -> '5 mins'."""
    seconds = int(seconds or 0)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours == 0:
        return _plural(minutes, "min")
    if minutes == 0:
        return _plural(hours, "hour")
    return f"{_plural(hours, 'hour')} {_plural(minutes, 'min')}"


def format_full_address(result: dict) -> str:
    address = result.get("address") or {}
    poi_name = (result.get("poi") or {}).get("name")
    parts = []
    if poi_name:
        parts.append(poi_name)

    freeform = address.get("freeformAddress")
    if freeform:
        if freeform not in parts:
            parts.append(freeform)
    else:
        pieces = [
            address.get(k)
            for k in ("streetNumber", "streetName", "municipality", "countrySubdivision", "country")
            if address.get(k)
        ]
        if pieces:
            parts.append(", ".join(pieces))

    return " - ".join(parts) or "Unknown Location"


def to_location(result: dict) -> dict:
    address = result.get("address") or {}
    poi = result.get("poi") or {}
    categories = poi.get("categories") or []
    return {
        "id": result.get("id"),
        "name": poi.get("name") or address.get("localName") or address.get("municipality") or "Unknown",
        "address": address.get("freeformAddress") or "",
        "fullAddress": format_full_address(result),
        "position": result.get("position"),
        "type": result.get("type"),
        "category": categories[0] if categories else "",
        "country": address.get("country"),
        "countryCode": address.get("countryCode"),
        "municipality": address.get("municipality"),
        "freeformAddress": address.get("freeformAddress"),
    }


def to_route_info(summary: dict) -> dict:
    meters = summary.get("lengthInMeters") or 0
    travel = summary.get("travelTimeInSeconds") or 0
    return {
        "distanceMeters": meters,
        "distanceKm": _round1(meters / 1000),
        "distanceMiles": _round1(meters / METERS_PER_MILE),
        "durationSeconds": travel,
        "durationFormatted": format_duration(travel),
        "trafficDelaySeconds": summary.get("trafficDelayInSeconds") or 0,
        "departureTime": summary.get("departureTime"),
        "arrivalTime": summary.get("arrivalTime"),
    }


class TomTomClient:
    def __init__(self, api_key: Optional[str], timeout: float = 10.0):
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "TomTomClient":
        return cls(config.get("TOMTOM_API_KEY"), config.get("HTTP_TIMEOUT", 10.0))

    def search_places(self, query: str, limit: int = 5, country_set: Optional[str] = None,
                      lat: Optional[float] = None, lon: Optional[float] = None,
                      radius: Optional[int] = None, language: str = "en-US",
                      typeahead: bool = True) -> list[dict]:
        if not self.api_key:
            logger.error("TomTom API key is not configured")
            return []
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        params = {
            "key": self.api_key,
            "query": query,
            "limit": str(limit or 5),
            "typeahead": "true" if typeahead else "false",
            "language": language,
        }
        # location bias
        if lat and lon:
            params["lat"] = str(lat)
            params["lon"] = str(lon)
            if radius:
                params["radius"] = str(radius)
        if country_set:
            params["countrySet"] = country_set

        url = f"{SEARCH_BASE_URL}/search/{quote(query)}.json"
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            results = resp.json().get("results") or []
        except (requests.RequestException, ValueError) as e:
            logger.error("TomTom search error: %s", e)
            return []
        return [to_location(r) for r in results]

    def get_location_suggestions(self, query: str, limit: int = 5,
                                 country_set: Optional[str] = None) -> list[dict]:
        """Typeahead search used by the location autocomplete."""
        return self.search_places(query, limit=limit or 5, country_set=country_set, typeahead=True)

    def calculate_route(self, origin: dict, destination: dict, travel_mode: str = "car",
                        traffic: bool = True, depart_at: Optional[str] = None,
                        avoid: Optional[list] = None) -> Optional[dict]:
        if not self.api_key:
            logger.error("TomTom API key is not configured")
            return None

        try:
            locations = f"{origin['lat']},{origin['lon']}:{destination['lat']},{destination['lon']}"
        except (KeyError, TypeError):
            logger.error("TomTom routing skipped: missing coordinates")
            return None
        params = {
            "key": self.api_key,
            "travelMode": travel_mode,
            "traffic": "true" if traffic else "false",
            "routeType": "fastest",
        }
        if depart_at:
            params["departAt"] = depart_at
        if avoid:
            params["avoid"] = ",".join(avoid)

        url = f"{ROUTING_BASE_URL}/calculateRoute/{locations}/json"
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            routes = resp.json().get("routes") or []
        except (requests.RequestException, ValueError) as e:
            logger.error("TomTom routing error: %s", e)
            return None
        if not routes:
            return None
        return to_route_info(routes[0].get("summary") or {})

    def calculate_route_by_name(self, origin_query: str, destination_query: str, **route_options) -> dict:
        """Geocode both ends concurrently, then route between the top hits."""
        with ThreadPoolExecutor(max_workers=2) as pool:
            origin_future = pool.submit(self.search_places, origin_query, limit=1)
            destination_future = pool.submit(self.search_places, destination_query, limit=1)
            origin_results = origin_future.result()
            destination_results = destination_future.result()

        origin = origin_results[0] if origin_results else None
        destination = destination_results[0] if destination_results else None
        if origin is None or destination is None:
            return {"origin": origin, "destination": destination, "route": None}

        route = self.calculate_route(origin["position"], destination["position"], **route_options)
        return {"origin": origin, "destination": destination, "route": route}


def get_client() -> TomTomClient:
    return TomTomClient.from_config(current_app.config)
