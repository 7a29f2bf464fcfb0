from carbooking.services import tomtom_service
from carbooking.services.tomtom_service import TomTomClient

AIRPORT = {
    "id": "poi-1", "name": "Auckland Airport", "address": "Ray Emery Drive",
    "fullAddress": "Auckland Airport - Ray Emery Drive", "position": {"lat": -37.0, "lon": 174.78},
}
CITY = {
    "id": "geo-2", "name": "Auckland", "address": "Auckland",
    "fullAddress": "Auckland", "position": {"lat": -36.85, "lon": 174.76},
}


def test_search_without_key_returns_empty_list(client):
    r = client.get("/api/locations/search?q=Auckland")
    assert r.status_code == 200
    assert r.get_json() == {"success": True, "data": []}


def test_short_query_returns_empty_without_calling_provider(monkeypatch):
    def fail(*a, **kw):
        raise AssertionError("provider should not be called")

    monkeypatch.setattr(tomtom_service.requests, "get", fail)
    assert TomTomClient("key").search_places("A") == []


def test_search_maps_provider_results(monkeypatch):
    class Resp:
        def raise_for_status(self):
            pass

        def json(self):
            return {"results": [{
                "id": "poi-1", "type": "POI",
                "poi": {"name": "Auckland Airport", "categories": ["airport"]},
                "address": {"freeformAddress": "Ray Emery Drive, Auckland", "country": "New Zealand",
                            "countryCode": "NZ", "municipality": "Auckland"},
                "position": {"lat": -37.0, "lon": 174.78},
            }]}

    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen["url"] = url
        seen["params"] = params
        return Resp()

    monkeypatch.setattr(tomtom_service.requests, "get", fake_get)
    results = TomTomClient("key").search_places("auckland airport", limit=1)
    assert seen["url"] == "https://api.tomtom.com/search/2/search/auckland%20airport.json"
    assert seen["params"]["limit"] == "1"
    assert results[0]["name"] == "Auckland Airport"
    assert results[0]["category"] == "airport"
    assert results[0]["fullAddress"] == "Auckland Airport - Ray Emery Drive, Auckland"


def test_provider_error_degrades_to_empty(monkeypatch):
    def broken(*a, **kw):
        raise tomtom_service.requests.ConnectionError("offline")

    monkeypatch.setattr(tomtom_service.requests, "get", broken)
    client = TomTomClient("key")
    assert client.search_places("Auckland") == []
    assert client.calculate_route({"lat": 1, "lon": 2}, {"lat": 3, "lon": 4}) is None


def test_route_by_name_composes_geocode_and_route(monkeypatch):
    lookups = {"airport": [AIRPORT], "city": [CITY]}
    monkeypatch.setattr(TomTomClient, "search_places",
                        lambda self, q, limit=5, **kw: lookups.get(q, []))
    routed = {}

    def fake_route(self, origin, destination, **kw):
        routed["legs"] = (origin, destination)
        return {"distanceKm": 21.3, "durationFormatted": "25 mins"}

    monkeypatch.setattr(TomTomClient, "calculate_route", fake_route)
    result = TomTomClient("key").calculate_route_by_name("airport", "city")
    assert result["origin"]["id"] == "poi-1"
    assert result["destination"]["id"] == "geo-2"
    assert result["route"]["distanceKm"] == 21.3
    assert routed["legs"] == (AIRPORT["position"], CITY["position"])


def test_route_is_null_when_a_leg_is_unresolved(monkeypatch):
    monkeypatch.setattr(TomTomClient, "search_places",
                        lambda self, q, limit=5, **kw: [AIRPORT] if q == "airport" else [])
    result = TomTomClient("key").calculate_route_by_name("airport", "nowhere")
    assert result == {"origin": AIRPORT, "destination": None, "route": None}


def test_estimate_endpoint(client, monkeypatch):
    monkeypatch.setattr(TomTomClient, "calculate_route_by_name",
                        lambda self, a, b: {"origin": AIRPORT, "destination": CITY, "route": None})
    r = client.get("/api/routes/estimate?from=airport&to=city")
    assert r.status_code == 200
    assert r.get_json()["data"]["origin"]["name"] == "Auckland Airport"

    assert client.get("/api/routes/estimate?from=airport").status_code == 400
