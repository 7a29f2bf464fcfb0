from flask import Blueprint, request

from ..exceptions import InvalidPayloadError
from ..services.tomtom_service import get_client
from ..utils.wire import envelope

bp = Blueprint("locations", __name__, url_prefix="/api")


@bp.get("/locations/search")
def search_locations():
    """Typeahead suggestions; an empty list when TomTom is unavailable."""
    query = request.args.get("q", "")
    limit = request.args.get("limit", default=5, type=int)
    country = request.args.get("countrySet") or None
    return envelope(get_client().get_location_suggestions(query, limit=limit, country_set=country))


@bp.get("/routes/estimate")
def estimate_route():
    origin = (request.args.get("from") or "").strip()
    destination = (request.args.get("to") or "").strip()
    if not origin or not destination:
        raise InvalidPayloadError("Both 'from' and 'to' are required")
    return envelope(get_client().calculate_route_by_name(origin, destination))
