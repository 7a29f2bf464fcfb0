"""
Request decoders for the car endpoints.

The admin UI posts either JSON or multipart form data (the latter when an image
file is attached). Both wire formats are decoded here into one `CarPayload`
so the service layer never branches on content type. Only keys that are
present in the request end up in `fields`, which gives PUT its partial-update
semantics.
"""
import json
from dataclasses import dataclass, field
from typing import Optional

from werkzeug.datastructures import FileStorage

from ..exceptions import InvalidPayloadError

TEXT_FIELDS = (
    "carType", "name", "type", "currency", "description",
    "cancellationPolicy", "category", "transmission", "fuelType", "pickupLocation",
)
FLOAT_FIELDS = ("price", "rating", "pricePerDay")
INT_FIELDS = ("passengers", "mediumLuggage", "smallLuggage", "seats", "bags")


@dataclass
class CarPayload:
    fields: dict = field(default_factory=dict)
    image_upload: Optional[FileStorage] = None


def _parse_number(key: str, raw: str, cast):
    try:
        return cast(raw)
    except (TypeError, ValueError):
        raise InvalidPayloadError(f"Invalid number for '{key}'")


def decode_car_json(body) -> CarPayload:
    if not isinstance(body, dict):
        raise InvalidPayloadError("Request body must be a JSON object")
    return CarPayload(fields=dict(body))


def decode_car_form(form, files) -> CarPayload:
    """Decode a multipart submission; empty numeric inputs are treated as absent."""
    fields: dict = {}

    for key in TEXT_FIELDS:
        if key in form:
            fields[key] = form.get(key)

    for key in FLOAT_FIELDS:
        raw = (form.get(key) or "").strip()
        if raw:
            fields[key] = _parse_number(key, raw, float)

    for key in INT_FIELDS:
        raw = (form.get(key) or "").strip()
        if raw:
            fields[key] = _parse_number(key, raw, int)

    # features arrive as a JSON-encoded list; garbage collapses to []
    if "features" in form:
        raw = form.get("features") or ""
        try:
            features = json.loads(raw) if raw else []
        except ValueError:
            features = []
        fields["features"] = features if isinstance(features, list) else []

    if "isActive" in form:
        fields["isActive"] = (form.get("isActive") or "").lower() == "true"

    upload = files.get("image") if files else None
    if upload is not None and upload.filename:
        return CarPayload(fields=fields, image_upload=upload)

    image_url = (form.get("image") or "").strip()
    if image_url:
        fields["image"] = image_url
    return CarPayload(fields=fields)


def decode_car_request(request) -> CarPayload:
    """Pick the decoder by content type."""
    if request.mimetype == "multipart/form-data":
        return decode_car_form(request.form, request.files)
    return decode_car_json(request.get_json(silent=True))
