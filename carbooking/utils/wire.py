"""
Conversion between mongoengine documents and the camelCase JSON the API speaks.

Documents declare snake_case attributes with camelCase `db_field` names, so the
stored shape and the wire shape are the same and only ObjectIds and datetimes
need converting on the way out.
"""
from datetime import datetime
from typing import Any, Iterable

from bson import ObjectId
from flask import jsonify
from mongoengine.fields import (
    BooleanField,
    EmbeddedDocumentField,
    FloatField,
    IntField,
    ListField,
    StringField,
)

from ..exceptions import InvalidPayloadError


def to_wire(value: Any) -> Any:
    """Recursively make a BSON-ish value JSON serializable."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        # stored datetimes are naive UTC
        if value.tzinfo is None:
            return value.isoformat(timespec="milliseconds") + "Z"
        return value.isoformat(timespec="milliseconds")
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def document_to_wire(doc) -> dict | None:
    if doc is None:
        return None
    return to_wire(doc.to_mongo().to_dict())


def wire_field_map(document_cls) -> dict[str, str]:
    """Map wire (db_field) names to attribute names, excluding the primary key."""
    return {
        field.db_field: name
        for name, field in document_cls._fields.items()
        if name != "id"
    }


def _to_bool(value, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise InvalidPayloadError(f"Invalid value for '{key}'")


def _coerce(field, value, key: str):
    """Normalise one JSON value for `field` before mongoengine sees it."""
    if value is None:
        return None
    if isinstance(field, BooleanField):
        return _to_bool(value, key)
    if isinstance(field, StringField):
        # scalars are stored in their string form, as the booking form expects
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value
    if isinstance(field, (IntField, FloatField)):
        # blank form inputs mean "not provided"
        return None if value == "" else value
    if isinstance(field, EmbeddedDocumentField) and isinstance(value, dict):
        nested = {f.db_field: f for f in field.document_type._fields.values()}
        return {
            k: _coerce(nested[k], v, f"{key}.{k}") if k in nested else v
            for k, v in value.items()
        }
    if isinstance(field, ListField) and field.field is not None and isinstance(value, list):
        return [_coerce(field.field, item, key) for item in value]
    return value


def apply_wire_fields(doc, data: dict, *, exclude: Iterable[str] = ()):
    """
    Assign the present keys of `data` onto `doc`.
    Unknown keys and keys listed in `exclude` are ignored; values are coerced
    through the field's own `to_python` so nested dicts become embedded docs.
    Booleans accept only true/false (or their string forms), and scalars sent
    for string fields are stored as strings, nested objects included.
    """
    if not isinstance(data, dict):
        raise InvalidPayloadError("Request body must be a JSON object")

    skip = set(exclude)
    fields = wire_field_map(type(doc))
    for key, value in data.items():
        name = fields.get(key)
        if name is None or key in skip:
            continue
        field = doc._fields[name]
        value = _coerce(field, value, key)
        try:
            coerced = field.to_python(value) if value is not None else None
        except (TypeError, ValueError, AttributeError):
            raise InvalidPayloadError(f"Invalid value for '{key}'")
        setattr(doc, name, coerced)
    return doc


_MISSING = object()


def envelope(data: Any = _MISSING, message: str | None = None, status: int = 200, **extra):
    """Build the `{success, message?, data?}` response used by every JSON route."""
    body: dict[str, Any] = {"success": status < 400}
    if message is not None:
        body["message"] = message
    if data is not _MISSING:
        body["data"] = data
    body.update(extra)
    return jsonify(body), status
