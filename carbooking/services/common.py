"""Shared service helpers."""
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId


def object_id_or_none(value) -> Optional[ObjectId]:
    """Parse a path id; malformed ids are treated the same as unknown ones."""
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def round2(x: float) -> float:
    return round(float(x), 2)
