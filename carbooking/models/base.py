"""Shared document base and clock helper."""
from datetime import datetime, timezone

import mongoengine


def _now() -> datetime:
    """Naive UTC now; Mongo stores naive UTC datetimes."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampedDocument(mongoengine.Document):
    """
    Adds `createdAt` / `updatedAt`. `updatedAt` is refreshed on every save.
    """
    created_at = mongoengine.DateTimeField(db_field="createdAt", default=_now)
    updated_at = mongoengine.DateTimeField(db_field="updatedAt", default=_now)

    meta = {"abstract": True}

    def save(self, *args, **kwargs):
        self.updated_at = _now()
        return super().save(*args, **kwargs)
