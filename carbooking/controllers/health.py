import logging

from flask import Blueprint
from mongoengine.connection import get_db

from ..utils.wire import envelope

logger = logging.getLogger(__name__)

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    try:
        get_db().command("ping")
        database = "ok"
    except Exception as e:
        logger.error("Database ping failed: %s", e)
        database = "unavailable"
    status = 200 if database == "ok" else 503
    return envelope(message="Server is running", status=status, database=database)
