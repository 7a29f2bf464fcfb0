from flask import Blueprint

from ..services.analytics_service import AnalyticsService
from ..utils.decorators import admin_required
from ..utils.wire import envelope

bp = Blueprint("admin", __name__, url_prefix="/admin")


@bp.get("/summary")
@admin_required
def summary():
    return envelope(AnalyticsService.summary())
