from flask import Blueprint

from ..services.theme_service import ThemeService
from ..utils.wire import envelope

bp = Blueprint("themes", __name__, url_prefix="/api/themes")


@bp.get("")
def list_themes():
    return envelope(ThemeService.list_themes())


@bp.get("/active")
def active_theme():
    return envelope(ThemeService.active_theme())


@bp.get("/<theme_id>")
def get_theme(theme_id):
    return envelope(ThemeService.get_theme(theme_id))


@bp.put("/<theme_id>")
def activate_theme(theme_id):
    ThemeService.activate(theme_id)
    return envelope(message="Theme activated successfully")
