import logging

from carbooking.models.base import _now
from carbooking.models.theme import ThemePreference
from carbooking.utils.themes import (
    DEFAULT_THEME_ID,
    HARDCODED_THEMES,
    get_default_theme,
    get_theme_by_id,
    theme_to_wire,
)

logger = logging.getLogger(__name__)


class ThemePreferenceStore:
    """
    The single persisted "active theme" id.

    get() creates the row with DEFAULT_THEME_ID on first read. set() is an
    upsert against the one row; concurrent writers are last-write-wins.
    """

    @staticmethod
    def get() -> str:
        pref = ThemePreference.objects.first()
        if pref is None:
            pref = ThemePreference(theme_id=DEFAULT_THEME_ID)
            pref.save()
        return pref.theme_id

    @staticmethod
    def set(theme_id: str) -> None:
        now = _now()
        ThemePreference.objects().update_one(
            set__theme_id=theme_id,
            set__updated_at=now,
            set_on_insert__created_at=now,
            upsert=True,
        )


class ThemeService:
    """Catalogue reads plus activation of a preset."""

    @staticmethod
    def list_themes() -> list[dict]:
        active_id = ThemePreferenceStore.get()
        return [theme_to_wire(t, t["id"] == active_id) for t in HARDCODED_THEMES]

    @staticmethod
    def get_theme(theme_id: str) -> dict:
        """Unknown ids fall back to the default preset."""
        theme = get_theme_by_id(theme_id) or get_default_theme()
        return theme_to_wire(theme, False)

    @staticmethod
    def active_theme() -> dict:
        """Never fails: storage errors degrade to the default preset."""
        try:
            theme = get_theme_by_id(ThemePreferenceStore.get()) or get_default_theme()
        except Exception:
            logger.exception("Could not load theme preference; using default")
            theme = get_default_theme()
        return theme_to_wire(theme, True)

    @staticmethod
    def activate(theme_id: str) -> None:
        ThemePreferenceStore.set(theme_id)
        logger.info("Active theme set to %s", theme_id)
