"""
Built-in theme catalogue.

The storefront picks its look from this fixed list; only the id of the active
entry is persisted (see `ThemePreferenceStore`). Every preset starts from the
teal-ocean values and overrides what differs.
"""
from copy import deepcopy

DEFAULT_THEME_ID = "teal-ocean"

THEME_DEFAULTS = {
    "primaryColor": "#0d9488",
    "primaryColorRgb": "13, 148, 136",
    "primaryDark": "#0f766e",
    "primaryDarkRgb": "15, 118, 110",
    "secondaryColor": "#3b82f6",
    "secondaryColorRgb": "59, 130, 246",
    "secondaryDark": "#2563eb",
    "secondaryDarkRgb": "37, 99, 235",
    "backgroundStart": "#14b8a6",
    "backgroundMiddle": "#0d9488",
    "backgroundEnd": "#0f766e",
    "textPrimary": "#0f172a",
    "textSecondary": "#475569",
    "textMuted": "#94a3b8",
    "accentColor": "#8b5cf6",
    "accentColorRgb": "139, 92, 246",
    "successColor": "#10b981",
    "successColorRgb": "16, 185, 129",
    "warningColor": "#f59e0b",
    "warningColorRgb": "245, 158, 11",
    "cardBackground": "rgba(255, 255, 255, 0.95)",
    "cardBorder": "rgba(255, 255, 255, 0.7)",
    "cardShadow": "0 25px 50px -12px rgba(0, 0, 0, 0.15)",
    "buttonGradientDirection": "135deg",
    "glassOpacity": 0.95,
    "glassBlur": 24,
    "borderRadius": "1rem",
    "fontFamily": "'Inter', 'Segoe UI', system-ui, -apple-system, sans-serif",
}


def _theme(theme_id: str, name: str, description: str, **overrides) -> dict:
    theme = {"id": theme_id, "name": name, "description": description}
    theme.update(THEME_DEFAULTS)
    theme.update(overrides)
    return theme


HARDCODED_THEMES = [
    _theme(DEFAULT_THEME_ID, "Teal Ocean", "Fresh teal gradients with a calm, coastal feel"),
    _theme(
        "royal-purple", "Royal Purple", "Deep purple tones for a premium look",
        primaryColor="#7c3aed", primaryColorRgb="124, 58, 237",
        primaryDark="#6d28d9", primaryDarkRgb="109, 40, 217",
        secondaryColor="#ec4899", secondaryColorRgb="236, 72, 153",
        secondaryDark="#db2777", secondaryDarkRgb="219, 39, 119",
        backgroundStart="#8b5cf6", backgroundMiddle="#7c3aed", backgroundEnd="#5b21b6",
        accentColor="#f472b6", accentColorRgb="244, 114, 182",
    ),
    _theme(
        "sunset-orange", "Sunset Orange", "Warm orange and coral for a friendly vibe",
        primaryColor="#ea580c", primaryColorRgb="234, 88, 12",
        primaryDark="#c2410c", primaryDarkRgb="194, 65, 12",
        secondaryColor="#f43f5e", secondaryColorRgb="244, 63, 94",
        secondaryDark="#e11d48", secondaryDarkRgb="225, 29, 72",
        backgroundStart="#fb923c", backgroundMiddle="#f97316", backgroundEnd="#ea580c",
        accentColor="#facc15", accentColorRgb="250, 204, 21",
    ),
    _theme(
        "midnight-blue", "Midnight Blue", "Dark navy surfaces with bright blue accents",
        primaryColor="#2563eb", primaryColorRgb="37, 99, 235",
        primaryDark="#1d4ed8", primaryDarkRgb="29, 78, 216",
        secondaryColor="#0ea5e9", secondaryColorRgb="14, 165, 233",
        secondaryDark="#0284c7", secondaryDarkRgb="2, 132, 199",
        backgroundStart="#1e3a8a", backgroundMiddle="#1e293b", backgroundEnd="#0f172a",
        textPrimary="#f8fafc", textSecondary="#cbd5e1", textMuted="#64748b",
        cardBackground="rgba(15, 23, 42, 0.85)", cardBorder="rgba(148, 163, 184, 0.25)",
        cardShadow="0 25px 50px -12px rgba(0, 0, 0, 0.5)",
        glassOpacity=0.85,
    ),
    _theme(
        "forest-green", "Forest Green", "Natural greens for an eco-friendly brand",
        primaryColor="#16a34a", primaryColorRgb="22, 163, 74",
        primaryDark="#15803d", primaryDarkRgb="21, 128, 61",
        secondaryColor="#65a30d", secondaryColorRgb="101, 163, 13",
        secondaryDark="#4d7c0f", secondaryDarkRgb="77, 124, 15",
        backgroundStart="#22c55e", backgroundMiddle="#16a34a", backgroundEnd="#14532d",
        accentColor="#eab308", accentColorRgb="234, 179, 8",
    ),
    _theme(
        "rose-gold", "Rose Gold", "Soft rose and gold for a boutique feel",
        primaryColor="#e11d48", primaryColorRgb="225, 29, 72",
        primaryDark="#be123c", primaryDarkRgb="190, 18, 60",
        secondaryColor="#d97706", secondaryColorRgb="217, 119, 6",
        secondaryDark="#b45309", secondaryDarkRgb="180, 83, 9",
        backgroundStart="#fda4af", backgroundMiddle="#fb7185", backgroundEnd="#e11d48",
        accentColor="#f59e0b", accentColorRgb="245, 158, 11",
        borderRadius="1.5rem",
    ),
]

_BY_ID = {theme["id"]: theme for theme in HARDCODED_THEMES}


def get_theme_by_id(theme_id):
    """Return a copy of the preset, or None for an unknown id."""
    theme = _BY_ID.get(theme_id)
    return deepcopy(theme) if theme is not None else None


def get_default_theme() -> dict:
    return deepcopy(_BY_ID[DEFAULT_THEME_ID])


def theme_to_wire(theme: dict, is_active: bool) -> dict:
    """Catalogue entries are emitted with `_id` mirroring `id`."""
    return {**theme, "_id": theme["id"], "isActive": is_active}
