import mongoengine

from carbooking.models.base import TimestampedDocument
from carbooking.utils.themes import DEFAULT_THEME_ID, THEME_DEFAULTS as D


def _color(wire_name):
    return mongoengine.StringField(db_field=wire_name, required=True, default=D[wire_name])


class Theme(TimestampedDocument):
    """
    Stored theme document. The storefront reads its presets from the built-in
    catalogue; this collection holds admin-authored variants. At most one
    document is active at a time.
    """
    name = mongoengine.StringField(required=True, unique=True)
    description = mongoengine.StringField(required=True)
    is_active = mongoengine.BooleanField(db_field="isActive", default=False)

    primary_color = _color("primaryColor")
    primary_color_rgb = _color("primaryColorRgb")
    primary_dark = _color("primaryDark")
    primary_dark_rgb = _color("primaryDarkRgb")
    secondary_color = _color("secondaryColor")
    secondary_color_rgb = _color("secondaryColorRgb")
    secondary_dark = _color("secondaryDark")
    secondary_dark_rgb = _color("secondaryDarkRgb")

    background_start = _color("backgroundStart")
    background_middle = _color("backgroundMiddle")
    background_end = _color("backgroundEnd")

    text_primary = _color("textPrimary")
    text_secondary = _color("textSecondary")
    text_muted = _color("textMuted")

    accent_color = _color("accentColor")
    accent_color_rgb = _color("accentColorRgb")
    success_color = _color("successColor")
    success_color_rgb = _color("successColorRgb")
    warning_color = _color("warningColor")
    warning_color_rgb = _color("warningColorRgb")

    card_background = _color("cardBackground")
    card_border = _color("cardBorder")
    card_shadow = _color("cardShadow")
    button_gradient_direction = _color("buttonGradientDirection")

    glass_opacity = mongoengine.FloatField(db_field="glassOpacity", required=True, default=D["glassOpacity"])
    glass_blur = mongoengine.FloatField(db_field="glassBlur", required=True, default=D["glassBlur"])
    border_radius = _color("borderRadius")
    font_family = _color("fontFamily")
    preview_image = mongoengine.StringField(db_field="previewImage")

    meta = {"collection": "themes"}

    def save(self, *args, **kwargs):
        # only one active theme at a time
        if self.is_active:
            Theme.objects(id__ne=self.id).update(set__is_active=False)
        return super().save(*args, **kwargs)


class ThemePreference(TimestampedDocument):
    """Singleton row holding the id of the active catalogue theme."""
    theme_id = mongoengine.StringField(db_field="themeId", required=True, default=DEFAULT_THEME_ID)

    meta = {"collection": "themepreferences"}
