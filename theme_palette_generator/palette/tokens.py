from collections import namedtuple

from ..contrast import select_foreground_hex
from ..oklch import to_hex

# Attribute name -> stable wire name
TOKEN_KEYS = {
    "bg": "bg",
    "card": "card",
    "card2": "card2",
    "text": "text",
    "text_muted": "textMuted",
    "text_on_color": "textOnColor",
    "primary": "primary",
    "primary_fg": "primaryFg",
    "secondary": "secondary",
    "secondary_fg": "secondaryFg",
    "accent": "accent",
    "accent_fg": "accentFg",
    "border": "border",
    "ring": "ring",
    "good": "good",
    "good_fg": "goodFg",
    "warn": "warn",
    "warn_fg": "warnFg",
    "bad": "bad",
    "bad_fg": "badFg",
}

# Foreground token -> the surface it sits on
FOREGROUND_PAIRS = {
    "text_on_color": "primary",
    "primary_fg": "primary",
    "secondary_fg": "secondary",
    "accent_fg": "accent",
    "good_fg": "good",
    "warn_fg": "warn",
    "bad_fg": "bad",
}

NEUTRAL_ROLES = ("bg", "card", "card2", "text", "text_muted", "border")
BRAND_ROLES = ("primary", "secondary", "accent")
STATUS_ROLES = ("good", "warn", "bad")
SURFACE_ROLES = NEUTRAL_ROLES + BRAND_ROLES + ("ring",) + STATUS_ROLES


class ThemeTokens(namedtuple("ThemeTokens", list(TOKEN_KEYS))):
    """One theme mode: twenty named ``#rrggbb`` color roles."""

    __slots__ = ()

    def as_dict(self):
        return {TOKEN_KEYS[field]: value for field, value in zip(self._fields, self)}

    @classmethod
    def from_dict(cls, data):
        """Build from a camelCase (or snake_case) mapping of hex strings."""
        values = {}
        missing = []
        for field, key in TOKEN_KEYS.items():
            value = data.get(key, data.get(field))
            if value is None:
                missing.append(key)
            values[field] = value
        if missing:
            raise ValueError(f"Missing theme tokens: {', '.join(missing)}")
        return cls(**values)


class PaletteResult(
    namedtuple("PaletteResult", ["light", "dark", "seed", "base_hue", "mode", "score"])
):
    __slots__ = ()

    def as_dict(self):
        return {
            "light": self.light.as_dict(),
            "dark": self.dark.as_dict(),
            "seed": self.seed,
            "baseHue": self.base_hue,
            "mode": self.mode,
            "score": self.score,
        }


def build_theme_tokens(colors):
    """Assemble ThemeTokens from OKLCH surface colors.

    Args:
        colors: dict with an OklchColor for every role in SURFACE_ROLES

    Returns:
        ThemeTokens where every foreground is chosen fresh against its own surface
    """
    values = {role: to_hex(colors[role]) for role in SURFACE_ROLES}
    for fg_role, surface_role in FOREGROUND_PAIRS.items():
        values[fg_role] = select_foreground_hex(values[surface_role])
    return ThemeTokens(**values)
