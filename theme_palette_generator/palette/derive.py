"""
Mode derivation.

Exactly one mode is built from the generation inputs; the opposite mode is a
pure function of it. Hues are kept, lightness moves by fixed per-role rules
and chroma is scaled: darker surroundings need less saturation, lighter ones
tolerate more. Foregrounds are never copied across modes; build_theme_tokens
picks them again against the derived surfaces.
"""

from collections import namedtuple

from ..oklch import adjust_chroma, create_neutral, to_oklch
from .neutrals import BRIGHTNESS_STEP, NEUTRAL_TARGETS, clamp_to_band
from .tokens import NEUTRAL_ROLES, build_theme_tokens

RoleShift = namedtuple("RoleShift", ["lightness_delta", "lightness_limit", "chroma_factor"])

NEUTRAL_DERIVED_CHROMA = {
    "bg": 0.5,
    "card": 0.5,
    "card2": 0.5,
    "text": 0.3,
    "text_muted": 0.3,
    "border": 0.5,
}

# Text keeps its target regardless of brightness
NEUTRAL_DERIVED_BRIGHTNESS = {
    "bg": 1.0,
    "card": 1.0,
    "card2": 1.0,
    "text": 0.0,
    "text_muted": 0.0,
    "border": 1.0,
}

# Limits are caps when deriving dark and floors when deriving light
COLOR_SHIFTS = {
    "dark": {
        "primary": RoleShift(0.10, 0.65, 0.90),
        "secondary": RoleShift(0.05, 0.60, 0.85),
        "accent": RoleShift(0.15, 0.70, 0.90),
        "good": RoleShift(0.05, None, 0.85),
        "warn": RoleShift(0.0, None, 0.85),
        "bad": RoleShift(0.05, None, 0.85),
    },
    "light": {
        "primary": RoleShift(-0.10, 0.35, 1.10),
        "secondary": RoleShift(-0.05, 0.40, 1.15),
        "accent": RoleShift(-0.15, 0.30, 1.10),
        "good": RoleShift(-0.05, None, 1.15),
        "warn": RoleShift(0.0, None, 1.15),
        "bad": RoleShift(-0.05, None, 1.15),
    },
}

# (lightness, chroma factor relative to the source primary)
RING_SHIFTS = {
    "dark": (0.6, 0.7),
    "light": (0.6, 1.2),
}


def _shift_color(color, shift, target_mode):
    lightness = color.L + shift.lightness_delta
    if shift.lightness_limit is not None:
        if target_mode == "dark":
            lightness = min(shift.lightness_limit, lightness)
        else:
            lightness = max(shift.lightness_limit, lightness)
    return adjust_chroma(color._replace(L=lightness), shift.chroma_factor)


def derive_mode(tokens, target_mode, brightness_level=0):
    """Derive the ``target_mode`` theme from a finished theme in the other mode.

    Args:
        tokens: ThemeTokens of the source mode
        target_mode: "dark" or "light"
        brightness_level: -5..5, shifts derived surfaces and borders

    Returns:
        ThemeTokens for target_mode
    """
    brightness_mod = brightness_level * BRIGHTNESS_STEP
    primary = to_oklch(tokens.primary)

    def source(role):
        # Achromatic tokens take the primary hue so derived tints stay stable
        return to_oklch(getattr(tokens, role), default_hue=primary.H)

    colors = {}
    for role in NEUTRAL_ROLES:
        color = source(role)
        lightness = clamp_to_band(
            NEUTRAL_TARGETS[target_mode][role]
            + brightness_mod * NEUTRAL_DERIVED_BRIGHTNESS[role],
            target_mode,
            role,
        )
        colors[role] = create_neutral(
            lightness, hue=color.H, chroma=color.C * NEUTRAL_DERIVED_CHROMA[role]
        )

    for role, shift in COLOR_SHIFTS[target_mode].items():
        colors[role] = _shift_color(source(role), shift, target_mode)

    ring_lightness, ring_chroma = RING_SHIFTS[target_mode]
    colors["ring"] = adjust_chroma(primary._replace(L=ring_lightness), ring_chroma)

    return build_theme_tokens(colors)


def derive_dark_mode(light, brightness_level=0):
    return derive_mode(light, "dark", brightness_level=brightness_level)


def derive_light_mode(dark, brightness_level=0):
    return derive_mode(dark, "light", brightness_level=brightness_level)
