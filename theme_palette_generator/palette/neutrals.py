from collections import namedtuple

from ..oklch import create_neutral

NeutralFoundation = namedtuple(
    "NeutralFoundation", ["bg", "card", "card2", "text", "text_muted", "border"]
)

NEUTRAL_TARGETS = {
    "light": {
        "bg": 0.97,
        "card": 0.93,
        "card2": 0.90,
        "text": 0.18,
        "text_muted": 0.42,
        "border": 0.82,
    },
    "dark": {
        "bg": 0.08,
        "card": 0.12,
        "card2": 0.15,
        "text": 0.92,
        "text_muted": 0.65,
        "border": 0.25,
    },
}

# Legal lightness band per role. Text and background bands never overlap,
# so no slider combination can make them cross.
NEUTRAL_BANDS = {
    "light": {
        "bg": (0.85, 0.99),
        "card": (0.80, 0.96),
        "card2": (0.75, 0.93),
        "text": (0.05, 0.35),
        "text_muted": (0.25, 0.55),
        "border": (0.70, 0.88),
    },
    "dark": {
        "bg": (0.03, 0.25),
        "card": (0.06, 0.30),
        "card2": (0.09, 0.35),
        "text": (0.80, 0.98),
        "text_muted": (0.58, 0.85),
        "border": (0.15, 0.40),
    },
}

# (brightness weight, contrast weight) applied to the slider offsets
NEUTRAL_SLIDER_WEIGHTS = {
    "light": {
        "bg": (1.0, 1.0),
        "card": (0.8, 0.5),
        "card2": (0.6, 0.3),
        "text": (-0.3, -1.0),
        "text_muted": (-0.2, -0.5),
        "border": (0.3, 0.0),
    },
    "dark": {
        "bg": (1.0, -1.0),
        "card": (0.8, -0.5),
        "card2": (0.6, -0.3),
        "text": (0.3, 1.0),
        "text_muted": (0.2, 0.5),
        "border": (0.3, 0.0),
    },
}

# Fraction of the saturation tint each role receives
NEUTRAL_CHROMA = {
    "light": {
        "bg": 1.0,
        "card": 0.8,
        "card2": 0.6,
        "text": 0.2,
        "text_muted": 0.15,
        "border": 0.4,
    },
    "dark": {
        "bg": 0.5,
        "card": 0.4,
        "card2": 0.3,
        "text": 0.1,
        "text_muted": 0.08,
        "border": 0.2,
    },
}

TEXT_ROLES = ("text", "text_muted")

WARM_HUE = 60
COOL_HUE = 240

CONTRAST_STEP = 0.015
BRIGHTNESS_STEP = 0.02
SATURATION_CHROMA_STEP = 0.003


def clamp_to_band(lightness, mode, role):
    low, high = NEUTRAL_BANDS[mode][role]
    return max(low, min(high, lightness))


def neutral_hue(warmth):
    return WARM_HUE if warmth > 0 else COOL_HUE


def build_neutral_foundation(
    base_hue,
    warmth,
    contrast_level,
    brightness_level=0,
    saturation_level=0,
    mode="light",
):
    """Compute background, surface, text and border colors for one mode.

    Args:
        base_hue: Hue carried by the text roles
        warmth: Sign selects a warm (60) or cool (240) tint for surfaces
        contrast_level: -5..5, widens or narrows the bg/text gap
        brightness_level: -5..5, shifts every lightness
        saturation_level: -5..5, positive values tint the neutrals
        mode: "light" or "dark"

    Returns:
        NeutralFoundation of OklchColor values
    """
    contrast_mod = contrast_level * CONTRAST_STEP
    brightness_mod = brightness_level * BRIGHTNESS_STEP
    chroma_mod = max(0.0, saturation_level * SATURATION_CHROMA_STEP)
    surface_hue = neutral_hue(warmth)

    colors = {}
    for role, target in NEUTRAL_TARGETS[mode].items():
        brightness_weight, contrast_weight = NEUTRAL_SLIDER_WEIGHTS[mode][role]
        lightness = clamp_to_band(
            target + brightness_mod * brightness_weight + contrast_mod * contrast_weight,
            mode,
            role,
        )
        colors[role] = create_neutral(
            lightness,
            hue=base_hue if role in TEXT_ROLES else surface_hue,
            chroma=chroma_mod * NEUTRAL_CHROMA[mode][role],
        )
    return NeutralFoundation(**colors)
