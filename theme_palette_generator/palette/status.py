from collections import namedtuple

from ..oklch import OklchColor, clamp_to_srgb_gamut, hue_difference
from .brand import chroma_budget

StatusColors = namedtuple("StatusColors", ["good", "warn", "bad"])

StatusProfile = namedtuple(
    "StatusProfile",
    [
        "base_lightness",
        "brightness_step",
        "chroma_floor",
        "chroma_span",
        "warn_lightness_offset",
    ],
)

STATUS_PROFILES = {
    "light": StatusProfile(0.52, 0.025, 0.08, 0.16, 0.12),
    "dark": StatusProfile(0.55, 0.02, 0.08, 0.14, 0.10),
}

GREEN_HUE = 140
RED_HUE = 0
WARN_HUE = 60
WARN_CHROMA_FACTOR = 0.9


def resolve_status_hues(good_hue, bad_hue):
    """Order the two status hues so success never reads red and errors never read green."""
    bad_closer_to_green = hue_difference(bad_hue, GREEN_HUE) < hue_difference(
        good_hue, GREEN_HUE
    )
    good_closer_to_red = hue_difference(good_hue, RED_HUE) < hue_difference(
        bad_hue, RED_HUE
    )
    if bad_closer_to_green or good_closer_to_red:
        return bad_hue, good_hue
    return good_hue, bad_hue


def construct_status_colors(hues, saturation_level, brightness_level, mode="light"):
    """Good, warn and bad colors at fixed hues with slider-driven lightness/chroma.

    ``hues[3]`` and ``hues[4]`` are the harmony slots reserved for status;
    warn always sits near yellow.
    """
    profile = STATUS_PROFILES[mode]
    good_hue, bad_hue = resolve_status_hues(hues[3], hues[4])
    base_c = chroma_budget(saturation_level, profile.chroma_floor, profile.chroma_span)
    base_l = profile.base_lightness + brightness_level * profile.brightness_step

    return StatusColors(
        good=clamp_to_srgb_gamut(OklchColor(L=base_l, C=base_c, H=good_hue)),
        warn=clamp_to_srgb_gamut(
            OklchColor(
                L=base_l + profile.warn_lightness_offset,
                C=base_c * WARN_CHROMA_FACTOR,
                H=WARN_HUE,
            )
        ),
        bad=clamp_to_srgb_gamut(OklchColor(L=base_l, C=base_c, H=bad_hue)),
    )
