from collections import namedtuple

from ..contrast import contrast_ratio
from ..oklch import OklchColor, adjust_chroma, clamp_to_srgb_gamut, delta_e, to_hex

BrandColors = namedtuple("BrandColors", ["primary", "secondary", "accent"])

BrandProfile = namedtuple(
    "BrandProfile",
    [
        "base_lightness",
        "brightness_step",
        "contrast_step",
        "chroma_floor",
        "chroma_span",
        "primary_band",
        "secondary_offset",
        "secondary_band",
        "accent_offset",
        "accent_band",
        "ring_lightness",
        "ring_chroma",
    ],
)

# Light mode darkens brand colors as contrast rises; dark mode lightens them
BRAND_PROFILES = {
    "light": BrandProfile(
        base_lightness=0.52,
        brightness_step=0.025,
        contrast_step=-0.02,
        chroma_floor=0.02,
        chroma_span=0.24,
        primary_band=(0.35, 0.70),
        secondary_offset=0.08,
        secondary_band=(0.40, 0.75),
        accent_offset=0.05,
        accent_band=(0.45, 0.72),
        ring_lightness=0.6,
        ring_chroma=1.0,
    ),
    "dark": BrandProfile(
        base_lightness=0.62,
        brightness_step=0.02,
        contrast_step=0.02,
        chroma_floor=0.02,
        chroma_span=0.20,
        primary_band=(0.45, 0.78),
        secondary_offset=0.05,
        secondary_band=(0.50, 0.82),
        accent_offset=0.08,
        accent_band=(0.52, 0.85),
        ring_lightness=0.5,
        ring_chroma=0.8,
    ),
}

SECONDARY_CHROMA_FACTOR = 0.75
ACCENT_CHROMA_FACTOR = 1.1

SAMPLE_COUNT = 8
SAMPLE_CHROMA_RANGE = (0.08, 0.22)
PREFERRED_CHROMA_RANGE = (0.10, 0.20)


def _clamp(value, band):
    low, high = band
    return max(low, min(high, value))


def saturation_fraction(saturation_level):
    """Map a -5..5 saturation level onto 0..1."""
    return (saturation_level + 5) / 10


def chroma_budget(saturation_level, floor, span):
    return floor + saturation_fraction(saturation_level) * span


def generate_chroma_samples(hue, lightness, rng, count=SAMPLE_COUNT):
    low, high = SAMPLE_CHROMA_RANGE
    return [
        clamp_to_srgb_gamut(OklchColor(L=lightness, C=rng.next_float(low, high), H=hue))
        for _ in range(count)
    ]


def score_candidate(candidate, bg, existing_colors):
    score = contrast_ratio(to_hex(candidate), to_hex(bg)) * 2
    for existing in existing_colors:
        score += delta_e(candidate, existing) * 10
    low, high = PREFERRED_CHROMA_RANGE
    if low <= candidate.C <= high:
        score += 5
    return score


def select_best_candidate(candidates, bg, existing_colors):
    """Highest scoring candidate; the first one wins ties."""
    best = candidates[0]
    best_score = float("-inf")
    for candidate in candidates:
        score = score_candidate(candidate, bg, existing_colors)
        if score > best_score:
            best_score = score
            best = candidate
    return best


def construct_brand_colors(
    hues,
    bg,
    rng,
    saturation_level,
    brightness_level,
    contrast_level,
    mode="light",
):
    """Build primary, secondary and accent for one mode.

    Candidate sampling only picks the hue. Lightness and chroma of the final
    colors come from the sliders, not from the winning sample.

    Args:
        hues: Harmony hues; slots 0-2 feed primary, secondary and accent
        bg: Background OklchColor the candidates are scored against
        rng: SeededRandom for the chroma samples
        saturation_level: -5..5, sets the chroma budget
        brightness_level: -5..5, sets the base lightness
        contrast_level: -5..5, offsets primary lightness
        mode: "light" or "dark"

    Returns:
        BrandColors of OklchColor values
    """
    profile = BRAND_PROFILES[mode]
    base_l = profile.base_lightness + brightness_level * profile.brightness_step
    base_c = chroma_budget(saturation_level, profile.chroma_floor, profile.chroma_span)
    contrast_mod = contrast_level * profile.contrast_step

    primary_sample = select_best_candidate(
        generate_chroma_samples(hues[0], base_l, rng), bg, []
    )
    primary = clamp_to_srgb_gamut(
        OklchColor(
            L=_clamp(base_l + contrast_mod, profile.primary_band),
            C=max(0.03, base_c),
            H=primary_sample.H,
        )
    )

    secondary_l = _clamp(base_l + profile.secondary_offset, profile.secondary_band)
    secondary_sample = select_best_candidate(
        generate_chroma_samples(hues[1], secondary_l, rng), bg, [primary]
    )
    secondary = clamp_to_srgb_gamut(
        OklchColor(
            L=secondary_l,
            C=max(0.02, base_c * SECONDARY_CHROMA_FACTOR),
            H=secondary_sample.H,
        )
    )

    accent_l = _clamp(base_l + profile.accent_offset, profile.accent_band)
    accent_sample = select_best_candidate(
        generate_chroma_samples(hues[2], accent_l, rng), bg, [primary, secondary]
    )
    accent = clamp_to_srgb_gamut(
        OklchColor(
            L=accent_l,
            C=max(0.03, base_c * ACCENT_CHROMA_FACTOR),
            H=accent_sample.H,
        )
    )

    return BrandColors(primary=primary, secondary=secondary, accent=accent)


def build_ring(primary, mode="light"):
    profile = BRAND_PROFILES[mode]
    return adjust_chroma(primary._replace(L=profile.ring_lightness), profile.ring_chroma)
