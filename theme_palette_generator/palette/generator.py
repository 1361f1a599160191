import logging
import secrets

from ..color import normalize_hex
from ..harmony import harmony_hues, resolve_mode
from ..oklch import ACHROMATIC_CHROMA, OklchColor, clamp_to_srgb_gamut, to_hex, to_oklch
from ..scoring import evaluate_palette, select_best_palette
from ..seeded_random import SeededRandom
from .brand import build_ring, construct_brand_colors
from .derive import derive_mode
from .neutrals import build_neutral_foundation
from .status import construct_status_colors
from .tokens import PaletteResult, build_theme_tokens

logger = logging.getLogger(__name__)

LEVEL_RANGE = (-5, 5)
OVERRIDE_SLOTS = 5
WARMTH_RANGE = (-0.5, 0.5)

# Lightness/chroma of the swatch reported as the seed when none was given
SEED_SWATCH_LIGHTNESS = 0.5
SEED_SWATCH_CHROMA = 0.15


def clamp_level(level):
    low, high = LEVEL_RANGE
    return max(low, min(high, level))


def _resolve_base_hue(seed_color, override_palette, rng):
    if seed_color:
        seed = to_oklch(seed_color)
        if seed.C >= ACHROMATIC_CHROMA:
            return seed.H
        logger.debug("Seed color %s is achromatic, ignoring its hue", seed_color)
    if override_palette and override_palette[0]:
        override = to_oklch(override_palette[0])
        if override.C >= ACHROMATIC_CHROMA:
            return override.H
        logger.debug("Override %s is achromatic, ignoring its hue", override_palette[0])
    return rng.next_int(0, 359)


def _check_overrides(override_palette):
    if override_palette is None or len(override_palette) == OVERRIDE_SLOTS:
        return override_palette
    logger.warning(
        "Ignoring override palette with %d entries, expected %d",
        len(override_palette),
        OVERRIDE_SLOTS,
    )
    return None


def _apply_overrides(hues, override_palette):
    if override_palette is None:
        return hues
    resolved = list(hues)
    for i, hex_color in enumerate(override_palette):
        if hex_color:
            resolved[i] = to_oklch(hex_color, default_hue=hues[i]).H
    return resolved


def generate(
    mode="random",
    seed_color=None,
    saturation_level=0,
    contrast_level=0,
    brightness_level=0,
    override_palette=None,
    dark_first=False,
    rng_seed=None,
):
    """Generate a paired light/dark theme.

    Args:
        mode: Harmony mode name or "random"
        seed_color: Optional hex color; fixes the base hue and seeds the rng
        saturation_level: -5..5
        contrast_level: -5..5
        brightness_level: -5..5
        override_palette: Optional list of exactly five hex strings overriding
            the primary, secondary, accent, good and bad hues; "" keeps the
            computed hue for that slot
        dark_first: Build dark mode from the inputs and derive light from it
        rng_seed: Seed used when no seed color is given (fresh entropy if None)

    Returns:
        PaletteResult
    """
    saturation_level = clamp_level(saturation_level)
    contrast_level = clamp_level(contrast_level)
    brightness_level = clamp_level(brightness_level)

    if seed_color:
        normalized = normalize_hex(seed_color)
        if normalized is None:
            logger.warning("Malformed seed color %r, treating as black", seed_color)
            normalized = "#000000"
        seed_color = normalized

    override_palette = _check_overrides(override_palette)

    if seed_color:
        rng = SeededRandom(seed_color)
    elif rng_seed is not None:
        rng = SeededRandom(rng_seed)
    else:
        rng = SeededRandom(secrets.token_hex(8))

    base_hue = _resolve_base_hue(seed_color, override_palette, rng)
    harmony_mode = resolve_mode(mode, rng)
    hues = _apply_overrides(harmony_hues(base_hue, harmony_mode), override_palette)

    source_mode = "dark" if dark_first else "light"
    target_mode = "light" if dark_first else "dark"
    warmth = rng.next_float(*WARMTH_RANGE)

    neutrals = build_neutral_foundation(
        base_hue,
        warmth,
        contrast_level,
        brightness_level,
        saturation_level,
        mode=source_mode,
    )
    brand = construct_brand_colors(
        hues,
        neutrals.bg,
        rng,
        saturation_level,
        brightness_level,
        contrast_level,
        mode=source_mode,
    )
    status = construct_status_colors(
        hues, saturation_level, brightness_level, mode=source_mode
    )

    colors = dict(neutrals._asdict())
    colors.update(brand._asdict())
    colors.update(status._asdict())
    colors["ring"] = build_ring(brand.primary, mode=source_mode)
    source = build_theme_tokens(colors)
    derived = derive_mode(source, target_mode, brightness_level=brightness_level)

    light, dark = (derived, source) if dark_first else (source, derived)
    score = evaluate_palette(source, base_hue, harmony_mode)
    logger.debug(
        "Generated %s palette (base hue %.1f, %s-first, score %.1f)",
        harmony_mode,
        base_hue,
        source_mode,
        score.total,
    )

    return PaletteResult(
        light=light,
        dark=dark,
        seed=seed_color
        or to_hex(
            clamp_to_srgb_gamut(
                OklchColor(SEED_SWATCH_LIGHTNESS, SEED_SWATCH_CHROMA, base_hue)
            )
        ),
        base_hue=base_hue,
        mode=harmony_mode,
        score=score.total,
    )


def generate_best(attempts=5, rng_seed=None, **options):
    """Generate several candidates and keep the highest scoring one.

    Candidate ``i`` is seeded with ``f"{rng_seed}-{i}"`` so a fixed ``rng_seed``
    reproduces the same winner. ``options`` are passed on to ``generate``;
    with a seed color every candidate would be identical, so its hue is kept
    through the override palette instead.
    """
    if rng_seed is None:
        rng_seed = secrets.token_hex(8)
    seed_color = options.pop("seed_color", None)
    if seed_color and not options.get("override_palette"):
        options["override_palette"] = [seed_color, "", "", "", ""]

    candidates = [
        generate(rng_seed=f"{rng_seed}-{i}", **options) for i in range(max(1, attempts))
    ]
    return select_best_palette(candidates)
