import itertools

import pytest

from theme_palette_generator.contrast import contrast_ratio
from theme_palette_generator.oklch import to_hex
from theme_palette_generator.palette.neutrals import (
    COOL_HUE,
    NEUTRAL_BANDS,
    NEUTRAL_TARGETS,
    WARM_HUE,
    build_neutral_foundation,
    clamp_to_band,
)

LEVELS = (-5, 0, 5)


def test_defaults_hit_targets():
    neutrals = build_neutral_foundation(200, 0.2, 0)
    for role, target in NEUTRAL_TARGETS["light"].items():
        assert getattr(neutrals, role).L == pytest.approx(target)
        assert getattr(neutrals, role).C == 0


@pytest.mark.parametrize("mode", ["light", "dark"])
def test_lightness_stays_in_band(mode):
    for contrast, brightness, saturation in itertools.product(LEVELS, repeat=3):
        neutrals = build_neutral_foundation(
            120, -0.1, contrast, brightness, saturation, mode=mode
        )
        for role, (low, high) in NEUTRAL_BANDS[mode].items():
            assert low <= getattr(neutrals, role).L <= high


@pytest.mark.parametrize("mode", ["light", "dark"])
def test_text_never_crosses_background(mode):
    for contrast, brightness, saturation in itertools.product(LEVELS, repeat=3):
        neutrals = build_neutral_foundation(
            300, 0.4, contrast, brightness, saturation, mode=mode
        )
        bg, text, muted = to_hex(neutrals.bg), to_hex(neutrals.text), to_hex(neutrals.text_muted)
        assert contrast_ratio(text, bg) >= 4.5
        assert contrast_ratio(muted, bg) >= 3.0
        if mode == "light":
            assert neutrals.text.L < neutrals.text_muted.L < neutrals.bg.L
        else:
            assert neutrals.text.L > neutrals.text_muted.L > neutrals.bg.L


def test_contrast_level_widens_gap():
    low = build_neutral_foundation(0, 1, -3)
    high = build_neutral_foundation(0, 1, 3)
    assert high.bg.L - high.text.L > low.bg.L - low.text.L


def test_warmth_picks_surface_hue_and_text_keeps_base_hue():
    warm = build_neutral_foundation(200, 0.3, 0, saturation_level=5)
    cool = build_neutral_foundation(200, -0.3, 0, saturation_level=5)
    assert warm.bg.H == WARM_HUE
    assert cool.bg.H == COOL_HUE
    assert warm.text.H == 200


def test_only_positive_saturation_tints():
    assert build_neutral_foundation(200, 0.3, 0, saturation_level=-5).bg.C == 0
    tinted = build_neutral_foundation(200, 0.3, 0, saturation_level=5)
    assert tinted.bg.C > tinted.card.C > 0


def test_clamp_to_band():
    assert clamp_to_band(1.2, "light", "bg") == 0.99
    assert clamp_to_band(0.5, "dark", "bg") == 0.25
