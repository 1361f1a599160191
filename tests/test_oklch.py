import random

import pytest
from numpy.testing import assert_allclose

from theme_palette_generator.color import hex_to_rgb, rgb_to_hex
from theme_palette_generator.oklch import (
    OklchColor,
    adjust_chroma,
    clamp_to_srgb_gamut,
    create_neutral,
    delta_e,
    generate_scale,
    hue_difference,
    is_in_gamut,
    normalize,
    oklch_to_rgb,
    to_hex,
    to_oklch,
)


def test_reference_values():
    red = to_oklch("#ff0000")
    assert red.L == pytest.approx(0.628, abs=1e-3)
    assert red.C == pytest.approx(0.2577, abs=1e-3)
    assert red.H == pytest.approx(29.23, abs=0.1)

    white = to_oklch("#ffffff")
    assert white.L == pytest.approx(1.0, abs=1e-4)
    assert white.C < 1e-4


def test_round_trip_1000_random_colors():
    rng = random.Random(1234)
    for _ in range(1000):
        rgb = tuple(rng.randint(0, 255) for _ in range(3))
        back = hex_to_rgb(to_hex(to_oklch(rgb_to_hex(*rgb))))
        assert all(abs(a - b) <= 1 for a, b in zip(rgb, back)), rgb


def test_blue_heavy_colors_survive_round_trip():
    for hex_color in ("#3b82f6", "#e13b03", "#0000ff", "#7c3aed", "#06b6d4"):
        assert to_hex(to_oklch(hex_color)) == hex_color
    assert_allclose(oklch_to_rgb(to_oklch("#0000ff")), [0, 0, 255], atol=1e-3)
    assert to_hex(OklchColor(0.4520, 0.3132, 264.05)) == "#0000ff"


def test_achromatic_hue_uses_default():
    assert to_oklch("#808080", default_hue=123.0).H == 123.0
    assert to_oklch("#000000").H == 0.0


def test_normalize_clamps_out_of_range_input():
    color = normalize((1.5, -0.2, 400))
    assert color == OklchColor(1.0, 0.0, 40.0)


def test_clamp_reduces_chroma_only():
    clamped = clamp_to_srgb_gamut(OklchColor(0.7, 0.4, 150))
    assert clamped.L == 0.7
    assert clamped.H == 150
    assert 0 < clamped.C < 0.4
    assert is_in_gamut(clamped)


def test_clamp_keeps_in_gamut_color():
    color = OklchColor(0.6, 0.05, 200.0)
    assert clamp_to_srgb_gamut(color) == color


def test_clamp_at_white_removes_chroma():
    clamped = clamp_to_srgb_gamut(OklchColor(1.2, 0.1, 90))
    assert clamped.L == 1.0
    assert clamped.C < 0.01


def test_delta_e_and_hue_difference():
    color = to_oklch("#3b82f6")
    assert delta_e(color, color) == 0
    assert delta_e(to_oklch("#000000"), to_oklch("#ffffff")) == pytest.approx(1.0, abs=1e-3)
    assert hue_difference(350, 10) == 20
    assert hue_difference(90, 270) == 180


def test_generate_scale():
    color = clamp_to_srgb_gamut(to_oklch("#3b82f6"))
    scale = generate_scale(color)
    assert list(scale) == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900]
    assert scale[500] == to_hex(color)
    lightness = [to_oklch(hex_color).L for hex_color in scale.values()]
    assert lightness == sorted(lightness, reverse=True)


def test_adjust_chroma_stays_in_gamut():
    base = OklchColor(0.6, 0.12, 30.0)
    assert adjust_chroma(base, 0.5) == OklchColor(0.6, 0.06, 30.0)
    vivid = adjust_chroma(base, 10)
    assert vivid.L == 0.6
    assert vivid.H == 30.0
    assert 0.12 < vivid.C < 1.2
    assert is_in_gamut(vivid)


def test_create_neutral():
    neutral = create_neutral(0.5)
    assert neutral == OklchColor(0.5, 0.0, 0.0)
    assert to_hex(neutral) == to_hex(OklchColor(0.5, 0.0, 200.0))
