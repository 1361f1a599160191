"""
OKLCH color math.

All palette computation happens in OKLCH so that equal numeric steps look like
roughly equal perceptual steps. Conversions follow the OKLab reference
matrices; the matrix products use numpy.
"""

import math
from collections import namedtuple

import numpy as np

from .color import hex_to_rgb, rgb_to_hex

OklchColor = namedtuple("OklchColor", ["L", "C", "H"])

# Below this chroma a hue is numerically meaningless
ACHROMATIC_CHROMA = 1e-4

# Tolerance on the 0-1 sRGB scale when testing gamut membership
GAMUT_EPSILON = 1e-4

GAMUT_BISECTION_STEPS = 24

_LINEAR_SRGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)

_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)

_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)

_LMS_TO_LINEAR_SRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

# Tint/shade ladder used by generate_scale: step -> (lightness, chroma factor)
SCALE_STEPS = {
    50: (0.97, 0.25),
    100: (0.93, 0.40),
    200: (0.86, 0.60),
    300: (0.77, 0.80),
    400: (0.67, 0.95),
    500: (None, 1.00),
    600: (0.48, 0.95),
    700: (0.40, 0.85),
    800: (0.32, 0.70),
    900: (0.24, 0.55),
}


def normalize(color):
    """Clamp L to [0, 1], C to >= 0 and wrap H into [0, 360)."""
    L, C, H = color
    return OklchColor(
        L=max(0.0, min(1.0, float(L))),
        C=max(0.0, float(C)),
        H=float(H) % 360.0,
    )


def srgb_to_linear(channels):
    """sRGB (0-1) to linear light, gamma 2.4 with the 0.04045 breakpoint."""
    c = np.asarray(channels, dtype=float)
    return np.where(c <= 0.04045, c / 12.92, ((np.abs(c) + 0.055) / 1.055) ** 2.4)


def linear_to_srgb(channels):
    c = np.asarray(channels, dtype=float)
    return np.where(
        c <= 0.0031308, c * 12.92, 1.055 * np.abs(c) ** (1 / 2.4) - 0.055
    )


def oklab_to_oklch(L, a, b, default_hue=0.0):
    C = math.hypot(a, b)
    if C < ACHROMATIC_CHROMA:
        H = default_hue
    else:
        H = math.degrees(math.atan2(b, a))
    return normalize((L, C, H))


def oklch_to_oklab(color):
    L, C, H = normalize(color)
    h_rad = math.radians(H)
    return L, C * math.cos(h_rad), C * math.sin(h_rad)


def to_oklch(hex_color, default_hue=0.0):
    """Convert a hex color to OklchColor.

    Args:
        hex_color: ``#rrggbb`` string (malformed input is treated as black)
        default_hue: Hue reported when the color is achromatic

    Returns:
        OklchColor
    """
    rgb = np.array(hex_to_rgb(hex_color), dtype=float) / 255
    lms = _LINEAR_SRGB_TO_LMS @ srgb_to_linear(rgb)
    L, a, b = _LMS_TO_OKLAB @ np.cbrt(lms)
    return oklab_to_oklch(float(L), float(a), float(b), default_hue=default_hue)


def oklch_to_rgb(color):
    """Unclipped sRGB channels (0-255 floats) for an OKLCH color."""
    lab = np.array(oklch_to_oklab(color))
    lms = (_OKLAB_TO_LMS @ lab) ** 3
    return linear_to_srgb(_LMS_TO_LINEAR_SRGB @ lms) * 255


def is_in_gamut(color):
    rgb = oklch_to_rgb(color) / 255
    return bool(np.all(rgb >= -GAMUT_EPSILON) and np.all(rgb <= 1 + GAMUT_EPSILON))


def to_hex(color):
    r, g, b = np.clip(oklch_to_rgb(color), 0, 255)
    return rgb_to_hex(r, g, b)


def clamp_to_srgb_gamut(color):
    """Reduce chroma at fixed lightness and hue until the color fits sRGB."""
    color = normalize(color)
    if is_in_gamut(color):
        return color

    low, high = 0.0, color.C
    for _ in range(GAMUT_BISECTION_STEPS):
        mid = (low + high) / 2
        if is_in_gamut(color._replace(C=mid)):
            low = mid
        else:
            high = mid
    return color._replace(C=low)


def delta_e(color1, color2):
    """Euclidean distance in OKLab."""
    L1, a1, b1 = oklch_to_oklab(color1)
    L2, a2, b2 = oklch_to_oklab(color2)
    return math.sqrt((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def hue_difference(h1, h2):
    """Shortest angular distance between two hues, 0-180."""
    diff = abs(h1 - h2) % 360
    return min(diff, 360 - diff)


def adjust_chroma(color, factor):
    return clamp_to_srgb_gamut(color._replace(C=color.C * factor))


def create_neutral(lightness, hue=0.0, chroma=0.0):
    return clamp_to_srgb_gamut(OklchColor(L=lightness, C=chroma, H=hue))


def generate_scale(color):
    """Build a 50-900 tint/shade scale around ``color`` (step 500 is the color itself).

    Returns:
        dict mapping scale step to hex string
    """
    color = clamp_to_srgb_gamut(color)
    scale = {}
    for step, (lightness, chroma_factor) in SCALE_STEPS.items():
        if lightness is None:
            scale[step] = to_hex(color)
            continue
        shade = OklchColor(L=lightness, C=color.C * chroma_factor, H=color.H)
        scale[step] = to_hex(clamp_to_srgb_gamut(shade))
    return scale
