"""Display strings for a hex color in the formats the theme editor offers."""

import math

from .color import hex_to_rgb, hex_to_hsl, srgb_channel_to_linear
from .oklch import to_oklch

COLOR_FORMATS = ("hex", "rgb", "hsl", "oklch", "lab", "lch", "cmyk", "display-p3")

# D65 reference white
_XN, _YN, _ZN = 95.047, 100.000, 108.883


def _linear_rgb(hex_color):
    return tuple(srgb_channel_to_linear(c) for c in hex_to_rgb(hex_color))


def hex_to_lab(hex_color):
    """CIE L*a*b* (D65)."""
    lr, lg, lb = _linear_rgb(hex_color)
    x = (lr * 0.4124564 + lg * 0.3575761 + lb * 0.1804375) * 100
    y = (lr * 0.2126729 + lg * 0.7151522 + lb * 0.0721750) * 100
    z = (lr * 0.0193339 + lg * 0.1191920 + lb * 0.9503041) * 100

    def f(t):
        return t ** (1 / 3) if t > 0.008856 else 7.787 * t + 16 / 116

    fx, fy, fz = f(x / _XN), f(y / _YN), f(z / _ZN)
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def hex_to_lch(hex_color):
    L, a, b = hex_to_lab(hex_color)
    h = math.degrees(math.atan2(b, a)) % 360
    return (L, math.hypot(a, b), h)


def hex_to_cmyk(hex_color):
    """CMYK percentages (naive, no color profile)."""
    r, g, b = (c / 255 for c in hex_to_rgb(hex_color))
    k = 1 - max(r, g, b)
    if k == 1:
        return (0, 0, 0, 100)
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return tuple(round(v * 100) for v in (c, m, y, k))


def hex_to_display_p3(hex_color):
    """Display P3 channels (0-1) for an sRGB hex color."""
    lr, lg, lb = _linear_rgb(hex_color)
    r = lr * 0.8224621 + lg * 0.1775380
    g = lr * 0.0331941 + lg * 0.9668058
    b = lr * 0.0170827 + lg * 0.0723974 + lb * 0.9105199

    def gamma(c):
        return c * 12.92 if c <= 0.0031308 else 1.055 * c ** (1 / 2.4) - 0.055

    return tuple(max(0.0, min(1.0, gamma(c))) for c in (r, g, b))


def hex_to_oklch_string(hex_color):
    color = to_oklch(hex_color)
    return f"{color.L * 100:.1f}% {color.C:.3f} {color.H:.1f}"


def format_color(hex_color, color_format="hex"):
    if color_format == "rgb":
        return "rgb({}, {}, {})".format(*hex_to_rgb(hex_color))
    if color_format == "hsl":
        h, s, l = hex_to_hsl(hex_color)
        return f"hsl({round(h)}, {round(s)}%, {round(l)}%)"
    if color_format == "oklch":
        return f"oklch({hex_to_oklch_string(hex_color)})"
    if color_format == "lab":
        L, a, b = hex_to_lab(hex_color)
        return f"lab({L:.1f}% {a:.2f} {b:.2f})"
    if color_format == "lch":
        L, c, h = hex_to_lch(hex_color)
        return f"lch({L:.1f}% {c:.2f} {h:.1f})"
    if color_format == "cmyk":
        return "cmyk({}%, {}%, {}%, {}%)".format(*hex_to_cmyk(hex_color))
    if color_format == "display-p3":
        return "color(display-p3 {:.4f} {:.4f} {:.4f})".format(*hex_to_display_p3(hex_color))
    return hex_color.upper()
