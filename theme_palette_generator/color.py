import colorsys
import logging
import re

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def _clamp_channel(value):
    return max(0, min(255, int(round(value))))


def rgb_to_hex(r, g, b):
    r, g, b = _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(value):
    """Return ``value`` as lowercase ``#rrggbb``, or None if it is not a hex color."""
    if not isinstance(value, str):
        return None
    match = HEX_PATTERN.match(value.strip())
    if not match:
        return None
    return "#" + "".join(match.groups()).lower()


def is_valid_hex(value):
    return normalize_hex(value) is not None


def hex_to_rgb(hex_color):
    """Parse a hex color into an (r, g, b) tuple.

    Malformed input falls back to black rather than raising.
    """
    normalized = normalize_hex(hex_color)
    if normalized is None:
        logger.warning("Malformed hex color %r, treating as black", hex_color)
        return (0, 0, 0)
    hex_color = normalized.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hsl(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (h * 360, s * 100, l * 100)


def hsl_to_rgb(h, s, l):
    h = (h % 360) / 360
    s = max(0, min(100, s)) / 100
    l = max(0, min(100, l)) / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (_clamp_channel(r * 255), _clamp_channel(g * 255), _clamp_channel(b * 255))


def hex_to_hsl(hex_color):
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def srgb_channel_to_linear(c):
    """Linearize one 0-255 sRGB channel (WCAG definition)."""
    c = c / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color):
    """Calculate relative luminance per WCAG 2.0"""
    r, g, b = hex_to_rgb(hex_color)
    return (
        0.2126 * srgb_channel_to_linear(r)
        + 0.7152 * srgb_channel_to_linear(g)
        + 0.0722 * srgb_channel_to_linear(b)
    )
