from .color import relative_luminance

# Contrast requirements
MIN_TEXT_CONTRAST = 4.5  # Body text and every *Fg token against its pair
MIN_MUTED_CONTRAST = 3.0  # Muted text against bg
MIN_LARGE_TEXT_CONTRAST = 3.0
MIN_AAA_CONTRAST = 7.0
MIN_AAA_LARGE_CONTRAST = 4.5

# Preferred foregrounds for text placed on colored surfaces
LIGHT_FOREGROUND = "#ffffff"
DARK_FOREGROUND = "#111111"

# Pure black or white always reaches at least ~4.58:1 against any color
PURE_WHITE = "#ffffff"
PURE_BLACK = "#000000"


def luminance_contrast(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(hex1, hex2):
    """WCAG contrast ratio between two hex colors (1.0 - 21.0)."""
    return luminance_contrast(relative_luminance(hex1), relative_luminance(hex2))


def meets_wcag(fg_hex, bg_hex, level="AA", large_text=False):
    if level == "AAA":
        required = MIN_AAA_LARGE_CONTRAST if large_text else MIN_AAA_CONTRAST
    else:
        required = MIN_LARGE_TEXT_CONTRAST if large_text else MIN_TEXT_CONTRAST
    return contrast_ratio(fg_hex, bg_hex) >= required


def select_foreground_hex(bg_hex, min_contrast=MIN_TEXT_CONTRAST):
    """Pick a readable foreground for text drawn on ``bg_hex``.

    Tries the soft light/dark foregrounds first and falls back to pure
    white/black when the better soft option misses ``min_contrast``.
    """
    candidates = [
        (contrast_ratio(LIGHT_FOREGROUND, bg_hex), LIGHT_FOREGROUND),
        (contrast_ratio(DARK_FOREGROUND, bg_hex), DARK_FOREGROUND),
    ]
    best_ratio, best = max(candidates)
    if best_ratio >= min_contrast:
        return best

    white = contrast_ratio(PURE_WHITE, bg_hex)
    black = contrast_ratio(PURE_BLACK, bg_hex)
    return PURE_WHITE if white >= black else PURE_BLACK
