from .contrast import contrast_ratio, meets_wcag, select_foreground_hex
from .harmony import HARMONY_MODES
from .oklch import OklchColor, clamp_to_srgb_gamut, to_hex, to_oklch
from .palette import (
    PaletteResult,
    ThemeTokens,
    derive_dark_mode,
    derive_light_mode,
    generate,
    generate_best,
)
from .scoring import evaluate_palette

__version__ = "0.1.0"

__all__ = [
    "HARMONY_MODES",
    "OklchColor",
    "PaletteResult",
    "ThemeTokens",
    "clamp_to_srgb_gamut",
    "contrast_ratio",
    "derive_dark_mode",
    "derive_light_mode",
    "evaluate_palette",
    "generate",
    "generate_best",
    "meets_wcag",
    "select_foreground_hex",
    "to_hex",
    "to_oklch",
]
