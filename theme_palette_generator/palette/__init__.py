from .derive import derive_dark_mode, derive_light_mode, derive_mode
from .generator import generate, generate_best
from .loader import load_tokens_from_json
from .tokens import PaletteResult, ThemeTokens, build_theme_tokens

__all__ = [
    "PaletteResult",
    "ThemeTokens",
    "build_theme_tokens",
    "derive_dark_mode",
    "derive_light_mode",
    "derive_mode",
    "generate",
    "generate_best",
    "load_tokens_from_json",
]
