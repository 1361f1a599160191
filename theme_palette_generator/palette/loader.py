import json

from ..color import normalize_hex, relative_luminance
from .tokens import ThemeTokens


def load_tokens_from_json(json_path):
    """Load a theme from JSON, normalizing hex strings.

    Args:
        json_path: Path to a JSON object mapping token names to hex colors

    Returns:
        tuple: (ThemeTokens, is_dark_theme bool)
    """
    with open(json_path) as f:
        data = json.load(f)

    tokens = {}
    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            continue
        normalized = normalize_hex(value)
        if normalized is None:
            raise ValueError(f"Token {key!r} is not a hex color: {value!r}")
        tokens[key] = normalized

    theme = ThemeTokens.from_dict(tokens)

    # Detect dark/light theme from background luminance
    is_dark_theme = relative_luminance(theme.bg) < 0.5

    return theme, is_dark_theme
