import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

HarmonyConfig = namedtuple("HarmonyConfig", ["offsets", "chroma_variance"])

# Offsets feed the primary, secondary, accent, good and bad slots in that order
HARMONY_MODES = {
    "monochrome": HarmonyConfig((0, 0, 0, 0, 0), 0.3),
    "analogous": HarmonyConfig((0, 30, -30, 15, -15), 0.15),
    "complementary": HarmonyConfig((0, 180, 30, 210, -30), 0.2),
    "split-complementary": HarmonyConfig((0, 150, 210, 30, 180), 0.2),
    "triadic": HarmonyConfig((0, 120, 240, 60, 180), 0.15),
    "tetradic": HarmonyConfig((0, 90, 180, 270, 45), 0.2),
    "compound": HarmonyConfig((0, 165, 180, 195, 30), 0.25),
    "triadic-split": HarmonyConfig((0, 120, 150, 240, 270), 0.2),
}

RANDOM_MODE = "random"
DEFAULT_MODE = "analogous"
RANDOM_MODES = tuple(name for name in HARMONY_MODES if name != "monochrome")
MODE_CHOICES = (RANDOM_MODE,) + tuple(HARMONY_MODES)


def resolve_mode(mode, rng):
    """Turn a requested mode into a concrete harmony name.

    ``random`` draws one of RANDOM_MODES from ``rng``; unknown names fall back
    to the analogous harmony.
    """
    if mode == RANDOM_MODE:
        return rng.pick(RANDOM_MODES)
    if mode not in HARMONY_MODES:
        logger.warning("Unknown harmony mode %r, using %s", mode, DEFAULT_MODE)
        return DEFAULT_MODE
    return mode


def get_harmony(mode):
    return HARMONY_MODES.get(mode, HARMONY_MODES[DEFAULT_MODE])


def harmony_hues(base_hue, mode):
    """Five target hues (degrees) around ``base_hue`` for ``mode``."""
    return [(base_hue + offset + 360) % 360 for offset in get_harmony(mode).offsets]
