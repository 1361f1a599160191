"""
Palette scoring.

Annotates a finished theme with a 0-100 figure of merit built from three
components: readability of text/foreground pairs, perceptual separation of the
colored roles, and how closely the brand hues follow the harmony mode. The
score never rejects a palette; callers decide what to do with it.
"""

from collections import namedtuple
from itertools import combinations

from .contrast import MIN_MUTED_CONTRAST, MIN_TEXT_CONTRAST, contrast_ratio
from .harmony import get_harmony
from .oklch import delta_e, hue_difference, to_oklch

PaletteScore = namedtuple(
    "PaletteScore", ["total", "contrast", "distinction", "harmony", "issues"]
)

ReadabilityIssue = namedtuple("ReadabilityIssue", ["token", "against", "ratio", "required"])

# (foreground, background, minimum ratio)
READABILITY_PAIRS = [
    ("text", "bg", MIN_TEXT_CONTRAST),
    ("text", "card", MIN_TEXT_CONTRAST),
    ("text_muted", "bg", MIN_MUTED_CONTRAST),
    ("text_on_color", "primary", MIN_TEXT_CONTRAST),
    ("primary_fg", "primary", MIN_TEXT_CONTRAST),
    ("secondary_fg", "secondary", MIN_TEXT_CONTRAST),
    ("accent_fg", "accent", MIN_TEXT_CONTRAST),
    ("good_fg", "good", MIN_TEXT_CONTRAST),
    ("warn_fg", "warn", MIN_TEXT_CONTRAST),
    ("bad_fg", "bad", MIN_TEXT_CONTRAST),
]

DISTINCTION_GROUPS = [
    ("primary", "secondary", "accent"),
    ("good", "warn", "bad"),
]

# OKLab distance at which two roles count as fully distinct
DISTINCT_DELTA_E = 0.12

# Hue drift (degrees) at which a brand role no longer counts as harmonic
HARMONY_TOLERANCE = 45.0

# Brand colors below this chroma carry no meaningful hue
HARMONY_MIN_CHROMA = 0.03

SCORE_WEIGHTS = {
    "contrast": 0.5,
    "distinction": 0.25,
    "harmony": 0.25,
}


def check_readability(tokens):
    """List every foreground/background pair that misses its minimum ratio."""
    issues = []
    for fg, bg, required in READABILITY_PAIRS:
        ratio = contrast_ratio(getattr(tokens, fg), getattr(tokens, bg))
        if ratio < required:
            issues.append(ReadabilityIssue(fg, bg, ratio, required))
    return issues


def _contrast_score(tokens):
    fractions = [
        min(1.0, contrast_ratio(getattr(tokens, fg), getattr(tokens, bg)) / required)
        for fg, bg, required in READABILITY_PAIRS
    ]
    return 100 * sum(fractions) / len(fractions)


def _distinction_score(tokens):
    fractions = []
    for group in DISTINCTION_GROUPS:
        colors = [to_oklch(getattr(tokens, role)) for role in group]
        for a, b in combinations(colors, 2):
            fractions.append(min(1.0, delta_e(a, b) / DISTINCT_DELTA_E))
    return 100 * sum(fractions) / len(fractions)


def _harmony_score(tokens, base_hue, mode):
    offsets = get_harmony(mode).offsets
    fractions = []
    for role, offset in zip(("primary", "secondary", "accent"), offsets):
        color = to_oklch(getattr(tokens, role))
        if color.C < HARMONY_MIN_CHROMA:
            continue
        drift = hue_difference(color.H, (base_hue + offset) % 360)
        fractions.append(max(0.0, 1 - drift / HARMONY_TOLERANCE))
    if not fractions:
        return 100.0
    return 100 * sum(fractions) / len(fractions)


def evaluate_palette(tokens, base_hue, mode):
    """Score one theme mode.

    Args:
        tokens: ThemeTokens to score
        base_hue: Base hue the palette was generated from
        mode: Resolved harmony mode name

    Returns:
        PaletteScore with components and the total on a 0-100 scale
    """
    contrast = _contrast_score(tokens)
    distinction = _distinction_score(tokens)
    harmony = _harmony_score(tokens, base_hue, mode)
    total = (
        contrast * SCORE_WEIGHTS["contrast"]
        + distinction * SCORE_WEIGHTS["distinction"]
        + harmony * SCORE_WEIGHTS["harmony"]
    )
    return PaletteScore(
        total=round(total, 1),
        contrast=round(contrast, 1),
        distinction=round(distinction, 1),
        harmony=round(harmony, 1),
        issues=check_readability(tokens),
    )


def select_best_palette(results):
    """Highest scoring PaletteResult; the earliest wins ties."""
    best = None
    for result in results:
        if best is None or result.score > best.score:
            best = result
    return best
