import pytest

from theme_palette_generator.palette import PaletteResult, generate
from theme_palette_generator.scoring import (
    READABILITY_PAIRS,
    ReadabilityIssue,
    check_readability,
    evaluate_palette,
    select_best_palette,
)


@pytest.fixture
def result():
    return generate("monochrome", "#3B82F6")


def test_generated_palette_has_no_issues(result):
    score = evaluate_palette(result.light, result.base_hue, result.mode)
    assert score.issues == []
    assert score.contrast == 100.0
    assert 0 <= score.total <= 100
    assert score.total == result.score


def test_monochrome_palette_is_harmonic(result):
    score = evaluate_palette(result.light, result.base_hue, "monochrome")
    assert score.harmony >= 95


def test_wrong_base_hue_lowers_harmony(result):
    right = evaluate_palette(result.light, result.base_hue, "monochrome")
    wrong = evaluate_palette(result.light, (result.base_hue + 180) % 360, "monochrome")
    assert wrong.harmony < right.harmony
    assert wrong.total < right.total


def test_unreadable_text_is_reported(result):
    broken = result.light._replace(text=result.light.bg)
    issues = check_readability(broken)
    assert ReadabilityIssue("text", "bg", 1.0, 4.5) in issues
    assert evaluate_palette(broken, result.base_hue, result.mode).contrast < 100


def test_identical_roles_score_no_distinction(result):
    flat = result.light._replace(
        secondary=result.light.primary,
        accent=result.light.primary,
        warn=result.light.good,
        bad=result.light.good,
    )
    assert evaluate_palette(flat, result.base_hue, result.mode).distinction == 0


def test_readability_pairs_cover_every_foreground():
    covered = {fg for fg, _, _ in READABILITY_PAIRS}
    assert {"text", "text_muted", "primary_fg", "bad_fg"} <= covered


def test_select_best_palette_prefers_first_on_tie(result):
    low = result._replace(score=10.0)
    high = result._replace(score=90.0)
    tied = result._replace(score=90.0, seed="#000000")
    assert select_best_palette([low, high, tied]) is high
    assert isinstance(high, PaletteResult)
