from theme_palette_generator.palette import generate
from theme_palette_generator.report import generate_readability_report, print_palette


def test_report_for_generated_theme():
    result = generate("complementary", "#0ea5e9")
    report, issues = generate_readability_report(result.dark, True)
    assert issues == []
    assert "Theme: DARK" in report
    assert "ALL COLORS PASS CONTRAST REQUIREMENTS" in report
    assert "primaryFg" in report


def test_report_lists_failures():
    result = generate("complementary", "#0ea5e9")
    broken = result.light._replace(text_muted=result.light.bg)
    report, issues = generate_readability_report(broken, False)
    assert [(issue.token, issue.against) for issue in issues] == [("text_muted", "bg")]
    assert "ISSUES FOUND: 1" in report


def test_print_palette(capsys):
    result = generate("analogous", "#0ea5e9")
    print_palette(result.light, False, color_format="rgb")
    out = capsys.readouterr().out
    assert "THEME TOKENS (LIGHT THEME)" in out
    assert "textMuted" in out
    assert "rgb(" in out
