from .contrast import MIN_MUTED_CONTRAST, MIN_TEXT_CONTRAST, contrast_ratio
from .formats import format_color
from .oklch import to_oklch
from .palette.tokens import FOREGROUND_PAIRS, TOKEN_KEYS
from .scoring import ReadabilityIssue

PALETTE_CATEGORIES = [
    ("NEUTRALS", ["bg", "card", "card2", "border"]),
    ("TEXT", ["text", "text_muted", "text_on_color"]),
    ("BRAND", ["primary", "primary_fg", "secondary", "secondary_fg", "accent", "accent_fg", "ring"]),
    ("STATUS", ["good", "good_fg", "warn", "warn_fg", "bad", "bad_fg"]),
]


def generate_readability_report(tokens, is_dark_theme):
    """Generate a detailed readability report for inspection"""
    bg = tokens.bg
    bg_lch = to_oklch(bg)

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {'DARK' if is_dark_theme else 'LIGHT'}")
    report.append(f"Background:       {bg} (L: {bg_lch.L:.3f}, C: {bg_lch.C:.3f})")
    report.append("")

    categories = [
        ("TEXT (main)", [("text", "bg"), ("text", "card")], MIN_TEXT_CONTRAST),
        ("TEXT (muted)", [("text_muted", "bg")], MIN_MUTED_CONTRAST),
        ("FOREGROUNDS ON COLOR", list(FOREGROUND_PAIRS.items()), MIN_TEXT_CONTRAST),
    ]

    issues = []

    for cat_name, pairs, min_contrast in categories:
        report.append(f"\n{cat_name} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for fg_role, bg_role in pairs:
            fg_hex = getattr(tokens, fg_role)
            bg_hex = getattr(tokens, bg_role)
            ratio = contrast_ratio(fg_hex, bg_hex)

            status = "✓" if ratio >= min_contrast else "✗ FAIL"
            if ratio < min_contrast:
                issues.append(ReadabilityIssue(fg_role, bg_role, ratio, min_contrast))

            report.append(
                f"  {TOKEN_KEYS[fg_role]:12} {fg_hex}  on {TOKEN_KEYS[bg_role]:10} {ratio:5.2f}:1  {status}"
            )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for issue in issues:
            report.append(
                f"  - {TOKEN_KEYS[issue.token]}: {getattr(tokens, issue.token)} has "
                f"{issue.ratio:.1f}:1 on {TOKEN_KEYS[issue.against]}, needs {issue.required}:1"
            )
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(tokens, is_dark_theme, color_format="hex"):
    """Print palette info"""
    bg = tokens.bg

    print("\n" + "=" * 60)
    print(f"THEME TOKENS ({'DARK' if is_dark_theme else 'LIGHT'} THEME)")
    print("=" * 60)

    for cat_name, roles in PALETTE_CATEGORIES:
        print(f"\n{cat_name}:")
        for role in roles:
            value = getattr(tokens, role)
            contrast = contrast_ratio(value, bg)
            print(
                f"  {TOKEN_KEYS[role]:12} {format_color(value, color_format)}  (contrast: {contrast:.1f}:1)"
            )
