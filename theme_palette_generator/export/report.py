from ..color import format_oklch, oklch_to_hex
from ..contrast import AAA_CONTRAST, MIN_TEXT_CONTRAST, contrast_ratio
from ..palette.generator import MODES

_PRINT_CATEGORIES = (
    ("SURFACES", ["background", "card", "popover", "muted", "border", "input"]),
    ("FOREGROUNDS", ["foreground", "card-foreground", "popover-foreground", "muted-foreground"]),
    ("ACCENTS", ["primary", "secondary", "accent", "destructive", "ring"]),
    ("CHARTS", ["chart-1", "chart-2", "chart-3", "chart-4", "chart-5"]),
    (
        "SIDEBAR",
        [
            "sidebar",
            "sidebar-foreground",
            "sidebar-primary",
            "sidebar-accent",
            "sidebar-border",
            "sidebar-ring",
        ],
    ),
)


def generate_readability_report(theme):
    """Generate a readability report for both modes of a GeneratedTheme.

    Returns:
        tuple: (report text, list of failing ContrastWarning)
    """
    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)

    issues = []
    for mode in MODES:
        token_set = getattr(theme.tokens, mode)
        bg = token_set["background"]
        report.append("")
        report.append(f"Theme: {mode.upper()}")
        report.append(f"Background: {oklch_to_hex(bg)} ({format_oklch(bg)})")
        report.append(f"\nCONTRAST PAIRS (min: {MIN_TEXT_CONTRAST}:1, AAA: {AAA_CONTRAST}:1)")
        report.append("-" * 70)

        for warning in theme.contrast_warnings:
            if warning.mode != mode:
                continue
            result = warning.result
            if warning.warning:
                status = "✗ FAIL"
                issues.append(warning)
            elif result.aaa:
                status = "✓ AAA"
            else:
                status = "✓ AA"
            pair = f"{warning.foreground} / {warning.background}"
            report.append(
                f"  {pair:52} {result.ratio:5.2f}:1  Lc {result.apca:5.1f}  {status}"
            )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for w in issues:
            report.append(
                f"  - [{w.mode}] {w.foreground} on {w.background}: "
                f"{w.result.ratio:.2f}:1, needs {MIN_TEXT_CONTRAST}:1"
            )
    else:
        report.append("ALL PAIRS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(token_set, mode, method=None):
    """Print token values for one mode"""
    bg = token_set["background"]

    print("\n" + "=" * 60)
    print(f"THEME TOKENS ({mode.upper()})")
    print("=" * 60)

    for cat_name, keys in _PRINT_CATEGORIES:
        print(f"\n{cat_name}:")
        for key in keys:
            c = token_set[key]
            contrast = contrast_ratio(c, bg, method)
            print(
                f"  {key:28} {oklch_to_hex(c)}  {format_oklch(c):28} "
                f"(contrast: {contrast:.1f}:1)"
            )
