import argparse
import logging
import os

from .contrast import CONTRAST_METHODS, DEFAULT_CONTRAST_METHOD
from .export import (
    build_stylesheet,
    create_html_preview,
    export_json,
    generate_readability_report,
    print_palette,
    serialize_theme_css,
)
from .palette import generate_theme, load_tokens_from_json, validate_theme_contrast
from .palette.generator import MODES, GeneratedTheme
from .palette.harmony import DEFAULT_HARMONY, HARMONIES
from .palette.tokens import BACKGROUND_STRATEGIES, DEFAULT_BACKGROUND_STRATEGY


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate accessible light/dark theme tokens from a brand color"
    )
    parser.add_argument(
        "primary",
        nargs="?",
        default=None,
        help="Primary color (hex, rgb(), hsl() or oklch())",
    )
    parser.add_argument(
        "--secondary",
        help="Secondary color; skips the harmony rule for secondary and accent",
    )
    parser.add_argument(
        "--harmony",
        choices=sorted(HARMONIES),
        default=DEFAULT_HARMONY,
        help=f"Harmony used to derive secondary and accent (default: {DEFAULT_HARMONY})",
    )
    parser.add_argument(
        "--background-strategy",
        choices=BACKGROUND_STRATEGIES,
        default=DEFAULT_BACKGROUND_STRATEGY,
        help="Neutral surfaces or surfaces tinted toward the primary",
    )
    parser.add_argument(
        "--contrast-method",
        choices=sorted(CONTRAST_METHODS),
        default=DEFAULT_CONTRAST_METHOD,
        help="Luminance model for contrast checks (default: wcag)",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=None,
        help="Border radius in rem (0.0-1.0, default 0.625)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--name",
        default="theme",
        help="Base name for output files (default: theme)",
    )
    parser.add_argument(
        "--from-tokens",
        metavar="JSON",
        help="Load tokens from an exported JSON file instead of generating them",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log diagnostics such as contrast enforcement failures",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate arguments
    if args.radius is not None and not 0.0 <= args.radius <= 1.0:
        parser.error("--radius must be between 0.0 and 1.0")

    if args.from_tokens:
        if args.primary:
            parser.error("Cannot use both primary and --from-tokens")
        theme = _run_from_tokens(args)
    elif args.primary:
        theme = _run_from_color(args)
        if theme is None:
            parser.error(f"Could not parse primary color: {args.primary!r}")
    else:
        parser.error("Either primary or --from-tokens is required")

    _export(theme, args)


def _run_from_tokens(args):
    """Re-validate a theme from an existing tokens JSON file."""
    print(f"Loading tokens: {args.from_tokens}")
    tokens = load_tokens_from_json(args.from_tokens)
    return GeneratedTheme(
        tokens=tokens,
        contrast_warnings=validate_theme_contrast(tokens, method=args.contrast_method),
    )


def _run_from_color(args):
    """Generate a theme from the primary (and secondary) color."""
    print(f"Generating theme from: {args.primary}")
    if args.secondary:
        print(f"Secondary color: {args.secondary}")
    else:
        print(f"Harmony: {args.harmony}")

    return generate_theme(
        args.primary,
        args.secondary,
        harmony=args.harmony,
        background_strategy=args.background_strategy,
        contrast_method=args.contrast_method,
    )


def _export(theme, args):
    output_dir = args.output
    os.makedirs(output_dir, exist_ok=True)

    for mode in MODES:
        print_palette(getattr(theme.tokens, mode), mode, method=args.contrast_method)
    report, issues = generate_readability_report(theme)
    print("\n" + report)

    css_path = os.path.join(output_dir, f"{args.name}.css")
    html_path = os.path.join(output_dir, f"{args.name}-preview.html")
    json_path = os.path.join(output_dir, f"{args.name}-tokens.json")
    report_path = os.path.join(output_dir, "readability_report.txt")

    with open(css_path, "w") as f:
        f.write(build_stylesheet(serialize_theme_css(theme.tokens, radius=args.radius)))

    create_html_preview(theme.tokens, html_path, title=args.name)

    source = args.from_tokens or args.primary
    if args.secondary and not args.from_tokens:
        source = f"{args.primary} + {args.secondary}"
    export_json(
        theme.tokens,
        json_path,
        contrast_warnings=theme.contrast_warnings,
        source=source,
        harmony=None if (args.secondary or args.from_tokens) else args.harmony,
        background_strategy=None if args.from_tokens else args.background_strategy,
        radius=args.radius,
    )

    with open(report_path, "w") as f:
        f.write(report)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {css_path}")
    print(f"  - {html_path}")
    print(f"  - {json_path}")
    print(f"  - {report_path}")
    print(f"\nContrast failures: {len(issues)}")
    print("=" * 60)


if __name__ == "__main__":
    main()
