#!/usr/bin/env python3
"""
Generate one theme per harmony for a primary color.
Consolidates the stylesheets into out/themes/ for side-by-side comparison.
"""

import argparse
import shutil
import subprocess
from pathlib import Path

from theme_palette_generator.palette.harmony import HARMONIES


def main():
    parser = argparse.ArgumentParser(
        description="Generate a theme for every harmony from one primary color"
    )
    parser.add_argument("primary", help="Primary color (hex, rgb(), hsl() or oklch())")
    parser.add_argument(
        "--background-strategy",
        choices=["neutral", "primary"],
        default="neutral",
        help="Background strategy passed to every theme",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    out_dir = root / "out"
    themes_dir = out_dir / "themes"

    themes_dir.mkdir(parents=True, exist_ok=True)

    print(f"Generating {len(HARMONIES)} harmonies from {args.primary}\n")

    failed = []
    for harmony in sorted(HARMONIES):
        theme_out_dir = out_dir / harmony

        print(f"{'=' * 60}")
        print(f"Generating harmony: {harmony}")
        print(f"{'=' * 60}")

        cmd = [
            "uv",
            "run",
            "theme-palette-generator",
            args.primary,
            "--harmony",
            harmony,
            "--background-strategy",
            args.background_strategy,
            "--name",
            harmony,
            "-o",
            str(theme_out_dir),
        ]

        result = subprocess.run(cmd, cwd=root)

        if result.returncode != 0:
            print(f"Error generating {harmony}")
            failed.append(harmony)
            continue

        _copy_theme(theme_out_dir, harmony, themes_dir)
        print()

    print(f"{'=' * 60}")
    print("Done! All themes consolidated in:")
    print(f"  {themes_dir}")
    if failed:
        print(f"Failed: {', '.join(failed)}")
    print(f"{'=' * 60}")


def _copy_theme(theme_out_dir, harmony, themes_dir):
    """Copy the generated stylesheet and preview to the consolidated directory."""
    for name in (f"{harmony}.css", f"{harmony}-preview.html"):
        path = theme_out_dir / name
        if path.exists():
            shutil.copy(path, themes_dir / path.name)
            print(f"Copied {path.name} to {themes_dir}")


if __name__ == "__main__":
    main()
