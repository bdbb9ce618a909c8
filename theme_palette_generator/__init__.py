"""Accessible light/dark theme tokens from a brand color, in OKLCH."""

from .color import (
    Oklch,
    ParsedColor,
    adjust_chroma,
    adjust_hue,
    adjust_lightness,
    clamp_oklch,
    format_oklch,
    oklch_to_hex,
    parse_color,
)
from .contrast import check_contrast, contrast_ratio, ensure_contrast
from .export import generate_preview_css, serialize_theme_css
from .palette.generator import GeneratedTheme, ThemeTokens, generate_theme
from .palette.harmony import HARMONIES
from .palette.tokens import CONTRAST_PAIRS, TOKEN_NAMES

__all__ = [
    "CONTRAST_PAIRS",
    "GeneratedTheme",
    "HARMONIES",
    "Oklch",
    "ParsedColor",
    "TOKEN_NAMES",
    "ThemeTokens",
    "adjust_chroma",
    "adjust_hue",
    "adjust_lightness",
    "check_contrast",
    "clamp_oklch",
    "contrast_ratio",
    "ensure_contrast",
    "format_oklch",
    "generate_preview_css",
    "generate_theme",
    "oklch_to_hex",
    "parse_color",
    "serialize_theme_css",
]
