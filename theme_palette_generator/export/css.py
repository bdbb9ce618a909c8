"""Render theme tokens as CSS custom properties."""

from collections import namedtuple

from ..color import format_oklch
from ..palette.tokens import TOKEN_NAMES

DEFAULT_RADIUS_REM = 0.625
PREVIEW_SELECTOR = "[data-theme-preview]"

ThemeCss = namedtuple("ThemeCss", ["theme_inline", "root", "dark"])

# Tokens exposed as --color-* utilities, in the order Tailwind expects them
_ALIAS_ORDER = (
    "background",
    "foreground",
    "sidebar-ring",
    "sidebar-border",
    "sidebar-accent-foreground",
    "sidebar-accent",
    "sidebar-primary-foreground",
    "sidebar-primary",
    "sidebar-foreground",
    "sidebar",
    "chart-5",
    "chart-4",
    "chart-3",
    "chart-2",
    "chart-1",
    "ring",
    "input",
    "border",
    "destructive",
    "destructive-foreground",
    "accent-foreground",
    "accent",
    "muted-foreground",
    "muted",
    "secondary-foreground",
    "secondary",
    "primary-foreground",
    "primary",
    "popover-foreground",
    "popover",
    "card-foreground",
    "card",
)

_RADIUS_ALIASES = (
    "  --radius-sm: calc(var(--radius) - 4px);",
    "  --radius-md: calc(var(--radius) - 2px);",
    "  --radius-lg: var(--radius);",
    "  --radius-xl: calc(var(--radius) + 4px);",
)


def format_radius(radius=None):
    """Radius in [0, 1] as a rem value; None gives the default."""
    if radius is None:
        radius = DEFAULT_RADIUS_REM
    radius = max(0.0, min(1.0, float(radius)))
    return f"{round(radius, 3):g}rem"


def serialize_token_set(token_set):
    """Flat token name -> oklch() string mapping in TOKEN_NAMES order."""
    return {name: format_oklch(token_set[name]) for name in TOKEN_NAMES}


def _declarations(token_set):
    return [
        f"  --{name}: {value};" for name, value in serialize_token_set(token_set).items()
    ]


def _block(selector, lines):
    return "\n".join([f"{selector} {{", *lines, "}"])


def serialize_theme_css(tokens, radius=None):
    """Serialize ThemeTokens into the alias, :root and .dark blocks.

    Returns:
        ThemeCss(theme_inline, root, dark)
    """
    aliases = [f"  --color-{name}: var(--{name});" for name in _ALIAS_ORDER]
    theme_inline = _block("@theme inline", aliases + list(_RADIUS_ALIASES))
    root = _block(
        ":root",
        [f"  --radius: {format_radius(radius)};"] + _declarations(tokens.light),
    )
    dark = _block(".dark", _declarations(tokens.dark))
    return ThemeCss(theme_inline=theme_inline, root=root, dark=dark)


def build_stylesheet(theme_css):
    return "\n\n".join(theme_css) + "\n"


def _preview_declarations(token_set):
    lines = []
    for name, value in serialize_token_set(token_set).items():
        lines.append(f"  --{name}: {value};")
        lines.append(f"  --color-{name}: var(--{name});")
    return lines


def generate_preview_css(tokens, selector=PREVIEW_SELECTOR):
    """CSS scoping both modes under a preview wrapper (dark via .dark)."""
    light = _block(selector, _preview_declarations(tokens.light))
    dark = _block(f"{selector}.dark", _preview_declarations(tokens.dark))
    return f"{light}\n\n{dark}\n"
