import html

from ..color import format_oklch, oklch_to_hex
from ..palette.generator import MODES
from .css import PREVIEW_SELECTOR, generate_preview_css

_SWATCH_PAIRS = [
    ("background", "foreground"),
    ("card", "card-foreground"),
    ("popover", "popover-foreground"),
    ("primary", "primary-foreground"),
    ("secondary", "secondary-foreground"),
    ("muted", "muted-foreground"),
    ("accent", "accent-foreground"),
    ("destructive", "destructive-foreground"),
    ("sidebar", "sidebar-foreground"),
    ("sidebar-primary", "sidebar-primary-foreground"),
    ("sidebar-accent", "sidebar-accent-foreground"),
]
_PLAIN_SWATCHES = [
    "border",
    "input",
    "ring",
    "chart-1",
    "chart-2",
    "chart-3",
    "chart-4",
    "chart-5",
    "sidebar-border",
    "sidebar-ring",
]

_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: ui-sans-serif, system-ui, sans-serif;
            background: #808080;
            padding: 24px;
        }
{preview_css}
        .mode {
            background: var(--background);
            color: var(--foreground);
            border: 1px solid var(--border);
            border-radius: 12px;
            padding: 32px;
            margin-bottom: 24px;
        }
        h1 { margin-bottom: 24px; font-weight: 500; font-size: 20px; }
        h2 {
            margin: 24px 0 12px 0;
            font-weight: 400;
            font-size: 12px;
            text-transform: uppercase;
            letter-spacing: 2px;
            color: var(--muted-foreground);
        }
        .palette-section { display: flex; flex-wrap: wrap; gap: 12px; }
        .color-card {
            width: 180px;
            border-radius: 8px;
            overflow: hidden;
            border: 1px solid var(--border);
            background: var(--card);
            color: var(--card-foreground);
        }
        .color-swatch {
            height: 72px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 16px;
            font-weight: 500;
        }
        .color-info { padding: 10px; font-size: 11px; font-family: ui-monospace, monospace; }
        .color-name { font-weight: 600; margin-bottom: 4px; }
    </style>
</head>
<body>
{modes}
</body>
</html>"""


def _make_card(name, token_set, text_name=None):
    text = f"color: var(--{text_name})" if text_name else ""
    color = token_set[name]
    return f"""<div class="color-card">
            <div class="color-swatch" style="background: var(--{name}); {text}">Aa</div>
            <div class="color-info">
                <div class="color-name">{name}</div>
                <div>{oklch_to_hex(color)}</div>
                <div>{format_oklch(color)}</div>
            </div>
        </div>"""


def _make_mode(mode, token_set, title):
    scope_class = "dark" if mode == "dark" else ""
    pair_cards = "\n".join(_make_card(bg, token_set, fg) for bg, fg in _SWATCH_PAIRS)
    plain_cards = "\n".join(_make_card(name, token_set) for name in _PLAIN_SWATCHES)
    return f"""<section data-theme-preview class="mode {scope_class}">
    <h1>{title} ({mode.title()})</h1>
    <h2>Surfaces &amp; text</h2>
    <div class="palette-section">
        {pair_cards}
    </div>
    <h2>Borders, ring &amp; charts</h2>
    <div class="palette-section">
        {plain_cards}
    </div>
</section>"""


def create_html_preview(tokens, output_path, title="Theme Preview"):
    """Create an HTML preview of both modes using the scoped preview CSS"""
    title = html.escape(title)
    preview_css = generate_preview_css(tokens, selector=PREVIEW_SELECTOR)
    modes = "\n".join(
        _make_mode(mode, getattr(tokens, mode), title) for mode in MODES
    )

    page = _TEMPLATE
    replacements = {
        "{title}": title,
        "{preview_css}": preview_css,
        "{modes}": modes,
    }
    for old, new in replacements.items():
        page = page.replace(old, new)

    with open(output_path, "w") as f:
        f.write(page)
