import json

from ..color import oklch_to_hex
from .css import format_radius, serialize_token_set


def export_json(
    tokens,
    filepath,
    contrast_warnings=None,
    source=None,
    harmony=None,
    background_strategy=None,
    radius=None,
):
    """Export light and dark tokens as JSON with display hex values and metadata.

    Args:
        tokens: ThemeTokens
        filepath: Output file path
        contrast_warnings: Optional ContrastWarning list; failures are recorded
        source: Input colors the theme was generated from, for metadata
        harmony: Harmony name used
        background_strategy: Background strategy used
        radius: Radius written to _radius
    """
    data = {
        "light": serialize_token_set(tokens.light),
        "dark": serialize_token_set(tokens.dark),
    }

    data["_hex"] = {
        "light": {k: oklch_to_hex(v) for k, v in tokens.light.items()},
        "dark": {k: oklch_to_hex(v) for k, v in tokens.dark.items()},
    }
    data["_radius"] = format_radius(radius)

    if source:
        data["_source"] = source
    if harmony:
        data["_harmony"] = harmony
    if background_strategy:
        data["_background_strategy"] = background_strategy

    if contrast_warnings is not None:
        data["_contrast_failures"] = [
            {
                "mode": w.mode,
                "foreground": w.foreground,
                "background": w.background,
                "ratio": round(w.result.ratio, 2),
            }
            for w in contrast_warnings
            if w.warning
        ]

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
