"""OKLCH color values and the conversions the theme engine builds on.

Parsing and space conversion go through coloraide; everything the engine
stores is an immutable ``Oklch`` namedtuple that has already been clamped
into the target gamut.
"""

import logging
import math
from collections import namedtuple

import numpy as np
from coloraide import Color as CssColor

logger = logging.getLogger(__name__)

Oklch = namedtuple("Oklch", ["l", "c", "h", "alpha"], defaults=(None,))
ParsedColor = namedtuple("ParsedColor", ["oklch", "hex"])

# Chroma ceiling per output gamut
GAMUT_CHROMA_MAX = {
    "srgb": 0.33,
    "display-p3": 0.37,
    "rec2020": 0.4,
}
DEFAULT_GAMUT = "srgb"

FALLBACK_HEX = "#000000"


def chroma_ceiling(gamut=DEFAULT_GAMUT):
    try:
        return GAMUT_CHROMA_MAX[gamut]
    except KeyError:
        raise ValueError(
            f"Unknown gamut {gamut!r}, expected one of {', '.join(GAMUT_CHROMA_MAX)}"
        ) from None


def normalize_hue(h):
    """Wrap a hue angle into [0, 360)."""
    if h is None or math.isnan(h):
        return 0.0
    h = h % 360.0
    # -1e-17 % 360 == 360.0 in floating point
    if h >= 360.0:
        h = 0.0
    return h


def _clamp(value, low, high):
    if value is None or math.isnan(value):
        return low
    return max(low, min(high, value))


def clamp_oklch(color, gamut=DEFAULT_GAMUT):
    """Project a color into valid lightness, the gamut's chroma range and [0, 360) hue."""
    return Oklch(
        l=_clamp(color.l, 0.0, 1.0),
        c=_clamp(color.c, 0.0, chroma_ceiling(gamut)),
        h=normalize_hue(color.h),
        alpha=color.alpha,
    )


def create_oklch(l, c, h, alpha=None, gamut=DEFAULT_GAMUT):
    """Create a clamped Oklch color."""
    return clamp_oklch(Oklch(l, c, h, alpha), gamut)


def parse_color(value, gamut=DEFAULT_GAMUT):
    """Parse a CSS color string into a clamped Oklch color.

    Accepts hex, rgb()/rgba(), hsl()/hsla(), oklch() and named colors.

    Returns:
        Oklch, or None when the value cannot be parsed
    """
    if not isinstance(value, str) or not value.strip():
        return None

    try:
        css = CssColor(value.strip()).convert("oklch")
    except (ValueError, TypeError) as exc:
        logger.debug("Could not parse color %r: %s", value, exc)
        return None

    alpha = css["alpha"]
    if alpha is None or math.isnan(alpha) or alpha >= 1:
        alpha = None

    return create_oklch(css["lightness"], css["chroma"], css["hue"], alpha, gamut)


def parse_color_input(value, gamut=DEFAULT_GAMUT):
    """Parse a user color into a ParsedColor (OKLCH plus display hex)."""
    oklch = parse_color(value, gamut)
    if oklch is None:
        return None
    return ParsedColor(oklch=oklch, hex=oklch_to_hex(oklch))


def _round3(value):
    # + 0.0 turns -0.0 into 0.0
    return round(value, 3) + 0.0


def format_oklch(color, gamut=DEFAULT_GAMUT):
    """Format a color as ``oklch(L C H)`` (``oklch(L C H / A)`` with alpha).

    Values are rounded to 3 decimal places so that parsing the output back
    reproduces the channels within 0.0005.
    """
    color = clamp_oklch(color, gamut)
    l = _round3(color.l)
    c = _round3(color.c)
    h = _round3(color.h)
    if h >= 360:
        h = 0.0
    alpha = ""
    if color.alpha is not None:
        alpha = f" / {_round3(color.alpha):g}"
    return f"oklch({l:g} {c:g} {h:g}{alpha})"


def oklch_to_srgb(color):
    """Convert to gamma-encoded sRGB channels, clipped to [0, 1]."""
    srgb = CssColor("oklch", [color.l, color.c, color.h]).convert("srgb")
    channels = np.array([srgb["red"], srgb["green"], srgb["blue"]], dtype=np.float64)
    return np.clip(np.nan_to_num(channels), 0.0, 1.0)


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def oklch_to_hex(color):
    """Lossy hex projection for display. Falls back to #000000."""
    try:
        rgb = np.round(oklch_to_srgb(color) * 255).astype(int)
    except (ValueError, TypeError, AttributeError) as exc:
        logger.debug("Could not convert %r to hex: %s", color, exc)
        return FALLBACK_HEX
    return rgb_to_hex(*(int(v) for v in rgb))


def adjust_lightness(color, delta, gamut=DEFAULT_GAMUT):
    color = clamp_oklch(color, gamut)
    return clamp_oklch(color._replace(l=color.l + delta), gamut)


def adjust_chroma(color, delta, gamut=DEFAULT_GAMUT):
    color = clamp_oklch(color, gamut)
    return clamp_oklch(color._replace(c=color.c + delta), gamut)


def adjust_hue(color, delta, gamut=DEFAULT_GAMUT):
    """Rotate hue by delta degrees, wrapping in either direction."""
    color = clamp_oklch(color, gamut)
    return clamp_oklch(color._replace(h=color.h + delta), gamut)


def hue_distance(h1, h2):
    """Shortest angular distance between two hues, in [0, 180]."""
    diff = abs(normalize_hue(h1) - normalize_hue(h2))
    if diff > 180:
        diff = 360 - diff
    return diff


def hue_midpoint(h1, h2):
    """Midpoint of the shorter arc between two hues."""
    h1, h2 = normalize_hue(h1), normalize_hue(h2)
    if abs(h1 - h2) > 180:
        return normalize_hue((h1 + h2 + 360) / 2)
    return (h1 + h2) / 2
