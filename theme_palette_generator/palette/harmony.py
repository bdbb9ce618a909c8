"""Palette anchors: primary, secondary, accent and destructive.

Each harmony is a pure rule ``derive(primary) -> (primary, secondary, accent)``
registered in ``HARMONIES``. Adding a harmony means adding one entry there.
"""

import logging
from collections import namedtuple

from ..color import (
    DEFAULT_GAMUT,
    adjust_chroma,
    adjust_hue,
    adjust_lightness,
    clamp_oklch,
    create_oklch,
    hue_midpoint,
)

logger = logging.getLogger(__name__)


class SingleColorInput(namedtuple("SingleColorInput", ["primary"])):
    """One user color; the harmony rule derives the rest."""

    __slots__ = ()
    kind = "single"


class DualColorInput(namedtuple("DualColorInput", ["primary", "secondary"])):
    """Two user colors; only the destructive anchor is derived."""

    __slots__ = ()
    kind = "dual"


PaletteAnchors = namedtuple(
    "PaletteAnchors", ["primary", "secondary", "accent", "destructive"]
)

HarmonyRule = namedtuple("HarmonyRule", ["label", "description", "derive"])

DEFAULT_HARMONY = "monochromatic"

# Destructive hues
DESTRUCTIVE_HUE = 25.0  # warm red/orange
PURE_RED_HUE = 20.0
MAGENTA_HUE = 340.0
# Below this chroma a primary has no meaningful hue
ACHROMATIC_CHROMA = 0.04

DESTRUCTIVE_LIGHTNESS_RANGE = (0.4, 0.72)
DESTRUCTIVE_CHROMA_RANGE = (0.18, 0.3)


def _clamp(value, low, high):
    return max(low, min(high, value))


def _monochromatic(primary):
    return (
        primary,
        adjust_lightness(primary, 0.15),
        adjust_lightness(primary, -0.1),
    )


def _complementary(primary):
    complement = adjust_hue(primary, 180)
    return primary, adjust_lightness(complement, 0.1), complement


def _split_complementary(primary):
    complement = adjust_hue(primary, 180)
    return (
        primary,
        adjust_lightness(adjust_hue(complement, 30), 0.05),
        adjust_hue(complement, -30),
    )


def _triadic(primary):
    return (
        primary,
        adjust_lightness(adjust_hue(primary, 120), 0.1),
        adjust_hue(primary, 240),
    )


def _tetradic(primary):
    # Quarter turns from the primary
    return (
        primary,
        adjust_lightness(adjust_hue(primary, 90), 0.1),
        adjust_hue(primary, 180),
    )


def _analogous(primary):
    return (
        primary,
        adjust_lightness(adjust_hue(primary, 30), 0.05),
        adjust_hue(primary, -30),
    )


def _square(primary):
    return (
        primary,
        adjust_lightness(adjust_hue(primary, 90), 0.1),
        adjust_hue(primary, 180),
    )


def _rave_club(primary):
    boosted = adjust_chroma(primary, 0.15)
    neon = adjust_lightness(boosted, -0.1)
    return boosted, adjust_hue(neon, 60), neon


def _extra_terrestrial(primary):
    cool = adjust_chroma(adjust_hue(primary, -30), -0.1)
    return cool, adjust_lightness(cool, 0.1), adjust_hue(cool, -60)


def _party_bus(primary):
    warm = adjust_chroma(adjust_hue(primary, 20), 0.1)
    return warm, adjust_lightness(warm, 0.15), adjust_hue(warm, -40)


def _soft_pastels(primary):
    soft = adjust_chroma(adjust_lightness(primary, 0.2), -0.15)
    return soft, adjust_lightness(soft, 0.1), adjust_lightness(soft, -0.05)


HARMONIES = {
    "monochromatic": HarmonyRule(
        "Monochromatic", "Single hue with varying lightness and chroma", _monochromatic
    ),
    "complementary": HarmonyRule(
        "Complementary", "Opposite colors on the color wheel", _complementary
    ),
    "split-complementary": HarmonyRule(
        "Split Complementary",
        "Base color plus two adjacent to its complement",
        _split_complementary,
    ),
    "triadic": HarmonyRule("Triadic", "Three evenly spaced colors", _triadic),
    "tetradic": HarmonyRule("Tetradic", "Four colors forming a rectangle", _tetradic),
    "analogous": HarmonyRule(
        "Analogous", "Adjacent colors on the color wheel", _analogous
    ),
    "square": HarmonyRule(
        "Square", "Four colors evenly spaced around the color wheel", _square
    ),
    "rave-club": HarmonyRule(
        "Rave Club", "High chroma, vibrant neon colors", _rave_club
    ),
    "extra-terrestrial": HarmonyRule(
        "Extra Terrestrial",
        "Cool, desaturated colors with blue-green tones",
        _extra_terrestrial,
    ),
    "party-bus": HarmonyRule(
        "Party Bus", "Warm, saturated and playful colors", _party_bus
    ),
    "soft-pastels": HarmonyRule(
        "Soft Pastels", "Light, gentle, low-chroma colors", _soft_pastels
    ),
}


def get_harmony(harmony, log=None):
    """Look up a harmony rule, falling back to monochromatic for unknown names."""
    rule = HARMONIES.get(harmony)
    if rule is None:
        (log or logger).warning(
            "Unknown harmony %r, falling back to %s", harmony, DEFAULT_HARMONY
        )
        rule = HARMONIES[DEFAULT_HARMONY]
    return rule


def generate_destructive(primary, gamut=DEFAULT_GAMUT):
    """Generate a red/orange/magenta warning color scaled from the primary.

    A primary that already sits in the red-orange band moves the destructive
    hue out of its way: reds get magenta, crimsons and oranges get pure red.
    """
    primary = clamp_oklch(primary, gamut)

    hue = DESTRUCTIVE_HUE
    if primary.c >= ACHROMATIC_CHROMA:
        if 10 <= primary.h < 45:
            hue = MAGENTA_HUE
        elif primary.h >= 345 or primary.h < 10 or 45 <= primary.h < 70:
            hue = PURE_RED_HUE

    return create_oklch(
        l=_clamp(primary.l * 0.8 + 0.2, *DESTRUCTIVE_LIGHTNESS_RANGE),
        c=_clamp(primary.c + 0.12, *DESTRUCTIVE_CHROMA_RANGE),
        h=hue,
        gamut=gamut,
    )


def accent_from_pair(primary, secondary, gamut=DEFAULT_GAMUT):
    """Blend two user colors: shortest-arc hue midpoint, mean lightness."""
    return create_oklch(
        l=(primary.l + secondary.l) / 2,
        c=max(primary.c, secondary.c) * 0.8,
        h=hue_midpoint(primary.h, secondary.h),
        gamut=gamut,
    )


def generate_palette_anchors(
    color_input, harmony=DEFAULT_HARMONY, gamut=DEFAULT_GAMUT, log=None
):
    """Generate the four anchor colors for a color input.

    Args:
        color_input: SingleColorInput or DualColorInput of ParsedColor values
        harmony: Harmony name, ignored for dual input
        gamut: Target gamut for chroma clamping
        log: Optional logger for diagnostics

    Returns:
        PaletteAnchors
    """
    primary = clamp_oklch(color_input.primary.oklch, gamut)

    if color_input.kind == "dual":
        secondary = clamp_oklch(color_input.secondary.oklch, gamut)
        return PaletteAnchors(
            primary=primary,
            secondary=secondary,
            accent=accent_from_pair(primary, secondary, gamut),
            destructive=generate_destructive(primary, gamut),
        )

    rule = get_harmony(harmony, log)
    derived_primary, secondary, accent = rule.derive(primary)
    return PaletteAnchors(
        primary=clamp_oklch(derived_primary, gamut),
        secondary=clamp_oklch(secondary, gamut),
        accent=clamp_oklch(accent, gamut),
        destructive=generate_destructive(primary, gamut),
    )
