"""Expand palette anchors into the full semantic token set for one mode."""

import logging

from ..color import DEFAULT_GAMUT, adjust_lightness, clamp_oklch, create_oklch
from ..contrast import (
    DEFAULT_MAX_ITERATIONS,
    MIN_TEXT_CONTRAST,
    contrast_ratio,
    ensure_contrast,
    get_contrast_method,
)

logger = logging.getLogger(__name__)

# Closed set of theme slots, in serialization order
TOKEN_NAMES = (
    "background",
    "foreground",
    "card",
    "card-foreground",
    "popover",
    "popover-foreground",
    "primary",
    "primary-foreground",
    "secondary",
    "secondary-foreground",
    "muted",
    "muted-foreground",
    "accent",
    "accent-foreground",
    "destructive",
    "destructive-foreground",
    "border",
    "input",
    "ring",
    "chart-1",
    "chart-2",
    "chart-3",
    "chart-4",
    "chart-5",
    "sidebar",
    "sidebar-foreground",
    "sidebar-primary",
    "sidebar-primary-foreground",
    "sidebar-accent",
    "sidebar-accent-foreground",
    "sidebar-border",
    "sidebar-ring",
)

# (foreground, background) pairs that must reach MIN_TEXT_CONTRAST
CONTRAST_PAIRS = (
    ("foreground", "background"),
    ("card-foreground", "card"),
    ("popover-foreground", "popover"),
    ("primary-foreground", "primary"),
    ("secondary-foreground", "secondary"),
    ("muted-foreground", "muted"),
    ("accent-foreground", "accent"),
    ("destructive-foreground", "destructive"),
    ("sidebar-foreground", "sidebar"),
    ("sidebar-primary-foreground", "sidebar-primary"),
    ("sidebar-accent-foreground", "sidebar-accent"),
)

BACKGROUND_STRATEGIES = ("neutral", "primary")
DEFAULT_BACKGROUND_STRATEGY = "neutral"

SURFACE_TOKENS = ("background", "card", "popover", "muted", "border", "input")

# (lightness, chroma factor) per surface; chroma factor scales the neutral chroma
NEUTRAL_LADDER_DARK = (
    (0.08, 0.5),
    (0.14, 0.7),
    (0.165, 0.7),
    (0.22, 0.8),
    (0.32, 1.0),
    (0.36, 1.0),
)
NEUTRAL_LADDER_LIGHT = (
    (0.995, 0.4),
    (0.988, 0.5),
    (0.984, 0.6),
    (0.955, 0.8),
    (0.9, 1.0),
    (0.915, 1.0),
)
NEUTRAL_CHROMA_MAX = 0.01

# Foreground seeds
TEXT_LIGHT_LIGHTNESS = 0.92
TEXT_DARK_LIGHTNESS = 0.16
TEXT_MIN_CHROMA = 0.01
SOLID_LIGHT_LIGHTNESS = 0.94
SOLID_DARK_LIGHTNESS = 0.18
SOLID_MIN_CHROMA = 0.008

# Chart recipe
CHART_HUE_STEPS = (0, 60, 120, 180, 240)
CHART_LIGHTNESS_OFFSETS_DARK = (0, 0.15, 0.22, 0.08, 0.12)
CHART_LIGHTNESS_OFFSETS_LIGHT = (0.35, 0.1, 0.02, -0.02, -0.1)
CHART_CHROMA_MULTIPLIERS = (1.0, 0.85, 0.95, 1.1, 1.0)


class IncompleteTokenSetError(ValueError):
    """A token set is missing one or more required slots."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(f"Token set is missing slots: {', '.join(self.missing)}")


def ensure_complete(tokens):
    """Raise IncompleteTokenSetError unless every slot in TOKEN_NAMES is set."""
    missing = [name for name in TOKEN_NAMES if tokens.get(name) is None]
    if missing:
        raise IncompleteTokenSetError(missing)
    return tokens


def _clamp(value, low, high):
    return max(low, min(high, value))


def neutral_surfaces(primary, is_dark, gamut=DEFAULT_GAMUT):
    """Fixed lightness ladder with a faint tint of the primary hue."""
    neutral_chroma = min(NEUTRAL_CHROMA_MAX, primary.c * 0.1)
    ladder = NEUTRAL_LADDER_DARK if is_dark else NEUTRAL_LADDER_LIGHT
    return {
        name: create_oklch(lightness, neutral_chroma * factor, primary.h, gamut=gamut)
        for name, (lightness, factor) in zip(SURFACE_TOKENS, ladder)
    }


def primary_surfaces(primary, is_dark, gamut=DEFAULT_GAMUT):
    """Surfaces scaled from the primary's own lightness and chroma."""
    base = create_oklch(primary.l, max(0.002, primary.c * 0.4), primary.h, gamut=gamut)

    if not is_dark:
        # Lighten and desaturate
        background = create_oklch(
            min(0.995, base.l + 0.22), base.c * 0.75, base.h, gamut=gamut
        )
        muted = adjust_lightness(background, -0.1, gamut)
        return {
            "background": background,
            "card": adjust_lightness(background, -0.01, gamut),
            "popover": adjust_lightness(background, -0.015, gamut),
            "muted": muted._replace(c=max(0.002, background.c * 0.55)),
            "border": create_oklch(
                background.l - 0.16, background.c * 0.3, background.h, gamut=gamut
            ),
            "input": create_oklch(
                background.l - 0.12, background.c * 0.35, background.h, gamut=gamut
            ),
        }

    # Darken and saturate
    background = create_oklch(
        max(0.06, base.l - 0.32), base.c * 1.1, base.h, gamut=gamut
    )
    muted = adjust_lightness(background, 0.14, gamut)
    return {
        "background": background,
        "card": adjust_lightness(background, 0.05, gamut),
        "popover": adjust_lightness(background, 0.07, gamut),
        "muted": muted._replace(c=background.c * 0.8),
        "border": create_oklch(
            min(0.7, background.l + 0.42), background.c * 0.3, background.h, gamut=gamut
        ),
        "input": create_oklch(
            min(0.58, background.l + 0.32), background.c * 0.35, background.h, gamut=gamut
        ),
    }


_SURFACE_BUILDERS = {
    "neutral": neutral_surfaces,
    "primary": primary_surfaces,
}


def _prefers_light_text(background, light_lightness, dark_lightness):
    # Whichever seed sits farther from the background's own lightness
    return abs(light_lightness - background.l) >= abs(dark_lightness - background.l)


def _search_foreground(seed, background, target_ratio, max_iterations, method, gamut):
    """Run ensure_contrast and measure the result against the unmodified background.

    ensure_contrast may nudge the background while searching; only the
    foreground is kept, so success is judged on the real pair.
    """
    result = ensure_contrast(
        seed,
        background,
        target_ratio=target_ratio,
        max_iterations=max_iterations,
        method=method,
        gamut=gamut,
    )
    return result.foreground, contrast_ratio(result.foreground, background, method)


def contrasting_foreground(
    background,
    light_lightness=TEXT_LIGHT_LIGHTNESS,
    dark_lightness=TEXT_DARK_LIGHTNESS,
    min_chroma=TEXT_MIN_CHROMA,
    prefer_light=None,
    target_ratio=MIN_TEXT_CONTRAST,
    max_iterations=DEFAULT_MAX_ITERATIONS,
    method=None,
    gamut=DEFAULT_GAMUT,
):
    """Generate a readable foreground for a background.

    The seed sits at a fixed light or dark lightness, whichever is farther
    from the background's lightness, tinted toward the background hue. It is
    then pushed through ensure_contrast. If that side cannot reach
    target_ratio the opposite seed is tried and the better of the two kept.
    """
    method = get_contrast_method(method)
    if prefer_light is None:
        prefer_light = _prefers_light_text(background, light_lightness, dark_lightness)

    chroma = max(min_chroma, background.c * 0.25)
    best, best_ratio = None, -1.0
    for light in (prefer_light, not prefer_light):
        seed = create_oklch(
            light_lightness if light else dark_lightness,
            chroma,
            background.h,
            gamut=gamut,
        )
        foreground, ratio = _search_foreground(
            seed, background, target_ratio, max_iterations, method, gamut
        )
        if ratio > best_ratio:
            best, best_ratio = foreground, ratio
        if best_ratio >= target_ratio:
            break
    return best


def solid_foreground(background, method=None, gamut=DEFAULT_GAMUT):
    """Foreground for saturated fills (primary, destructive buttons)."""
    return contrasting_foreground(
        background,
        light_lightness=SOLID_LIGHT_LIGHTNESS,
        dark_lightness=SOLID_DARK_LIGHTNESS,
        min_chroma=SOLID_MIN_CHROMA,
        method=method,
        gamut=gamut,
    )


def ring_color(primary, is_dark, gamut=DEFAULT_GAMUT):
    """Focus ring: fixed lightness, primary hue, reduced chroma."""
    if is_dark:
        return create_oklch(0.38, primary.c * 0.5, primary.h, gamut=gamut)
    return create_oklch(0.702, primary.c * 0.3, primary.h, gamut=gamut)


def chart_colors(primary, is_dark, gamut=DEFAULT_GAMUT):
    """Five chart colors spread around the wheel from the primary hue.

    Dark mode charts are lighter for visibility, light mode charts darker.
    """
    if is_dark:
        base_lightness = _clamp(primary.l + 0.15, 0.4, 0.75)
        base_chroma = _clamp(primary.c * 0.8 + 0.1, 0.15, 0.28)
        offsets = CHART_LIGHTNESS_OFFSETS_DARK
    else:
        base_lightness = _clamp(primary.l - 0.1, 0.35, 0.8)
        base_chroma = _clamp(primary.c * 0.6 + 0.08, 0.1, 0.3)
        offsets = CHART_LIGHTNESS_OFFSETS_LIGHT

    charts = {}
    for index, hue_step in enumerate(CHART_HUE_STEPS):
        charts[f"chart-{index + 1}"] = create_oklch(
            _clamp(base_lightness + offsets[index], 0.3, 0.85),
            _clamp(base_chroma * CHART_CHROMA_MULTIPLIERS[index], 0.08, 0.32),
            primary.h + hue_step,
            gamut=gamut,
        )
    return charts


def sidebar_colors(primary, is_dark, method=None, gamut=DEFAULT_GAMUT):
    """Self-contained sidebar palette biased toward the primary hue."""
    hue = primary.h

    if is_dark:
        sidebar = create_oklch(0.21, min(0.01, primary.c * 0.2), hue, gamut=gamut)
        sidebar_primary = adjust_lightness(primary, -0.1, gamut)
        sidebar_accent = create_oklch(0.274, min(0.01, primary.c * 0.3), hue, gamut=gamut)
        sidebar_border = create_oklch(
            min(0.45, sidebar.l + 0.18), min(0.015, primary.c * 0.25), hue, gamut=gamut
        )
    else:
        sidebar = create_oklch(0.985, min(0.003, primary.c * 0.1), hue, gamut=gamut)
        sidebar_primary = clamp_oklch(primary, gamut)
        sidebar_accent = create_oklch(0.967, min(0.007, primary.c * 0.2), hue, gamut=gamut)
        sidebar_border = create_oklch(0.929, min(0.013, primary.c * 0.3), hue, gamut=gamut)

    return {
        "sidebar": sidebar,
        "sidebar-foreground": contrasting_foreground(sidebar, method=method, gamut=gamut),
        "sidebar-primary": sidebar_primary,
        "sidebar-primary-foreground": solid_foreground(
            sidebar_primary, method=method, gamut=gamut
        ),
        "sidebar-accent": sidebar_accent,
        "sidebar-accent-foreground": contrasting_foreground(
            sidebar_accent, method=method, gamut=gamut
        ),
        "sidebar-border": sidebar_border,
        "sidebar-ring": ring_color(primary, is_dark, gamut),
    }


def map_palette_to_tokens(
    anchors,
    is_dark,
    background_strategy=DEFAULT_BACKGROUND_STRATEGY,
    method=None,
    gamut=DEFAULT_GAMUT,
    log=None,
):
    """Map palette anchors to every theme token for one appearance mode.

    Args:
        anchors: PaletteAnchors
        is_dark: Build the dark mode set instead of the light one
        background_strategy: "neutral" or "primary" surfaces
        method: Contrast method name or instance
        gamut: Target gamut for chroma clamping
        log: Optional logger for diagnostics

    Returns:
        dict of token name -> Oklch, ordered as TOKEN_NAMES
    """
    method = get_contrast_method(method)

    build_surfaces = _SURFACE_BUILDERS.get(background_strategy)
    if build_surfaces is None:
        (log or logger).warning(
            "Unknown background strategy %r, using %s",
            background_strategy,
            DEFAULT_BACKGROUND_STRATEGY,
        )
        build_surfaces = _SURFACE_BUILDERS[DEFAULT_BACKGROUND_STRATEGY]
    surfaces = build_surfaces(anchors.primary, is_dark, gamut)

    # === MODE ADAPTATION ===
    if is_dark:
        primary = anchors.primary._replace(l=max(0.3, anchors.primary.l - 0.1))
        secondary = adjust_lightness(anchors.secondary, -0.15, gamut)
        accent = adjust_lightness(anchors.accent, -0.15, gamut)
        destructive = adjust_lightness(anchors.destructive, -0.1, gamut)
    else:
        primary = anchors.primary
        secondary = anchors.secondary
        accent = anchors.accent
        destructive = anchors.destructive
    primary = clamp_oklch(primary, gamut)
    secondary = clamp_oklch(secondary, gamut)
    accent = clamp_oklch(accent, gamut)
    destructive = clamp_oklch(destructive, gamut)

    def text_on(background):
        return contrasting_foreground(background, method=method, gamut=gamut)

    tokens = {
        "background": surfaces["background"],
        "foreground": text_on(surfaces["background"]),
        "card": surfaces["card"],
        "card-foreground": text_on(surfaces["card"]),
        "popover": surfaces["popover"],
        "popover-foreground": text_on(surfaces["popover"]),
        "primary": primary,
        "primary-foreground": solid_foreground(primary, method=method, gamut=gamut),
        "secondary": secondary,
        "secondary-foreground": text_on(secondary),
        "muted": surfaces["muted"],
        "muted-foreground": text_on(surfaces["muted"]),
        "accent": accent,
        "accent-foreground": text_on(accent),
        "destructive": destructive,
        "destructive-foreground": solid_foreground(
            destructive, method=method, gamut=gamut
        ),
        "border": surfaces["border"],
        "input": surfaces["input"],
        "ring": ring_color(anchors.primary, is_dark, gamut),
    }
    tokens.update(chart_colors(anchors.primary, is_dark, gamut))
    tokens.update(sidebar_colors(anchors.primary, is_dark, method=method, gamut=gamut))

    ensure_complete(tokens)
    return {name: tokens[name] for name in TOKEN_NAMES}


def enforce_token_contrast(
    tokens,
    pairs=CONTRAST_PAIRS,
    target_ratio=MIN_TEXT_CONTRAST,
    max_iterations=DEFAULT_MAX_ITERATIONS,
    method=None,
    gamut=DEFAULT_GAMUT,
    log=None,
):
    """Run ensure_contrast over every pair and return a new token dict.

    Only foregrounds are written back; backgrounds keep their designed values,
    so every pair is judged against its real background. A pair that misses
    the target is regenerated from both seed sides. Pairs that still cannot
    reach the target are logged, never raised.
    """
    method = get_contrast_method(method)
    log = log or logger
    fixed = dict(tokens)

    for fg_token, bg_token in pairs:
        background = fixed[bg_token]
        foreground, ratio = _search_foreground(
            fixed[fg_token], background, target_ratio, max_iterations, method, gamut
        )
        if ratio < target_ratio:
            candidate = contrasting_foreground(
                background,
                target_ratio=target_ratio,
                max_iterations=max_iterations,
                method=method,
                gamut=gamut,
            )
            candidate_ratio = contrast_ratio(candidate, background, method)
            if candidate_ratio > ratio:
                foreground, ratio = candidate, candidate_ratio
        if ratio < target_ratio:
            log.warning(
                "Contrast enforcement failed for %s/%s: %.2f:1 is below the "
                "%.1f:1 target",
                fg_token,
                bg_token,
                ratio,
                target_ratio,
            )
        fixed[fg_token] = foreground

    return fixed
