import logging
from collections import namedtuple

from ..color import DEFAULT_GAMUT, chroma_ceiling, parse_color_input
from ..contrast import check_contrast, get_contrast_method
from .harmony import (
    DEFAULT_HARMONY,
    DualColorInput,
    SingleColorInput,
    generate_palette_anchors,
)
from .tokens import (
    CONTRAST_PAIRS,
    DEFAULT_BACKGROUND_STRATEGY,
    enforce_token_contrast,
    map_palette_to_tokens,
)

logger = logging.getLogger(__name__)

MODES = ("light", "dark")

ThemeTokens = namedtuple("ThemeTokens", ["light", "dark"])
GeneratedTheme = namedtuple("GeneratedTheme", ["tokens", "contrast_warnings"])
ContrastWarning = namedtuple(
    "ContrastWarning",
    ["mode", "token", "foreground", "background", "result", "warning"],
)


def build_color_input(primary, secondary=None, gamut=DEFAULT_GAMUT, log=None):
    """Parse user colors into a SingleColorInput or DualColorInput.

    Returns None when the primary cannot be parsed. An unparseable secondary
    degrades to single-color input.
    """
    log = log or logger
    parsed_primary = parse_color_input(primary, gamut)
    if parsed_primary is None:
        log.debug("Primary color %r is not a valid color", primary)
        return None

    parsed_secondary = None
    if secondary:
        parsed_secondary = parse_color_input(secondary, gamut)
        if parsed_secondary is None:
            log.debug("Secondary color %r ignored, using harmony instead", secondary)

    if parsed_secondary is None:
        return SingleColorInput(parsed_primary)
    return DualColorInput(parsed_primary, parsed_secondary)


def generate_theme(
    primary,
    secondary=None,
    harmony=DEFAULT_HARMONY,
    background_strategy=DEFAULT_BACKGROUND_STRATEGY,
    contrast_method=None,
    gamut=DEFAULT_GAMUT,
    log=None,
):
    """Generate light and dark token sets from one or two CSS colors.

    Args:
        primary: Primary brand color (hex, rgb(), hsl() or oklch())
        secondary: Optional secondary color; bypasses the harmony rule
        harmony: Harmony name used to derive secondary and accent
        background_strategy: "neutral" or "primary" surfaces
        contrast_method: "wcag" (default), "oklch" or a ContrastMethod
        gamut: "srgb" (default), "display-p3" or "rec2020"
        log: Optional logger receiving diagnostics

    Returns:
        GeneratedTheme, or None if the primary color cannot be parsed
    """
    log = log or logger
    method = get_contrast_method(contrast_method)
    chroma_ceiling(gamut)

    color_input = build_color_input(primary, secondary, gamut, log)
    if color_input is None:
        return None

    anchors = generate_palette_anchors(color_input, harmony, gamut=gamut, log=log)

    modes = {}
    for mode in MODES:
        raw = map_palette_to_tokens(
            anchors,
            is_dark=mode == "dark",
            background_strategy=background_strategy,
            method=method,
            gamut=gamut,
            log=log,
        )
        modes[mode] = enforce_token_contrast(raw, method=method, gamut=gamut, log=log)

    tokens = ThemeTokens(light=modes["light"], dark=modes["dark"])
    return GeneratedTheme(
        tokens=tokens,
        contrast_warnings=validate_theme_contrast(tokens, method=method),
    )


def validate_theme_contrast(tokens, pairs=CONTRAST_PAIRS, method=None):
    """Check every contrast pair in both modes. Read-only.

    Returns:
        list of ContrastWarning, one per pair per mode (light first)
    """
    method = get_contrast_method(method)
    warnings = []
    for mode in MODES:
        token_set = getattr(tokens, mode)
        for fg_token, bg_token in pairs:
            result = check_contrast(token_set[fg_token], token_set[bg_token], method)
            warnings.append(
                ContrastWarning(
                    mode=mode,
                    token=fg_token,
                    foreground=fg_token,
                    background=bg_token,
                    result=result,
                    warning=not result.aa,
                )
            )
    return warnings


def failing_warnings(theme):
    """Only the contrast checks that did not reach AA."""
    return [w for w in theme.contrast_warnings if w.warning]
