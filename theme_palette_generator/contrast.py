"""Contrast measurement and enforcement for OKLCH colors.

Two luminance models are available:

``wcag``  WCAG 2.1 relative luminance from linearized sRGB, with APCA Lc as
          the perceptual score (default).
``oklch`` OKLCH lightness used directly as the luminance proxy, with the
          absolute lightness delta as the perceptual score.

``ensure_contrast`` only ever talks to a ``ContrastMethod``, so either model
can drive the phased search.
"""

import logging
from collections import namedtuple
from functools import lru_cache

import numpy as np

from .color import DEFAULT_GAMUT, clamp_oklch, oklch_to_srgb

logger = logging.getLogger(__name__)

# Contrast requirements
MIN_TEXT_CONTRAST = 4.5  # AA for normal text
AAA_CONTRAST = 7.0

DEFAULT_MAX_ITERATIONS = 100

# Search steps, in OKLCH lightness
FOREGROUND_STEP = 0.02
BACKGROUND_STEP = 0.01  # Smaller so the background stays close to design intent
EXTREME_STEP = 0.05

# Phase boundaries as a share of max_iterations
PHASE_ONE_SHARE = 0.6
PHASE_TWO_SHARE = 0.9
BACKGROUND_NUDGE_EVERY = 3

ContrastResult = namedtuple("ContrastResult", ["ratio", "aa", "aaa", "apca"])
EnforcementResult = namedtuple(
    "EnforcementResult", ["foreground", "background", "success", "iterations"]
)

# WCAG 2.1 / Rec. 709 coefficients
_WCAG_COEFFICIENTS = np.array([0.2126, 0.7152, 0.0722])

# APCA 0.0.98G-4g constants
_APCA_COEFFICIENTS = np.array([0.2126729, 0.7151522, 0.0721750])
_APCA_MAIN_TRC = 2.4
_APCA_NORM_BG = 0.56
_APCA_NORM_TXT = 0.57
_APCA_REV_TXT = 0.62
_APCA_REV_BG = 0.65
_APCA_BLACK_THRESHOLD = 0.022
_APCA_BLACK_CLAMP = 1.414
_APCA_SCALE = 1.14
_APCA_LOW_OFFSET = 0.027
_APCA_LOW_CLIP = 0.1
_APCA_DELTA_Y_MIN = 0.0005


@lru_cache(maxsize=4096)
def relative_luminance(color):
    """Calculate relative luminance per WCAG 2.1"""
    channels = oklch_to_srgb(color)
    linear = np.where(
        channels <= 0.03928, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4
    )
    return float(np.dot(_WCAG_COEFFICIENTS, linear))


@lru_cache(maxsize=4096)
def _apca_luminance(color):
    channels = oklch_to_srgb(color)
    y = float(np.dot(_APCA_COEFFICIENTS, channels**_APCA_MAIN_TRC))
    if y < _APCA_BLACK_THRESHOLD:
        y += (_APCA_BLACK_THRESHOLD - y) ** _APCA_BLACK_CLAMP
    return y


def apca_lc(text_y, background_y):
    """APCA lightness contrast (Lc) for screen luminances, with polarity."""
    if abs(background_y - text_y) < _APCA_DELTA_Y_MIN:
        return 0.0

    if background_y > text_y:
        # Dark text on light background
        sapc = (background_y**_APCA_NORM_BG - text_y**_APCA_NORM_TXT) * _APCA_SCALE
        output = 0.0 if sapc < _APCA_LOW_CLIP else sapc - _APCA_LOW_OFFSET
    else:
        # Light text on dark background
        sapc = (background_y**_APCA_REV_BG - text_y**_APCA_REV_TXT) * _APCA_SCALE
        output = 0.0 if sapc > -_APCA_LOW_CLIP else sapc + _APCA_LOW_OFFSET

    return output * 100


class ContrastMethod:
    """Luminance model used for contrast ratios and the perceptual score."""

    name = None

    def luminance(self, color):
        raise NotImplementedError

    def perceptual_contrast(self, foreground, background):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class WcagContrast(ContrastMethod):
    name = "wcag"

    def luminance(self, color):
        return relative_luminance(color)

    def perceptual_contrast(self, foreground, background):
        text_y = _apca_luminance(foreground)
        background_y = _apca_luminance(background)
        return abs(apca_lc(text_y, background_y))


class OklchLightnessContrast(ContrastMethod):
    name = "oklch"

    def luminance(self, color):
        return max(0.0, min(1.0, color.l))

    def perceptual_contrast(self, foreground, background):
        return abs(self.luminance(foreground) - self.luminance(background)) * 100


CONTRAST_METHODS = {
    WcagContrast.name: WcagContrast(),
    OklchLightnessContrast.name: OklchLightnessContrast(),
}
DEFAULT_CONTRAST_METHOD = WcagContrast.name


def get_contrast_method(method=None):
    """Resolve a method name (or instance) to a ContrastMethod."""
    if method is None:
        method = DEFAULT_CONTRAST_METHOD
    if isinstance(method, ContrastMethod):
        return method
    try:
        return CONTRAST_METHODS[method]
    except KeyError:
        raise ValueError(
            f"Unknown contrast method {method!r}, "
            f"expected one of {', '.join(CONTRAST_METHODS)}"
        ) from None


def ratio_from_luminance(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(foreground, background, method=None):
    method = get_contrast_method(method)
    return ratio_from_luminance(
        method.luminance(foreground), method.luminance(background)
    )


def apca_contrast(foreground, background, method=None):
    return get_contrast_method(method).perceptual_contrast(foreground, background)


def check_contrast(foreground, background, method=None):
    """Measure a foreground/background pair against the AA and AAA thresholds."""
    method = get_contrast_method(method)
    ratio = contrast_ratio(foreground, background, method)
    return ContrastResult(
        ratio=ratio,
        aa=ratio >= MIN_TEXT_CONTRAST,
        aaa=ratio >= AAA_CONTRAST,
        apca=method.perceptual_contrast(foreground, background),
    )


def _step_lightness(color, delta, gamut):
    return clamp_oklch(color._replace(l=color.l + delta), gamut)


def ensure_contrast(
    foreground,
    background,
    target_ratio=MIN_TEXT_CONTRAST,
    max_iterations=DEFAULT_MAX_ITERATIONS,
    method=None,
    gamut=DEFAULT_GAMUT,
):
    """
    Push the foreground's lightness away from the background until the pair
    reaches target_ratio.

    Phase 1 moves only the foreground. Phase 2 keeps moving it and, every
    third iteration, nudges the background the other way. Phase 3 moves the
    foreground with a larger step. Running out of iterations is reported via
    success=False with the last colors tried; it never raises.

    Returns:
        EnforcementResult(foreground, background, success, iterations)
    """
    method = get_contrast_method(method)
    fg = clamp_oklch(foreground, gamut)
    bg = clamp_oklch(background, gamut)

    phase_one_limit = int(max_iterations * PHASE_ONE_SHARE)
    phase_two_limit = int(max_iterations * PHASE_TWO_SHARE)

    iterations = 0
    while iterations < max_iterations:
        fg_lum = method.luminance(fg)
        bg_lum = method.luminance(bg)
        if ratio_from_luminance(fg_lum, bg_lum) >= target_ratio:
            return EnforcementResult(fg, bg, True, iterations)

        fg_is_lighter = fg_lum >= bg_lum
        step = EXTREME_STEP if iterations >= phase_two_limit else FOREGROUND_STEP
        fg = _step_lightness(fg, step if fg_is_lighter else -step, gamut)

        in_phase_two = phase_one_limit <= iterations < phase_two_limit
        if in_phase_two and iterations % BACKGROUND_NUDGE_EVERY == 0:
            bg_step = -BACKGROUND_STEP if fg_is_lighter else BACKGROUND_STEP
            bg = _step_lightness(bg, bg_step, gamut)

        iterations += 1

    success = contrast_ratio(fg, bg, method) >= target_ratio
    return EnforcementResult(fg, bg, success, iterations)
