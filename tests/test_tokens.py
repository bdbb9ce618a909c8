import logging

import pytest

from theme_palette_generator.color import Oklch, create_oklch, parse_color_input
from theme_palette_generator.contrast import contrast_ratio
from theme_palette_generator.palette.harmony import (
    SingleColorInput,
    generate_palette_anchors,
)
from theme_palette_generator.palette.tokens import (
    CONTRAST_PAIRS,
    TOKEN_NAMES,
    IncompleteTokenSetError,
    chart_colors,
    contrasting_foreground,
    enforce_token_contrast,
    ensure_complete,
    map_palette_to_tokens,
    neutral_surfaces,
    primary_surfaces,
    ring_color,
)

PURPLE = parse_color_input("#8b5cf6")


@pytest.fixture
def anchors():
    return generate_palette_anchors(SingleColorInput(PURPLE), "complementary")


def test_token_names_closed_set():
    assert len(TOKEN_NAMES) == 32
    assert len(set(TOKEN_NAMES)) == 32
    for fg, bg in CONTRAST_PAIRS:
        assert fg in TOKEN_NAMES
        assert bg in TOKEN_NAMES


@pytest.mark.parametrize("is_dark", [False, True])
@pytest.mark.parametrize("strategy", ["neutral", "primary"])
def test_map_palette_is_total_and_ordered(anchors, is_dark, strategy):
    tokens = map_palette_to_tokens(anchors, is_dark, background_strategy=strategy)
    assert tuple(tokens) == TOKEN_NAMES
    for color in tokens.values():
        assert isinstance(color, Oklch)
        assert 0 <= color.l <= 1
        assert 0 <= color.c <= 0.33
        assert 0 <= color.h < 360


def test_neutral_surfaces_follow_ladder():
    primary = PURPLE.oklch
    dark = neutral_surfaces(primary, is_dark=True)
    light = neutral_surfaces(primary, is_dark=False)
    assert dark["background"].l == pytest.approx(0.08)
    assert light["background"].l == pytest.approx(0.995)
    for surface in list(dark.values()) + list(light.values()):
        assert surface.c <= 0.01
        assert surface.h == pytest.approx(primary.h)
    assert dark["background"].l < dark["card"].l < dark["muted"].l


def test_primary_surfaces_scale_from_primary():
    primary = PURPLE.oklch
    light = primary_surfaces(primary, is_dark=False)
    dark = primary_surfaces(primary, is_dark=True)
    assert light["background"].l == pytest.approx(min(0.995, primary.l + 0.22))
    assert dark["background"].l == pytest.approx(max(0.06, primary.l - 0.32))
    assert light["background"].c > 0.01


def test_dark_mode_adapts_anchor_lightness(anchors):
    light = map_palette_to_tokens(anchors, is_dark=False)
    dark = map_palette_to_tokens(anchors, is_dark=True)
    assert light["primary"] == anchors.primary
    assert dark["primary"].l == pytest.approx(max(0.3, anchors.primary.l - 0.1))
    assert dark["secondary"].l == pytest.approx(anchors.secondary.l - 0.15)
    assert dark["destructive"].l == pytest.approx(anchors.destructive.l - 0.1)
    assert dark["accent"].h == pytest.approx(anchors.accent.h)


def test_dark_primary_lightness_floor():
    black = parse_color_input("#000000")
    anchors = generate_palette_anchors(SingleColorInput(black))
    dark = map_palette_to_tokens(anchors, is_dark=True)
    assert dark["primary"].l == pytest.approx(0.3)


def test_ring_color():
    primary = Oklch(0.6, 0.2, 150)
    assert ring_color(primary, True) == Oklch(0.38, 0.1, 150)
    assert ring_color(primary, False).l == pytest.approx(0.702)
    assert ring_color(primary, False).c == pytest.approx(0.06)


def test_chart_hues_step_around_wheel():
    primary = Oklch(0.6, 0.2, 300)
    charts = chart_colors(primary, is_dark=False)
    assert list(charts) == ["chart-1", "chart-2", "chart-3", "chart-4", "chart-5"]
    for step, color in zip((0, 60, 120, 180, 240), charts.values()):
        assert color.h == pytest.approx((300 + step) % 360)
        assert 0.3 <= color.l <= 0.85


def test_dark_charts_are_lighter():
    primary = Oklch(0.5, 0.15, 40)
    light = chart_colors(primary, is_dark=False)
    dark = chart_colors(primary, is_dark=True)
    assert dark["chart-2"].l > light["chart-2"].l


@pytest.mark.parametrize("method", ["wcag", "oklch"])
def test_contrasting_foreground_picks_readable_side(method):
    white = create_oklch(1.0, 0.0, 0.0)
    black = create_oklch(0.0, 0.0, 0.0)
    on_white = contrasting_foreground(white, method=method)
    on_black = contrasting_foreground(black, method=method)
    assert on_white.l < 0.5
    assert on_black.l > 0.5
    assert contrast_ratio(on_white, white, method) >= 4.5
    assert contrast_ratio(on_black, black, method) >= 4.5


def test_contrasting_foreground_tints_toward_background():
    background = create_oklch(0.95, 0.08, 200)
    fg = contrasting_foreground(background)
    assert fg.h == pytest.approx(200)
    assert fg.c == pytest.approx(0.02)


def test_unknown_strategy_falls_back(anchors, caplog):
    with caplog.at_level(logging.WARNING):
        tokens = map_palette_to_tokens(anchors, False, background_strategy="gradient")
    assert tokens == map_palette_to_tokens(anchors, False)
    assert "gradient" in caplog.text


def test_ensure_complete_reports_missing():
    tokens = {name: Oklch(0.5, 0, 0) for name in TOKEN_NAMES}
    assert ensure_complete(tokens) is tokens

    del tokens["ring"]
    tokens["chart-3"] = None
    with pytest.raises(IncompleteTokenSetError) as excinfo:
        ensure_complete(tokens)
    assert excinfo.value.missing == ("ring", "chart-3")
    assert isinstance(excinfo.value, ValueError)


def test_enforce_contrast_only_rewrites_foregrounds(anchors):
    tokens = map_palette_to_tokens(anchors, is_dark=False)
    tokens["foreground"] = Oklch(0.9, 0.0, 0.0)
    original = dict(tokens)

    fixed = enforce_token_contrast(tokens)

    assert tokens == original
    assert contrast_ratio(fixed["foreground"], fixed["background"]) >= 4.5
    background_tokens = {bg for _, bg in CONTRAST_PAIRS}
    for name in background_tokens:
        assert fixed[name] == original[name]


def test_enforce_contrast_logs_failures(anchors, caplog):
    tokens = map_palette_to_tokens(anchors, is_dark=False)
    tokens["foreground"] = tokens["background"]

    with caplog.at_level(logging.WARNING):
        # No foreground reaches 25:1 against any background
        fixed = enforce_token_contrast(
            tokens, pairs=(("foreground", "background"),), target_ratio=25
        )

    assert "foreground/background" in caplog.text
    assert fixed["background"] == tokens["background"]



@pytest.mark.parametrize("background_l, expected_l", [(0.3, 0.92), (0.7, 0.16)])
def test_seed_side_is_farther_from_background(background_l, expected_l):
    background = Oklch(background_l, 0.0, 0.0)
    fg = contrasting_foreground(background, target_ratio=1.5, method="oklch")
    assert fg.l == pytest.approx(expected_l)


def test_contrasting_foreground_tries_other_side():
    # Black tops out near 4.3:1 on this gray, white reaches about 4.9:1
    background = Oklch(0.55, 0.0, 0.0)
    fg = contrasting_foreground(background)
    assert fg.l > background.l
    assert contrast_ratio(fg, background) >= 4.5


def test_enforce_contrast_judges_real_background():
    background = Oklch(0.55, 0.0, 0.0)
    tokens = {"foreground": Oklch(0.16, 0.0, 0.0), "background": background}
    fixed = enforce_token_contrast(tokens, pairs=(("foreground", "background"),))
    assert fixed["background"] == background
    assert contrast_ratio(fixed["foreground"], background) >= 4.5
