import pytest

from theme_palette_generator.color import (
    GAMUT_CHROMA_MAX,
    Oklch,
    adjust_chroma,
    adjust_hue,
    adjust_lightness,
    clamp_oklch,
    format_oklch,
    hue_distance,
    hue_midpoint,
    oklch_to_hex,
    parse_color,
    parse_color_input,
)


def test_parse_hex_red():
    red = parse_color("#ff0000")
    assert red.l == pytest.approx(0.628, abs=0.001)
    assert red.c == pytest.approx(0.258, abs=0.001)
    assert red.h == pytest.approx(29.23, abs=0.05)
    assert red.alpha is None


def test_parse_css_syntaxes_agree():
    reference = parse_color("#ff0000")
    for value in ["rgb(255, 0, 0)", "hsl(0, 100%, 50%)", "#f00", "red"]:
        color = parse_color(value)
        assert color.l == pytest.approx(reference.l, abs=1e-3)
        assert color.c == pytest.approx(reference.c, abs=1e-3)
        assert color.h == pytest.approx(reference.h, abs=0.1)


def test_parse_oklch_string():
    color = parse_color("oklch(0.7 0.1 200)")
    assert color.l == pytest.approx(0.7)
    assert color.c == pytest.approx(0.1)
    assert color.h == pytest.approx(200)


def test_parse_keeps_alpha_below_one():
    color = parse_color("#ff000080")
    assert color.alpha == pytest.approx(128 / 255, abs=1e-3)


def test_parse_failures_return_none():
    assert parse_color("not a color") is None
    assert parse_color("") is None
    assert parse_color(None) is None
    assert parse_color(42) is None
    assert parse_color_input("#12") is None


def test_parse_achromatic_hue_is_zero():
    black = parse_color("#000000")
    assert black.l == pytest.approx(0, abs=1e-6)
    assert black.c == pytest.approx(0, abs=1e-6)
    assert 0 <= black.h < 360


def test_parse_color_input_has_hex():
    parsed = parse_color_input("#3b82f6")
    assert parsed.hex == "#3b82f6"
    assert parsed.oklch == parse_color("#3b82f6")


def test_clamp_ranges():
    color = clamp_oklch(Oklch(1.4, 0.9, -30, 0.4))
    assert color.l == 1.0
    assert color.c == GAMUT_CHROMA_MAX["srgb"]
    assert color.h == 330
    assert color.alpha == 0.4

    wide = clamp_oklch(Oklch(-0.2, 0.9, 725), gamut="rec2020")
    assert wide.l == 0.0
    assert wide.c == GAMUT_CHROMA_MAX["rec2020"]
    assert wide.h == pytest.approx(5)


def test_clamp_unknown_gamut():
    with pytest.raises(ValueError):
        clamp_oklch(Oklch(0.5, 0.1, 10), gamut="cmyk")


def test_format_rounds_to_three_decimals():
    assert format_oklch(Oklch(0.62796, 0.25768, 29.23388)) == "oklch(0.628 0.258 29.234)"
    assert format_oklch(Oklch(0.5, 0.1, 120, 0.5)) == "oklch(0.5 0.1 120 / 0.5)"
    assert format_oklch(Oklch(1, 0, 0)) == "oklch(1 0 0)"


def test_format_hue_rounding_up_to_360_wraps():
    assert format_oklch(Oklch(0.5, 0.1, 359.9996)) == "oklch(0.5 0.1 0)"


def test_format_parse_round_trip():
    samples = [
        Oklch(0.12345, 0.0456, 12.3456),
        Oklch(0.987, 0.3, 359.2),
        Oklch(0.5, 0.21, 181.0004),
        Oklch(1.2, 0.5, -45),
    ]
    for sample in samples:
        clamped = clamp_oklch(sample)
        parsed = parse_color(format_oklch(clamped))
        assert parsed.l == pytest.approx(clamped.l, abs=1e-3)
        assert parsed.c == pytest.approx(clamped.c, abs=1e-3)
        assert hue_distance(parsed.h, clamped.h) < 1e-3


def test_adjust_hue_wraps():
    color = Oklch(0.5, 0.1, 0)
    assert adjust_hue(color, -10).h == 350
    assert adjust_hue(color, 370).h == pytest.approx(adjust_hue(color, 10).h)
    assert adjust_hue(Oklch(0.5, 0.1, 123.4), 370).h == pytest.approx(133.4)
    assert adjust_hue(color, -725).h == pytest.approx(355)


def test_adjust_lightness_and_chroma_clamp():
    color = Oklch(0.9, 0.3, 100)
    assert adjust_lightness(color, 0.5).l == 1.0
    assert adjust_lightness(color, -2).l == 0.0
    assert adjust_chroma(color, 0.2).c == GAMUT_CHROMA_MAX["srgb"]
    assert adjust_chroma(color, -1).c == 0.0
    # Original value untouched
    assert color == Oklch(0.9, 0.3, 100)


def test_hex_round_trip():
    for value in ["#3b82f6", "#f59e0b", "#8b5cf6", "#000000", "#ffffff"]:
        assert oklch_to_hex(parse_color(value)) == value


def test_hex_falls_back_to_black():
    assert oklch_to_hex(None) == "#000000"


def test_hue_midpoint_takes_short_arc():
    assert hue_midpoint(10, 50) == pytest.approx(30)
    assert hue_midpoint(350, 30) == pytest.approx(10)
    assert hue_midpoint(260, 70) == pytest.approx(345)
    assert hue_distance(350, 10) == pytest.approx(20)
