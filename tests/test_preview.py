"""Tests for colour_mix.core.preview — calc() evaluation and RGB distance."""

import pytest
from colour_mix.core.mixing import shade, tint
from colour_mix.core.preview import evaluate, resolve_rgb, rgb_distance, to_hex
from colour_mix.core.types import CSSColor


class TestEvaluate:
    def test_number(self):
        assert evaluate(10) == 10.0

    def test_numeric_text(self):
        assert evaluate('0.5') == 0.5

    def test_nested_calc(self):
        assert evaluate('calc(51 + (0 - 51) * 30 / 100)') == pytest.approx(35.7)

    def test_unary_minus(self):
        assert evaluate('calc(10 + (255 - 10) * -5 / 100)') == pytest.approx(-2.25)

    def test_var_is_not_numeric(self):
        assert evaluate('var(--x)') is None
        assert evaluate('calc(var(--x) + 1)') is None

    def test_units_are_not_numeric(self):
        assert evaluate('30px') is None
        assert evaluate('50%') is None

    def test_division_by_zero(self):
        assert evaluate('calc(1 / 0)') is None

    def test_calls_rejected(self):
        assert evaluate('__import__("os")') is None

    def test_bool_rejected(self):
        assert evaluate(True) is None


class TestResolveRgb:
    def test_shade_to_black(self):
        assert resolve_rgb(shade('#336699', 100)) == (0, 0, 0, 1.0)

    def test_tint_half(self):
        assert resolve_rgb(tint('#000', 50)) == (128, 128, 128, 1.0)

    def test_clamps_channels(self):
        assert resolve_rgb(shade('#336699', 200))[:3] == (0, 0, 0)

    def test_missing_alpha_is_opaque(self):
        assert resolve_rgb(CSSColor('rgb', (1, 2, 3))) == (1, 2, 3, 1.0)

    def test_symbolic_has_no_preview(self):
        assert resolve_rgb(CSSColor('rgb', ('var(--r)', '2', '3'))) is None

    def test_overflowing_channel_has_no_preview(self):
        assert resolve_rgb(shade('rgb(1e999 0 0)', 30)) is None

    def test_infinite_alpha_has_no_preview(self):
        assert resolve_rgb(CSSColor('rgb', (1, 2, 3), '1e999')) is None

    def test_non_rgb(self):
        assert resolve_rgb(CSSColor('hsl', ('1', '2%', '3%'))) is None


class TestHexAndDistance:
    def test_to_hex(self):
        assert to_hex((51, 102, 153)) == '#336699'

    def test_to_hex_ignores_alpha(self):
        assert to_hex((0, 0, 0, 0.5)) == '#000000'

    def test_same_colour(self):
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)

    def test_no_uint8_wrap(self):
        assert rgb_distance((0, 0, 0), (200, 200, 200)) > 300

    def test_alpha_ignored(self):
        assert rgb_distance((0, 0, 0, 1.0), (0, 0, 0, 0.2)) == 0.0
