"""Tests for the host ↔ display colour translator."""

from __future__ import annotations

import logging
import math

import pytest

from countdown_hud.core.colors import (
    DEFAULT_COMPONENT_COLOR,
    DEFAULT_DISPLAY_COLOR,
    ComponentColor,
    format_rgba,
    to_component_color,
    to_display_color,
)


# ---------------------------------------------------------------------------
# Host → display
# ---------------------------------------------------------------------------


class TestComponentObjects:
    def test_full_object(self):
        assert to_display_color({"R": 1, "G": 0, "B": 0, "A": 1}) == "rgba(255, 0, 0, 1)"

    def test_alpha_defaults_to_one(self):
        assert to_display_color({"R": 0, "G": 0, "B": 1}) == "rgba(0, 0, 255, 1)"

    def test_alpha_passes_through_unscaled(self):
        assert to_display_color({"R": 1, "G": 1, "B": 1, "A": 0.25}) == "rgba(255, 255, 255, 0.25)"

    def test_half_rounds_up(self):
        assert to_display_color({"R": 0.5, "G": 0.5, "B": 0.5}) == "rgba(128, 128, 128, 1)"

    def test_component_color_instance(self):
        color = ComponentColor(R=0.0, G=1.0, B=0.0, A=0.5)
        assert to_display_color(color) == "rgba(0, 255, 0, 0.5)"

    def test_null_alpha_defaults_to_one(self):
        assert to_display_color({"R": 1, "G": 1, "B": 1, "A": None}) == "rgba(255, 255, 255, 1)"

    @pytest.mark.parametrize("bad", [None, "abc", math.nan, math.inf, [1]])
    def test_unusable_channel_counts_as_zero(self, bad):
        assert to_display_color({"R": bad, "G": 1, "B": 1}) == "rgba(0, 255, 255, 1)"

    def test_numeric_string_channel(self):
        assert to_display_color({"R": "0.5", "G": 0, "B": 0}) == "rgba(128, 0, 0, 1)"

    def test_object_without_rgb_falls_back(self):
        assert to_display_color({"R": 1, "G": 1}) == DEFAULT_DISPLAY_COLOR

    @pytest.mark.parametrize("huge", [10**400, 1e308, "1" + "0" * 400])
    def test_out_of_range_channel_counts_as_zero(self, huge):
        assert to_display_color({"R": huge, "G": 0, "B": 0}) == "rgba(0, 0, 0, 1)"

    def test_huge_integer_alpha_renders_as_inf(self):
        assert to_display_color({"R": 1, "G": 1, "B": 1, "A": 10**400}) == "rgba(255, 255, 255, inf)"

    @pytest.mark.parametrize("k", [0, 1, 64, 127, 128, 200, 254, 255])
    def test_channel_bytes_in_range(self, k):
        result = to_display_color({"R": k / 255, "G": 0.0, "B": 1.0})
        assert result == f"rgba({k}, 0, 255, 1)"


class TestStructStrings:
    def test_engine_struct(self):
        value = "(R=1.000000,G=0.000000,B=0.000000,A=1.000000)"
        assert to_display_color(value) == "rgba(255, 0, 0, 1)"

    def test_struct_without_alpha(self):
        assert to_display_color("(R=0,G=1,B=0)") == "rgba(0, 255, 0, 1)"

    def test_struct_fractional_alpha(self):
        assert to_display_color("(R=0.5,G=0.5,B=0.5,A=0.25)") == "rgba(128, 128, 128, 0.25)"

    def test_struct_with_surrounding_whitespace(self):
        assert to_display_color("  (R=1,G=1,B=1,A=1)  ") == "rgba(255, 255, 255, 1)"

    def test_struct_missing_channel_passes_through(self):
        assert to_display_color("(R=1.0,G=0.0)") == "(R=1.0,G=0.0)"


class TestHexAndPassThrough:
    @pytest.mark.parametrize("raw", ["FF0000FF", "00ff00", "abc"])
    def test_bare_hex_gets_marker(self, raw):
        assert to_display_color(raw) == "#" + raw

    @pytest.mark.parametrize("raw", ["ABCD", "12345", "1234567", "ABCDEFABC"])
    def test_other_hex_lengths_pass_through(self, raw):
        assert to_display_color(raw) == raw

    @pytest.mark.parametrize(
        "raw", ["red", "#FF0000", "rgb(1, 2, 3)", "hsl(0, 100%, 50%)", "(not a struct)"]
    )
    def test_css_strings_pass_through(self, raw):
        assert to_display_color(raw) == raw

    def test_pass_through_is_trimmed(self):
        assert to_display_color("  blue ") == "blue"


class TestFallback:
    @pytest.mark.parametrize("value", [None, "", "   ", {}, 0, 42, 3.5, True, False, [], object()])
    def test_unusable_input_yields_white(self, value):
        assert to_display_color(value) == DEFAULT_DISPLAY_COLOR


class TestFormatRgba:
    def test_integral_alpha(self):
        assert format_rgba(1, 2, 3, 1.0) == "rgba(1, 2, 3, 1)"

    def test_fractional_alpha(self):
        assert format_rgba(1, 2, 3, 0.5) == "rgba(1, 2, 3, 0.5)"

    def test_zero_alpha(self):
        assert format_rgba(0, 0, 0, 0.0) == "rgba(0, 0, 0, 0)"

    def test_non_finite_alpha(self):
        assert format_rgba(0, 0, 0, math.inf) == "rgba(0, 0, 0, inf)"
        assert format_rgba(0, 0, 0, 10**400) == "rgba(0, 0, 0, inf)"


# ---------------------------------------------------------------------------
# Display → host
# ---------------------------------------------------------------------------


class TestHexToComponents:
    def test_shorthand_doubles_digits(self):
        color = to_component_color("#ABC")
        assert color.R == pytest.approx(170 / 255)
        assert color.G == pytest.approx(187 / 255)
        assert color.B == pytest.approx(204 / 255)
        assert color.A == 1.0

    def test_six_digits(self):
        assert to_component_color("#00FF00") == ComponentColor(R=0.0, G=1.0, B=0.0, A=1.0)

    def test_eight_digits_alpha_is_byte_scaled(self):
        color = to_component_color("#FF000080")
        assert color.R == 1.0
        assert color.A == pytest.approx(128 / 255)

    def test_lowercase(self):
        assert to_component_color("#ffffff") == DEFAULT_COMPONENT_COLOR

    @pytest.mark.parametrize("h", ["000000", "FFFFFF", "123456", "7F8081", "A0B0C0", "0F0F0F"])
    def test_round_trip_within_one_step(self, h):
        color = to_component_color("#" + h)
        for channel, i in (("R", 0), ("G", 2), ("B", 4)):
            original = int(h[i:i + 2], 16) / 255
            assert abs(getattr(color, channel) - original) <= 1 / 255

    @pytest.mark.parametrize("h", ["000000", "123456", "FF8001"])
    def test_components_render_back_to_same_bytes(self, h):
        rendered = to_display_color(to_component_color("#" + h))
        r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
        assert rendered == f"rgba({r}, {g}, {b}, 1)"


class TestFunctionalToComponents:
    def test_rgb(self):
        color = to_component_color("rgb(0, 51, 255)")
        assert color.R == 0.0
        assert color.G == pytest.approx(0.2)
        assert color.B == 1.0
        assert color.A == 1.0

    def test_rgba_alpha_taken_literally(self):
        color = to_component_color("rgba(255, 0, 0, 0.5)")
        assert color.R == 1.0
        assert color.A == 0.5

    def test_output_of_forward_path(self):
        color = to_component_color(to_display_color("(R=1,G=0,B=0,A=0.75)"))
        assert color == ComponentColor(R=1.0, G=0.0, B=0.0, A=0.75)


class TestUntranslatable:
    @pytest.mark.parametrize("value", ["red", "#12", "#GGHHII", "#12345", "rgb(1, 2)", "hsl(1, 2, 3)", 42])
    def test_returns_default_and_warns(self, value, caplog):
        with caplog.at_level(logging.WARNING, logger="countdown_hud.core.colors"):
            assert to_component_color(value) == DEFAULT_COMPONENT_COLOR
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_returns_default_silently(self, value, caplog):
        with caplog.at_level(logging.WARNING, logger="countdown_hud.core.colors"):
            assert to_component_color(value) == DEFAULT_COMPONENT_COLOR
        assert caplog.records == []

    def test_component_color_is_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_COMPONENT_COLOR.R = 0.0  # type: ignore[misc]
