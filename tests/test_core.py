"""Tests for core data structures: colors, config and characters."""

import dataclasses
from pathlib import Path

import pytest

from binaryscarf.core.char import Char
from binaryscarf.core.color import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, Color
from binaryscarf.core.config import ScarfConfig
from binaryscarf.errors import ColorParseError, ConfigError


class TestColor:
    """Tests for Color parsing and construction."""

    def test_parse_red(self) -> None:
        color = Color.parse("0xFF0000")
        assert color.rgba == (255, 0, 0, 255)

    def test_parse_is_case_insensitive(self) -> None:
        assert Color.parse("0X647384") == Color.parse("0x647384")
        assert Color.parse("0x647384").rgb == (0x64, 0x73, 0x84)

    def test_parsed_colors_are_opaque(self) -> None:
        assert Color.parse("0x000000").a == 255

    def test_non_hex_digits(self) -> None:
        with pytest.raises(ColorParseError):
            Color.parse("0xzz0000")

    @pytest.mark.parametrize("value", ["ff0000", "#ff0000", "0xfff", "0xff00000", "", "0x+f0000", "0x ff000"])
    def test_malformed_literals(self, value: str) -> None:
        with pytest.raises(ColorParseError):
            Color.parse(value)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Color.parse("nope")

    def test_to_hex(self) -> None:
        assert DEFAULT_FOREGROUND.to_hex() == "0x647384"
        assert Color.parse(DEFAULT_BACKGROUND.to_hex()) == DEFAULT_BACKGROUND

    def test_out_of_range_component(self) -> None:
        with pytest.raises(ValueError):
            Color(256, 0, 0)


class TestScarfConfig:
    """Tests for ScarfConfig defaults, derived values and validation."""

    def test_defaults(self) -> None:
        config = ScarfConfig()
        assert config.output == Path("out.png")
        assert config.columns == 3
        assert config.spacing == 2
        assert config.border == 2
        assert config.stitch_width == 2
        assert config.stitch_height == 3
        assert config.background == DEFAULT_BACKGROUND
        assert config.foreground == DEFAULT_FOREGROUND

    def test_derived_sizes(self) -> None:
        config = ScarfConfig(spacing=3, border=4, stitch_width=5, stitch_height=7)
        assert config.border_width == 20
        assert config.border_height == 28
        assert config.spacing_width == 15
        assert config.spacing_height == 21
        assert config.column_width == 35

    def test_is_immutable(self) -> None:
        config = ScarfConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.columns = 5  # type: ignore[misc]

    def test_validate_returns_self(self) -> None:
        config = ScarfConfig()
        assert config.validate() is config

    def test_zero_spacing_and_border_are_valid(self) -> None:
        ScarfConfig(spacing=0, border=0).validate()

    @pytest.mark.parametrize("overrides", [
        {"columns": 0},
        {"spacing": -1},
        {"border": -1},
        {"stitch_width": 0},
        {"stitch_height": 0},
        {"output": ""},
    ])
    def test_validate_rejects(self, overrides: dict) -> None:
        with pytest.raises(ConfigError):
            ScarfConfig(**overrides).validate()

    def test_from_options_parses_colors(self) -> None:
        config = ScarfConfig.from_options(columns=4, color_a="0x000000", color_b="0xFF0000")
        assert config.columns == 4
        assert config.palette == (Color(0, 0, 0), Color(255, 0, 0))

    def test_from_options_keeps_default_for_missing_color(self) -> None:
        config = ScarfConfig.from_options(color_b="0x123456")
        assert config.background == DEFAULT_BACKGROUND
        assert config.foreground == Color(0x12, 0x34, 0x56)

    def test_from_options_output_string(self) -> None:
        assert ScarfConfig.from_options(output="scarf.png").output == Path("scarf.png")

    def test_from_options_empty_output(self) -> None:
        with pytest.raises(ConfigError):
            ScarfConfig.from_options(output="")

    def test_from_options_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="colour"):
            ScarfConfig.from_options(colour="0xffffff")

    def test_from_options_bad_color(self) -> None:
        with pytest.raises(ColorParseError):
            ScarfConfig.from_options(color_a="white")

    def test_from_options_checks_ranges_before_colors(self) -> None:
        with pytest.raises(ConfigError):
            ScarfConfig.from_options(columns=0, color_a="white")


class TestChar:
    """Tests for the Char record."""

    def test_bits_most_significant_first(self) -> None:
        assert Char(ord("A"), 0, 0).bits() == (1, 0, 0, 0, 0, 0, 1)

    def test_bit_pattern(self) -> None:
        assert Char(ord("B"), 0, 0).bit_pattern() == "1000010"
        assert Char(ord("~"), 0, 0).bit_pattern() == "1111110"

    def test_only_low_seven_bits(self) -> None:
        # 0xC1 shares its low 7 bits with 'A'
        assert Char(0xC1, 0, 0).bits() == Char(ord("A"), 0, 0).bits()

    def test_is_space(self) -> None:
        assert Char(0x20, 0, 0).is_space
        assert not Char(ord("x"), 0, 0).is_space
