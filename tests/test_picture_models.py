"""
Unit tests for picture_models module.

Tests the Color value type and FlipDirection parsing.
"""

import numpy as np
import pytest

from PP_Libs.PictureLib.picture_errors import InvalidArgumentError
from PP_Libs.PictureLib.picture_models import Color, FlipDirection, is_int_value


class TestColor:
    """Tests for the Color value type."""

    def test_equal_channels_are_equal(self):
        """Colors with equal channels should be interchangeable."""
        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert hash(Color(1, 2, 3)) == hash(Color(1, 2, 3))
        assert Color(1, 2, 3) != Color(3, 2, 1)

    def test_is_immutable(self):
        """Should not allow channel reassignment."""
        color = Color(10, 20, 30)
        with pytest.raises(AttributeError):
            color.red = 0

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 1000)])
    def test_rejects_out_of_range(self, channels):
        with pytest.raises(InvalidArgumentError):
            Color(*channels)

    def test_rejects_non_int(self):
        with pytest.raises(InvalidArgumentError):
            Color(1.5, 0, 0)
        with pytest.raises(InvalidArgumentError):
            Color(True, 0, 0)

    def test_accepts_numpy_integer_channels(self):
        """numpy scalars read from pixel arrays are valid channel values."""
        color = Color(np.uint8(5), np.int64(200), np.int32(0))
        assert color == Color(5, 200, 0)
        assert type(color.red) is int
        assert str(color) == "(5,200,0)"

    def test_is_int_value(self):
        assert is_int_value(3)
        assert is_int_value(np.int16(3))
        assert not is_int_value(True)
        assert not is_int_value(np.float64(3.0))
        assert not is_int_value("3")

    def test_packs_and_unpacks_rgb_int(self):
        color = Color(0x12, 0x34, 0x56)
        assert color.to_rgb_int() == 0x123456
        assert Color.from_rgb_int(0x123456) == color

    def test_from_rgb_int_ignores_alpha_bits(self):
        assert Color.from_rgb_int(0xFF102030) == Color(0x10, 0x20, 0x30)

    def test_coerce_accepts_tuples_and_colors(self, sample_rgb_colors):
        for rgb in sample_rgb_colors:
            color = Color.coerce(rgb)
            assert color.as_tuple() == rgb
            assert Color.coerce(color) is color

    def test_coerce_rejects_wrong_length(self):
        with pytest.raises(InvalidArgumentError):
            Color.coerce((1, 2, 3, 4))

    def test_coerce_rejects_strings(self):
        with pytest.raises(InvalidArgumentError):
            Color.coerce("abc")

    def test_str_matches_pixel_dump_format(self):
        assert str(Color(255, 0, 7)) == "(255,0,7)"

    def test_named_constants(self):
        assert Color.BLACK == Color(0, 0, 0)
        assert Color.WHITE == Color(255, 255, 255)


class TestFlipDirection:
    """Tests for FlipDirection.parse."""

    @pytest.mark.parametrize("value", ["H", "h", "horizontal", "HORIZONTAL", " H "])
    def test_parses_horizontal(self, value):
        assert FlipDirection.parse(value) is FlipDirection.HORIZONTAL

    @pytest.mark.parametrize("value", ["V", "v", "vertical", "Vertical"])
    def test_parses_vertical(self, value):
        assert FlipDirection.parse(value) is FlipDirection.VERTICAL

    def test_passes_members_through(self):
        assert FlipDirection.parse(FlipDirection.VERTICAL) is FlipDirection.VERTICAL

    @pytest.mark.parametrize("value", ["X", "", "diagonal", None, 1])
    def test_rejects_unknown(self, value):
        with pytest.raises(InvalidArgumentError):
            FlipDirection.parse(value)
