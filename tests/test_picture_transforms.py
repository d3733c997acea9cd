"""
Tests for Picture transforms.

Tests cover:
- Invert and grayscale channel arithmetic
- Rotation mapping and quarter-turn composition
- Horizontal and vertical flips
- Blend averaging and intersection dimensions
- 3x3 box blur and border handling
- Transforms never mutate their source
"""

import numpy as np
import pytest

from PP_Libs.PictureLib.picture import Picture, blend_pictures
from PP_Libs.PictureLib.picture_errors import EmptyInputError, InvalidArgumentError
from PP_Libs.PictureLib.picture_models import Color, FlipDirection


def solid(width, height, rgb):
    picture = Picture(width, height)
    for y in range(height):
        for x in range(width):
            picture.set_pixel(x, y, rgb)
    return picture


class TestInvert:
    """Tests for Picture.invert."""

    def test_inverts_each_channel(self):
        pic = solid(2, 2, (10, 100, 255))
        result = pic.invert()

        assert result.get_pixel(1, 1) == Color(245, 155, 0)
        assert result.size == pic.size

    def test_is_an_involution(self, patterned_picture):
        assert patterned_picture.invert().invert() == patterned_picture

    def test_returns_new_picture(self, patterned_picture):
        before = patterned_picture.copy()
        result = patterned_picture.invert()

        assert result is not patterned_picture
        assert patterned_picture == before


class TestGrayscale:
    """Tests for Picture.grayscale."""

    def test_truncates_average(self, rgbw_picture):
        result = rgbw_picture.grayscale()

        assert result.get_pixel(0, 0) == Color(85, 85, 85)
        assert result.get_pixel(1, 0) == Color(85, 85, 85)
        assert result.get_pixel(0, 1) == Color(85, 85, 85)
        assert result.get_pixel(1, 1) == Color(255, 255, 255)

    def test_truncates_rather_than_rounds(self):
        # (2 + 2 + 1) / 3 = 1.67 -> 1
        assert solid(1, 1, (2, 2, 1)).grayscale().get_pixel(0, 0) == Color(1, 1, 1)

    def test_is_idempotent(self, patterned_picture):
        once = patterned_picture.grayscale()
        assert once.grayscale() == once


class TestRotate:
    """Tests for Picture.rotate."""

    def test_quarter_turn_swaps_dimensions(self, patterned_picture):
        result = patterned_picture.rotate(90)
        assert result.size == (patterned_picture.height, patterned_picture.width)

    def test_quarter_turn_mapping(self, patterned_picture):
        width, height = patterned_picture.size
        result = patterned_picture.rotate(90)

        for x, y, color in patterned_picture.iter_pixels():
            assert result.get_pixel(height - 1 - y, x) == color

    def test_two_by_one_becomes_one_by_two(self):
        pic = Picture(2, 1)
        left, right = Color(1, 1, 1), Color(2, 2, 2)
        pic.set_pixel(0, 0, left)
        pic.set_pixel(1, 0, right)

        result = pic.rotate(90)

        assert result.size == (1, 2)
        # (x, y) -> (H - 1 - y, x): the left pixel lands on row 0
        assert result.get_pixel(0, 0) == left
        assert result.get_pixel(0, 1) == right

    def test_numpy_integer_angle(self, patterned_picture):
        assert patterned_picture.rotate(np.int64(180)) == patterned_picture.rotate(180)

    def test_clockwise(self):
        # Top-left corner of a tall picture moves to the top-right corner
        pic = Picture(2, 3)
        pic.set_pixel(0, 0, (9, 9, 9))

        result = pic.rotate(90)

        assert result.get_pixel(result.width - 1, 0) == Color(9, 9, 9)

    def test_four_quarter_turns_is_identity(self, patterned_picture):
        result = patterned_picture
        for _ in range(4):
            result = result.rotate(90)
        assert result == patterned_picture

    @pytest.mark.parametrize("angle", [0, 360, 720])
    def test_full_turns_are_identity(self, patterned_picture, angle):
        result = patterned_picture.rotate(angle)
        assert result == patterned_picture
        assert result is not patterned_picture

    def test_angle_composes(self, patterned_picture):
        assert patterned_picture.rotate(270) == patterned_picture.rotate(90).rotate(180)

    def test_half_turn_equals_double_flip(self, patterned_picture):
        expected = patterned_picture.flip("H").flip("V")
        assert patterned_picture.rotate(180) == expected

    @pytest.mark.parametrize("angle", [45, -90, 91, 1])
    def test_rejects_bad_angles(self, patterned_picture, angle):
        with pytest.raises(InvalidArgumentError):
            patterned_picture.rotate(angle)

    def test_rejects_non_int_angle(self, patterned_picture):
        with pytest.raises(InvalidArgumentError):
            patterned_picture.rotate("90")

    def test_empty_picture(self):
        assert Picture(0, 3).rotate(90).size == (3, 0)


class TestFlip:
    """Tests for Picture.flip."""

    def test_horizontal_mapping(self, patterned_picture):
        width, _ = patterned_picture.size
        result = patterned_picture.flip(FlipDirection.HORIZONTAL)

        for x, y, color in patterned_picture.iter_pixels():
            assert result.get_pixel(width - 1 - x, y) == color

    def test_vertical_mapping(self, patterned_picture):
        _, height = patterned_picture.size
        result = patterned_picture.flip(FlipDirection.VERTICAL)

        for x, y, color in patterned_picture.iter_pixels():
            assert result.get_pixel(x, height - 1 - y) == color

    @pytest.mark.parametrize("direction", ["H", "V"])
    def test_is_an_involution(self, patterned_picture, direction):
        assert patterned_picture.flip(direction).flip(direction) == patterned_picture

    def test_keeps_dimensions(self, patterned_picture):
        assert patterned_picture.flip("V").size == patterned_picture.size

    def test_rejects_unknown_direction(self, patterned_picture):
        with pytest.raises(InvalidArgumentError):
            patterned_picture.flip("D")


class TestBlend:
    """Tests for Picture.blend and blend_pictures."""

    def test_single_picture_is_identity(self, patterned_picture):
        assert patterned_picture.blend([]) == patterned_picture
        assert blend_pictures([patterned_picture]) == patterned_picture

    def test_averages_with_truncation(self):
        a = solid(2, 2, (0, 10, 255))
        b = solid(2, 2, (1, 20, 0))
        result = a.blend([b])

        # (0 + 1) / 2 = 0, (10 + 20) / 2 = 15, (255 + 0) / 2 = 127
        assert result.get_pixel(0, 0) == Color(0, 15, 127)

    def test_receiver_always_included(self):
        a = solid(1, 1, (90, 90, 90))
        b = solid(1, 1, (0, 0, 0))
        c = solid(1, 1, (0, 0, 0))

        assert a.blend([b, c]).get_pixel(0, 0) == Color(30, 30, 30)

    def test_output_is_intersection(self):
        result = solid(4, 4, (10, 10, 10)).blend([solid(3, 5, (20, 20, 20))])
        assert result.size == (3, 4)

    def test_min_dimensions_across_many(self):
        pictures = [Picture(5, 2), Picture(3, 7), Picture(4, 4)]
        assert blend_pictures(pictures).size == (3, 2)

    def test_blend_pictures_matches_method(self, picture_factory):
        a, b, c = picture_factory(4, 3), picture_factory(3, 3).invert(), picture_factory(4, 4)
        assert blend_pictures([a, b, c]) == a.blend([b, c])

    def test_empty_sequence(self):
        with pytest.raises(EmptyInputError):
            blend_pictures([])

    def test_inputs_untouched(self, patterned_picture):
        other = patterned_picture.invert()
        before = other.copy()
        patterned_picture.blend([other])
        assert other == before


class TestBlur:
    """Tests for Picture.blur."""

    @pytest.mark.parametrize("size", [(1, 1), (2, 2), (1, 5), (5, 2)])
    def test_small_pictures_unchanged(self, picture_factory, size):
        pic = picture_factory(*size)
        assert pic.blur() == pic

    def test_center_of_three_by_three(self):
        pic = Picture(3, 3)
        pic.set_pixel(1, 1, (90, 18, 10))

        result = pic.blur()

        # 90 / 9 = 10, 18 / 9 = 2, 10 / 9 = 1
        assert result.get_pixel(1, 1) == Color(10, 2, 1)
        # Borders copied unchanged
        assert result.get_pixel(0, 0) == Color(0, 0, 0)
        assert result.get_pixel(2, 1) == Color(0, 0, 0)

    def test_uses_source_pixels_not_partial_results(self):
        pic = Picture(4, 3)
        pic.set_pixel(1, 1, (255, 255, 255))

        result = pic.blur()

        # (1,1) and (2,1) both see only the original white pixel
        assert result.get_pixel(1, 1) == Color(28, 28, 28)
        assert result.get_pixel(2, 1) == Color(28, 28, 28)

    def test_uniform_picture_unchanged(self):
        pic = solid(6, 5, (40, 50, 60))
        assert pic.blur() == pic

    def test_border_pixels_copied(self, picture_factory):
        pic = picture_factory(5, 4)
        result = pic.blur()

        for x, y, color in pic.iter_pixels():
            if x in (0, 4) or y in (0, 3):
                assert result.get_pixel(x, y) == color

    def test_keeps_dimensions(self, patterned_picture):
        assert patterned_picture.blur().size == patterned_picture.size
