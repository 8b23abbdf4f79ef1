"""Unit tests for Capture.

Tests cover:
- Allocation and black initialization
- Pixel reads and writes
- Bounds and color validation
- Freezing after rendering
"""

import numpy as np
import pytest

from renderer.capture import Capture


@pytest.fixture
def capture():
    return Capture(4, 3)


class TestCaptureBasics:
    """Tests for allocation and pixel access."""

    def test_dimensions(self, capture):
        """Test that the grid is height x width x 3."""
        assert capture.width == 4
        assert capture.height == 3
        assert capture.pixels.shape == (3, 4, 3)
        assert capture.pixels.dtype == np.uint8

    def test_starts_black(self, capture):
        """Test that every pixel starts at (0, 0, 0)."""
        assert not capture.pixels.any()
        assert capture.get_pixel(3, 2) == (0, 0, 0)

    def test_set_and_get_pixel(self, capture):
        """Test writing a pixel addressed by column and row."""
        capture.set_pixel(3, 1, (10, 20, 30))
        assert capture.get_pixel(3, 1) == (10, 20, 30)
        # Row-major storage: pixels[y, x]
        assert tuple(capture.pixels[1, 3]) == (10, 20, 30)
        assert capture.get_pixel(1, 2) == (0, 0, 0)

    def test_invalid_dimensions(self):
        """Test that empty captures are rejected."""
        with pytest.raises(ValueError):
            Capture(0, 10)
        with pytest.raises(ValueError):
            Capture(10, -1)

    def test_equality(self):
        """Test that captures compare by size and content."""
        a = Capture(2, 2)
        b = Capture(2, 2)
        assert a == b
        b.set_pixel(0, 0, (1, 1, 1))
        assert a != b
        assert Capture(2, 3) != Capture(3, 2)


class TestCaptureValidation:
    """Tests for rejecting bad coordinates and colors."""

    @pytest.mark.parametrize("x, y", [(4, 0), (0, 3), (-1, 0), (0, -1), (100, 100)])
    def test_out_of_range_write(self, capture, x, y):
        """Test that writes outside the grid raise IndexError."""
        with pytest.raises(IndexError):
            capture.set_pixel(x, y, (255, 255, 255))

    @pytest.mark.parametrize("x, y", [(4, 0), (0, 3), (-1, 2)])
    def test_out_of_range_read(self, capture, x, y):
        """Test that reads outside the grid raise IndexError."""
        with pytest.raises(IndexError):
            capture.get_pixel(x, y)

    @pytest.mark.parametrize("color", [(0, 0), (0, 0, 256), (-1, 0, 0), (0.5, 0, 0)])
    def test_bad_color(self, capture, color):
        """Test that colors must be three 8-bit channels."""
        with pytest.raises(ValueError):
            capture.set_pixel(0, 0, color)


class TestCaptureFreeze:
    """Tests for the read-only state after rendering."""

    def test_pixels_view_is_read_only(self, capture):
        """Test that the exposed array cannot be written through."""
        with pytest.raises(ValueError):
            capture.pixels[0, 0] = (1, 2, 3)

    def test_freeze_blocks_writes(self, capture):
        """Test that set_pixel fails once frozen, while reads still work."""
        capture.set_pixel(0, 0, (5, 5, 5))
        assert not capture.frozen
        capture.freeze()
        assert capture.frozen
        with pytest.raises(RuntimeError):
            capture.set_pixel(0, 0, (1, 1, 1))
        assert capture.get_pixel(0, 0) == (5, 5, 5)



class TestCaptureInputTypes:
    """Tests for the accepted integer and channel types."""

    def test_numpy_dimensions(self):
        """Test that numpy integers are valid sizes."""
        capture = Capture(np.int64(4), np.int32(3))
        assert (capture.width, capture.height) == (4, 3)
        assert capture.pixels.shape == (3, 4, 3)

    @pytest.mark.parametrize("width, height", [(2.5, 3), (4, 3.0), (True, 3), ("4", 3)])
    def test_non_integer_dimensions(self, width, height):
        """Test that fractional, boolean and string sizes raise ValueError."""
        with pytest.raises(ValueError):
            Capture(width, height)

    @pytest.mark.parametrize("color", [(True, 0, 0), (0, False, 0)])
    def test_bool_channels_rejected(self, capture, color):
        """Test that booleans are not accepted as channel values."""
        with pytest.raises(ValueError):
            capture.set_pixel(0, 0, color)

    def test_numpy_channels_accepted(self, capture):
        """Test that numpy integer channels are stored as given."""
        capture.set_pixel(1, 1, (np.uint8(9), np.int64(8), 7))
        assert capture.get_pixel(1, 1) == (9, 8, 7)
