# renderer/capture.py
import numpy as np
from core.utils import Color, check_color, check_dimension


class Capture:
    """
    A rendered image: a height x width grid of RGB pixels, 8 bits per channel.

    Pixels are addressed as (x, y) = (column, row), zero-based. The grid
    starts black and can be written until `freeze()` is called; after that
    it is read-only.
    """
    def __init__(self, width: int, height: int):
        self.width = check_dimension("width", width)
        self.height = check_dimension("height", height)
        self._pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the underlying (height, width, 3) array."""
        view = self._pixels.view()
        view.setflags(write=False)
        return view

    @property
    def frozen(self) -> bool:
        return not self._pixels.flags.writeable

    def freeze(self) -> "Capture":
        self._pixels.setflags(write=False)
        return self

    def _check_coords(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} capture")

    def set_pixel(self, x: int, y: int, color: Color):
        self._check_coords(x, y)
        if self.frozen:
            raise RuntimeError("Cannot write to a frozen capture")
        self._pixels[y, x] = check_color(color)

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_coords(x, y)
        r, g, b = self._pixels[y, x]
        return (int(r), int(g), int(b))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Capture):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Capture({self.width}x{self.height})"
