# core/utils.py
import numbers
from typing import Tuple

Color = Tuple[int, int, int]


def check_channel(name: str, value: int) -> int:
    """
    Validates one 8-bit color channel and returns it as a plain int.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in [0, 255], got {value!r}")
    return int(value)


def check_color(color) -> Color:
    color = tuple(color)
    if len(color) != 3:
        raise ValueError(f"color must have 3 channels, got {len(color)}")
    return tuple(check_channel("color channel", channel) for channel in color)


def check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return int(value)
