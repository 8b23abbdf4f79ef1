# renderer/export.py
import os
from PIL import Image
from renderer.capture import Capture


def to_image(capture: Capture) -> Image.Image:
    """
    Converts a capture into an RGB Pillow image of the same size.
    """
    return Image.fromarray(capture.pixels.copy())


def save_png(capture: Capture, path: str) -> None:
    """
    Writes a capture to `path` as a PNG file.

    Raises:
        FileNotFoundError: If the destination directory doesn't exist
    """
    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Output directory not found: {directory}")
    to_image(capture).save(path, format="PNG")
