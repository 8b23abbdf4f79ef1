from renderer.capture import Capture
from renderer.scene import DEFAULT_VIEWPORT_DISTANCE, VIEWPORT_PRESETS, Scene

__all__ = ["Capture", "Scene", "DEFAULT_VIEWPORT_DISTANCE", "VIEWPORT_PRESETS"]
