from core.vector import Vector3
from core.ray import Ray

__all__ = ["Vector3", "Ray"]
