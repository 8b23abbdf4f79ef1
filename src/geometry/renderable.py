# geometry/renderable.py
from typing import List
from core.vector import Vector3
from core.ray import Ray

class Renderable:
    """
    Abstract class for objects that can be hit by a ray and shaded.
    """
    def intersects(self, ray: Ray) -> bool:
        raise NotImplementedError("intersects() must be implemented by subclasses.")

    def intersects_at(self, ray: Ray) -> List[Vector3]:
        """
        Returns the intersection points ordered from nearest to farthest.
        An empty list means the ray misses.
        """
        raise NotImplementedError("intersects_at() must be implemented by subclasses.")

    def get_luminosity(self) -> int:
        raise NotImplementedError("get_luminosity() must be implemented by subclasses.")
