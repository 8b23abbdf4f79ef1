# geometry/sphere.py
import math
from typing import List, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.utils import Color, check_channel, check_color
from geometry.renderable import Renderable

WHITE: Color = (255, 255, 255)
DEFAULT_LUMINOSITY = 10
DEFAULT_SPECULAR = 255
DEFAULT_DIFFUSE = 255


class Sphere(Renderable):
    """
    A sphere defined by its center and radius.

    Only luminosity takes part in shading; the sphere glows with it as a dim
    light source. Color, specular and diffuse reflectance are stored for
    shading models that use them.
    """
    def __init__(self, center: Vector3, radius: float, color: Color = WHITE,
                 luminosity: int = DEFAULT_LUMINOSITY,
                 specular: int = DEFAULT_SPECULAR, diffuse: int = DEFAULT_DIFFUSE):
        self.center = center
        self.radius = radius
        self.color = color
        self.luminosity = luminosity
        self.specular = specular
        self.diffuse = diffuse

    @property
    def center(self) -> Vector3:
        return self._center

    @center.setter
    def center(self, value: Vector3):
        if not isinstance(value, Vector3):
            raise TypeError(f"Sphere center must be a Vector3, got {type(value).__name__}")
        if not all(math.isfinite(c) for c in value):
            raise ValueError(f"Sphere center must be finite, got {value!r}")
        self._center = value

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float):
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"Sphere radius must be finite and non-negative, got {value!r}")
        self._radius = value

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color):
        self._color = check_color(value)

    @property
    def luminosity(self) -> int:
        return self._luminosity

    @luminosity.setter
    def luminosity(self, value: int):
        self._luminosity = check_channel("luminosity", value)

    @property
    def specular(self) -> int:
        return self._specular

    @specular.setter
    def specular(self, value: int):
        self._specular = check_channel("specular", value)

    @property
    def diffuse(self) -> int:
        return self._diffuse

    @diffuse.setter
    def diffuse(self, value: int):
        self._diffuse = check_channel("diffuse", value)

    def _quadratic(self, ray: Ray) -> Tuple[float, float, float]:
        # t^2 |d|^2 - 2t (d.oc) + (|oc|^2 - r^2) = 0
        oc = self.center - ray.o
        s = ray.dir.dot(ray.dir)
        if s == 0:
            raise ValueError("Ray direction must be non-zero")
        b = ray.dir.dot(oc)
        discriminant = b * b - s * (oc.dot(oc) - self.radius * self.radius)
        if not math.isfinite(discriminant):
            raise ValueError(f"Ray {ray!r} gives a non-finite discriminant")
        return s, b, discriminant

    def intersects(self, ray: Ray) -> bool:
        # Same as r^2 |d|^2 >= |c|^2 |d|^2 - (c.d)^2, without dividing by |d|^2.
        _, _, discriminant = self._quadratic(ray)
        return discriminant >= 0

    def intersects_at(self, ray: Ray) -> List[Vector3]:
        s, b, discriminant = self._quadratic(ray)
        if discriminant < 0:
            return []
        if discriminant == 0:
            return [ray.o + ray.dir.scaled(b / s)]
        sqrt_disc = math.sqrt(discriminant)
        near = (b - sqrt_disc) / s
        far = (b + sqrt_disc) / s
        return [ray.o + ray.dir.scaled(near), ray.o + ray.dir.scaled(far)]

    def get_luminosity(self) -> int:
        return self.luminosity

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, luminosity={self.luminosity})"
