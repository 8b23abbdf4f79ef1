# renderer/scene.py
import copy
import logging
import math
from typing import List, Optional, Tuple, Union
from core.vector import Vector3
from core.ray import Ray
from core.utils import check_dimension
from geometry.renderable import Renderable
from geometry.sphere import Sphere
from renderer.capture import Capture
from renderer.kernels import flatten_spheres, render_spheres_kernel

logger = logging.getLogger(__name__)

# Perpendicular distance from the eye to the image plane.
DEFAULT_VIEWPORT_DISTANCE = 100.0

VIEWPORT_PRESETS = {
    "wide": 100.0,
    "narrow": 500.0,
}


def resolve_viewport_distance(viewport_distance: Union[float, str]) -> float:
    if isinstance(viewport_distance, str):
        try:
            return VIEWPORT_PRESETS[viewport_distance]
        except KeyError:
            raise ValueError(
                f"Unknown viewport preset {viewport_distance!r}, expected one of {sorted(VIEWPORT_PRESETS)}"
            ) from None
    distance = float(viewport_distance)
    if not math.isfinite(distance) or distance <= 0:
        raise ValueError(f"Viewport distance must be positive and finite, got {viewport_distance!r}")
    return distance


class Scene:
    """
    An ordered collection of renderable objects, seen from an eye fixed at
    the world origin looking down +z.

    Objects are copied on insertion, so later changes to the caller's
    instance do not reach the scene.
    """
    def __init__(self):
        self._objects: List[Renderable] = []

    def add_obj(self, obj: Renderable):
        if not isinstance(obj, Renderable):
            raise TypeError(f"Expected a Renderable, got {type(obj).__name__}")
        self._objects.append(copy.copy(obj))

    @property
    def objects(self) -> Tuple[Renderable, ...]:
        return tuple(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def closest(self, ray: Ray) -> Tuple[Optional[Renderable], Optional[Vector3]]:
        """
        Finds the object whose nearest intersection is closest to the ray origin.

        Returns (object, hit point), or (None, None) when nothing is hit.
        The first object added wins ties.
        """
        closest_obj = None
        closest_point = None
        closest_so_far = math.inf
        for obj in self._objects:
            hits = obj.intersects_at(ray)
            point = hits[0] if hits else Vector3.infinity()
            dist = (point - ray.o).magnitude()
            if dist < closest_so_far:
                closest_so_far = dist
                closest_obj = obj
                closest_point = point
        return closest_obj, closest_point

    def capture(self, width: int, height: int,
                viewport_distance: Union[float, str] = DEFAULT_VIEWPORT_DISTANCE, *,
                parallel: bool = False,
                trace_pixel: Optional[Tuple[int, int]] = None) -> Capture:
        """
        Renders the scene into a new width x height Capture.

        Each pixel casts one ray from the origin through
        (x - width/2, y - height/2, viewport_distance) and is painted
        (L, L, L) with the luminosity L of the closest object hit. Pixels
        whose ray hits nothing stay black.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            viewport_distance: Distance from the eye to the image plane, or a
                key of VIEWPORT_PRESETS.
            parallel: Render sphere-only scenes with the compiled kernel,
                spreading rows across threads.
            trace_pixel: (x, y) of a pixel whose ray and hit are logged at
                DEBUG level.

        Returns:
            A frozen Capture.
        """
        width = check_dimension("width", width)
        height = check_dimension("height", height)
        distance = resolve_viewport_distance(viewport_distance)
        logger.debug("Capturing %dx%d with %d objects (viewport distance %s)",
                     width, height, len(self._objects), distance)

        if trace_pixel is not None:
            tx, ty = trace_pixel
            if not (0 <= tx < width and 0 <= ty < height):
                raise IndexError(f"Trace pixel {trace_pixel} is outside a {width}x{height} capture")

        if parallel and all(type(obj) is Sphere for obj in self._objects):
            capture = self._capture_compiled(width, height, distance)
        else:
            if parallel:
                logger.debug("Scene has non-sphere objects, rendering serially")
            capture = self._capture_serial(width, height, distance)

        if trace_pixel is not None:
            self._trace(trace_pixel, width, height, distance)
        return capture.freeze()

    def _capture_serial(self, width: int, height: int, distance: float) -> Capture:
        capture = Capture(width, height)
        x_bound = width / 2
        y_bound = height / 2
        for x in range(width):
            for y in range(height):
                ray = Ray.from_origin(Vector3(x - x_bound, y - y_bound, distance))
                obj, _ = self.closest(ray)
                if obj is not None:
                    lum = obj.get_luminosity()
                    capture.set_pixel(x, y, (lum, lum, lum))
        return capture

    def _capture_compiled(self, width: int, height: int, distance: float) -> Capture:
        capture = Capture(width, height)
        if self._objects:
            centers, radii, luminosities = flatten_spheres(self._objects)
            render_spheres_kernel(centers, radii, luminosities, width, height, distance, capture._pixels)
        return capture

    def _trace(self, pixel: Tuple[int, int], width: int, height: int, distance: float):
        x, y = pixel
        ray = Ray.from_origin(Vector3(x - width / 2, y - height / 2, distance))
        obj, point = self.closest(ray)
        logger.debug("Pixel %s: %r hit %r at %r", pixel, ray, obj, point)
