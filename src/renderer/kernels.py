# renderer/kernels.py
import math
import numpy as np
from numba import njit, prange


def flatten_spheres(spheres):
    """
    Packs spheres into contiguous arrays for the compiled kernel.

    Returns (centers[n, 3] float64, radii[n] float64, luminosities[n] uint8).
    """
    n = len(spheres)
    centers = np.zeros((n, 3), dtype=np.float64)
    radii = np.zeros(n, dtype=np.float64)
    luminosities = np.zeros(n, dtype=np.uint8)
    for i, sphere in enumerate(spheres):
        centers[i] = (sphere.center.x, sphere.center.y, sphere.center.z)
        radii[i] = sphere.radius
        luminosities[i] = sphere.get_luminosity()
    return centers, radii, luminosities


@njit(cache=True)
def nearest_sphere(dx, dy, dz, centers, radii):
    """
    Index of the sphere whose nearest hit along the line through the origin
    and (dx, dy, dz) is closest to the origin, or -1 if none is hit.
    Earlier spheres win ties.
    """
    s = dx * dx + dy * dy + dz * dz
    best = -1
    best_dist = math.inf
    for i in range(centers.shape[0]):
        cx = centers[i, 0]
        cy = centers[i, 1]
        cz = centers[i, 2]
        b = dx * cx + dy * cy + dz * cz
        r = radii[i]
        discriminant = b * b - s * ((cx * cx + cy * cy + cz * cz) - r * r)
        if discriminant < 0:
            continue
        if discriminant == 0:
            t = b / s
        else:
            t = (b - math.sqrt(discriminant)) / s
        px = dx * t
        py = dy * t
        pz = dz * t
        dist = math.sqrt(px * px + py * py + pz * pz)
        if dist < best_dist:
            best_dist = dist
            best = i
    return best


@njit(parallel=True, cache=True)
def render_spheres_kernel(centers, radii, luminosities, width, height, viewport_distance, out):
    x_bound = width / 2.0
    y_bound = height / 2.0
    for y in prange(height):
        dy = y - y_bound
        for x in range(width):
            hit = nearest_sphere(x - x_bound, dy, viewport_distance, centers, radii)
            if hit >= 0:
                lum = luminosities[hit]
                out[y, x, 0] = lum
                out[y, x, 1] = lum
                out[y, x, 2] = lum
