"""
Ray definitions and intersection solvers for the Sphere Caster renderer.

This module contains the quadratic solver used by sphere intersection, the Ray
type, and the vectorized screen-space footprint of spheres under the
orthographic camera.
"""
import math
from dataclasses import dataclass

import numpy as np

from sphere_caster import constants
from sphere_caster.vector import Vector3

PRIMARY_DIRECTION = Vector3(*constants.RAY_DIRECTION)


def solve_quadratic(a, b, c):
    """
    Solve at^2 + bt + c = 0.

    Uses the textbook formula, not the cancellation-free variant; at scene
    scale the precision loss is accepted.

    Args:
        a, b, c: Quadratic coefficients (a != 0)

    Returns:
        tuple: (t1, t2) with t1 the '+ sqrt' root, or None when the
        discriminant is negative
    """
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None
    sqrt_disc = math.sqrt(discriminant)
    t1 = (-b + sqrt_disc) / (2.0 * a)
    t2 = (-b - sqrt_disc) / (2.0 * a)
    return t1, t2


def select_root(t1, t2):
    """
    Pick the ray parameter of the visible hit.

    Both roots in front of the origin: the nearer one. One root in front (origin
    inside the sphere): that one. t = 0 counts as behind.
    """
    if t1 > 0.0 and t2 > 0.0:
        return min(t1, t2)
    if t1 > 0.0:
        return t1
    if t2 > 0.0:
        return t2
    return None


@dataclass(frozen=True)
class Ray:
    origin: Vector3
    direction: Vector3

    def at(self, t):
        """Point at parameter t along the ray."""
        return self.origin + self.direction * t

    def get_intersection_point(self, sphere):
        """World-space point where this ray meets `sphere`, or None on a miss."""
        t = sphere.intersect(self)
        if t is None:
            return None
        return self.at(t)


def primary_ray(x, y):
    """Orthographic primary ray for pixel (x, y), looking along +Z."""
    return Ray(Vector3(float(x), float(y), 0.0), PRIMARY_DIRECTION)


def orthographic_footprints(centers, radii, width, height):
    """
    Vectorized pixel windows that +Z rays can hit, one per sphere.

    A ray from (x, y, 0) along +Z can only meet a sphere when (x, y) lies in the
    disc of the sphere's silhouette, so every hit lies inside the silhouette's
    bounding box. The box is padded by one pixel to stay conservative under
    rounding and clipped to the canvas.

    Args:
        centers: (N, 3) array of sphere centers
        radii: (N,) array of sphere radii
        width: Canvas width in pixels
        height: Canvas height in pixels

    Returns:
        (N, 4) int array of [x_start, x_stop, y_start, y_stop) half-open
        windows; empty windows have start == stop
    """
    centers = np.asarray(centers, dtype=float).reshape(-1, 3)
    radii = np.abs(np.asarray(radii, dtype=float).reshape(-1))

    x_start = np.floor(centers[:, 0] - radii) - 1
    x_stop = np.ceil(centers[:, 0] + radii) + 2
    y_start = np.floor(centers[:, 1] - radii) - 1
    y_stop = np.ceil(centers[:, 1] + radii) + 2

    windows = np.stack([
        np.clip(x_start, 0, width),
        np.clip(x_stop, 0, width),
        np.clip(y_start, 0, height),
        np.clip(y_stop, 0, height),
    ], axis=1).astype(int)

    # Collapse inverted windows (sphere entirely off canvas)
    windows[:, 1] = np.maximum(windows[:, 0], windows[:, 1])
    windows[:, 3] = np.maximum(windows[:, 2], windows[:, 3])
    return windows
