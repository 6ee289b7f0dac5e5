"""
Scene geometry for the Sphere Caster renderer.
"""
import math
from dataclasses import dataclass

from sphere_caster.intersections import select_root, solve_quadratic
from sphere_caster.rendering import Material
from sphere_caster.shadows import is_occluded
from sphere_caster.vector import Vector3


@dataclass(frozen=True, eq=False)
class Sphere:
    """
    Shaded sphere primitive.

    Attributes:
        center: Sphere center
        radius: Sphere radius (expected > 0, not enforced)
        material: Surface material
    """
    center: Vector3
    radius: float
    material: Material

    __hash__ = None

    def __eq__(self, other):
        if not isinstance(other, Sphere):
            return NotImplemented
        return (self.center == other.center
                and self.radius == other.radius
                and self.material == other.material)

    def intersect(self, ray):
        """
        Ray parameter of the visible intersection with this sphere.

        Returns:
            float t > 0, or None when the ray misses or the sphere lies behind
            the ray origin
        """
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius

        roots = solve_quadratic(a, b, c)
        if roots is None:
            return None
        return select_root(*roots)

    def get_normal_at(self, point):
        # Divides by the center distance rather than the radius; identical on
        # the surface.
        # A zero-radius sphere is only hit at its center; that normal is NaN and
        # shades black.
        distance = self.center.distance_to(point)
        if distance == 0.0:
            return Vector3(math.nan, math.nan, math.nan)
        return (point - self.center) / distance

    def get_brightness_at(self, point, light, occluders):
        """
        Lambertian brightness of a surface point under a point light.

        Args:
            point: Point on this sphere's surface
            light: The scene light
            occluders: Other spheres that may cast a shadow on `point`

        Returns:
            None when the point is in shadow, otherwise the clamped cosine term
            in [0, 1]
        """
        direction_to_light = point.direction_to(light.origin)
        if is_occluded(point, direction_to_light, occluders):
            return None

        normal = self.get_normal_at(point)
        # max() keeps 0.0 when the dot product is NaN
        return max(0.0, direction_to_light.dot(normal))

    def get_color_at(self, point, light, occluders):
        """Shaded color at `point`; shadowed points render as scaled-to-black albedo."""
        brightness = self.get_brightness_at(point, light, occluders)
        if brightness is None:
            brightness = 0.0
        return self.material.albedo.scale(brightness)
