"""
Hard shadow model for the Sphere Caster renderer.

This module builds the occluder list for a shaded sphere and answers whether a
surface point can see the light.
"""
from sphere_caster.intersections import Ray


def occluders_for(spheres, index):
    """
    Every sphere of the scene except the one being shaded.

    Exclusion is positional, so two identical spheres still shadow each other.

    Args:
        spheres: Ordered scene spheres
        index: Position of the shaded sphere in `spheres`

    Returns:
        list of the remaining spheres, in scene order
    """
    return [sphere for i, sphere in enumerate(spheres) if i != index]


def occluders_by_value(spheres, shaded):
    """
    Every sphere that does not compare equal to `shaded`.

    Structural exclusion also drops any duplicate of the shaded sphere, so
    duplicates never shadow each other. Prefer `occluders_for`.
    """
    return [sphere for sphere in spheres if sphere != shaded]


def is_occluded(point, direction_to_light, occluders):
    """
    Whether any occluder blocks the shadow ray.

    The shadow ray starts at `point` and follows `direction_to_light`. Any
    forward intersection counts, including one beyond the light itself. The
    first hit short-circuits the scan.
    """
    shadow_ray = Ray(point, direction_to_light)
    return any(occluder.intersect(shadow_ray) is not None for occluder in occluders)
