import numpy as np
import pytest
from sphere_caster import constants
from sphere_caster.geometry import Sphere
from sphere_caster.intersections import (
    Ray,
    orthographic_footprints,
    primary_ray,
    select_root,
    solve_quadratic,
)
from sphere_caster.vector import Vector3


def test_intersection(sphere, forward_ray):
    assert sphere.intersect(forward_ray) == 4.0


def test_no_intersection(sphere):
    ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
    assert sphere.intersect(ray) is None


def test_intersection_point(sphere, forward_ray, near_point):
    assert forward_ray.get_intersection_point(sphere) == near_point


def test_intersection_point_on_miss(sphere):
    ray = Ray(Vector3(3.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
    assert ray.get_intersection_point(sphere) is None


def test_origin_inside_sphere_returns_far_root(sphere):
    """Only the exit root lies in front of the origin."""
    ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 1.0))
    assert sphere.intersect(ray) == 1.0
    assert ray.get_intersection_point(sphere) == Vector3(0.0, 0.0, 6.0)


def test_sphere_behind_origin_is_not_hit(sphere):
    ray = Ray(Vector3(0.0, 0.0, 10.0), Vector3(0.0, 0.0, 1.0))
    assert sphere.intersect(ray) is None


def test_origin_on_surface_facing_out_is_not_hit(sphere):
    """t = 0 counts as behind the origin."""
    ray = Ray(Vector3(0.0, 0.0, 4.0), Vector3(0.0, 0.0, -1.0))
    assert sphere.intersect(ray) is None


def test_origin_on_surface_facing_in_hits_far_side(sphere):
    ray = Ray(Vector3(0.0, 0.0, 4.0), Vector3(0.0, 0.0, 1.0))
    assert sphere.intersect(ray) == 2.0


def test_non_unit_direction_scales_parameter(sphere):
    """t is measured in multiples of the direction vector."""
    ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 2.0))
    assert sphere.intersect(ray) == 2.0
    assert ray.get_intersection_point(sphere) == Vector3(0.0, 0.0, 4.0)


def test_tangent_ray_grazes_once(black):
    sphere = Sphere(Vector3(1.0, 0.0, 5.0), 1.0, black)
    ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
    assert sphere.intersect(ray) == 5.0


def test_intersection_is_idempotent(sphere, forward_ray):
    results = {sphere.intersect(forward_ray) for _ in range(5)}
    assert results == {4.0}


def test_solve_quadratic():
    assert solve_quadratic(1.0, -10.0, 24.0) == (6.0, 4.0)
    assert solve_quadratic(1.0, 0.0, 1.0) is None
    assert solve_quadratic(1.0, -2.0, 1.0) == (1.0, 1.0)


@pytest.mark.parametrize("t1, t2, expected", [
    (6.0, 4.0, 4.0),
    (1.0, -3.0, 1.0),
    (-3.0, 1.0, 1.0),
    (0.0, -2.0, None),
    (-1.0, -2.0, None),
    (0.0, 0.0, None),
])
def test_select_root(t1, t2, expected):
    assert select_root(t1, t2) == expected


def test_primary_ray_is_orthographic():
    ray = primary_ray(12, 7)
    assert ray.origin == Vector3(12.0, 7.0, 0.0)
    assert ray.direction == Vector3(0.0, 0.0, 1.0)
    assert ray.at(3.0) == Vector3(12.0, 7.0, 3.0)


def test_primary_rays_share_the_configured_direction():
    assert primary_ray(0, 0).direction == Vector3(*constants.RAY_DIRECTION)
    assert primary_ray(5, 9).direction is primary_ray(0, 0).direction


def test_footprints_cover_every_hit(black):
    """Every pixel whose primary ray hits a sphere lies inside its window."""
    spheres = [
        Sphere(Vector3(7.3, 4.6, 20.0), 3.2, black),
        Sphere(Vector3(0.5, 15.5, 2.0), 4.0, black),    # Clipped at the corner
        Sphere(Vector3(10.0, 10.0, -0.5), 2.0, black),  # Straddles the camera plane
    ]
    width, height = 16, 16
    windows = orthographic_footprints(
        [s.center.as_array() for s in spheres], [s.radius for s in spheres], width, height)

    for sphere, (x0, x1, y0, y1) in zip(spheres, windows):
        hits = {(x, y) for x in range(width) for y in range(height)
                if sphere.intersect(primary_ray(x, y)) is not None}
        assert hits
        assert all(x0 <= x < x1 and y0 <= y < y1 for x, y in hits)


def test_footprints_off_canvas_are_empty():
    windows = orthographic_footprints(
        np.array([[-50.0, 5.0, 10.0], [5.0, 500.0, 10.0]]), np.array([3.0, 3.0]), 16, 16)
    for x0, x1, y0, y1 in windows:
        assert (x1 - x0) * (y1 - y0) == 0


def test_footprints_are_clipped_to_canvas():
    windows = orthographic_footprints(np.array([[8.0, 8.0, 5.0]]), np.array([100.0]), 16, 12)
    np.testing.assert_array_equal(windows, [[0, 16, 0, 12]])
