"""
Pytest fixtures and configuration for Sphere Caster tests.

This module provides the reference sphere, rays and lights shared by the
geometry, shading and rendering tests.
"""

import numpy as np
import pytest
from sphere_caster.geometry import Sphere
from sphere_caster.intersections import Ray
from sphere_caster.rendering import Color, Light, Material
from sphere_caster.scene import Scene
from sphere_caster.vector import Vector3


@pytest.fixture
def black():
    """Opaque black material."""
    return Material(Color(0, 0, 0, 255))


@pytest.fixture
def sphere(black):
    """Unit sphere five units down the +Z axis."""
    return Sphere(Vector3(0.0, 0.0, 5.0), 1.0, black)


@pytest.fixture
def forward_ray():
    """Ray from the origin along +Z."""
    return Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))


@pytest.fixture
def near_point():
    """Where forward_ray meets sphere."""
    return Vector3(0.0, 0.0, 4.0)


@pytest.fixture
def lights():
    """Lights placed around the reference sphere."""
    return {
        'side': Light(Vector3(5.0, 0.0, 3.0), 1.0),    # Lit hemisphere, off axis
        'behind': Light(Vector3(0.0, 0.0, 10.0), 1.0),  # Directly behind the sphere
        'camera': Light(Vector3(0.0, 0.0, 0.0), 1.0),   # At the ray origin
    }


@pytest.fixture
def make_scene():
    """Factory for small scenes with a fixed background."""
    def _make(spheres, width=16, height=16, light=None, background=Color(10, 20, 30)):
        if light is None:
            light = Light(Vector3(width / 2.0, height / 2.0, 0.0), 1.0)
        return Scene(width=width, height=height, spheres=spheres,
                     light=light, background=background)
    return _make


@pytest.fixture
def solid():
    """Factory for opaque materials of a given color."""
    def _solid(r, g, b):
        return Material(Color(r, g, b, 255))
    return _solid


@pytest.fixture
def assert_vector_close():
    """Assert that two vectors are close, with helpful error messages."""
    def _assert(actual, expected, atol=1e-12, err_msg=""):
        np.testing.assert_allclose(
            actual.as_array(), np.asarray(expected, dtype=float), rtol=0.0, atol=atol,
            err_msg=f"Vector mismatch: {err_msg}"
        )
    return _assert
