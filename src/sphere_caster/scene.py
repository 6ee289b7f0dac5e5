"""
Scene description and random scene generation for the Sphere Caster renderer.
"""
import functools
from dataclasses import dataclass

import numpy as np

from sphere_caster import constants
from sphere_caster.geometry import Sphere
from sphere_caster.rendering import Color, Light, Material
from sphere_caster.vector import Vector3


@dataclass(frozen=True, eq=False)
class Scene:
    """
    Everything a render needs: canvas, spheres, light and background.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        spheres: Ordered spheres; order decides overwrite compositing
        light: The single point light
        background: Color of pixels no sphere covers
    """
    width: int
    height: int
    spheres: tuple
    light: Light
    background: Color = Color.from_hex(constants.BACKGROUND_HEX)

    def __post_init__(self):
        """Validate canvas size and normalise the sphere collection."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must be positive, got {self.width}x{self.height}")
        if not isinstance(self.spheres, tuple):
            object.__setattr__(self, "spheres", tuple(self.spheres))

    def __len__(self):
        return len(self.spheres)

    def centers(self):
        """(N, 3) array of sphere centers."""
        if not self.spheres:
            return np.zeros((0, 3))
        return np.array([sphere.center.as_array() for sphere in self.spheres])

    def radii(self):
        return np.array([sphere.radius for sphere in self.spheres], dtype=float)


def centered_light(width, height, depth=constants.LIGHT_DEPTH,
                   brightness=constants.LIGHT_BRIGHTNESS):
    """Light over the middle of the canvas (integer-divided, as pixel coordinates)."""
    return Light(Vector3(float(width // 2), float(height // 2), depth), brightness)


@functools.lru_cache(maxsize=16)
def random_scene(width=constants.DEFAULT_WIDTH, height=constants.DEFAULT_HEIGHT,
                 count=constants.DEFAULT_SPHERE_COUNT, seed=constants.DEFAULT_SEED,
                 max_depth=constants.MAX_DEPTH, min_radius=constants.MIN_RADIUS,
                 max_radius=constants.MAX_RADIUS, light_x=None, light_y=None):
    """
    Generate a reproducible scene of randomly placed, randomly colored spheres.

    Centers are uniform over the canvas and [0, max_depth), radii uniform in
    [min_radius, max_radius), RGB uniform in [0, 255) and fully opaque. The light
    sits at the canvas center on the z = 0 plane unless light_x / light_y are
    given. Results are cached; Scene is immutable so sharing is safe.

    Args:
        width, height: Canvas size in pixels
        count: Number of spheres
        seed: Seed for numpy.random.default_rng
        max_depth: Upper bound of sphere center z
        min_radius, max_radius: Radius range
        light_x, light_y: Optional light position override

    Returns:
        Scene
    """
    if count < 0:
        raise ValueError(f"Sphere count must be non-negative, got {count}")
    if not 0.0 <= min_radius <= max_radius:
        raise ValueError(f"Invalid radius range [{min_radius}, {max_radius})")

    rng = np.random.default_rng(seed)
    xs = rng.uniform(0.0, width, count)
    ys = rng.uniform(0.0, height, count)
    zs = rng.uniform(0.0, max_depth, count)
    radii = rng.uniform(min_radius, max_radius, count)
    channels = rng.integers(0, constants.CHANNEL_MAX_EXCLUSIVE, size=(count, 3))

    spheres = tuple(
        Sphere(
            center=Vector3(float(x), float(y), float(z)),
            radius=float(r),
            material=Material(Color(int(c[0]), int(c[1]), int(c[2]), constants.OPAQUE)),
        )
        for x, y, z, r, c in zip(xs, ys, zs, radii, channels)
    )

    light = centered_light(width, height)
    if light_x is not None or light_y is not None:
        light = Light(Vector3(float(light.origin.x if light_x is None else light_x),
                              float(light.origin.y if light_y is None else light_y),
                              light.origin.z),
                      light.brightness)

    return Scene(width=width, height=height, spheres=spheres, light=light)
