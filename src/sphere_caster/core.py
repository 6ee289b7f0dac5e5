import os

import numpy as np
import PIL.Image

from sphere_caster.intersections import orthographic_footprints, primary_ray
from sphere_caster.rendering import CompositeMode
from sphere_caster.shadows import occluders_for


class ImageSink:
    """
    Pixel sink backed by a (height, width, 3) uint8 buffer.

    The buffer starts filled with the background; only painted pixels change.
    """

    def __init__(self, width, height, background):
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 3), dtype=np.uint8)
        self.pixels[:, :] = background.rgb

    def put_pixel(self, x, y, rgb):
        self.pixels[y, x] = rgb

    def to_image(self):
        return PIL.Image.fromarray(self.pixels)

    def save(self, path):
        save_image(self.pixels, path)


def save_image(pixels, path):
    """Write an RGB uint8 buffer to `path`, creating parent directories."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    PIL.Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path)


class Renderer:
    def __init__(self, composite=CompositeMode.OVERWRITE):
        """
        Initialize the orthographic sphere renderer.

        Coordinate System:
        - Pixel (x, y) casts a ray from (x, y, 0) along +Z.
        - Z grows into the scene; spheres behind z = 0 are invisible unless the
          ray starts inside them.
        - Image row index is y, column index is x.

        Args:
            composite: CompositeMode (or its string value) deciding which sphere
                paints a pixel covered by several spheres
        """
        self.composite = CompositeMode(composite)

    def render(self, scene, sink=None):
        """
        Render `scene` into `sink` (an ImageSink over the background by default).

        Spheres are walked in scene order. For each sphere, every pixel of its
        orthographic footprint gets a primary ray; on a hit the point is shaded
        against all other spheres and painted. OVERWRITE paints every hit, so a
        later sphere covers an earlier one whatever their depth. NEAREST keeps a
        depth buffer and paints only strictly nearer hits.

        Returns:
            The sink
        """
        if sink is None:
            sink = ImageSink(scene.width, scene.height, scene.background)

        spheres = scene.spheres
        if not spheres:
            return sink

        light = scene.light
        nearest = self.composite is CompositeMode.NEAREST
        depth = np.full((scene.height, scene.width), np.inf) if nearest else None
        windows = orthographic_footprints(scene.centers(), scene.radii(),
                                          scene.width, scene.height)

        for index, (sphere, (x0, x1, y0, y1)) in enumerate(zip(spheres, windows)):
            if x0 == x1 or y0 == y1:
                continue
            occluders = occluders_for(spheres, index)
            for x in range(x0, x1):
                for y in range(y0, y1):
                    ray = primary_ray(x, y)
                    t = sphere.intersect(ray)
                    if t is None:
                        continue
                    if nearest:
                        if t >= depth[y, x]:
                            continue
                        depth[y, x] = t
                    color = sphere.get_color_at(ray.at(t), light, occluders)
                    sink.put_pixel(x, y, color.rgb)

        return sink

    def render_image(self, scene):
        """Render `scene` and return the (height, width, 3) uint8 buffer."""
        return self.render(scene).pixels

    def shade_pixel(self, scene, x, y):
        """
        Color this renderer paints at pixel (x, y), or None if no sphere covers it.

        Walks every sphere without footprint clipping.
        """
        ray = primary_ray(x, y)
        best = None
        best_t = np.inf
        for index, sphere in enumerate(scene.spheres):
            t = sphere.intersect(ray)
            if t is None:
                continue
            if self.composite is CompositeMode.NEAREST:
                if t >= best_t:
                    continue
                best_t = t
            best = sphere.get_color_at(ray.at(t), scene.light,
                                       occluders_for(scene.spheres, index))
        return best
