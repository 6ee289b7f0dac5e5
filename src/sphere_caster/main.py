import argparse
import os
import sys
import time

import numpy as np

from sphere_caster import constants
from sphere_caster.core import Renderer, save_image
from sphere_caster.geometry import Sphere
from sphere_caster.intersections import Ray
from sphere_caster.rendering import Color, CompositeMode, Light, Material
from sphere_caster.scene import random_scene
from sphere_caster.vector import Vector3


def render_to_file(scene, path, composite):
    """Render one scene and save it, reporting the timing."""
    print(f"Rendering {len(scene)} spheres at {scene.width}x{scene.height} "
          f"({composite.value} compositing)...")
    t0 = time.time()
    pixels = Renderer(composite).render_image(scene)
    print(f"  Complete in {time.time() - t0:.2f}s")
    save_image(pixels, path)
    print(f"  Saved {path}")
    return pixels


def generate_samples(width, height, count, seed):
    """Render the default scene with both compositing policies."""
    scene = random_scene(width, height, count, seed)
    print(f"\n--- Generating Samples ({width}x{height}, {count} spheres) ---")
    images = {}
    for mode in CompositeMode:
        path = os.path.join(constants.OUTPUT_DIR, f"sample_{mode.value}_{width}x{height}.png")
        images[mode] = render_to_file(scene, path, mode)

    differing = np.any(images[CompositeMode.OVERWRITE] != images[CompositeMode.NEAREST], axis=2)
    print(f"Pixels painted by a farther sphere under overwrite: {int(differing.sum())}")


def run_geometry_verification():
    """Run the reference geometry and shading checks. Returns True when all pass."""
    print("\n--- Geometry Verification ---")
    black = Material(Color(0, 0, 0, 255))
    sphere = Sphere(Vector3(0.0, 0.0, 5.0), 1.0, black)
    forward = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
    sideways = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
    point = forward.get_intersection_point(sphere)
    side_light = Light(Vector3(5.0, 0.0, 3.0), 1.0)
    blocker = Sphere(Vector3(4.0, 0.0, 3.5), 1.0, black)

    checks = [
        ("near root", sphere.intersect(forward) == 4.0),
        ("miss", sphere.intersect(sideways) is None),
        ("intersection point", point == Vector3(0.0, 0.0, 4.0)),
        ("surface normal", sphere.get_normal_at(point) == Vector3(0.0, 0.0, -1.0)),
        ("direction", Vector3(1.0, 1.0, 0.0).direction_to(Vector3(-1.0, -1.0, 0.0))
            == Vector3(-0.7071067811865475, -0.7071067811865475, 0.0)),
        ("back light", sphere.get_brightness_at(point, Light(Vector3(0.0, 0.0, 10.0)), []) == 0.0),
        ("side light", sphere.get_brightness_at(point, side_light, []) > 0.0),
        ("shadow", sphere.get_brightness_at(point, side_light, [blocker]) is None),
        ("shadow color", sphere.get_color_at(point, side_light, [blocker]) == Color(0, 0, 0, 255)),
    ]

    failed = 0
    for name, ok in checks:
        print(f"  {'ok' if ok else 'FAILED'}: {name}")
        failed += not ok

    if failed:
        print(f"Error: {failed} of {len(checks)} checks failed.")
        return False
    print(f"Verified {len(checks)} geometry checks.")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sphere Caster CLI")
    parser.add_argument("--ui", action="store_true", help="Launch the interactive Gradio UI")
    parser.add_argument("--samples", action="store_true", help="Render the scene with both compositing policies")
    parser.add_argument("--verify", action="store_true", help="Run geometry and shading checks")
    parser.add_argument("--out", default=constants.DEFAULT_OUTPUT, help="Output PNG path")
    parser.add_argument("--width", type=int, default=constants.DEFAULT_WIDTH, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=constants.DEFAULT_HEIGHT, help="Canvas height in pixels")
    parser.add_argument("--spheres", type=int, default=constants.DEFAULT_SPHERE_COUNT, help="Number of random spheres")
    parser.add_argument("--seed", type=int, default=constants.DEFAULT_SEED, help="Scene seed")
    parser.add_argument("--composite", choices=[mode.value for mode in CompositeMode],
                        default=CompositeMode.OVERWRITE.value,
                        help="Which sphere paints a pixel covered by several")

    args = parser.parse_args(argv)

    if args.ui:
        from sphere_caster.ui import create_ui
        print("Launching UI...")
        demo = create_ui()
        demo.launch()
    elif args.verify:
        if not run_geometry_verification():
            return 1
    elif args.samples:
        try:
            generate_samples(args.width, args.height, args.spheres, args.seed)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 2
    else:
        try:
            scene = random_scene(args.width, args.height, args.spheres, args.seed)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 2
        render_to_file(scene, args.out, CompositeMode(args.composite))
    return 0


def run_ui():
    """Entry point for sphere-caster-ui command."""
    sys.argv = [sys.argv[0], "--ui"]
    sys.exit(main())


def run_verify():
    """Entry point for sphere-caster-verify command."""
    sys.argv = [sys.argv[0], "--verify"]
    sys.exit(main())


def run_samples():
    """Entry point for sphere-caster-samples command."""
    sys.argv = [sys.argv[0], "--samples"]
    sys.exit(main())


if __name__ == "__main__":
    sys.exit(main())
