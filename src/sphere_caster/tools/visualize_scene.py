import argparse
import os

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from sphere_caster import constants
from sphere_caster.core import Renderer
from sphere_caster.rendering import CompositeMode
from sphere_caster.scene import random_scene


def _albedos(scene):
    return np.array([sphere.material.albedo.rgb for sphere in scene.spheres], dtype=float).reshape(-1, 3) / 255.0


def create_visualization(scene, composite=CompositeMode.OVERWRITE):
    """
    Three panels: front view (x/y), top-down view (x/z) and the render.

    Spheres are drawn as their silhouettes in albedo color, the light as a
    yellow star, and the camera plane z = 0 as a dashed line in the top view.
    """
    fig = plt.figure(figsize=(18, 6))
    ax_front = fig.add_subplot(1, 3, 1)
    ax_top = fig.add_subplot(1, 3, 2)
    ax_img = fig.add_subplot(1, 3, 3)

    centers = scene.centers()
    radii = scene.radii()
    colors = _albedos(scene)
    light = scene.light.origin

    # View 1: Front (what the camera sees, image rows grow downward)
    ax_front.set_title("Front View (x/y)")
    ax_front.set_aspect('equal')
    ax_front.set_xlim(0, scene.width)
    ax_front.set_ylim(scene.height, 0)
    ax_front.set_facecolor(np.array(scene.background.rgb) / 255.0)
    # Far spheres first so near ones stay visible
    for i in np.argsort(-centers[:, 2]):
        ax_front.add_patch(Circle(centers[i, :2], radii[i], color=colors[i], alpha=0.8))
    ax_front.plot(light.x, light.y, '*', color='yellow', markersize=14, markeredgecolor='black', zorder=10)

    # View 2: Top Down (depth along +Z)
    ax_top.set_title("Top View (x/z)")
    ax_top.set_aspect('equal')
    max_z = max(constants.MAX_DEPTH, float(np.max(centers[:, 2] + radii)) if len(centers) else 0.0)
    ax_top.set_xlim(0, scene.width)
    ax_top.set_ylim(-0.05 * max_z, max_z)
    for i in range(len(centers)):
        ax_top.add_patch(Circle((centers[i, 0], centers[i, 2]), radii[i], color=colors[i], alpha=0.8))
    ax_top.axhline(0.0, linestyle='--', color='gray', linewidth=1, label='Camera plane')
    ax_top.plot(light.x, light.z, '*', color='yellow', markersize=14, markeredgecolor='black', zorder=10)
    ax_top.legend(loc='upper right')

    # View 3: Render
    ax_img.set_title(f"Render ({CompositeMode(composite).value})")
    ax_img.axis('off')
    ax_img.imshow(Renderer(composite).render_image(scene))

    fig.tight_layout()
    return fig


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot a random scene and its render")
    parser.add_argument("--width", type=int, default=320)
    parser.add_argument("--height", type=int, default=180)
    parser.add_argument("--spheres", type=int, default=40)
    parser.add_argument("--seed", type=int, default=constants.DEFAULT_SEED)
    parser.add_argument("--composite", choices=[mode.value for mode in CompositeMode],
                        default=CompositeMode.OVERWRITE.value)
    parser.add_argument("--out", default=os.path.join(constants.OUTPUT_DIR, "scene_views.png"))
    args = parser.parse_args(argv)

    scene = random_scene(args.width, args.height, args.spheres, args.seed)
    fig = create_visualization(scene, args.composite)

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    print(f"Saving scene views to {args.out}...")
    fig.savefig(args.out, dpi=100)
    plt.close(fig)
    print("Done.")


if __name__ == "__main__":
    main()
