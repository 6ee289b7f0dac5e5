import gradio as gr
import PIL.Image

from sphere_caster import constants
from sphere_caster.core import Renderer
from sphere_caster.rendering import CompositeMode
from sphere_caster.scene import random_scene

DEFAULTS = [512, 270, 50, constants.DEFAULT_SEED, 0.5, 0.5, CompositeMode.OVERWRITE.value]


def render_frame(width, height, spheres, seed, light_u, light_v, composite):
    """
    Render a random scene for the viewport.

    light_u / light_v place the light as a fraction of the canvas width/height.
    A cleared seed box arrives as None and falls back to the default seed.
    """
    width, height = int(width), int(height)
    seed = constants.DEFAULT_SEED if seed is None else int(seed)
    scene = random_scene(width, height, int(spheres), seed,
                         light_x=float(light_u) * width,
                         light_y=float(light_v) * height)
    pixels = Renderer(composite).render_image(scene)
    return PIL.Image.fromarray(pixels)


def create_ui():

    with gr.Blocks(title="Sphere Caster") as demo:

        gr.Markdown("# Sphere Caster: Orthographic Viewport")
        gr.Markdown("Random spheres lit by a single point light with hard shadows.")

        with gr.Row():
            with gr.Column(scale=1):
                with gr.Group():
                    gr.Markdown("### Canvas")
                    width_slider = gr.Slider(minimum=64, maximum=constants.DEFAULT_WIDTH, value=DEFAULTS[0], step=32, label="Width", info="Lower for speed")
                    height_slider = gr.Slider(minimum=64, maximum=constants.DEFAULT_HEIGHT, value=DEFAULTS[1], step=2, label="Height")
                    reset_btn = gr.Button("Reset Viewport", variant="secondary")

                with gr.Group():
                    gr.Markdown("### Scene")
                    count_slider = gr.Slider(minimum=0, maximum=400, value=DEFAULTS[2], step=1, label="Spheres")
                    seed_box = gr.Number(value=DEFAULTS[3], precision=0, label="Seed")
                    light_u = gr.Slider(minimum=0, maximum=1, value=DEFAULTS[4], step=0.01, label="Light X", info="Fraction of canvas width")
                    light_v = gr.Slider(minimum=0, maximum=1, value=DEFAULTS[5], step=0.01, label="Light Y", info="Fraction of canvas height")
                    composite_radio = gr.Radio(choices=[mode.value for mode in CompositeMode], value=DEFAULTS[6],
                                               label="Compositing", info="overwrite repaints in scene order, nearest keeps the closest hit")

            with gr.Column(scale=2):
                output_img = gr.Image(label="Viewport", interactive=False, elem_id="output_img")

        inputs = [width_slider, height_slider, count_slider, seed_box,
                  light_u, light_v, composite_radio]

        def reset_view():
            return list(DEFAULTS)

        reset_btn.click(fn=reset_view, outputs=inputs)

        for input_comp in inputs:
            if hasattr(input_comp, "change"):
                input_comp.change(fn=render_frame, inputs=inputs, outputs=output_img,
                                  trigger_mode="always_last", show_progress="hidden")

        demo.load(fn=render_frame, inputs=inputs, outputs=output_img, show_progress="hidden")

    return demo


if __name__ == "__main__":
    demo = create_ui()
    demo.launch()
