"""Render the built-in demo scene: ``python -m py_raycast``."""

import argparse
import logging

from py_raycast.camera import Camera
from py_raycast.config import RenderConfig
from py_raycast.image import write_image
from py_raycast.primitives import Material, Plane, Sphere, Triangle
from py_raycast.render import render
from py_raycast.scene import Light, Scene


def demo_scene(width: int = 400, height: int = 300) -> Scene:
    """Return a small scene with two spheres, a floor, a back wall and a triangle."""
    grey = Material((0.2, 0.2, 0.2), (0.4, 0.4, 0.4), (0.1, 0.1, 0.1), 4)
    red = Material((0.3, 0.05, 0.05), (0.6, 0.1, 0.1), (0.6, 0.6, 0.6), 64)
    green = Material((0.05, 0.3, 0.15), (0.2, 0.8, 0.4), (0.8, 0.8, 0.8), 64)
    blue = Material((0.05, 0.05, 0.3), (0.1, 0.2, 0.7), (0.3, 0.3, 0.3), 16)

    bodies = [
        Sphere((-2, 2, -12), 4, red),
        Sphere((-3, 1, -5), 0.5, green),
        Triangle((2, -6, -10), (8, -6, -10), (5, 0, -10), blue),
        Plane((0, -6, 0), (0, 1, 0), grey),
        Plane((0, 0, -70), (0, 0, 1), grey),
    ]
    lights = [
        Light((0, 1, 20), (0.6, 0.6, 0.6)),
        Light((10, 20, -5), (0.4, 0.4, 0.4)),
    ]
    camera = Camera((0, 0, 0), fov=60, aspect_ratio=width / height)
    return Scene(camera, bodies, lights, width, height)


def main(argv=None) -> None:
    """Entry point used when running this module as a script."""
    parser = argparse.ArgumentParser(prog="py-raycast", description=__doc__)
    parser.add_argument("--width", type=int, default=400)
    parser.add_argument("--height", type=int, default=300)
    parser.add_argument("--output", default="render.png", help="image file to write")
    parser.add_argument("--normalize", action="store_true",
                        help="stretch channel values to the full 0-255 range")
    parser.add_argument("--corrected-camera", action="store_true",
                        help="apply the field of view and sample true row centres")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    config = RenderConfig(corrected_camera=args.corrected_camera)
    buffer = render(demo_scene(args.width, args.height), config)
    write_image(buffer, args.output, normalize=args.normalize)


if __name__ == '__main__':
    main()
