"""Convert a finished pixel buffer into an image and save it with Pillow."""

import logging

from PIL import Image

logger = logging.getLogger(__name__)


def clamp(c: float) -> int:
    """Clamp a color channel value to the 0-255 range."""
    if c > 255:
        c = 255
    elif c < 0:
        c = 0
    return int(round(c))


def _channels(buffer, normalize: bool):
    values = [channel * 255 for color in buffer for channel in color]
    if normalize and values:
        lo, hi = min(values), max(values)
        if hi > lo:
            values = [(v - lo) * 255 / (hi - lo) for v in values]
    return [clamp(v) for v in values]


def to_image(buffer, normalize: bool = False) -> Image.Image:
    """Return an RGB image for *buffer*.

    Buffer row ``y`` becomes image row ``height - y - 1``. Channels are
    scaled by 255 and clamped; with ``normalize`` they are first stretched
    so the darkest value maps to 0 and the brightest to 255.
    """
    width, height = buffer.width, buffer.height
    channels = _channels(buffer, normalize)
    out = []
    for row in range(height):
        y = height - row - 1
        for x in range(width):
            i = (y * width + x) * 3
            out.append((channels[i], channels[i + 1], channels[i + 2]))

    im = Image.new("RGB", (width, height))
    im.putdata(out)
    return im


def write_image(buffer, path, normalize: bool = False) -> None:
    """Write *buffer* to *path*; the format follows the file extension."""
    to_image(buffer, normalize).save(path)
    logger.info("Wrote %dx%d image to %s", buffer.width, buffer.height, path)
