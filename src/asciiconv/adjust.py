import math

import numpy as np

from asciiconv.model import InvalidInputError, PixelGrid

MIDPOINT = 127.5


def adjust_pixels(pixels: PixelGrid, brightness: float = 1.0, contrast: float = 1.0) -> PixelGrid:
    """Brightness then contrast on RGB, like the CSS filters of the same name.

    Brightness scales each channel; contrast stretches channels away from mid
    grey. Results are clamped to 0-255 and alpha is left alone. Returns a new
    grid.
    """
    # Negated so NaN fails too
    if not (0 <= brightness < math.inf and 0 <= contrast < math.inf):
        raise InvalidInputError(f"Brightness and contrast must be finite and non-negative: {brightness}, {contrast}")
    if brightness == 1.0 and contrast == 1.0:
        return pixels

    arr = pixels.samples.astype(np.float64)
    rgb = arr[:, :, :3] * brightness
    rgb = (rgb - MIDPOINT) * contrast + MIDPOINT
    arr[:, :, :3] = np.clip(rgb, 0, 255)
    return PixelGrid(arr)
