import numpy as np
import pytest

from asciiconv.charsets import STANDARD
from asciiconv.model import ColourMode, ConversionConfig, PixelGrid

WHITE = (255, 255, 255)


def solid(width, height, rgb, alpha=255):
    """PixelGrid filled with one colour."""
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[:, :] = (*rgb, alpha)
    return PixelGrid(arr)


def horizontal_ramp(width, height):
    """Grey ramp from black on the left to white on the right."""
    values = np.linspace(0, 255, width).round().astype(np.uint8)
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[:, :, :3] = values[None, :, None]
    arr[:, :, 3] = 255
    return PixelGrid(arr)


def make_config(**overrides):
    values = dict(
        resolution=1.0,
        inverted=False,
        colour_mode=ColourMode.GRAYSCALE,
        palette=STANDARD,
        dither=False,
        edge_detection=False,
    )
    values.update(overrides)
    return ConversionConfig(**values)


@pytest.fixture
def random_pixels():
    rng = np.random.default_rng(42)
    return PixelGrid(rng.integers(0, 256, size=(40, 60, 4), dtype=np.uint8))
