import logging
import time
from pathlib import Path

import numpy as np
from PIL import Image

from asciiconv.adjust import adjust_pixels
from asciiconv.colour import fill_colours, resolve_colours
from asciiconv.edges import detect_edges
from asciiconv.engine import Cell, Colour, ConversionResult
from asciiconv.export import to_ansi
from asciiconv.model import ColourMode, ConversionConfig, PixelGrid, validate
from asciiconv.sampling import sample_points, strides
from asciiconv.tone import glyph_indices, map_tones

logger = logging.getLogger(__name__)


def convert(pixels: PixelGrid, config: ConversionConfig, fallback_colour: Colour) -> ConversionResult:
    """Turn pixels into a grid of coloured glyphs and the matching plain text.

    ``fallback_colour`` is used for every cell in grayscale mode. Raises
    InvalidInputError for empty images, palettes shorter than two glyphs and
    non-positive resolution factors. The input grid is never modified.
    """
    validate(pixels, config)
    start = time.perf_counter()

    if config.edge_detection:
        pixels = detect_edges(pixels)

    stride_x, stride_y = strides(pixels.width, pixels.height, config.resolution)
    sampled = sample_points(pixels.samples, stride_x, stride_y)
    # Edge magnitudes can run past 255, float grids from callers may hold NaN
    rgb = np.clip(np.nan_to_num(sampled[:, :, :3].astype(np.float64), nan=0.0, posinf=255.0, neginf=0.0), 0, 255)

    n = len(config.palette)
    tones = map_tones(rgb, config.colour_mode, n, inverted=config.inverted, dither=config.dither)
    indices = glyph_indices(tones, n)
    if config.colour_mode is ColourMode.COLOUR:
        colours = resolve_colours(rgb, indices, n)
    else:
        colours = fill_colours(indices.shape, fallback_colour)

    glyphs = list(config.palette)
    grid = []
    lines = []
    for index_row, colour_row in zip(indices.tolist(), colours.tolist()):
        row = tuple(Cell(glyphs[i], tuple(c)) for i, c in zip(index_row, colour_row))
        grid.append(row)
        lines.append("".join(cell.glyph for cell in row))

    logger.debug(
        "Converted %dx%d pixels to %dx%d cells (stride %d, %d) in %.1fms",
        pixels.width,
        pixels.height,
        indices.shape[1],
        indices.shape[0],
        stride_x,
        stride_y,
        (time.perf_counter() - start) * 1000,
    )
    return ConversionResult(grid=tuple(grid), text="\n".join(lines))


def render(
    image: Image.Image | str | Path,
    config: ConversionConfig,
    fallback_colour: Colour = (255, 255, 255),
    brightness: float = 1.0,
    contrast: float = 1.0,
) -> ConversionResult:
    """Load, adjust and convert an image."""
    if not isinstance(image, Image.Image):
        with Image.open(image) as opened:
            pixels = PixelGrid.from_image(opened)
    else:
        pixels = PixelGrid.from_image(image)
    pixels = adjust_pixels(pixels, brightness, contrast)
    return convert(pixels, config, fallback_colour)


def image_to_ascii(
    image: Image.Image | str | Path,
    config: ConversionConfig,
    fallback_colour: Colour = (255, 255, 255),
    brightness: float = 1.0,
    contrast: float = 1.0,
    colour: bool = False,
) -> str:
    """Like render, but returns plain or ANSI-coloured text."""
    result = render(image, config, fallback_colour, brightness, contrast)
    if colour:
        return to_ansi(result)
    return result.text
