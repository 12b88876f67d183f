import numpy as np

from asciiconv.engine import Colour

# Keeps glyphs legible on dark backgrounds
MIN_CHANNEL = 40
# Cell colours are scaled by 0.5 at the sparsest glyph up to 2.0 at the densest
BASE_FACTOR = 0.5
FACTOR_RANGE = 1.5


def resolve_colours(rgb: np.ndarray, indices: np.ndarray, palette_size: int) -> np.ndarray:
    """Display colour for each sampled cell in colour mode.

    Scales the sampled RGB by the cell's position in the palette, floors every
    channel at MIN_CHANNEL and clamps to 0-255. Returns uint8 with rgb's shape.
    """
    factor = indices / (palette_size - 1) * FACTOR_RANGE + BASE_FACTOR
    scaled = np.maximum(np.asarray(rgb, dtype=np.float64) * factor[..., None], MIN_CHANNEL)
    return np.clip(scaled, 0, 255).astype(np.uint8)


def fill_colours(shape: tuple[int, int], colour: Colour) -> np.ndarray:
    """Grayscale mode: every cell gets the presentation's foreground colour."""
    out = np.empty((*shape, 3), dtype=np.uint8)
    out[...] = np.clip(colour, 0, 255)
    return out
