import numpy as np

from asciiconv.model import PixelGrid
from asciiconv.tone import luminance


def sobel_magnitude(lum: np.ndarray) -> np.ndarray:
    """Sobel gradient magnitude of the interior of a 2D array. Returns shape (h - 2, w - 2)."""
    top = lum[:-2]
    mid = lum[1:-1]
    bottom = lum[2:]

    # Gx = [-1,0,1,-2,0,2,-1,0,1]: right column minus left column
    gx = (top[:, 2:] - top[:, :-2]) + 2 * (mid[:, 2:] - mid[:, :-2]) + (bottom[:, 2:] - bottom[:, :-2])
    # Gy = [-1,-2,-1,0,0,0,1,2,1]: bottom row minus top row
    gy = (bottom[:, :-2] + 2 * bottom[:, 1:-1] + bottom[:, 2:]) - (top[:, :-2] + 2 * top[:, 1:-1] + top[:, 2:])
    return np.sqrt(gx * gx + gy * gy)


def detect_edges(pixels: PixelGrid) -> PixelGrid:
    """Replace pixels with their gradient magnitude, grey on R, G and B.

    Magnitudes are not clamped and can exceed 255. The outermost ring of
    pixels has no full neighbourhood and is left as (0, 0, 0, 0). Grids
    smaller than 3x3 have no interior and are returned unchanged.
    """
    h, w = pixels.height, pixels.width
    if h < 3 or w < 3:
        return pixels

    lum = luminance(pixels.samples[:, :, :3].astype(np.float64))
    out = np.zeros((h, w, 4), dtype=np.float64)
    out[1:-1, 1:-1, :3] = sobel_magnitude(lum)[:, :, None]
    out[1:-1, 1:-1, 3] = 255.0
    return PixelGrid(out)
