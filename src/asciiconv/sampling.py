import math

import numpy as np

# Glyph cells are roughly twice as tall as they are wide
FONT_ASPECT = 0.5


def target_size(width: int, height: int, resolution: float) -> tuple[int, int]:
    """Requested cell grid size, at least one cell each way."""
    return max(1, math.floor(width * resolution)), max(1, math.floor(height * resolution))


def resolution_for_width(width: int, columns: int) -> float:
    """Resolution factor that samples about ``columns`` cells from each pixel row."""
    return min(1.0, columns / width)


def strides(width: int, height: int, resolution: float) -> tuple[int, int]:
    """Pixel step between sampled columns and between sampled rows.

    The row step is stretched by FONT_ASPECT so the text isn't squashed
    vertically.
    """
    target_w, target_h = target_size(width, height, resolution)
    stride_x = math.ceil(width / target_w)
    stride_y = math.ceil(height / target_h / FONT_ASPECT)
    return stride_x, stride_y


def sample_points(samples: np.ndarray, stride_x: int, stride_y: int) -> np.ndarray:
    """Pick the top-left pixel of every stride block.

    Point sampling, no averaging. Returns shape (ceil(h / stride_y),
    ceil(w / stride_x), channels), which is generally not the target size.
    """
    return samples[::stride_y, ::stride_x]

