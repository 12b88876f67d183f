import numpy as np

from asciiconv.model import ColourMode

# Rec. 601 weights scaled to integers so whole-number inputs stay exact
WEIGHTS = np.array([299, 587, 114], dtype=np.float64)
WEIGHT_TOTAL = 1000.0


def luminance(rgb: np.ndarray) -> np.ndarray:
    """0.299R + 0.587G + 0.114B over the last axis, in the input's 0-255 scale."""
    return (np.asarray(rgb, dtype=np.float64) @ WEIGHTS) / WEIGHT_TOTAL


def brightness(rgb: np.ndarray, mode: ColourMode) -> np.ndarray:
    """Normalised tone of each RGB sample.

    Grayscale mode uses plain luminance. Colour mode uses a root-mean-square
    blend of the weighted channels, which reads brighter for saturated colours.
    The two formulas differ on purpose.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    if mode is ColourMode.COLOUR:
        return np.sqrt((rgb * rgb) @ WEIGHTS / WEIGHT_TOTAL) / 255.0
    return luminance(rgb) / 255.0


def invert(tone: np.ndarray) -> np.ndarray:
    return 1.0 - tone


def snap_to_levels(tone: np.ndarray, levels: int) -> np.ndarray:
    """Snap each tone to the nearest of ``levels`` evenly spaced values in [0, 1].

    Halves round up, not to even.
    """
    steps = levels - 1
    return np.floor(tone * steps + 0.5) / steps


def glyph_indices(tone: np.ndarray, palette_size: int) -> np.ndarray:
    """Palette index for each tone, floor(tone * (n - 1)) clamped to the palette."""
    steps = palette_size - 1
    return np.clip(np.floor(tone * steps), 0, steps).astype(np.intp)


def map_tones(
    rgb: np.ndarray,
    mode: ColourMode,
    palette_size: int,
    inverted: bool = False,
    dither: bool = False,
) -> np.ndarray:
    """Tone pipeline for sampled RGB: brightness, clamp, inversion, then snapping."""
    tone = np.clip(brightness(rgb, mode), 0.0, 1.0)
    if inverted:
        tone = invert(tone)
    if dither:
        tone = snap_to_levels(tone, palette_size)
    return tone
