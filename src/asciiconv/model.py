from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np
from PIL import Image

CHANNELS = 4


class InvalidInputError(ValueError):
    """Raised when pixels or configuration can't be converted at all."""


class ColourMode(Enum):
    GRAYSCALE = "grayscale"
    COLOUR = "colour"


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """Read-only RGBA samples, shape (height, width, 4), origin top-left."""

    samples: np.ndarray

    def __post_init__(self):
        samples = np.array(self.samples, copy=True)
        if samples.ndim != 3 or samples.shape[2] != CHANNELS:
            raise InvalidInputError(f"Expected (height, width, 4) samples, got shape {samples.shape}")
        samples.flags.writeable = False
        object.__setattr__(self, "samples", samples)

    @property
    def width(self) -> int:
        return self.samples.shape[1]

    @property
    def height(self) -> int:
        return self.samples.shape[0]

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelGrid":
        if width < 0 or height < 0:
            raise InvalidInputError(f"Negative dimensions: {width}x{height}")
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise InvalidInputError(f"Expected {expected} bytes for {width}x{height} RGBA, got {len(data)}")
        if expected == 0:
            return cls(np.zeros((height, width, CHANNELS), dtype=np.uint8))
        return cls(np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, CHANNELS))

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelGrid":
        return cls(np.asarray(image.convert("RGBA"), dtype=np.uint8))


@dataclass(frozen=True)
class ConversionConfig:
    resolution: float
    inverted: bool
    colour_mode: ColourMode
    palette: str
    dither: bool
    edge_detection: bool


def validate(pixels: PixelGrid, config: ConversionConfig) -> None:
    """Fail fast on anything the engine can't produce a grid for."""
    if pixels.width == 0 or pixels.height == 0:
        raise InvalidInputError(f"Image has no pixels: {pixels.width}x{pixels.height}")
    if len(config.palette) < 2:
        raise InvalidInputError(f"Palette needs at least 2 glyphs, got {len(config.palette)}")
    # Written as a negation so NaN is rejected too
    if not (config.resolution > 0 and math.isfinite(config.resolution)):
        raise InvalidInputError(f"Resolution factor must be positive and finite, got {config.resolution}")
    if not isinstance(config.colour_mode, ColourMode):
        raise InvalidInputError(f"Unknown colour mode: {config.colour_mode!r}")
