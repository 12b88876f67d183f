from dataclasses import dataclass

from asciiconv.engine import Colour


@dataclass(frozen=True)
class Theme:
    name: str
    background: Colour
    foreground: Colour  # glyph colour in grayscale mode
    grid: Colour


THEMES = {
    "dark": Theme("dark", background=(0, 0, 0), foreground=(255, 255, 255), grid=(0x57, 0x53, 0x4E)),
    "light": Theme("light", background=(255, 255, 255), foreground=(0, 0, 0), grid=(0xD1, 0xD5, 0xDB)),
    "retro": Theme("retro", background=(0x14, 0x53, 0x2D), foreground=(0xDC, 0xFC, 0xE7), grid=(0x16, 0xA3, 0x4A)),
    "neon": Theme("neon", background=(0x58, 0x1C, 0x87), foreground=(0xCF, 0xFA, 0xFE), grid=(0x06, 0xB6, 0xD4)),
}


def hex_colour(colour: Colour) -> str:
    return "#{:02x}{:02x}{:02x}".format(*colour)
