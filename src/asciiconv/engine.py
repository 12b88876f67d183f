from __future__ import annotations

from dataclasses import dataclass

Colour = tuple[int, int, int]


@dataclass(frozen=True)
class Cell:
    glyph: str
    colour: Colour


@dataclass(frozen=True)
class ConversionResult:
    grid: tuple[tuple[Cell, ...], ...]  # rows, top to bottom
    text: str  # row glyphs joined by newlines

    @property
    def lines(self) -> list[str]:
        return ["".join(cell.glyph for cell in row) for row in self.grid]

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def columns(self) -> int:
        return max((len(row) for row in self.grid), default=0)
