import html
import math
from pathlib import Path
from xml.sax.saxutils import escape

from PIL import Image, ImageDraw, ImageFont

from asciiconv.engine import ConversionResult
from asciiconv.model import InvalidInputError
from asciiconv.theme import Theme, hex_colour

FONT_SIZE = 8
# Monospace advance relative to the font size
CHAR_WIDTH_RATIO = 0.6


def to_text(result: ConversionResult) -> str:
    return result.text


def to_ansi(result: ConversionResult) -> str:
    """Wrap each glyph in an ANSI truecolor foreground escape sequence."""
    out = []
    for row in result.grid:
        parts = []
        for cell in row:
            r, g, b = cell.colour
            parts.append(f"\033[38;2;{r};{g};{b}m{cell.glyph}")
        parts.append("\033[0m")
        out.append("".join(parts))
    return "\n".join(out)


def _html_glyph(glyph: str) -> str:
    return "&nbsp;" if glyph == " " else html.escape(glyph)


def to_html(result: ConversionResult, theme: Theme, colour: bool = False) -> str:
    """Standalone HTML page with one span per glyph."""
    lines = []
    for row in result.grid:
        if colour:
            spans = (f'<span style="color:{hex_colour(cell.colour)}">{_html_glyph(cell.glyph)}</span>' for cell in row)
        else:
            spans = (f"<span>{_html_glyph(cell.glyph)}</span>" for cell in row)
        lines.append("".join(spans))

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>ASCII Art</title>
    <style>
        body {{
            background: {hex_colour(theme.background)};
            color: {hex_colour(theme.foreground)};
            font-family: monospace;
            white-space: pre;
            line-height: 1;
        }}
    </style>
</head>
<body>{"<br>".join(lines)}</body>
</html>
"""


def to_svg(result: ConversionResult, theme: Theme) -> str:
    """SVG document with one absolutely positioned text element per row."""
    line_height = FONT_SIZE
    char_width = FONT_SIZE * CHAR_WIDTH_RATIO
    width = result.columns * char_width
    height = result.rows * line_height
    fill = hex_colour(theme.foreground)

    texts = "\n".join(
        f'    <text x="0" y="{(i + 1) * line_height}" font-family="monospace" font-size="{FONT_SIZE}" '
        f'fill="{fill}" xml:space="preserve">{escape(line)}</text>'
        for i, line in enumerate(result.lines)
    )
    return (
        f'<svg width="{width:g}" height="{height:g}" xmlns="http://www.w3.org/2000/svg">\n'
        f'    <rect width="100%" height="100%" fill="{hex_colour(theme.background)}"/>\n'
        f"{texts}\n"
        "</svg>\n"
    )


def render_image(
    result: ConversionResult,
    theme: Theme,
    zoom: float = 1.0,
    grid: bool = False,
    colour: bool = False,
) -> Image.Image:
    """Rasterise the glyph grid onto an RGB image.

    Grid lines between cells are only drawn when zoomed in past 1x.
    """
    font_size = FONT_SIZE * zoom
    line_height = font_size
    char_width = font_size * CHAR_WIDTH_RATIO
    width = max(1, math.ceil(result.columns * char_width))
    height = max(1, math.ceil(result.rows * line_height))

    image = Image.new("RGB", (width, height), theme.background)
    draw = ImageDraw.Draw(image)

    if grid and zoom > 1:
        x = 0.0
        while x <= width:
            draw.line([(x, 0), (x, height)], fill=theme.grid)
            x += char_width
        y = 0.0
        while y <= height:
            draw.line([(0, y), (width, y)], fill=theme.grid)
            y += line_height

    font = ImageFont.load_default(size=font_size)
    for r, row in enumerate(result.grid):
        for c, cell in enumerate(row):
            if cell.glyph == " ":
                continue
            fill = cell.colour if colour else theme.foreground
            draw.text((c * char_width, r * line_height), cell.glyph, fill=fill, font=font)
    return image


def save(result: ConversionResult, path: str | Path, theme: Theme, colour: bool = False) -> None:
    """Write the result in the format implied by the file suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".png":
        render_image(result, theme, colour=colour).save(path)
        return
    if suffix == ".txt":
        content = to_text(result) + "\n"
    elif suffix in (".html", ".htm"):
        content = to_html(result, theme, colour=colour)
    elif suffix == ".svg":
        content = to_svg(result, theme)
    elif suffix == ".ans":
        content = to_ansi(result) + "\n"
    else:
        raise InvalidInputError(f"Unsupported output format: {path.suffix or path.name}")
    path.write_text(content, encoding="utf-8")
