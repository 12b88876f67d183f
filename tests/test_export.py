import pytest

from asciiconv import export
from asciiconv.converter import convert
from asciiconv.engine import Cell, ConversionResult
from asciiconv.model import InvalidInputError
from asciiconv.theme import THEMES, hex_colour
from conftest import horizontal_ramp, make_config

DARK = THEMES["dark"]


def make_result():
    red = (255, 0, 0)
    blue = (0, 0, 255)
    grid = (
        (Cell("<", red), Cell(" ", red), Cell("@", blue)),
        (Cell("&", blue), Cell(".", blue), Cell(" ", red)),
    )
    return ConversionResult(grid=grid, text="< @\n&. ")


def blank_result():
    row = (Cell(" ", (255, 255, 255)),) * 3
    return ConversionResult(grid=(row, row), text="   \n   ")


def test_to_text():
    assert export.to_text(make_result()) == "< @\n&. "


def test_to_ansi_colours_each_glyph():
    out = export.to_ansi(make_result())
    lines = out.split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("\033[38;2;255;0;0m<")
    assert "\033[38;2;0;0;255m@" in lines[0]
    assert all(line.endswith("\033[0m") for line in lines)


def test_to_html_spans_and_escaping():
    out = export.to_html(make_result(), DARK)
    assert out.startswith("<!DOCTYPE html>")
    assert "<span>&lt;</span><span>&nbsp;</span><span>@</span><br><span>&amp;</span>" in out
    assert "background: #000000" in out
    assert "color: #ffffff" in out


def test_to_html_colour_spans():
    out = export.to_html(make_result(), DARK, colour=True)
    assert '<span style="color:#ff0000">&lt;</span>' in out
    assert '<span style="color:#0000ff">@</span>' in out


def test_to_svg_one_text_per_row():
    out = export.to_svg(make_result(), THEMES["light"])
    assert out.startswith('<svg width="14.4" height="16"')
    assert out.count("<text ") == 2
    assert 'y="8"' in out
    assert 'y="16"' in out
    assert ">&lt; @</text>" in out
    assert '<rect width="100%" height="100%" fill="#ffffff"/>' in out


def test_render_image_size_and_background():
    image = export.render_image(make_result(), DARK)
    # 3 columns of 4.8px, 2 rows of 8px
    assert image.size == (15, 16)
    assert image.mode == "RGB"
    assert image.getpixel((image.width - 1, image.height - 1)) == DARK.background


def test_render_image_zoom_and_grid():
    theme = THEMES["retro"]
    image = export.render_image(blank_result(), theme, zoom=2.0, grid=True)
    assert image.size == (29, 32)
    assert image.getpixel((0, 31)) == theme.grid
    assert image.getpixel((5, 5)) == theme.background


def test_render_image_grid_needs_zoom():
    theme = THEMES["neon"]
    image = export.render_image(blank_result(), theme, grid=True)
    assert image.getpixel((0, 15)) == theme.background


def test_render_draws_glyphs():
    image = export.render_image(make_result(), DARK, zoom=3.0)
    colours = {colour for _, colour in image.getcolors(maxcolors=100000)}
    assert len(colours) > 1


@pytest.mark.parametrize("suffix", [".txt", ".html", ".svg", ".ans"])
def test_save_text_formats(tmp_path, suffix):
    path = tmp_path / f"out{suffix}"
    export.save(make_result(), path, DARK)
    content = path.read_text(encoding="utf-8")
    assert "@" in content


def test_save_png(tmp_path):
    path = tmp_path / "out.png"
    export.save(make_result(), path, DARK, colour=True)
    assert path.read_bytes().startswith(b"\x89PNG")


def test_save_unknown_format(tmp_path):
    with pytest.raises(InvalidInputError, match="Unsupported output format"):
        export.save(make_result(), tmp_path / "out.pdf", DARK)


def test_exports_from_real_conversion():
    result = convert(horizontal_ramp(20, 4), make_config(palette=" .:█"), DARK.foreground)
    assert export.to_text(result) == result.text
    assert "█" in export.to_html(result, DARK)
    assert "█" in export.to_svg(result, DARK)


def test_hex_colour():
    assert hex_colour((20, 83, 45)) == "#14532d"
