import pytest

from asciiconv.charsets import PALETTES, STANDARD, resolve_palette
from asciiconv.model import InvalidInputError


def test_named_palettes_start_with_space():
    for name, palette in PALETTES.items():
        assert palette[0] == " ", name
        assert len(palette) >= 2, name


def test_palettes_have_no_repeats():
    for palette in PALETTES.values():
        assert len(set(palette)) == len(palette)


def test_resolve_named():
    assert resolve_palette("blocks") == " ░▒▓█"


def test_resolve_custom():
    assert resolve_palette("custom", " xX") == " xX"


def test_empty_custom_falls_back_to_standard():
    assert resolve_palette("custom") == STANDARD


def test_unknown_palette():
    with pytest.raises(InvalidInputError, match="Unknown palette"):
        resolve_palette("emoji")
