from asciiconv.model import InvalidInputError

# Ordered sparsest to densest
STANDARD = " .:-=+*#%@"

DETAILED = " .,:;i1tfLCG08@"

# Shades: U+2591-U+2593 plus full block
BLOCKS = " ░▒▓█"

MINIMAL = " .:█"

BINARY = " █"

# Braille with dots filled in one by one
BRAILLE = " ⠁⠃⠇⠏⠟⠿⣿"

MATHEMATICAL = " ·∘○●◉⬢⬣"

PALETTES = {
    "standard": STANDARD,
    "detailed": DETAILED,
    "blocks": BLOCKS,
    "minimal": MINIMAL,
    "binary": BINARY,
    "braille": BRAILLE,
    "mathematical": MATHEMATICAL,
}


def resolve_palette(name: str, custom: str = "") -> str:
    """Look up a palette by name. "custom" uses the given glyphs, or standard when empty."""
    if name == "custom":
        return custom or STANDARD
    try:
        return PALETTES[name]
    except KeyError:
        raise InvalidInputError(f"Unknown palette: {name}") from None
