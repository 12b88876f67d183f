import argparse
import logging
import sys
from pathlib import Path

from PIL import Image

from asciiconv import export
from asciiconv.charsets import PALETTES, resolve_palette
from asciiconv.converter import render
from asciiconv.model import ColourMode, ConversionConfig, InvalidInputError
from asciiconv.sampling import resolution_for_width
from asciiconv.terminal import get_terminal_size
from asciiconv.theme import THEMES

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root = logging.getLogger("asciiconv")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    size = parser.add_mutually_exclusive_group()
    size.add_argument(
        "-s", "--size", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    size.add_argument(
        "-r", "--resolution", type=float, default=None, help="Fraction of pixel columns sampled, in (0, 1]"
    )
    parser.add_argument(
        "-p",
        "--palette",
        default="standard",
        choices=sorted([*PALETTES, "custom"]),
        help="Glyph palette, sparsest to densest (default: standard)",
    )
    parser.add_argument("--custom", default="", help="Glyphs for the custom palette")
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert brightness")
    parser.add_argument("-c", "--colour", action="store_true", default=False, help="Colour each glyph")
    parser.add_argument(
        "-d", "--dither", action="store_true", default=False, help="Snap brightness to one level per glyph"
    )
    parser.add_argument("-e", "--edges", action="store_true", default=False, help="Convert Sobel edges only")
    parser.add_argument("-b", "--brightness", type=float, default=1.0, help="Brightness multiplier (default: 1.0)")
    parser.add_argument("-k", "--contrast", type=float, default=1.0, help="Contrast multiplier (default: 1.0)")
    parser.add_argument("-t", "--theme", default="dark", choices=sorted(THEMES), help="Colour theme (default: dark)")
    parser.add_argument(
        "-o", "--output", default=None, help="Write to a .txt, .html, .svg, .png or .ans file instead of stdout"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug messages")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    theme = THEMES[args.theme]
    try:
        with Image.open(image_path) as image:
            logger.debug("Loaded %s (%dx%d)", image_path, image.width, image.height)
            if args.resolution is not None:
                resolution = args.resolution
            else:
                columns = args.size if args.size is not None else get_terminal_size()[0]
                resolution = resolution_for_width(max(image.width, 1), columns)
            config = ConversionConfig(
                resolution=resolution,
                inverted=args.invert,
                colour_mode=ColourMode.COLOUR if args.colour else ColourMode.GRAYSCALE,
                palette=resolve_palette(args.palette, args.custom),
                dither=args.dither,
                edge_detection=args.edges,
            )
            result = render(image, config, theme.foreground, args.brightness, args.contrast)

        if args.output is not None:
            export.save(result, args.output, theme, colour=args.colour)
            logger.debug("Wrote %s", args.output)
        elif args.colour:
            print(export.to_ansi(result))
        else:
            print(result.text)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
