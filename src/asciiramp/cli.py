import argparse
import logging
import sys
from pathlib import Path

from PIL import UnidentifiedImageError

from asciiramp.config import DEFAULT_DEPTH, ConversionConfig
from asciiramp.converter import image_to_ascii
from asciiramp.errors import AsciiRampError
from asciiramp.terminal import default_width, supports_truecolour

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciiramp", description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-c", "--colour", "--color", action="store_true", default=False, help="Enable truecolor ANSI output"
    )
    parser.add_argument(
        "-b", "--braille", action="store_true", default=False, help="Enable braille mode (not implemented, ignored)"
    )
    parser.add_argument(
        "-w", "--width", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-H",
        "--height",
        type=int,
        default=None,
        help="Output height in rows (default: derived from the image aspect ratio)",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"Luminance depth (default: {DEFAULT_DEPTH}). 10 or less selects the 10-level ramp, "
        "anything higher the 70-level one.",
    )
    parser.add_argument(
        "--bg", action="store_true", default=False, help="Paint each cell's colour as background (with --colour)"
    )
    parser.add_argument(
        "--trim-border", action="store_true", default=False, help="Drop the outermost ring of cells"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    width = args.width if args.width is not None else default_width()

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    try:
        config = ConversionConfig(
            colour=args.colour,
            depth=args.depth,
            cols=width,
            rows=args.height,
            braille=args.braille,
            paint_background=args.bg,
            trim_border=args.trim_border,
        )
    except ValueError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 1

    if config.colour and not supports_truecolour():
        log.warning("Terminal does not advertise truecolor support, colours may be approximated")

    try:
        output = image_to_ascii(image_path, config)
    except UnidentifiedImageError:
        print(f"Cannot decode image: {image_path}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read image: {image_path} ({e})", file=sys.stderr)
        return 1
    except AsciiRampError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
