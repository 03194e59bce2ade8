import argparse
import logging
import sys

from asciipaint.charsets import CHARSETS
from asciipaint.config import RenderConfig
from asciipaint.converter import convert_file
from asciipaint.errors import AsciiPaintError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Re-draw an image as coloured characters")
    parser.add_argument("filename", help="Path to input image")
    parser.add_argument("outfile", help="Path of the output image; the format follows the extension")
    parser.add_argument("-f", "--font", required=True, help="Font file to draw with (monospaced fonts work best)")
    parser.add_argument("--font-size", type=float, default=12.0, help="Font size in points (default: 12)")
    parser.add_argument(
        "-s", "--scale", type=float, default=1.0, help="Output size relative to the input image (default: 1.0)"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-c", "--character", default=None, help="Draw every cell with this one character")
    mode.add_argument("--textfile", default=None, help="Draw the letters of this text file in order, repeating")
    parser.add_argument(
        "--charset",
        default="latin",
        type=str.lower,
        choices=list(CHARSETS),
        help="Alphabet for random characters (default: latin)",
    )
    parser.add_argument("--custom-charset", default=None, help="File whose characters replace --charset")
    parser.add_argument("-b", "--background", default="#000000", help="Background colour (default: #000000)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random characters")
    parser.add_argument("-j", "--jobs", type=int, default=1, help="Rows rendered in parallel (default: 1)")
    parser.add_argument("--no-progress", action="store_true", default=False, help="Hide the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s: %(message)s"
    )

    try:
        config = RenderConfig(
            font=args.font,
            font_size=args.font_size,
            scale=args.scale,
            character=args.character,
            textfile=args.textfile,
            charset=args.charset,
            custom_charset=args.custom_charset,
            background=args.background,
            seed=args.seed,
            workers=args.jobs,
            progress=not args.no_progress,
        )
        convert_file(args.filename, args.outfile, config)
    except AsciiPaintError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
