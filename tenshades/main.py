#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/main.py

import argparse
import random
import sys
from typing import List, Optional

from tenshades import __version__
from tenshades.core import config as c
from tenshades.core.errors import PaletteError
from tenshades.logic.palette import generate_palette
from tenshades.logic.palette.renderer import render_palette
from tenshades.shared.logger import log, TenshadesArgumentParser
from tenshades.shared.sanitizer import INPUT_HANDLERS
from tenshades.shared.truecolor import ensure_truecolor


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for the shade palette command."""
    parser = TenshadesArgumentParser(
        prog="tenshades",
        description="tenshades: generate ten lightness shades (50 to 900) from a single color",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=(
            "examples:\n"
            "  tenshades '#ea1863'\n"
            "  tenshades --color '#ea1863' --format hsl\n"
            "  tenshades '#ea1863' --format hsl --shade 400"
        ),
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"tenshades {__version__}",
        help="show program version and exit",
    )

    # Color Input Group
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "color",
        nargs="?",
        default=None,
        help="opaque hex color with # sign (e.g. #ea1863 or #fff)",
    )
    color_input_group.add_argument(
        "-c",
        "--color",
        dest="color_option",
        default=None,
        help="same as the positional COLOR",
    )
    color_input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate shades for a random color",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )

    # Palette Options Group
    palette_group = parser.add_argument_group("palette options")
    palette_group.add_argument(
        "-f",
        "--format",
        type=INPUT_HANDLERS["format"],
        default=c.DEFAULT_FORMAT,
        help=f"output notation: {', '.join(c.OUTPUT_FORMATS)} (default: {c.DEFAULT_FORMAT})",
    )
    palette_group.add_argument(
        "-S",
        "--shade",
        type=INPUT_HANDLERS["shade"],
        default=None,
        help="shade the input color is placed at (50 to 900)",
    )

    # Output Group
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "-o",
        "--output",
        type=INPUT_HANDLERS["output"],
        choices=list(c.OUTPUT_MODES),
        default="text",
        help="text, json or prettyjson (default: text)",
    )
    output_group.add_argument(
        "-hb",
        "--hide-blocks",
        action="store_true",
        help="hide color preview blocks in text output",
    )
    return parser


def resolve_color_argument(args: argparse.Namespace) -> Optional[str]:
    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        return f"#{random.randint(0, c.MAX_DEC):06x}"
    if args.color_option is not None:
        return args.color_option
    return args.color


def handle_palette_command(args: argparse.Namespace) -> None:
    """Entry point for the palette command."""
    color = resolve_color_argument(args)

    try:
        palette = generate_palette(color, args.format, args.shade)
        swatches = None
        if args.output == "text" and not args.hide_blocks:
            swatches = generate_palette(color, "hex", args.shade)
    except PaletteError as err:
        if str(err):
            log("error", str(err))
        log("info", "usage: tenshades [--color] COLOR [--format FORMAT] [--shade SHADE]")
        log("info", "use 'tenshades --help' for more information")
        sys.exit(2)

    render_palette(palette, args.output, swatches)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for tenshades CLI"""
    parser = get_palette_parser()
    args = parser.parse_args(argv)
    ensure_truecolor()
    handle_palette_command(args)


if __name__ == "__main__":
    main()
