#!/usr/bin/env python3
"""
QR code terminal printer CLI (qrterm)
"""
import sys
import argparse
import logging
from typing import List, Optional

from qrterm.exceptions import QRTermError
from qrterm.models import DEFAULT_ERROR_CORRECTION, DEFAULT_QUIET_ZONE, Color, RenderOptions
from qrterm.renderer import Renderer
from pydantic_core import ValidationError


logger = logging.getLogger()


def color(name: str) -> Color:
    try:
        return Color[name.upper()]
    except KeyError:
        choices = ", ".join(c.name.lower() for c in Color)
        raise argparse.ArgumentTypeError(f"invalid color '{name}' (choose from {choices})")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments"""

    parser = argparse.ArgumentParser(description="Print text as QR code in the terminal")
    parser.add_argument(
        "text",
        nargs="?",
        default="-",
        help='Text to encode. Read from stdin when omitted or "-"',
    )
    parser.add_argument(
        "-e",
        "--error-correction",
        choices=["L", "M", "Q", "H"],
        type=str.upper,
        default=DEFAULT_ERROR_CORRECTION,
        help=f"Error correction level. Defaults to {DEFAULT_ERROR_CORRECTION}",
    )
    parser.add_argument(
        "-q",
        "--quiet-zone",
        metavar="<modules>",
        type=int,
        default=DEFAULT_QUIET_ZONE,
        help=f"Width of the light border around the code. Defaults to {DEFAULT_QUIET_ZONE}",
    )
    parser.add_argument(
        "--dark",
        metavar="<color>",
        type=color,
        default=Color.BLACK,
        help="Color of dark modules. Defaults to black",
    )
    parser.add_argument(
        "--light",
        metavar="<color>",
        type=color,
        default=Color.WHITE,
        help="Color of light modules. Defaults to white",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )
    return parser.parse_args(argv)


def read_text(args: argparse.Namespace) -> str:
    if args.text != "-":
        return args.text
    text = sys.stdin.read()
    for newline in ("\r\n", "\n"):
        if text.endswith(newline):
            return text[: -len(newline)]
    return text


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(message)s")
    logger.debug(f"CLI arguments: {args}")

    try:
        options = RenderOptions(
            quiet_zone=args.quiet_zone,
            error_correction=args.error_correction,
            dark=args.dark,
            light=args.light,
        )
        Renderer(options).print_qr(read_text(args))

    except ValidationError as e:
        for item in e.errors():
            fields = ", ".join([str(e) for e in item["loc"]])
            print(f"failed to validate '{fields}': {item['msg']}")
        sys.exit("error: one or more validations failed")
    except QRTermError as e:
        sys.exit(f"error: {e}")


if __name__ == "__main__":
    main()
