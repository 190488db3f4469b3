# -*- coding: utf-8 -*-
"""
Gamut: Rendering intents from sRGB through CIELAB to CMYK
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: gamut_cli.py — Command-line front end for ``evaluate``.

Prints one row per rendering intent: name, display swatch hex and the
adjusted Lab.  Usage:

    gamut '#629c67'
    gamut 629c67 --cmyk
    gamut 629c67 --intent perceptual --intent naive
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from __about__ import __version__
from gamut_intents import INTENT_ORDER, RenderIntent
from gamut_pipeline import (
    IntentResult,
    InvalidHexError,
    format_lab,
    format_percent,
    hex_to_lab,
    render_intent,
)

DEFAULT_COLOR = "#629c67"

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _intent_arg(value: str) -> RenderIntent:
    try:
        return RenderIntent.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gamut",
        description="Show how approximate rendering intents shift an sRGB colour "
                    "through CIELAB (D50) and an educational CMYK conversion.",
    )
    parser.add_argument(
        "color", nargs="?", default=DEFAULT_COLOR,
        help=f"hex colour, with or without '#' (default: {DEFAULT_COLOR})",
    )
    parser.add_argument(
        "-i", "--intent", dest="intents", action="append", type=_intent_arg,
        metavar="NAME",
        help="render only this intent (repeatable; default: all five)",
    )
    parser.add_argument(
        "--cmyk", action="store_true",
        help="add CMYK ink percentages to each row",
    )
    parser.add_argument(
        "--strict-ieee", action="store_true",
        help="use fastmath=False kernels for the transfer functions",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_row(result: IntentResult, show_cmyk: bool = False, width: int = 22) -> str:
    row = f"{result.name:<{width}}  {result.display_hex}  {format_lab(result.lab)}"
    if show_cmyk:
        c, m, y, k = (format_percent(v) for v in result.cmyk)
        row += f"  C {c:3d}% M {m:3d}% Y {y:3d}% K {k:3d}%"
    return row


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    intents: List[RenderIntent] = args.intents or list(INTENT_ORDER)
    try:
        base = hex_to_lab(args.color, strict=args.strict_ieee)
    except InvalidHexError as e:
        print(f"gamut: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    results = [render_intent(base.lab, intent, strict=args.strict_ieee) for intent in intents]

    print(f"Input {args.color.strip()}  ->  {format_lab(base.lab)} (D50)")
    for result in results:
        print(format_row(result, show_cmyk=args.cmyk))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
