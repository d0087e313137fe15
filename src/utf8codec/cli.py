"""Command-line interface for utf8codec."""

from __future__ import annotations

import argparse
import logging
import re
import sys

import utf8codec
from utf8codec.codec.encoder import encode_values

logger = logging.getLogger(__name__)

_INT_LITERAL = re.compile(r"[+-]?(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def parse_int(literal: str) -> int:
    """Parse a C-style integer literal: ``0x`` hexadecimal, leading-zero octal, or decimal.

    :raises ValueError: If *literal* is not a valid literal in its base.
    """
    if _INT_LITERAL.fullmatch(literal) is None:
        msg = f"invalid integer literal: {literal!r}"
        raise ValueError(msg)
    sign = -1 if literal.startswith("-") else 1
    literal = literal.lstrip("+-")
    if literal.startswith(("0x", "0X")):
        return sign * int(literal[2:], 16)
    if literal.startswith("0") and len(literal) > 1:
        return sign * int(literal[1:], 8)
    return sign * int(literal, 10)


def format_code_point(code_point: int) -> str:
    """Return one output line: the code point, then its UTF-8 bytes in hex and decimal."""
    values = encode_values(code_point)
    if not values:
        logger.debug("%d is outside the encodable range", code_point)
    hex_bytes = "".join(f"{value:#x} " for value in values)
    dec_bytes = "".join(f"{value} " for value in values)
    return f"{code_point:#x} ({code_point})\t= {hex_bytes}\t( {dec_bytes})"


def main(argv: list[str] | None = None) -> None:
    """Run the ``genutf8`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        prog="genutf8",
        description="Show the UTF-8 encoding of Unicode code points.",
    )
    parser.add_argument(
        "code_points",
        nargs="+",
        metavar="CODEPOINT",
        help="Code point as a decimal, 0x-prefixed hex or 0-prefixed octal literal",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"utf8codec {utf8codec.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s"
        )

    failed = False
    for literal in args.code_points:
        try:
            code_point = parse_int(literal)
        except ValueError as e:
            print(f"genutf8: {literal}: {e}", file=sys.stderr)
            failed = True
            continue
        print(format_code_point(code_point))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
