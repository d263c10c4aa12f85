#!/usr/bin/env python3
"""Command-line front end: disassemble a raw 8086 binary to stdout."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from .config import load_config
from .disassembler import disassemble

logger = logging.getLogger(__name__)

EXIT_INCOMPLETE = 1
EXIT_UNREADABLE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dis8086", description="Disassemble 8086 MOV instructions"
    )
    parser.add_argument("file", type=Path, help="Raw machine-code file")
    parser.add_argument(
        "--trace",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Log every decoded instruction (default from DIS8086_TRACE)",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Exit non-zero when decoding stops early (default on)",
    )
    parser.add_argument(
        "--header",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit the 'bits 16' header (default on)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = load_config()
    trace = config.trace if args.trace is None else args.trace
    strict = config.strict if args.strict is None else args.strict
    header = config.header if args.header is None else args.header

    logging.basicConfig(
        level=logging.DEBUG if trace else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        data = args.file.read_bytes()
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return EXIT_UNREADABLE

    result = disassemble(data)
    sys.stdout.write(result.render(header=header))
    if not result.complete:
        logger.error("%s: %s", args.file, result.error)
        if strict:
            return EXIT_INCOMPLETE
    return 0


if __name__ == "__main__":
    sys.exit(main())
