"""Command-line interface."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from forbildshapes.compiler.assembler import compile_cylinder
from forbildshapes.errors import ForbildError
from forbildshapes.logging_config import setup_logging

logger = logging.getLogger("forbildshapes.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forbildshapes",
        description="Compile FORBILD cylinder descriptors and print them as JSON.",
    )
    parser.add_argument("descriptors", nargs="+", metavar="DESCRIPTOR",
                        help='e.g. "Cylinder_x: x=1; r=3; l=1; z<0.5"')
    parser.add_argument("--strict", action="store_true",
                        help="reject unknown clauses instead of skipping them")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    for descriptor in args.descriptors:
        try:
            primitive = compile_cylinder(descriptor, strict=args.strict)
        except ForbildError as e:
            logger.error(f"Cannot compile '{descriptor}': {e}")
            return 1
        print(json.dumps(primitive.to_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
