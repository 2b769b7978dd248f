from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .api import convert_ods_to_markdown
from .errors import OdsError
from .model import LoadOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode an .ods spreadsheet and print it as Markdown")
    parser.add_argument("input", type=Path, help="Input .ods file")
    parser.add_argument("-o", "--output", type=Path, help="Output path (default: stdout)")
    parser.add_argument(
        "--strict-parts",
        action="store_true",
        help="Fail if any XML part of the package cannot be parsed",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log decoding progress to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = LoadOptions(strict_parts=args.strict_parts)
    try:
        markdown = convert_ods_to_markdown(args.input, options=options)
    except OdsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(markdown)
    else:
        args.output.write_text(markdown, encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
