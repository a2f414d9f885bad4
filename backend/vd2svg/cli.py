"""Command line entry point.

    vd2svg ic_home.xml -o ic_home.svg
    vd2svg res/drawable/*.xml --pretty      # writes res/drawable/<name>.svg
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from vd2svg.config import settings
from vd2svg.errors import ConversionError
from vd2svg.svg.document import ConversionOptions, transform

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vd2svg",
        description="Convert Android VectorDrawable XML files to SVG.",
    )
    p.add_argument("inputs", nargs="+", type=Path, help="VectorDrawable XML file(s)")
    p.add_argument("-o", "--output", type=Path, help="output file (single input only)")
    p.add_argument(
        "--pretty",
        action="store_true",
        default=settings.pretty_default,
        help="indent the SVG output",
    )
    p.add_argument(
        "--lenient",
        action="store_true",
        help="skip unmapped group attributes instead of failing",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _convert_file(src: Path, options: ConversionOptions) -> str:
    return transform(src.read_text(encoding="utf-8"), options)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(
        logging, settings.vd2svg_log_level.upper(), logging.INFO
    )
    logging.basicConfig(level=level, format="%(name)s %(levelname)s %(message)s", stream=sys.stderr)

    if args.output and len(args.inputs) > 1:
        print("vd2svg: --output needs exactly one input", file=sys.stderr)
        return 2

    options = ConversionOptions(
        pretty=args.pretty,
        strict_group_attributes=settings.strict_group_attributes and not args.lenient,
    )

    failed = 0
    for src in args.inputs:
        try:
            svg = _convert_file(src, options)
        except (ConversionError, OSError) as e:
            print(f"vd2svg: {src}: {e}", file=sys.stderr)
            failed += 1
            continue

        if len(args.inputs) == 1 and not args.output:
            sys.stdout.write(svg + "\n")
            continue

        out = args.output or src.with_suffix(".svg")
        out.write_text(svg + "\n", encoding="utf-8")
        logger.info("Wrote %s", out)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
