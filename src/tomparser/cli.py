"""Command-line entry point: parse a .bim file and print it as JSON."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from tomparser import __version__
from tomparser.models.errors import TomParserError
from tomparser.parser.loader import BimLoader
from tomparser.service.describe import describe_model
from tomparser.settings import Settings

logger = logging.getLogger("tomparser.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tomparser",
        description="Parse a Power BI / Analysis Services .bim file into a tabular model",
    )
    parser.add_argument("path", help="Path to the .bim file")
    parser.add_argument("--exclude-hidden", action="store_true",
                        help="Drop hidden tables, columns and measures")
    parser.add_argument("--no-annotations", action="store_true",
                        help="Omit model and culture annotations")
    parser.add_argument("--strict-relationships", action="store_true",
                        help="Fail on relationships that reference unknown tables")
    parser.add_argument("--strict-data-types", action="store_true",
                        help="Fail on columns with unrecognised data types")
    parser.add_argument("--describe", action="store_true",
                        help="Print a summary instead of the full model")
    parser.add_argument("--indent", type=int, default=2,
                        help="JSON indentation (default: 2)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    defaults = settings.parse_options()
    options = defaults.model_copy(
        update={
            "include_hidden_objects": defaults.include_hidden_objects and not args.exclude_hidden,
            "include_annotations": defaults.include_annotations and not args.no_annotations,
            "strict_relationships": defaults.strict_relationships or args.strict_relationships,
            "strict_data_types": defaults.strict_data_types or args.strict_data_types,
        }
    )

    try:
        model = asyncio.run(BimLoader().load(args.path, options))
    except TomParserError as exc:
        logger.debug("Failed to parse %s", args.path, exc_info=True)
        print(f"{exc.code.value}: {exc.message}", file=sys.stderr)
        return 1

    payload = describe_model(model).to_dict() if args.describe else model.to_dict()
    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
