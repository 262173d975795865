#!/usr/bin/env python3
"""
Command-line script to render the foreign key graph of a table CSV.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from . import config
from .errors import ConfigurationError, TableGraphError, UnknownOutputTypeError
from .schema import GraphConfig, OutputType
from .workflows import GraphAssembler

_log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render foreign key relationships between tables as DOT or D3 HTML"
    )
    parser.add_argument("-f", "--file", type=str, default=config.DEFAULT_INPUT,
                        help="CSV with table_name, foreign_keys_json, relation_size columns")
    parser.add_argument("-o", "--output", type=str, default=config.DEFAULT_OUTPUT,
                        help="Output file base name, the extension is added automatically")
    parser.add_argument("-t", "--type", type=str, default=config.DEFAULT_TYPE,
                        help="Type of output: " + ", ".join(t.value for t in OutputType))
    parser.add_argument("--title", type=str, default=None, help="Title of the rendered graph")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_output_type(value: str) -> OutputType:
    try:
        return OutputType(value)
    except ValueError:
        raise UnknownOutputTypeError(f"unknown output type: {value}") from None


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging(verbose=args.verbose)

    try:
        options = dict(
            input_path=Path(args.file),
            output_base=args.output,
            output_type=parse_output_type(args.type),
        )
        if args.title:
            options["title"] = args.title
        try:
            graph_config = GraphConfig(**options)
        except ValidationError as e:
            raise ConfigurationError(f"invalid configuration: {e}") from e

        output_path = GraphAssembler(graph_config).run()
    except TableGraphError as e:
        _log.error("%s", e)
        return 1

    print(f"Graph saved to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
