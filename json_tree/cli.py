#!/usr/bin/env python3
"""
Command-line interface for the JSON tree validator.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from .api import JsonParseError
from .parser import load
from .printer import format_value
from .presets import webserver_schema
from .schema import SchemaFactory
from .validator import Validator
from .values import JsonValue
from .version import __version__

logger = logging.getLogger("json_tree")


def positive_int(text: str) -> int:
    """Argument type accepting integers of 1 or more."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Parse a JSON document and validate it against the built-in webserver schema."
    )
    parser.add_argument(
        "json_file",
        type=str,
        help="Path to the JSON document to validate"
    )
    parser.add_argument(
        "--print", "-p",
        dest="print_tree",
        action="store_true",
        help="Pretty-print the parsed document before validating it"
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Colorize pretty-printed output with ANSI escape codes"
    )
    parser.add_argument(
        "--max-errors",
        type=positive_int,
        default=None,
        metavar="N",
        help="Report at most N validation errors"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(args)


def load_json(filepath: Union[str, Path]) -> JsonValue:
    """
    Load and parse a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Parsed value tree

    Raises:
        FileNotFoundError: If the file doesn't exist
        JsonParseError: If the file contains invalid JSON
    """
    return load(filepath)


def main() -> int:
    """Main entry point for the script."""
    args = parse_args()

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        document = load_json(args.json_file)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except JsonParseError as e:
        logger.error(str(e))
        return 1

    if args.print_tree:
        print(format_value(document, color=args.color))

    validator = Validator(verbose=args.verbose, max_errors=args.max_errors)
    with SchemaFactory() as factory:
        result = validator.validate(document, webserver_schema(factory))

    # Report results
    if not result.valid:
        logger.error("Validation failed:")
        for error in result.errors:
            logger.error(f"  - {error}")
        if result.dropped_errors:
            logger.error(f"  ... and {result.dropped_errors} more")
        return 1

    logger.info("Validation successful!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
