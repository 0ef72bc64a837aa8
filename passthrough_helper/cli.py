"""Command-line interface for passthrough-helper."""

import argparse
import json
import logging
import sys

from passthrough_helper.method_extractor import get_pass_through_method_infos
from passthrough_helper.source import create_source_file_from_path
from passthrough_helper.type_finder import (
    TypeNotFoundError,
    first_type_finder,
    type_by_name_finder,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="passthrough-helper",
        description="List the methods a pass-through wrapper must forward",
    )
    parser.add_argument(
        "path",
        help="Python source or stub file declaring the type",
    )
    parser.add_argument(
        "--type",
        "-t",
        dest="type_name",
        help="Name of the class to inspect (default: first class in the file)",
    )
    parser.add_argument(
        "--method",
        "-m",
        action="append",
        dest="methods",
        help="Only include this method (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log parsing details to stderr",
    )
    return parser


def run_inspect(path: str, type_name: str | None, methods: list[str] | None) -> int:
    """Print the pass-through methods of a class as JSON.

    Returns:
        Exit code (0 for success, 1 if the type cannot be read)
    """
    type_finder = type_by_name_finder(type_name) if type_name else first_type_finder

    try:
        source_file = create_source_file_from_path(path)
        declaration = type_finder(source_file)
    except (OSError, SyntaxError, TypeNotFoundError) as e:
        logger.error(f"Could not read type from {path}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    method_infos = get_pass_through_method_infos(
        declaration,
        source_file,
        (lambda name: name in methods) if methods else (lambda name: True),
    )

    output = {
        "file": path,
        "type": declaration.name,
        "methods": [m.to_dict() for m in method_infos],
    }
    print(json.dumps(output, indent=2))
    return 0


def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        parsed = create_parser().parse_args(args)
    except SystemExit as e:
        return e.code if e.code else 1

    setup_logging(parsed.verbose)
    return run_inspect(parsed.path, parsed.type_name, parsed.methods)


def main():
    """Entry point for the CLI."""
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
