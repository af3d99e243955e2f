"""
CLI for the ``compile`` command.

Usage:
    awto compile database [--verbose]
"""

import argparse
import sys
from typing import List, Optional

from awto.compile import compile_database
from awto.exceptions import AwtoError
from awto.utils.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser of the compile command."""
    parser = argparse.ArgumentParser(
        prog="awto compile",
        description="Compile generated packages from the app schema",
    )
    subparsers = parser.add_subparsers(
        title="targets",
        dest="target",
        required=True,
        help="Package to compile",
    )

    database_parser = subparsers.add_parser(
        "database",
        help="Compiles database package from app schema",
        description="Compiles database package from app schema",
    )
    database_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Prints more information",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for ``awto compile``.

    Args:
        argv: Command line arguments after ``compile``

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        if args.target == "database":
            compile_database()
        return 0

    except AwtoError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        if args.verbose and e.__cause__ is not None:
            print(f"Caused by: {e.__cause__}", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"UNEXPECTED ERROR: {str(e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
