"""
Unified CLI entry point for awto.

Usage:
    awto <command> [options]
    python -m awto.cli <command> [options]

Available commands:
    compile      - Compile generated packages from the app schema

Examples:
    # Compile the database package
    awto compile database

    # Compile with debug output
    awto compile database --verbose
"""

import argparse
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="awto",
        description="awto CLI - compile packages from the app schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compile the database package
  awto compile database

  # Compile with debug output
  awto compile database --verbose
        """,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    subparsers.add_parser(
        "compile",
        help="Compile generated packages from the app schema",
        description="Compile generated packages from the app schema",
        add_help=False,  # Let the delegated module handle help
    )

    args, remaining_args = parser.parse_known_args(argv)

    if args.command == "compile":
        from awto.cli.compile import main as compile_main

        return compile_main(remaining_args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
