"""
cli_entry.py - CLI Entry Point

Supports:
- Command-line argument mode: <root> <style> [--dry|-n]
- Interactive mode (--interactive)
"""

import argparse
import logging
import sys
from typing import List, Optional

from core import RenameStyle, RenameOptions, rename_recursive
from .cli_interactive import interactive_mode


class UsageError(Exception):
    """Missing or invalid command-line arguments"""


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="style-rename",
        description="Recursively rename files and directories to a naming style",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Styles:
  {", ".join(RenameStyle.names())}

Examples:
  # Preview kebab-case renames
  style-rename ./docs kebab --dry

  # Rename, leaving .git and node_modules untouched
  style-rename ./project snake --ignore .git --ignore node_modules

  # Interactive mode
  style-rename --interactive
"""
    )

    parser.add_argument("root", nargs="?", help="Root directory")
    parser.add_argument("style", nargs="?", help="Naming style")
    parser.add_argument("--dry", "-n", dest="dry_run", action="store_true",
                        help="Preview only, do not execute")
    parser.add_argument("--ignore", action="append", default=[], metavar="DIR",
                        help="Directory name to leave untouched (repeatable)")
    parser.add_argument("--skip-hidden", action="store_true",
                        help="Leave entries starting with '.' untouched")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug log")
    parser.add_argument("--interactive", "-i", action="store_true", help="Interactive mode")

    return parser


def validate_args(args: argparse.Namespace) -> RenameStyle:
    """
    Check required arguments

    Returns:
        Selected naming style

    Raises:
        UsageError: root or style missing, or style unknown
    """
    if not args.root or not args.style:
        raise UsageError("root and style are required")

    style = RenameStyle.parse(args.style)
    if style is None:
        raise UsageError(f"Unknown style: {args.style}")
    return style


def cmd_rename(args: argparse.Namespace, style: RenameStyle) -> int:
    """Handle rename command"""
    options = RenameOptions(
        dry_run=args.dry_run,
        include_hidden=not args.skip_hidden,
        ignore_dirs=args.ignore,
    )

    try:
        performed = rename_recursive(args.root, style, options)

        if options.dry_run:
            print(f"Dry run - would rename {len(performed)} items:")
        else:
            print(f"Renamed {len(performed)} items:")
        for op in performed:
            print(op.describe())
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.interactive:
        return interactive_mode()

    try:
        style = validate_args(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        print(f"Styles: {', '.join(RenameStyle.names())}", file=sys.stderr)
        return 1

    return cmd_rename(args, style)


if __name__ == "__main__":
    sys.exit(main())
