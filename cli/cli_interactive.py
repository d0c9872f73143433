"""
cli_interactive.py - Interactive CLI

Provides a menu-style interactive interface. User input and output go
through the callables given to InteractiveSession, so the session can
be driven by scripted answers.
"""

import os
from dataclasses import replace
from pathlib import Path
from typing import Optional, List, Callable

from core import RenameStyle, RenameOptions, PlannedRename, rename_recursive, display_path

PREVIEW_LIMIT = 15


def clear_screen():
    """Clear screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


class InteractiveSession:
    """Menu loop for style renaming"""

    def __init__(
        self,
        ask: Callable[[str], str] = input,
        out: Callable[[str], None] = print,
        clear: Optional[Callable[[], None]] = None
    ):
        """
        Args:
            ask: Prompt function returning the user's answer
            out: Line output function
            clear: Screen clearing function (None to never clear)
        """
        self.ask = ask
        self.out = out
        self.clear = clear

    def print_header(self, title: str):
        self.out("")
        self.out("=" * 60)
        self.out(f"  {title}")
        self.out("=" * 60)
        self.out("")

    def pause(self):
        self.ask("Press Enter to return...")

    def input_directory(self, prompt: str = "Please enter directory path") -> Optional[Path]:
        """Input and validate directory"""
        while True:
            path_str = self.ask(f"{prompt} (q to return): ").strip()
            if path_str.lower() == 'q':
                return None

            path = Path(path_str).expanduser().resolve()
            if path.is_dir():
                return path
            self.out(f"Error: Directory does not exist: {path}")

    def input_choice(self, prompt: str, choices: List[str], default: Optional[str] = None) -> Optional[str]:
        """Input choice"""
        choices_str = "/".join(choices)
        default_str = f" [{default}]" if default else ""

        while True:
            value = self.ask(f"{prompt} ({choices_str}){default_str}: ").strip()
            if not value and default:
                return default
            if value.lower() == 'q':
                return None
            if value in choices:
                return value
            self.out(f"Invalid choice, please enter: {choices_str}")

    def input_bool(self, prompt: str, default: bool = False) -> bool:
        """Input boolean value"""
        default_str = "Y/n" if default else "y/N"
        value = self.ask(f"{prompt} ({default_str}): ").strip().lower()
        if not value:
            return default
        return value == 'y'

    def input_style(self) -> Optional[RenameStyle]:
        """Select naming style from a numbered list"""
        styles = list(RenameStyle)
        self.out("Naming style:")
        for i, style in enumerate(styles, start=1):
            example = style.join(["my", "file", "name"])
            self.out(f"  {i}. {style.value:<17} {example}")

        numbers = [str(i) for i in range(1, len(styles) + 1)]
        choice = self.input_choice("Select naming style", numbers, "1")
        if choice is None:
            return None
        return styles[int(choice) - 1]

    def show_renames(self, renames: List[PlannedRename], base: Path):
        """Print rename list relative to base"""
        self.out("-" * 70)
        for op in renames[:PREVIEW_LIMIT]:
            self.out(f"  {_relative(op.src, base):<35} -> {display_path(op.dst.name)}")
        if len(renames) > PREVIEW_LIMIT:
            self.out(f"  ... and {len(renames) - PREVIEW_LIMIT} more operations")
        self.out("-" * 70)

    def menu_style_rename(self, dry_run: bool):
        """Style rename menu"""
        self.print_header("Preview Rename" if dry_run else "Style Rename")

        directory = self.input_directory("Please enter root directory")
        if directory is None:
            return

        style = self.input_style()
        if style is None:
            return

        include_hidden = not self.input_bool("Skip hidden files and directories", default=False)
        ignore = self.ask("Directories to ignore (comma separated, leave empty for none): ")
        options = RenameOptions(
            include_hidden=include_hidden,
            ignore_dirs=[d.strip() for d in ignore.split(',') if d.strip()],
        )

        # Always plan first
        self.out(f"\nPlanning {style.value} rename of {directory} ...")
        try:
            planned = rename_recursive(directory, style, replace(options, dry_run=True))
        except Exception as e:
            self.out(f"Error: {e}")
            self.pause()
            return

        if not planned:
            self.out("No files need renaming")
            self.pause()
            return

        self.out(f"\nWill perform {len(planned)} rename operations:")
        self.show_renames(planned, directory)

        if dry_run:
            self.out("\n[Preview mode] Will not actually execute")
            self.pause()
            return

        self.out("")
        if not self.input_bool("Confirm execution", default=False):
            self.out("Cancelled")
            self.pause()
            return

        self.out("\nExecuting...")
        try:
            performed = rename_recursive(directory, style, options)
        except Exception as e:
            self.out(f"Error: {e}")
            self.out("The tree may be partially renamed")
            self.pause()
            return

        self.out(f"Renamed {len(performed)} items")
        self.pause()

    def run(self) -> int:
        """Interactive mode main loop"""
        while True:
            if self.clear:
                self.clear()
            self.print_header("Style Rename Tool")

            self.out("Please select function:")
            self.out("")
            self.out("  1. Preview rename (dry run)")
            self.out("  2. Rename")
            self.out("")
            self.out("  q. Exit")
            self.out("")

            choice = self.ask("Please select (1/2/q): ").strip().lower()

            if choice == 'q':
                self.out("Goodbye!")
                return 0
            elif choice == '1':
                self.menu_style_rename(dry_run=True)
            elif choice == '2':
                self.menu_style_rename(dry_run=False)
            else:
                self.out("Invalid choice")
                self.ask("Press Enter to continue...")


def _relative(path: Path, base: Path) -> str:
    try:
        return display_path(path.relative_to(base))
    except ValueError:
        return display_path(path)


def interactive_mode(
    ask: Callable[[str], str] = input,
    out: Callable[[str], None] = print
) -> int:
    """Start interactive session on the terminal"""
    return InteractiveSession(ask=ask, out=out, clear=clear_screen).run()
