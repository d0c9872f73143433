"""
cli - Command Line Interface for Style Rename Tool
"""

from .cli_entry import main, UsageError
from .cli_interactive import interactive_mode, InteractiveSession

__all__ = ["main", "UsageError", "interactive_mode", "InteractiveSession"]
