"""
core - Style Rename Core Module

Provides core functionalities such as word splitting, naming style
transformation, safe renaming and recursive tree renaming.
"""

from .models_fs import (
    RenameStyle,
    StyleRule,
    STYLE_RULES,
    PlannedRename,
    RenameOptions,
    capitalize_word,
    is_case_only_change,
    display_path,
)

from .text_style import (
    split_words,
    transform_basename,
    split_name,
)

from .exec_rename import (
    unique_destination,
    safe_rename,
)

from .walk_rename import (
    list_entries,
    rename_recursive,
)

__all__ = [
    # Data models
    "RenameStyle",
    "StyleRule",
    "STYLE_RULES",
    "PlannedRename",
    "RenameOptions",

    # Text processing
    "capitalize_word",
    "split_words",
    "transform_basename",
    "split_name",

    # Execution
    "is_case_only_change",
    "display_path",
    "unique_destination",
    "safe_rename",

    # Traversal
    "list_entries",
    "rename_recursive",
]
