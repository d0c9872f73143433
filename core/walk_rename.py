"""
walk_rename.py - Recursive Rename Module

Responsibilities:
- Walk a directory tree depth-first
- Rename files before subdirectories, and a directory's contents before
  the directory itself
- dry_run support (plan only, filesystem untouched)
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable, Iterator, Union
import logging
import os

from .models_fs import PlannedRename, RenameOptions, RenameStyle
from .text_style import transform_basename, split_name
from .exec_rename import safe_rename

logger = logging.getLogger(__name__)


def list_entries(directory: Path) -> Tuple[List[os.DirEntry], List[os.DirEntry]]:
    """
    Enumerate a directory once

    Symlinks are neither files nor directories here, so they are never
    renamed or followed.

    Args:
        directory: Directory to list

    Returns:
        (file entries, directory entries) in filesystem enumeration order
    """
    files: List[os.DirEntry] = []
    dirs: List[os.DirEntry] = []
    with os.scandir(directory) as it:
        for entry in it:
            if entry.is_file(follow_symlinks=False):
                files.append(entry)
            elif entry.is_dir(follow_symlinks=False):
                dirs.append(entry)
    return files, dirs


def rename_recursive(
    root: Union[Path, str],
    style: Union[RenameStyle, str] = RenameStyle.TITLE_UNDERSCORE,
    options: Optional[RenameOptions] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[PlannedRename]:
    """
    Rename every file and directory under root to the given style

    Args:
        root: Root directory (its own name is never changed)
        style: Naming style
        options: Rename options (dry_run, filters)
        progress_callback: Called with a message for each rename

    Returns:
        Renames in the order they were planned/performed: files of a
        directory first, then each subdirectory's contents followed by
        the subdirectory itself

    Raises:
        OSError: Listing or renaming failed; the walk stops at the first error
    """
    if options is None:
        options = RenameOptions()

    performed: List[PlannedRename] = []

    def apply(src: Path, dst: Path) -> None:
        if options.dry_run:
            logger.debug("[Preview] %s -> %s", src, dst)
        else:
            safe_rename(src, dst)
        # Report the requested destination, even if a conflict moved it
        performed.append(PlannedRename(src=src, dst=dst))
        if progress_callback:
            prefix = "[Preview] " if options.dry_run else ""
            progress_callback(f"{prefix}{src.name} -> {dst.name}")

    def enter(current: Path) -> Iterator[os.DirEntry]:
        files, _ = list_entries(current)

        # First process files
        for entry in files:
            if options.skips(entry.name, is_dir=False):
                continue
            core, ext = split_name(entry.name)
            new_name = transform_basename(core, style) + ext
            if new_name != entry.name:
                apply(current / entry.name, current / new_name)

        # Re-read entries, file renames changed the listing
        _, dirs = list_entries(current)
        return iter(dirs)

    # Post-order over an explicit stack of (directory, remaining subdirectories)
    root_path = Path(root)
    stack: List[Tuple[Path, Iterator[os.DirEntry]]] = [(root_path, enter(root_path))]
    while stack:
        current, pending = stack[-1]
        entry = next(pending, None)
        if entry is not None:
            if options.skips(entry.name, is_dir=True):
                logger.debug("Skip directory: %s", entry.path)
                continue
            child = current / entry.name
            stack.append((child, enter(child)))
            continue

        # Contents done, now the directory itself (root keeps its name)
        stack.pop()
        if stack:
            new_name = transform_basename(current.name, style)
            if new_name != current.name:
                apply(current, current.parent / new_name)

    return performed
