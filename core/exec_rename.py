"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Find a free destination name (auto add _1, _2...)
- Case-only renames via a temporary name (case-insensitive filesystems)
- Restore the original name if the second phase fails
"""

from pathlib import Path
from typing import Union
import logging
import uuid
import os

from .models_fs import is_case_only_change

logger = logging.getLogger(__name__)

TEMP_MARKER = "__tmp_rename__"


def _generate_temp_name(target: Path) -> Path:
    """Generate temporary filename next to the target"""
    unique_id = uuid.uuid4().hex[:8]
    return target.with_name(f"{target.name}{TEMP_MARKER}{unique_id}")


def _is_same_entry(a: Path, b: Path) -> bool:
    """Whether two existing paths point to the same filesystem object"""
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def unique_destination(dest: Union[Path, str]) -> Path:
    """
    Find a destination path that does not exist yet

    Args:
        dest: Desired destination

    Returns:
        dest itself if free, otherwise <stem>_<n><suffix> with the smallest free n
    """
    dest = Path(dest)
    if not os.path.lexists(dest):
        return dest

    n = 1
    while True:
        candidate = dest.with_name(f"{dest.stem}_{n}{dest.suffix}")
        if not os.path.lexists(candidate):
            logger.debug("Conflict resolved: %s -> %s", dest.name, candidate.name)
            return candidate
        n += 1


def safe_rename(old_path: Union[Path, str], new_path: Union[Path, str]) -> Path:
    """
    Rename a file or directory without overwriting existing entries

    Case-only changes go through a temporary name, since renaming directly
    to a case variant is a no-op on case-insensitive filesystems. Any other
    rename whose target is taken is redirected to a free name.

    Args:
        old_path: Existing path
        new_path: Desired path

    Returns:
        Path the entry ended up at

    Raises:
        OSError: Rename failed (after restoring the original name when possible)
    """
    old_path, new_path = Path(old_path), Path(new_path)

    if is_case_only_change(old_path, new_path) and (
        not os.path.lexists(new_path) or _is_same_entry(old_path, new_path)
    ):
        temp_path = _generate_temp_name(new_path)
        logger.debug("Case-only rename via %s", temp_path.name)

        # Phase 1: to temporary name
        os.rename(old_path, temp_path)
        # Phase 2: to final name
        try:
            os.rename(temp_path, new_path)
        except OSError:
            # Try to restore
            try:
                os.rename(temp_path, old_path)
            except OSError as restore_error:
                logger.warning("Restore failed, entry left at %s: %s", temp_path, restore_error)
            raise
        logger.debug("Renamed %s -> %s", old_path, new_path)
        return new_path

    final_path = unique_destination(new_path)
    os.rename(old_path, final_path)
    logger.debug("Renamed %s -> %s", old_path, final_path)
    return final_path
