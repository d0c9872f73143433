"""
models_fs.py - Core Data Structure Definitions

Contains:
- RenameStyle: Naming style enumeration (with its joining rules)
- PlannedRename: Single planned/performed rename
- RenameOptions: Rename options configuration
"""

from dataclasses import dataclass, field
from pathlib import Path
import os
import sys
from typing import Optional, List, Callable, Dict, Union
from enum import Enum


def capitalize_word(word: str) -> str:
    """Uppercase the first character, lowercase the rest"""
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


class RenameStyle(Enum):
    """Naming style enumeration"""
    TITLE_UNDERSCORE = "title_underscore"   # File_Name
    SNAKE = "snake"                         # file_name
    KEBAB = "kebab"                         # file-name
    CAMEL = "camel"                         # fileName
    PASCAL = "pascal"                       # FileName
    UPPER = "upper"                         # FILE_NAME
    LOWER = "lower"                         # file_name

    @classmethod
    def parse(cls, value: Union["RenameStyle", str, None]) -> Optional["RenameStyle"]:
        """
        Get style from member or string value

        Args:
            value: Style member or its string value

        Returns:
            Style, or None if the value is not a known style
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def names(cls) -> List[str]:
        """All style values, in declaration order"""
        return [style.value for style in cls]

    @property
    def rule(self) -> "StyleRule":
        return STYLE_RULES[self]

    def join(self, words: List[str]) -> str:
        """Join tokenized words according to this style"""
        return self.rule.join(words)


@dataclass(frozen=True)
class StyleRule:
    """Word casing and joining rule of a naming style"""
    separator: str                          # Placed between words
    first_word: Callable[[str], str]        # Casing for the first word
    other_words: Callable[[str], str]       # Casing for the remaining words

    def join(self, words: List[str]) -> str:
        if not words:
            return ""
        cased = [self.first_word(words[0])] + [self.other_words(w) for w in words[1:]]
        return self.separator.join(cased)


STYLE_RULES: Dict[RenameStyle, StyleRule] = {
    RenameStyle.TITLE_UNDERSCORE: StyleRule("_", capitalize_word, capitalize_word),
    RenameStyle.SNAKE: StyleRule("_", str.lower, str.lower),
    RenameStyle.KEBAB: StyleRule("-", str.lower, str.lower),
    RenameStyle.CAMEL: StyleRule("", str.lower, capitalize_word),
    RenameStyle.PASCAL: StyleRule("", capitalize_word, capitalize_word),
    RenameStyle.UPPER: StyleRule("_", str.upper, str.upper),
    RenameStyle.LOWER: StyleRule("_", str.lower, str.lower),
}


@dataclass
class PlannedRename:
    """Single rename operation (planned in dry run, performed otherwise)"""
    src: Path                       # Source path
    dst: Path                       # Requested destination path

    def describe(self) -> str:
        """One report line, e.g. '  a/File One.txt → a/file-one.txt'"""
        return f"  {display_path(self.src)} → {display_path(self.dst)}"


@dataclass
class RenameOptions:
    """Rename options configuration"""
    # Execution options
    dry_run: bool = False           # Preview only, do not actually execute

    # Traversal filters (defaults process every entry)
    include_hidden: bool = True     # Whether to process entries starting with '.'
    ignore_dirs: List[str] = field(default_factory=list)  # Directory names to leave untouched

    def skips(self, name: str, is_dir: bool) -> bool:
        """Whether an entry is excluded from renaming and traversal"""
        if not self.include_hidden and name.startswith('.'):
            return True
        return is_dir and name in self.ignore_dirs


def is_case_only_change(src: Union[Path, str], dst: Union[Path, str]) -> bool:
    """Whether two paths differ only in letter case"""
    src_str, dst_str = str(src), str(dst)
    return src_str.lower() == dst_str.lower() and src_str != dst_str


def display_path(path: Union[Path, str]) -> str:
    """Path as printable text; bytes the filesystem encoding cannot decode become U+FFFD"""
    return os.fsencode(path).decode(sys.getfilesystemencoding(), "replace")
