"""
text_style.py - Name Style Tools

Provides word splitting and naming style transformation
"""

from typing import List, Tuple, Union
import re

from .models_fs import RenameStyle

# camelCase boundary: lowercase letter followed by uppercase letter
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
# Any run of characters that are neither letters nor digits
_SEPARATORS = re.compile(r"[\W_]+")


def split_words(text: str) -> List[str]:
    """
    Split text into words

    Splits on camelCase boundaries and on any run of characters that
    are not letters or digits.

    Args:
        text: Name without extension

    Returns:
        Non-empty words (empty list if none)
    """
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", text)
    parts = (p.strip() for p in _SEPARATORS.split(spaced))
    return [p for p in parts if p]


def transform_basename(basename: str, style: Union[RenameStyle, str]) -> str:
    """
    Apply naming style to a name without extension

    A leading dot (hidden file) is kept in front of the result. Names
    containing any other dot are returned unchanged: callers are
    expected to pass the core name only (see split_name).

    Args:
        basename: Core name
        style: Naming style (member or string value)

    Returns:
        Transformed name, or the original name if it cannot be transformed
    """
    if not basename:
        return basename
    if '.' in basename and not basename.startswith('.'):
        return basename

    rename_style = RenameStyle.parse(style)
    if rename_style is None:
        return basename

    leading_dot = '.' if basename.startswith('.') else ''
    core = basename[1:] if leading_dot else basename

    words = split_words(core)
    if not words:
        return basename

    return leading_dot + rename_style.join(words)


def split_name(name: str) -> Tuple[str, str]:
    """
    Split filename into core name and extension

    The extension starts at the first dot after the leading character,
    so multi-part extensions stay whole.

    Examples:
        "Deep File.testdata.js" -> ("Deep File", ".testdata.js")
        ".eslintrc.json"        -> (".eslintrc", ".json")
        ".gitignore"            -> (".gitignore", "")

    Args:
        name: Filename

    Returns:
        (core name, extension)
    """
    dot = name.find('.', 1)
    if dot == -1:
        return name, ""
    return name[:dot], name[dot:]
