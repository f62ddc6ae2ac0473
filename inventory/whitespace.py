"""
Whitespace helpers for inventory blocks.

Lines of an extracted block are measured, cropped to their common
indentation and (for wrapped views) shifted one level deeper.
"""

from __future__ import annotations

import re
from typing import List, Optional

# Width reported for empty lines, larger than any real indentation
EMPTY_LINE_WIDTH = 9999

DEFAULT_INDENT = "    "

_LEADING_WHITESPACE = re.compile(r'^\s*')


def indent_tabs(line: str, indent: Optional[str] = "") -> str:
    """Replace the first tab in ``line`` with ``indent``."""
    return line.replace("\t", indent or "", 1)


def whitespace_width(line: str) -> int:
    """Count leading whitespace characters.

    Args:
        line: A single line without line terminator

    Returns:
        Number of leading whitespace characters, or ``EMPTY_LINE_WIDTH``
        for an empty line

    Example:
        >>> whitespace_width("    <p>")
        4
        >>> whitespace_width("")
        9999
    """
    if not line:
        return EMPTY_LINE_WIDTH
    return len(_LEADING_WHITESPACE.match(line).group(0))


def min_width(previous: int, current: int) -> int:
    return previous if previous <= current else current


def dedent(lines: List[str], width: int) -> List[str]:
    """Remove exactly ``width`` leading characters from every line.

    This is a column crop, not a whitespace strip: the width is trusted
    to be the block's common indentation.
    """
    return [line[width:] for line in lines]


def indent(lines: List[str], prefix: str = DEFAULT_INDENT) -> List[str]:
    """Prepend ``prefix`` to every line (empty lines included)."""
    return [prefix + line for line in lines]
