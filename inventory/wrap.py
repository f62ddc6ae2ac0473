"""
Wrap pair normalization.

A "wrap" may be given as a string, a number, a ``before:after`` pair or a
record. Everything is coerced into a ``WrapPair``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any


@dataclass(frozen=True)
class WrapPair:
    """Markup placed before and after a block."""
    before: str = ""
    after: str = ""

    def __bool__(self) -> bool:
        # an empty ``before`` means "no wrap"
        return len(self.before) > 0


EMPTY_WRAP = WrapPair()


def normalize_wrap(wrap: Any) -> WrapPair:
    """Formalize any given value as a wrap pair.

    Args:
        wrap: String, number, sequence, record or anything else

    Returns:
        WrapPair; unrecognized shapes give an empty pair

    Example:
        >>> normalize_wrap(["<div>", "</div>"])
        WrapPair(before='<div>', after='</div>')
        >>> normalize_wrap("<hr>")
        WrapPair(before='<hr>', after='<hr>')
        >>> normalize_wrap(None)
        WrapPair(before='', after='')
    """
    if isinstance(wrap, WrapPair):
        return wrap

    if is_dataclass(wrap) and not isinstance(wrap, type):
        wrap = asdict(wrap)

    if isinstance(wrap, bool):
        return EMPTY_WRAP

    if (isinstance(wrap, str) and len(wrap) > 0) or isinstance(wrap, (int, float)):
        value = str(wrap)
        return WrapPair(before=value, after=value)

    if isinstance(wrap, (list, tuple)) and len(wrap) > 0:
        before = _as_text(wrap[0])
        after = _as_text(wrap[1]) if len(wrap) > 1 else before
        return WrapPair(before=before, after=after)

    if isinstance(wrap, Mapping):
        values = list(wrap.values())[:2]
        if not values:
            return EMPTY_WRAP
        before = _as_text(values[0])
        after = _as_text(values[1]) if len(values) > 1 else ""
        # fall back to ``before`` when the record has no usable second value
        return WrapPair(before=before, after=after or before)

    return EMPTY_WRAP


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
