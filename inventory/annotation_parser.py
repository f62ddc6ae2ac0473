"""
Annotation parser for inventory blocks.

Reads options from the HTML comment opening an extraction block.

Format:
<!-- extract:content/element.html name:Element category:Forms wrap:<div class="wrapper">:</div> -->

becomes:
{
    'extract': 'content/element.html',
    'name': 'Element',
    'category': 'Forms',
    'wrap': WrapPair(before='<div class="wrapper">', after='</div>'),
}

Rules:
1. A key is a run of word characters followed by a colon, at the start of
   the annotation or after whitespace
2. A value runs until the next key and is trimmed
3. Unescaped colons split a value into a list (``wrap`` uses this);
   extract, name, category and group are always kept verbatim
4. A backslash escapes the next character, so ``\\:`` is a literal colon
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .config import ProcessorConfig
from .wrap import EMPTY_WRAP, WrapPair, normalize_wrap

logger = logging.getLogger(__name__)

# Options whose value is never split on colons
SCALAR_KEYS = ("extract", "name", "category", "group")

_KEY = re.compile(r'\w+:')
_COMMENT_OPEN = re.compile(r'^\s*<!--')
_COMMENT_CLOSE = re.compile(r'-->\s*$')
_BLOCK_ANNOTATION = re.compile(r'<!--(.*?)-->', re.DOTALL)

# (character, escaped)
_Char = Tuple[str, bool]


class AnnotationError(ValueError):
    """Exception raised when a block carries no usable annotation."""
    pass


class BlockOptions(BaseModel):
    """Typed view of the recognized annotation options.

    Custom keys are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    extract: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    group: Optional[str] = None
    wrap: WrapPair = EMPTY_WRAP

    @field_validator("wrap", mode="before")
    @classmethod
    def formalize_wrap(cls, value: Any) -> WrapPair:
        return normalize_wrap(value)

    @property
    def is_extraction(self) -> bool:
        return self.extract is not None

    @property
    def label(self) -> Optional[str]:
        """Display name, falling back to the extract path."""
        return self.name if self.name is not None else self.extract


def parse_annotation(
    annotation: str,
    defaults: Union[ProcessorConfig, Mapping, None] = None,
) -> Dict[str, Any]:
    """Parse annotation text into an ordered option map.

    Args:
        annotation: Annotation text, with or without the comment delimiters
        defaults: Configuration providing the fallback ``wrap``

    Returns:
        Dictionary of options in annotation order; ``wrap`` is always a
        normalized WrapPair

    Example:
        >>> opts = parse_annotation("extract:a.html name:Foo category:Bar")
        >>> opts['name'], opts['category']
        ('Foo', 'Bar')
        >>> opts['wrap']
        WrapPair(before='', after='')
    """
    text = _COMMENT_CLOSE.sub('', _COMMENT_OPEN.sub('', annotation))

    opts: Dict[str, Any] = {}
    for key, chars in _scan(text):
        if key is None:
            logger.debug(f"Dropping annotation text without a key: {_join(_trim(chars))!r}")
            continue
        opts[key] = _value(chars, split=key not in SCALAR_KEYS)

    opts["wrap"] = normalize_wrap(opts.get("wrap") or _default_wrap(defaults))

    return opts


def split_block(src: str) -> Tuple[str, str]:
    """Split a raw block into its annotation text and body.

    Args:
        src: Raw block text starting with the annotation comment

    Returns:
        Tuple of (annotation text without delimiters, text after the comment)

    Raises:
        AnnotationError: If the block has no complete ``<!-- ... -->`` comment
    """
    match = _BLOCK_ANNOTATION.search(src)

    if not match:
        preview = src.strip()[:60]
        raise AnnotationError(f"No annotation comment found in block: {preview!r}")

    return match.group(1), src[match.end():]


def _default_wrap(defaults: Union[ProcessorConfig, Mapping, None]) -> Any:
    if defaults is None:
        return EMPTY_WRAP
    if isinstance(defaults, Mapping):
        return defaults.get("wrap", EMPTY_WRAP)
    return defaults.wrap


def _scan(text: str) -> List[Tuple[Optional[str], List[_Char]]]:
    """Tokenize annotation text into (key, characters) pairs.

    Text before the first key is returned with a ``None`` key.
    """
    tokens: List[Tuple[Optional[str], List[_Char]]] = []
    key: Optional[str] = None
    chars: List[_Char] = []
    at_boundary = True
    i = 0
    n = len(text)

    while i < n:
        if at_boundary:
            match = _KEY.match(text, i)
            if match:
                if key is not None or _trim(chars):
                    tokens.append((key, chars))
                key = match.group(0)[:-1]
                chars = []
                at_boundary = False
                i = match.end()
                continue

        ch = text[i]
        if ch == '\\' and i + 1 < n:
            chars.append((text[i + 1], True))
            at_boundary = False
            i += 2
            continue

        chars.append((ch, False))
        at_boundary = ch.isspace()
        i += 1

    if key is not None or _trim(chars):
        tokens.append((key, chars))

    return tokens


def _trim(chars: List[_Char]) -> List[_Char]:
    """Strip unescaped whitespace from both ends."""
    start, end = 0, len(chars)
    while start < end and not chars[start][1] and chars[start][0].isspace():
        start += 1
    while end > start and not chars[end - 1][1] and chars[end - 1][0].isspace():
        end -= 1
    return chars[start:end]


def _join(chars: List[_Char]) -> str:
    return ''.join(ch for ch, _ in chars)


def _value(chars: List[_Char], split: bool) -> Union[str, List[str]]:
    chars = _trim(chars)
    if not split:
        return _join(chars)

    parts: List[str] = []
    current: List[str] = []
    for ch, escaped in chars:
        if ch == ':' and not escaped:
            parts.append(''.join(current))
            current = []
        else:
            current.append(ch)
    parts.append(''.join(current))

    return parts if len(parts) > 1 else parts[0]


if __name__ == "__main__":
    test_annotation = '<!-- extract:content/element.html name:Button wrap:<div class="demo">:</div> -->'

    options = parse_annotation(test_annotation)
    block = BlockOptions.model_validate(options)
    print("✓ Annotation parsed successfully:")
    print(f"  Extract: {block.extract}")
    print(f"  Name: {block.label}")
    print(f"  Wrap: {block.wrap}")
