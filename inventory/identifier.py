"""
Content identifiers for inventory entries.

Identifiers are the first ``ID_LENGTH`` hex characters of the SHA-1 digest
of the text with all whitespace removed, so re-indenting a block keeps its id.
"""

from __future__ import annotations

import hashlib
import re

ID_LENGTH = 8

_WHITESPACE = re.compile(r'\s+')


def identify(text: str) -> str:
    """Create a short content hash.

    Example:
        >>> identify("<p>hi</p>") == identify("  <p>hi</p>\\n")
        True
        >>> len(identify(""))
        8
    """
    stripped = _WHITESPACE.sub('', text)
    return hashlib.sha1(stripped.encode('utf-8')).hexdigest()[:ID_LENGTH]
