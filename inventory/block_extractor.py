"""
Find extraction blocks in a markup document.

A block starts with any annotation holding an ``extract`` key and ends
with an ``endextract`` comment, which may carry a trailing note:

    <!-- category:Forms extract:forms/input.html -->
    <input type="text">
    <!-- endextract forms/input.html -->
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import List, Union

from .block_processor import END_MARKER_PATTERN, process_block
from .config import ProcessorConfig, merge_config
from .entry import CatalogEntry

logger = logging.getLogger(__name__)

# any comment holding an extract key, in whatever position
_START = r'<!--(?:(?!-->).)*?(?<![^\s-])extract:'

_START_PATTERN = re.compile(_START, re.DOTALL | re.IGNORECASE)
_BLOCK_PATTERN = re.compile(
    _START + r'(?:(?!-->).)*-->'
    r'(?:(?!' + _START + r').)*?'
    + END_MARKER_PATTERN.pattern,
    re.DOTALL | re.IGNORECASE,
)


def find_blocks(document: str) -> List[str]:
    """Return the raw text of every extraction block, in document order.

    Start markers without a matching end marker are skipped.
    """
    blocks = [match.group(0) for match in _BLOCK_PATTERN.finditer(document)]

    unterminated = len(_START_PATTERN.findall(document)) - len(blocks)
    if unterminated > 0:
        logger.warning(f"Skipping {unterminated} extract block(s) without an endextract marker")

    return blocks


def extract_entries(
    document: str,
    config: Union[ProcessorConfig, Mapping, None] = None,
    origin: str = "",
) -> List[CatalogEntry]:
    """Build catalog entries for all blocks of a document.

    Args:
        document: Full markup content
        config: Processor options shared by all blocks
        origin: Source name used when ``config`` has no origin

    Returns:
        List of populated CatalogEntry objects

    Raises:
        AnnotationError: If a block annotation cannot be read

    Example:
        >>> doc = '''<body>
        ... <!-- extract:button.html name:Button -->
        ... <button>Go</button>
        ... <!-- endextract -->
        ... </body>'''
        >>> [entry.name for entry in extract_entries(doc)]
        ['Button']
    """
    opts = merge_config(config)
    if not opts.origin:
        opts.origin = origin

    entries = []
    for block in find_blocks(document):
        entry = CatalogEntry()
        if process_block(entry, block, opts):
            entries.append(entry)

    logger.info(f"Extracted {len(entries)} entries from {opts.origin or 'document'}")

    return entries
