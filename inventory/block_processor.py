"""
Block processor for inventory entries.

Turns one raw annotated block into a fully populated CatalogEntry:

    <!-- extract:components/button.html name:Button wrap:<div class="demo">:</div> -->
        <button class="btn">
            Click
        </button>
    <!-- endextract -->

Steps:
1. Remove the end marker and split the annotation from the body
2. Parse options (blocks without ``extract`` are skipped)
3. Normalize indentation: trim, replace tabs, crop to the common indent
4. Derive partial, view and template
5. Hash the raw block and the view
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from functools import reduce
from typing import List, Union

from .annotation_parser import BlockOptions, parse_annotation, split_block
from .config import WRAP_DATA_PLACEHOLDER, ProcessorConfig, merge_config
from .entry import CatalogEntry, EntryField
from .identifier import identify
from .options_serializer import serialize_options
from .whitespace import EMPTY_LINE_WIDTH, dedent, indent, indent_tabs, min_width, whitespace_width
from .wrap import WrapPair

logger = logging.getLogger(__name__)

END_MARKER_PATTERN = re.compile(r'<!--\s*endextract(?:(?!-->).)*-->', re.DOTALL | re.IGNORECASE)


def process_block(
    entry: CatalogEntry,
    src: str,
    config: Union[ProcessorConfig, Mapping, None] = None,
) -> bool:
    """Populate ``entry`` from one raw annotated block.

    Args:
        entry: Entry to update in place; its category and group act as
            defaults when the annotation declares none
        src: Entire raw block including the annotation comment
        config: Processor options merged onto the defaults

    Returns:
        True if the entry was populated, False if the block has no
        ``extract`` option (the entry is left untouched)

    Raises:
        AnnotationError: If the block has no annotation comment

    Example:
        >>> entry = CatalogEntry()
        >>> entry.parse_data("<!-- extract:a.html -->\\n    <p>hi</p>\\n<!-- endextract -->")
        True
        >>> entry.lines
        ['<p>hi</p>']
    """
    opts = merge_config(config)

    src = END_MARKER_PATTERN.sub('', src)
    annotation, body = split_block(src)

    options = parse_annotation(annotation, opts)
    block = BlockOptions.model_validate(options)

    if not block.is_extraction:
        logger.debug(f"Skipping block without extract option: {annotation.strip()[:60]!r}")
        return False

    name = block.label
    category = block.category if block.category is not None else entry.category
    group = block.group if block.group is not None else entry.group

    lines = normalize_lines(body, opts.indent)
    options_data = serialize_options(options)

    partial = os.linesep.join(lines)
    view = render_view(lines, block.wrap)
    template = render_template(lines, opts.template_wrap, options_data)

    updates = {
        EntryField.CATEGORY: category,
        EntryField.GROUP: group,
        EntryField.ID: identify(src),
        EntryField.LINES: lines,
        EntryField.NAME: name,
        EntryField.OPTIONS: options,
        EntryField.OPTIONS_DATA: options_data,
        EntryField.ORIGIN: opts.origin,
        EntryField.PARTIAL: partial,
        EntryField.RESOURCES: opts.resources,
        EntryField.TEMPLATE: template,
        EntryField.VIEW: view,
        EntryField.VIEW_ID: identify(view),
    }
    for prop, value in updates.items():
        entry.set_property(prop, value)

    logger.debug(f"Extracted '{name}' (id: {entry.id}, {len(lines)} lines)")

    return True


def normalize_lines(body: str, indent_string: str = "") -> List[str]:
    """Split a block body into lines cropped to their common indentation.

    Args:
        body: Text between the annotation and the end marker
        indent_string: Replacement for the first tab of each line

    Returns:
        List of lines with trailing whitespace removed and the common
        leading whitespace cropped
    """
    lines = [line.rstrip() for line in body.split('\n')]

    # drop blank lines around the block
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    lines = [indent_tabs(line, indent_string) for line in lines]
    crop = reduce(min_width, map(whitespace_width, lines), EMPTY_LINE_WIDTH)

    return dedent(lines, crop)


def render_view(lines: List[str], wrap: WrapPair) -> str:
    """Lines wrapped in context, or plain lines when there is no wrap."""
    if not wrap:
        return os.linesep.join(lines)

    wrapped = ['', wrap.before, ''] + indent(lines) + ['', wrap.after]
    return os.linesep.join(wrapped)


def render_template(lines: List[str], template_wrap: WrapPair, options_data: str) -> str:
    """Lines surrounded by the template wrap with ``{{wrapData}}`` substituted."""
    before = template_wrap.before.replace(WRAP_DATA_PLACEHOLDER, options_data)
    after = template_wrap.after.replace(WRAP_DATA_PLACEHOLDER, options_data)

    parts = ([before] if before else []) + lines + ([after] if after else [])
    return os.linesep.join(parts)
