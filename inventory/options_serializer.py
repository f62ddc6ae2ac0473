"""
Serialize block options into HTML data attributes.

The result is embedded in template wraps via the ``{{wrapData}}``
placeholder, e.g.:

    data-extract="a.html" data-name="Foo" data-wrap-before="<div>" data-wrap-after="</div>"
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Iterator, Tuple

from .wrap import normalize_wrap

_QUOTES = "\"'"


def serialize_options(options: Any) -> str:
    """Render an option map as space-joined ``data-<key>="<value>"`` pairs.

    Args:
        options: Option map as returned by ``parse_annotation``

    Returns:
        Attribute string; empty when ``options`` is not a mapping

    Example:
        >>> serialize_options({'extract': 'a.html', 'wrap': {'before': '<b>', 'after': '</b>'}})
        'data-extract="a.html" data-wrap-before="<b>" data-wrap-after="</b>"'
    """
    if not isinstance(options, Mapping):
        return ""

    return " ".join(
        f'data-{key}="{_attribute_value(value)}"'
        for key, value in _expand(options)
        if not callable(value)
    )


def _expand(options: Mapping) -> Iterator[Tuple[str, Any]]:
    for key, value in options.items():
        if key == "wrap":
            wrap = normalize_wrap(value)
            yield "wrap-before", wrap.before
            yield "wrap-after", wrap.after
        else:
            yield str(key), value


def _attribute_value(value: Any) -> str:
    text = value if isinstance(value, str) else json.dumps(value, default=str)
    return text.strip(_QUOTES).replace('"', "'")
