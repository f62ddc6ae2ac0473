"""
Processor configuration.

Defaults can be overridden through environment variables:
    INVENTORY_INDENT        - string replacing the first tab of each line
    INVENTORY_NO_CATEGORY   - category used when a block declares none

Both are read once, when this module is first imported; changing the
environment afterwards has no effect on a running process.
"""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .wrap import EMPTY_WRAP, WrapPair, normalize_wrap

# ============================================================================
# Configuration from environment variables
# ============================================================================

DEFAULT_INDENT = os.environ.get("INVENTORY_INDENT", "    ")
NO_CATEGORY = os.environ.get("INVENTORY_NO_CATEGORY", "No category")

# Placeholder inside template wraps replaced by the serialized options
WRAP_DATA_PLACEHOLDER = "{{wrapData}}"

_DEFAULT_RESOURCES: Dict[str, Any] = {
    "classnames": {
        "root": "",
        "body": "",
    },
    "meta": [],
    "scriptsFoot": {
        "files": [],
        "inline": [],
    },
    "scriptsHead": {
        "files": [],
        "inline": [],
    },
    "stylesHead": {
        "files": [],
        "inline": [],
    },
}


def default_resources() -> Dict[str, Any]:
    """Return a fresh copy of the default resources record."""
    return copy.deepcopy(_DEFAULT_RESOURCES)


class ProcessorConfig(BaseModel):
    """Options accepted by the block processor."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    indent: str = Field(DEFAULT_INDENT, description="Replacement for the first tab of each line.")
    origin: str = Field("", description="Where the blocks came from (passed through).")
    resources: Dict[str, Any] = Field(default_factory=default_resources)
    wrap: WrapPair = Field(EMPTY_WRAP, description="Default wrap for blocks without a wrap option.")
    template_wrap: WrapPair = Field(EMPTY_WRAP, alias="templateWrap")

    @field_validator("indent", mode="before")
    @classmethod
    def none_indent(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("wrap", "template_wrap", mode="before")
    @classmethod
    def formalize_wrap(cls, value: Any) -> WrapPair:
        return normalize_wrap(value)


def get_default_config() -> ProcessorConfig:
    """Default options; a new object on every call so callers never share state."""
    return ProcessorConfig()


def merge_config(overrides: Union[ProcessorConfig, Mapping, None] = None) -> ProcessorConfig:
    """Merge caller overrides onto a fresh default configuration.

    Args:
        overrides: A ProcessorConfig, a mapping of option names
            (``templateWrap`` and ``template_wrap`` are both accepted) or None

    Returns:
        New ProcessorConfig; ``overrides`` is never mutated

    Raises:
        pydantic.ValidationError: If an override has the wrong type
    """
    if overrides is None:
        return get_default_config()

    if isinstance(overrides, ProcessorConfig):
        return overrides.model_copy(deep=True)

    if not isinstance(overrides, Mapping):
        raise TypeError(f"Configuration must be a mapping, got: {type(overrides).__name__}")

    data = dict(get_default_config())
    for key, value in overrides.items():
        if key == "templateWrap":
            key = "template_wrap"
        data[key] = copy.deepcopy(value)

    return ProcessorConfig.model_validate(data)
