"""
Catalog entry for one extracted block.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from .config import NO_CATEGORY, default_resources

if TYPE_CHECKING:
    from .config import ProcessorConfig


class EntryField(str, Enum):
    """Fields that may be set on a CatalogEntry."""
    CATEGORY = "category"
    GROUP = "group"
    NAME = "name"
    ID = "id"
    VIEW_ID = "view_id"
    LINES = "lines"
    PARTIAL = "partial"
    VIEW = "view"
    TEMPLATE = "template"
    OPTIONS = "options"
    OPTIONS_DATA = "options_data"
    ORIGIN = "origin"
    RESOURCES = "resources"
    USAGE = "usage"


_FIELD_NAMES = frozenset(f.value for f in EntryField)


@dataclass
class CatalogEntry:
    """Represents one catalog record built from an annotated block."""
    category: str = NO_CATEGORY
    group: str = ""
    name: str = ""
    id: str = ""
    view_id: str = ""
    lines: List[str] = field(default_factory=list)
    partial: str = ""
    view: str = ""
    template: str = ""
    options: Dict[str, Any] = field(default_factory=dict)
    options_data: str = ""
    origin: str = ""
    resources: Dict[str, Any] = field(default_factory=default_resources)
    usage: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping] = None) -> "CatalogEntry":
        """Create an entry from a record, ignoring unknown keys."""
        data = data or {}
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def parse_data(self, src: str, config: Union["ProcessorConfig", Mapping, None] = None) -> bool:
        """Populate this entry from a raw annotated block.

        See ``inventory.block_processor.process_block``.
        """
        from .block_processor import process_block

        return process_block(self, src, config)

    def set_property(self, prop: Union[str, EntryField], value: Any) -> bool:
        """Set a field if ``prop`` names a declared field.

        Args:
            prop: Field name or EntryField
            value: New value (not type checked)

        Returns:
            True if the field was set, False otherwise

        Example:
            >>> entry = CatalogEntry()
            >>> entry.set_property('category', 'Forms')
            True
            >>> entry.set_property('doesNotExist', 1)
            False
        """
        if isinstance(prop, EntryField):
            prop = prop.value
        elif not isinstance(prop, str):
            return False

        if prop not in _FIELD_NAMES:
            return False

        setattr(self, prop, value)
        return True

    def set_category(self, value: str) -> None:
        self._set_typed(EntryField.CATEGORY, value, str)

    def set_group(self, value: str) -> None:
        self._set_typed(EntryField.GROUP, value, str)

    def set_name(self, value: str) -> None:
        self._set_typed(EntryField.NAME, value, str)

    def set_origin(self, value: str) -> None:
        self._set_typed(EntryField.ORIGIN, value, str)

    def set_resources(self, value: Dict[str, Any]) -> None:
        self._set_typed(EntryField.RESOURCES, value, dict)

    def set_usage(self, value: List[Any]) -> None:
        self._set_typed(EntryField.USAGE, value, list)

    def _set_typed(self, prop: EntryField, value: Any, expected: type) -> None:
        if not isinstance(value, expected):
            raise TypeError(
                f"'{prop.value}' must be {expected.__name__}, got: {type(value).__name__}"
            )
        setattr(self, prop.value, value)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary suitable for JSON output."""
        return asdict(self)
