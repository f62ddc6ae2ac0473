"""
Inventory module for style-guide pattern extraction.

This module provides functionality for:
- Parsing extraction annotations from HTML comments
- Normalizing the indentation of extracted markup
- Deriving partial, view and template representations
- Assigning content-derived identifiers to catalog entries

Annotation format (in markup):
    <!-- extract:components/button.html name:Button category:Forms group:Actions wrap:<div class="demo">:</div> -->
    <button class="btn">Click</button>
    <!-- endextract -->

Usage:
    from inventory import CatalogEntry, extract_entries

    # Process a single block
    entry = CatalogEntry()
    entry.parse_data(raw_block, {"indent": "  "})

    # Process every block in a document
    entries = extract_entries(Path("index.html").read_text(), origin="index.html")
"""

from .wrap import WrapPair, normalize_wrap
from .config import ProcessorConfig, default_resources, get_default_config, merge_config
from .annotation_parser import AnnotationError, BlockOptions, parse_annotation, split_block
from .options_serializer import serialize_options
from .identifier import identify
from .entry import CatalogEntry, EntryField
from .block_processor import process_block
from .block_extractor import extract_entries, find_blocks

__all__ = [
    "WrapPair",
    "normalize_wrap",
    "ProcessorConfig",
    "default_resources",
    "get_default_config",
    "merge_config",
    "AnnotationError",
    "BlockOptions",
    "parse_annotation",
    "split_block",
    "serialize_options",
    "identify",
    "CatalogEntry",
    "EntryField",
    "process_block",
    "extract_entries",
    "find_blocks",
]

__version__ = "1.0.0"
