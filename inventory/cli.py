#!/usr/bin/env python3
"""
Extract inventory entries from markup files.

This script:
1. Reads markup files (.html)
2. Finds every extract/endextract block
3. Builds a catalog entry per block
4. Writes the entries as JSON

Usage:
    inventory-extract styleguide/index.html
    inventory-extract pages/*.html --wrap '<div class="demo">:</div>' --output inventory.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .annotation_parser import AnnotationError
from .block_extractor import extract_entries
from .config import DEFAULT_INDENT, merge_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inventory-extract",
        description="Extract annotated markup blocks into inventory entries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Print entries of one file
    inventory-extract styleguide/index.html

    # Wrap every view that has no wrap option of its own
    inventory-extract index.html --wrap '<div class="demo">:</div>'

    # Template wrap carrying the block options as data attributes
    inventory-extract index.html --template-before '<section {{wrapData}}>' --template-after '</section>'
        """
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Markup files to process"
    )

    parser.add_argument(
        "--indent",
        default=DEFAULT_INDENT,
        help="Replacement for the first tab of each line (default: four spaces)"
    )

    parser.add_argument(
        "--wrap",
        help="Default wrap as BEFORE:AFTER (or a single value used on both sides)"
    )

    parser.add_argument(
        "--template-before",
        default="",
        help="Markup placed before each template ({{wrapData}} is replaced by the options)"
    )

    parser.add_argument(
        "--template-after",
        default="",
        help="Markup placed after each template (default: same as --template-before)"
    )

    parser.add_argument(
        "--output",
        type=Path,
        help="Write entries to this JSON file instead of stdout"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    overrides = {
        "indent": args.indent,
        "templateWrap": {"before": args.template_before, "after": args.template_after},
    }
    if args.wrap:
        overrides["wrap"] = args.wrap.split(":", 1) if ":" in args.wrap else args.wrap

    try:
        base_config = merge_config(overrides)
    except ValidationError as e:
        print(f"✗ Invalid options: {e}", file=sys.stderr)
        return 2

    entries = []
    files_failed = 0

    for input_path in args.inputs:
        if not input_path.exists():
            print(f"✗ Error: File not found: {input_path}", file=sys.stderr)
            files_failed += 1
            continue

        config = base_config.model_copy(deep=True)
        config.origin = str(input_path)

        try:
            document = input_path.read_text(encoding='utf-8')
            file_entries = extract_entries(document, config)
        except AnnotationError as e:
            print(f"✗ {input_path}: annotation error: {e}", file=sys.stderr)
            files_failed += 1
            continue
        except (OSError, UnicodeDecodeError) as e:
            print(f"✗ {input_path}: {e}", file=sys.stderr)
            files_failed += 1
            continue

        if file_entries:
            print(f"✓ {input_path}: {len(file_entries)} entries", file=sys.stderr)
        else:
            print(f"⚠ {input_path}: no extract blocks found", file=sys.stderr)

        entries.extend(entry.to_dict() for entry in file_entries)

    output = json.dumps(entries, indent=2, ensure_ascii=False)

    if args.output:
        args.output.write_text(output + "\n", encoding='utf-8')
        print(f"✓ Wrote {len(entries)} entries to {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0 if files_failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
