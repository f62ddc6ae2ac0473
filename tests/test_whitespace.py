"""Tests for inventory/whitespace.py"""

from functools import reduce

from inventory.whitespace import (
    EMPTY_LINE_WIDTH,
    dedent,
    indent,
    indent_tabs,
    min_width,
    whitespace_width,
)


def test_indent_tabs_replaces_only_first_tab():
    assert indent_tabs("\t\t<p>", "  ") == "  \t<p>"


def test_indent_tabs_without_indent_removes_tab():
    assert indent_tabs("\t<p>", None) == "<p>"
    assert indent_tabs("\t<p>") == "<p>"


def test_whitespace_width_counts_leading_whitespace():
    assert whitespace_width("    <p>hi</p>") == 4
    assert whitespace_width("<p>") == 0
    assert whitespace_width(" \t x") == 3


def test_whitespace_width_of_empty_line_is_sentinel():
    assert whitespace_width("") == EMPTY_LINE_WIDTH == 9999


def test_min_width():
    assert min_width(4, 6) == 4
    assert min_width(6, 4) == 4
    assert min_width(3, 3) == 3


def test_crop_to_common_indentation():
    """Lines indented 4 and 6 are cropped by 4."""
    lines = ["    <p>hi</p>", "      <span>x</span>"]
    crop = reduce(min_width, map(whitespace_width, lines))

    assert crop == 4
    assert dedent(lines, crop) == ["<p>hi</p>", "  <span>x</span>"]


def test_dedent_leaves_a_line_without_indentation():
    lines = ["      <ul>", "", "        <li>a</li>", "      </ul>"]
    crop = reduce(min_width, map(whitespace_width, lines))
    cropped = dedent(lines, crop)

    assert any(whitespace_width(line) == 0 for line in cropped if line)
    assert cropped == ["<ul>", "", "  <li>a</li>", "</ul>"]


def test_dedent_is_a_fixed_column_crop():
    assert dedent(["  ab", "abcd"], 2) == ["ab", "cd"]


def test_indent_prefixes_every_line():
    assert indent(["<p>", ""]) == ["    <p>", "    "]
    assert indent(["<p>"], "\t") == ["\t<p>"]
