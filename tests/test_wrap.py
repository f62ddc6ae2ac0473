"""Tests for inventory/wrap.py"""

import pytest

from inventory.wrap import WrapPair, normalize_wrap


def test_string_wraps_both_sides():
    assert normalize_wrap("<hr>") == WrapPair(before="<hr>", after="<hr>")


def test_number_wraps_both_sides():
    assert normalize_wrap(3) == WrapPair(before="3", after="3")


def test_pair_sequence():
    assert normalize_wrap(["<div>", "</div>"]) == WrapPair(before="<div>", after="</div>")
    assert normalize_wrap(("<div>", "</div>", "ignored")) == WrapPair(before="<div>", after="</div>")


def test_single_item_sequence_repeats_before():
    assert normalize_wrap(["<br>"]) == WrapPair(before="<br>", after="<br>")


def test_record_uses_first_and_second_values():
    assert normalize_wrap({"open": "<section>", "close": "</section>"}) == WrapPair(
        before="<section>", after="</section>"
    )


def test_record_with_one_value_repeats_before():
    assert normalize_wrap({"before": "<i>"}) == WrapPair(before="<i>", after="<i>")


def test_wrap_pair_passes_through():
    pair = WrapPair(before="<a>", after="</a>")
    assert normalize_wrap(pair) is pair


@pytest.mark.parametrize("value", [None, "", [], (), {}, True, object()])
def test_unrecognized_shapes_give_empty_pair(value):
    assert normalize_wrap(value) == WrapPair(before="", after="")


def test_empty_before_means_no_wrap():
    assert not WrapPair()
    assert not WrapPair(before="", after="</div>")
    assert WrapPair(before="<div>", after="")
