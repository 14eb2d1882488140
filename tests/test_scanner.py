"""Tests for boundary scanning."""

from __future__ import annotations

from sentencekit.text.punctuation import FIRST_PASS_SEPARATORS, STRICT_SEPARATORS
from sentencekit.text.scanner import (
    NOT_FOUND,
    is_boundary,
    last_boundary,
    next_split_point,
)


class TestIsBoundary:
    def test_terminal_mark(self) -> None:
        assert is_boundary("Hi.", 2, STRICT_SEPARATORS)

    def test_ordinal_period_skipped(self) -> None:
        assert not is_boundary("1. Item", 1, STRICT_SEPARATORS)

    def test_comma_depends_on_set(self) -> None:
        assert is_boundary("a, b", 1, FIRST_PASS_SEPARATORS)
        assert not is_boundary("a, b", 1, STRICT_SEPARATORS)


class TestLastBoundary:
    def test_finds_last_mark(self) -> None:
        assert last_boundary("One. Two! Three", STRICT_SEPARATORS) == 8

    def test_skips_trailing_ordinal(self) -> None:
        text = "Hello. World 2."
        assert last_boundary(text, STRICT_SEPARATORS) == 5

    def test_not_found(self) -> None:
        assert last_boundary("no marks here", STRICT_SEPARATORS) == NOT_FOUND
        assert last_boundary("", STRICT_SEPARATORS) == NOT_FOUND

    def test_comma_only_in_first_pass(self) -> None:
        assert last_boundary("a, b", FIRST_PASS_SEPARATORS) == 1
        assert last_boundary("a, b", STRICT_SEPARATORS) == NOT_FOUND

    def test_multibyte_indices(self) -> None:
        text = "你好。世界"
        assert last_boundary(text, STRICT_SEPARATORS) == 2


class TestNextSplitPoint:
    def test_first_boundary_in_window(self) -> None:
        text = "Hello world. Bye."
        assert next_split_point(text, 0, 100, STRICT_SEPARATORS) == 11
        assert next_split_point(text, 12, 100, STRICT_SEPARATORS) == 16

    def test_newline_before_list_item_forces_split(self) -> None:
        text = "1. First item\n2. Second item"
        assert next_split_point(text, 0, 200, STRICT_SEPARATORS) == text.index("\n")

    def test_newline_before_indented_list_item(self) -> None:
        text = "Intro line\n   3) third"
        assert next_split_point(text, 0, 200, STRICT_SEPARATORS) == 10

    def test_plain_newline_inside_window_is_passed_over(self) -> None:
        text = "Line one\nline two. Next"
        assert next_split_point(text, 0, 100, STRICT_SEPARATORS) == text.index(".")

    def test_ordinal_periods_are_not_split_points(self) -> None:
        text = "Pick 2. apples now!"
        assert next_split_point(text, 0, 100, STRICT_SEPARATORS) == len(text) - 1

    def test_falls_back_past_window(self) -> None:
        text = "abcdefghij klmno. pq"
        assert next_split_point(text, 0, 5, STRICT_SEPARATORS) == text.index(".")

    def test_newline_splits_past_window(self) -> None:
        text = "abc\ndef."
        assert next_split_point(text, 0, 2, STRICT_SEPARATORS) == 3

    def test_not_found(self) -> None:
        assert next_split_point("no boundary", 0, 4, STRICT_SEPARATORS) == NOT_FOUND

    def test_non_positive_window_means_unlimited(self) -> None:
        text = "Line one\nline two."
        assert next_split_point(text, 0, 0, STRICT_SEPARATORS) == len(text) - 1

    def test_comma_in_first_pass(self) -> None:
        text = "Hi, how are you?"
        assert next_split_point(text, 0, 50, FIRST_PASS_SEPARATORS) == 2
        assert next_split_point(text, 0, 50, STRICT_SEPARATORS) == len(text) - 1
