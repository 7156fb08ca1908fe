#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_lists.py
"""Unit tests for ordered list numbering helpers."""

import pytest

from docwriters.utils.lists import format_list_number, list_style_css, ordered_list_markers, to_alpha, to_roman


@pytest.mark.unit
class TestNumbering:
    """Tests for numeral conversion."""

    @pytest.mark.parametrize(
        "number,expected",
        [(1, "i"), (4, "iv"), (9, "ix"), (14, "xiv"), (40, "xl"), (1994, "mcmxciv"), (0, "0"), (4000, "4000")],
    )
    def test_to_roman(self, number, expected) -> None:
        assert to_roman(number) == expected

    @pytest.mark.parametrize("number,expected", [(1, "a"), (26, "z"), (27, "aa"), (52, "az"), (53, "ba"), (0, "0")])
    def test_to_alpha(self, number, expected) -> None:
        assert to_alpha(number) == expected

    @pytest.mark.parametrize(
        "style,expected",
        [
            ("default", "3"),
            ("decimal", "3"),
            ("example", "3"),
            ("lower_roman", "iii"),
            ("upper_roman", "III"),
            ("lower_alpha", "c"),
            ("upper_alpha", "C"),
        ],
    )
    def test_format_list_number(self, style, expected) -> None:
        assert format_list_number(3, style) == expected


@pytest.mark.unit
class TestMarkers:
    """Tests for marker sequences."""

    def test_period(self) -> None:
        assert ordered_list_markers(1, "decimal", "period", 3) == ["1.", "2.", "3."]

    def test_default_delimiter_is_period(self) -> None:
        assert ordered_list_markers(9, "default", "default", 2) == ["9.", "10."]

    def test_one_paren(self) -> None:
        assert ordered_list_markers(3, "lower_roman", "one_paren", 2) == ["iii)", "iv)"]

    def test_two_parens(self) -> None:
        assert ordered_list_markers(1, "upper_alpha", "two_parens", 2) == ["(A)", "(B)"]

    def test_zero_items(self) -> None:
        assert ordered_list_markers(1, "decimal", "period", 0) == []

    def test_list_style_css(self) -> None:
        assert list_style_css("lower_roman") == "lower-roman"
        assert list_style_css("decimal") == "decimal"
