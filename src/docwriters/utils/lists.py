#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/utils/lists.py
"""Ordered-list numbering helpers shared by the writers."""

from __future__ import annotations

from itertools import count, islice
from typing import Iterator

from docwriters.constants import ListNumberDelim, ListNumberStyle

_ROMAN_NUMERALS = (
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
)


def to_roman(number: int) -> str:
    """Lowercase roman numeral for a positive integer; other values pass through as digits."""
    if number <= 0 or number >= 4000:
        return str(number)
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        while number >= value:
            parts.append(numeral)
            number -= value
    return "".join(parts)


def to_alpha(number: int) -> str:
    """Lowercase letter sequence (a, b, ..., z, aa, ab, ...) for a positive integer."""
    if number <= 0:
        return str(number)
    letters = []
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters.append(chr(ord("a") + remainder))
    return "".join(reversed(letters))


def format_list_number(number: int, style: ListNumberStyle) -> str:
    """Format a single item number in the given numbering style."""
    if style == "lower_roman":
        return to_roman(number)
    if style == "upper_roman":
        return to_roman(number).upper()
    if style == "lower_alpha":
        return to_alpha(number)
    if style == "upper_alpha":
        return to_alpha(number).upper()
    return str(number)


def _iter_markers(start: int, style: ListNumberStyle, delimiter: ListNumberDelim) -> Iterator[str]:
    for number in count(start):
        label = format_list_number(number, style)
        if delimiter == "one_paren":
            yield f"{label})"
        elif delimiter == "two_parens":
            yield f"({label})"
        else:
            yield f"{label}."


def ordered_list_markers(start: int, style: ListNumberStyle, delimiter: ListNumberDelim, n: int) -> list[str]:
    """Markers for the first ``n`` items of an ordered list.

    Parameters
    ----------
    start : int
        Number of the first item
    style : ListNumberStyle
        Numbering style
    delimiter : ListNumberDelim
        Delimiter; "default" behaves like "period"
    n : int
        Number of markers to produce

    Returns
    -------
    list of str
        Markers such as ``"3."``, ``"iv)"`` or ``"(B)"``

    Examples
    --------
        >>> ordered_list_markers(3, "lower_roman", "two_parens", 2)
        ['(iii)', '(iv)']

    """
    return list(islice(_iter_markers(start, style, delimiter), n))


def list_style_css(style: ListNumberStyle) -> str:
    """CSS ``list-style-type`` name for a numbering style (``lower_roman`` -> ``lower-roman``)."""
    return style.replace("_", "-")
