#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
normalize_spaces : Collapse and trim Space nodes in an inline run
split_on_line_breaks : Split an inline run into lines at LineBreak nodes
is_plain_or_paragraph : Test for an inline-run block

Examples
--------
    >>> from docwriters.ast import Space, Str
    >>> normalize_spaces([Space(), Str("Hello"), Space(), Space(), Str("world")])
    [Str(content='Hello'), Space(), Str(content='world')]

"""

from __future__ import annotations

from docwriters.ast.nodes import (
    Inline,
    LineBreak,
    Node,
    Paragraph,
    Plain,
    Space,
    Str,
)


def _is_space_or_empty(node: Inline) -> bool:
    return isinstance(node, Space) or (isinstance(node, Str) and node.content == "")


def normalize_spaces(inlines: list[Inline]) -> list[Inline]:
    """Drop leading/trailing spaces and collapse runs of spaces.

    Empty ``Str`` nodes are removed as well.

    Parameters
    ----------
    inlines : list of Inline
        Inline run

    Returns
    -------
    list of Inline
        Normalized copy of the run

    """
    result: list[Inline] = []
    pending_space = False
    for node in inlines:
        if _is_space_or_empty(node):
            if isinstance(node, Space) and result:
                pending_space = True
            continue
        if pending_space:
            result.append(Space())
            pending_space = False
        result.append(node)
    return result


def split_on_line_breaks(inlines: list[Inline]) -> list[list[Inline]]:
    """Split an inline run into lines at LineBreak nodes.

    Consecutive breaks do not produce empty lines and a trailing break does
    not produce a trailing empty line.

    Parameters
    ----------
    inlines : list of Inline
        Inline run

    Returns
    -------
    list of list of Inline
        The runs between breaks

    """
    lines: list[list[Inline]] = []
    current: list[Inline] = []
    started = False
    for node in inlines:
        if isinstance(node, LineBreak):
            if started:
                lines.append(current)
                current = []
                started = False
            continue
        current.append(node)
        started = True
    if started:
        lines.append(current)
    return lines


def is_plain_or_paragraph(node: Node) -> bool:
    """Return True for Plain and Paragraph blocks."""
    return isinstance(node, (Plain, Paragraph))
