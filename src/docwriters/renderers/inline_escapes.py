#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/renderers/inline_escapes.py
r"""Escape separators between adjacent reStructuredText inline constructs.

RST inline markup is only recognised when the start-string follows
whitespace or certain punctuation, and the end-string precedes whitespace or
certain punctuation. ``**a**b`` is therefore not bold. Writing an escaped
space (``\ ``) between the two parts renders as nothing but lets the parser
see the markup: ``**a**\ b``.

:func:`insert_escapes` adds that separator wherever concatenating two
neighbouring inline nodes would hide markup.

"""

from __future__ import annotations

from docwriters.ast.nodes import (
    Code,
    Emphasis,
    Image,
    Inline,
    LineBreak,
    Link,
    Math,
    RawInline,
    SmallCaps,
    Space,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
)
from docwriters.constants import RST_OK_AFTER_COMPLEX, RST_OK_BEFORE_COMPLEX, RST_SURROUND_PAIRS

ESCAPE_SEPARATOR = RawInline(format="rst", content="\\ ")

_COMPLEX_TYPES = (Emphasis, Strong, SmallCaps, Strikeout, Superscript, Subscript, Link, Image, Code, Math)


def is_complex(node: Inline) -> bool:
    """Return True for inlines rendered with delimiters that need a word boundary."""
    return isinstance(node, _COMPLEX_TYPES)


def _is_separator(node: Inline) -> bool:
    return node == ESCAPE_SEPARATOR


def ok_after_complex(node: Inline) -> bool:
    """Return True if ``node`` may directly follow a complex inline."""
    if isinstance(node, (Space, LineBreak)) or _is_separator(node):
        return True
    if isinstance(node, Str) and node.content:
        first = node.content[0]
        return first.isspace() or first in RST_OK_AFTER_COMPLEX
    return False


def ok_before_complex(node: Inline) -> bool:
    """Return True if ``node`` may directly precede a complex inline."""
    if isinstance(node, (Space, LineBreak)) or _is_separator(node):
        return True
    if isinstance(node, Str) and node.content:
        last = node.content[-1]
        return last.isspace() or last in RST_OK_BEFORE_COMPLEX
    return False


def _surrounds(before: Inline, after: Inline) -> bool:
    if not (isinstance(before, Str) and isinstance(after, Str)):
        return False
    if not (before.content and after.content):
        return False
    return (before.content[-1], after.content[0]) in RST_SURROUND_PAIRS


def insert_escapes(inlines: list[Inline]) -> list[Inline]:
    r"""Insert :data:`ESCAPE_SEPARATOR` where adjacent inlines would merge.

    A separator goes

    * after a complex inline that is followed by something other than a
      space, line break or trailing punctuation;
    * before a complex inline that follows something other than a space,
      line break or leading punctuation;
    * after a complex inline quoted by a matching pair such as ``'`` ... ``'``
      or ``[`` ... ``]`` split across the neighbouring text runs.

    Parameters
    ----------
    inlines : list of Inline
        Inline run to scan; not modified

    Returns
    -------
    list of Inline
        New run, at least as long as the input. Running the function again on
        its own output returns an equal list.

    Examples
    --------
        >>> insert_escapes([Strong([Str("a")]), Str("b")])
        [Strong(content=[Str(content='a')]), RawInline(format='rst', content='\\ '), Str(content='b')]

    """
    result: list[Inline] = []
    i = 0
    count = len(inlines)
    while i < count:
        current = inlines[i]
        if i + 2 < count and is_complex(inlines[i + 1]) and _surrounds(current, inlines[i + 2]):
            result.extend((current, inlines[i + 1], ESCAPE_SEPARATOR))
            i += 2
            continue
        if i + 1 < count:
            following = inlines[i + 1]
            if (is_complex(current) and not ok_after_complex(following)) or (
                is_complex(following) and not ok_before_complex(current)
            ):
                result.extend((current, ESCAPE_SEPARATOR))
                i += 1
                continue
        result.append(current)
        i += 1
    return result
