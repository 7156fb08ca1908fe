#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/layout.py
"""Layout primitives for composing wrapped, indented plain-text output.

A :class:`Doc` is an immutable sequence of layout elements. Documents are
combined with ``+`` (horizontal concatenation), :func:`vcat` (stacked on
separate lines) and :func:`vsep` (stacked with a blank line between), indented
with :func:`nest`/:func:`hang`/:func:`prefixed`, and turned into text with
:func:`render`, optionally wrapping at a column.

Breaking spaces (:data:`space`) are the only places where :func:`render`
may wrap a line. Carriage returns (:data:`cr`) and blank lines
(:data:`blankline`) are requests rather than literal characters: repeated
requests collapse, and requests at the very end of a document are dropped.

Fixed-width blocks (:func:`lblock`) placed next to each other are laid out
side by side, which is how grid tables are drawn.

Examples
--------
    >>> doc = vsep([text("Title"), hang(3, text("-  "), text("item"))])
    >>> render(doc)
    'Title\\n\\n-  item'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union


@dataclass(frozen=True)
class _Text:
    width: int
    content: str


@dataclass(frozen=True)
class _Block:
    width: int
    lines: tuple[str, ...]


@dataclass(frozen=True)
class _Prefixed:
    prefix: str
    doc: Doc


@dataclass(frozen=True)
class _BlankLines:
    count: int


class _Marker:
    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


_BREAKING_SPACE = _Marker("BreakingSpace")
_CARRIAGE_RETURN = _Marker("CarriageReturn")
_NEW_LINE = _Marker("NewLine")

_Element = Union[_Text, _Block, _Prefixed, _BlankLines, _Marker]


class Doc:
    """Immutable layout document.

    Use the module-level constructors rather than instantiating directly.
    ``Doc + Doc`` and ``Doc + str`` concatenate horizontally.

    """

    __slots__ = ("elements",)

    def __init__(self, elements: Iterable[_Element] = ()) -> None:
        self.elements: tuple[_Element, ...] = tuple(elements)

    def __add__(self, other: Union[Doc, str]) -> Doc:
        if isinstance(other, str):
            other = text(other)
        if not isinstance(other, Doc):
            return NotImplemented
        return Doc(self.elements + other.elements)

    def __radd__(self, other: str) -> Doc:
        if isinstance(other, str):
            return text(other) + self
        return NotImplemented

    def __bool__(self) -> bool:
        return bool(self.elements)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Doc) and self.elements == other.elements

    def __hash__(self) -> int:
        return hash(self.elements)

    def __repr__(self) -> str:
        return f"Doc({render(self)!r})"


empty = Doc()
space = Doc([_BREAKING_SPACE])
cr = Doc([_CARRIAGE_RETURN])
blankline = Doc([_BlankLines(1)])


def text(s: str) -> Doc:
    """Literal text; embedded newlines become hard line breaks."""
    elements: list[_Element] = []
    for i, line in enumerate(s.split("\n")):
        if i:
            elements.append(_NEW_LINE)
        if line:
            elements.append(_Text(len(line), line))
    return Doc(elements)


def is_empty(doc: Doc) -> bool:
    """Return True if the document has no elements."""
    return not doc.elements


def hcat(docs: Iterable[Doc]) -> Doc:
    """Concatenate documents horizontally."""
    elements: list[_Element] = []
    for doc in docs:
        elements.extend(doc.elements)
    return Doc(elements)


def above(top: Doc, bottom: Doc) -> Doc:
    """Place ``bottom`` on the line after ``top``; empty documents vanish."""
    if is_empty(top):
        return bottom
    if is_empty(bottom):
        return top
    return top + cr + bottom


def above_blank(top: Doc, bottom: Doc) -> Doc:
    """Place ``bottom`` after ``top`` with a blank line between."""
    if is_empty(top):
        return bottom
    if is_empty(bottom):
        return top
    return top + blankline + bottom


def vcat(docs: Iterable[Doc]) -> Doc:
    """Stack documents vertically."""
    result = empty
    for doc in docs:
        result = above(result, doc)
    return result


def vsep(docs: Iterable[Doc]) -> Doc:
    """Stack documents vertically with blank lines between them."""
    result = empty
    for doc in docs:
        result = above_blank(result, doc)
    return result


def prefixed(prefix: str, doc: Doc) -> Doc:
    """Prefix every line of ``doc`` with ``prefix``.

    The prefix is right-trimmed on lines that are otherwise blank.
    """
    if is_empty(doc):
        return empty
    return Doc([_Prefixed(prefix, doc)])


def nest(indent: int, doc: Doc) -> Doc:
    """Indent every line of ``doc`` by ``indent`` spaces."""
    return prefixed(" " * indent, doc)


def hang(indent: int, start: Doc, doc: Doc) -> Doc:
    """Hanging indent: ``start`` followed by ``doc`` nested by ``indent``."""
    return start + nest(indent, doc)


def nowrap(doc: Doc) -> Doc:
    """Turn the top-level breaking spaces of ``doc`` into literal spaces."""
    return Doc(_Text(1, " ") if element is _BREAKING_SPACE else element for element in doc.elements)


def lblock(width: int, doc: Doc) -> Doc:
    """Left-aligned fixed-width block.

    The document is rendered at ``width`` and lines longer than ``width``
    are chopped, so the block never exceeds its width.
    """
    width = max(1, width)
    return Doc([_Block(width, tuple(_chop(width, render(doc, width))))])


def offset(doc: Doc) -> int:
    """Width of the widest line of the unwrapped rendering."""
    lines = render(doc).splitlines()
    return max((len(line) for line in lines), default=0)


def height(doc: Doc) -> int:
    """Number of lines of the unwrapped rendering.

    A lone fixed-width block counts all of its lines, including empty ones.
    """
    if len(doc.elements) == 1 and isinstance(doc.elements[0], _Block):
        return len(doc.elements[0].lines)
    return len(render(doc).splitlines())


def _chop(width: int, rendered: str) -> list[str]:
    if rendered.endswith("\n"):
        rendered = rendered[:-1]
    lines: list[str] = []
    for line in rendered.split("\n"):
        while len(line) > width:
            lines.append(line[:width])
            line = line[width:]
        lines.append(line)
    return lines


def _merge_blocks(first: _Block, second: _Block, add_space: bool) -> _Block:
    lines1 = list(first.lines)
    lines2 = list(second.lines)
    if len(lines1) < len(lines2):
        lines1.extend([""] * (len(lines2) - len(lines1)))
    elif len(lines2) < len(lines1):
        lines2.extend([""] * (len(lines1) - len(lines2)))

    merged = []
    for line1, line2 in zip(lines1, lines2):
        if add_space and line2:
            line2 = " " + line2
        merged.append(line1.ljust(first.width) + line2)
    return _Block(first.width + second.width + (1 if add_space else 0), tuple(merged))


def _is_break(element: _Element) -> bool:
    return element is _CARRIAGE_RETURN or element is _BREAKING_SPACE or isinstance(element, _BlankLines)


class _RenderState:
    """Mutable state of a single :func:`render` call."""

    def __init__(self, line_length: Optional[int]) -> None:
        self.output: list[str] = []
        self.prefix = ""
        self.line_length = line_length
        self.column = 0
        # Leading blank line requests are suppressed
        self.newlines = 2

    def emit_text(self, s: str) -> None:
        if self.column == 0 and self.prefix:
            self.output.append(self.prefix)
            self.column += len(self.prefix)
        self.output.append(s)
        self.column += len(s)
        self.newlines = 0

    def emit_newline(self) -> None:
        if self.column == 0 and self.prefix:
            self.output.append(self.prefix.rstrip())
        self.output.append("\n")
        self.column = 0
        self.newlines += 1

    def render_elements(self, elements: tuple[_Element, ...]) -> None:
        i = 0
        count = len(elements)
        # Breaks and spaces after the last visible element are dropped
        last_content = count - 1
        while last_content >= 0 and _is_break(elements[last_content]):
            last_content -= 1
        while i < count:
            element = elements[i]
            at_end = i > last_content

            if isinstance(element, _Text):
                self.emit_text(element.content)

            elif isinstance(element, _Prefixed):
                saved_prefix = self.prefix
                self.prefix = saved_prefix + element.prefix
                self.render_elements(element.doc.elements)
                self.prefix = saved_prefix

            elif isinstance(element, _BlankLines):
                if not (self.newlines > element.count or at_end):
                    for _ in range(1 + element.count - self.newlines):
                        self.emit_newline()

            elif element is _CARRIAGE_RETURN:
                if not (self.newlines > 0 or at_end):
                    self.emit_newline()

            elif element is _NEW_LINE:
                self.emit_newline()

            elif element is _BREAKING_SPACE:
                nxt = elements[i + 1] if i + 1 < count else None
                if not at_end and not (
                    nxt is _BREAKING_SPACE
                    or nxt is _CARRIAGE_RETURN
                    or nxt is _NEW_LINE
                    or isinstance(nxt, _BlankLines)
                ):
                    run_width = 0
                    for following in elements[i + 1 :]:
                        if not isinstance(following, (_Text, _Block)):
                            break
                        run_width += following.width
                    if self.line_length is not None and self.column > 0 and self.column + 1 + run_width > self.line_length:
                        self.emit_newline()
                    elif self.column > 0:
                        self.emit_text(" ")

            elif isinstance(element, _Block):
                block = element
                while i + 1 < count:
                    nxt = elements[i + 1]
                    if isinstance(nxt, _Block):
                        block = _merge_blocks(block, nxt, add_space=False)
                        i += 1
                    elif nxt is _BREAKING_SPACE and i + 2 < count and isinstance(elements[i + 2], _Block):
                        block = _merge_blocks(block, elements[i + 2], add_space=True)  # type: ignore[arg-type]
                        i += 2
                    else:
                        break
                saved_prefix = self.prefix
                indent = self.column - len(saved_prefix)
                if indent > 0:
                    self.prefix = saved_prefix + " " * indent
                lines: list[_Element] = []
                for n, line in enumerate(block.lines):
                    if n:
                        lines.append(_CARRIAGE_RETURN)
                    lines.append(_Text(len(line), line))
                self.render_elements(tuple(lines))
                self.prefix = saved_prefix

            i += 1


def render(doc: Doc, width: Optional[int] = None) -> str:
    """Render a document to text.

    Parameters
    ----------
    doc : Doc
        Document to render
    width : int or None, default = None
        Wrap column; None disables wrapping

    Returns
    -------
    str
        Rendered text. Trailing carriage returns and blank lines are dropped.

    """
    state = _RenderState(width)
    state.render_elements(doc.elements)
    return "".join(state.output)


__all__ = [
    "Doc",
    "above",
    "above_blank",
    "blankline",
    "cr",
    "empty",
    "hang",
    "hcat",
    "height",
    "is_empty",
    "lblock",
    "nest",
    "nowrap",
    "offset",
    "prefixed",
    "render",
    "space",
    "text",
    "vcat",
    "vsep",
]
