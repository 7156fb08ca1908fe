#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/ast/nodes.py
"""AST node classes for document representation.

This module defines the closed node hierarchy that the writers consume. Every
node is an immutable dataclass that supports the visitor pattern through
``accept``; the matching abstract ``visit_*`` methods live in
:mod:`docwriters.ast.visitors`, so a renderer that forgets a variant cannot be
instantiated.

Node Hierarchy
--------------
Block-level nodes represent structural document elements:
    - Plain, Paragraph, Heading, CodeBlock, BlockQuote, HorizontalRule
    - RawBlock, BulletList, OrderedList, DefinitionList, Table, Null

Inline nodes represent span-level content:
    - Str, Space, LineBreak, Code, Math, RawInline
    - Emphasis, Strong, Strikeout, Superscript, Subscript, SmallCaps
    - Quoted, Cite, Link, Image, Note

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Union

from docwriters.constants import Alignment, ListNumberDelim, ListNumberStyle, MathType, QuoteType


class Node(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Document
# ============================================================================


@dataclass(frozen=True)
class Meta:
    """Document metadata.

    Parameters
    ----------
    title : list of Inline, default = empty list
        Title inlines
    authors : list of list of Inline, default = empty list
        One inline run per author
    date : list of Inline, default = empty list
        Date inlines

    """

    title: list[Inline] = field(default_factory=list)
    authors: list[list[Inline]] = field(default_factory=list)
    date: list[Inline] = field(default_factory=list)


@dataclass(frozen=True)
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : list of Block, default = empty list
        Block-level nodes in the document
    meta : Meta, default = empty Meta
        Title, authors and date

    """

    children: list[Block] = field(default_factory=list)
    meta: Meta = field(default_factory=Meta)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Plain(Node):
    """Inline run that is not a paragraph (tight list items, table cells).

    Parameters
    ----------
    content : list of Inline
        Inline content

    """

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_plain(self)


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph block.

    Parameters
    ----------
    content : list of Inline
        Inline content

    """

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class Heading(Node):
    """Section heading.

    Levels outside 1-6 are accepted and rendered best-effort.

    Parameters
    ----------
    level : int
        Heading level (1 is the top level)
    content : list of Inline
        Heading text
    identifier : str, default = ""
        Optional anchor identifier

    """

    level: int
    content: list[Inline] = field(default_factory=list)
    identifier: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Literal code block.

    Parameters
    ----------
    content : str
        Raw code text, never escaped by the caller
    classes : list of str, default = empty list
        Class attributes; language names appear here
    identifier : str, default = ""
        Optional identifier attribute
    attributes : list of (str, str), default = empty list
        Remaining key/value attributes

    """

    content: str
    classes: list[str] = field(default_factory=list)
    identifier: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code_block(self)


@dataclass(frozen=True)
class BlockQuote(Node):
    """Block quotation containing other blocks.

    Parameters
    ----------
    children : list of Block
        Quoted blocks

    """

    children: list[Block] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block_quote(self)


@dataclass(frozen=True)
class HorizontalRule(Node):
    """Horizontal rule (thematic break)."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_horizontal_rule(self)


@dataclass(frozen=True)
class RawBlock(Node):
    """Block of raw markup in a named format.

    Parameters
    ----------
    format : str
        Format tag of the raw text (e.g. "html", "rst")
    content : str
        Raw text passed through when the format matches the target

    """

    format: str
    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_raw_block(self)


@dataclass(frozen=True)
class BulletList(Node):
    """Unordered list; each item is a list of blocks.

    Parameters
    ----------
    items : list of list of Block
        List items

    """

    items: list[list[Block]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_bullet_list(self)


@dataclass(frozen=True)
class OrderedList(Node):
    """Ordered list with numbering attributes.

    Parameters
    ----------
    items : list of list of Block
        List items
    start : int, default = 1
        Number of the first item
    style : ListNumberStyle, default = "default"
        Numbering style
    delimiter : ListNumberDelim, default = "default"
        Delimiter around the number

    """

    items: list[list[Block]] = field(default_factory=list)
    start: int = 1
    style: ListNumberStyle = "default"
    delimiter: ListNumberDelim = "default"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_ordered_list(self)


@dataclass(frozen=True)
class DefinitionList(Node):
    """Definition list.

    Parameters
    ----------
    items : list of (list of Inline, list of list of Block)
        Pairs of term inlines and the definitions for that term; each
        definition is itself a list of blocks

    """

    items: list[tuple[list[Inline], list[list[Block]]]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_definition_list(self)


@dataclass(frozen=True)
class Table(Node):
    """Table with optional caption, header and relative column widths.

    Parameters
    ----------
    caption : list of Inline, default = empty list
        Caption inlines
    alignments : list of Alignment, default = empty list
        Per-column alignment
    widths : list of float, default = empty list
        Per-column width as a fraction of the text width; all zeros means unset
    header : list of list of Block, default = empty list
        Header cells
    rows : list of list of list of Block, default = empty list
        Body rows; each cell is a list of blocks

    """

    caption: list[Inline] = field(default_factory=list)
    alignments: list[Alignment] = field(default_factory=list)
    widths: list[float] = field(default_factory=list)
    header: list[list[Block]] = field(default_factory=list)
    rows: list[list[list[Block]]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table(self)


@dataclass(frozen=True)
class Null(Node):
    """Empty block that renders as nothing."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_null(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Str(Node):
    """Literal text run.

    Parameters
    ----------
    content : str
        Text, escaped by the writer for its target

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_str(self)


@dataclass(frozen=True)
class Space(Node):
    """Inter-word space."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_space(self)


@dataclass(frozen=True)
class LineBreak(Node):
    """Hard line break."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_line_break(self)


@dataclass(frozen=True)
class Emphasis(Node):
    """Emphasized text."""

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_emphasis(self)


@dataclass(frozen=True)
class Strong(Node):
    """Strongly emphasized text."""

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strong(self)


@dataclass(frozen=True)
class Strikeout(Node):
    """Struck-out text."""

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikeout(self)


@dataclass(frozen=True)
class Superscript(Node):
    """Superscripted text."""

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_superscript(self)


@dataclass(frozen=True)
class Subscript(Node):
    """Subscripted text."""

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_subscript(self)


@dataclass(frozen=True)
class SmallCaps(Node):
    """Small capitals."""

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_small_caps(self)


@dataclass(frozen=True)
class Quoted(Node):
    """Quoted text; writers emit curly quote glyphs.

    Parameters
    ----------
    quote_type : QuoteType
        "single" or "double"
    content : list of Inline
        Quoted inlines

    """

    quote_type: QuoteType
    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_quoted(self)


@dataclass(frozen=True)
class Cite(Node):
    """Citation; only the rendered citation text is carried."""

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_cite(self)


@dataclass(frozen=True)
class Code(Node):
    """Inline code span; the text is never escaped."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code(self)


@dataclass(frozen=True)
class Math(Node):
    """TeX math, inline or display; the text is never escaped.

    Parameters
    ----------
    math_type : MathType
        "inline" or "display"
    content : str
        Raw TeX source

    """

    math_type: MathType
    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_math(self)


@dataclass(frozen=True)
class RawInline(Node):
    """Inline raw markup in a named format."""

    format: str
    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_raw_inline(self)


@dataclass(frozen=True)
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    content : list of Inline
        Link label
    url : str
        Link target
    title : str, default = ""
        Optional title

    """

    content: list[Inline]
    url: str
    title: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass(frozen=True)
class Image(Node):
    """Image.

    Parameters
    ----------
    alt : list of Inline
        Alternative text
    url : str
        Image source
    title : str, default = ""
        Optional title; a ``fig:`` prefix marks a figure

    """

    alt: list[Inline]
    url: str
    title: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass(frozen=True)
class Note(Node):
    """Footnote whose body appears at the point of reference.

    Parameters
    ----------
    children : list of Block
        Footnote body

    """

    children: list[Block] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_note(self)


Block = Union[
    Plain,
    Paragraph,
    Heading,
    CodeBlock,
    BlockQuote,
    HorizontalRule,
    RawBlock,
    BulletList,
    OrderedList,
    DefinitionList,
    Table,
    Null,
]

Inline = Union[
    Str,
    Space,
    LineBreak,
    Emphasis,
    Strong,
    Strikeout,
    Superscript,
    Subscript,
    SmallCaps,
    Quoted,
    Cite,
    Code,
    Math,
    RawInline,
    Link,
    Image,
    Note,
]

BLOCK_TYPES: tuple[type, ...] = Block.__args__  # type: ignore[attr-defined]
INLINE_TYPES: tuple[type, ...] = Inline.__args__  # type: ignore[attr-defined]


def get_node_children(node: Node) -> list[Node]:
    """Return the direct child nodes of a node in document order.

    Parameters
    ----------
    node : Node
        Any AST node

    Returns
    -------
    list of Node
        Blocks and inlines directly contained in ``node``; table cells and
        list items are flattened

    """
    if isinstance(node, Document):
        return list(node.children)
    if isinstance(node, (BlockQuote, Note)):
        return list(node.children)
    if isinstance(node, (BulletList, OrderedList)):
        return [block for item in node.items for block in item]
    if isinstance(node, DefinitionList):
        children: list[Node] = []
        for term, definitions in node.items:
            children.extend(term)
            for definition in definitions:
                children.extend(definition)
        return children
    if isinstance(node, Table):
        children = list(node.caption)
        for cell in node.header:
            children.extend(cell)
        for row in node.rows:
            for cell in row:
                children.extend(cell)
        return children
    if isinstance(node, Image):
        return list(node.alt)
    content = getattr(node, "content", None)
    if isinstance(content, list):
        return list(content)
    return []
