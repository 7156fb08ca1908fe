#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for the writers. Every node
variant has a matching abstract ``visit_*`` method, so a visitor subclass that
leaves one out cannot be instantiated. Adding a node variant therefore forces
every renderer to handle it explicitly.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from docwriters.ast.nodes import (
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    Document,
    Emphasis,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    Math,
    Note,
    Null,
    OrderedList,
    Paragraph,
    Plain,
    Quoted,
    RawBlock,
    RawInline,
    SmallCaps,
    Space,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node type. Visit methods
    may return a value (the writers return rendered fragments) or work by
    side effect.

    Examples
    --------
    The writers in :mod:`docwriters.renderers` are the concrete visitors;
    each returns the rendered fragment for the node it visits.

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    # Blocks

    @abstractmethod
    def visit_plain(self, node: Plain) -> Any:
        """Visit a Plain node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_raw_block(self, node: RawBlock) -> Any:
        """Visit a RawBlock node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_null(self, node: Null) -> Any:
        """Visit a Null node."""
        pass

    # Inlines

    @abstractmethod
    def visit_str(self, node: Str) -> Any:
        """Visit a Str node."""
        pass

    @abstractmethod
    def visit_space(self, node: Space) -> Any:
        """Visit a Space node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_strikeout(self, node: Strikeout) -> Any:
        """Visit a Strikeout node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_small_caps(self, node: SmallCaps) -> Any:
        """Visit a SmallCaps node."""
        pass

    @abstractmethod
    def visit_quoted(self, node: Quoted) -> Any:
        """Visit a Quoted node."""
        pass

    @abstractmethod
    def visit_cite(self, node: Cite) -> Any:
        """Visit a Cite node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_math(self, node: Math) -> Any:
        """Visit a Math node."""
        pass

    @abstractmethod
    def visit_raw_inline(self, node: RawInline) -> Any:
        """Visit a RawInline node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_note(self, node: Note) -> Any:
        """Visit a Note node."""
        pass
