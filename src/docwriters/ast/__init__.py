#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The writers consume an immutable tree built from the node classes in
:mod:`docwriters.ast.nodes` and traverse it with the visitor base class in
:mod:`docwriters.ast.visitors`.

Examples
--------
    >>> from docwriters.ast import Document, Heading, Str
    >>> from docwriters.renderers.rst import RestructuredTextRenderer
    >>> doc = Document(children=[Heading(level=1, content=[Str("Title")])])
    >>> print(RestructuredTextRenderer().render_to_string(doc))
    Title
    =====

"""

from __future__ import annotations

from docwriters.ast.nodes import (
    BLOCK_TYPES,
    INLINE_TYPES,
    Block,
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
    Inline,
    LineBreak,
    Link,
    Math,
    Meta,
    Node,
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
    get_node_children,
)
from docwriters.ast.utils import normalize_spaces, split_on_line_breaks
from docwriters.ast.visitors import NodeVisitor

__all__ = [
    "BLOCK_TYPES",
    "INLINE_TYPES",
    "Block",
    "BlockQuote",
    "BulletList",
    "Cite",
    "Code",
    "CodeBlock",
    "DefinitionList",
    "Document",
    "Emphasis",
    "Heading",
    "HorizontalRule",
    "Image",
    "Inline",
    "LineBreak",
    "Link",
    "Math",
    "Meta",
    "Node",
    "NodeVisitor",
    "Note",
    "Null",
    "OrderedList",
    "Paragraph",
    "Plain",
    "Quoted",
    "RawBlock",
    "RawInline",
    "SmallCaps",
    "Space",
    "Str",
    "Strikeout",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "get_node_children",
    "normalize_spaces",
    "split_on_line_breaks",
]
