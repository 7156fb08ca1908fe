#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/renderers/pseudopod.py
"""PseudoPod rendering from AST.

This module provides the PseudoPodRenderer class which converts AST nodes to
PseudoPod, the POD dialect used for book manuscripts. Block structure uses
POD commands (``=head2``) and formatting codes (``B<>``, ``C<< >>``,
``L<>``); lists, tables and block quotes borrow wiki list markers and HTML
tags.

Lists are rendered with compact ``*``/``#``/``;`` markers when every item is
a single inline run (optionally followed by one nested simple list). Any
other list switches to ``<ul>``/``<ol>``/``<dl>`` tags for itself and every
list nested inside it.

"""

from __future__ import annotations

import logging

from docwriters.ast.nodes import (
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
from docwriters.ast.visitors import NodeVisitor
from docwriters.constants import (
    PSEUDOPOD_ALIGNMENTS,
    PSEUDOPOD_HIGHLIGHT_LANGUAGES,
    PSEUDOPOD_LIST_MARKERS,
    PSEUDOPOD_RAW_FORMATS,
    PSEUDOPOD_REFERENCES_PLACEHOLDER,
)
from docwriters.exceptions import NestingDepthError
from docwriters.options.pseudopod import PseudoPodRendererOptions
from docwriters.renderers.base import BaseRenderer
from docwriters.renderers.list_classifier import is_simple_list
from docwriters.renderers.state import WriterState, list_level, tag_mode
from docwriters.utils.decorators import debug_timer
from docwriters.utils.escape import escape_xml
from docwriters.utils.lists import list_style_css

logger = logging.getLogger(__name__)


class PseudoPodRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to PseudoPod.

    Parameters
    ----------
    options : PseudoPodRendererOptions or None, default = None
        PseudoPod rendering options

    Examples
    --------
        >>> from docwriters.ast import Document, Heading, Str
        >>> doc = Document(children=[Heading(level=2, content=[Str("Title")])])
        >>> PseudoPodRenderer().render_to_string(doc)
        '=head2 Title\\n'

    """

    def __init__(self, options: PseudoPodRendererOptions | None = None):
        """Initialize the PseudoPod renderer with options."""
        BaseRenderer._validate_options_type(options, PseudoPodRendererOptions, "pseudopod")
        options = options or PseudoPodRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: PseudoPodRendererOptions = options
        self._state = WriterState()

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a PseudoPod string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            PseudoPod text. A ``<references />`` line is appended when the
            document contains footnotes.

        Raises
        ------
        NestingDepthError
            If the tree is deeper than ``options.max_nesting_depth`` or too deep
            for the interpreter stack

        """
        self._check_nesting_depth(doc)
        self._state = WriterState()

        with debug_timer(logger, "Rendering (pseudopod)"):
            try:
                main = doc.accept(self)
            except RecursionError as e:
                raise NestingDepthError(self.options.max_nesting_depth, original_error=e) from e

        if not self.options.standalone:
            return main
        variables = {
            "body": main,
            "toc": "yes" if self.options.table_of_contents else "",
        }
        return self._wrap_standalone("pseudopod", variables)

    def _blocks(self, blocks: list[Block]) -> str:
        return "\n".join(block.accept(self) for block in blocks)

    def _inlines(self, inlines: list[Inline]) -> str:
        return "".join(inline.accept(self) for inline in inlines)

    def visit_document(self, node: Document) -> str:
        """Render a Document node."""
        body = self._blocks(node.children)
        if self._state.notes_seen:
            body += PSEUDOPOD_REFERENCES_PLACEHOLDER
        return body

    # Blocks

    def visit_plain(self, node: Plain) -> str:
        """Render a Plain node."""
        return self._inlines(node.content)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node.

        A paragraph holding only an image becomes a framed figure. Inside a
        tag-mode list the paragraph is wrapped in ``<p>``; outside any list it
        is followed by a newline.

        Parameters
        ----------
        node : Paragraph
            Paragraph to render

        """
        if len(node.content) == 1 and isinstance(node.content[0], Image):
            return self._render_figure(node.content[0])

        contents = self._inlines(node.content)
        if self._state.use_tags:
            return f"<p>{contents}</p>"
        return contents + ("" if self._state.list_markers else "\n")

    def _render_figure(self, image: Image) -> str:
        caption = self._inlines(image.alt)
        if not image.alt:
            options = ""
        elif not image.title:
            options = f"|alt={caption}"
        else:
            options = f"|alt={image.title}|caption {caption}"
        return f"[[Image:{image.url}|frame|none{options}]]\n"

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node as ``=headN``."""
        return f"=head{node.level} {self._inlines(node.content)}\n"

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a CodeBlock node.

        The first class found in the highlighting whitelist selects a
        ``<source lang="...">`` block. Without one the code goes in ``<pre>``,
        carrying all classes along.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        languages = [cls for cls in node.classes if cls in PSEUDOPOD_HIGHLIGHT_LANGUAGES]
        if languages:
            start, end = f'<source lang="{languages[0]}">', "</source>"
        elif node.classes:
            start, end = f'<pre class="{" ".join(node.classes)}">', "</pre>"
        else:
            start, end = "<pre>", "</pre>"
        return start + escape_xml(node.content) + end

    def visit_block_quote(self, node: BlockQuote) -> str:
        """Render a BlockQuote node."""
        return f"<blockquote>{self._blocks(node.children)}</blockquote>"

    def visit_horizontal_rule(self, node: HorizontalRule) -> str:
        """Render a HorizontalRule node."""
        return "\n-----\n"

    def visit_raw_block(self, node: RawBlock) -> str:
        """Render a RawBlock node; only wiki and HTML content is kept."""
        if node.format in PSEUDOPOD_RAW_FORMATS:
            return node.content
        logger.debug("Dropping raw block in format %r", node.format)
        return ""

    def _use_tags_for(self, node: Block) -> bool:
        use_tags = self._state.use_tags or not is_simple_list(node)
        if use_tags and not self._state.use_tags:
            logger.debug("Rendering %s with HTML tags", type(node).__name__)
        return use_tags

    def visit_bullet_list(self, node: BulletList) -> str:
        """Render a BulletList node with ``*`` markers or ``<ul>`` tags."""
        if self._use_tags_for(node):
            with tag_mode(self._state):
                items = [self._render_list_item(item) for item in node.items]
            return "<ul>\n" + "\n".join(items) + "</ul>\n"

        with list_level(self._state, PSEUDOPOD_LIST_MARKERS["bullet"]):
            items = [self._render_list_item(item) for item in node.items]
        return "\n".join(items) + "\n"

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Render an OrderedList node with ``#`` markers or ``<ol>`` tags.

        Parameters
        ----------
        node : OrderedList
            Ordered list to render

        """
        if self._use_tags_for(node):
            with tag_mode(self._state):
                items = [self._render_list_item(item) for item in node.items]
            return f"<ol{self._list_attributes(node)}>\n" + "\n".join(items) + "</ol>\n"

        with list_level(self._state, PSEUDOPOD_LIST_MARKERS["ordered"]):
            items = [self._render_list_item(item) for item in node.items]
        return "\n".join(items) + "\n"

    @staticmethod
    def _list_attributes(node: OrderedList) -> str:
        attributes = ""
        if node.start != 1:
            attributes += f' start="{node.start}"'
        if node.style != "default":
            attributes += f' style="list-style-type: {list_style_css(node.style)};"'
        return attributes

    def visit_definition_list(self, node: DefinitionList) -> str:
        """Render a DefinitionList node with ``;``/``:`` markers or ``<dl>`` tags."""
        if self._use_tags_for(node):
            with tag_mode(self._state):
                items = [self._render_definition_item(term, definitions) for term, definitions in node.items]
            return "<dl>\n" + "\n".join(items) + "</dl>\n"

        with list_level(self._state, PSEUDOPOD_LIST_MARKERS["definition"]):
            items = [self._render_definition_item(term, definitions) for term, definitions in node.items]
        return "\n".join(items) + "\n"

    def _render_list_item(self, item: list[Block]) -> str:
        contents = self._blocks(item)
        if self._state.use_tags:
            return f"<li>{contents}</li>"
        return f"{self._state.list_markers} {contents}"

    def _render_definition_item(self, term: list[Inline], definitions: list[list[Block]]) -> str:
        label = self._inlines(term)
        contents = [self._blocks(definition) for definition in definitions]
        if self._state.use_tags:
            return f"<dt>{label}</dt>\n" + "\n".join(f"<dd>{d}</dd>" for d in contents)
        marker = self._state.list_markers
        return f"{marker} {label}\n" + "\n".join(f"{marker[:-1]}: {d}" for d in contents)

    def visit_table(self, node: Table) -> str:
        """Render a Table node as an HTML table.

        Column widths are given as ``<col>`` percentages when any width hint
        is set. The header row is left out when all of its cells are empty.

        Parameters
        ----------
        node : Table
            Table to render

        """
        alignments = [PSEUDOPOD_ALIGNMENTS.get(alignment, "left") for alignment in node.alignments]
        caption = f"<caption>{self._inlines(node.caption)}</caption>\n" if node.caption else ""
        if all(width == 0 for width in node.widths):
            col_tags = ""
        else:
            col_tags = "".join(f'<col width="{int(100 * width)}%" />\n' for width in node.widths)

        head = ""
        if not all(not cell for cell in node.header):
            head = "<thead>\n" + self._render_table_row(alignments, 0, node.header) + "\n</thead>\n"
        body = "".join(
            self._render_table_row(alignments, number, row) + "\n" for number, row in enumerate(node.rows, start=1)
        )
        return "<table>\n" + caption + col_tags + head + "<tbody>\n" + body + "</tbody>\n</table>\n"

    def _render_table_row(self, alignments: list[str], number: int, cells: list[list[Block]]) -> str:
        cell_tag = "th" if number == 0 else "td"
        if number == 0:
            row_class = "header"
        else:
            row_class = "odd" if number % 2 == 1 else "even"
        rendered = "".join(
            f'<{cell_tag} align="{alignment}">{self._blocks(cell)}</{cell_tag}>\n'
            for alignment, cell in zip(alignments, cells)
        )
        return f'<tr class="{row_class}">\n{rendered}</tr>'

    def visit_null(self, node: Null) -> str:
        """Render a Null node (nothing)."""
        return ""

    # Inlines

    def visit_str(self, node: Str) -> str:
        """Render a Str node with XML escaping."""
        return escape_xml(node.content)

    def visit_space(self, node: Space) -> str:
        return " "

    def visit_line_break(self, node: LineBreak) -> str:
        return "\n"

    def visit_emphasis(self, node: Emphasis) -> str:
        """Render an Emphasis node as ``B<>``."""
        return f"B<{self._inlines(node.content)}>"

    def visit_strong(self, node: Strong) -> str:
        """Render a Strong node as ``B<>``."""
        return f"B<{self._inlines(node.content)}>"

    def visit_strikeout(self, node: Strikeout) -> str:
        """Render a Strikeout node; PseudoPod has no strikeout, so only the text is kept."""
        return self._inlines(node.content)

    def visit_superscript(self, node: Superscript) -> str:
        """Render a Superscript node as ``G<>``."""
        return f"G<{self._inlines(node.content)}>"

    def visit_subscript(self, node: Subscript) -> str:
        """Render a Subscript node as ``H<>``."""
        return f"H<{self._inlines(node.content)}>"

    def visit_small_caps(self, node: SmallCaps) -> str:
        return self._inlines(node.content)

    def visit_quoted(self, node: Quoted) -> str:
        """Render a Quoted node with curly quotes."""
        contents = self._inlines(node.content)
        if node.quote_type == "single":
            return f"‘{contents}’"
        return f"“{contents}”"

    def visit_cite(self, node: Cite) -> str:
        """Render a Cite node as ``T<>``."""
        return f"T<{self._inlines(node.content)}>"

    def visit_code(self, node: Code) -> str:
        """Render a Code node as ``C<< >>``."""
        return f"C<< {escape_xml(node.content)} >>"

    def visit_math(self, node: Math) -> str:
        """Render a Math node; the TeX is passed through unescaped."""
        return f"<math>{node.content}</math>"

    def visit_raw_inline(self, node: RawInline) -> str:
        """Render a RawInline node; only wiki and HTML content is kept."""
        if node.format in PSEUDOPOD_RAW_FORMATS:
            return node.content
        logger.debug("Dropping raw inline in format %r", node.format)
        return ""

    def visit_link(self, node: Link) -> str:
        """Render a Link node as ``L<label|url>``."""
        return f"L<{self._inlines(node.content)}|{node.url}>"

    def visit_image(self, node: Image) -> str:
        """Render an Image node; the title is preferred over the alt text as its label."""
        if node.title:
            label = f"|{node.title}"
        elif node.alt:
            label = f"|{self._inlines(node.alt)}"
        else:
            label = ""
        return f"[[Image:{node.url}{label}]]"

    def visit_note(self, node: Note) -> str:
        """Render a Note node as an inline ``<ref>``."""
        contents = self._blocks(node.children)
        self._state.notes_seen = True
        return f"<ref>{contents}</ref>"
