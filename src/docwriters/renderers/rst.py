#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/renderers/rst.py
"""reStructuredText rendering from AST.

This module provides the RestructuredTextRenderer class which converts AST
nodes to reStructuredText. Visit methods return :class:`docwriters.layout.Doc`
fragments which are laid out and wrapped once the whole document is built.

Footnotes, reference links and image substitutions are collected in a
:class:`~docwriters.renderers.state.WriterState` during the walk and emitted
after the body, in that order.

"""

from __future__ import annotations

import logging
from itertools import zip_longest
from typing import Optional

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
    Meta,
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
from docwriters.ast.utils import normalize_spaces, split_on_line_breaks
from docwriters.ast.visitors import NodeVisitor
from docwriters.constants import (
    FIGURE_TITLE_PREFIX,
    RST_HEADING_CHARS,
    RST_HORIZONTAL_RULE,
    RST_RAW_FORMATS,
    RST_TABLE_PADDING,
    RST_TABLE_PIPE_END,
    RST_TABLE_PIPE_MIDDLE,
    RST_TABLE_PIPE_START,
)
from docwriters.exceptions import NestingDepthError
from docwriters.layout import (
    Doc,
    above,
    above_blank,
    blankline,
    cr,
    empty,
    hang,
    hcat,
    height,
    lblock,
    nest,
    nowrap,
    offset,
    prefixed,
    render,
    space,
    text,
    vcat,
    vsep,
)
from docwriters.options.rst import RstRendererOptions
from docwriters.renderers.base import BaseRenderer
from docwriters.renderers.inline_escapes import insert_escapes
from docwriters.renderers.state import WriterState
from docwriters.utils.decorators import debug_timer
from docwriters.utils.escape import escape_rst, escape_uri
from docwriters.utils.lists import ordered_list_markers

logger = logging.getLogger(__name__)


def relative_column_widths(widths: list[float], columns: int) -> list[int]:
    """Scale fractional column widths to character widths.

    Parameters
    ----------
    widths : list of float
        Fraction of the text width taken by each column
    columns : int
        Text width in characters

    Returns
    -------
    list of int
        ``floor(columns * w)`` for each fraction

    """
    return [int(columns * w) for w in widths]


class RestructuredTextRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to reStructuredText.

    Parameters
    ----------
    options : RstRendererOptions or None, default = None
        RST formatting options

    Examples
    --------
    Basic usage:

        >>> from docwriters.ast import Document, Heading, Str
        >>> from docwriters.renderers.rst import RestructuredTextRenderer
        >>> doc = Document(children=[Heading(level=1, content=[Str("Title")])])
        >>> print(RestructuredTextRenderer().render_to_string(doc))
        Title
        =====

    Reference-style links:

        >>> from docwriters.options import RstRendererOptions
        >>> renderer = RestructuredTextRenderer(RstRendererOptions(reference_links=True))

    """

    def __init__(self, options: RstRendererOptions | None = None):
        """Initialize the RST renderer with options."""
        BaseRenderer._validate_options_type(options, RstRendererOptions, "rst")
        options = options or RstRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: RstRendererOptions = options
        self._state = WriterState()

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an RST string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            RST text. The body is returned without a trailing blank line or
            final newline, so callers joining several bodies must add their own
            separator. A template may append one in standalone mode.

        Raises
        ------
        NestingDepthError
            If the tree is deeper than ``options.max_nesting_depth`` or too deep
            for the interpreter stack

        """
        self._check_nesting_depth(doc)
        self._state = WriterState()
        width = self.options.wrap_width

        with debug_timer(logger, "Rendering (rst)"):
            try:
                # Metadata is rendered first so footnotes in the title number before the body's
                meta_docs = self._render_meta(doc.meta) if self.options.standalone else None
                main = render(doc.accept(self), width)
                if meta_docs is None:
                    return main
                title, authors, date = (
                    render(meta_docs[0]),
                    [render(author, width) for author in meta_docs[1]],
                    render(meta_docs[2], width),
                )
            except RecursionError as e:
                raise NestingDepthError(self.options.max_nesting_depth, original_error=e) from e

        variables = {
            "body": main,
            "title": title,
            "date": date,
            "author": authors,
            "toc": "yes" if self.options.table_of_contents else "",
            "toc_depth": str(self.options.toc_depth),
            "math": "yes" if self._state.math_used else "",
        }
        return self._wrap_standalone("rst", variables)

    def _render_meta(self, meta: Meta) -> tuple[Doc, list[Doc], Doc]:
        return (
            self._render_title(meta.title),
            [self._inlines(author) for author in meta.authors],
            self._inlines(meta.date),
        )

    def _render_title(self, title: list[Inline]) -> Doc:
        if not title:
            return empty
        contents = self._inlines(title)
        border = text("=" * len(render(contents)))
        return vcat([border, contents, border])

    # Helpers

    def _blocks(self, blocks: list[Block]) -> Doc:
        return vcat(block.accept(self) for block in blocks)

    def _inlines(self, inlines: list[Inline]) -> Doc:
        return hcat(inline.accept(self) for inline in insert_escapes(inlines))

    def _register_image(self, alt: list[Inline], url: str, title: str, target: Optional[str]) -> Doc:
        """Register an image substitution and return its rendered label.

        An image repeating the alt text and target of an earlier one reuses its
        substitution. An image without alt text gets the label ``image<N>``,
        N being the number of substitutions registered so far.
        """
        images = self._state.images
        registered = self._state.find_image(alt)
        if registered is not None and registered == (url, title, target):
            label = alt
        else:
            label = alt if alt and alt != [Str("")] else [Str(f"image{len(images)}")]
            images.append((label, (url, title, target)))
        return self._inlines(label)

    def _render_notes(self) -> Doc:
        notes: list[Doc] = []
        # Note bodies may themselves contain notes, which are appended as we go
        number = 0
        while number < len(self._state.notes):
            contents = self._blocks(self._state.notes[number])
            number += 1
            notes.append(nowrap(above(text(f".. [{number}]"), nest(3, contents))))
        return vsep(notes)

    def _render_link_references(self) -> Doc:
        references = []
        for label, (url, _title) in list(self._state.links):
            label_doc = self._inlines(label)
            if ":" in render(label_doc):
                label_doc = "`" + label_doc + "`"
            references.append(nowrap(".. _" + label_doc + ": " + text(url)))
        return vcat(references)

    def _render_image_references(self) -> Doc:
        references = []
        for label, (url, _title, target) in list(self._state.images):
            line = ".. |" + self._inlines(label) + "| image:: " + text(url)
            target_line = text(f"   :target: {target}") if target is not None else empty
            references.append(nowrap(above(line, target_line)))
        return vcat(references)

    # Document

    def visit_document(self, node: Document) -> Doc:
        """Render a Document node.

        The body is followed by footnotes, link references and image
        references, separated by blank lines. Notes go first because note
        bodies can register further links and images.
        """
        body = self._blocks(node.children)
        notes = self._render_notes()
        links = self._render_link_references()
        images = self._render_image_references()
        return vsep([body, notes, links, images])

    # Blocks

    def visit_plain(self, node: Plain) -> Doc:
        """Render a Plain node."""
        return self._inlines(node.content)

    def visit_paragraph(self, node: Paragraph) -> Doc:
        """Render a Paragraph node.

        A paragraph consisting of a single image whose title starts with
        ``fig:`` becomes a figure directive. A paragraph containing line
        breaks becomes a line block.

        Parameters
        ----------
        node : Paragraph
            Paragraph to render

        """
        content = node.content
        if len(content) == 1 and isinstance(content[0], Image) and content[0].title.startswith(FIGURE_TITLE_PREFIX):
            return self._render_figure(content[0])

        if any(isinstance(inline, LineBreak) for inline in content):
            lines = [self._inlines(line) for line in split_on_line_breaks(content)]
            return vcat("| " + line for line in lines) + blankline

        return self._inlines(content) + blankline

    def _render_figure(self, image: Image) -> Doc:
        caption = self._inlines(image.alt)
        title = image.title[len(FIGURE_TITLE_PREFIX) :]
        figure = text(f"figure:: {image.url}")
        alt = ":alt: " + (text(title) if title else caption)
        return hang(3, text(".. "), above(figure, above_blank(alt, above(caption, blankline))))

    def visit_heading(self, node: Heading) -> Doc:
        """Render a Heading node.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        contents = self._inlines(node.content)
        level = max(1, node.level)
        underline_char = RST_HEADING_CHARS[level - 1] if level <= len(RST_HEADING_CHARS) else " "
        border = text(underline_char * offset(contents))
        return nowrap(vcat([contents, border, blankline]))

    def visit_code_block(self, node: CodeBlock) -> Doc:
        """Render a CodeBlock node as a literal block.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        if self.options.literate_haskell and "haskell" in node.classes and "literate" in node.classes:
            return above(prefixed("> ", text(node.content)), blankline)
        return above(above_blank(text("::"), nest(self.options.tab_stop, text(node.content))), blankline)

    def visit_block_quote(self, node: BlockQuote) -> Doc:
        """Render a BlockQuote node."""
        return nest(self.options.tab_stop, self._blocks(node.children)) + blankline

    def visit_horizontal_rule(self, node: HorizontalRule) -> Doc:
        """Render a HorizontalRule node."""
        return vcat([blankline, text(RST_HORIZONTAL_RULE), blankline])

    def visit_raw_block(self, node: RawBlock) -> Doc:
        """Render a RawBlock node.

        RST content passes through; any other format is wrapped in a
        ``raw`` directive.
        """
        if node.format in RST_RAW_FORMATS:
            return above(text(node.content), blankline)
        return above_blank(blankline + text(f".. raw:: {node.format}"), above(nest(3, text(node.content)), blankline))

    def visit_bullet_list(self, node: BulletList) -> Doc:
        """Render a BulletList node.

        Lists are always surrounded by blank lines so a nested list is not
        read as a continuation of the preceding paragraph.
        """
        items = [hang(3, text("-  "), self._blocks(item) + cr) for item in node.items]
        return vcat([blankline, vcat(items), blankline])

    def visit_ordered_list(self, node: OrderedList) -> Doc:
        """Render an OrderedList node.

        Lists numbered from 1 in the default style use auto-numbered ``#.``
        markers; any other list spells its markers out, padded to the widest.

        Parameters
        ----------
        node : OrderedList
            Ordered list to render

        """
        count = len(node.items)
        if node.start == 1 and node.style == "default" and node.delimiter == "default":
            markers = ["#."] * count
        else:
            markers = ordered_list_markers(node.start, node.style, node.delimiter, count)
        marker_width = max((len(marker) for marker in markers), default=0)

        items = []
        for marker, item in zip(markers, node.items):
            marker_text = marker.ljust(marker_width) + " "
            items.append(hang(len(marker_text), text(marker_text), self._blocks(item) + cr))
        return vcat([blankline, vcat(items), blankline])

    def visit_definition_list(self, node: DefinitionList) -> Doc:
        """Render a DefinitionList node."""
        items = []
        for term, definitions in node.items:
            contents = vcat(self._blocks(definition) for definition in definitions)
            items.append(above(self._inlines(term), nest(self.options.tab_stop, contents + cr)))
        return vcat([blankline, vcat(items), blankline])

    def visit_table(self, node: Table) -> Doc:
        """Render a Table node as a grid table.

        Column widths come from the content when no width hints are given and
        every cell holds at most one block; otherwise the hints are scaled
        against ``options.columns``.

        Parameters
        ----------
        node : Table
            Table to render

        """
        caption = blankline + "Table: " + self._inlines(node.caption) if node.caption else empty
        header = [self._blocks(cell) for cell in node.header]
        rows = [[self._blocks(cell) for cell in row] for row in node.rows]

        is_simple = all(w == 0 for w in node.widths) and all(
            len(cell) <= 1 for row in [node.header, *node.rows] for cell in row
        )
        if is_simple:
            by_column = zip_longest(*[header, *rows], fillvalue=None)
            widths = [
                max((offset(cell) for cell in column if cell is not None), default=0) + RST_TABLE_PADDING
                for column in by_column
            ]
        else:
            widths = relative_column_widths(node.widths, self.options.columns)

        def make_row(cells: list[Doc]) -> Doc:
            blocks = [lblock(width, cell) for width, cell in zip(widths, cells)]
            row_height = max([1, *(height(block) for block in blocks)])
            start = lblock(len(RST_TABLE_PIPE_START), vcat([text(RST_TABLE_PIPE_START)] * row_height))
            middle = lblock(len(RST_TABLE_PIPE_MIDDLE), vcat([text(RST_TABLE_PIPE_MIDDLE)] * row_height))
            end = lblock(len(RST_TABLE_PIPE_END), vcat([text(RST_TABLE_PIPE_END)] * row_height))
            separated: list[Doc] = []
            for i, block in enumerate(blocks):
                if i:
                    separated.append(middle)
                separated.append(block)
            return hcat([start, *separated, end])

        def border(ch: str) -> Doc:
            inner = (ch + "+" + ch).join(ch * width for width in widths)
            return text("+" + ch + inner + ch + "+")

        body_rows: list[Doc] = []
        for i, row in enumerate(rows):
            if i:
                body_rows.append(border("-"))
            body_rows.append(make_row(row))

        head = empty if all(not cell for cell in node.header) else above(make_row(header), border("="))
        return vcat([border("-"), head, vcat(body_rows), border("-"), caption, blankline])

    def visit_null(self, node: Null) -> Doc:
        """Render a Null node (nothing)."""
        return empty

    # Inlines

    def visit_str(self, node: Str) -> Doc:
        """Render a Str node with RST escaping."""
        return text(escape_rst(node.content))

    def visit_space(self, node: Space) -> Doc:
        """Render a Space node as a breaking space."""
        return space

    def visit_line_break(self, node: LineBreak) -> Doc:
        """Render a LineBreak node.

        RST has no inline line break; paragraphs with breaks are rendered as
        line blocks by :meth:`visit_paragraph`.
        """
        return cr

    def visit_emphasis(self, node: Emphasis) -> Doc:
        """Render an Emphasis node."""
        return "*" + self._inlines(node.content) + "*"

    def visit_strong(self, node: Strong) -> Doc:
        """Render a Strong node."""
        return "**" + self._inlines(node.content) + "**"

    def visit_strikeout(self, node: Strikeout) -> Doc:
        """Render a Strikeout node."""
        return "[STRIKEOUT:" + self._inlines(node.content) + "]"

    def visit_superscript(self, node: Superscript) -> Doc:
        """Render a Superscript node."""
        return ":sup:`" + self._inlines(node.content) + "`"

    def visit_subscript(self, node: Subscript) -> Doc:
        """Render a Subscript node."""
        return ":sub:`" + self._inlines(node.content) + "`"

    def visit_small_caps(self, node: SmallCaps) -> Doc:
        return self._inlines(node.content)

    def visit_quoted(self, node: Quoted) -> Doc:
        """Render a Quoted node with curly quotes."""
        contents = self._inlines(node.content)
        if node.quote_type == "single":
            return "‘" + contents + "’"
        return "“" + contents + "”"

    def visit_cite(self, node: Cite) -> Doc:
        return self._inlines(node.content)

    def visit_code(self, node: Code) -> Doc:
        """Render a Code node; the text is not escaped."""
        return "``" + text(node.content) + "``"

    def visit_math(self, node: Math) -> Doc:
        """Render a Math node.

        Inline math uses the ``math`` role; display math uses the ``math``
        directive, with multi-line TeX nested under it.

        Parameters
        ----------
        node : Math
            Math to render

        """
        self._state.math_used = True
        if node.math_type == "inline":
            return ":math:`" + text(node.content) + "`"
        if "\n" in node.content:
            return vcat([blankline, text(".. math::"), blankline, nest(3, text(node.content)), blankline])
        return vcat([blankline, text(f".. math:: {node.content}"), blankline])

    def visit_raw_inline(self, node: RawInline) -> Doc:
        """Render a RawInline node; only RST content is kept."""
        if node.format in RST_RAW_FORMATS:
            return text(node.content)
        logger.debug("Dropping raw inline in format %r", node.format)
        return empty

    def visit_link(self, node: Link) -> Doc:
        """Render a Link node.

        A link whose text is its own address renders as a bare URL (without
        any ``mailto:``). A link around a single image becomes an image
        substitution with a target. With ``reference_links`` the link is
        registered for the reference table; a label already registered with a
        different target falls back to an anonymous embedded link.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = node.content
        url = node.url

        if len(content) == 1 and isinstance(content[0], Str):
            label = content[0].content
            is_mailto = url.startswith("mailto:")
            if url == escape_uri("mailto:" + label if is_mailto else label):
                return text(url[len("mailto:") :] if is_mailto else url)

        if len(content) == 1 and isinstance(content[0], Image):
            image = content[0]
            return "|" + self._register_image(image.alt, image.url, image.title, url) + "|"

        link_text = self._inlines(normalize_spaces(content))
        if self.options.reference_links:
            target = (url, node.title)
            registered = self._state.find_link(content)
            if registered is None:
                self._state.links.append((content, target))
                return "`" + link_text + "`_"
            if registered == target:
                return "`" + link_text + "`_"
            logger.debug("Link label reused with a different target %s; embedding the target", url)
        return "`" + link_text + " <" + text(url) + ">`__"

    def visit_image(self, node: Image) -> Doc:
        """Render an Image node as a substitution reference."""
        return "|" + self._register_image(node.alt, node.url, node.title, None) + "|"

    def visit_note(self, node: Note) -> Doc:
        """Render a Note node as a numbered footnote reference."""
        number = self._state.add_note(node.children)
        return text(f" [{number}]_")
