#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_rst_renderer.py
"""Unit tests for reStructuredText renderer.

Tests cover:
- Rendering headings with underlines
- Rendering inline formatting and escape separators
- Rendering lists (bullet, enumerated, definition)
- Rendering grid tables
- Rendering code blocks, block quotes, raw blocks and math
- Links, reference links and image substitutions
- Footnotes
- Standalone output and configuration options

"""

import pytest

from docwriters.ast import (
    BlockQuote,
    BulletList,
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
    Meta,
    Note,
    OrderedList,
    Paragraph,
    Plain,
    Quoted,
    RawBlock,
    RawInline,
    Space,
    Str,
    Strikeout,
    Strong,
    Superscript,
    Table,
)
from docwriters.exceptions import InvalidOptionsError, NestingDepthError, TemplateError
from docwriters.options import PseudoPodRendererOptions, RstRendererOptions
from docwriters.renderers.rst import RestructuredTextRenderer


def render_rst(*blocks, meta=None, **options) -> str:
    doc = Document(children=list(blocks), meta=meta or Meta())
    return RestructuredTextRenderer(RstRendererOptions(**options)).render_to_string(doc)


def plain(word: str) -> Plain:
    return Plain(content=[Str(word)])


@pytest.mark.unit
class TestBasicRendering:
    """Tests for basic RST rendering."""

    def test_strong_paragraph(self) -> None:
        assert render_rst(Paragraph(content=[Strong(content=[Str("hi")])])) == "**hi**"

    def test_paragraphs_separated_by_blank_line(self) -> None:
        rst = render_rst(
            Paragraph(content=[Strong(content=[Str("hi")])]),
            Paragraph(content=[Str("next")]),
        )
        assert rst == "**hi**\n\nnext"

    def test_empty_document(self) -> None:
        assert render_rst() == ""

    def test_text_escaping(self) -> None:
        assert render_rst(Paragraph(content=[Str("a*b_c`d|e\\f")])) == "a\\*b\\_c\\`d\\|e\\\\f"

    def test_wrapping(self) -> None:
        words = "lorem ipsum dolor sit amet consectetur adipiscing elit sed do".split()
        content = []
        for word in words:
            if content:
                content.append(Space())
            content.append(Str(word))
        rst = render_rst(Paragraph(content=content), columns=20)
        lines = rst.split("\n")
        assert len(lines) > 1
        assert all(len(line) <= 20 for line in lines)
        assert " ".join(lines).split() == words

    def test_no_wrap(self) -> None:
        content = [Str("word"), Space()] * 40 + [Str("end")]
        rst = render_rst(Paragraph(content=content), wrap_text=False)
        assert "\n" not in rst


@pytest.mark.unit
class TestHeadings:
    """Tests for heading rendering."""

    def test_level_one(self) -> None:
        assert render_rst(Heading(level=1, content=[Str("Title")])) == "Title\n====="

    def test_level_two(self) -> None:
        assert render_rst(Heading(level=2, content=[Str("Sub")])) == "Sub\n---"

    def test_underline_matches_content_width(self) -> None:
        rst = render_rst(Heading(level=3, content=[Str("Two"), Space(), Emphasis(content=[Str("words")])]))
        title, underline = rst.split("\n")
        assert title == "Two *words*"
        assert underline == "~" * len(title)

    def test_level_beyond_five_uses_spaces(self) -> None:
        rst = render_rst(Heading(level=6, content=[Str("Deep")]))
        assert rst.split("\n")[1] == "    "

    def test_heading_is_not_wrapped(self) -> None:
        content = [Str("long"), Space()] * 20 + [Str("end")]
        rst = render_rst(Heading(level=1, content=content), columns=20)
        assert len(rst.split("\n")) == 2

    def test_heading_followed_by_paragraph(self) -> None:
        rst = render_rst(Heading(level=1, content=[Str("T")]), Paragraph(content=[Str("body")]))
        assert rst == "T\n=\n\nbody"


@pytest.mark.unit
class TestInlineFormatting:
    """Tests for inline markup."""

    @pytest.mark.parametrize(
        "inline,expected",
        [
            (Emphasis(content=[Str("a")]), "*a*"),
            (Strong(content=[Str("a")]), "**a**"),
            (Strikeout(content=[Str("a")]), "[STRIKEOUT:a]"),
            (Superscript(content=[Str("2")]), ":sup:`2`"),
            (Code(content="x*y"), "``x*y``"),
            (Quoted(quote_type="double", content=[Str("q")]), "“q”"),
            (Quoted(quote_type="single", content=[Str("q")]), "‘q’"),
            (Math(math_type="inline", content="x^2"), ":math:`x^2`"),
            (RawInline(format="rst", content=":kbd:`C`"), ":kbd:`C`"),
        ],
    )
    def test_inline(self, inline, expected) -> None:
        assert render_rst(Plain(content=[inline])) == expected

    def test_escape_after_complex_inline(self) -> None:
        rst = render_rst(Plain(content=[Strong(content=[Str("a")]), Str("b")]))
        assert rst == "**a**\\ b"

    def test_escape_before_complex_inline(self) -> None:
        rst = render_rst(Plain(content=[Str("a"), Emphasis(content=[Str("b")])]))
        assert rst == "a\\ *b*"

    def test_no_escape_with_punctuation(self) -> None:
        rst = render_rst(Plain(content=[Str("("), Emphasis(content=[Str("b")]), Str(").")]))
        assert rst == "(*b*)."

    def test_escape_inside_quote_pair(self) -> None:
        rst = render_rst(Plain(content=[Str("'"), Emphasis(content=[Str("b")]), Str("'")]))
        assert rst == "'*b*\\ '"

    def test_other_raw_inline_dropped(self) -> None:
        rst = render_rst(Plain(content=[Str("a"), Space(), RawInline(format="html", content="<br>"), Space(), Str("b")]))
        assert rst == "a b"


@pytest.mark.unit
class TestBlocks:
    """Tests for block rendering."""

    def test_code_block(self) -> None:
        rst = render_rst(CodeBlock(content="x = 1\ny = 2"))
        assert rst == "::\n\n    x = 1\n    y = 2"

    def test_code_block_tab_stop(self) -> None:
        rst = render_rst(CodeBlock(content="x"), tab_stop=2)
        assert rst == "::\n\n  x"

    def test_literate_haskell(self) -> None:
        block = CodeBlock(content="main = x", classes=["haskell", "literate"])
        assert render_rst(block, literate_haskell=True) == "> main = x"
        assert render_rst(block) == "::\n\n    main = x"

    def test_block_quote(self) -> None:
        rst = render_rst(BlockQuote(children=[Paragraph(content=[Str("q")])]))
        assert rst == "    q"

    def test_horizontal_rule(self) -> None:
        rst = render_rst(Paragraph(content=[Str("a")]), HorizontalRule(), Paragraph(content=[Str("b")]))
        assert rst == "a\n\n--------------\n\nb"

    def test_rst_raw_block_passes_through(self) -> None:
        assert render_rst(RawBlock(format="rst", content=".. note:: x")) == ".. note:: x"

    def test_other_raw_block_uses_directive(self) -> None:
        rst = render_rst(RawBlock(format="html", content="<b>x</b>"))
        assert rst == ".. raw:: html\n\n   <b>x</b>"

    def test_line_block(self) -> None:
        rst = render_rst(Paragraph(content=[Str("a"), LineBreak(), Str("b")]))
        assert rst == "| a\n| b"

    def test_figure(self) -> None:
        image = Image(alt=[Str("Cap")], url="f.png", title="fig:")
        rst = render_rst(Paragraph(content=[image]))
        assert rst == ".. figure:: f.png\n   :alt: Cap\n\n   Cap"

    def test_figure_with_title_as_alt(self) -> None:
        image = Image(alt=[Str("Cap")], url="f.png", title="fig:Alt text")
        rst = render_rst(Paragraph(content=[image]))
        assert ":alt: Alt text" in rst

    def test_display_math(self) -> None:
        rst = render_rst(Paragraph(content=[Math(math_type="display", content="x=1")]))
        assert rst == ".. math:: x=1"

    def test_multiline_display_math(self) -> None:
        rst = render_rst(Paragraph(content=[Math(math_type="display", content="a\nb")]))
        assert rst == ".. math::\n\n   a\n   b"


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_bullet_list(self) -> None:
        rst = render_rst(BulletList(items=[[plain("a")], [plain("b")]]))
        assert rst == "-  a\n-  b"

    def test_list_after_paragraph_has_blank_line(self) -> None:
        rst = render_rst(Paragraph(content=[Str("p")]), BulletList(items=[[plain("a")]]))
        assert rst == "p\n\n-  a"

    def test_ordered_list_default(self) -> None:
        rst = render_rst(OrderedList(items=[[plain("a")], [plain("b")]]))
        assert rst == "#. a\n#. b"

    def test_ordered_list_explicit_markers_are_padded(self) -> None:
        rst = render_rst(
            OrderedList(items=[[plain("a")], [plain("b")]], start=3, style="lower_roman", delimiter="one_paren")
        )
        assert rst == "iii) a\niv)  b"

    def test_ordered_list_two_parens(self) -> None:
        rst = render_rst(OrderedList(items=[[plain("a")]], style="upper_alpha", delimiter="two_parens"))
        assert rst == "(A) a"

    def test_multi_paragraph_item_is_indented(self) -> None:
        item = [Paragraph(content=[Str("one")]), Paragraph(content=[Str("two")])]
        rst = render_rst(BulletList(items=[item]))
        assert rst == "-  one\n\n   two"

    def test_definition_list(self) -> None:
        rst = render_rst(DefinitionList(items=[([Str("term")], [[plain("def")]])]))
        assert rst == "term\n    def"


@pytest.mark.unit
class TestTables:
    """Tests for grid table rendering."""

    def _cell(self, word: str) -> list:
        return [plain(word)]

    def test_simple_table_widths_from_content(self) -> None:
        table = Table(
            alignments=["default", "default"],
            widths=[0.0, 0.0],
            header=[self._cell("A"), self._cell("Bb")],
            rows=[[self._cell("x"), self._cell("yyy")]],
        )
        assert render_rst(table) == (
            "+-----+-------+\n"
            "| A   | Bb    |\n"
            "+=====+=======+\n"
            "| x   | yyy   |\n"
            "+-----+-------+"
        )

    def test_rows_separated_by_borders(self) -> None:
        table = Table(
            alignments=["default"],
            widths=[0.0],
            header=[self._cell("H")],
            rows=[[self._cell("a")], [self._cell("b")]],
        )
        lines = render_rst(table).split("\n")
        assert lines == ["+-----+", "| H   |", "+=====+", "| a   |", "+-----+", "| b   |", "+-----+"]

    def test_empty_header_omitted(self) -> None:
        table = Table(alignments=["default"], widths=[0.0], header=[[]], rows=[[self._cell("a")]])
        rst = render_rst(table)
        assert "=" not in rst
        assert rst == "+-----+\n| a   |\n+-----+"

    def test_relative_widths(self) -> None:
        table = Table(
            alignments=["default", "default"],
            widths=[0.25, 0.5],
            header=[self._cell("A"), self._cell("B")],
            rows=[[self._cell("x"), self._cell("y")]],
        )
        first = render_rst(table, columns=40).split("\n")[0]
        assert first == "+-" + "-" * 10 + "-+-" + "-" * 20 + "-+"

    def test_caption(self) -> None:
        table = Table(
            caption=[Str("Results")],
            alignments=["default"],
            widths=[0.0],
            header=[self._cell("H")],
            rows=[[self._cell("a")]],
        )
        assert render_rst(table).endswith("+-----+\n\nTable: Results")

    def test_multiline_cell(self) -> None:
        table = Table(
            alignments=["default", "default"],
            widths=[0.0, 0.0],
            header=[],
            rows=[[[Plain(content=[Str("a"), LineBreak(), Str("b")])], self._cell("c")]],
        )
        lines = render_rst(table).split("\n")
        assert lines[1] == "| a   | c   |"
        assert lines[2] == "| b   |     |"


@pytest.mark.unit
class TestLinksAndImages:
    """Tests for links, reference tables and image substitutions."""

    def test_inline_link(self) -> None:
        rst = render_rst(Plain(content=[Link(content=[Str("x")], url="http://e.com")]))
        assert rst == "`x <http://e.com>`__"

    def test_autolink(self) -> None:
        rst = render_rst(Plain(content=[Link(content=[Str("http://e.com")], url="http://e.com")]))
        assert rst == "http://e.com"

    def test_mailto_autolink(self) -> None:
        rst = render_rst(Plain(content=[Link(content=[Str("a@b.org")], url="mailto:a@b.org")]))
        assert rst == "a@b.org"

    def test_reference_links_deduplicated(self) -> None:
        link = Link(content=[Str("x")], url="http://e.com")
        rst = render_rst(Paragraph(content=[link, Space(), link]), reference_links=True)
        assert rst == "`x`_ `x`_\n\n.. _x: http://e.com"
        assert rst.count(".. _x:") == 1

    def test_reference_link_conflict_falls_back_to_inline(self) -> None:
        first = Link(content=[Str("x")], url="http://a.com")
        second = Link(content=[Str("x")], url="http://b.com")
        rst = render_rst(Paragraph(content=[first, Space(), second]), reference_links=True)
        assert rst == "`x`_ `x <http://b.com>`__\n\n.. _x: http://a.com"

    def test_reference_label_with_colon_is_quoted(self) -> None:
        link = Link(content=[Str("a:b")], url="http://e.com")
        rst = render_rst(Plain(content=[link]), reference_links=True)
        assert rst.endswith(".. _`a:b`: http://e.com")

    def test_image_substitution(self) -> None:
        rst = render_rst(Plain(content=[Image(alt=[Str("logo")], url="l.png")]))
        assert rst == "|logo|\n\n.. |logo| image:: l.png"

    def test_image_without_alt_gets_synthetic_label(self) -> None:
        rst = render_rst(Plain(content=[Image(alt=[], url="l.png")]))
        assert rst == "|image0|\n\n.. |image0| image:: l.png"

    def test_identical_images_registered_once(self) -> None:
        image = Image(alt=[Str("logo")], url="l.png")
        rst = render_rst(Paragraph(content=[image, Space(), image]))
        assert rst.count("image:: l.png") == 1

    def test_linked_image(self) -> None:
        link = Link(content=[Image(alt=[Str("logo")], url="l.png")], url="http://x.org")
        rst = render_rst(Plain(content=[link]))
        assert rst == "|logo|\n\n.. |logo| image:: l.png\n   :target: http://x.org"

    def test_reference_order(self) -> None:
        rst = render_rst(
            Paragraph(
                content=[
                    Image(alt=[Str("pic")], url="p.png"),
                    Space(),
                    Link(content=[Str("site")], url="http://s.org"),
                    Note(children=[Paragraph(content=[Str("note")])]),
                ]
            ),
            reference_links=True,
        )
        notes = rst.index(".. [1]")
        links = rst.index(".. _site:")
        images = rst.index(".. |pic|")
        assert notes < links < images


@pytest.mark.unit
class TestFootnotes:
    """Tests for footnote rendering."""

    def test_footnotes_numbered_in_order(self) -> None:
        rst = render_rst(
            Paragraph(
                content=[
                    Str("a"),
                    Note(children=[Paragraph(content=[Str("n1")])]),
                    Space(),
                    Str("b"),
                    Note(children=[Paragraph(content=[Str("n2")])]),
                ]
            )
        )
        assert rst == "a [1]_ b [2]_\n\n.. [1]\n   n1\n\n.. [2]\n   n2"

    def test_link_inside_note_is_registered(self) -> None:
        link = Link(content=[Str("ref")], url="http://r.org")
        note = Note(children=[Paragraph(content=[link])])
        rst = render_rst(Paragraph(content=[Str("a"), note]), reference_links=True)
        assert rst.endswith(".. [1]\n   `ref`_\n\n.. _ref: http://r.org")


@pytest.mark.unit
class TestStandalone:
    """Tests for standalone output."""

    def test_default_template(self) -> None:
        meta = Meta(title=[Str("My Doc")], authors=[[Str("Ann")]], date=[Str("2024")])
        rst = render_rst(Paragraph(content=[Str("body text")]), meta=meta, standalone=True)
        assert rst.startswith("======\nMy Doc\n======\n")
        assert ":Author: Ann" in rst
        assert ":Date: 2024" in rst
        assert rst.rstrip().endswith("body text")

    def test_table_of_contents(self) -> None:
        rst = render_rst(Paragraph(content=[Str("x")]), standalone=True, table_of_contents=True, toc_depth=2)
        assert ".. contents::" in rst
        assert ":depth: 2" in rst

    def test_math_role_declared_only_when_used(self) -> None:
        with_math = render_rst(Plain(content=[Math(math_type="inline", content="x")]), standalone=True)
        without_math = render_rst(Plain(content=[Str("x")]), standalone=True)
        assert ".. role:: math(raw)" in with_math
        assert ".. role:: math(raw)" not in without_math

    def test_custom_template_and_variables(self) -> None:
        rst = render_rst(
            Plain(content=[Str("x")]),
            standalone=True,
            template="{{ project }}: {{ body }}",
            variables={"project": "Demo"},
        )
        assert rst == "Demo: x"

    def test_writer_variables_take_precedence(self) -> None:
        rst = render_rst(
            Plain(content=[Str("x")]),
            standalone=True,
            template="{{ body }}",
            variables={"body": "overridden"},
        )
        assert rst == "x"

    def test_undefined_variable_raises(self) -> None:
        with pytest.raises(TemplateError):
            render_rst(Plain(content=[Str("x")]), standalone=True, template="{{ missing }}")

    def test_template_ignored_when_not_standalone(self) -> None:
        assert render_rst(Plain(content=[Str("x")]), template="{{ missing }}") == "x"


@pytest.mark.unit
class TestRendererBehaviour:
    """Tests for renderer plumbing."""

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            RestructuredTextRenderer(PseudoPodRendererOptions())  # type: ignore[arg-type]

    def test_nesting_depth_limit(self) -> None:
        block = Paragraph(content=[Str("deep")])
        for _ in range(10):
            block = BlockQuote(children=[block])
        renderer = RestructuredTextRenderer(RstRendererOptions(max_nesting_depth=5))
        with pytest.raises(NestingDepthError):
            renderer.render_to_string(Document(children=[block]))

    def test_body_has_no_trailing_blank_line(self) -> None:
        renderer = RestructuredTextRenderer()
        quote = Document(children=[BlockQuote(children=[Paragraph(content=[Str("quoted")])])])
        noted = Document(children=[Paragraph(content=[Str("a"), Note(children=[Plain(content=[Str("n")])])])])
        bodies = [renderer.render_to_string(quote), renderer.render_to_string(noted)]
        for body in bodies:
            assert not body.endswith("\n")
            assert not body.endswith(" ")
        joined = "\n\n".join(bodies)
        assert "quoted\n\na" in joined

    def test_state_reset_between_documents(self) -> None:
        renderer = RestructuredTextRenderer(RstRendererOptions(reference_links=True))
        doc = Document(children=[Paragraph(content=[Note(children=[Plain(content=[Str("n")])])])])
        first = renderer.render_to_string(doc)
        second = renderer.render_to_string(doc)
        assert first == second
        assert "[2]" not in second

    def test_render_to_file(self, tmp_path) -> None:
        doc = Document(children=[Heading(level=1, content=[Str("Title")])])
        renderer = RestructuredTextRenderer()
        output = tmp_path / "out.rst"
        renderer.render(doc, output)
        assert output.read_text(encoding="utf-8") == renderer.render_to_string(doc)
