#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_pseudopod_renderer.py
"""Unit tests for PseudoPod renderer.

Tests cover:
- Headings, paragraphs and figures
- Code blocks with and without highlighting
- Compact and tag-based lists
- HTML tables
- Inline formatting codes
- Footnotes and standalone output

"""

import pytest

from docwriters.ast import (
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
    Subscript,
    Superscript,
    Table,
)
from docwriters.exceptions import InvalidOptionsError
from docwriters.options import PseudoPodRendererOptions, RstRendererOptions
from docwriters.renderers.pseudopod import PseudoPodRenderer


def render_pod(*blocks, **options) -> str:
    doc = Document(children=list(blocks))
    return PseudoPodRenderer(PseudoPodRendererOptions(**options)).render_to_string(doc)


def plain(word: str) -> Plain:
    return Plain(content=[Str(word)])


@pytest.mark.unit
class TestBlocks:
    """Tests for block rendering."""

    def test_heading(self) -> None:
        assert render_pod(Heading(level=2, content=[Str("Title")])) == "=head2 Title\n"

    def test_paragraphs(self) -> None:
        rst = render_pod(Paragraph(content=[Str("a")]), Paragraph(content=[Str("b")]))
        assert rst == "a\n\nb\n"

    def test_text_is_xml_escaped(self) -> None:
        assert render_pod(plain("a<b&c")) == "a&lt;b&amp;c"

    def test_highlighted_code_block(self) -> None:
        pod = render_pod(CodeBlock(content="pass", classes=["python"]))
        assert pod == '<source lang="python">pass</source>'

    def test_first_known_language_wins(self) -> None:
        pod = render_pod(CodeBlock(content="x", classes=["numberLines", "ruby", "python"]))
        assert pod == '<source lang="ruby">x</source>'

    def test_code_block_with_unknown_class(self) -> None:
        assert render_pod(CodeBlock(content="x", classes=["foo"])) == '<pre class="foo">x</pre>'

    def test_code_block_without_class(self) -> None:
        assert render_pod(CodeBlock(content="a < b")) == "<pre>a &lt; b</pre>"

    def test_block_quote(self) -> None:
        assert render_pod(BlockQuote(children=[plain("q")])) == "<blockquote>q</blockquote>"

    def test_horizontal_rule(self) -> None:
        assert render_pod(HorizontalRule()) == "\n-----\n"

    def test_raw_blocks(self) -> None:
        assert render_pod(RawBlock(format="html", content="<br/>")) == "<br/>"
        assert render_pod(RawBlock(format="latex", content="\\newpage")) == ""

    def test_figure(self) -> None:
        pod = render_pod(Paragraph(content=[Image(alt=[Str("Cap")], url="f.png")]))
        assert pod == "[[Image:f.png|frame|none|alt=Cap]]\n"

    def test_figure_with_title(self) -> None:
        pod = render_pod(Paragraph(content=[Image(alt=[Str("Cap")], url="f.png", title="T")]))
        assert pod == "[[Image:f.png|frame|none|alt=T|caption Cap]]\n"

    def test_figure_without_alt(self) -> None:
        pod = render_pod(Paragraph(content=[Image(alt=[], url="f.png")]))
        assert pod == "[[Image:f.png|frame|none]]\n"


@pytest.mark.unit
class TestLists:
    """Tests for compact and tag-based lists."""

    def test_bullet_list(self) -> None:
        assert render_pod(BulletList(items=[[plain("a")], [plain("b")]])) == "* a\n* b\n"

    def test_paragraph_items_stay_compact(self) -> None:
        pod = render_pod(BulletList(items=[[Paragraph(content=[Str("a")])]]))
        assert pod == "* a\n"

    def test_ordered_list(self) -> None:
        assert render_pod(OrderedList(items=[[plain("a")], [plain("b")]])) == "# a\n# b\n"

    def test_nested_compact_list(self) -> None:
        nested = BulletList(items=[[plain("b")]])
        pod = render_pod(BulletList(items=[[plain("a"), nested]]))
        assert pod == "* a\n** b\n\n"

    def test_mixed_nesting_markers(self) -> None:
        nested = OrderedList(items=[[plain("b")]])
        pod = render_pod(BulletList(items=[[plain("a"), nested]]))
        assert "*# b" in pod

    def test_definition_list(self) -> None:
        pod = render_pod(DefinitionList(items=[([Str("t")], [[plain("d")]])]))
        assert pod == "; t\n: d\n"

    def test_complex_list_uses_tags(self) -> None:
        item = [Paragraph(content=[Str("a")]), Paragraph(content=[Str("b")])]
        pod = render_pod(BulletList(items=[item]))
        assert pod == "<ul>\n<li><p>a</p>\n<p>b</p></li></ul>\n"

    def test_tags_propagate_to_nested_lists(self) -> None:
        nested = BulletList(items=[[plain("c")]])
        item = [Paragraph(content=[Str("a")]), Paragraph(content=[Str("b")]), nested]
        pod = render_pod(BulletList(items=[item]))
        assert "<ul>\n<li>c</li></ul>\n" in pod
        assert "*" not in pod

    def test_tag_mode_ends_with_list(self) -> None:
        complex_list = BulletList(items=[[Paragraph(content=[Str("a")]), Paragraph(content=[Str("b")])]])
        pod = render_pod(complex_list, BulletList(items=[[plain("c")]]))
        assert pod.endswith("* c\n")

    def test_ordered_list_with_start(self) -> None:
        pod = render_pod(OrderedList(items=[[plain("a")], [plain("b")]], start=3))
        assert pod == '<ol start="3">\n<li>a</li>\n<li>b</li></ol>\n'

    def test_ordered_list_with_style(self) -> None:
        pod = render_pod(OrderedList(items=[[plain("a")]], style="lower_roman"))
        assert pod == '<ol style="list-style-type: lower-roman;">\n<li>a</li></ol>\n'

    def test_decimal_list_is_compact(self) -> None:
        assert render_pod(OrderedList(items=[[plain("a")]], style="decimal")) == "# a\n"

    def test_complex_definition_list(self) -> None:
        definition = [Paragraph(content=[Str("x")]), Paragraph(content=[Str("y")])]
        pod = render_pod(DefinitionList(items=[([Str("t")], [definition])]))
        assert pod == "<dl>\n<dt>t</dt>\n<dd><p>x</p>\n<p>y</p></dd></dl>\n"


@pytest.mark.unit
class TestTables:
    """Tests for HTML table rendering."""

    def test_table(self) -> None:
        table = Table(
            caption=[Str("Cap")],
            alignments=["right", "default"],
            widths=[0.5, 0.5],
            header=[[plain("A")], [plain("B")]],
            rows=[[[plain("x")], [plain("y")]], [[plain("z")], [plain("w")]]],
        )
        expected = (
            "<table>\n"
            "<caption>Cap</caption>\n"
            '<col width="50%" />\n'
            '<col width="50%" />\n'
            "<thead>\n"
            '<tr class="header">\n'
            '<th align="right">A</th>\n'
            '<th align="left">B</th>\n'
            "</tr>\n"
            "</thead>\n"
            "<tbody>\n"
            '<tr class="odd">\n'
            '<td align="right">x</td>\n'
            '<td align="left">y</td>\n'
            "</tr>\n"
            '<tr class="even">\n'
            '<td align="right">z</td>\n'
            '<td align="left">w</td>\n'
            "</tr>\n"
            "</tbody>\n"
            "</table>\n"
        )
        assert render_pod(table) == expected

    def test_table_without_header_or_widths(self) -> None:
        table = Table(
            alignments=["center"],
            widths=[0.0],
            header=[[]],
            rows=[[[plain("x")]]],
        )
        pod = render_pod(table)
        assert "<thead>" not in pod
        assert "<col" not in pod
        assert '<td align="center">x</td>' in pod


@pytest.mark.unit
class TestInlines:
    """Tests for inline formatting codes."""

    @pytest.mark.parametrize(
        "inline,expected",
        [
            (Emphasis(content=[Str("a")]), "B<a>"),
            (Strong(content=[Str("a")]), "B<a>"),
            (Strikeout(content=[Str("a")]), "a"),
            (Superscript(content=[Str("2")]), "G<2>"),
            (Subscript(content=[Str("2")]), "H<2>"),
            (Cite(content=[Str("c")]), "T<c>"),
            (Code(content="a<b"), "C<< a&lt;b >>"),
            (Math(math_type="inline", content="x<y"), "<math>x<y</math>"),
            (Quoted(quote_type="double", content=[Str("q")]), "“q”"),
            (Link(content=[Str("x")], url="http://e.com"), "L<x|http://e.com>"),
            (Image(alt=[Str("pic")], url="a.png"), "[[Image:a.png|pic]]"),
            (Image(alt=[Str("pic")], url="a.png", title="T"), "[[Image:a.png|T]]"),
            (RawInline(format="mediawiki", content="''x''"), "''x''"),
            (RawInline(format="latex", content="\\x"), ""),
        ],
    )
    def test_inline(self, inline, expected) -> None:
        assert render_pod(Plain(content=[inline])) == expected

    def test_space_and_line_break(self) -> None:
        assert render_pod(Plain(content=[Str("a"), Space(), Str("b"), LineBreak(), Str("c")])) == "a b\nc"


@pytest.mark.unit
class TestNotesAndStandalone:
    """Tests for footnotes and standalone output."""

    def test_note(self) -> None:
        pod = render_pod(Paragraph(content=[Str("a"), Note(children=[plain("n")])]))
        assert pod == "a<ref>n</ref>\n\n<references />"

    def test_no_references_without_notes(self) -> None:
        assert "<references />" not in render_pod(Paragraph(content=[Str("a")]))

    def test_standalone_with_toc(self) -> None:
        pod = render_pod(plain("x"), standalone=True, table_of_contents=True)
        assert pod.startswith("__TOC__\n\n")
        assert pod.endswith("x\n")

    def test_standalone_without_toc(self) -> None:
        assert render_pod(plain("x"), standalone=True) == "x\n"

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            PseudoPodRenderer(RstRendererOptions())  # type: ignore[arg-type]

    def test_renderer_reuse(self) -> None:
        renderer = PseudoPodRenderer()
        with_note = Document(children=[Paragraph(content=[Str("a"), Note(children=[plain("n")])])])
        without_note = Document(children=[plain("b")])
        renderer.render_to_string(with_note)
        assert renderer.render_to_string(without_note) == "b"
