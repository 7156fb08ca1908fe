#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the docwriters library.

This module centralizes the literal types, marker tables and default
configuration values used by the writers.

Constants are organized by category:
1. Type Definitions - Literal types shared by the AST and the options
2. General Writer Defaults - Wrapping, indentation and template settings
3. Format-Specific Constants - reStructuredText and PseudoPod tables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "right", "center", "default"]
QuoteType = Literal["single", "double"]
MathType = Literal["inline", "display"]
ListNumberStyle = Literal[
    "default",
    "example",
    "decimal",
    "lower_roman",
    "upper_roman",
    "lower_alpha",
    "upper_alpha",
]
ListNumberDelim = Literal["default", "period", "one_paren", "two_parens"]

# =============================================================================
# General Writer Defaults
# =============================================================================

DEFAULT_WRAP_TEXT = True
DEFAULT_COLUMNS = 72
DEFAULT_TAB_STOP = 4
DEFAULT_TABLE_OF_CONTENTS = False
DEFAULT_TOC_DEPTH = 3
DEFAULT_STANDALONE = False
DEFAULT_MAX_NESTING_DEPTH = 64

# Name of the packaged default template for each target, see docwriters/templates
DEFAULT_TEMPLATE_NAMES: dict[str, str] = {
    "rst": "default.rst.jinja2",
    "pseudopod": "default.pseudopod.jinja2",
}

# =============================================================================
# Format-Specific Constants - reStructuredText
# =============================================================================

DEFAULT_RST_REFERENCE_LINKS = False
DEFAULT_RST_LITERATE_HASKELL = False

# Underline glyph per heading level; levels beyond the table use a space
RST_HEADING_CHARS = "=-~^'"
RST_HORIZONTAL_RULE = "--------------"

# Title prefix marking a lone paragraph image as a figure
FIGURE_TITLE_PREFIX = "fig:"

# Characters that need a backslash in RST text (backslash handled first)
RST_SPECIAL_CHARS = "\\`|*_"

# Characters allowed directly after and before complex inline markup
RST_OK_AFTER_COMPLEX = "-.,:;!?\\/'\")]}>–—"
RST_OK_BEFORE_COMPLEX = "-:/'\"<([{–—"

# Opening/closing pairs that quote an inline construct when they straddle it
RST_SURROUND_PAIRS = frozenset({("'", "'"), ('"', '"'), ("<", ">"), ("[", "]"), ("{", "}")})

# Grid table cell separators
RST_TABLE_PIPE_START = "| "
RST_TABLE_PIPE_MIDDLE = " | "
RST_TABLE_PIPE_END = " |"
RST_TABLE_PADDING = 2

# =============================================================================
# Format-Specific Constants - PseudoPod
# =============================================================================

PSEUDOPOD_RAW_FORMATS = frozenset({"mediawiki", "html"})
RST_RAW_FORMATS = frozenset({"rst"})

PSEUDOPOD_HIGHLIGHT_LANGUAGES: tuple[str, ...] = (
    "actionscript", "ada", "apache", "applescript", "asm", "asp",
    "autoit", "bash", "blitzbasic", "bnf", "c", "c_mac", "caddcl", "cadlisp", "cfdg", "cfm",
    "cpp", "cpp-qt", "csharp", "css", "d", "delphi", "diff", "div", "dos", "eiffel", "fortran",
    "freebasic", "gml", "groovy", "html4strict", "idl", "ini", "inno", "io", "java", "java5",
    "javascript", "latex", "lisp", "lua", "matlab", "mirc", "mpasm", "mysql", "nsis", "objc",
    "ocaml", "ocaml-brief", "oobas", "oracle8", "pascal", "perl", "php", "php-brief", "plsql",
    "python", "qbasic", "rails", "reg", "robots", "ruby", "sas", "scheme", "sdlbasic",
    "smalltalk", "smarty", "sql", "tcl", "", "thinbasic", "tsql", "vb", "vbnet", "vhdl",
    "visualfoxpro", "winbatch", "xml", "xpp", "z80",
)  # fmt: skip

PSEUDOPOD_LIST_MARKERS: dict[str, str] = {
    "bullet": "*",
    "ordered": "#",
    "definition": ";",
}

PSEUDOPOD_ALIGNMENTS: dict[str, str] = {
    "left": "left",
    "right": "right",
    "center": "center",
    "default": "left",
}

PSEUDOPOD_REFERENCES_PLACEHOLDER = "\n<references />"
