"""docwriters - Render a document tree to reStructuredText and PseudoPod.

docwriters takes an immutable document AST (paragraphs, headings, lists,
tables, inline markup, links, images, footnotes) and serializes it to a
target markup dialect. Each writer tracks the side-state the target needs
(footnotes, reference tables, list nesting, math usage) and emits it where
the dialect expects it.

Supported Targets
-----------------
- **reStructuredText**: wrapped output, grid tables, reference links, image
  substitutions, numbered footnotes
- **PseudoPod**: POD commands and formatting codes with wiki-style lists and
  HTML tables

Requirements
------------
- Python 3.10+
- Jinja2 (standalone templates)

Examples
--------
    >>> from docwriters import render_document
    >>> from docwriters.ast import Document, Heading, Str
    >>> doc = Document(children=[Heading(level=2, content=[Str("Title")])])
    >>> render_document(doc, "pseudopod")
    '=head2 Title\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

from docwriters.api import render_document
from docwriters.ast import Document

from docwriters.exceptions import (
    DocWritersError,
    InvalidOptionsError,
    NestingDepthError,
    OutputWriteError,
    RenderingError,
    TemplateError,
    ValidationError,
)
from docwriters.logging_utils import configure_logging
from docwriters.options import BaseRendererOptions, PseudoPodRendererOptions, RstRendererOptions
from docwriters.renderers import PseudoPodRenderer, RestructuredTextRenderer

__version__ = "0.1.0"

__all__ = [
    "BaseRendererOptions",
    "DocWritersError",
    "Document",
    "InvalidOptionsError",
    "NestingDepthError",
    "OutputWriteError",
    "PseudoPodRenderer",
    "PseudoPodRendererOptions",
    "RenderingError",
    "RestructuredTextRenderer",
    "RstRendererOptions",
    "TemplateError",
    "ValidationError",
    "configure_logging",
    "render_document",
    "__version__",
]
