#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/docwriters/renderers/__init__.py
"""AST renderers for converting documents to markup dialects.

Available renderers:
- RestructuredTextRenderer: Render to reStructuredText
- PseudoPodRenderer: Render to PseudoPod

Both take an immutable :class:`~docwriters.ast.Document`, keep their walk
state in a fresh :class:`~docwriters.renderers.state.WriterState` per call,
and can wrap the result in a Jinja2 template for standalone output.

Examples
--------
    >>> from docwriters.ast import BulletList, Document, Plain, Str
    >>> from docwriters.renderers import PseudoPodRenderer
    >>> doc = Document(children=[BulletList(items=[[Plain([Str("a")])], [Plain([Str("b")])]])])
    >>> PseudoPodRenderer().render_to_string(doc)
    '* a\\n* b\\n'

"""

from __future__ import annotations

from docwriters.renderers.base import BaseRenderer
from docwriters.renderers.pseudopod import PseudoPodRenderer
from docwriters.renderers.rst import RestructuredTextRenderer

__all__ = [
    "BaseRenderer",
    "PseudoPodRenderer",
    "RestructuredTextRenderer",
]
