#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the docwriters renderers.

Each writer has a frozen Options dataclass derived from
:class:`~docwriters.options.base.BaseRendererOptions`.
"""

from __future__ import annotations

from docwriters.options.base import BaseRendererOptions, CloneFrozenMixin
from docwriters.options.pseudopod import PseudoPodRendererOptions
from docwriters.options.rst import RstRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "PseudoPodRendererOptions",
    "RstRendererOptions",
]
