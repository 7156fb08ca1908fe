#  Copyright (c) 2025 Tom Villani, Ph.D.

# docwriters/options/rst.py
"""Configuration options for reStructuredText rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from docwriters.constants import DEFAULT_RST_LITERATE_HASKELL, DEFAULT_RST_REFERENCE_LINKS
from docwriters.options.base import BaseRendererOptions


@dataclass(frozen=True)
class RstRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-reStructuredText rendering.

    Parameters
    ----------
    reference_links : bool, default False
        Render links as ```text`_`` references collected into a reference
        table at the end of the document. When False, links are embedded as
        ```text <url>`__``.
    literate_haskell : bool, default False
        Render code blocks carrying both the ``haskell`` and ``literate``
        classes with bird tracks (``> ``) instead of a literal block.

    Notes
    -----
    **Text Escaping:**
        Backslash, backtick, pipe, asterisk and underscore are backslash-escaped
        in text. Code spans and math are emitted verbatim.

    **Reference Links:**
        A link whose label and target repeat an earlier link reuses its
        reference. A link reusing an earlier label with a different target
        falls back to an anonymous embedded link so the two targets do not
        collide.

    """

    reference_links: bool = field(
        default=DEFAULT_RST_REFERENCE_LINKS,
        metadata={"help": "Use reference-style links with a trailing reference table", "importance": "core"},
    )
    literate_haskell: bool = field(
        default=DEFAULT_RST_LITERATE_HASKELL,
        metadata={"help": "Render literate Haskell code blocks with bird tracks", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
