#  Copyright (c) 2025 Tom Villani, Ph.D.

# docwriters/options/pseudopod.py
"""Configuration options for PseudoPod rendering."""

from __future__ import annotations

from dataclasses import dataclass

from docwriters.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PseudoPodRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-PseudoPod rendering.

    PseudoPod output is not wrapped: ``wrap_text``, ``columns`` and
    ``tab_stop`` have no effect. Standalone output uses ``table_of_contents``,
    ``template``/``template_file`` and ``variables``.

    Notes
    -----
    **Lists:**
        Lists whose items are single inline runs, optionally followed by one
        nested simple list, use compact ``*``/``#``/``;`` markers. Any other
        list switches that list, and every list nested in it, to HTML tags.

    **Code Blocks:**
        A code block whose first recognised class is on the highlighting
        whitelist renders as ``<source lang="...">``; any other code block
        renders as ``<pre>``.

    """
