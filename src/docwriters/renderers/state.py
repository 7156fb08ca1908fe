#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/renderers/state.py
"""Per-conversion writer state.

A :class:`WriterState` is created at the start of each ``render_to_string``
call and dropped once the output has been assembled. Nothing in it survives
from one document to the next, so a renderer instance may be reused, and
separate renderer instances may run concurrently.

Collections are append-only during the walk. The position of an entry is its
identifier: footnote ``[3]_`` is ``notes[2]``.

"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Generator, Optional

from docwriters.ast.nodes import Block, Inline

LinkTarget = tuple[str, str]
ImageTarget = tuple[str, str, Optional[str]]


@dataclass
class WriterState:
    """Mutable side-state threaded through one document walk.

    Attributes
    ----------
    notes : list of list of Block
        Footnote bodies in encounter order (structured-text writer)
    links : list of (label, (url, title))
        Registered reference links in encounter order
    images : list of (label, (src, title, target))
        Registered image substitutions in encounter order
    math_used : bool
        Set once any Math inline is rendered
    notes_seen : bool
        Set once any footnote is rendered (wiki writer)
    list_markers : str
        Compact list marker stack, one glyph per nesting level, e.g. ``"*#"``
    use_tags : bool
        True while rendering inside a list that needs HTML tags

    """

    notes: list[list[Block]] = field(default_factory=list)
    links: list[tuple[list[Inline], LinkTarget]] = field(default_factory=list)
    images: list[tuple[list[Inline], ImageTarget]] = field(default_factory=list)
    math_used: bool = False
    notes_seen: bool = False
    list_markers: str = ""
    use_tags: bool = False

    def add_note(self, blocks: list[Block]) -> int:
        """Append a footnote body and return its 1-based number."""
        self.notes.append(blocks)
        return len(self.notes)

    def find_link(self, label: list[Inline]) -> Optional[LinkTarget]:
        """Return the target registered for ``label``, if any."""
        for registered, target in reversed(self.links):
            if registered == label:
                return target
        return None

    def find_image(self, alt: list[Inline]) -> Optional[ImageTarget]:
        """Return the most recent target registered under ``alt``, if any."""
        for registered, target in reversed(self.images):
            if registered == alt:
                return target
        return None


@contextmanager
def tag_mode(state: WriterState, enabled: bool = True) -> Generator[None, None, None]:
    """Set ``use_tags`` for the duration of a subtree, then restore the caller's value."""
    saved = state.use_tags
    state.use_tags = enabled
    try:
        yield
    finally:
        state.use_tags = saved


@contextmanager
def list_level(state: WriterState, marker: str) -> Generator[None, None, None]:
    """Push a compact list marker for the duration of a list."""
    saved = state.list_markers
    state.list_markers = saved + marker
    try:
        yield
    finally:
        state.list_markers = saved
