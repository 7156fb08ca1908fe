"""Base classes for renderer options.

This module defines the foundation classes for the writer options shared by
every target format.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docwriters.constants import (
    DEFAULT_COLUMNS,
    DEFAULT_MAX_NESTING_DEPTH,
    DEFAULT_STANDALONE,
    DEFAULT_TAB_STOP,
    DEFAULT_TABLE_OF_CONTENTS,
    DEFAULT_TOC_DEPTH,
    DEFAULT_WRAP_TEXT,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    wrap_text : bool, default True
        Wrap output lines at ``columns``. When False, line length is unconstrained.
    columns : int, default 72
        Wrap column, also the text width that relative table column widths scale against.
    tab_stop : int, default 4
        Indentation width for nested blocks.
    table_of_contents : bool, default False
        Ask the standalone template for a table of contents.
    toc_depth : int, default 3
        Heading depth of the table of contents.
    standalone : bool, default False
        Wrap the body in a template (metadata, contents directive, ...).
    template : str or None, default None
        Inline Jinja2 template source used in standalone mode.
    template_file : str or None, default None
        Jinja2 template file used in standalone mode when ``template`` is not set.
        When neither is given the packaged default for the target is used.
    variables : Mapping[str, Any], default empty
        Extra template variables. Values computed by the writer take precedence.
    max_nesting_depth : int, default 64
        Deepest node nesting accepted before rendering fails with NestingDepthError.

    Notes
    -----
    Subclasses add format-specific options as frozen dataclass fields.

    """

    wrap_text: bool = field(
        default=DEFAULT_WRAP_TEXT,
        metadata={"help": "Wrap output lines at the configured column", "importance": "core"},
    )
    columns: int = field(
        default=DEFAULT_COLUMNS,
        metadata={"help": "Line width for wrapping and relative table widths", "type": int, "importance": "core"},
    )
    tab_stop: int = field(
        default=DEFAULT_TAB_STOP,
        metadata={"help": "Indentation width for nested blocks", "type": int, "importance": "advanced"},
    )
    table_of_contents: bool = field(
        default=DEFAULT_TABLE_OF_CONTENTS,
        metadata={"help": "Include a table of contents in standalone output", "importance": "core"},
    )
    toc_depth: int = field(
        default=DEFAULT_TOC_DEPTH,
        metadata={"help": "Heading depth of the table of contents", "type": int, "importance": "advanced"},
    )
    standalone: bool = field(
        default=DEFAULT_STANDALONE,
        metadata={"help": "Produce a complete document using a template", "importance": "core"},
    )
    template: str | None = field(
        default=None,
        metadata={"help": "Inline Jinja2 template for standalone output", "importance": "advanced"},
    )
    template_file: str | None = field(
        default=None,
        metadata={"help": "Path to a Jinja2 template for standalone output", "importance": "advanced"},
    )
    variables: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Extra template variables", "importance": "advanced"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum node nesting depth accepted", "type": int, "importance": "security"},
    )

    @property
    def wrap_width(self) -> int | None:
        """Column passed to the layout renderer, or None when wrapping is off."""
        return self.columns if self.wrap_text else None

    def __post_init__(self) -> None:
        """Validate numeric ranges for base renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.columns <= 0:
            raise ValueError(f"columns must be positive, got {self.columns}")
        if self.tab_stop <= 0:
            raise ValueError(f"tab_stop must be positive, got {self.tab_stop}")
        if self.toc_depth < 1:
            raise ValueError(f"toc_depth must be at least 1, got {self.toc_depth}")
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}")
