#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all writers inherit from.
The BaseRenderer provides the shared plumbing: options validation, a nesting
depth check on the incoming tree, standalone template wrapping and output
writing.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Mapping, Union

from docwriters.ast.nodes import Document, Node, get_node_children
from docwriters.exceptions import InvalidOptionsError, NestingDepthError
from docwriters.options.base import BaseRendererOptions
from docwriters.utils.io_utils import write_content
from docwriters.utils.templates import load_template, render_template

logger = logging.getLogger(__name__)


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Subclasses implement :meth:`render_to_string`; :meth:`render` writes the
    same text to a path or stream.

    Parameters
    ----------
    options : BaseRendererOptions
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from docwriters.renderers.base import BaseRenderer
        >>>
        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         self._check_nesting_depth(doc)
        ...         return "".join(block.accept(self) for block in doc.children)

    """

    def __init__(self, options: BaseRendererOptions):
        """Initialize the renderer with its configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        NestingDepthError
            If the tree is nested deeper than ``options.max_nesting_depth``
        TemplateError
            If standalone output is requested and the template cannot be used

        """
        pass

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to a file or stream.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    def _check_nesting_depth(self, doc: Document) -> None:
        """Fail fast on trees nested deeper than the configured limit.

        The walk uses an explicit stack so that arbitrarily deep input cannot
        exhaust the interpreter stack before the limit is detected. Metadata
        inlines (title, authors, date) are checked as children of the document.

        Raises
        ------
        NestingDepthError
            If any node sits deeper than ``options.max_nesting_depth``

        """
        max_depth = self.options.max_nesting_depth
        stack: list[tuple[Node, int]] = [(doc, 0)]
        meta = doc.meta
        for inlines in (meta.title, *meta.authors, meta.date):
            stack.extend((inline, 1) for inline in inlines)
        while stack:
            node, depth = stack.pop()
            if depth > max_depth:
                logger.debug("Rejecting document nested deeper than %d", max_depth)
                raise NestingDepthError(max_depth)
            stack.extend((child, depth + 1) for child in get_node_children(node))

    def _wrap_standalone(self, target: str, variables: Mapping[str, Any]) -> str:
        """Substitute the rendered document into the configured template.

        User variables from ``options.variables`` are merged underneath the
        writer-computed ``variables``, so writer values win on a name collision.
        """
        template = load_template(target, self.options.template, self.options.template_file)
        context = {**self.options.variables, **variables}
        return render_template(context, template)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Can be:
            - File path (str or Path), written as UTF-8
            - File-like object in binary mode (IO[bytes])
            - File-like object in text mode (IO[str])

        Raises
        ------
        OutputWriteError
            If output cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("Title\\n=====", buffer)
            >>> print(buffer.getvalue())
            Title
            =====

        """
        write_content(text, output)
