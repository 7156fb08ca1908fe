"""The exported API function for rendering documents."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/docwriters/api.py
import logging
from dataclasses import fields
from typing import Any, Optional

from docwriters.ast.nodes import Document
from docwriters.exceptions import ValidationError
from docwriters.options.base import BaseRendererOptions
from docwriters.options.pseudopod import PseudoPodRendererOptions
from docwriters.options.rst import RstRendererOptions
from docwriters.renderers.base import BaseRenderer
from docwriters.renderers.pseudopod import PseudoPodRenderer
from docwriters.renderers.rst import RestructuredTextRenderer

logger = logging.getLogger(__name__)

# Target name -> (renderer class, options class)
RENDERERS: dict[str, tuple[type[BaseRenderer], type[BaseRendererOptions]]] = {
    "rst": (RestructuredTextRenderer, RstRendererOptions),
    "pseudopod": (PseudoPodRenderer, PseudoPodRendererOptions),
}

TARGET_ALIASES: dict[str, str] = {
    "restructuredtext": "rst",
    "pod": "pseudopod",
}


def _resolve_target(target: str) -> str:
    name = target.strip().lower()
    name = TARGET_ALIASES.get(name, name)
    if name not in RENDERERS:
        raise ValidationError(
            f"Unknown target format '{target}'. Supported targets: {', '.join(sorted(RENDERERS))}",
            parameter_name="target",
            parameter_value=target,
        )
    return name


def _create_options_from_kwargs(options_class: type[BaseRendererOptions], **kwargs: Any) -> BaseRendererOptions:
    """Create a renderer options object from keyword arguments.

    Unknown keyword arguments are logged and skipped.
    """
    option_names = {field.name for field in fields(options_class)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown renderer options: {missing}")
    return options_class(**valid_kwargs)


def render_document(
    doc: Document,
    target: str,
    options: Optional[BaseRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render a document tree to the given target markup.

    Parameters
    ----------
    doc : Document
        Document to render
    target : str
        Target format: ``"rst"`` (or ``"restructuredtext"``) or
        ``"pseudopod"`` (or ``"pod"``), case-insensitive
    options : BaseRendererOptions or None, default = None
        Options instance for the target's renderer. Keyword arguments, if
        given, override individual fields of it.
    **kwargs
        Individual option fields, e.g. ``columns=60`` or ``reference_links=True``

    Returns
    -------
    str
        Rendered text

    Raises
    ------
    ValidationError
        If the target is unknown
    InvalidOptionsError
        If ``options`` belongs to a different renderer
    TemplateError
        If standalone output is requested and the template cannot be used
    NestingDepthError
        If the document is nested deeper than ``max_nesting_depth``

    Examples
    --------
        >>> from docwriters.ast import Document, Paragraph, Strong, Str
        >>> render_document(Document(children=[Paragraph([Strong([Str("hi")])])]), "rst")
        '**hi**'

    """
    name = _resolve_target(target)
    renderer_class, options_class = RENDERERS[name]

    if options is not None and kwargs:
        final_options: Optional[BaseRendererOptions] = options.create_updated(**kwargs)
    elif kwargs:
        final_options = _create_options_from_kwargs(options_class, **kwargs)
    else:
        final_options = options

    renderer = renderer_class(final_options)  # type: ignore[call-arg]
    return renderer.render_to_string(doc)


__all__ = ["RENDERERS", "TARGET_ALIASES", "render_document"]
