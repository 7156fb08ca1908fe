#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/utils/templates.py
"""Jinja2 template support for standalone output.

Standalone documents are produced by rendering the body first and then
substituting it, together with the rendered metadata, into a Jinja2 template.
The template comes from an inline string, a template file, or the packaged
default for the target format.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from docwriters.constants import DEFAULT_TEMPLATE_NAMES
from docwriters.exceptions import TemplateError

logger = logging.getLogger(__name__)


def _make_environment(loader: Any = None) -> Environment:
    # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
    return Environment(  # nosec B701
        loader=loader,
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def load_template(target: str, template: Optional[str] = None, template_file: Optional[str] = None) -> Template:
    """Resolve the template used for standalone output.

    Parameters
    ----------
    target : str
        Target format name, used to pick the packaged default
    template : str or None, default = None
        Inline Jinja2 template source; takes precedence over ``template_file``
    template_file : str or None, default = None
        Path to a Jinja2 template file

    Returns
    -------
    jinja2.Template
        Compiled template

    Raises
    ------
    TemplateError
        If the template cannot be found, read or compiled

    """
    try:
        if template is not None:
            logger.debug("Using inline template for %s output", target)
            return _make_environment().from_string(template)

        if template_file is not None:
            path = Path(template_file)
            logger.debug("Loading template file %s", path)
            env = _make_environment(FileSystemLoader(str(path.parent) if str(path.parent) else "."))
            return env.get_template(path.name)

        name = DEFAULT_TEMPLATE_NAMES.get(target)
        if name is None:
            raise TemplateError(f"No default template for target format '{target}'", template_name=target)
        logger.debug("Using default template %s", name)
        return _make_environment(PackageLoader("docwriters", "templates")).get_template(name)

    except TemplateNotFound as e:
        raise TemplateError(f"Template not found: {e.name}", template_name=str(e.name), original_error=e) from e
    except TemplateSyntaxError as e:
        raise TemplateError(
            f"Invalid template syntax at line {e.lineno}: {e.message}",
            template_name=e.name or template_file,
            original_error=e,
        ) from e
    except OSError as e:
        raise TemplateError(f"Cannot read template: {e}", template_name=template_file, original_error=e) from e


def render_template(variables: Mapping[str, Any], template: Template) -> str:
    """Render a compiled template with the given variables.

    Parameters
    ----------
    variables : Mapping[str, Any]
        Template variables
    template : jinja2.Template
        Compiled template from :func:`load_template`

    Returns
    -------
    str
        Rendered text

    Raises
    ------
    TemplateError
        If the template references an undefined variable

    """
    try:
        return template.render(dict(variables))
    except UndefinedError as e:
        raise TemplateError(f"Template variable error: {e.message}", template_name=template.name, original_error=e) from e
