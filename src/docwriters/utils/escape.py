#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/utils/escape.py
"""Format-specific text escaping utilities.

This module provides the escape functions the writers apply to literal text.
Code spans, math and raw passthrough content are never escaped.

"""

from __future__ import annotations

import re

from docwriters.constants import RST_SPECIAL_CHARS

_WHITESPACE_RE = re.compile(r"\s")


def escape_rst(text: str) -> str:
    r"""Escape special reStructuredText characters.

    RST uses backslash escaping for its inline markup characters: backslash,
    backtick, pipe, asterisk and underscore.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for RST

    Examples
    --------
        >>> escape_rst("Text with *emphasis* and `code`")
        'Text with \\*emphasis\\* and \\`code\\`'

    """
    if not text:
        return text

    return "".join("\\" + c if c in RST_SPECIAL_CHARS else c for c in text)


def escape_xml(text: str) -> str:
    """Escape XML special characters to entities.

    Ampersand, angle brackets and double quotes are replaced; single quotes
    are left alone.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with XML entities

    Examples
    --------
        >>> escape_xml('<a href="x">&</a>')
        '&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;'

    """
    if not text:
        return text

    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def escape_uri(text: str) -> str:
    """Percent-encode whitespace in a URI.

    All other characters, including non-ASCII ones, pass through unchanged.

    Parameters
    ----------
    text : str
        URI text

    Returns
    -------
    str
        URI with each whitespace character replaced by its UTF-8 percent encoding

    Examples
    --------
        >>> escape_uri("http://example.com/a b")
        'http://example.com/a%20b'

    """
    return _WHITESPACE_RE.sub(lambda m: "".join(f"%{b:02X}" for b in m.group(0).encode("utf-8")), text)
