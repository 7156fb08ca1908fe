#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/renderers/list_classifier.py
"""Decide whether a list fits compact wiki list markup.

Compact markup (``*``, ``#``, ``;`` prefixes) can express an item made of one
inline run, optionally followed by one nested list. Anything else needs HTML
list tags.
"""

from __future__ import annotations

from docwriters.ast.nodes import Block, BulletList, DefinitionList, OrderedList
from docwriters.ast.utils import is_plain_or_paragraph

_LIST_TYPES = (BulletList, OrderedList, DefinitionList)


def is_simple_list(block: Block) -> bool:
    """Return True if ``block`` is a list expressible in compact markup.

    Ordered lists must also start at 1 with default or decimal numbering.
    Any block that is not a list is never simple.
    """
    if isinstance(block, BulletList):
        return all(is_simple_list_item(item) for item in block.items)
    if isinstance(block, OrderedList):
        return (
            block.start == 1
            and block.style in ("default", "decimal")
            and all(is_simple_list_item(item) for item in block.items)
        )
    if isinstance(block, DefinitionList):
        return all(is_simple_list_item(definition) for _, definitions in block.items for definition in definitions)
    return False


def is_simple_list_item(blocks: list[Block]) -> bool:
    """Return True if a list item (sequence of blocks) fits compact markup."""
    if not blocks:
        return True
    if len(blocks) == 1:
        only = blocks[0]
        return is_plain_or_paragraph(only) or (isinstance(only, _LIST_TYPES) and is_simple_list(only))
    if len(blocks) == 2 and is_plain_or_paragraph(blocks[0]):
        nested = blocks[1]
        return isinstance(nested, _LIST_TYPES) and is_simple_list(nested)
    return False
