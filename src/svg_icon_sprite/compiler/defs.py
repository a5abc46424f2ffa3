"""Shared definition extraction.

Pulls every ``<defs>`` block out of an icon body so the sprite emitter can
collect all definitions in one top-level block. Blocks are found at any
depth; a ``<defs>`` nested inside another one travels with its outer block.
"""

from typing import NamedTuple

from svg_icon_sprite.constants import DEFS_TAG
from svg_icon_sprite.utils.markup import (
    inner_markup,
    iter_with_parent,
    local_name,
    parse_fragment,
    remove_child,
)


class DefsExtraction(NamedTuple):
    """Result of splitting an icon body into definitions and drawing."""

    defs_markup: str
    markup_without_defs: str


def extract_defs(markup: str) -> DefsExtraction:
    """Split definition blocks out of an icon body.

    Inner contents of the blocks are trimmed and joined with newlines in
    document order; empty blocks contribute nothing. Running the extraction
    again on ``markup_without_defs`` finds no further blocks and returns it
    unchanged.

    Args:
        markup: Icon body (children of the root ``<svg>``).

    Returns:
        The joined definitions and the body with every block removed.

    Raises:
        xml.etree.ElementTree.ParseError: If the body is not well-formed.
    """
    container = parse_fragment(markup)
    blocks = [
        (parent, child)
        for parent, child in iter_with_parent(container, skip=frozenset({DEFS_TAG}))
        if local_name(child.tag) == DEFS_TAG
    ]
    if not blocks:
        return DefsExtraction("", markup)

    contents = [inner_markup(block).strip() for _, block in blocks]
    for parent, block in blocks:
        remove_child(parent, block)

    return DefsExtraction(
        "\n".join(content for content in contents if content),
        inner_markup(container).strip(),
    )
