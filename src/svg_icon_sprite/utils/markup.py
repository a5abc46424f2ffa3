"""Helpers for working with SVG markup as an ElementTree.

Icons are parsed with ``xml.etree.ElementTree``; after optimization every tag
and attribute name is namespace-free, so fragments can be re-parsed and
serialized without namespace declarations.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from xml.sax.saxutils import escape

# Wrapper used to parse markup fragments that have several top-level elements
FRAGMENT_ROOT = "svg"


def local_name(tag: str) -> str:
    """Remove a namespace prefix like '{http://www.w3.org/2000/svg}'."""
    return tag.split("}", 1)[1] if "}" in tag else tag


def namespace_of(name: str) -> str | None:
    """Return the namespace URI of a Clark-notation name, if it has one."""
    return name[1:].split("}", 1)[0] if name.startswith("{") else None


def parse_document(markup: str) -> ET.Element:
    """Parse a complete XML document and return its root element.

    Comments and processing instructions are dropped by the parser.

    Args:
        markup: Document text, optionally starting with a BOM or XML declaration.

    Returns:
        The root element.

    Raises:
        xml.etree.ElementTree.ParseError: If the markup is not well-formed.
    """
    return ET.fromstring(markup.lstrip("\ufeff").strip())


def parse_fragment(markup: str) -> ET.Element:
    """Parse a markup fragment inside a synthetic container element.

    Args:
        markup: Zero or more sibling elements, possibly with text between them.

    Returns:
        The container element; its children are the fragment's top-level elements.

    Raises:
        xml.etree.ElementTree.ParseError: If the fragment is not well-formed.
    """
    return ET.fromstring(f"<{FRAGMENT_ROOT}>{markup}</{FRAGMENT_ROOT}>")


def serialize(element: ET.Element) -> str:
    """Serialize an element (and its tail text) to markup."""
    return ET.tostring(element, encoding="unicode")


def inner_markup(element: ET.Element) -> str:
    """Serialize the content of an element without its own start and end tags."""
    parts = [escape(element.text)] if element.text else []
    parts.extend(serialize(child) for child in element)
    return "".join(parts)


def iter_with_parent(
    element: ET.Element, skip: frozenset[str] = frozenset()
) -> Iterator[tuple[ET.Element, ET.Element]]:
    """Yield ``(parent, child)`` pairs for every descendant in document order.

    Args:
        element: Element to walk below.
        skip: Local tag names whose subtrees are yielded but not descended into.

    Yields:
        Tuples of parent element and child element.
    """
    for child in list(element):
        yield element, child
        if local_name(child.tag) not in skip:
            yield from iter_with_parent(child, skip)


def remove_child(parent: ET.Element, child: ET.Element) -> None:
    """Remove ``child`` from ``parent`` while keeping the text that followed it."""
    if child.tail:
        index = list(parent).index(child)
        if index > 0:
            previous = parent[index - 1]
            previous.tail = (previous.tail or "") + child.tail
        else:
            parent.text = (parent.text or "") + child.tail
    parent.remove(child)
