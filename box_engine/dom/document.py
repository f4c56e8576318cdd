"""
HTML document adapter.

Parses HTML text with html5lib and converts the result into the engine's
read-only Element/Text tree.
"""

import logging
from typing import Dict, Iterable, Optional

import html5lib

from .element import Element
from .node import Node
from .text import Text

logger = logging.getLogger(__name__)

# minidom node types produced by html5lib's "dom" tree builder
_ELEMENT_NODE = 1
_TEXT_NODE = 3


def parse_html(html_content: str) -> Element:
    """
    Parse HTML content into an element tree.

    Args:
        html_content: The HTML content to parse

    Returns:
        The root ``<html>`` element
    """
    if isinstance(html_content, bytes):
        html_content = html_content.decode('utf-8', errors='replace')

    logger.debug(f"Parsing HTML content (first 100 chars): {html_content[:100]}...")

    parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
    parsed = parser.parse(html_content)

    # html5lib always synthesizes an <html> document element
    root = _convert_node(parsed.documentElement)
    logger.debug(f"Parsed document with {sum(1 for _ in root.iter_tree())} nodes")
    return root


def _convert_node(node) -> Optional[Node]:
    """
    Recursively convert a parsed minidom node.

    Returns None for nodes the style stage never sees: comments, doctypes
    and whitespace-only text.
    """
    if node.nodeType == _TEXT_NODE:
        if not node.data.strip():
            return None
        return Text(node.data)

    if node.nodeType != _ELEMENT_NODE:
        return None

    attributes = {name: value for name, value in node.attributes.items()}
    children = []
    for child in node.childNodes:
        converted = _convert_node(child)
        if converted is not None:
            children.append(converted)

    return Element(node.tagName, attributes, children)


def elem(tag_name: str,
         attributes: Optional[Dict[str, str]] = None,
         children: Optional[Iterable[Node]] = None) -> Element:
    """Shorthand for building an element tree in code."""
    return Element(tag_name, attributes, children)


def text(data: str) -> Text:
    return Text(data)
