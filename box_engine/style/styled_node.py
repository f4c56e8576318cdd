"""
Style tree.

Each StyledNode pairs a DOM node with its specified property values. The
style tree mirrors the DOM; ``display: none`` subtrees are dropped later,
when the layout tree is built.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..css import PropertyMap, Stylesheet, Value, Keyword, specified_values
from ..dom import Node

logger = logging.getLogger(__name__)


class Display(Enum):
    """Values of the ``display`` property understood by the layout stage."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class StyledNode:
    """A DOM node with its specified values and styled children."""

    def __init__(self, node: Node, specified_values: PropertyMap, children: Optional[List['StyledNode']] = None):
        self.node = node
        self.specified_values = specified_values
        self.children: List['StyledNode'] = children if children is not None else []

    def value(self, name: str) -> Optional[Value]:
        """Return the specified value of a property, or None."""
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Return the value of ``name``, falling back to ``fallback_name`` and
        then to ``default``.
        """
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        if value is None:
            value = default
        return value

    def display(self) -> Display:
        """The value of the ``display`` property (defaults to inline)."""
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.name == 'block':
                return Display.BLOCK
            if value.name == 'none':
                return Display.NONE
        return Display.INLINE

    def __repr__(self) -> str:
        return f"<StyledNode {self.node.node_name} {self.specified_values!r}>"


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """
    Apply a stylesheet to an entire DOM tree.

    Only specified values are computed; there is no inheritance.

    Args:
        root: Root DOM node
        stylesheet: Rules to apply

    Returns:
        The root of the style tree
    """
    if root.is_element:
        values = specified_values(root, stylesheet)
    else:
        values = {}

    children = [style_tree(child, stylesheet) for child in root.children]
    return StyledNode(root, values, children)


build_style_tree = style_tree
