"""
Node implementation for the DOM.
This module implements the read-only node tree consumed by the style stage.
"""

from enum import IntEnum
from typing import Iterable, Iterator, List, Optional


class NodeType(IntEnum):
    """Node types, numbered as in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3


class Node:
    """
    Base Node implementation.

    Nodes are built bottom-up: children are handed to the constructor and
    the tree is not modified afterwards.
    """

    def __init__(self, node_type: NodeType, children: Optional[Iterable['Node']] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            children: Child nodes in document order
        """
        self.node_type = node_type
        self._children: List['Node'] = list(children or [])
        self.node_name: str = "#node"

    @property
    def children(self) -> List['Node']:
        """Child nodes in document order (a copy)."""
        return list(self._children)

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT_NODE

    def iter_tree(self) -> Iterator['Node']:
        """Yield this node and all of its descendants in document order."""
        yield self
        for child in self._children:
            yield from child.iter_tree()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.node_name} ({len(self._children)} children)>"
