"""
DOM implementation for the layout engine.
This package provides the read-only node tree and the HTML adapter that builds it.
"""

from .node import Node, NodeType
from .element import Element
from .text import Text
from .document import parse_html, elem, text

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'parse_html', 'elem', 'text'
]
