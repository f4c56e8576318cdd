"""
Text node implementation for the DOM.
"""

from .node import Node, NodeType


class Text(Node):
    """A text node. Text nodes have no children and no style of their own."""

    def __init__(self, data: str):
        super().__init__(NodeType.TEXT_NODE)

        # Ensure data is not None
        if data is None:
            data = ""

        self.node_name = "#text"
        self.data = data

    def __repr__(self) -> str:
        return f"<Text {self.data!r}>"
