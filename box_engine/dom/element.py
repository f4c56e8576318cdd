"""
Element implementation for the DOM.
"""

from typing import Dict, Iterable, Optional, Set

from .node import Node, NodeType


class Element(Node):
    """
    Element node.

    Exposes the tag name, the id and class lookups used by selector
    matching, and the raw attribute mapping.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Dict[str, str]] = None,
                 children: Optional[Iterable[Node]] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Raw attribute mapping
            children: Child nodes in document order
        """
        super().__init__(NodeType.ELEMENT_NODE, children)

        self.tag_name = tag_name.lower()
        self.node_name = self.tag_name.upper()
        self._attributes: Dict[str, str] = dict(attributes or {})

        # Cached once; elements are immutable after construction
        class_attr = self._attributes.get('class') or ""
        self._class_list: Set[str] = {cls for cls in class_attr.split() if cls}

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    def get_attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def id(self) -> Optional[str]:
        """The value of the ``id`` attribute, or None when it is absent."""
        return self._attributes.get('id')

    def classes(self) -> Set[str]:
        """The set of class names listed in the ``class`` attribute."""
        return set(self._class_list)

    def __repr__(self) -> str:
        return f"<Element {self.tag_name} {self._attributes!r}>"
