"""
CSS Selector matching.
This module defines simple selectors, their specificity, and matching
against DOM elements.
"""

from typing import Iterable, Optional, Tuple

from ..dom import Element

# (id, class, tag)
Specificity = Tuple[int, int, int]


class SimpleSelector:
    """
    A simple selector: an optional tag name, an optional id and a set of
    required class names. A selector with no predicates matches every element.
    """

    __slots__ = ('tag_name', 'id', 'classes')

    def __init__(self,
                 tag_name: Optional[str] = None,
                 id: Optional[str] = None,
                 classes: Optional[Iterable[str]] = None):
        """
        Initialize a simple selector.

        Args:
            tag_name: Required tag name, or None for any tag
            id: Required id, or None
            classes: Class names the element must all carry
        """
        self.tag_name = tag_name.lower() if tag_name else None
        self.id = id
        self.classes = frozenset(classes or ())

    def specificity(self) -> Specificity:
        """Return ``(id count, class count, tag count)``."""
        a = 1 if self.id is not None else 0
        b = len(self.classes)
        c = 1 if self.tag_name is not None else 0
        return (a, b, c)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return (self.tag_name, self.id, self.classes) == (other.tag_name, other.id, other.classes)

    def __hash__(self) -> int:
        return hash((self.tag_name, self.id, self.classes))

    def __repr__(self) -> str:
        text = self.tag_name or '*'
        if self.id is not None:
            text += f"#{self.id}"
        for class_name in sorted(self.classes):
            text += f".{class_name}"
        return f"SimpleSelector({text})"


# Only one selector variant is supported for now
Selector = SimpleSelector


def matches(element: Element, selector: Selector) -> bool:
    """
    Check if an element matches a selector.

    Args:
        element: The element to match against
        selector: The selector to check

    Returns:
        True if the element matches the selector, False otherwise
    """
    if isinstance(selector, SimpleSelector):
        return matches_simple_selector(element, selector)
    raise TypeError(f"Unsupported selector type: {type(selector).__name__}")


def matches_simple_selector(element: Element, selector: SimpleSelector) -> bool:
    if selector.tag_name is not None and element.tag_name != selector.tag_name:
        return False

    if selector.id is not None and element.id() != selector.id:
        return False

    if selector.classes and not selector.classes <= element.classes():
        return False

    return True
