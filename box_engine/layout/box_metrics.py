"""
CSS box model primitives. All sizes are in px.
"""

import copy


class Rect:
    """A rectangle positioned relative to the document origin."""

    __slots__ = ('x', 'y', 'width', 'height')

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def expanded_by(self, edge: 'EdgeSizes') -> 'Rect':
        """Return a new rectangle grown outwards by ``edge`` on every side."""
        return Rect(
            self.x - edge.left,
            self.y - edge.top,
            self.width + edge.left + edge.right,
            self.height + edge.top + edge.bottom,
        )

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)

    def __repr__(self) -> str:
        return f"Rect(x={self.x:g}, y={self.y:g}, width={self.width:g}, height={self.height:g})"


class EdgeSizes:
    """Sizes of the four sides of a margin, border or padding."""

    __slots__ = ('left', 'right', 'top', 'bottom')

    def __init__(self, left: float = 0.0, right: float = 0.0, top: float = 0.0, bottom: float = 0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def to_dict(self) -> dict:
        return {'left': self.left, 'right': self.right, 'top': self.top, 'bottom': self.bottom}

    def __eq__(self, other) -> bool:
        if not isinstance(other, EdgeSizes):
            return NotImplemented
        return (self.left, self.right, self.top, self.bottom) == (other.left, other.right, other.top, other.bottom)

    def __repr__(self) -> str:
        return f"EdgeSizes(left={self.left:g}, right={self.right:g}, top={self.top:g}, bottom={self.bottom:g})"


class Dimensions:
    """
    Box model metrics of a layout box.

    ``content`` is the content area; padding, border and margin surround it
    in that order.
    """

    def __init__(self):
        self.content = Rect()
        self.padding = EdgeSizes()
        self.border = EdgeSizes()
        self.margin = EdgeSizes()

    def padding_box(self) -> Rect:
        """The area covered by the content area plus its padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self) -> Rect:
        """The area covered by the content area plus padding and borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        """The area covered by the content area plus padding, borders, and margin."""
        return self.border_box().expanded_by(self.margin)

    def copy(self) -> 'Dimensions':
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return {
            'content': self.content.to_dict(),
            'padding': self.padding.to_dict(),
            'border': self.border.to_dict(),
            'margin': self.margin.to_dict(),
        }

    def __repr__(self) -> str:
        return (f"Dimensions(content={self.content!r}, padding={self.padding!r}, "
                f"border={self.border!r}, margin={self.margin!r})")
