"""
Basic CSS block layout.

Builds the tree of layout boxes from the style tree and computes the
geometry of every box. Coordinates are absolute, relative to the document
origin.
"""

import logging
from enum import Enum
from typing import Iterator, List, Optional

from ..css import AUTO, Length, Unit, px
from ..style import Display, StyledNode
from .box_metrics import Dimensions

logger = logging.getLogger(__name__)


class UnrenderableRootError(ValueError):
    """The root of the style tree has ``display: none``."""


class LayoutError(ValueError):
    """A layout operation was applied to a box that cannot support it."""


class BoxType(Enum):
    """Kind of a layout box."""
    BLOCK = "block"
    INLINE = "inline"
    ANONYMOUS = "anonymous"


class LayoutBox:
    """
    A node in the layout tree.

    Block and inline boxes keep a reference to the StyledNode they were
    generated from; anonymous boxes have none. Property values are read from
    the style node during layout, so the style tree must stay alive until
    layout has finished.
    """

    def __init__(self, box_type: BoxType, style_node: Optional[StyledNode] = None):
        """
        Initialize a layout box.

        Args:
            box_type: Kind of box
            style_node: The styled node for block and inline boxes

        Raises:
            ValueError: If the style node does not fit the box type
        """
        if (box_type == BoxType.ANONYMOUS) != (style_node is None):
            raise ValueError(f"{box_type.value} box created with style node {style_node!r}")

        self.box_type = box_type
        self.style_node = style_node
        self.dimensions = Dimensions()
        self.children: List['LayoutBox'] = []

    def get_style_node(self) -> StyledNode:
        """
        Return the styled node of a block or inline box.

        Raises:
            LayoutError: For anonymous boxes, which have no style
        """
        if self.style_node is None:
            raise LayoutError("Anonymous block box has no style node")
        return self.style_node

    def get_inline_container(self) -> 'LayoutBox':
        """Return the box a new inline child should be appended to."""
        if self.box_type in (BoxType.INLINE, BoxType.ANONYMOUS):
            return self

        # Keep using the anonymous box we just generated, otherwise start a new one
        if not self.children or self.children[-1].box_type != BoxType.ANONYMOUS:
            self.children.append(LayoutBox(BoxType.ANONYMOUS))
        return self.children[-1]

    def iter_boxes(self) -> Iterator['LayoutBox']:
        """Yield this box and all descendant boxes, depth first."""
        yield self
        for child in self.children:
            yield from child.iter_boxes()

    def to_dict(self) -> dict:
        """Describe the box and its descendants as plain data."""
        tag = None
        if self.style_node is not None:
            tag = getattr(self.style_node.node, 'tag_name', None)

        data = {'box_type': self.box_type.value, 'tag': tag}
        data.update(self.dimensions.to_dict())
        data['children'] = [child.to_dict() for child in self.children]
        return data

    # Layout

    def layout(self, containing_block: Dimensions) -> None:
        """
        Lay out this box and its descendants.

        Args:
            containing_block: Dimensions of the containing block. Its content
                height is the running vertical offset of boxes already
                stacked inside it.
        """
        if self.box_type == BoxType.BLOCK:
            self.layout_block(containing_block)
        else:
            self.layout_pass_through(containing_block)

    def layout_block(self, containing_block: Dimensions) -> None:
        # Child width can depend on parent width, so this box's width has to
        # be known before its children are laid out.
        self.calculate_block_width(containing_block)

        self.calculate_block_position(containing_block)

        self.layout_block_children()

        # Parent height can depend on child height, so this comes last.
        self.calculate_block_height()

    def layout_pass_through(self, containing_block: Dimensions) -> None:
        """
        Lay out an inline or anonymous box.

        Such boxes take no margins, borders or padding of their own. They span
        the containing block's content width at the current vertical offset
        and grow to fit their children.
        """
        d = self.dimensions
        d.content.x = containing_block.content.x
        d.content.y = containing_block.content.y + containing_block.content.height
        d.content.width = containing_block.content.width

        self.layout_block_children()

    def calculate_block_width(self, containing_block: Dimensions) -> None:
        """
        Calculate the width of a block-level non-replaced element in normal flow.

        Sets the horizontal margin/padding/border dimensions and the width.
        """
        style = self.get_style_node()

        # width has initial value auto
        width = style.value('width') or AUTO

        # margin, border, and padding have initial value 0
        zero = px(0)

        margin_left = style.lookup('margin-left', 'margin', zero)
        margin_right = style.lookup('margin-right', 'margin', zero)

        border_left = style.lookup('border-left-width', 'border-width', zero)
        border_right = style.lookup('border-right-width', 'border-width', zero)

        padding_left = style.lookup('padding-left', 'padding', zero)
        padding_right = style.lookup('padding-right', 'padding', zero)

        total = sum(value.to_px() for value in (margin_left, margin_right, border_left, border_right,
                                                padding_left, padding_right, width))

        # If width is not auto and the total is wider than the container,
        # treat auto margins as 0.
        if width != AUTO and total > containing_block.content.width:
            if margin_left == AUTO:
                margin_left = zero
            if margin_right == AUTO:
                margin_right = zero

        # Adjust used values so that the above sum equals containing_block.width.
        underflow = containing_block.content.width - total

        width_auto = width == AUTO
        left_auto = margin_left == AUTO
        right_auto = margin_right == AUTO

        if not width_auto and not left_auto and not right_auto:
            # Over-constrained: calculate margin_right
            margin_right = px(margin_right.to_px() + underflow)
        elif not width_auto and not left_auto and right_auto:
            margin_right = px(underflow)
        elif not width_auto and left_auto and not right_auto:
            margin_left = px(underflow)
        elif width_auto:
            # If width is auto, any other auto values become 0
            if left_auto:
                margin_left = zero
            if right_auto:
                margin_right = zero

            if underflow >= 0.0:
                # Expand width to fill the underflow
                width = px(underflow)
            else:
                # Width can't be negative. Adjust the right margin instead.
                width = zero
                margin_right = px(margin_right.to_px() + underflow)
        else:
            # Both margins auto: center the box
            margin_left = px(underflow / 2.0)
            margin_right = px(underflow / 2.0)

        d = self.dimensions
        d.content.width = width.to_px()

        d.padding.left = padding_left.to_px()
        d.padding.right = padding_right.to_px()

        d.border.left = border_left.to_px()
        d.border.right = border_right.to_px()

        d.margin.left = margin_left.to_px()
        d.margin.right = margin_right.to_px()

    def calculate_block_position(self, containing_block: Dimensions) -> None:
        """
        Finish calculating the block's edge sizes, and position it within its
        containing block.

        Sets the vertical margin/padding/border dimensions, and the x, y values.
        """
        style = self.get_style_node()
        d = self.dimensions

        zero = px(0)

        # If margin-top or margin-bottom is auto, the used value is zero.
        d.margin.top = style.lookup('margin-top', 'margin', zero).to_px()
        d.margin.bottom = style.lookup('margin-bottom', 'margin', zero).to_px()

        d.border.top = style.lookup('border-top-width', 'border-width', zero).to_px()
        d.border.bottom = style.lookup('border-bottom-width', 'border-width', zero).to_px()

        d.padding.top = style.lookup('padding-top', 'padding', zero).to_px()
        d.padding.bottom = style.lookup('padding-bottom', 'padding', zero).to_px()

        d.content.x = containing_block.content.x + d.margin.left + d.border.left + d.padding.left

        # Position the box below all the previous boxes in the container.
        d.content.y = (containing_block.content.y + containing_block.content.height
                       + d.margin.top + d.border.top + d.padding.top)

    def layout_block_children(self) -> None:
        """Lay out the box's children within its content area, top to bottom."""
        d = self.dimensions
        d.content.height = 0.0
        for child in self.children:
            child.layout(d)
            # Track the height so each child is laid out below the previous content.
            d.content.height = d.content.height + child.dimensions.margin_box().height

    def calculate_block_height(self) -> None:
        """
        Height of a block-level non-replaced element in normal flow with
        overflow visible.
        """
        # If the height is set to an explicit length, use that exact length.
        # Otherwise, just keep the value set by layout_block_children.
        height = self.get_style_node().value('height')
        if isinstance(height, Length) and height.unit == Unit.PX:
            self.dimensions.content.height = height.to_px()

    def __repr__(self) -> str:
        return f"<LayoutBox {self.box_type.value} {len(self.children)} children>"


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """
    Build the tree of LayoutBoxes, but don't perform any layout calculations yet.

    Args:
        style_node: Root of the style tree

    Returns:
        The root layout box

    Raises:
        UnrenderableRootError: If the root has ``display: none``
    """
    display = style_node.display()
    if display == Display.BLOCK:
        root = LayoutBox(BoxType.BLOCK, style_node)
    elif display == Display.INLINE:
        root = LayoutBox(BoxType.INLINE, style_node)
    else:
        raise UnrenderableRootError("Root node has display: none.")

    for child in style_node.children:
        child_display = child.display()
        if child_display == Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif child_display == Display.INLINE:
            root.get_inline_container().children.append(build_layout_tree(child))
        # display: none subtrees produce no boxes

    return root


def layout_tree(style_node: StyledNode, containing_block: Dimensions) -> LayoutBox:
    """
    Transform a style tree into a laid-out layout tree.

    Args:
        style_node: Root of the style tree
        containing_block: The initial containing block (the viewport)

    Returns:
        The positioned, sized root layout box
    """
    # The layout algorithm expects the container height to start at 0.
    containing_block = containing_block.copy()
    containing_block.content.height = 0.0

    root_box = build_layout_tree(style_node)
    root_box.layout(containing_block)

    logger.debug(f"Laid out {sum(1 for _ in root_box.iter_boxes())} boxes")
    return root_box
