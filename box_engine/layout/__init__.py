"""
Layout implementation for the layout engine.
This package provides the box model primitives, layout tree construction
and block layout.
"""

from .box_metrics import Rect, EdgeSizes, Dimensions
from .layout import (
    BoxType, LayoutBox, LayoutError, UnrenderableRootError,
    build_layout_tree, layout_tree
)

__all__ = [
    'Rect', 'EdgeSizes', 'Dimensions',
    'BoxType', 'LayoutBox', 'LayoutError', 'UnrenderableRootError',
    'build_layout_tree', 'layout_tree'
]
