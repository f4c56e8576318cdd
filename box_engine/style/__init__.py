"""
Style tree construction.
"""

from .styled_node import Display, StyledNode, style_tree, build_style_tree

__all__ = ['Display', 'StyledNode', 'style_tree', 'build_style_tree']
