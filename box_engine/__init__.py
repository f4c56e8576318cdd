"""
Box Engine - CSS style resolution and box-model layout.
"""

import logging

from box_engine.css import parse_css
from box_engine.dom import parse_html
from box_engine.engine import RenderEngine, RenderResult
from box_engine.layout import Dimensions, LayoutBox, layout_tree
from box_engine.style import style_tree

# Applications configure handlers through box_engine.utils.logging.setup_logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__description__ = "CSS style resolution and box-model layout"

__all__ = [
    'parse_css', 'parse_html', 'RenderEngine', 'RenderResult',
    'Dimensions', 'LayoutBox', 'layout_tree', 'style_tree',
]
