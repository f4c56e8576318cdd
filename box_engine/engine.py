"""
Render engine.

Ties the DOM adapter, the stylesheet adapter, style resolution and layout
into one pipeline: parse, style, layout.
"""

import logging
from typing import Optional

from .css import CSSParser, Stylesheet
from .dom import Node, parse_html
from .layout import Dimensions, LayoutBox, UnrenderableRootError, layout_tree
from .style import StyledNode, style_tree
from .utils.config import Config
from .utils.logging import PerformanceLogger, log_exception

logger = logging.getLogger(__name__)


class RenderResult:
    """
    Everything one render pass produced.

    The style tree is kept alongside the layout tree because layout boxes
    read their property values from it.
    """

    def __init__(self, document: Node, stylesheet: Stylesheet, style_root: StyledNode, layout_root: LayoutBox):
        self.document = document
        self.stylesheet = stylesheet
        self.style_root = style_root
        self.layout_root = layout_root


class RenderEngine:
    """
    Runs a document and a stylesheet through style resolution and layout.

    Each stage is timed with a PerformanceLogger and logged at debug level.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the engine.

        Args:
            config: Engine configuration; defaults are used when omitted
        """
        self.config = config or Config()
        self.css_parser = CSSParser()
        self.perf = PerformanceLogger(logger, "RenderEngine")

        logger.debug("Render engine initialized")

    def parse_document(self, html_content: str) -> Node:
        self.perf.start("parse_html")
        document = parse_html(html_content)
        self.perf.end("parse_html")
        return document

    def parse_stylesheet(self, css_content: str) -> Stylesheet:
        self.perf.start("parse_css")
        stylesheet = self.css_parser.parse(css_content)
        self.perf.end("parse_css")

        if self.css_parser.warnings:
            logger.info(f"Stylesheet parsed with {len(self.css_parser.warnings)} skipped items")
        return stylesheet

    def style(self, document: Node, stylesheet: Stylesheet) -> StyledNode:
        self.perf.start("style")
        style_root = style_tree(document, stylesheet)
        self.perf.end("style")
        return style_root

    def layout(self, style_root: StyledNode, viewport: Optional[Dimensions] = None) -> LayoutBox:
        """
        Lay out a style tree.

        Args:
            style_root: Root of the style tree
            viewport: Initial containing block; taken from the config if omitted

        Returns:
            The positioned layout tree

        Raises:
            UnrenderableRootError: If the root is not displayed
        """
        if viewport is None:
            viewport = self.config.viewport()

        self.perf.start("layout")
        try:
            root_box = layout_tree(style_root, viewport)
        except UnrenderableRootError as e:
            log_exception(logger, e, "Layout aborted")
            raise
        finally:
            self.perf.end("layout")
        return root_box

    def render(self, html_content: str, css_content: str, viewport: Optional[Dimensions] = None) -> RenderResult:
        """
        Run the whole pipeline.

        Args:
            html_content: HTML document text
            css_content: Stylesheet text
            viewport: Initial containing block; taken from the config if omitted

        Returns:
            RenderResult holding every intermediate tree
        """
        document = self.parse_document(html_content)
        stylesheet = self.parse_stylesheet(css_content)
        style_root = self.style(document, stylesheet)
        layout_root = self.layout(style_root, viewport)

        logger.info(f"Rendered document: {sum(1 for _ in layout_root.iter_boxes())} boxes, "
                    f"height {layout_root.dimensions.margin_box().height:g}px")
        return RenderResult(document, stylesheet, style_root, layout_root)
