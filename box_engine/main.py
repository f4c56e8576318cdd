"""
Command-line entry point.

Reads an HTML document and a stylesheet, lays them out in a viewport and
writes the positioned box tree as JSON.
"""

import argparse
import json
import sys
from typing import List, Optional

from box_engine.engine import RenderEngine
from box_engine.layout import UnrenderableRootError
from box_engine.utils.config import Config
from box_engine.utils.logging import log_exception, setup_logging


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Lay out an HTML document with a CSS stylesheet")
    parser.add_argument('--html', required=True, help='HTML document')
    parser.add_argument('--css', required=True, help='CSS stylesheet')
    parser.add_argument('--config', default=None, help='JSON configuration file')
    parser.add_argument('--width', type=float, default=None, help='Viewport width in px')
    parser.add_argument('--height', type=float, default=None, help='Viewport height in px')
    parser.add_argument('-o', '--output', default=None, help='Output file (defaults to stdout)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def read_source(filename: str) -> str:
    with open(filename, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_arguments(argv)

    config = Config(args.config)
    if args.width is not None:
        config.set('viewport.width', args.width)
    if args.height is not None:
        config.set('viewport.height', args.height)

    console_level = "DEBUG" if args.debug else config.get('logging.console_level', "INFO")
    logger = setup_logging(log_file=config.get('logging.file'),
                           console_level=console_level,
                           file_level=config.get('logging.file_level', "DEBUG"))

    try:
        html_content = read_source(args.html)
        css_content = read_source(args.css)
    except OSError as e:
        log_exception(logger, e, "Could not read input")
        return 1

    engine = RenderEngine(config)
    try:
        result = engine.render(html_content, css_content)
    except UnrenderableRootError:
        # Already logged by the engine
        return 1

    output = json.dumps(result.layout_root.to_dict(), indent=2)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
            f.write("\n")
        logger.info(f"Saved layout as {args.output}")
    else:
        sys.stdout.write(output + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
