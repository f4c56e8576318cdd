"""
CSS stylesheet adapter.

Uses tinycss2 to tokenize stylesheet text and converts the qualified rules it
finds into the engine's Rule/Declaration model. Only simple selectors and
single-component values are understood; anything else is logged and skipped.
"""

import logging
import re
from typing import List, Optional

import tinycss2

from .selector import SimpleSelector
from .stylesheet import Declaration, Rule, Stylesheet
from .values import ColorValue, Keyword, Length, Unit, Value

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r'^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


class CSSParser:
    """
    CSS parser producing Stylesheet objects.

    Problems in the input never raise; the offending rule or declaration is
    dropped and a warning is logged. ``warnings`` keeps the messages of the
    last ``parse`` call.
    """

    def __init__(self):
        self.warnings: List[str] = []

    def parse(self, css_content: str) -> Stylesheet:
        """
        Parse CSS content into a stylesheet.

        Args:
            css_content: CSS content to parse

        Returns:
            Parsed stylesheet, rules in source order
        """
        self.warnings = []
        rules = []

        nodes = tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True)
        for node in nodes:
            if node.type == 'qualified-rule':
                rule = self._convert_rule(node)
                if rule is not None:
                    rules.append(rule)
            elif node.type == 'at-rule':
                self._warn(node, f"Unsupported at-rule @{node.at_keyword}")
            elif node.type == 'error':
                self._warn(node, f"CSS syntax error: {node.message}")

        logger.debug(f"Parsed stylesheet with {len(rules)} rules")
        return Stylesheet(rules)

    def parse_selectors(self, selector_text: str) -> Optional[List[SimpleSelector]]:
        """Parse a comma-separated selector list, most specific first."""
        tokens = tinycss2.parse_component_value_list(selector_text, skip_comments=True)
        return self._parse_selector_list(tokens)

    def _convert_rule(self, node) -> Optional[Rule]:
        selectors = self._parse_selector_list(node.prelude)
        if selectors is None:
            self._warn(node, f"Unsupported selector {tinycss2.serialize(node.prelude).strip()!r}, rule skipped")
            return None

        declarations = []
        items = tinycss2.parse_declaration_list(node.content, skip_comments=True, skip_whitespace=True)
        for item in items:
            if item.type != 'declaration':
                self._warn(item, "Unexpected content in declaration block")
                continue

            value = self._parse_value(item.value)
            if value is None:
                self._warn(item, f"Unsupported value for {item.lower_name}: "
                                 f"{tinycss2.serialize(item.value).strip()!r}")
                continue
            declarations.append(Declaration(item.lower_name, value))

        return Rule(selectors, declarations)

    def _parse_selector_list(self, tokens) -> Optional[List[SimpleSelector]]:
        groups: List[list] = [[]]
        for token in tokens:
            if token.type == 'literal' and token.value == ',':
                groups.append([])
            elif token.type != 'comment':
                groups[-1].append(token)

        selectors = []
        for group in groups:
            selector = self._parse_simple_selector(_strip_whitespace(group))
            if selector is None:
                return None
            selectors.append(selector)

        # Most specific first, so the first matching selector ranks the rule
        selectors.sort(key=lambda selector: selector.specificity(), reverse=True)
        return selectors

    def _parse_simple_selector(self, tokens) -> Optional[SimpleSelector]:
        if not tokens:
            return None

        tag_name = None
        selector_id = None
        classes = []

        position = 0
        first = tokens[0]
        if first.type == 'ident':
            tag_name = first.lower_value
            position = 1
        elif first.type == 'literal' and first.value == '*':
            position = 1

        while position < len(tokens):
            token = tokens[position]
            if token.type == 'hash' and token.is_identifier:
                selector_id = token.value
                position += 1
            elif (token.type == 'literal' and token.value == '.'
                    and position + 1 < len(tokens) and tokens[position + 1].type == 'ident'):
                classes.append(tokens[position + 1].value)
                position += 2
            else:
                # Combinators, attribute selectors and pseudo-classes
                return None

        return SimpleSelector(tag_name, selector_id, classes)

    def _parse_value(self, tokens) -> Optional[Value]:
        tokens = [token for token in tokens if token.type not in ('whitespace', 'comment')]
        if len(tokens) != 1:
            return None

        token = tokens[0]
        if token.type == 'dimension' and token.lower_unit == Unit.PX.value:
            return Length(token.value, Unit.PX)
        if token.type == 'number' and token.value == 0:
            return Length(0, Unit.PX)
        if token.type == 'hash' and _HEX_COLOR.match(token.value):
            return _parse_hex_color(token.value)
        if token.type == 'ident':
            return Keyword(token.lower_value)
        return None

    def _warn(self, node, message: str) -> None:
        message = f"line {node.source_line}: {message}"
        self.warnings.append(message)
        logger.warning(message)


def _strip_whitespace(tokens) -> list:
    start = 0
    end = len(tokens)
    while start < end and tokens[start].type == 'whitespace':
        start += 1
    while end > start and tokens[end - 1].type == 'whitespace':
        end -= 1
    return tokens[start:end]


def _parse_hex_color(digits: str) -> ColorValue:
    if len(digits) == 3:
        digits = ''.join(digit * 2 for digit in digits)
    return ColorValue(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_css(css_content: str) -> Stylesheet:
    """Parse CSS text into a Stylesheet."""
    return CSSParser().parse(css_content)
