"""
Cascade resolution.

Finds every rule matching an element, orders the matches by specificity
and merges their declarations into one property map.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..dom import Element
from .selector import Specificity, matches
from .stylesheet import Rule, Stylesheet
from .values import Value

logger = logging.getLogger(__name__)

# Map from CSS property names to values
PropertyMap = Dict[str, Value]

# A rule paired with the specificity of the selector that matched it
MatchedRule = Tuple[Specificity, Rule]


def match_rule(element: Element, rule: Rule) -> Optional[MatchedRule]:
    """
    Match a rule against an element.

    The rule is ranked by the first of its selectors that matches, which is
    its most specific one when the selector list is sorted by specificity.

    Returns:
        ``(specificity, rule)`` or None if no selector matches
    """
    for selector in rule.selectors:
        if matches(element, selector):
            return (selector.specificity(), rule)
    return None


def matching_rules(element: Element, stylesheet: Stylesheet) -> List[MatchedRule]:
    """Find all rules that match the element, in stylesheet order."""
    # Linear scan; large stylesheets would want rules indexed by tag/id/class
    matched = []
    for rule in stylesheet.rules:
        match = match_rule(element, rule)
        if match is not None:
            matched.append(match)
    return matched


def specified_values(element: Element, stylesheet: Stylesheet) -> PropertyMap:
    """
    Apply a stylesheet to a single element.

    Args:
        element: The element to style
        stylesheet: The rules to apply

    Returns:
        The specified property values of the element
    """
    values: PropertyMap = {}
    rules = matching_rules(element, stylesheet)

    # Lowest specificity first; sorted() is stable so ties keep source order
    for _, rule in sorted(rules, key=lambda match: match[0]):
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value

    logger.debug(f"{element.tag_name}: {len(rules)} matching rules, {len(values)} properties")
    return values


resolve = specified_values
