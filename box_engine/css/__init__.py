"""
CSS implementation for the layout engine.
This package provides values, simple selectors, stylesheets, the stylesheet
adapter and the cascade.
"""

from .values import Value, Keyword, Length, ColorValue, Unit, AUTO, px
from .selector import SimpleSelector, Selector, Specificity, matches
from .stylesheet import Declaration, Rule, Stylesheet
from .cascade import PropertyMap, specified_values, matching_rules, resolve
from .parser import CSSParser, parse_css

__all__ = [
    'Value', 'Keyword', 'Length', 'ColorValue', 'Unit', 'AUTO', 'px',
    'SimpleSelector', 'Selector', 'Specificity', 'matches',
    'Declaration', 'Rule', 'Stylesheet',
    'PropertyMap', 'specified_values', 'matching_rules', 'resolve',
    'CSSParser', 'parse_css',
]
