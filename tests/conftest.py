import pytest

from box_engine.css import Keyword, px
from box_engine.dom import elem, text
from box_engine.layout import Dimensions
from box_engine.style import StyledNode


def _styled(tag="div", children=None, attributes=None, **properties):
    """Build a StyledNode directly; keyword names use ``_`` for ``-``."""
    values = {}
    for name, value in properties.items():
        if isinstance(value, (int, float)):
            value = px(value)
        elif isinstance(value, str):
            value = Keyword(value)
        values[name.replace('_', '-')] = value
    children = list(children or [])
    node = elem(tag, attributes, [child.node for child in children])
    return StyledNode(node, values, children)


def _styled_text(data="text"):
    return StyledNode(text(data), {})


@pytest.fixture
def styled():
    return _styled


@pytest.fixture
def styled_text():
    return _styled_text


@pytest.fixture
def viewport():
    dimensions = Dimensions()
    dimensions.content.width = 800.0
    dimensions.content.height = 600.0
    return dimensions
