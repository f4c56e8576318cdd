import pytest

from box_engine.css import (
    ColorValue, Declaration, Keyword, Rule, SimpleSelector, Stylesheet,
    matching_rules, px, specified_values
)
from box_engine.dom import elem

RED = ColorValue(255, 0, 0)
BLUE = ColorValue(0, 0, 255)


def rule(selectors, **declarations):
    return Rule(selectors, [Declaration(name.replace('_', '-'), value)
                            for name, value in declarations.items()])


def test_id_beats_class_regardless_of_source_order():
    stylesheet = Stylesheet([
        rule([SimpleSelector(id="x")], color=BLUE),
        rule([SimpleSelector(classes=["c"])], color=RED),
    ])
    element = elem("p", {"id": "x", "class": "c"})

    assert specified_values(element, stylesheet)["color"] == BLUE


def test_equal_specificity_later_rule_wins():
    stylesheet = Stylesheet([
        rule([SimpleSelector(classes=["a"])], color=RED),
        rule([SimpleSelector(classes=["b"])], color=BLUE),
    ])
    element = elem("p", {"class": "a b"})

    assert specified_values(element, stylesheet)["color"] == BLUE


def test_declarations_from_all_matching_rules_are_merged():
    stylesheet = Stylesheet([
        rule([SimpleSelector("p")], display=Keyword("block"), width=px(10)),
        rule([SimpleSelector(classes=["c"])], width=px(20)),
        rule([SimpleSelector("span")], height=px(99)),
    ])
    values = specified_values(elem("p", {"class": "c"}), stylesheet)

    assert values == {"display": Keyword("block"), "width": px(20)}


def test_rule_is_ranked_by_first_matching_selector():
    # The id selector would win, but the tag selector is listed first
    stylesheet = Stylesheet([
        rule([SimpleSelector("div"), SimpleSelector(id="x")], color=RED),
        rule([SimpleSelector(classes=["c"])], color=BLUE),
    ])
    element = elem("div", {"id": "x", "class": "c"})

    matched = matching_rules(element, stylesheet)
    assert [specificity for specificity, _ in matched] == [(0, 0, 1), (0, 1, 0)]
    assert specified_values(element, stylesheet)["color"] == BLUE


def test_no_matching_rules_gives_empty_map():
    stylesheet = Stylesheet([rule([SimpleSelector("span")], color=RED)])
    assert specified_values(elem("div"), stylesheet) == {}


def test_resolution_is_deterministic():
    stylesheet = Stylesheet([
        rule([SimpleSelector()], margin=px(1)),
        rule([SimpleSelector("div")], margin=px(2), color=RED),
        rule([SimpleSelector(classes=["a"])], color=BLUE),
    ])
    element = elem("div", {"class": "a"})

    first = specified_values(element, stylesheet)
    second = specified_values(element, stylesheet)
    assert first == second
    assert first == {"margin": px(2), "color": BLUE}


def test_rule_without_selectors_is_rejected():
    with pytest.raises(ValueError):
        Rule([], [])
