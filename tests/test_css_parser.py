from box_engine.css import (
    ColorValue, CSSParser, Keyword, Length, SimpleSelector, parse_css, px
)


def test_parses_rules_in_source_order():
    stylesheet = parse_css("""
        div { display: block; }
        #main { width: 100px; }
    """)

    assert len(stylesheet) == 2
    assert stylesheet.rules[0].selectors == [SimpleSelector("div")]
    assert stylesheet.rules[1].selectors == [SimpleSelector(id="main")]


def test_selector_list_is_sorted_most_specific_first():
    stylesheet = parse_css("h1, #a, .b, p.c { color: red; }")

    specificities = [selector.specificity() for selector in stylesheet.rules[0].selectors]
    assert specificities == [(1, 0, 0), (0, 1, 1), (0, 1, 0), (0, 0, 1)]


def test_compound_simple_selector():
    stylesheet = parse_css("div#main.note.wide { display: block; }")

    assert stylesheet.rules[0].selectors == [SimpleSelector("div", "main", ["note", "wide"])]


def test_universal_selector():
    stylesheet = parse_css("* { display: block; }")

    assert stylesheet.rules[0].selectors == [SimpleSelector()]


def test_value_types():
    stylesheet = parse_css("""
        p {
            margin: auto;
            padding: 12px;
            border-width: 0;
            color: #cc0000;
            background: #fff;
            Display: BLOCK;
        }
    """)
    declarations = {d.name: d.value for d in stylesheet.rules[0].declarations}

    assert declarations == {
        "margin": Keyword("auto"),
        "padding": Length(12),
        "border-width": px(0),
        "color": ColorValue(0xcc, 0, 0),
        "background": ColorValue(255, 255, 255),
        "display": Keyword("block"),
    }


def test_descendant_selector_rule_is_skipped():
    parser = CSSParser()
    stylesheet = parser.parse("div p { color: red; } p { color: blue; }")

    assert len(stylesheet) == 1
    assert stylesheet.rules[0].selectors == [SimpleSelector("p")]
    assert len(parser.warnings) == 1


def test_pseudo_class_and_attribute_selectors_are_skipped():
    parser = CSSParser()
    stylesheet = parser.parse("a:hover { color: red; } a[href] { color: red; }")

    assert len(stylesheet) == 0
    assert len(parser.warnings) == 2


def test_unsupported_values_are_skipped():
    parser = CSSParser()
    stylesheet = parser.parse("p { margin: 0 auto; width: 50%; height: 2em; padding: 4px; }")

    assert [d.name for d in stylesheet.rules[0].declarations] == ["padding"]
    assert len(parser.warnings) == 3


def test_at_rules_are_skipped():
    parser = CSSParser()
    stylesheet = parser.parse("@media print { p { display: none; } } p { display: block; }")

    assert len(stylesheet) == 1
    assert len(parser.warnings) == 1


def test_warnings_reset_between_parses():
    parser = CSSParser()
    parser.parse("div p { color: red; }")
    parser.parse("p { color: red; }")

    assert parser.warnings == []
