from box_engine.css import Keyword, parse_css, px
from box_engine.dom import elem, text
from box_engine.style import Display, style_tree


def test_style_tree_mirrors_dom_and_styles_elements():
    stylesheet = parse_css("div { display: block; } .hidden { display: none; } p { width: 10px; }")
    dom = elem("div", None, [
        elem("p", {"class": "hidden"}, [text("inner")]),
        text("tail"),
    ])

    root = style_tree(dom, stylesheet)

    assert root.node is dom
    assert root.specified_values == {"display": Keyword("block")}

    p, tail = root.children
    # Hidden subtrees are still styled; the layout tree drops them
    assert p.specified_values == {"display": Keyword("none"), "width": px(10)}
    assert p.children[0].specified_values == {}
    assert tail.specified_values == {}
    assert tail.children == []


def test_text_nodes_have_empty_property_maps():
    stylesheet = parse_css("* { display: block; }")
    root = style_tree(elem("div", None, [text("x")]), stylesheet)

    assert root.children[0].specified_values == {}
    assert root.children[0].display() == Display.INLINE


def test_display_defaults_to_inline(styled):
    assert styled().display() == Display.INLINE
    assert styled(display="block").display() == Display.BLOCK
    assert styled(display="none").display() == Display.NONE
    assert styled(display="flex").display() == Display.INLINE
    assert styled(display=5).display() == Display.INLINE


def test_lookup_uses_fallback_then_default(styled):
    node = styled(margin=10, margin_left=3)
    default = px(0)

    assert node.lookup("margin-left", "margin", default) == px(3)
    assert node.lookup("margin-right", "margin", default) == px(10)
    assert node.lookup("padding-left", "padding", default) is default
    assert node.value("padding") is None
