import pytest

from box_engine.engine import RenderEngine
from box_engine.layout import BoxType, UnrenderableRootError
from box_engine.utils.config import Config

CSS = """
html, body, div { display: block; }
head { display: none; }
div { height: 50px; }
#b { width: 100px; margin: auto; height: 30px; }
"""

HTML = "<div class='a'></div><div id='b'></div>"


def test_render_runs_the_whole_pipeline():
    result = RenderEngine().render(HTML, CSS)
    root = result.layout_root

    assert root.style_node is result.style_root
    assert root.box_type == BoxType.BLOCK
    assert root.dimensions.content.width == 800

    # head is suppressed, leaving only body
    (body,) = root.children
    a, b = body.children

    assert a.dimensions.content.height == 50
    assert b.dimensions.content.height == 30
    assert b.dimensions.margin.left == 350
    assert b.dimensions.content.y == 50
    assert root.dimensions.content.height == 80


def test_style_tree_keeps_suppressed_nodes():
    result = RenderEngine().render(HTML, CSS)

    assert [child.node.tag_name for child in result.style_root.children] == ["head", "body"]


def test_viewport_comes_from_config():
    config = Config()
    config.set("viewport.width", 400)

    result = RenderEngine(config).render(HTML, CSS)

    assert result.layout_root.dimensions.content.width == 400
    assert result.layout_root.children[0].children[1].dimensions.margin.left == 150


def test_hidden_root_aborts_render(caplog):
    with pytest.raises(UnrenderableRootError):
        RenderEngine().render(HTML, "html { display: none; }")

    assert "Layout aborted" in caplog.text


def test_stage_durations_are_recorded():
    engine = RenderEngine()
    engine.render(HTML, CSS)

    assert set(engine.perf.durations) == {"parse_html", "parse_css", "style", "layout"}
