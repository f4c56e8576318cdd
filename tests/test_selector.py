from box_engine.css import SimpleSelector, matches
from box_engine.dom import elem


def test_empty_selector_matches_everything():
    assert matches(elem("p"), SimpleSelector())
    assert matches(elem("div", {"id": "x", "class": "a b"}), SimpleSelector())


def test_tag_predicate():
    assert matches(elem("div"), SimpleSelector(tag_name="div"))
    assert not matches(elem("span"), SimpleSelector(tag_name="div"))


def test_tag_predicate_is_case_insensitive_on_construction():
    assert matches(elem("DIV"), SimpleSelector(tag_name="Div"))


def test_id_predicate_requires_attribute():
    assert matches(elem("div", {"id": "main"}), SimpleSelector(id="main"))
    assert not matches(elem("div", {"id": "other"}), SimpleSelector(id="main"))
    assert not matches(elem("div"), SimpleSelector(id="main"))


def test_every_required_class_must_be_present():
    element = elem("div", {"class": "note  warning"})
    assert matches(element, SimpleSelector(classes=["note"]))
    assert matches(element, SimpleSelector(classes=["note", "warning"]))
    assert not matches(element, SimpleSelector(classes=["note", "error"]))
    assert not matches(elem("div"), SimpleSelector(classes=["note"]))


def test_all_predicates_combined():
    selector = SimpleSelector("div", "main", ["wide"])
    assert matches(elem("div", {"id": "main", "class": "wide tall"}), selector)
    assert not matches(elem("section", {"id": "main", "class": "wide"}), selector)
    assert not matches(elem("div", {"id": "main"}), selector)


def test_specificity_counts_ids_classes_and_tag():
    assert SimpleSelector().specificity() == (0, 0, 0)
    assert SimpleSelector("div").specificity() == (0, 0, 1)
    assert SimpleSelector(classes=["a", "b"]).specificity() == (0, 2, 0)
    assert SimpleSelector("div", "x", ["a"]).specificity() == (1, 1, 1)


def test_specificity_compares_lexicographically():
    assert SimpleSelector(id="x").specificity() > SimpleSelector("div", classes=["a", "b", "c"]).specificity()
    assert SimpleSelector(classes=["a"]).specificity() > SimpleSelector("div").specificity()
