"""Tests templates : catalogue, copies indépendantes, page de départ."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from store_builder import (
    STORE_TEMPLATES, apply_template, blank_document, get_template, list_templates,
    resolve_section, update_section_props,
)


def test_catalog_order_and_names():
    assert [t.id for t in list_templates()] == ["minimal", "boutique", "food", "classic"]
    assert get_template("food").name == "Food & Menu"
    assert get_template("classic").name == "Classic Shop"
    assert get_template("nope") is None


def test_every_template_ends_with_cta():
    for t in STORE_TEMPLATES:
        assert t.page_config.sections[-1].type == "cta"
        assert t.page_config.sections[0].type == "hero"


def test_classic_features():
    features = apply_template("classic").get("f1")
    assert [i["title"] for i in features.props["items"]] == ["Quality", "Fast reply", "Local"]
    assert apply_template("classic").get("p1").props["columns"] == 3


def test_food_single_column_renders_as_two():
    grid = apply_template("food").get("p1")
    assert grid.props["columns"] == 1
    assert resolve_section(grid).props.columns == 2


def test_apply_returns_independent_copies():
    a = apply_template("classic")
    b = apply_template("classic")
    a.sections[1].props["items"].append({"title": "Mutated"})
    a.sections[0].props["title"] = "Mutated"
    assert len(b.get("f1").props["items"]) == 3
    assert b.get("h1").props["title"] == "Your shop name"
    assert get_template("classic").page_config.get("h1").props["title"] == "Your shop name"


def test_editing_applied_template_leaves_catalog_untouched():
    edited = update_section_props(apply_template("minimal"), "h1", {"title": "Amar Dokan"})
    assert edited.get("h1").props["title"] == "Amar Dokan"
    assert apply_template("minimal").get("h1").props["title"] == "Welcome to our store"


def test_unknown_template_raises():
    with pytest.raises(ValueError):
        apply_template("nope")


def test_blank_document():
    d = blank_document()
    assert [s.id for s in d.sections] == ["hero-1", "products-1", "cta-1"]
    assert d.get("hero-1").props == {"title": "Welcome", "subtitle": "Your store", "ctaText": "Shop Now"}
    d.sections[0].props["title"] = "Changed"
    assert blank_document().get("hero-1").props["title"] == "Welcome"


def test_catalog_copies_cannot_alter_templates():
    got = get_template("minimal")
    got.page_config.sections[0].props["title"] = "HACKED"
    listed = list_templates()
    listed[0].page_config.sections.pop()
    listed[3].page_config.get("f1").props["items"].clear()

    d = apply_template("minimal")
    assert d.get("h1").props["title"] == "Welcome to our store"
    assert len(d.sections) == 3
    assert len(apply_template("classic").get("f1").props["items"]) == 3
    assert get_template("minimal").page_config.get("h1").props["title"] == "Welcome to our store"
    assert all(t.page_config.sections[-1].type == "cta" for t in list_templates())
