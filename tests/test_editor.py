"""
Tests éditeur : opérations pures (add/remove/reorder/update), PageEditor,
geste drag & drop, réordonnancement clavier.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from store_builder import PageDocument, SectionInstance, blank_document, defaults_for
from store_builder.editor import (
    DRAG_ACTIVATION_DISTANCE, KeyboardReorder, PageEditor, ReorderGesture,
    add_section, move_section, remove_section, reorder_sections, update_section_props,
)


# ── Helpers ───────────────────────────────────────────────────────────────

def doc(*ids):
    return PageDocument(sections=[SectionInstance(id=i, type="text", props={"content": i}) for i in ids])


def ids(document):
    return [s.id for s in document.sections]


# ── Opérations pures ──────────────────────────────────────────────────────

class TestAdd:
    def test_appends_with_fresh_id(self):
        d = doc("a", "b")
        out = add_section(d, "banner")
        assert ids(out)[:2] == ["a", "b"]
        new = out.sections[-1]
        assert new.type == "banner"
        assert new.props == {}
        assert new.id not in ("a", "b")
        assert ids(d) == ["a", "b"]

    def test_ids_unique_across_adds(self):
        d = PageDocument()
        for _ in range(50):
            d = add_section(d, "text")
        assert len(set(ids(d))) == 50

    def test_unknown_type_is_noop(self):
        d = doc("a")
        assert add_section(d, "carousel") is d


class TestRemove:
    def test_removes_and_keeps_order(self):
        assert ids(remove_section(doc("a", "b", "c"), "b")) == ["a", "c"]

    def test_missing_id_is_noop(self):
        d = doc("a")
        assert remove_section(d, "zz") is d


class TestReorder:
    @pytest.mark.parametrize("src, dst, expected", [
        ("a", "c", ["b", "c", "a", "d"]),
        ("d", "b", ["a", "d", "b", "c"]),
        ("b", "c", ["a", "c", "b", "d"]),
        ("c", "b", ["a", "c", "b", "d"]),
    ])
    def test_splice_semantics(self, src, dst, expected):
        assert ids(reorder_sections(doc("a", "b", "c", "d"), src, dst)) == expected

    @pytest.mark.parametrize("src, dst", [("a", "c"), ("d", "b"), ("b", "c"), ("c", "a"), ("a", "d")])
    def test_reverse_restores_order(self, src, dst):
        d = doc("a", "b", "c", "d")
        moved = reorder_sections(d, src, dst)
        origin = d.index_of(src)
        back = reorder_sections(moved, src, moved.sections[origin].id)
        assert ids(back) == ids(d)
        assert back == d

    def test_same_position_is_noop(self):
        d = doc("a", "b")
        assert reorder_sections(d, "a", "a") is d

    def test_missing_ids_are_noop(self):
        d = doc("a", "b")
        assert reorder_sections(d, "a", "zz") is d
        assert reorder_sections(d, "zz", "a") is d

    def test_is_permutation(self):
        d = doc("a", "b", "c", "d", "e")
        out = reorder_sections(d, "e", "a")
        assert sorted(ids(out)) == sorted(ids(d))
        assert out.get("e") == d.get("e")

    def test_move_is_clamped(self):
        d = doc("a", "b", "c")
        assert ids(move_section(d, "a", 1)) == ["b", "a", "c"]
        assert ids(move_section(d, "c", 5)) == ["a", "b", "c"]
        assert ids(move_section(d, "c", -5)) == ["c", "a", "b"]


class TestUpdateProps:
    def test_shallow_merge(self):
        d = PageDocument(sections=[SectionInstance(id="h", type="hero", props={"title": "A", "subtitle": "B"})])
        out = update_section_props(d, "h", {"title": "New"})
        assert out.get("h").props == {"title": "New", "subtitle": "B"}
        assert d.get("h").props == {"title": "A", "subtitle": "B"}

    def test_only_target_changes(self):
        d = doc("a", "b")
        out = update_section_props(d, "b", {"align": "left"})
        assert out.get("a") == d.get("a")
        assert out.get("b").props == {"content": "b", "align": "left"}
        assert ids(out) == ids(d)

    def test_missing_id_is_noop(self):
        d = doc("a")
        assert update_section_props(d, "zz", {"content": "x"}) is d


# ── PageEditor ────────────────────────────────────────────────────────────

class TestPageEditor:
    def test_add_text_then_edit(self):
        changes = []
        editor = PageEditor(blank_document(), on_change=changes.append)
        new_id = editor.add_section("text")
        assert new_id is not None
        assert editor.document.sections[-1].type == "text"
        assert len(editor.document.sections) == 4

        editor.set_property(new_id, "content", "Curated with care.")
        assert editor.document.get(new_id).props == {"content": "Curated with care."}
        assert len(changes) == 2

    def test_noops_do_not_notify(self):
        changes = []
        editor = PageEditor(blank_document(), on_change=changes.append)
        editor.remove_section("zz")
        editor.reorder("hero-1", "hero-1")
        editor.update_props("zz", {"title": "x"})
        assert editor.add_section("carousel") is None
        assert changes == []

    def test_set_property_respects_registry(self):
        editor = PageEditor(PageDocument(sections=[
            SectionInstance(id="f", type="features", props={"items": []}),
            SectionInstance(id="p", type="products_grid"),
            SectionInstance(id="x", type="carousel"),
        ]))
        before = editor.document
        editor.set_property("f", "items", [{"title": "x"}])     # features non éditable
        editor.set_property("p", "color", "red")                 # champ non déclaré
        editor.set_property("p", "columns", "4")                 # option inconnue
        editor.set_property("x", "title", "x")                   # type inconnu
        assert editor.document is before

    def test_set_property_coerces(self):
        editor = PageEditor(PageDocument(sections=[SectionInstance(id="p", type="products_grid")]))
        editor.set_property("p", "columns", "3")
        editor.set_property("p", "showPrices", "false")
        assert editor.document.get("p").props == {"columns": 3, "showPrices": False}

    def test_load_template_replaces_document(self):
        editor = PageEditor()
        editor.load_template("boutique")
        assert ids(editor.document) == ["h1", "t1", "p1", "c1"]
        with pytest.raises(ValueError):
            editor.load_template("nope")

    def test_new_section_shows_defaults(self):
        editor = PageEditor()
        new_id = editor.add_section("cta")
        section = editor.document.get(new_id)
        assert section.props == {}
        assert defaults_for(section.type)["buttonText"] == "Chat on WhatsApp"


# ── Drag & drop ───────────────────────────────────────────────────────────

class TestReorderGesture:
    def test_tap_does_not_reorder(self):
        editor = PageEditor(doc("a", "b", "c"))
        gesture = editor.start_drag("a", 0, 0)
        gesture.move(3, 4, over_id="c")                       # 5px < seuil
        assert gesture.active is False
        assert ids(gesture.drop("c")) == ["a", "b", "c"]
        assert gesture.state == "cancelled"

    def test_drag_and_drop(self):
        changes = []
        editor = PageEditor(doc("a", "b", "c"), on_change=changes.append)
        gesture = editor.start_drag("a", 0, 0)
        assert gesture.move(0, DRAG_ACTIVATION_DISTANCE, over_id="b") is True
        gesture.move(0, 40, over_id="c")
        assert ids(gesture.preview()) == ["b", "c", "a"]
        assert ids(editor.document) == ["a", "b", "c"]          # rien d'écrit avant le drop
        gesture.drop()
        assert ids(editor.document) == ["b", "c", "a"]
        assert gesture.state == "dropped"
        assert len(changes) == 1

    def test_drop_outside_cancels(self):
        editor = PageEditor(doc("a", "b"))
        gesture = editor.start_drag("a", 0, 0)
        gesture.move(0, 20, over_id=None)
        gesture.drop()
        assert ids(editor.document) == ["a", "b"]
        assert gesture.state == "cancelled"

    def test_unknown_section_never_starts(self):
        gesture = ReorderGesture(PageEditor(doc("a")), "zz", 0, 0)
        assert gesture.move(100, 100, over_id="a") is False


# ── Clavier ───────────────────────────────────────────────────────────────

class TestKeyboardReorder:
    def test_arrow_then_enter(self):
        editor = PageEditor(doc("a", "b", "c"))
        kb = editor.keyboard_reorder("a")
        kb.handle_key("ArrowDown")
        kb.handle_key("ArrowDown")
        kb.handle_key("ArrowDown")                              # borné en fin de liste
        assert ids(kb.preview()) == ["b", "c", "a"]
        kb.handle_key("Enter")
        assert ids(editor.document) == ["b", "c", "a"]
        assert kb.state == "dropped"

    def test_escape_cancels(self):
        editor = PageEditor(doc("a", "b", "c"))
        kb = editor.keyboard_reorder("c")
        kb.handle_key("ArrowUp")
        kb.handle_key("Escape")
        assert ids(editor.document) == ["a", "b", "c"]
        kb.handle_key(" ")
        assert ids(editor.document) == ["a", "b", "c"]

    def test_space_commits(self):
        editor = KeyboardReorder(PageEditor(doc("a", "b")), "b")
        editor.handle_key("ArrowLeft")
        assert ids(editor.handle_key(" ")) == ["b", "a"]
