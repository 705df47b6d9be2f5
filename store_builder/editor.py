"""
Éditeur de page boutique : opérations pures + session d'édition.

Les quatre opérations (add / remove / reorder / update props) sont des
fonctions totales : elles retournent un nouveau PageDocument sans jamais
modifier l'entrée. Un id introuvable est absorbé (document retourné tel quel).

PageEditor enchaîne ces opérations pour une session d'édition et appelle
`on_change(document)` à chaque changement effectif ; il ne persiste rien.
"""
import logging
import math
from typing import Any, Callable, Dict, List, Optional

from .core.ids import generate_section_id
from .core.registry import PropertyField, get_field, get_spec, is_editable
from .core.schemas import PageDocument, SectionInstance
from .templates import apply_template

log = logging.getLogger(__name__)

ChangeCallback = Callable[[PageDocument], None]

# Distance minimale (px) avant qu'un appui devienne un drag : les taps sur
# les boutons éditer/supprimer ne déclenchent pas de réordonnancement
DRAG_ACTIVATION_DISTANCE = 8.0


# ── Opérations pures ─────────────────────────────────────────────────────────

def add_section(document: PageDocument, section_type: Any) -> PageDocument:
    """Ajoute en fin de page une section vide du type donné (id neuf)."""
    spec = get_spec(section_type)
    if spec is None:
        log.warning("add_section : type inconnu %r ignoré", section_type)
        return document
    section = SectionInstance(id=generate_section_id(), type=spec.type.value, props={})
    return PageDocument(sections=[*document.sections, section])


def remove_section(document: PageDocument, section_id: str) -> PageDocument:
    if document.index_of(section_id) < 0:
        return document
    return PageDocument(sections=[s for s in document.sections if s.id != section_id])


def reorder_sections(document: PageDocument, from_id: str, to_id: str) -> PageDocument:
    """
    Déplace `from_id` à la position qu'occupe actuellement `to_id`
    (splice standard, les autres sections se décalent).
    """
    if from_id == to_id:
        return document
    old_index = document.index_of(from_id)
    new_index = document.index_of(to_id)
    if old_index < 0 or new_index < 0:
        return document

    sections = list(document.sections)
    moved = sections.pop(old_index)
    sections.insert(new_index, moved)
    return PageDocument(sections=sections)


def update_section_props(document: PageDocument, section_id: str, patch: Dict[str, Any]) -> PageDocument:
    """Fusion superficielle de `patch` dans un nouveau sac de propriétés."""
    index = document.index_of(section_id)
    if index < 0:
        return document

    current = document.sections[index]
    updated = current.model_copy(update={"props": {**current.props, **patch}})
    sections = list(document.sections)
    sections[index] = updated
    return PageDocument(sections=sections)


def move_section(document: PageDocument, section_id: str, offset: int) -> PageDocument:
    """Déplace une section de `offset` positions (borné aux extrémités)."""
    index = document.index_of(section_id)
    if index < 0:
        return document
    target = min(max(index + offset, 0), len(document.sections) - 1)
    return reorder_sections(document, section_id, document.sections[target].id)


# ── Formulaire de propriétés ─────────────────────────────────────────────────

_TRUE_STRINGS = {"1", "true", "on", "yes"}


def coerce_field_value(field: PropertyField, value: Any) -> Any:
    """
    Convertit une valeur saisie selon le champ du formulaire.
    Retourne None si la valeur n'est pas acceptable (option inconnue…).
    """
    if field.kind == "checkbox":
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_STRINGS
        return bool(value)

    if field.kind == "select":
        text = "" if value is None else str(value)
        if text not in field.options:
            return None
        return int(text) if text.isdigit() else text

    return "" if value is None else str(value)


# ── Session d'édition ────────────────────────────────────────────────────────

class PageEditor:
    """
    Session d'édition d'une page.

    Usage:
        >>> editor = PageEditor(blank_document(), on_change=save_draft)
        >>> new_id = editor.add_section("text")
        >>> editor.set_property(new_id, "content", "Curated with care.")
        >>> editor.reorder(new_id, editor.document.sections[0].id)
    """

    def __init__(self, document: Optional[PageDocument] = None, on_change: Optional[ChangeCallback] = None):
        self._document = document if document is not None else PageDocument()
        self.on_change = on_change

    @property
    def document(self) -> PageDocument:
        return self._document

    def _commit(self, next_document: PageDocument) -> PageDocument:
        if next_document is not self._document:
            self._document = next_document
            if self.on_change:
                self.on_change(next_document)
        return self._document

    # ── Opérations ──

    def add_section(self, section_type: Any) -> Optional[str]:
        """Ajoute une section ; retourne son id (None si type inconnu)."""
        before = self._document
        after = self._commit(add_section(before, section_type))
        return after.sections[-1].id if after is not before else None

    def remove_section(self, section_id: str) -> PageDocument:
        return self._commit(remove_section(self._document, section_id))

    def reorder(self, from_id: str, to_id: str) -> PageDocument:
        return self._commit(reorder_sections(self._document, from_id, to_id))

    def move(self, section_id: str, offset: int) -> PageDocument:
        return self._commit(move_section(self._document, section_id, offset))

    def update_props(self, section_id: str, patch: Dict[str, Any]) -> PageDocument:
        return self._commit(update_section_props(self._document, section_id, patch))

    def set_property(self, section_id: str, key: str, value: Any) -> PageDocument:
        """
        Chemin du formulaire d'édition : seuls les types éditables et les
        champs déclarés au registry sont acceptés, sinon no-op.
        """
        section = self._document.get(section_id)
        if section is None or not is_editable(section.type):
            return self._document
        field = get_field(section.type, key)
        if field is None:
            return self._document
        coerced = coerce_field_value(field, value)
        if coerced is None:
            return self._document
        return self.update_props(section_id, {key: coerced})

    def load_template(self, template_id: str) -> PageDocument:
        """Remplace la page par une copie du template (ValueError si inconnu)."""
        return self._commit(apply_template(template_id))

    def replace(self, document: PageDocument) -> PageDocument:
        return self._commit(document)

    # ── Réordonnancement interactif ──

    def start_drag(self, section_id: str, x: float, y: float,
                   activation_distance: float = DRAG_ACTIVATION_DISTANCE) -> "ReorderGesture":
        return ReorderGesture(self, section_id, x, y, activation_distance)

    def keyboard_reorder(self, section_id: str) -> "KeyboardReorder":
        return KeyboardReorder(self, section_id)


class ReorderGesture:
    """
    Geste drag & drop sur la liste des sections.

    pending → dragging (après `activation_distance` px) → dropped | cancelled
    Rien n'est écrit dans le document avant un drop valide ; preview() donne
    l'ordre optimiste pendant le survol.
    """

    def __init__(self, editor: PageEditor, section_id: str, x: float, y: float,
                 activation_distance: float = DRAG_ACTIVATION_DISTANCE):
        self.editor = editor
        self.section_id = section_id
        self.origin = (x, y)
        self.activation_distance = activation_distance
        self.over_id: Optional[str] = None
        self.state = "pending" if editor.document.index_of(section_id) >= 0 else "cancelled"

    @property
    def active(self) -> bool:
        return self.state == "dragging"

    def move(self, x: float, y: float, over_id: Optional[str] = None) -> bool:
        """Suivi du pointeur ; retourne True si le drag est actif."""
        if self.state == "pending":
            dx, dy = x - self.origin[0], y - self.origin[1]
            if math.hypot(dx, dy) >= self.activation_distance:
                self.state = "dragging"
        if self.state == "dragging":
            self.over_id = over_id
        return self.active

    def preview(self) -> PageDocument:
        """Ordre affiché pendant le drag (non validé)."""
        if not self.active or self.over_id is None:
            return self.editor.document
        return reorder_sections(self.editor.document, self.section_id, self.over_id)

    def drop(self, target_id: Optional[str] = None) -> PageDocument:
        """
        Lâcher : cible valide → reorder ; même position → no-op ;
        hors cible (ou simple tap) → annulé, ordre d'origine conservé.
        """
        target = target_id if target_id is not None else self.over_id
        if not self.active or target is None or self.editor.document.index_of(target) < 0:
            return self.cancel()
        self.state = "dropped"
        return self.editor.reorder(self.section_id, target)

    def cancel(self) -> PageDocument:
        self.state = "cancelled"
        self.over_id = None
        return self.editor.document


class KeyboardReorder:
    """
    Réordonnancement au clavier (accessibilité), même sémantique que le drag.
    Espace/Entrée : valider, Échap : annuler, flèches : déplacer.
    """
    UP_KEYS     = ("ArrowUp", "ArrowLeft")
    DOWN_KEYS   = ("ArrowDown", "ArrowRight")
    COMMIT_KEYS = ("Enter", " ")
    CANCEL_KEYS = ("Escape",)

    def __init__(self, editor: PageEditor, section_id: str):
        self.editor = editor
        self.section_id = section_id
        self._ids: List[str] = [s.id for s in editor.document.sections]
        self.start_index = editor.document.index_of(section_id)
        self.index = self.start_index
        self.state = "picked" if self.start_index >= 0 else "cancelled"

    def handle_key(self, key: str) -> PageDocument:
        if self.state != "picked":
            return self.editor.document
        if key in self.UP_KEYS:
            self.index = max(self.index - 1, 0)
        elif key in self.DOWN_KEYS:
            self.index = min(self.index + 1, len(self._ids) - 1)
        elif key in self.COMMIT_KEYS:
            return self.commit()
        elif key in self.CANCEL_KEYS:
            return self.cancel()
        return self.editor.document

    def preview(self) -> PageDocument:
        if self.state != "picked":
            return self.editor.document
        return reorder_sections(self.editor.document, self.section_id, self._ids[self.index])

    def commit(self) -> PageDocument:
        if self.state != "picked":
            return self.editor.document
        self.state = "dropped"
        return self.editor.reorder(self.section_id, self._ids[self.index])

    def cancel(self) -> PageDocument:
        self.state = "cancelled"
        return self.editor.document
