"""
Manifest parser : JSON persisté ⇄ PageDocument.

Décodage permissif (données héritées) :
  - entrée non-objet, ou sans `id`/`type` chaîne → ignorée
  - `props` absent ou non-objet → {}
  - type inconnu → conservé (le renderer l'ignore)
  - id dupliqué → nouvel id généré
"""
import copy
import json
import logging
from typing import Any, Dict, Optional

from ..core.ids import generate_section_id
from ..core.schemas import PageDocument, SectionInstance
from .schema import ManifestPage

log = logging.getLogger(__name__)


def parse_manifest(data: Any) -> PageDocument:
    """Convertit un manifest (dict JSON ou ManifestPage) en PageDocument."""
    if isinstance(data, ManifestPage):
        return PageDocument(sections=[
            SectionInstance(id=s.id, type=s.type.value, props=copy.deepcopy(s.props))
            for s in data.sections
        ])

    raw_sections = data.get("sections") if isinstance(data, dict) else None
    if not isinstance(raw_sections, list):
        if data is not None:
            log.warning("Manifest sans liste 'sections' : document vide")
        return PageDocument()

    sections = []
    seen = set()
    for i, raw in enumerate(raw_sections):
        if not isinstance(raw, dict):
            log.warning("Section %d ignorée : pas un objet", i)
            continue
        sid, stype = raw.get("id"), raw.get("type")
        if not isinstance(sid, str) or not sid or not isinstance(stype, str):
            log.warning("Section %d ignorée : id/type manquant", i)
            continue
        if sid in seen:
            new_id = generate_section_id()
            log.warning("Id de section dupliqué %r → %r", sid, new_id)
            sid = new_id
        seen.add(sid)
        props = raw.get("props")
        sections.append(SectionInstance(id=sid, type=stype, props=copy.deepcopy(props) if isinstance(props, dict) else {}))

    return PageDocument(sections=sections)


def dump_manifest(document: PageDocument) -> Dict[str, Any]:
    """PageDocument → {"sections": [{"id", "type", "props"}, …]}"""
    return {
        "sections": [
            {"id": s.id, "type": s.type, "props": copy.deepcopy(s.props)}
            for s in document.sections
        ]
    }


def to_json(document: PageDocument) -> str:
    return json.dumps(dump_manifest(document), ensure_ascii=False)


def from_json(text: Optional[str]) -> Optional[PageDocument]:
    """JSON persisté → PageDocument ; None si vide ou illisible."""
    if not text:
        return None
    try:
        data = json.loads(text)
    except ValueError as e:
        log.warning("Manifest JSON illisible : %s", e)
        return None
    return parse_manifest(data)
