"""
Page builder : templates, catalogue de sections, validation, rendu.
GET  /api/templates                   → catalogue des templates
GET  /api/templates/{id}              → copie appliquée d'un template
GET  /api/page-builder/catalog        → types de section (labels, défauts, champs)
POST /api/page-builder/validate       → validation stricte d'un document
POST /api/page-builder/render         → document + contexte → HTML
GET  /s/{number}                      → page publique de la boutique
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from sqlalchemy.orm import Session

from store_builder import (
    Product, StoreContext,
    apply_template, blank_document, catalog, dump_manifest, get_template, list_templates,
    parse_manifest, render_page,
)
from store_builder.manifest import ManifestPage

from ...database import get_db, db_get_store_by_whatsapp, db_list_products
from ...storage import PageStore
from .stores import page_store

log = logging.getLogger(__name__)
router = APIRouter(tags=["Page builder"])


class RenderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page_config: ManifestPage = Field(..., alias="pageConfig")
    store_name: str = Field(..., alias="storeName")
    whatsapp: str
    products: List[Product] = Field(default_factory=list)
    title: Optional[str] = None


def _template_payload(template, page_config) -> Dict[str, Any]:
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "preview": template.preview,
        "pageConfig": dump_manifest(page_config),
    }


# ── Templates ──────────────────────────────────────────────────────────────────

@router.get("/api/templates")
def templates():
    return [_template_payload(t, t.page_config) for t in list_templates()]


@router.get("/api/templates/{template_id}")
def template_detail(template_id: str):
    template = get_template(template_id)
    if template is None:
        raise HTTPException(404, f"Template '{template_id}' not found")
    return _template_payload(template, apply_template(template_id))


# ── Catalogue + validation ─────────────────────────────────────────────────────

@router.get("/api/page-builder/catalog")
def section_catalog():
    return catalog()


@router.post("/api/page-builder/validate")
def validate_page(payload: Any = Body(...)):
    """{"valid": true, "sections": n} ou {"valid": false, "errors": [...]}."""
    try:
        document = parse_manifest(ManifestPage.model_validate(payload))
    except ValidationError as e:
        errors = [
            {"loc": [str(p) for p in err["loc"]], "msg": err["msg"]}
            for err in e.errors(include_url=False)
        ]
        return {"valid": False, "errors": errors}
    return {"valid": True, "sections": len(document.sections)}


# ── Rendu ──────────────────────────────────────────────────────────────────────

@router.post("/api/page-builder/render", response_class=HTMLResponse)
def render_preview(body: RenderRequest):
    """Aperçu HTML d'un document non sauvegardé (éditeur)."""
    try:
        document = parse_manifest(body.page_config)
    except ValidationError as e:
        raise HTTPException(422, f"Invalid page config: {e.errors(include_url=False)[0]['msg']}")
    context = StoreContext(store_name=body.store_name, whatsapp_number=body.whatsapp, products=body.products)
    return HTMLResponse(render_page(document, context, title=body.title))


@router.get("/s/{number}", response_class=HTMLResponse)
def public_store_page(number: str, db: Session = Depends(get_db), pages: PageStore = Depends(page_store)):
    store = db_get_store_by_whatsapp(db, number)
    if not store:
        return HTMLResponse(
            "<p style='font-family:sans-serif;padding:40px'>Store not found.</p>", status_code=404,
        )

    document = pages.load_page_document(store.id)
    if document is None:
        document = blank_document()

    products = [
        Product(id=p.id, name=p.name, price=p.price, image=p.image, description=p.description)
        for p in db_list_products(db, store.id)
    ]
    context = StoreContext(store_name=store.name, whatsapp_number=store.whatsapp, products=products)
    return HTMLResponse(render_page(document, context))
