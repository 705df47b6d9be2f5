"""
Boutiques + produits.
POST   /api/stores                              → création (+ ownerToken)
GET    /api/stores/{id}                         → boutique + produits + page
GET    /api/stores/by-whatsapp/{number}
PATCH  /api/stores/{id}                         (header x-store-owner-token)
POST   /api/stores/{id}/products                (header x-store-owner-token)
DELETE /api/stores/{id}/products/{product_id}   (header x-store-owner-token)
"""
import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from store_builder import PageDocument, apply_template, parse_manifest
from store_builder.manifest import ManifestPage

from ...database import (
    get_db, StoreConflict,
    db_create_store, db_get_store, db_get_store_by_whatsapp, db_update_store,
    db_add_product, db_list_products, db_delete_product,
)
from ...models import BUSINESS_TYPES, StoreDB, StoreCreate, StoreUpdate, ProductCreate, product_to_dict, store_to_dict
from ...storage import PageStore, get_page_store

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/stores", tags=["Stores"])

OWNER_TOKEN_HEADER = "x-store-owner-token"
_CONFLICT = "A store with this WhatsApp number already exists."


def page_store() -> PageStore:
    return get_page_store()


def _owner_matches(store: StoreDB, token: Optional[str]) -> bool:
    return bool(token) and secrets.compare_digest(store.owner_token.encode(), token.encode())


def _check_type(business_type: Optional[str]):
    if business_type is not None and business_type not in BUSINESS_TYPES:
        raise HTTPException(422, f"Unknown business type '{business_type}'. Expected one of {BUSINESS_TYPES}")


def _page_from_manifest(manifest: ManifestPage) -> PageDocument:
    try:
        return parse_manifest(manifest)
    except ValidationError as e:
        raise HTTPException(422, f"Invalid page config: {e.errors(include_url=False)[0]['msg']}")


def _store_payload(db: Session, store: StoreDB, pages: PageStore, include_token: bool = False) -> dict:
    return store_to_dict(
        store,
        products=db_list_products(db, store.id),
        page_document=pages.load_page_document(store.id),
        include_token=include_token,
    )


# ── Stores ─────────────────────────────────────────────────────────────────────

@router.post("", status_code=201)
def create_store(body: StoreCreate, db: Session = Depends(get_db), pages: PageStore = Depends(page_store)):
    _check_type(body.type)

    document = None
    if body.page_config is not None:
        document = _page_from_manifest(body.page_config)
    elif body.template_id:
        try:
            document = apply_template(body.template_id)
        except ValueError:
            raise HTTPException(422, f"Unknown template '{body.template_id}'")

    try:
        store = db_create_store(db, body.name, body.type, body.whatsapp, template_id=body.template_id)
    except StoreConflict:
        raise HTTPException(409, _CONFLICT)

    if document is not None and not pages.save_page_document(store.id, document):
        log.error("Page initiale non sauvegardée pour %s", store.id)
    return _store_payload(db, store, pages, include_token=True)


@router.get("/by-whatsapp/{number}")
def get_store_by_whatsapp(number: str, db: Session = Depends(get_db), pages: PageStore = Depends(page_store)):
    store = db_get_store_by_whatsapp(db, number)
    if not store:
        raise HTTPException(404, "Store not found")
    return _store_payload(db, store, pages)


@router.get("/{store_id}")
def get_store(store_id: str, db: Session = Depends(get_db), pages: PageStore = Depends(page_store)):
    store = db_get_store(db, store_id)
    if not store:
        raise HTTPException(404, "Store not found")
    return _store_payload(db, store, pages)


@router.patch("/{store_id}")
def update_store(
    store_id: str,
    body: StoreUpdate,
    db: Session = Depends(get_db),
    pages: PageStore = Depends(page_store),
    owner_token: Optional[str] = Header(None, alias=OWNER_TOKEN_HEADER),
):
    """Mise à jour partielle ; pageConfig remplace la page entière."""
    store = db_get_store(db, store_id)
    if not store or not _owner_matches(store, owner_token):
        raise HTTPException(404, "Store not found or access denied")
    _check_type(body.type)

    document = _page_from_manifest(body.page_config) if body.page_config is not None else None
    try:
        store = db_update_store(
            db, store,
            name=body.name,
            business_type=body.type,
            whatsapp=body.whatsapp,
            template_id=body.template_id,
        )
    except StoreConflict:
        raise HTTPException(409, _CONFLICT)

    if document is not None and not pages.save_page_document(store.id, document):
        return JSONResponse({"message": "Page could not be saved"}, status_code=500)
    return _store_payload(db, store, pages)


# ── Products ───────────────────────────────────────────────────────────────────

@router.post("/{store_id}/products", status_code=201)
def add_product(
    store_id: str,
    body: ProductCreate,
    db: Session = Depends(get_db),
    owner_token: Optional[str] = Header(None, alias=OWNER_TOKEN_HEADER),
):
    store = db_get_store(db, store_id)
    if not store:
        raise HTTPException(404, "Store not found")
    if not _owner_matches(store, owner_token):
        raise HTTPException(403, "Access denied")
    product = db_add_product(
        db, store_id,
        name=body.name,
        price=body.price,
        image=body.image,
        description=body.description,
        sort_order=body.sort_order,
    )
    return product_to_dict(product)


@router.delete("/{store_id}/products/{product_id}", status_code=204)
def delete_product(
    store_id: str,
    product_id: str,
    db: Session = Depends(get_db),
    owner_token: Optional[str] = Header(None, alias=OWNER_TOKEN_HEADER),
):
    store = db_get_store(db, store_id)
    if not store or not _owner_matches(store, owner_token) or not db_delete_product(db, store_id, product_id):
        raise HTTPException(404, "Product not found or access denied")
    return Response(status_code=204)
