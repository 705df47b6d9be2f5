"""SQLite : init + session + CRUD helpers"""
import logging, os
from pathlib import Path
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from store_builder import normalize_whatsapp

from .models import Base, StoreDB, ProductDB, PRODUCT_PLACEHOLDER_IMAGE

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"


def _sqlite_url() -> str:
    db_path = os.getenv("DB_PATH")
    if not db_path:
        DATA_DIR.mkdir(exist_ok=True)
        db_path = str(DATA_DIR / "storefront.db")
    return f"sqlite:///{db_path}"


def _make_engine(db_url: str):
    return create_engine(db_url, connect_args={"check_same_thread": False})


ENGINE       = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def init_db(db_url: Optional[str] = None):
    """(Re)lie ENGINE/SessionLocal à la base (DB_PATH lu à l'appel) et crée les tables."""
    global ENGINE
    url = db_url or _sqlite_url()
    if ENGINE is None or str(ENGINE.url) != url:
        if ENGINE is not None:
            ENGINE.dispose()
        ENGINE = _make_engine(url)
        SessionLocal.configure(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    log.info("DB prête : %s", url)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class StoreConflict(Exception):
    """Numéro WhatsApp déjà utilisé par une autre boutique."""


# ── Store ──
def db_create_store(db: Session, name: str, business_type: str, whatsapp: str,
                    template_id: Optional[str] = None) -> StoreDB:
    """Crée la boutique (numéro normalisé) ; StoreConflict si le numéro existe."""
    store = StoreDB(
        name=name,
        business_type=business_type,
        whatsapp=normalize_whatsapp(whatsapp),
        template_id=template_id,
    )
    db.add(store)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise StoreConflict(store.whatsapp)
    db.refresh(store)
    log.info("Boutique créée %s (%s)", store.id, store.whatsapp)
    return store


def db_get_store(db: Session, store_id: str) -> Optional[StoreDB]:
    return db.get(StoreDB, store_id)


def db_get_store_by_whatsapp(db: Session, whatsapp: str) -> Optional[StoreDB]:
    return db.query(StoreDB).filter_by(whatsapp=normalize_whatsapp(whatsapp)).first()


def db_update_store(db: Session, store: StoreDB, **fields) -> StoreDB:
    """Mise à jour partielle (champs None ignorés)."""
    if "whatsapp" in fields and fields["whatsapp"] is not None:
        fields["whatsapp"] = normalize_whatsapp(fields["whatsapp"])
    for k, v in fields.items():
        if v is not None:
            setattr(store, k, v)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise StoreConflict(fields.get("whatsapp"))
    db.refresh(store)
    return store


# ── Product ──
def db_add_product(db: Session, store_id: str, name: str, price: float,
                   image: Optional[str] = None, description: Optional[str] = None,
                   sort_order: float = 0) -> ProductDB:
    product = ProductDB(
        store_id=store_id,
        name=name,
        price=price,
        image=image if image and image.strip() else PRODUCT_PLACEHOLDER_IMAGE,
        description=description,
        sort_order=sort_order,
    )
    db.add(product); db.commit(); db.refresh(product); return product


def db_list_products(db: Session, store_id: str) -> List[ProductDB]:
    return (db.query(ProductDB)
              .filter_by(store_id=store_id)
              .order_by(ProductDB.sort_order, ProductDB.created_at)
              .all())


def db_delete_product(db: Session, store_id: str, product_id: str) -> bool:
    product = db.query(ProductDB).filter_by(id=product_id, store_id=store_id).first()
    if not product:
        return False
    db.delete(product); db.commit()
    return True
