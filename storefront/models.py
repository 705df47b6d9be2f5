"""
Data models : Store, Product
SQLAlchemy (SQLite) + Pydantic v2 (payloads API)
"""
import secrets
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from store_builder import PageDocument, dump_manifest
from store_builder.manifest import ManifestPage


BUSINESS_TYPES = ["saree", "food", "beauty", "electronics", "handmade", "other"]

PRODUCT_PLACEHOLDER_IMAGE = "https://source.unsplash.com/random/400x400/?product"


def new_owner_token() -> str:
    return secrets.token_hex(32)


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class StoreDB(Base):
    __tablename__ = "stores"
    id:            Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name:          Mapped[str]           = mapped_column(sa.String(255), nullable=False)
    business_type: Mapped[str]           = mapped_column(sa.String(32), nullable=False)
    whatsapp:      Mapped[str]           = mapped_column(sa.String(20), nullable=False, unique=True, index=True)
    owner_token:   Mapped[str]           = mapped_column(sa.String(64), nullable=False, default=new_owner_token)
    template_id:   Mapped[Optional[str]] = mapped_column(sa.String(64), nullable=True)
    page_config:   Mapped[Optional[str]] = mapped_column(sa.Text, nullable=True)   # JSON {sections:[…]}
    created_at:    Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:    Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class ProductDB(Base):
    __tablename__ = "products"
    id:          Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    store_id:    Mapped[str]           = mapped_column(sa.String, sa.ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True)
    name:        Mapped[str]           = mapped_column(sa.String(255), nullable=False)
    price:       Mapped[float]         = mapped_column(sa.Float, nullable=False)
    image:       Mapped[str]           = mapped_column(sa.Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(sa.Text, nullable=True)
    sort_order:  Mapped[float]         = mapped_column(sa.Float, default=0)
    created_at:  Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)


# ── Pydantic (requêtes / réponses API) ─────────────────────────────────

class StoreCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    type: str
    whatsapp: str = Field(..., min_length=1, max_length=20)
    template_id: Optional[str] = Field(None, alias="templateId", max_length=64)
    page_config: Optional[ManifestPage] = Field(None, alias="pageConfig")


class StoreUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[str] = None
    whatsapp: Optional[str] = Field(None, min_length=1, max_length=20)
    template_id: Optional[str] = Field(None, alias="templateId", max_length=64)
    page_config: Optional[ManifestPage] = Field(None, alias="pageConfig")


class ProductCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., gt=0)
    image: Optional[str] = None
    description: Optional[str] = None
    sort_order: float = Field(0, alias="sortOrder")


def product_to_dict(p: ProductDB) -> Dict[str, Any]:
    return {
        "id": p.id,
        "storeId": p.store_id,
        "name": p.name,
        "price": p.price,
        "image": p.image,
        "description": p.description,
        "sortOrder": p.sort_order,
        "createdAt": p.created_at.isoformat() if p.created_at else None,
    }


def store_to_dict(s: StoreDB, products: Optional[List[ProductDB]] = None,
                  page_document: Optional[PageDocument] = None,
                  include_token: bool = False) -> Dict[str, Any]:
    out = {
        "id": s.id,
        "name": s.name,
        "type": s.business_type,
        "whatsapp": s.whatsapp,
        "templateId": s.template_id,
        "pageConfig": dump_manifest(page_document) if page_document is not None else None,
        "createdAt": s.created_at.isoformat() if s.created_at else None,
        "updatedAt": s.updated_at.isoformat() if s.updated_at else None,
    }
    if products is not None:
        out["products"] = [product_to_dict(p) for p in products]
    if include_token:
        out["ownerToken"] = s.owner_token
    return out
