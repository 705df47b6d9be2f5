"""
Schémas Pydantic du modèle de page boutique.
Structure : PageDocument → SectionInstance (id, type, props)

Le sac `props` reste un dict libre (format persisté) ; la lecture typée passe
par le registry (core.registry.resolve_section).
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SectionType(str, Enum):
    HERO          = "hero"
    PRODUCTS_GRID = "products_grid"
    CTA           = "cta"
    TEXT          = "text"
    BANNER        = "banner"
    FEATURES      = "features"


SECTION_TYPES: List[str] = [t.value for t in SectionType]


class SectionInstance(BaseModel):
    """Une section de la page : id opaque, type (chaîne brute), sac de propriétés."""
    id: str = Field(..., min_length=1)
    type: str
    props: Dict[str, Any] = Field(default_factory=dict)

    @property
    def section_type(self) -> Optional[SectionType]:
        """SectionType connu, ou None pour un type hérité/inconnu."""
        try:
            return SectionType(self.type)
        except ValueError:
            return None


class PageDocument(BaseModel):
    """Page complète d'une boutique : l'ordre des sections est l'ordre de rendu."""
    sections: List[SectionInstance] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "PageDocument":
        seen = set()
        for section in self.sections:
            if section.id in seen:
                raise ValueError(f"Duplicate section id: {section.id!r}")
            seen.add(section.id)
        return self

    def index_of(self, section_id: str) -> int:
        """Position de la section, -1 si absente."""
        for i, section in enumerate(self.sections):
            if section.id == section_id:
                return i
        return -1

    def get(self, section_id: str) -> Optional[SectionInstance]:
        i = self.index_of(section_id)
        return self.sections[i] if i >= 0 else None


class Product(BaseModel):
    """Produit fourni par le catalogue externe au moment du rendu."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    name: str
    price: float
    image: str = ""
    description: Optional[str] = None


class StoreContext(BaseModel):
    """Contexte boutique injecté au rendu (nom, numéro WhatsApp brut, produits)."""
    store_name: str
    whatsapp_number: str
    products: List[Product] = Field(default_factory=list)


class Template(BaseModel):
    """Template de page prédéfini (catalogue en lecture seule)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str
    preview: Optional[str] = None
    page_config: PageDocument = Field(..., alias="pageConfig")
