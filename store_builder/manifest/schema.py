"""
Schéma du manifest JSON : format persisté d'une page boutique.
PageDocument → dump_manifest() → JSON → parse_manifest() → PageDocument

Forme exacte sur le fil :
{
  "sections": [
    {"id": "h1", "type": "hero", "props": {"title": "Welcome"}},
    {"id": "p1", "type": "products_grid", "props": {"columns": 2, "showPrices": true}}
  ]
}

Ces modèles servent à la validation stricte des entrées API ; le décodage
depuis le stockage passe par parse_manifest (permissif).
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from ..core.schemas import SectionType


class ManifestSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, max_length=64)
    type: SectionType
    props: Dict[str, Any] = Field(default_factory=dict)


class ManifestPage(BaseModel):
    """Document de page tel qu'envoyé par l'éditeur (validation stricte)."""
    model_config = ConfigDict(extra="forbid")

    sections: List[ManifestSection] = Field(default_factory=list)
