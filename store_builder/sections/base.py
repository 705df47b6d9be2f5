"""
Sections de base : props typées + BaseSection discriminée par `type`.

Le sac de propriétés persisté reste un dict libre ; chaque type le décode
ici de façon permissive : clés inconnues ignorées, valeur invalide → défaut
du champ. Le rendu ne lit jamais le dict brut.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError


class SectionProps(BaseModel):
    """Props d'une section (toutes optionnelles, défauts appliqués au rendu)."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @classmethod
    def from_bag(cls, bag: Any) -> "SectionProps":
        """Décode un sac de propriétés brut champ par champ, sans jamais lever."""
        if not isinstance(bag, dict):
            return cls()

        accepted = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key not in bag:
                continue
            try:
                cls.model_validate({key: bag[key]})
            except ValidationError:
                continue
            accepted[key] = bag[key]
        return cls.model_validate(accepted)


class BaseSection(BaseModel):
    """Section typée (classe parente de toutes les variantes)."""
    id: str
    type: str
    css_class: Optional[str] = None
