"""Section Features : cartes icône/titre/description (non éditable dans le builder)."""
from typing import List, Literal, Optional
from pydantic import field_validator
from .base import BaseSection, SectionProps


class FeatureItem(SectionProps):
    icon: Optional[str] = None
    title: str = "Feature"
    description: Optional[str] = None


class FeaturesProps(SectionProps):
    items: List[FeatureItem] = []

    @field_validator("items", mode="before")
    @classmethod
    def _decode_items(cls, v):
        # Un item mal formé est ignoré, il n'invalide pas toute la liste
        if not isinstance(v, list):
            return []
        return [FeatureItem.from_bag(item) for item in v if isinstance(item, dict)]


class FeaturesSection(BaseSection):
    type: Literal["features"] = "features"
    props: FeaturesProps = FeaturesProps()
