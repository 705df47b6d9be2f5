"""Section Products grid : vue sur la liste produits externe (jamais stockée ici)."""
from typing import Literal
from pydantic import Field, field_validator
from .base import BaseSection, SectionProps


class ProductsGridProps(SectionProps):
    columns: int = 2
    show_prices: bool = Field(default=True, alias="showPrices")

    @field_validator("columns")
    @classmethod
    def _grid_columns(cls, v: int) -> int:
        # Grille 2 ou 3 colonnes ; toute autre valeur (ex. 1 hérité) → 2
        return 3 if v == 3 else 2


class ProductsGridSection(BaseSection):
    type: Literal["products_grid"] = "products_grid"
    props: ProductsGridProps = ProductsGridProps()
