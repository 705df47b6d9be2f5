"""
Sections : exports publics + SectionUnion discriminée.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseSection, SectionProps
from .hero import HeroSection, HeroProps, HERO_PLACEHOLDER_IMAGE
from .products_grid import ProductsGridSection, ProductsGridProps
from .cta import CtaSection, CtaProps
from .text import TextSection, TextProps
from .banner import BannerSection, BannerProps
from .features import FeaturesSection, FeaturesProps, FeatureItem

# Union discriminée par type : une variante par SectionType
SectionUnion = Annotated[
    Union[
        HeroSection,
        ProductsGridSection,
        CtaSection,
        TextSection,
        BannerSection,
        FeaturesSection,
    ],
    Field(discriminator="type"),
]

__all__ = [
    "BaseSection", "SectionProps",
    "HeroSection", "HeroProps", "HERO_PLACEHOLDER_IMAGE",
    "ProductsGridSection", "ProductsGridProps",
    "CtaSection", "CtaProps",
    "TextSection", "TextProps",
    "BannerSection", "BannerProps",
    "FeaturesSection", "FeaturesProps", "FeatureItem",
    "SectionUnion",
]
