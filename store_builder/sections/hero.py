"""Section Hero : titre de la boutique sur image de fond + bouton WhatsApp."""
from typing import Literal, Optional
from pydantic import Field
from .base import BaseSection, SectionProps

HERO_PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1582555172866-f73bb12a2ab3?w=800&q=80"


class HeroProps(SectionProps):
    title: Optional[str] = None          # None → nom de la boutique
    subtitle: str = "Your trusted local store"
    image: str = HERO_PLACEHOLDER_IMAGE
    cta_text: str = Field(default="Shop Now", alias="ctaText")


class HeroSection(BaseSection):
    type: Literal["hero"] = "hero"
    props: HeroProps = HeroProps()
