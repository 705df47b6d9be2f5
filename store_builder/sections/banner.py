"""Section Banner : image seule, cliquable si `link` est renseigné."""
from typing import Literal
from .base import BaseSection, SectionProps


class BannerProps(SectionProps):
    image: str = ""
    link: str = ""
    alt: str = "Banner"


class BannerSection(BaseSection):
    type: Literal["banner"] = "banner"
    props: BannerProps = BannerProps()
