"""Section Text : paragraphe libre aligné. Contenu vide → aucun rendu."""
from typing import Literal
from .base import BaseSection, SectionProps


class TextProps(SectionProps):
    content: str = ""
    align: Literal["left", "center", "right"] = "center"


class TextSection(BaseSection):
    type: Literal["text"] = "text"
    props: TextProps = TextProps()
