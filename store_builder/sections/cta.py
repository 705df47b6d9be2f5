"""Section CTA : titre + bouton vers un chat WhatsApp sans texte prérempli."""
from typing import Literal
from pydantic import Field
from .base import BaseSection, SectionProps


class CtaProps(SectionProps):
    title: str = "Have questions? Chat with us!"
    button_text: str = Field(default="Chat on WhatsApp", alias="buttonText")


class CtaSection(BaseSection):
    type: Literal["cta"] = "cta"
    props: CtaProps = CtaProps()
