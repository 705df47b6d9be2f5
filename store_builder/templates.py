"""
Templates de page : catalogue prédéfini en lecture seule.

Un template n'est jamais modifié : apply_template() retourne une copie
profonde neuve à chaque appel.
"""
from typing import List, Optional

from .core.schemas import PageDocument, SectionInstance, Template


def _page(*sections: dict) -> PageDocument:
    return PageDocument(sections=[SectionInstance(**s) for s in sections])


STORE_TEMPLATES: List[Template] = [
    Template(
        id="minimal",
        name="Minimal",
        description="Clean and simple — hero, products, and WhatsApp CTA",
        page_config=_page(
            {"id": "h1", "type": "hero", "props": {
                "title": "Welcome to our store",
                "subtitle": "Quality products, easy ordering",
                "ctaText": "Shop Now",
            }},
            {"id": "p1", "type": "products_grid", "props": {"columns": 2, "showPrices": True}},
            {"id": "c1", "type": "cta", "props": {
                "title": "Questions? Chat with us!", "buttonText": "Chat on WhatsApp",
            }},
        ),
    ),
    Template(
        id="boutique",
        name="Boutique",
        description="Elegant layout for sarees, fashion & lifestyle",
        page_config=_page(
            {"id": "h1", "type": "hero", "props": {
                "title": "Discover our collection",
                "subtitle": "Handpicked for you",
                "ctaText": "Explore",
            }},
            {"id": "t1", "type": "text", "props": {"content": "Curated with care in Kolkata.", "align": "center"}},
            {"id": "p1", "type": "products_grid", "props": {"columns": 2, "showPrices": True}},
            {"id": "c1", "type": "cta", "props": {
                "title": "Order or enquire on WhatsApp", "buttonText": "Chat with us",
            }},
        ),
    ),
    Template(
        id="food",
        name="Food & Menu",
        description="Great for home chefs, cafés and food businesses",
        page_config=_page(
            {"id": "h1", "type": "hero", "props": {
                "title": "Today's specials",
                "subtitle": "Fresh from our kitchen",
                "ctaText": "See menu",
            }},
            # columns=1 conservé tel quel, rendu en 2 colonnes
            {"id": "p1", "type": "products_grid", "props": {"columns": 1, "showPrices": True}},
            {"id": "c1", "type": "cta", "props": {
                "title": "Place your order", "buttonText": "Order on WhatsApp",
            }},
        ),
    ),
    Template(
        id="classic",
        name="Classic Shop",
        description="Traditional storefront with banner and features",
        page_config=_page(
            {"id": "h1", "type": "hero", "props": {
                "title": "Your shop name",
                "subtitle": "Serving Kolkata with pride",
                "ctaText": "View products",
            }},
            {"id": "f1", "type": "features", "props": {"items": [
                {"title": "Quality", "description": "Best products"},
                {"title": "Fast reply", "description": "Quick on WhatsApp"},
                {"title": "Local", "description": "Based in Kolkata"},
            ]}},
            {"id": "p1", "type": "products_grid", "props": {"columns": 3, "showPrices": True}},
            {"id": "c1", "type": "cta", "props": {
                "title": "Get in touch", "buttonText": "Chat with Seller",
            }},
        ),
    ),
]

_BLANK_SECTIONS = (
    {"id": "hero-1", "type": "hero", "props": {"title": "Welcome", "subtitle": "Your store", "ctaText": "Shop Now"}},
    {"id": "products-1", "type": "products_grid", "props": {"columns": 2, "showPrices": True}},
    {"id": "cta-1", "type": "cta", "props": {"title": "Have questions?", "buttonText": "Chat with us"}},
)


def _find(template_id: str) -> Optional[Template]:
    return next((t for t in STORE_TEMPLATES if t.id == template_id), None)


def list_templates() -> List[Template]:
    """Copies des templates, dans l'ordre d'affichage."""
    return [t.model_copy(deep=True) for t in STORE_TEMPLATES]


def get_template(template_id: str) -> Optional[Template]:
    template = _find(template_id)
    return template.model_copy(deep=True) if template is not None else None


def apply_template(template_id: str) -> PageDocument:
    """Copie profonde et indépendante de la page du template."""
    template = _find(template_id)
    if template is None:
        raise ValueError(
            f"Template inconnu : {template_id!r}. Catalogue : {[t.id for t in STORE_TEMPLATES]}"
        )
    return template.page_config.model_copy(deep=True)


def blank_document() -> PageDocument:
    """Page de départ « from scratch » : hero, grille produits, CTA."""
    return _page(*_BLANK_SECTIONS).model_copy(deep=True)
