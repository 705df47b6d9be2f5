"""
Renderer HTML : page boutique publique.
Dispatch par type de section (variantes typées du registry), puis CTA WhatsApp
flottant ajouté après toutes les sections.

Lecture pure : aucun I/O, aucune mutation du document ni du contexte.
"""
import logging
from html import escape
from typing import Any, List, Optional

from ..core.registry import resolve_section
from ..core.schemas import PageDocument, Product, SectionInstance, StoreContext
from ..core.whatsapp import format_price, order_message, whatsapp_link
from ..sections import (
    HERO_PLACEHOLDER_IMAGE,
    HeroSection, ProductsGridSection, CtaSection,
    TextSection, BannerSection, FeaturesSection,
)
from .css import generate_page_css

log = logging.getLogger(__name__)

EMPTY_PRODUCTS_MESSAGE = "No products yet. Check back soon!"
FLOATING_CTA_LABEL = "Chat with Seller"

_EXTERNAL = 'target="_blank" rel="noopener noreferrer"'


def _attr(value: str) -> str:
    return escape(value or "", quote=True)


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_page(
    document: PageDocument,
    context: StoreContext,
    title: Optional[str] = None,
    theme: Optional[dict] = None,
    extra_head: str = "",
) -> str:
    """Génère le HTML complet de la page boutique."""
    body = "\n".join(render_sections(document, context))
    page_title = escape(title or context.store_name)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{page_title}</title>
  <style>{generate_page_css(theme)}</style>
  {extra_head}
</head>
<body>
<main class="store-page">
{body}
</main>
</body>
</html>"""


def render_sections(document: PageDocument, context: StoreContext) -> List[str]:
    """
    Fragments HTML dans l'ordre des sections.
    Les sections sans rendu (type inconnu, texte vide…) ne produisent aucun
    fragment ; le CTA flottant est toujours le dernier.
    """
    fragments = [html for html in (render_section(s, context) for s in document.sections) if html]
    fragments.append(render_floating_cta(context))
    return fragments


def render_section(section: SectionInstance, context: StoreContext) -> str:
    """Rendu d'une section, "" si elle ne produit rien."""
    typed = resolve_section(section)
    if typed is None:
        log.warning("Section ignorée : type inconnu %r (id=%s)", section.type, section.id)
        return ""
    return render_typed_section(typed, context)


# ── Dispatch section ─────────────────────────────────────────────────────────

def render_typed_section(section: Any, context: StoreContext) -> str:
    """Dispatch vers le renderer de la variante."""
    if isinstance(section, HeroSection):         return render_hero(section, context)
    if isinstance(section, ProductsGridSection): return render_products_grid(section, context)
    if isinstance(section, CtaSection):          return render_cta(section, context)
    if isinstance(section, TextSection):         return render_text(section)
    if isinstance(section, BannerSection):       return render_banner(section)
    if isinstance(section, FeaturesSection):     return render_features(section)
    return ""


# ── Renderers par type ───────────────────────────────────────────────────────

def render_hero(s: HeroSection, context: StoreContext) -> str:
    p = s.props
    title = p.title if p.title is not None else context.store_name
    image = p.image or HERO_PLACEHOLDER_IMAGE
    link  = whatsapp_link(context.whatsapp_number)

    return f"""<section class="hero" data-section-id="{_attr(s.id)}">
  <div class="hero__bg"><img src="{_attr(image)}" alt=""></div>
  <div class="hero__content">
    <h1 class="hero__title">{escape(title)}</h1>
    <p class="hero__subtitle">{escape(p.subtitle)}</p>
    <a href="{_attr(link)}" class="hero__cta" {_EXTERNAL}>{escape(p.cta_text)}</a>
  </div>
</section>"""


def render_product_card(product: Product, context: StoreContext, show_price: bool) -> str:
    message = order_message(context.store_name, product.name, product.price)
    link    = whatsapp_link(context.whatsapp_number, message)
    badge   = f'<span class="product-card__price">₹{format_price(product.price)}</span>' if show_price else ""

    return f"""<div class="product-card" data-product-id="{_attr(product.id)}">
  <div class="product-card__media">
    <img src="{_attr(product.image)}" alt="{_attr(product.name)}">
    {badge}
  </div>
  <div class="product-card__body">
    <h3 class="product-card__name">{escape(product.name)}</h3>
    <a href="{_attr(link)}" class="product-card__order" {_EXTERNAL}>Order</a>
  </div>
</div>"""


def render_products_grid(s: ProductsGridSection, context: StoreContext) -> str:
    p = s.props

    if context.products:
        cards = "".join(render_product_card(prod, context, p.show_prices) for prod in context.products)
        inner = f'<div class="products__grid products__grid--{p.columns}col">{cards}</div>'
    else:
        inner = f'<div class="products__empty">{EMPTY_PRODUCTS_MESSAGE}</div>'

    return f"""<section class="store-section products" data-section-id="{_attr(s.id)}">
  <h2 class="products__title">Products</h2>
  {inner}
</section>"""


def render_cta(s: CtaSection, context: StoreContext) -> str:
    p = s.props
    link = whatsapp_link(context.whatsapp_number)

    return f"""<section class="store-section" data-section-id="{_attr(s.id)}">
  <div class="cta-box">
    <h3 class="cta-box__title">{escape(p.title)}</h3>
    <a href="{_attr(link)}" class="cta-box__btn" {_EXTERNAL}>{escape(p.button_text)}</a>
  </div>
</section>"""


def render_text(s: TextSection) -> str:
    p = s.props
    if not p.content:
        return ""
    return (
        f'<section class="store-section" data-section-id="{_attr(s.id)}">'
        f'<div class="text-block text-block--{p.align}">{escape(p.content)}</div>'
        f'</section>'
    )


def render_banner(s: BannerSection) -> str:
    p = s.props
    if not p.image:
        return ""

    img = f'<img src="{_attr(p.image)}" alt="{_attr(p.alt)}">'
    if p.link:
        img = f'<a href="{_attr(p.link)}" class="banner__link" {_EXTERNAL}>{img}</a>'

    return f'<section class="store-section banner" data-section-id="{_attr(s.id)}">{img}</section>'


def render_features(s: FeaturesSection) -> str:
    p = s.props
    if not p.items:
        return ""

    items_html = ""
    for item in p.items:
        icon = f'<div class="features__icon">{escape(item.icon)}</div>' if item.icon else ""
        desc = f'<p class="features__desc">{escape(item.description)}</p>' if item.description else ""
        items_html += f"""<div class="features__item">
  {icon}
  <h4 class="features__title">{escape(item.title)}</h4>
  {desc}
</div>"""

    return f"""<section class="store-section features" data-section-id="{_attr(s.id)}">
  <div class="features__grid">{items_html}</div>
</section>"""


def render_floating_cta(context: StoreContext) -> str:
    """CTA WhatsApp flottant, indépendant du contenu des sections."""
    link = whatsapp_link(context.whatsapp_number)
    return f'<a href="{_attr(link)}" class="floating-cta" {_EXTERNAL}>{FLOATING_CTA_LABEL}</a>'


# ── Renderer objet (Protocol renderer.base.Renderer) ─────────────────────────

class HtmlRenderer:
    """Renderer HTML conforme au Protocol Renderer."""

    def __init__(self, theme: Optional[dict] = None):
        self.theme = theme

    def render_page(self, document: PageDocument, context: StoreContext) -> str:
        return render_page(document, context, theme=self.theme)

    def render_sections(self, document: PageDocument, context: StoreContext) -> List[str]:
        return render_sections(document, context)

    def render_section(self, section: SectionInstance, context: StoreContext) -> str:
        return render_section(section, context)
