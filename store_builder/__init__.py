"""
Store Builder : modèle de composition des pages boutique.

Usage (rendu):
    >>> from store_builder import StoreContext, apply_template, render_page
    >>> doc = apply_template("minimal")
    >>> html = render_page(doc, StoreContext(store_name="Amar Dokan", whatsapp_number="9876543210"))

Usage (édition):
    >>> from store_builder import PageEditor, blank_document
    >>> editor = PageEditor(blank_document(), on_change=print)
    >>> editor.add_section("text")

Usage (persistance):
    >>> from store_builder import to_json, from_json
    >>> from_json(to_json(doc)) == doc
    True
"""

# ── Modèle ──────────────────────────────────────────────────────────────────
from .core.schemas import (
    SectionType,
    SECTION_TYPES,
    SectionInstance,
    PageDocument,
    Product,
    StoreContext,
    Template,
)
from .core.ids import generate_section_id
from .core.whatsapp import normalize_whatsapp, whatsapp_link, order_message, format_price, to_e164

# ── Registry + sections typées ──────────────────────────────────────────────
from .core.registry import (
    PropertyField,
    SectionSpec,
    get_spec,
    list_specs,
    label_for,
    defaults_for,
    is_editable,
    resolve_section,
    catalog,
)
from .sections import (
    BaseSection, SectionProps, SectionUnion,
    HeroSection, HeroProps,
    ProductsGridSection, ProductsGridProps,
    CtaSection, CtaProps,
    TextSection, TextProps,
    BannerSection, BannerProps,
    FeaturesSection, FeaturesProps, FeatureItem,
)

# ── Manifest (format persisté) ──────────────────────────────────────────────
from .manifest import ManifestPage, ManifestSection, parse_manifest, dump_manifest, to_json, from_json

# ── Rendu ───────────────────────────────────────────────────────────────────
from .renderer import Renderer, HtmlRenderer, render_page, render_sections, render_section

# ── Édition + templates ─────────────────────────────────────────────────────
from .templates import STORE_TEMPLATES, list_templates, get_template, apply_template, blank_document
from .editor import (
    PageEditor,
    ReorderGesture,
    KeyboardReorder,
    add_section,
    remove_section,
    reorder_sections,
    update_section_props,
    move_section,
)

__version__ = "0.1.0"

__all__ = [
    # modèle
    "SectionType", "SECTION_TYPES", "SectionInstance", "PageDocument",
    "Product", "StoreContext", "Template", "generate_section_id",
    "normalize_whatsapp", "whatsapp_link", "order_message", "format_price", "to_e164",
    # registry
    "PropertyField", "SectionSpec", "get_spec", "list_specs", "label_for",
    "defaults_for", "is_editable", "resolve_section", "catalog",
    # sections
    "BaseSection", "SectionProps", "SectionUnion",
    "HeroSection", "HeroProps", "ProductsGridSection", "ProductsGridProps",
    "CtaSection", "CtaProps", "TextSection", "TextProps",
    "BannerSection", "BannerProps", "FeaturesSection", "FeaturesProps", "FeatureItem",
    # manifest
    "ManifestPage", "ManifestSection", "parse_manifest", "dump_manifest", "to_json", "from_json",
    # rendu
    "Renderer", "HtmlRenderer", "render_page", "render_sections", "render_section",
    # édition
    "STORE_TEMPLATES", "list_templates", "get_template", "apply_template", "blank_document",
    "PageEditor", "ReorderGesture", "KeyboardReorder",
    "add_section", "remove_section", "reorder_sections", "update_section_props", "move_section",
]
