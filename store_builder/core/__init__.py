"""Core module pour store_builder."""
from .schemas import (
    SectionType,
    SECTION_TYPES,
    SectionInstance,
    PageDocument,
    Product,
    StoreContext,
    Template,
)
from .whatsapp import normalize_whatsapp, whatsapp_link, order_message, format_price, to_e164

__all__ = [
    "SectionType",
    "SECTION_TYPES",
    "SectionInstance",
    "PageDocument",
    "Product",
    "StoreContext",
    "Template",
    "normalize_whatsapp",
    "whatsapp_link",
    "order_message",
    "format_price",
    "to_e164",
]
