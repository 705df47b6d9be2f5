"""
WhatsApp : normalisation des numéros + construction des deep links wa.me.

Même normalisation partout (rendu, recherche boutique par numéro, API) :
  1. ne garder que les chiffres
  2. retirer UN seul 0 initial
  3. préfixer l'indicatif 91 s'il est absent
"""
import re
from typing import Optional
from urllib.parse import quote

COUNTRY_CODE = "91"
WHATSAPP_BASE_URL = "https://wa.me"

# Caractères laissés tels quels par encodeURIComponent
_URI_COMPONENT_SAFE = "!*'()"


def normalize_whatsapp(value: str) -> str:
    """'098765 43210' → '919876543210'. Idempotent."""
    digits = re.sub(r"\D", "", value or "")
    if digits.startswith("0"):
        digits = digits[1:]
    return digits if digits.startswith(COUNTRY_CODE) else f"{COUNTRY_CODE}{digits}"


def to_e164(value: str) -> str:
    """Format E.164 (+919876543210) pour les collaborateurs SMS."""
    return f"+{normalize_whatsapp(value)}"


def whatsapp_link(number: str, text: Optional[str] = None) -> str:
    """https://wa.me/{numéro normalisé}[?text=message encodé]"""
    url = f"{WHATSAPP_BASE_URL}/{normalize_whatsapp(number)}"
    if text:
        url += "?text=" + quote(text, safe=_URI_COMPONENT_SAFE)
    return url


def format_price(price: float) -> str:
    """1250.0 → '1250', 99.5 → '99.5' ; pas d'arrondi."""
    value = float(price)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def order_message(store_name: str, product_name: str, price: float) -> str:
    """Texte prérempli du bouton Order d'une carte produit."""
    return (
        f"Hi {store_name}, I want to order: {product_name} - ₹{format_price(price)}. "
        f"Please confirm availability."
    )
