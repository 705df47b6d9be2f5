"""
Registry des types de section : libellé, défauts, éditabilité, champs du formulaire.

Table de lookup pure. Un type inconnu (donnée héritée après un changement de
schéma) donne None partout : jamais d'exception, le rendu l'ignore.
"""
from typing import Any, Dict, List, Literal, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, TypeAdapter

from .schemas import SectionInstance, SectionType
from ..sections import (
    BaseSection, SectionProps, SectionUnion,
    HeroSection, HeroProps,
    ProductsGridSection, ProductsGridProps,
    CtaSection, CtaProps,
    TextSection, TextProps,
    BannerSection, BannerProps,
    FeaturesSection, FeaturesProps,
)

FieldKind = Literal["text", "textarea", "url", "select", "checkbox"]


class PropertyField(BaseModel):
    """Champ du formulaire d'édition d'une section."""
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    kind: FieldKind = "text"
    placeholder: str = ""
    options: Tuple[str, ...] = ()


class SectionSpec(BaseModel):
    """Entrée du registry pour un SectionType."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: SectionType
    label: str
    section_model: Type[BaseSection]
    props_model: Type[SectionProps]
    editable: bool = True
    fields: Tuple[PropertyField, ...] = ()

    @property
    def defaults(self) -> Dict[str, Any]:
        return self.props_model().model_dump(by_alias=True, mode="json")


_REGISTRY: Dict[SectionType, SectionSpec] = {
    SectionType.HERO: SectionSpec(
        type=SectionType.HERO,
        label="Hero",
        section_model=HeroSection,
        props_model=HeroProps,
        fields=(
            PropertyField(key="title",    label="Title",       placeholder="Welcome to our store"),
            PropertyField(key="subtitle", label="Subtitle",    placeholder="Your trusted local store"),
            PropertyField(key="ctaText",  label="Button text", placeholder="Shop Now"),
            PropertyField(key="image",    label="Hero image URL (optional)", kind="url", placeholder="https://..."),
        ),
    ),
    SectionType.PRODUCTS_GRID: SectionSpec(
        type=SectionType.PRODUCTS_GRID,
        label="Products grid",
        section_model=ProductsGridSection,
        props_model=ProductsGridProps,
        fields=(
            PropertyField(key="columns",    label="Columns", kind="select", options=("2", "3")),
            PropertyField(key="showPrices", label="Show prices on cards", kind="checkbox"),
        ),
    ),
    SectionType.CTA: SectionSpec(
        type=SectionType.CTA,
        label="Call to action",
        section_model=CtaSection,
        props_model=CtaProps,
        fields=(
            PropertyField(key="title",      label="Title",       placeholder="Have questions?"),
            PropertyField(key="buttonText", label="Button text", placeholder="Chat on WhatsApp"),
        ),
    ),
    SectionType.TEXT: SectionSpec(
        type=SectionType.TEXT,
        label="Text block",
        section_model=TextSection,
        props_model=TextProps,
        fields=(
            PropertyField(key="content", label="Content",   kind="textarea", placeholder="Your text here..."),
            PropertyField(key="align",   label="Alignment", kind="select", options=("left", "center", "right")),
        ),
    ),
    SectionType.BANNER: SectionSpec(
        type=SectionType.BANNER,
        label="Banner image",
        section_model=BannerSection,
        props_model=BannerProps,
        fields=(
            PropertyField(key="image", label="Image URL",       kind="url", placeholder="https://..."),
            PropertyField(key="link",  label="Link (optional)", kind="url", placeholder="https://..."),
        ),
    ),
    # Éditeur des items prévu "dans une prochaine version" : lecture seule
    SectionType.FEATURES: SectionSpec(
        type=SectionType.FEATURES,
        label="Features",
        section_model=FeaturesSection,
        props_model=FeaturesProps,
        editable=False,
    ),
}

_SECTION_ADAPTER: TypeAdapter = TypeAdapter(SectionUnion)


def get_spec(section_type: Any) -> Optional[SectionSpec]:
    """SectionSpec du type, None si inconnu."""
    try:
        return _REGISTRY[SectionType(section_type)]
    except ValueError:
        return None


def list_specs() -> List[SectionSpec]:
    """Toutes les entrées, dans l'ordre de l'enum (ordre du menu « Add section »)."""
    return [_REGISTRY[t] for t in SectionType]


def label_for(section_type: Any) -> str:
    spec = get_spec(section_type)
    return spec.label if spec else str(section_type)


def defaults_for(section_type: Any) -> Dict[str, Any]:
    spec = get_spec(section_type)
    return spec.defaults if spec else {}


def is_editable(section_type: Any) -> bool:
    spec = get_spec(section_type)
    return bool(spec and spec.editable)


def get_field(section_type: Any, key: str) -> Optional[PropertyField]:
    spec = get_spec(section_type)
    if spec is None:
        return None
    return next((f for f in spec.fields if f.key == key), None)


def resolve_section(section: SectionInstance) -> Optional[BaseSection]:
    """
    Décode une SectionInstance en variante typée (HeroSection, …).
    Props décodées de façon permissive ; type inconnu → None.
    """
    spec = get_spec(section.type)
    if spec is None:
        return None
    props = spec.props_model.from_bag(section.props)
    return _SECTION_ADAPTER.validate_python(
        {"id": section.id, "type": spec.type.value, "props": props}
    )


def catalog() -> List[Dict[str, Any]]:
    """Catalogue JSON des types de section (API /page-builder/catalog)."""
    return [
        {
            "type":     spec.type.value,
            "label":    spec.label,
            "editable": spec.editable,
            "defaults": spec.defaults,
            "fields":   [f.model_dump(mode="json") for f in spec.fields],
            "schema":   spec.props_model.model_json_schema(by_alias=True),
        }
        for spec in list_specs()
    ]
