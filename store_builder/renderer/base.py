"""
Protocol Renderer : interface pluggable pour les renderers de page boutique.
"""
from typing import List, Protocol, runtime_checkable
from ..core.schemas import PageDocument, SectionInstance, StoreContext


@runtime_checkable
class Renderer(Protocol):
    def render_page(self, document: PageDocument, context: StoreContext) -> str: ...
    def render_sections(self, document: PageDocument, context: StoreContext) -> List[str]: ...
    def render_section(self, section: SectionInstance, context: StoreContext) -> str: ...
