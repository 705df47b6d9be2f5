"""Renderers de page boutique."""
from .base import Renderer
from .html import HtmlRenderer, render_page, render_sections, render_section

__all__ = ["Renderer", "HtmlRenderer", "render_page", "render_sections", "render_section"]
