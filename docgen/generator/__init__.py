"""Utilities for rendering, navigating, and composing docgen pages."""

from .compositor import PageCompositor
from .models import ComposedPage, ComposedSite
from .navigation import Navigation, anchor_slug, page_output_path
from .renderer import HtmlContentRenderer
from .templates import TemplateLoader, TemplateSet, build_template_context

__all__ = [
    "ComposedPage",
    "ComposedSite",
    "HtmlContentRenderer",
    "Navigation",
    "PageCompositor",
    "TemplateLoader",
    "TemplateSet",
    "anchor_slug",
    "build_template_context",
    "page_output_path",
]
