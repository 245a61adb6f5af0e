"""Utilities for parsing, rendering, and generating article detail pages."""

from .extensions import ArticleExtension
from .models import ArticleModel
from .page_generator import ArticlePageGenerator
from .renderer import HtmlContentRenderer

__all__ = [
    "ArticleExtension",
    "ArticleModel",
    "ArticlePageGenerator",
    "HtmlContentRenderer",
]
