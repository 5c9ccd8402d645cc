"""Renderers : fragments par bloc + assemblage du document."""
from .base import Renderer
from .css import get_email_css
from .document import CONTENT_WIDTH, assemble
from .html import TABLE_ATTRS, render_block, render_blocks

__all__ = [
    "Renderer",
    "get_email_css",
    "CONTENT_WIDTH",
    "assemble",
    "TABLE_ATTRS",
    "render_block",
    "render_blocks",
]
