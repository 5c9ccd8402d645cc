"""Blocs texte : titre (h1/h2/h3) et paragraphe."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, BlockContent


class HeadingContent(BlockContent):
    text: str = ""
    level: str = "h2"
    align: str = "center"


class HeadingBlock(BaseBlock):
    type: Literal["heading"] = "heading"
    content: HeadingContent = Field(default_factory=HeadingContent)


class ParagraphContent(BlockContent):
    text: str = ""
    align: str = "left"


class ParagraphBlock(BaseBlock):
    type: Literal["paragraph"] = "paragraph"
    content: ParagraphContent = Field(default_factory=ParagraphContent)
