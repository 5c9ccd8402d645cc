"""Blocs image et bouton."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, BlockContent


class ImageContent(BlockContent):
    url: str = ""
    alt: str = ""
    caption: str = ""
    link: str = ""


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    content: ImageContent = Field(default_factory=ImageContent)


class ButtonContent(BlockContent):
    text: str = "Click here"
    url: str = "#"
    align: str = "center"


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    content: ButtonContent = Field(default_factory=ButtonContent)
