"""Blocs en-tête et pied de page de la newsletter."""
from typing import List, Literal

from pydantic import Field, field_validator

from ..core.schemas import CamelModel
from .base import BaseBlock, BlockContent, only_records


class SocialLink(CamelModel):
    platform: str = ""
    url: str = "#"
    label: str = ""


class HeaderContent(BlockContent):
    logo_url: str = ""
    company_name: str = ""
    tagline: str = ""
    align: str = "center"


class HeaderBlock(BaseBlock):
    type: Literal["header"] = "header"
    content: HeaderContent = Field(default_factory=HeaderContent)


class FooterContent(BlockContent):
    company_name: str = ""
    address: str = ""
    email: str = ""
    phone: str = ""
    social_links: List[SocialLink] = Field(default_factory=list)
    website_url: str = ""
    unsubscribe_url: str = ""

    @field_validator("social_links", mode="before")
    @classmethod
    def keep_records(cls, value):
        return only_records(value)


class FooterBlock(BaseBlock):
    type: Literal["footer"] = "footer"
    content: FooterContent = Field(default_factory=FooterContent)
