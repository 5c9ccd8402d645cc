"""Bloc réseaux sociaux — rangée de liens centrée."""
from typing import List, Literal

from pydantic import Field, field_validator

from .base import BaseBlock, BlockContent, only_records
from .header import SocialLink


class SocialMediaContent(BlockContent):
    title: str = ""
    links: List[SocialLink] = Field(default_factory=list)

    @field_validator("links", mode="before")
    @classmethod
    def keep_records(cls, value):
        return only_records(value)


class SocialMediaBlock(BaseBlock):
    type: Literal["social-media"] = "social-media"
    content: SocialMediaContent = Field(default_factory=SocialMediaContent)
