"""Blocs articles : article à la une + grille d'articles."""
from typing import List, Literal

from pydantic import Field, field_validator

from ..core.schemas import CamelModel
from .base import BaseBlock, BlockContent, only_records


class FeaturedArticleContent(BlockContent):
    image: str = ""
    title: str = ""
    author: str = ""
    date: str = ""
    excerpt: str = ""
    cta_text: str = "Read more"
    cta_url: str = "#"


class FeaturedArticleBlock(BaseBlock):
    type: Literal["featured-article"] = "featured-article"
    content: FeaturedArticleContent = Field(default_factory=FeaturedArticleContent)


class ArticleItem(CamelModel):
    image: str = ""
    title: str = ""
    author: str = ""
    excerpt: str = ""
    url: str = "#"
    cta_text: str = "Continue reading"


class ArticleGridContent(BlockContent):
    articles: List[ArticleItem] = Field(default_factory=list)

    @field_validator("articles", mode="before")
    @classmethod
    def keep_records(cls, value):
        return only_records(value)


class ArticleGridBlock(BaseBlock):
    type: Literal["article-grid"] = "article-grid"
    content: ArticleGridContent = Field(default_factory=ArticleGridContent)
