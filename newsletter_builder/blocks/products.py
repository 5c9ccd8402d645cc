"""Bloc recommandation produits (grille 2 colonnes)."""
from typing import List, Literal

from pydantic import Field, field_validator

from ..core.schemas import CamelModel
from .base import BaseBlock, BlockContent, only_records


class ProductItem(CamelModel):
    name: str = ""
    image: str = ""
    price: str = ""
    discount: str = ""
    description: str = ""
    link: str = ""


class ProductRecommendationContent(BlockContent):
    title: str = ""
    products: List[ProductItem] = Field(default_factory=list)
    cta_text: str = "Shop now"

    @field_validator("products", mode="before")
    @classmethod
    def keep_records(cls, value):
        return only_records(value)


class ProductRecommendationBlock(BaseBlock):
    type: Literal["product-recommendation"] = "product-recommendation"
    content: ProductRecommendationContent = Field(default_factory=ProductRecommendationContent)
