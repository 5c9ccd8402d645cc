"""
Blocs — exports publics + BlockUnion discriminé par `type`.
L'ensemble des types est fermé : BLOCK_CLASSES fait foi.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, BlockContent
from .header import HeaderBlock, HeaderContent, FooterBlock, FooterContent, SocialLink
from .text import HeadingBlock, HeadingContent, ParagraphBlock, ParagraphContent
from .media import ImageBlock, ImageContent, ButtonBlock, ButtonContent
from .layout import (
    DividerBlock, DividerContent,
    SpacerBlock, SpacerContent, DEFAULT_SPACER_HEIGHT,
    CompartmentBlock, CompartmentContent,
)
from .articles import (
    FeaturedArticleBlock, FeaturedArticleContent,
    ArticleGridBlock, ArticleGridContent, ArticleItem,
)
from .events import EventCalendarBlock, EventCalendarContent, EventItem
from .quiz import QuizBlock, QuizContent, QuizQuestion
from .engagement import (
    SubscribeNowBlock, SubscribeNowContent, SUBSCRIBE_DEFAULTS,
    TestimonialBlock, TestimonialContent,
    CTABannerBlock, CTABannerContent,
)
from .products import ProductRecommendationBlock, ProductRecommendationContent, ProductItem
from .social import SocialMediaBlock, SocialMediaContent

BLOCK_CLASSES = (
    HeaderBlock,
    FooterBlock,
    HeadingBlock,
    ParagraphBlock,
    ImageBlock,
    ButtonBlock,
    DividerBlock,
    SpacerBlock,
    CompartmentBlock,
    FeaturedArticleBlock,
    ArticleGridBlock,
    EventCalendarBlock,
    QuizBlock,
    SubscribeNowBlock,
    TestimonialBlock,
    CTABannerBlock,
    ProductRecommendationBlock,
    SocialMediaBlock,
)

# type → classe (ex. "article-grid" → ArticleGridBlock)
BLOCK_REGISTRY: dict = {cls.model_fields["type"].default: cls for cls in BLOCK_CLASSES}

# Union discriminée par type — utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        HeaderBlock,
        FooterBlock,
        HeadingBlock,
        ParagraphBlock,
        ImageBlock,
        ButtonBlock,
        DividerBlock,
        SpacerBlock,
        CompartmentBlock,
        FeaturedArticleBlock,
        ArticleGridBlock,
        EventCalendarBlock,
        QuizBlock,
        SubscribeNowBlock,
        TestimonialBlock,
        CTABannerBlock,
        ProductRecommendationBlock,
        SocialMediaBlock,
    ],
    Field(discriminator="type"),
]


def block_types() -> list[str]:
    """Liste des types de blocs reconnus, dans l'ordre de la palette."""
    return list(BLOCK_REGISTRY)


__all__ = [
    # Base
    "BaseBlock", "BlockContent",
    # En-tête / pied
    "HeaderBlock", "HeaderContent", "FooterBlock", "FooterContent", "SocialLink",
    # Texte
    "HeadingBlock", "HeadingContent", "ParagraphBlock", "ParagraphContent",
    # Média
    "ImageBlock", "ImageContent", "ButtonBlock", "ButtonContent",
    # Mise en page
    "DividerBlock", "DividerContent", "SpacerBlock", "SpacerContent", "DEFAULT_SPACER_HEIGHT",
    "CompartmentBlock", "CompartmentContent",
    # Articles
    "FeaturedArticleBlock", "FeaturedArticleContent",
    "ArticleGridBlock", "ArticleGridContent", "ArticleItem",
    # Événements / quiz
    "EventCalendarBlock", "EventCalendarContent", "EventItem",
    "QuizBlock", "QuizContent", "QuizQuestion",
    # Engagement
    "SubscribeNowBlock", "SubscribeNowContent", "SUBSCRIBE_DEFAULTS",
    "TestimonialBlock", "TestimonialContent",
    "CTABannerBlock", "CTABannerContent",
    # Produits / social
    "ProductRecommendationBlock", "ProductRecommendationContent", "ProductItem",
    "SocialMediaBlock", "SocialMediaContent",
    # Registry
    "BLOCK_CLASSES", "BLOCK_REGISTRY", "BlockUnion", "block_types",
]
