"""
Newsletter Builder — compilateur blocs → HTML mail (tables imbriquées, styles inline).

Usage :
    >>> from newsletter_builder import render_newsletter
    >>> html = render_newsletter(
    ...     [{"id": "h1", "type": "heading", "content": {"text": "Hello", "level": "h1"}}],
    ...     {"containerBackground": "#ffffff", "containerTextColor": "#333333",
    ...      "globalLinkColor": "#6366f1"},
    ... )

Usage (blocs typés) :
    >>> from newsletter_builder import HeadingBlock, HeadingContent, Theme, NewsletterBuilder
    >>> NewsletterBuilder(Theme()).render([HeadingBlock(content=HeadingContent(text="Hello"))])
"""

__version__ = "0.3.0"

# ── core ─────────────────────────────────────────────────────────────────────
from .core.schemas import Theme, StyleSpec
from .core.styles import ResolvedStyle, resolve_style
from .core.colors import to_rgba

# ── blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock,
    HeaderBlock, HeaderContent, FooterBlock, FooterContent, SocialLink,
    HeadingBlock, HeadingContent, ParagraphBlock, ParagraphContent,
    ImageBlock, ImageContent, ButtonBlock, ButtonContent,
    DividerBlock, SpacerBlock, SpacerContent, CompartmentBlock, CompartmentContent,
    FeaturedArticleBlock, FeaturedArticleContent,
    ArticleGridBlock, ArticleGridContent, ArticleItem,
    EventCalendarBlock, EventCalendarContent, EventItem,
    QuizBlock, QuizContent, QuizQuestion,
    SubscribeNowBlock, SubscribeNowContent,
    TestimonialBlock, TestimonialContent,
    CTABannerBlock, CTABannerContent,
    ProductRecommendationBlock, ProductRecommendationContent, ProductItem,
    SocialMediaBlock, SocialMediaContent,
    BLOCK_REGISTRY, BlockUnion, block_types,
)

# ── rendu ────────────────────────────────────────────────────────────────────
from .renderer import assemble, render_block
from .builder import NewsletterBuilder, render_newsletter

# ── manifest ─────────────────────────────────────────────────────────────────
from .manifest import NewsletterDocument, parse_block, parse_blocks, validate_blocks

__all__ = [
    # core
    "Theme", "StyleSpec", "ResolvedStyle", "resolve_style", "to_rgba",
    # blocs
    "BaseBlock",
    "HeaderBlock", "HeaderContent", "FooterBlock", "FooterContent", "SocialLink",
    "HeadingBlock", "HeadingContent", "ParagraphBlock", "ParagraphContent",
    "ImageBlock", "ImageContent", "ButtonBlock", "ButtonContent",
    "DividerBlock", "SpacerBlock", "SpacerContent", "CompartmentBlock", "CompartmentContent",
    "FeaturedArticleBlock", "FeaturedArticleContent",
    "ArticleGridBlock", "ArticleGridContent", "ArticleItem",
    "EventCalendarBlock", "EventCalendarContent", "EventItem",
    "QuizBlock", "QuizContent", "QuizQuestion",
    "SubscribeNowBlock", "SubscribeNowContent",
    "TestimonialBlock", "TestimonialContent",
    "CTABannerBlock", "CTABannerContent",
    "ProductRecommendationBlock", "ProductRecommendationContent", "ProductItem",
    "SocialMediaBlock", "SocialMediaContent",
    "BLOCK_REGISTRY", "BlockUnion", "block_types",
    # rendu
    "assemble", "render_block", "NewsletterBuilder", "render_newsletter",
    # manifest
    "NewsletterDocument", "parse_block", "parse_blocks", "validate_blocks",
]
