"""Blocs d'engagement : inscription, témoignage, bannière CTA."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, BlockContent

SUBSCRIBE_DEFAULTS = {
    "title": "Subscribe to Our Newsletter",
    "message": "Stay up to date with our latest news and updates.",
    "placeholder": "Enter your email address",
    "button_text": "Subscribe",
    "button_action": "#",
}


class SubscribeNowContent(BlockContent):
    title: str = SUBSCRIBE_DEFAULTS["title"]
    message: str = SUBSCRIBE_DEFAULTS["message"]
    placeholder: str = SUBSCRIBE_DEFAULTS["placeholder"]
    button_text: str = SUBSCRIBE_DEFAULTS["button_text"]
    button_action: str = SUBSCRIBE_DEFAULTS["button_action"]


class SubscribeNowBlock(BaseBlock):
    type: Literal["subscribe-now"] = "subscribe-now"
    content: SubscribeNowContent = Field(default_factory=SubscribeNowContent)


class TestimonialContent(BlockContent):
    quote: str = ""
    image: str = ""
    author: str = ""
    role: str = ""
    company: str = ""


class TestimonialBlock(BaseBlock):
    type: Literal["testimonial"] = "testimonial"
    content: TestimonialContent = Field(default_factory=TestimonialContent)


class CTABannerContent(BlockContent):
    title: str = ""
    content: str = ""
    button_text: str = ""
    button_url: str = "#"


class CTABannerBlock(BaseBlock):
    type: Literal["cta-banner"] = "cta-banner"
    content: CTABannerContent = Field(default_factory=CTABannerContent)
