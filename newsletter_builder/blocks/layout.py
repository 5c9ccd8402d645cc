"""Blocs de mise en page : séparateur, espaceur, compartiment HTML."""
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from .base import BaseBlock, BlockContent

DEFAULT_SPACER_HEIGHT = 20


class DividerContent(BlockContent):
    pass


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    content: DividerContent = Field(default_factory=DividerContent)


class SpacerContent(BlockContent):
    height: Optional[int] = None

    @field_validator("height", mode="before")
    @classmethod
    def lenient_height(cls, value: Any) -> Optional[int]:
        # "40", "40px", 40.0 → 40 ; illisible ou infini → hauteur par défaut
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(float(str(value).strip().removesuffix("px")))
        except (ValueError, OverflowError):
            return None


class SpacerBlock(BaseBlock):
    type: Literal["spacer"] = "spacer"
    content: SpacerContent = Field(default_factory=SpacerContent)


class CompartmentContent(BlockContent):
    title: str = ""
    content: str = ""  # HTML brut, inséré sans échappement


class CompartmentBlock(BaseBlock):
    type: Literal["compartment"] = "compartment"
    content: CompartmentContent = Field(default_factory=CompartmentContent)
