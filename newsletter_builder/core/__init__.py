"""Core module pour newsletter_builder."""
from .schemas import CamelModel, StyleSpec, Theme
from .colors import format_alpha, hex_to_rgb, rgb_components, to_rgba
from .styles import (
    ResolvedStyle,
    background_declarations,
    button_declarations,
    container_declarations,
    resolve_style,
)

__all__ = [
    "CamelModel",
    "StyleSpec",
    "Theme",
    "format_alpha",
    "hex_to_rgb",
    "rgb_components",
    "to_rgba",
    "ResolvedStyle",
    "background_declarations",
    "button_declarations",
    "container_declarations",
    "resolve_style",
]
