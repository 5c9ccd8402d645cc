"""
API publique du compilateur newsletter → HTML mail.
"""
import logging
from typing import Any, Iterable, Optional, Union

from pydantic import ValidationError

from .blocks.base import BaseBlock
from .core.schemas import Theme
from .manifest.parser import parse_blocks
from .renderer.document import assemble
from .renderer.html import render_block as _render_block
from .renderer.html import render_blocks

log = logging.getLogger(__name__)

ThemeInput = Union[Theme, dict, None]


def coerce_theme(theme: ThemeInput) -> Theme:
    """Theme, dict JSON ou None → Theme. Un thème illisible retombe sur les défauts."""
    if isinstance(theme, Theme):
        return theme
    if not theme:
        return Theme()
    try:
        return Theme.model_validate(theme)
    except ValidationError as e:
        log.warning("Thème invalide, valeurs par défaut utilisées : %s", e.errors()[0]["msg"])
        return Theme()


class NewsletterBuilder:
    """
    Compilateur newsletter EURKAI.

    Usage:
        >>> builder = NewsletterBuilder(theme={"globalLinkColor": "#ff6600"})
        >>> html = builder.render([
        ...     {"id": "h1", "type": "heading", "content": {"text": "Hello", "level": "h1"}},
        ... ])
    """

    def __init__(self, theme: ThemeInput = None):
        """
        Args:
            theme: Thème par défaut des rendus (Theme, dict camelCase ou None)
        """
        self.theme = coerce_theme(theme)

    def render(self, blocks: Optional[Iterable[Any]], theme: ThemeInput = None) -> str:
        """
        Rend une liste ordonnée de blocs en document HTML complet.

        Args:
            blocks: Blocs typés ou dicts JSON de l'éditeur
            theme: Override du thème de l'instance

        Returns:
            HTML complet (jamais d'exception sur le contenu)
        """
        effective = coerce_theme(theme) if theme is not None else self.theme
        return assemble(render_blocks(parse_blocks(blocks), effective), effective)

    def render_block(self, block: Union[BaseBlock, dict], theme: ThemeInput = None) -> str:
        """Fragment HTML d'un seul bloc (chaîne vide si non rendable)."""
        effective = coerce_theme(theme) if theme is not None else self.theme
        parsed = parse_blocks([block])
        return _render_block(parsed[0], effective) if parsed else ""


# Fonction raccourcie pour usage direct
def render_newsletter(blocks: Optional[Iterable[Any]], theme: ThemeInput = None) -> str:
    """
    Rend une newsletter en HTML complet (fonction raccourcie).

    Pure sauf l'année courante des blocs footer (ligne copyright).
    """
    return NewsletterBuilder(theme).render(blocks)
