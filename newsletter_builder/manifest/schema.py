"""
Schéma du document JSON produit par l'éditeur.

    {
      "theme":  {"containerBackground": "#ffffff", "containerTextColor": "#333333",
                 "globalLinkColor": "#6366f1"},
      "blocks": [{"id": "b1", "type": "heading", "content": {"text": "Hello"}}, ...]
    }

Les blocs restent des valeurs JSON brutes ici : un bloc non objet ou de type
inconnu ne doit pas faire échouer tout le document (voir parser.parse_blocks).
"""
from typing import Any, List, Optional

from pydantic import Field

from ..core.schemas import CamelModel, Theme


class NewsletterDocument(CamelModel):
    """Document newsletter complet : blocs ordonnés + thème optionnel."""
    blocks: List[Any] = Field(default_factory=list)
    theme: Optional[Theme] = None
