"""
Blocs de base pour newsletter_builder.
Bloc = {id, type, content, style?} — `type` discrimine la forme de `content`.
"""
from typing import Any, Optional

from pydantic import Field

from ..core.schemas import CamelModel, StyleSpec


class BlockContent(CamelModel):
    """Contenu d'un bloc. Tous les champs sont optionnels, les clés inconnues ignorées."""
    pass


class BaseBlock(CamelModel):
    """Bloc de base (classe parente de tous les blocs)."""
    type: str
    id: str = ""
    style: Optional[StyleSpec] = Field(default=None)


def only_records(value: Any) -> Any:
    """Garde uniquement les entrées dict d'une liste (une saisie hors forme est ignorée)."""
    if value is None:
        return []
    if isinstance(value, list):
        return [item for item in value if isinstance(item, (dict, CamelModel))]
    return value
