"""
Parser de blocs — dict JSON → bloc Pydantic typé.
Ne lève jamais : bloc non objet ou type inconnu → None (bloc écarté, journalisé).
Un champ hors forme retombe sur son défaut sans écarter le bloc (voir CamelModel).
"""
import logging
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from ..blocks import BLOCK_REGISTRY, BaseBlock

log = logging.getLogger(__name__)


def _check_block(raw: Any) -> tuple[Optional[BaseBlock], Optional[str]]:
    """Instancie un bloc depuis sa config ; renvoie (bloc, None) ou (None, raison)."""
    if not isinstance(raw, dict):
        return None, f"bloc non objet : {type(raw).__name__}"
    tag = raw.get("type")
    block_cls = BLOCK_REGISTRY.get(tag) if isinstance(tag, str) else None
    if block_cls is None:
        return None, f"type inconnu : {tag!r}"
    try:
        return block_cls.model_validate(raw), None
    except ValidationError as e:
        return None, f"contenu invalide : {e.error_count()} erreur(s), {e.errors()[0]['msg']}"


def parse_block(raw: Any) -> Optional[BaseBlock]:
    """Bloc typé, ou None si la config n'est pas un objet / le type est inconnu."""
    if isinstance(raw, BaseBlock):
        return raw
    block, reason = _check_block(raw)
    if block is None:
        block_id = raw.get("id") if isinstance(raw, dict) else None
        if reason and reason.startswith("type inconnu"):
            log.debug("Bloc %r ignoré : %s", block_id, reason)
        else:
            log.warning("Bloc %r ignoré : %s", block_id, reason)
    return block


def parse_blocks(raws: Optional[Iterable[Any]]) -> list[BaseBlock]:
    """Blocs typés dans l'ordre d'entrée, blocs non rendables écartés."""
    blocks = []
    for raw in raws or []:
        block = parse_block(raw)
        if block is not None:
            blocks.append(block)
    return blocks


def validate_blocks(raws: Iterable[Any]) -> list[dict]:
    """Liste des blocs qui seraient écartés au rendu : [{index, id, type, error}]."""
    issues = []
    for index, raw in enumerate(raws or []):
        if isinstance(raw, BaseBlock):
            continue
        block, reason = _check_block(raw)
        if block is None:
            issues.append({
                "index": index,
                "id": raw.get("id") if isinstance(raw, dict) else None,
                "type": raw.get("type") if isinstance(raw, dict) else None,
                "error": reason,
            })
    return issues
