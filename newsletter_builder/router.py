"""
Router FastAPI — endpoints newsletter_builder.

POST /newsletter/render    → NewsletterDocument → HTMLResponse (aperçu / copie / envoi)
POST /newsletter/validate  → NewsletterDocument → {"valid": bool, "issues": [...]}
GET  /newsletter/catalog   → types de blocs disponibles + leurs JSON schemas
"""
import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse

from .blocks import BLOCK_REGISTRY
from .builder import render_newsletter
from .config import get_settings
from .manifest.parser import validate_blocks
from .manifest.schema import NewsletterDocument

log = logging.getLogger(__name__)

router = APIRouter(prefix="/newsletter", tags=["newsletter"])


@router.post("/render", response_class=HTMLResponse, summary="Rend un document newsletter en HTML mail")
def render(document: NewsletterDocument) -> HTMLResponse:
    """Reçoit blocs + thème, retourne le HTML complet (blocs invalides écartés)."""
    theme = document.theme or get_settings().default_theme()
    html = render_newsletter(document.blocks, theme)
    log.info("Newsletter rendue : %d bloc(s), %d octets", len(document.blocks), len(html.encode("utf-8")))
    return HTMLResponse(content=html)


@router.post("/validate", summary="Liste les blocs qui seraient écartés au rendu")
def validate(document: NewsletterDocument) -> dict:
    issues = validate_blocks(document.blocks)
    return {"valid": not issues, "issues": issues}


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne le catalogue des blocs avec leurs JSON schemas Pydantic (clés camelCase)."""
    catalog_data = [
        {"type": block_type, "schema": cls.model_json_schema(by_alias=True)}
        for block_type, cls in BLOCK_REGISTRY.items()
    ]
    return JSONResponse({"blocks": catalog_data})
