"""
NEWSLETTER BUILDER — FastAPI app (aperçu / rendu HTML)
Démarrer : uvicorn newsletter_builder.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .router import router

settings = get_settings()

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Newsletter Builder — HTML mail", version=__version__, docs_url="/docs")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": __version__}


log.info("Newsletter builder prêt (CORS : %s)", ", ".join(settings.cors_origins))
