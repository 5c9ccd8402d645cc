"""
Configuration de l'app HTTP (variables d'environnement).
Le compilateur ne lit jamais la config : elle ne sert qu'aux routes.
"""
import os
from dataclasses import dataclass
from functools import lru_cache

from .core.schemas import Theme


@dataclass(frozen=True)
class Settings:
    log_level: str
    cors_origins: tuple[str, ...]
    container_background: str
    text_color: str
    link_color: str

    def default_theme(self) -> Theme:
        """Thème utilisé quand une requête n'en fournit pas."""
        return Theme(
            container_background=self.container_background,
            container_text_color=self.text_color,
            global_link_color=self.link_color,
        )


def _split_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    defaults = Theme()
    return Settings(
        log_level=os.getenv("NEWSLETTER_LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.getenv("NEWSLETTER_CORS_ORIGINS", "*")),
        container_background=os.getenv("NEWSLETTER_CONTAINER_BACKGROUND", defaults.container_background),
        text_color=os.getenv("NEWSLETTER_TEXT_COLOR", defaults.container_text_color),
        link_color=os.getenv("NEWSLETTER_LINK_COLOR", defaults.global_link_color),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
