"""
Schémas Pydantic partagés : Theme (couleurs globales) + StyleSpec (override par bloc).

Les clés JSON produites par l'éditeur sont en camelCase (backgroundColor…),
les attributs Python en snake_case. Les deux orthographes sont acceptées.
"""
import logging
from typing import Any, Optional

from pydantic import (
    BaseModel, ConfigDict, ValidationError, ValidationInfo, ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)


class CamelModel(BaseModel):
    """
    Base commune : alias camelCase, clés inconnues ignorées.

    Un champ null ou hors forme retombe sur sa valeur par défaut : l'erreur
    reste locale au champ, le bloc qui le contient est conservé.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @classmethod
    def _field_default(cls, name: str) -> Any:
        return cls.model_fields[name].get_default(call_default_factory=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def default_on_error(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        if value is None:
            return cls._field_default(info.field_name)
        try:
            return handler(value)
        except ValidationError as e:
            log.warning(
                "Champ %s.%s ignoré (%s), valeur par défaut utilisée",
                cls.__name__, info.field_name, e.errors()[0]["msg"],
            )
            return cls._field_default(info.field_name)


class Theme(CamelModel):
    """Couleurs globales d'un rendu (fournies à chaque appel, jamais persistées)."""
    container_background: str = "#ffffff"
    container_text_color: str = "#333333"
    global_link_color: str = "#6366f1"
    title: str = "Newsletter"
    preheader: str = ""


class StyleSpec(CamelModel):
    """Override de style optionnel d'un bloc. Absent = hérite du thème / défaut du bloc."""
    background_color: Optional[str] = None
    background_image: Optional[str] = None
    background_gradient: Optional[str] = None
    background_opacity: Optional[float] = None
    text_color: Optional[str] = None
    button_color: Optional[str] = None
    button_text_color: Optional[str] = None
    border_color: Optional[str] = None
    border_width: Optional[str] = None
    border_radius: Optional[str] = None
    padding: Optional[str] = None

    @field_validator(
        "background_color", "background_image", "background_gradient", "text_color",
        "button_color", "button_text_color", "border_color", "padding",
        mode="before",
    )
    @classmethod
    def scalar_to_text(cls, value: Any) -> Any:
        # Valeurs CSS transmises telles quelles, sans interprétation
        if isinstance(value, bool):
            return str(value).lower()
        return value

    @field_validator("background_opacity", mode="before")
    @classmethod
    def lenient_opacity(cls, value: Any) -> Optional[float]:
        # Une opacité illisible est ignorée, elle ne fait pas tomber le bloc
        if value is None or isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @field_validator("border_width", "border_radius", mode="before")
    @classmethod
    def number_to_length(cls, value: Any) -> Any:
        # L'éditeur stocke parfois des nombres bruts (px implicites)
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return "0" if value == 0 else f"{value:g}px"
        return value
