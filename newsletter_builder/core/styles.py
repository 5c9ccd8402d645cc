"""
Résolution de style : StyleSpec optionnel + Theme → ResolvedStyle entièrement renseigné.

Tous les replis (thème, défauts) sont calculés ici une seule fois ; les renderers
de blocs ne lisent jamais StyleSpec directement.

Priorité du fond (le premier présent gagne) :
  background_image  →  background-image: url(...) + cover/center
  background_gradient  →  background-image: <gradient>
  background_color  →  background-color (rgba si opacité < 1)
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .colors import to_rgba
from .schemas import StyleSpec, Theme

DEFAULT_BUTTON_TEXT_COLOR = "#ffffff"


class ResolvedStyle(BaseModel):
    """Style effectif d'un bloc. Chaque champ a une valeur (chaîne vide = rien à émettre)."""
    model_config = ConfigDict(frozen=True)

    background: str = ""
    container: str = ""
    text_color: str = ""
    button_color: str = ""
    button_text_color: str = DEFAULT_BUTTON_TEXT_COLOR
    border_color: str = ""
    border_width: str = ""
    border_radius: str = ""
    padding: str = ""

    @property
    def button(self) -> str:
        """Déclarations inline d'un bouton (les boutons ne sont pas des conteneurs)."""
        return button_declarations(self)

    @property
    def has_border(self) -> bool:
        return bool(self.border_width) and self.border_width != "0"


def background_declarations(style: StyleSpec) -> list[str]:
    if style.background_image:
        return [
            f"background-image: url({style.background_image});",
            "background-size: cover;",
            "background-position: center;",
        ]
    if style.background_gradient:
        return [f"background-image: {style.background_gradient};"]
    if style.background_color:
        color = style.background_color
        if style.background_opacity is not None and style.background_opacity < 1:
            color = to_rgba(color, style.background_opacity)
        return [f"background-color: {color};"]
    return []


def container_declarations(style: StyleSpec) -> list[str]:
    """Déclarations du conteneur externe d'un bloc (fond + texte + bordure + padding)."""
    decls = background_declarations(style)
    if style.text_color:
        decls.append(f"color: {style.text_color};")
    if style.border_color:
        decls.append(f"border-color: {style.border_color};")
    if style.border_width and style.border_width != "0":
        decls.append(f"border-width: {style.border_width};")
        decls.append("border-style: solid;")
    if style.border_radius:
        decls.append(f"border-radius: {style.border_radius};")
    if style.padding:
        decls.append(f"padding: {style.padding};")
    return decls


def button_declarations(resolved: ResolvedStyle) -> str:
    return f"background-color: {resolved.button_color}; color: {resolved.button_text_color};"


def resolve_style(style: Optional[StyleSpec], theme: Theme) -> ResolvedStyle:
    """Fonction totale : tout champ absent est remplacé par le thème ou le défaut."""
    style = style or StyleSpec()
    return ResolvedStyle(
        background=" ".join(background_declarations(style)),
        container=" ".join(container_declarations(style)),
        text_color=style.text_color or theme.container_text_color,
        button_color=style.button_color or theme.global_link_color,
        button_text_color=style.button_text_color or DEFAULT_BUTTON_TEXT_COLOR,
        border_color=style.border_color or "",
        border_width=style.border_width or "",
        border_radius=style.border_radius or "",
        padding=style.padding or "",
    )
