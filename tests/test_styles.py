"""Tests résolution de style — priorité du fond, opacité, replis thème."""
import pytest
from pydantic import ValidationError

from newsletter_builder.core.schemas import StyleSpec, Theme
from newsletter_builder.core.styles import (
    background_declarations,
    container_declarations,
    resolve_style,
)


# ── Priorité du fond ──────────────────────────────────────────────────────────

def test_background_image_wins_over_gradient_and_color():
    style = StyleSpec(
        background_image="https://example.com/bg.png",
        background_gradient="linear-gradient(#ffffff, #000000)",
        background_color="#ff0000",
    )
    assert background_declarations(style) == [
        "background-image: url(https://example.com/bg.png);",
        "background-size: cover;",
        "background-position: center;",
    ]


def test_gradient_wins_over_color():
    style = StyleSpec(background_gradient="linear-gradient(#ffffff, #000000)", background_color="#ff0000")
    assert background_declarations(style) == ["background-image: linear-gradient(#ffffff, #000000);"]


def test_color_verbatim_without_opacity():
    assert background_declarations(StyleSpec(background_color="#ff0000")) == ["background-color: #ff0000;"]


def test_empty_strings_are_not_set():
    style = StyleSpec(background_image="", background_gradient="", background_color="#ff0000")
    assert background_declarations(style) == ["background-color: #ff0000;"]


# ── Opacité ───────────────────────────────────────────────────────────────────

def test_hex_color_with_opacity_becomes_rgba():
    style = StyleSpec.model_validate({"backgroundColor": "#336699", "backgroundOpacity": 0.5})
    assert background_declarations(style) == ["background-color: rgba(51,102,153,0.5);"]


def test_rgb_color_with_opacity_becomes_rgba():
    style = StyleSpec(background_color="rgb(1, 2, 3)", background_opacity=0.2)
    assert background_declarations(style) == ["background-color: rgba(1,2,3,0.2);"]


def test_opacity_one_keeps_color_verbatim():
    style = StyleSpec(background_color="#336699", background_opacity=1)
    assert background_declarations(style) == ["background-color: #336699;"]


def test_unknown_color_ignores_opacity():
    style = StyleSpec(background_color="tomato", background_opacity=0.3)
    assert background_declarations(style) == ["background-color: tomato;"]


def test_opacity_string_is_coerced():
    style = StyleSpec.model_validate({"backgroundColor": "#000000", "backgroundOpacity": "0.5"})
    assert style.background_opacity == 0.5


def test_unreadable_opacity_is_dropped():
    style = StyleSpec.model_validate({"backgroundColor": "#000000", "backgroundOpacity": "half"})
    assert style.background_opacity is None
    assert background_declarations(style) == ["background-color: #000000;"]


# ── Conteneur ─────────────────────────────────────────────────────────────────

def test_container_declarations_independent_fields():
    style = StyleSpec(
        text_color="#111111",
        border_color="#222222",
        border_width="2px",
        border_radius="8px",
        padding="10px 20px",
    )
    decls = container_declarations(style)
    assert "color: #111111;" in decls
    assert "border-color: #222222;" in decls
    assert "border-width: 2px;" in decls
    assert "border-style: solid;" in decls
    assert "border-radius: 8px;" in decls
    assert "padding: 10px 20px;" in decls


def test_zero_border_width_emits_nothing():
    decls = container_declarations(StyleSpec(border_width="0"))
    assert not any(d.startswith("border-width") for d in decls)
    assert "border-style: solid;" not in decls


def test_numeric_border_values_become_lengths():
    style = StyleSpec.model_validate({"borderWidth": 2, "borderRadius": 0})
    assert style.border_width == "2px"
    assert style.border_radius == "0"


def test_empty_style_has_no_declarations():
    assert container_declarations(StyleSpec()) == []


# ── resolve_style ─────────────────────────────────────────────────────────────

def test_resolve_style_defaults_from_theme():
    theme = Theme(container_text_color="#101010", global_link_color="#123456")
    resolved = resolve_style(None, theme)
    assert resolved.container == ""
    assert resolved.text_color == "#101010"
    assert resolved.button_color == "#123456"
    assert resolved.button_text_color == "#ffffff"
    assert resolved.border_width == ""


def test_resolve_style_button_overrides():
    style = StyleSpec(button_color="#ff0000", button_text_color="#000000")
    resolved = resolve_style(style, Theme())
    assert resolved.button == "background-color: #ff0000; color: #000000;"


def test_resolve_style_does_not_mutate_input():
    style = StyleSpec(background_color="#336699", background_opacity=0.5)
    before = style.model_dump()
    resolve_style(style, Theme())
    assert style.model_dump() == before


def test_resolved_style_is_frozen():
    resolved = resolve_style(None, Theme())
    with pytest.raises(ValidationError):
        resolved.text_color = "#000000"


def test_has_border():
    assert resolve_style(StyleSpec(border_width="1px"), Theme()).has_border
    assert not resolve_style(StyleSpec(border_width="0"), Theme()).has_border
