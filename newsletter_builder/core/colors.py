"""
Conversions couleur pour l'opacité de fond : #RRGGBB / rgb(r,g,b) → rgba(r,g,b,a).
Un format non reconnu est renvoyé tel quel (jamais d'exception).
"""
import re
from typing import Optional

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_RGB_RE = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$")


def hex_to_rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    """Convertit #RRGGBB en (R, G, B). None si la chaîne n'est pas de cette forme."""
    m = _HEX_RE.match(hex_color.strip())
    if not m:
        return None
    return tuple(int(pair, 16) for pair in m.groups())


def rgb_components(rgb_str: str) -> Optional[tuple[int, int, int]]:
    """Extrait (r, g, b) de 'rgb(r, g, b)'. None sinon."""
    m = _RGB_RE.match(rgb_str.strip())
    if not m:
        return None
    return tuple(int(c) for c in m.groups())


def format_alpha(opacity: float) -> str:
    """0.5 → '0.5', 1.0 → '1', 0.25 → '0.25'."""
    value = float(opacity)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_rgba(color: str, opacity: float) -> str:
    """
    Applique une opacité à une couleur.

    '#336699', 0.5 → 'rgba(51,102,153,0.5)'
    'rgb(1, 2, 3)', 0.2 → 'rgba(1,2,3,0.2)'
    'red', 0.5 → 'red' (format inconnu : opacité ignorée)
    """
    components = hex_to_rgb(color) or rgb_components(color)
    if components is None:
        return color
    r, g, b = components
    return f"rgba({r},{g},{b},{format_alpha(opacity)})"
