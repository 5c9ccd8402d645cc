"""
Assemblage du document : fragments → squelette HTML complet.

Table externe 100% → table interne centrée 600px → une cellule unique qui
contient les fragments dans l'ordre d'entrée. Concaténation pure, sans erreur.
"""
from typing import Iterable

from ..core.schemas import Theme
from .css import get_email_css

CONTENT_WIDTH = 600

_PREHEADER_STYLE = (
    "display: none; font-size: 1px; line-height: 1px; max-height: 0; max-width: 0; "
    "opacity: 0; overflow: hidden; mso-hide: all;"
)


def assemble(fragments: Iterable[str], theme: Theme) -> str:
    """Document HTML complet, valide même sans aucun fragment."""
    content = "\n".join(f for f in fragments if f)
    preheader = f'<div class="preheader" style="{_PREHEADER_STYLE}">{theme.preheader}</div>\n' if theme.preheader else ""

    return f"""<!DOCTYPE html>
<html lang="en" xmlns="http://www.w3.org/1999/xhtml" xmlns:o="urn:schemas-microsoft-com:office:office">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta http-equiv="X-UA-Compatible" content="IE=edge">
  <title>{theme.title}</title>
  <!--[if mso]><style type="text/css">table,td{{border-collapse:collapse;mso-table-lspace:0pt;mso-table-rspace:0pt}}</style><![endif]-->
  <style type="text/css">{get_email_css(theme)}</style>
</head>
<body style="margin: 0; padding: 0; background-color: {theme.container_background}; font-family: Arial, Helvetica, sans-serif;">
{preheader}<table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%" style="background-color: {theme.container_background};">
  <tr>
    <td align="center" style="padding: 20px 0;">
      <table role="presentation" border="0" cellpadding="0" cellspacing="0" width="{CONTENT_WIDTH}" class="container" style="width: {CONTENT_WIDTH}px; max-width: {CONTENT_WIDTH}px; margin: 0 auto; background-color: {theme.container_background}; color: {theme.container_text_color};">
        <tr>
          <td class="content" style="padding: 0 20px; color: {theme.container_text_color};">
{content}
          </td>
        </tr>
      </table>
    </td>
  </tr>
</table>
</body>
</html>"""
