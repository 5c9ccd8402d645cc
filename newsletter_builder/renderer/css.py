"""
Feuille de style embarquée dans le <head> du mail.

Les clients mail ignorent souvent <style> : tout ce qui compte est aussi inline.
Ici uniquement les resets client (MSO, WebKit) et les classes partagées.
"""
from ..core.schemas import Theme


def get_email_css(theme: Theme) -> str:
    """Reset clients + classes partagées (boutons, séparateurs, grilles, titres)."""
    return f"""
body,table,td,p,a,li,blockquote{{-webkit-text-size-adjust:100%;-ms-text-size-adjust:100%}}
table,td{{border-collapse:collapse;mso-table-lspace:0pt;mso-table-rspace:0pt}}
img{{-ms-interpolation-mode:bicubic;border:0;outline:none;text-decoration:none}}
body{{margin:0;padding:0;width:100%!important}}
a{{color:{theme.global_link_color}}}
h1,h2,h3{{margin:0;font-weight:600;line-height:1.3}}
h1{{font-size:28px}}
h2{{font-size:22px}}
h3{{font-size:18px}}
.btn{{display:inline-block;text-decoration:none;mso-padding-alt:0}}
.btn:hover{{opacity:.9}}
.divider{{border:0;margin:0}}
.grid-cell{{vertical-align:top}}
.grid-spacer{{font-size:0;line-height:0}}
.empty-state{{font-style:italic}}
@media only screen and (max-width:620px){{
  .container{{width:100%!important}}
  .grid-cell{{display:block!important;width:100%!important;padding-bottom:20px}}
  .grid-spacer{{display:none!important}}
}}
""".strip()
