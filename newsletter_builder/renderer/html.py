"""
Renderer HTML des blocs — un renderer par type, dispatch par classe de bloc.

Chaque fragment est une table 100% (seule primitive de layout fiable dans les
clients mail, Outlook/MSO compris) ; tous les styles sont inline.
Aucun échappement n'est appliqué : le contenu vient de l'éditeur (de confiance),
le HTML brut du bloc compartiment est inséré tel quel.
"""
import json
import logging
import re
from datetime import date
from typing import Any, Callable, Iterable

from ..blocks import (
    BLOCK_CLASSES, BaseBlock, DEFAULT_SPACER_HEIGHT, SUBSCRIBE_DEFAULTS,
    HeaderBlock, FooterBlock, SocialLink,
    HeadingBlock, ParagraphBlock,
    ImageBlock, ButtonBlock,
    DividerBlock, SpacerBlock, CompartmentBlock,
    FeaturedArticleBlock, ArticleGridBlock, ArticleItem,
    EventCalendarBlock, EventItem,
    QuizBlock,
    SubscribeNowBlock, TestimonialBlock, CTABannerBlock,
    ProductRecommendationBlock, ProductItem,
    SocialMediaBlock,
)
from ..core.schemas import Theme
from ..core.styles import ResolvedStyle, resolve_style

log = logging.getLogger(__name__)

TABLE_ATTRS = 'role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%"'
_ALIGNMENTS = ("left", "center", "right")
_HEADING_PADDING = {"h1": "20px 0", "h2": "15px 0", "h3": "10px 0"}
_MUTED = "#666666"


# ── Helpers ─────────────────────────────────────────────────────────────────

def _decls(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def _align(value: str, default: str) -> str:
    return value if value in _ALIGNMENTS else default


def _wrap(b: BaseBlock, inner: str, *, align: str = "left", base: str = "", container: str = "") -> str:
    """Table conteneur d'un bloc : styles de base du type, puis overrides du StyleSpec."""
    cell = _decls(f"text-align: {align};", base, container)
    return (
        f'<table {TABLE_ATTRS} class="block block-{b.type}" data-block-id="{b.id}">\n'
        f'  <tr>\n'
        f'    <td align="{align}" style="{cell}">{inner}</td>\n'
        f'  </tr>\n'
        f'</table>'
    )


def _button(url: str, text: str, style: ResolvedStyle, *, size: str = "16px", padding: str = "12px 24px", extra: str = "") -> str:
    radius = style.border_radius or "4px"
    css = _decls(
        "display: inline-block;",
        f"padding: {padding};",
        f"font-size: {size};",
        "font-weight: 600;",
        "text-decoration: none;",
        f"border-radius: {radius};",
        style.button,
    )
    return f'<a href="{url or "#"}" class="btn" target="_blank" style="{css}"{extra}>{text}</a>'


def _empty_state(message: str) -> str:
    return f'<p class="empty-state" style="margin: 0; font-size: 14px; color: {_MUTED};">{message}</p>'


def _side_by_side(cells: Iterable[str], css_class: str) -> str:
    """Cellules côte à côte séparées par des cellules d'espacement (pas de gap en mail)."""
    cells = list(cells)
    width = 100 // max(len(cells), 1)
    tds = []
    for i, cell in enumerate(cells):
        if i:
            tds.append('<td class="grid-spacer" width="20" style="width: 20px; font-size: 0; line-height: 0;">&nbsp;</td>')
        tds.append(f'<td class="grid-cell" width="{width}%" valign="top">{cell}</td>')
    return f'<table {TABLE_ATTRS} class="{css_class}"><tr valign="top">{"".join(tds)}</tr></table>'


def _social_links(links: list[SocialLink], color: str) -> str:
    cells = "".join(
        f'<td style="padding: 0 8px;"><a href="{lnk.url}" target="_blank" '
        f'style="color: {color}; text-decoration: none;">{lnk.label or lnk.platform.title()}</a></td>'
        for lnk in links
    )
    return (
        '<table role="presentation" border="0" cellpadding="0" cellspacing="0" align="center" '
        f'class="social-links" style="margin: 0 auto;"><tr>{cells}</tr></table>'
    )


def _dom_id(block_id: str, fallback: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", block_id) or fallback


# ── En-tête / pied ──────────────────────────────────────────────────────────

def render_header_block(b: HeaderBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    parts = []
    if c.logo_url:
        parts.append(
            f'<img src="{c.logo_url}" alt="{c.company_name}" height="48" '
            'style="display: inline-block; height: 48px; border: 0;" />'
        )
    if c.company_name:
        parts.append(f'<div class="header-title" style="font-size: 24px; font-weight: 600;">{c.company_name}</div>')
    if c.tagline:
        parts.append(f'<p style="margin: 6px 0 0 0; font-size: 14px;">{c.tagline}</p>')
    return _wrap(
        b, "".join(parts),
        align=_align(c.align, "center"),
        base=f"padding: 20px; color: {style.text_color};",
        container=style.container,
    )


def render_footer_block(b: FooterBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    link = f"color: {theme.global_link_color}; text-decoration: none;"
    # Seule lecture non déterministe du compilateur : l'année courante
    copyright_line = " ".join(p for p in ("&copy;", str(date.today().year), c.company_name) if p)
    lines = []
    if c.social_links:
        lines.append(_social_links(c.social_links, theme.global_link_color))
    lines.append(f'<p style="margin: 10px 0 8px 0;">{copyright_line}. All rights reserved.</p>')
    if c.address:
        lines.append(f'<p style="margin: 0 0 8px 0;">{c.address}</p>')
    contact = []
    if c.email:
        contact.append(f'<a href="mailto:{c.email}" style="{link}">{c.email}</a>')
    if c.phone:
        contact.append(f'<a href="tel:{c.phone}" style="{link}">{c.phone}</a>')
    if c.website_url:
        contact.append(f'<a href="{c.website_url}" target="_blank" style="{link}">Visit our website</a>')
    if contact:
        lines.append(f'<p style="margin: 0 0 8px 0;">{" | ".join(contact)}</p>')
    if c.unsubscribe_url:
        lines.append(
            f'<p style="margin: 0;">You received this email because you subscribed to our newsletter. '
            f'<a href="{c.unsubscribe_url}" style="{link}">Unsubscribe</a></p>'
        )
    return _wrap(
        b, "".join(lines),
        align="center",
        base=f"padding: 20px; font-size: 12px; line-height: 18px; color: {style.text_color};",
        container=style.container,
    )


# ── Texte ───────────────────────────────────────────────────────────────────

def render_heading_block(b: HeadingBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    level = c.level if c.level in _HEADING_PADDING else "h2"
    # Balise nue : tailles dans la feuille de style du document
    return _wrap(
        b, f"<{level}>{c.text}</{level}>",
        align=_align(c.align, "center"),
        base=f"padding: {_HEADING_PADDING[level]}; color: {style.text_color};",
        container=style.container,
    )


def render_paragraph_block(b: ParagraphBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    return _wrap(
        b,
        f'<p style="margin: 0; font-size: 16px; line-height: 24px; color: {style.text_color};">{c.text}</p>',
        align=_align(c.align, "left"),
        base="padding: 10px 0;",
        container=style.container,
    )


# ── Média ───────────────────────────────────────────────────────────────────

def render_image_block(b: ImageBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    radius = f" border-radius: {style.border_radius};" if style.border_radius else ""
    # Pas d'URL → <img src=""> conservé (image cassée visible dans l'aperçu)
    img = (
        f'<img src="{c.url}" alt="{c.alt}" width="600" '
        f'style="display: block; width: 100%; max-width: 600px; height: auto; border: 0;{radius}" />'
    )
    if c.link:
        img = f'<a href="{c.link}" target="_blank">{img}</a>'
    caption = ""
    if c.caption:
        caption = (
            f'<p class="caption" style="margin: 8px 0 0 0; font-size: 13px; color: {_MUTED}; '
            f'text-align: center;">{c.caption}</p>'
        )
    return _wrap(b, img + caption, align="center", base="padding: 10px 0;", container=style.container)


def render_button_block(b: ButtonBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    align = _align(c.align, "center")
    radius = style.border_radius or "4px"
    inner = (
        f'<table role="presentation" border="0" cellpadding="0" cellspacing="0" align="{align}">'
        f'<tr><td align="center" bgcolor="{style.button_color}" style="border-radius: {radius};">'
        f'{_button(c.url, c.text, style)}'
        f'</td></tr></table>'
    )
    return _wrap(b, inner, align=align, base="padding: 15px 0;", container=style.container)


# ── Mise en page ────────────────────────────────────────────────────────────

def render_divider_block(b: DividerBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    # La bordure du StyleSpec s'applique au trait, pas au conteneur
    width = style.border_width or "1px"
    color = style.border_color or "#eaeaea"
    hr = f'<hr class="divider" style="border: 0; border-top: {width} solid {color}; margin: 0;" />'
    padding = f"padding: {style.padding};" if style.padding else ""
    return _wrap(b, hr, base="padding: 15px 0;", container=_decls(style.background, padding))


def render_spacer_block(b: SpacerBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    height = b.content.height
    if height is None or height < 0:
        height = DEFAULT_SPACER_HEIGHT
    cell = _decls(f"height: {height}px;", "font-size: 0;", "line-height: 0;", style.container)
    return (
        f'<table {TABLE_ATTRS} class="block block-spacer" data-block-id="{b.id}">\n'
        f'  <tr>\n'
        f'    <td height="{height}" style="{cell}">&nbsp;</td>\n'
        f'  </tr>\n'
        f'</table>'
    )


def render_compartment_block(b: CompartmentBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    title = f'<h3 class="compartment-title" style="margin: 0 0 10px 0;">{c.title}</h3>' if c.title else ""
    # HTML brut volontairement non échappé : l'appelant est la frontière de confiance
    body = f'<div class="compartment-body">{c.content}</div>'
    return _wrap(
        b, title + body,
        base=f"padding: 16px; border: 1px solid #eaeaea; border-radius: 4px; color: {style.text_color};",
        container=style.container,
    )


# ── Articles ────────────────────────────────────────────────────────────────

def render_featured_article_block(b: FeaturedArticleBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    url = c.cta_url or "#"
    image_row = ""
    if c.image:
        image_row = (
            f'<tr><td><a href="{url}" target="_blank">'
            f'<img src="{c.image}" alt="{c.title}" width="600" '
            'style="display: block; width: 100%; height: auto; border: 0;" /></a></td></tr>'
        )
    # Auteur / extrait absents → chaînes vides, les éléments restent en place
    text_row = (
        f'<tr><td style="padding: 20px; color: {style.text_color};">'
        f'<h2 style="margin: 0 0 10px 0; font-size: 22px;">'
        f'<a href="{url}" style="color: inherit; text-decoration: none;">{c.title}</a></h2>'
        f'<p class="meta" style="margin: 0 0 15px 0; font-size: 14px; color: {_MUTED};">By {c.author} &bull; {c.date}</p>'
        f'<p class="excerpt" style="margin: 0 0 20px 0; font-size: 16px; line-height: 24px;">{c.excerpt}</p>'
        f'{_button(url, c.cta_text, style, size="14px", padding="8px 16px")}'
        f'</td></tr>'
    )
    article = (
        f'<table {TABLE_ATTRS} class="featured-article" '
        'style="border: 1px solid #eaeaea; border-radius: 4px; border-collapse: separate;">'
        f'{image_row}{text_row}</table>'
    )
    return _wrap(b, article, base="padding: 10px 0;", container=style.container)


def _article_card(a: ArticleItem, style: ResolvedStyle) -> str:
    image = ""
    if a.image:
        image = (
            f'<tr><td><a href="{a.url}" target="_blank"><img src="{a.image}" alt="{a.title}" width="280" '
            'style="display: block; width: 100%; height: auto; border: 0;" /></a></td></tr>'
        )
    return (
        f'<table {TABLE_ATTRS} class="article-card" style="border: 1px solid #eaeaea; border-radius: 6px;">'
        f'{image}'
        f'<tr><td style="padding: 16px; color: {style.text_color};">'
        f'<h3 style="margin: 0 0 8px 0; font-size: 18px;">'
        f'<a href="{a.url}" style="color: inherit; text-decoration: none;">{a.title}</a></h3>'
        f'<p class="meta" style="margin: 0 0 10px 0; font-size: 14px; color: {_MUTED};">By {a.author}</p>'
        f'<p style="margin: 0 0 15px 0; font-size: 15px; line-height: 22px;">{a.excerpt}</p>'
        f'{_button(a.url, a.cta_text, style, size="14px", padding="8px 16px")}'
        f'</td></tr></table>'
    )


def render_article_grid_block(b: ArticleGridBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    articles = b.content.articles
    if not articles:
        inner = _empty_state("No articles available")
    else:
        inner = _side_by_side((_article_card(a, style) for a in articles), "article-grid")
    return _wrap(b, inner, base="padding: 10px 0;", container=style.container)


# ── Événements ──────────────────────────────────────────────────────────────

def _event_table(e: EventItem, style: ResolvedStyle) -> str:
    rows = [f'<tr><td style="padding: 12px 16px 4px 16px;"><h3 style="margin: 0; font-size: 18px;">{e.title}</h3></td></tr>']
    for label, value in (("Date", e.date), ("Time", e.time), ("Location", e.location)):
        if value:
            rows.append(f'<tr><td style="padding: 2px 16px; font-size: 14px;"><strong>{label}:</strong> {value}</td></tr>')
    if e.description:
        rows.append(f'<tr><td style="padding: 6px 16px 0 16px; font-size: 14px; line-height: 20px;">{e.description}</td></tr>')
    rows.append('<tr><td style="padding: 0 0 12px 0; font-size: 0; line-height: 0;">&nbsp;</td></tr>')
    return (
        f'<table {TABLE_ATTRS} class="event" '
        f'style="margin: 0 0 15px 0; border-left: 4px solid {style.button_color};">'
        f'{"".join(rows)}</table>'
    )


def render_event_calendar_block(b: EventCalendarBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    title = f'<h2 class="section-title" style="margin: 0 0 15px 0; font-size: 22px;">{c.title}</h2>' if c.title else ""
    if not c.events:
        body = _empty_state("No events available")
    else:
        body = "".join(_event_table(e, style) for e in c.events)
    return _wrap(b, title + body, base=f"padding: 10px 0; color: {style.text_color};", container=style.container)


# ── Quiz ────────────────────────────────────────────────────────────────────

# Ne fonctionne que dans l'aperçu : les clients mail retirent les <script>
_QUIZ_SCRIPT = """<script type="text/javascript">
function %(fn)s() {
  var answers = %(answers)s;
  var score = 0;
  for (var i = 0; i < answers.length; i++) {
    var picked = document.querySelector('input[name="%(prefix)s-q' + i + '"]:checked');
    if (picked && answers[i] !== null && Number(picked.value) === answers[i]) { score++; }
  }
  alert('You scored ' + score + ' out of ' + answers.length);
  return false;
}
</script>"""


def render_quiz_block(b: QuizBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    title = f'<h2 class="section-title" style="margin: 0 0 15px 0; font-size: 22px;">{c.title}</h2>' if c.title else ""
    if not c.questions:
        return _wrap(
            b, title + _empty_state("No quiz questions available"),
            base=f"padding: 10px 0; color: {style.text_color};", container=style.container,
        )

    # Ids non dédupliqués : la position rend le préfixe unique dans le document
    prefix = f"{_dom_id(b.id, 'quiz')}_{position}"
    fn = f"scoreQuiz_{prefix}"
    questions_html = ""
    for qi, q in enumerate(c.questions):
        image = ""
        if q.image:
            image = f'<img src="{q.image}" alt="" width="400" style="display: block; max-width: 100%; height: auto; border: 0; margin: 0 0 8px 0;" />'
        options = "".join(
            f'<label style="display: block; margin: 0 0 6px 0; font-size: 15px;">'
            f'<input type="radio" name="{prefix}-q{qi}" value="{oi}" /> {opt}</label>'
            for oi, opt in enumerate(q.options)
        )
        questions_html += (
            f'<div class="quiz-question" style="margin: 0 0 16px 0;">'
            f'<p style="margin: 0 0 8px 0; font-weight: 600;">{qi + 1}. {q.question}</p>'
            f'{image}{options}</div>'
        )

    script = _QUIZ_SCRIPT % {
        "fn": fn,
        "prefix": prefix,
        "answers": json.dumps([q.correct_index() for q in c.questions]),
    }
    submit = _button("#", c.submit_text, style, extra=f' onclick="return {fn}();"')
    return _wrap(
        b, f'{title}<div class="quiz">{questions_html}{submit}</div>{script}',
        base=f"padding: 10px 0; color: {style.text_color};", container=style.container,
    )


# ── Engagement ──────────────────────────────────────────────────────────────

def render_subscribe_now_block(b: SubscribeNowBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    title = c.title or SUBSCRIBE_DEFAULTS["title"]
    message = c.message or SUBSCRIBE_DEFAULTS["message"]
    placeholder = c.placeholder or SUBSCRIBE_DEFAULTS["placeholder"]
    button_text = c.button_text or SUBSCRIBE_DEFAULTS["button_text"]
    action = c.button_action or SUBSCRIBE_DEFAULTS["button_action"]
    form = (
        '<table role="presentation" border="0" cellpadding="0" cellspacing="0" align="center" class="subscribe-form">'
        '<tr>'
        f'<td style="padding: 0 8px 0 0;"><input type="email" name="email" placeholder="{placeholder}" '
        'style="padding: 10px 12px; border: 1px solid #cccccc; border-radius: 4px; font-size: 14px; width: 220px;" /></td>'
        f'<td>{_button(action, button_text, style, size="14px", padding="10px 20px")}</td>'
        '</tr></table>'
    )
    inner = (
        f'<h2 style="margin: 0 0 10px 0; font-size: 22px;">{title}</h2>'
        f'<p style="margin: 0 0 20px 0; font-size: 15px; line-height: 22px;">{message}</p>'
        f'{form}'
    )
    return _wrap(b, inner, align="center", base=f"padding: 30px 20px; color: {style.text_color};", container=style.container)


def render_testimonial_block(b: TestimonialBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    image = ""
    if c.image:
        image = (
            f'<img src="{c.image}" alt="{c.author}" width="64" height="64" '
            'style="display: block; margin: 0 auto 12px auto; width: 64px; height: 64px; border-radius: 32px; border: 0;" />'
        )
    role_line = ", ".join(p for p in (c.role, c.company) if p)
    inner = (
        f'{image}'
        f'<p class="quote" style="margin: 0 0 12px 0; font-size: 18px; line-height: 26px; font-style: italic;">&ldquo;{c.quote}&rdquo;</p>'
        f'<p style="margin: 0; font-weight: 600;">{c.author}</p>'
        f'<p style="margin: 0; font-size: 14px; color: {_MUTED};">{role_line}</p>'
    )
    return _wrap(b, inner, align="center", base=f"padding: 20px; color: {style.text_color};", container=style.container)


def render_cta_banner_block(b: CTABannerBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    parts = []
    if c.title:
        parts.append(f'<h2 style="margin: 0 0 10px 0; font-size: 24px;">{c.title}</h2>')
    if c.content:
        parts.append(f'<p style="margin: 0 0 20px 0; font-size: 16px; line-height: 24px;">{c.content}</p>')
    if c.button_text:
        parts.append(_button(c.button_url, c.button_text, style))
    return _wrap(b, "".join(parts), align="center", base=f"padding: 30px 20px; color: {style.text_color};", container=style.container)


# ── Produits / social ───────────────────────────────────────────────────────

def _product_card(p: ProductItem, cta_text: str, style: ResolvedStyle) -> str:
    image = ""
    if p.image:
        image = f'<img src="{p.image}" alt="{p.name}" width="280" style="display: block; width: 100%; height: auto; border: 0; margin: 0 0 10px 0;" />'
    discount = f' <span class="discount" style="color: #e53e3e; font-weight: 600;">{p.discount}</span>' if p.discount else ""
    description = f'<p style="margin: 0 0 12px 0; font-size: 14px; line-height: 20px;">{p.description}</p>' if p.description else ""
    link = _button(p.link, cta_text, style, size="14px", padding="8px 16px") if p.link else ""
    return (
        f'<table {TABLE_ATTRS} class="product-card"><tr><td style="padding: 0 0 10px 0; text-align: center; color: {style.text_color};">'
        f'{image}'
        f'<h3 style="margin: 0 0 6px 0; font-size: 17px;">{p.name}</h3>'
        f'<p class="price" style="margin: 0 0 8px 0; font-size: 16px;"><strong>{p.price}</strong>{discount}</p>'
        f'{description}{link}'
        f'</td></tr></table>'
    )


def render_product_recommendation_block(b: ProductRecommendationBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    title = f'<h2 class="section-title" style="margin: 0 0 15px 0; font-size: 22px;">{c.title}</h2>' if c.title else ""
    if not c.products:
        body = _empty_state("No products available")
    else:
        if len(c.products) > 2:
            log.debug("Bloc %s : %d produits, seuls les 2 premiers sont rendus", b.id, len(c.products))
        body = _side_by_side((_product_card(p, c.cta_text, style) for p in c.products[:2]), "product-grid")
    return _wrap(b, title + body, base="padding: 10px 0;", container=style.container)


def render_social_media_block(b: SocialMediaBlock, style: ResolvedStyle, theme: Theme, position: int = 0) -> str:
    c = b.content
    if not c.links:
        return ""
    title = f'<h3 style="margin: 0 0 10px 0; font-size: 16px;">{c.title}</h3>' if c.title else ""
    return _wrap(
        b, title + _social_links(c.links, theme.global_link_color),
        align="center", base=f"padding: 15px 0; color: {style.text_color};", container=style.container,
    )


# ── Dispatch ────────────────────────────────────────────────────────────────

_RENDERERS: dict[type, Callable[[Any, ResolvedStyle, Theme, int], str]] = {
    HeaderBlock:                render_header_block,
    FooterBlock:                render_footer_block,
    HeadingBlock:               render_heading_block,
    ParagraphBlock:             render_paragraph_block,
    ImageBlock:                 render_image_block,
    ButtonBlock:                render_button_block,
    DividerBlock:               render_divider_block,
    SpacerBlock:                render_spacer_block,
    CompartmentBlock:           render_compartment_block,
    FeaturedArticleBlock:       render_featured_article_block,
    ArticleGridBlock:           render_article_grid_block,
    EventCalendarBlock:         render_event_calendar_block,
    QuizBlock:                  render_quiz_block,
    SubscribeNowBlock:          render_subscribe_now_block,
    TestimonialBlock:           render_testimonial_block,
    CTABannerBlock:             render_cta_banner_block,
    ProductRecommendationBlock: render_product_recommendation_block,
    SocialMediaBlock:           render_social_media_block,
}

# Ensemble fermé : un type de bloc sans renderer est une erreur au chargement
_missing = [cls.__name__ for cls in BLOCK_CLASSES if cls not in _RENDERERS]
if _missing:
    raise RuntimeError(f"Renderers manquants : {_missing}")


def render_block(block: BaseBlock, theme: Theme, position: int = 0) -> str:
    """Fragment HTML d'un bloc (position = rang dans le document). Type inconnu → chaîne vide."""
    renderer = _RENDERERS.get(type(block))
    if renderer is None:
        log.debug("Bloc ignoré (type non rendu) : %r", getattr(block, "type", "?"))
        return ""
    return renderer(block, resolve_style(block.style, theme), theme, position)


def render_blocks(blocks: Iterable[BaseBlock], theme: Theme) -> list[str]:
    """Fragments dans l'ordre d'entrée ; les fragments vides sont conservés."""
    return [render_block(b, theme, position) for position, b in enumerate(blocks)]
