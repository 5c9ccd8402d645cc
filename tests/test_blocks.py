"""Tests blocs — instanciation, parsing tolérant, fragment HTML par type."""
import logging
from datetime import date

from newsletter_builder.blocks import (
    BLOCK_CLASSES, BLOCK_REGISTRY, SUBSCRIBE_DEFAULTS, block_types,
    HeaderBlock, HeaderContent, FooterBlock, FooterContent, SocialLink,
    HeadingBlock, HeadingContent, ParagraphBlock, ParagraphContent,
    ImageBlock, ImageContent, ButtonBlock, ButtonContent,
    DividerBlock, SpacerBlock, CompartmentBlock, CompartmentContent,
    FeaturedArticleBlock, FeaturedArticleContent,
    ArticleGridBlock, ArticleGridContent, ArticleItem,
    EventCalendarBlock, EventCalendarContent, EventItem,
    QuizBlock, QuizContent, QuizQuestion,
    SubscribeNowBlock, CTABannerBlock, CTABannerContent,
    ProductRecommendationBlock, ProductRecommendationContent, ProductItem,
    SocialMediaBlock, SocialMediaContent,
)
from newsletter_builder.core.schemas import StyleSpec, Theme
from newsletter_builder.manifest.parser import parse_block
from newsletter_builder.renderer.html import render_block

THEME = Theme()


def _render(raw: dict) -> str:
    return render_block(parse_block(raw), THEME)


# ── Registry ──────────────────────────────────────────────────────────────────

def test_registry_is_closed_set():
    assert set(block_types()) == {
        "header", "footer", "heading", "paragraph", "image", "button", "divider",
        "spacer", "compartment", "featured-article", "article-grid", "event-calendar",
        "quiz", "subscribe-now", "testimonial", "cta-banner", "product-recommendation",
        "social-media",
    }
    assert len(BLOCK_REGISTRY) == len(BLOCK_CLASSES)


def test_every_block_renders_with_defaults():
    for cls in BLOCK_CLASSES:
        assert isinstance(render_block(cls(), THEME), str)


# ── Parsing tolérant ──────────────────────────────────────────────────────────

def test_unknown_type_is_dropped():
    assert parse_block({"id": "x", "type": "no-such-type", "content": {}}) is None


def test_unhashable_type_is_dropped():
    assert parse_block({"type": ["heading"]}) is None


def test_non_dict_is_dropped():
    assert parse_block("heading") is None


def test_malformed_content_keeps_block_with_defaults(caplog):
    with caplog.at_level(logging.WARNING):
        block = parse_block({"id": "bad", "type": "heading", "content": "oops"})
    assert isinstance(block, HeadingBlock)
    assert block.id == "bad"
    assert block.content.level == "h2"
    assert "HeadingBlock.content" in caplog.text


def test_malformed_field_only_resets_that_field():
    block = parse_block({"id": "h", "type": "heading", "content": {"text": "Title", "align": ["left"]}})
    assert block.content.text == "Title"
    assert block.content.align == "center"
    assert "Title" in render_block(block, THEME)


def test_malformed_style_values_pass_through():
    block = parse_block({
        "id": "p", "type": "paragraph", "content": {"text": "Kept"},
        "style": {"backgroundColor": True, "padding": ["10px"], "textColor": "not-a-colour"},
    })
    html = render_block(block, THEME)
    assert "Kept" in html
    assert "background-color: true;" in html
    assert "color: not-a-colour;" in html
    assert block.style.padding is None


def test_malformed_style_object_is_ignored():
    block = parse_block({"type": "paragraph", "content": {"text": "Kept"}, "style": "bold"})
    assert block.style is None
    assert "Kept" in render_block(block, THEME)


def test_unknown_content_fields_are_ignored():
    block = parse_block({"type": "paragraph", "content": {"text": "Hi", "fontFamily": "Comic Sans"}})
    assert isinstance(block, ParagraphBlock)
    assert block.content.text == "Hi"


def test_null_content_uses_defaults():
    block = parse_block({"type": "paragraph", "content": None})
    assert block.content.text == ""
    assert block.content.align == "left"


def test_numbers_are_coerced_to_text():
    block = parse_block({"type": "paragraph", "content": {"text": 42}})
    assert block.content.text == "42"


def test_camel_and_snake_case_accepted():
    assert HeaderContent.model_validate({"logoUrl": "a.png"}).logo_url == "a.png"
    assert HeaderContent.model_validate({"logo_url": "b.png"}).logo_url == "b.png"


def test_list_entries_that_are_not_records_are_skipped():
    block = parse_block({"type": "article-grid", "content": {"articles": ["oops", {"title": "Real"}, None]}})
    assert [a.title for a in block.content.articles] == ["Real"]


def test_block_passthrough_in_parser():
    block = HeadingBlock()
    assert parse_block(block) is block


# ── Header / footer ───────────────────────────────────────────────────────────

def test_header_omits_missing_fields():
    html = render_block(HeaderBlock(content=HeaderContent(company_name="ACME")), THEME)
    assert "ACME" in html
    assert "<img" not in html
    assert 'align="center"' in html


def test_header_with_logo():
    html = render_block(HeaderBlock(content=HeaderContent(logo_url="https://x/logo.png", tagline="Weekly")), THEME)
    assert 'src="https://x/logo.png"' in html
    assert "Weekly" in html


def test_footer_has_current_year_copyright():
    html = render_block(FooterBlock(content=FooterContent(company_name="ACME")), THEME)
    assert f"&copy; {date.today().year} ACME. All rights reserved." in html


def test_footer_empty_social_list_omitted():
    html = render_block(FooterBlock(), THEME)
    assert "social-links" not in html


def test_footer_links():
    html = render_block(FooterBlock(content=FooterContent(
        company_name="ACME",
        address="1 rue de la Paix",
        email="hello@acme.test",
        website_url="https://acme.test",
        unsubscribe_url="https://acme.test/unsubscribe",
        social_links=[SocialLink(platform="twitter", url="https://twitter.com/acme")],
    )), THEME)
    assert "social-links" in html
    assert ">Twitter</a>" in html
    assert 'href="mailto:hello@acme.test"' in html
    assert 'href="https://acme.test/unsubscribe"' in html
    assert "1 rue de la Paix" in html


# ── Texte ─────────────────────────────────────────────────────────────────────

def test_heading_level_tag():
    html = _render({"id": "h1", "type": "heading", "content": {"text": "Hello", "level": "h1", "align": "center"}})
    assert "<h1>Hello</h1>" in html
    assert 'align="center"' in html


def test_heading_defaults_to_centered_h2():
    html = render_block(HeadingBlock(content=HeadingContent(text="Hi")), THEME)
    assert "<h2>Hi</h2>" in html
    assert "text-align: center;" in html


def test_heading_unknown_level_falls_back_to_h2():
    html = _render({"type": "heading", "content": {"text": "Hi", "level": "h7"}})
    assert "<h2>Hi</h2>" in html


def test_paragraph_empty_text_renders_empty_paragraph():
    html = render_block(ParagraphBlock(), THEME)
    assert "<p " in html
    assert "></p>" in html
    assert 'align="left"' in html


def test_paragraph_alignment():
    html = render_block(ParagraphBlock(content=ParagraphContent(text="x", align="right")), THEME)
    assert 'align="right"' in html


# ── Image / bouton ────────────────────────────────────────────────────────────

def test_image_without_url_keeps_broken_image():
    html = render_block(ImageBlock(), THEME)
    assert 'src=""' in html


def test_image_caption_and_link():
    html = render_block(ImageBlock(content=ImageContent(
        url="https://x/a.png", alt="A", caption="Légende", link="https://x",
    )), THEME)
    assert 'alt="A"' in html
    assert "Légende" in html
    assert '<a href="https://x"' in html


def test_button_url_defaults_to_hash():
    html = render_block(ButtonBlock(content=ButtonContent(text="Go", url="")), THEME)
    assert 'href="#"' in html


def test_button_uses_theme_link_color_by_default():
    html = render_block(ButtonBlock(content=ButtonContent(text="Go")), Theme(global_link_color="#abcdef"))
    assert "background-color: #abcdef; color: #ffffff;" in html


def test_button_style_overrides():
    html = _render({
        "id": "b1", "type": "button",
        "content": {"text": "Go", "url": "https://example.com"},
        "style": {"buttonColor": "#ff0000", "buttonTextColor": "#ffffff"},
    })
    assert 'href="https://example.com"' in html
    assert "background-color: #ff0000" in html
    assert "color: #ffffff" in html


# ── Mise en page ──────────────────────────────────────────────────────────────

def test_divider_default_rule():
    html = render_block(DividerBlock(), THEME)
    assert "<hr" in html
    assert "border-top: 1px solid #eaeaea;" in html


def test_divider_border_override_applies_to_rule():
    html = render_block(DividerBlock(style=StyleSpec(border_color="#ff0000", border_width="3px")), THEME)
    assert "border-top: 3px solid #ff0000;" in html
    assert "border-style: solid;" not in html


def test_spacer_default_height():
    html = render_block(SpacerBlock(), THEME)
    assert 'height="20"' in html
    assert "height: 20px;" in html


def test_spacer_height_parsing():
    assert 'height="40"' in _render({"type": "spacer", "content": {"height": "40px"}})
    assert 'height="20"' in _render({"type": "spacer", "content": {"height": "tall"}})


def test_spacer_infinite_or_huge_height_uses_default():
    for height in ("inf", float("inf"), "-inf", "nan", 10 ** 400):
        assert 'height="20"' in _render({"type": "spacer", "content": {"height": height}})


def test_compartment_inserts_raw_html():
    html = render_block(CompartmentBlock(content=CompartmentContent(
        title="Note", content="<b>Bold</b> <script>x()</script>",
    )), THEME)
    assert "<b>Bold</b> <script>x()</script>" in html
    assert "Note" in html


def test_compartment_empty_content_renders_empty_box():
    html = render_block(CompartmentBlock(), THEME)
    assert '<div class="compartment-body"></div>' in html


# ── Articles ──────────────────────────────────────────────────────────────────

def test_featured_article_single_nested_table():
    html = render_block(FeaturedArticleBlock(content=FeaturedArticleContent(
        image="https://x/a.png", title="Big news", author="Ana", date="May 1",
        excerpt="Lorem", cta_text="Read", cta_url="https://x/big",
    )), THEME)
    assert html.count("<table") == 2
    assert "Big news" in html
    assert "By Ana &bull; May 1" in html
    assert 'href="https://x/big"' in html


def test_featured_article_missing_author_and_excerpt_kept_empty():
    html = render_block(FeaturedArticleBlock(content=FeaturedArticleContent(title="T", date="May 1")), THEME)
    assert "By  &bull; May 1" in html
    assert '<p class="excerpt" style="margin: 0 0 20px 0; font-size: 16px; line-height: 24px;"></p>' in html


def test_article_grid_empty_fallback():
    html = render_block(ArticleGridBlock(content=ArticleGridContent(articles=[])), THEME)
    assert "No articles available" in html
    assert html.count("<table") == 1


def test_article_grid_missing_articles_fallback():
    assert "No articles available" in _render({"type": "article-grid", "content": {}})


def test_article_grid_side_by_side_with_spacers():
    articles = [ArticleItem(title=f"A{i}") for i in range(3)]
    html = render_block(ArticleGridBlock(content=ArticleGridContent(articles=articles)), THEME)
    assert html.count('class="grid-cell"') == 3
    assert html.count('class="grid-spacer"') == 2
    assert 'width="33%"' in html
    assert html.index("A0") < html.index("A1") < html.index("A2")


# ── Événements ────────────────────────────────────────────────────────────────

def test_event_calendar_empty_fallback():
    html = render_block(EventCalendarBlock(content=EventCalendarContent(events=[])), THEME)
    assert "No events available" in html
    assert html.count("<table") == 1


def test_event_calendar_rows():
    html = render_block(EventCalendarBlock(content=EventCalendarContent(
        title="Agenda",
        events=[EventItem(title="Meetup", date="2026-11-02", time="18:00")],
    )), THEME)
    assert "Agenda" in html
    assert "Meetup" in html
    assert "<strong>Date:</strong> 2026-11-02" in html
    assert "<strong>Time:</strong> 18:00" in html
    assert "Location:" not in html


# ── Quiz ──────────────────────────────────────────────────────────────────────

def test_quiz_empty_fallback_has_no_script():
    html = render_block(QuizBlock(content=QuizContent(questions=[])), THEME)
    assert "No quiz questions available" in html
    assert "<script" not in html


def test_quiz_renders_radios_and_scoring_script():
    block = QuizBlock(id="q1", content=QuizContent(questions=[
        QuizQuestion(question="Capital of France?", options=["Lyon", "Paris"], correct_answer="Paris"),
    ]))
    html = render_block(block, THEME)
    assert html.count('type="radio"') == 2
    assert 'name="q1_0-q0"' in html
    assert html.count("<script") == 1
    assert "var answers = [1];" in html
    assert "alert(" in html
    assert 'onclick="return scoreQuiz_q1_0();"' in html


def test_quiz_options_as_records():
    block = parse_block({"type": "quiz", "content": {"questions": [
        {"question": "?", "options": [{"id": "o1", "text": "Yes"}, {"id": "o2", "text": "No"}], "correctAnswer": 0},
    ]}})
    question = block.content.questions[0]
    assert question.options == ["Yes", "No"]
    assert question.correct_index() == 0


def test_quiz_unknown_answer_is_null():
    question = QuizQuestion(question="?", options=["a"], correct_answer="z")
    assert question.correct_index() is None


def test_quiz_digit_like_answer_is_null():
    question = QuizQuestion(question="?", options=["a", "b", "c"], correct_answer="²")
    assert question.correct_index() is None
    html = _render({"id": "q", "type": "quiz", "content": {"questions": [
        {"question": "?", "options": ["a", "b"], "correctAnswer": "²"},
    ]}})
    assert "var answers = [null];" in html


def test_quiz_prefix_uses_position():
    block = QuizBlock(id="q", content=QuizContent(questions=[QuizQuestion(question="?", options=["a"])]))
    first, second = render_block(block, THEME, 0), render_block(block, THEME, 3)
    assert "scoreQuiz_q_0" in first
    assert "scoreQuiz_q_3" in second
    assert 'name="q_3-q0"' in second


# ── Engagement ────────────────────────────────────────────────────────────────

def test_subscribe_now_literal_defaults():
    html = render_block(SubscribeNowBlock(), THEME)
    for value in SUBSCRIBE_DEFAULTS.values():
        assert value in html
    assert 'type="email"' in html


def test_subscribe_now_empty_strings_use_defaults():
    html = _render({"type": "subscribe-now", "content": {"title": "", "buttonText": ""}})
    assert SUBSCRIBE_DEFAULTS["title"] in html
    assert SUBSCRIBE_DEFAULTS["button_text"] in html


def test_testimonial_missing_fields_render_empty():
    html = _render({"type": "testimonial"})
    assert "<img" not in html
    assert "&ldquo;&rdquo;" in html


def test_testimonial_full():
    html = _render({"type": "testimonial", "content": {
        "quote": "Great", "author": "Zoé", "role": "CTO", "company": "ACME", "image": "https://x/z.png",
    }})
    assert "&ldquo;Great&rdquo;" in html
    assert "CTO, ACME" in html
    assert 'src="https://x/z.png"' in html


def test_cta_banner_button_omitted_without_text():
    html = render_block(CTABannerBlock(content=CTABannerContent(title="Join")), THEME)
    assert "Join" in html
    assert 'class="btn"' not in html


def test_cta_banner_with_button():
    html = render_block(CTABannerBlock(content=CTABannerContent(title="Join", button_text="Go")), THEME)
    assert 'class="btn"' in html
    assert 'href="#"' in html


# ── Produits / social ─────────────────────────────────────────────────────────

def test_product_recommendation_empty_fallback():
    html = render_block(ProductRecommendationBlock(), THEME)
    assert "No products available" in html


def test_product_recommendation_first_two_only():
    products = [
        ProductItem(name="Alpha", price="10 €", discount="-20%", link="https://x/a"),
        ProductItem(name="Beta", price="12 €"),
        ProductItem(name="Gamma", price="14 €"),
    ]
    html = render_block(ProductRecommendationBlock(content=ProductRecommendationContent(products=products)), THEME)
    assert "Alpha" in html
    assert "Beta" in html
    assert "Gamma" not in html
    assert html.count('class="grid-cell"') == 2
    assert "-20%" in html
    assert 'href="https://x/a"' in html


def test_social_media_empty_renders_nothing():
    assert render_block(SocialMediaBlock(), THEME) == ""


def test_social_media_links():
    html = render_block(SocialMediaBlock(content=SocialMediaContent(links=[
        SocialLink(platform="linkedin", url="https://linkedin.com/acme"),
        SocialLink(platform="custom", url="https://acme.test", label="Blog"),
    ])), THEME)
    assert ">Linkedin</a>" in html
    assert ">Blog</a>" in html
