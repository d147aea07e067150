from __future__ import annotations

from cookbookpdf.compose import get_styles


# Purpose: verify the style sheet is constant and defines the page block rules.
def test_styles_page_rules() -> None:
    styles = get_styles()
    assert styles is get_styles()
    assert "width: 8.5in;" in styles
    assert "min-height: 11in;" in styles
    assert "page-break-after: always;" in styles
    assert ".page:last-child" in styles
    assert "page-break-after: avoid;" in styles


# Purpose: verify every content type class has a rule.
def test_styles_cover_content_classes() -> None:
    styles = get_styles()
    for css_class in (
        ".cover-page",
        ".toc-page",
        ".recipe-info-page",
        ".recipe-photo-page",
        ".recipe-photo-placeholder",
        ".divider-page",
        ".dedication-page",
        ".foreword-page",
        ".photo-page",
        ".story-page",
    ):
        assert css_class in styles
