from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Callable

from ..domain import Cover, Divider, FrontMatterPage, Recipe

PHOTO_PLACEHOLDER = "No photo"


@dataclass(frozen=True)
class Fragment:
    """Rendered markup for one content item, made of ``pages`` page blocks."""

    html: str
    pages: int

    @classmethod
    def empty(cls) -> "Fragment":
        return cls(html="", pages=0)


def page_block(css_class: str, inner: list[str]) -> str:
    body = "\n".join(f"  {line}" for line in inner if line)
    if body:
        return f'<div class="page {css_class}">\n{body}\n</div>\n'
    return f'<div class="page {css_class}"></div>\n'


def render_cover(name: str, author: str, cover: Cover | None) -> Fragment:
    cover = cover or Cover()
    title = cover.title or name
    inner: list[str] = []
    if cover.photo_url:
        inner.append(f'<img src="{escape(cover.photo_url)}" class="cover-photo" />')
    inner.append(f'<h1 class="cover-title">{escape(title)}</h1>')
    if cover.author_visible:
        inner.append(f'<div class="cover-author">by {escape(author)}</div>')
    if cover.year and cover.year_visible:
        inner.append(f'<div class="cover-year">{escape(cover.year)}</div>')
    return Fragment(html=page_block("cover-page", inner), pages=1)


def render_recipe(recipe: Recipe) -> Fragment:
    ingredients = [f"<li>{escape(item)}</li>" for item in recipe.ingredients]
    directions = [f"<li>{idx}. {escape(step)}</li>" for idx, step in enumerate(recipe.directions, start=1)]

    info = page_block(
        "recipe-info-page",
        [
            f'<h2 class="recipe-title">{escape(recipe.title)}</h2>',
            '<h3 class="recipe-section-title">Ingredients</h3>',
            '<ul class="recipe-list">' + "".join(ingredients) + "</ul>",
            '<h3 class="recipe-section-title">Directions</h3>',
            '<ol class="recipe-list">' + "".join(directions) + "</ol>",
        ],
    )

    if recipe.photo_url:
        photo = f'<img src="{escape(recipe.photo_url)}" class="recipe-photo" />'
    else:
        photo = f'<div class="recipe-photo-placeholder">{PHOTO_PLACEHOLDER}</div>'
    return Fragment(html=info + page_block("recipe-photo-page", [photo]), pages=2)


def render_divider(divider: Divider) -> Fragment:
    inner = [f'<h2 class="divider-title">{escape(divider.title)}</h2>']
    if divider.subtitle:
        inner.append(f'<p class="divider-subtitle">{escape(divider.subtitle)}</p>')
    return Fragment(html=page_block("divider-page", inner), pages=1)


def _render_dedication(page: FrontMatterPage) -> Fragment:
    inner = [f'<div class="dedication-text">{escape(page.text("text"))}</div>']
    return Fragment(html=page_block("dedication-page", inner), pages=1)


def _render_foreword(page: FrontMatterPage) -> Fragment:
    inner = [f'<div class="foreword-text">{escape(page.text("text"))}</div>']
    return Fragment(html=page_block("foreword-page", inner), pages=1)


def _render_photo(page: FrontMatterPage) -> Fragment:
    inner: list[str] = []
    photo_url = page.text("photo_url")
    caption = page.text("caption")
    if photo_url:
        inner.append(f'<img src="{escape(photo_url)}" class="photo-page-image" />')
    if caption:
        inner.append(f'<div class="photo-caption">{escape(caption)}</div>')
    return Fragment(html=page_block("photo-page", inner), pages=1)


def _render_story(page: FrontMatterPage) -> Fragment:
    inner: list[str] = []
    title = page.text("title")
    if title:
        inner.append(f'<h2 class="story-title">{escape(title)}</h2>')
    inner.append(f'<div class="story-text">{escape(page.text("text"))}</div>')
    return Fragment(html=page_block("story-page", inner), pages=1)


_FRONT_MATTER_RENDERERS: dict[str, Callable[[FrontMatterPage], Fragment]] = {
    "dedication": _render_dedication,
    "foreword": _render_foreword,
    "photo": _render_photo,
    "story": _render_story,
}


def render_front_matter_page(page: FrontMatterPage) -> Fragment:
    renderer = _FRONT_MATTER_RENDERERS.get(page.type)
    if renderer is None:
        return Fragment.empty()
    return renderer(page)
