from __future__ import annotations

from dataclasses import dataclass
from html import escape

from ..domain import CONTENT_DIVIDER, CONTENT_RECIPE, ContentRef, Cookbook, TocEntry
from .fragments import Fragment, render_cover, render_divider, render_front_matter_page, render_recipe
from .styles import get_styles
from .toc import estimate_toc, render_toc


@dataclass(frozen=True)
class CookbookDocument:
    title: str
    cover: Fragment
    front_matter: tuple[Fragment, ...]
    toc_entries: tuple[TocEntry, ...]
    toc: Fragment
    body: tuple[Fragment, ...]
    styles: str

    @property
    def fragments(self) -> list[Fragment]:
        return [self.cover, *self.front_matter, self.toc, *self.body]

    @property
    def page_count(self) -> int:
        return sum(fragment.pages for fragment in self.fragments)

    @property
    def content_page_count(self) -> int:
        """Pages excluding the contents page: cover, front matter and body."""
        return self.page_count - self.toc.pages

    def to_html(self) -> str:
        content = "".join(fragment.html for fragment in self.fragments)
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '<meta charset="UTF-8">\n'
            f"<title>{escape(self.title)}</title>\n"
            f"<style>{self.styles}</style>\n"
            "</head>\n"
            "<body>\n"
            f"{content}"
            "</body>\n"
            "</html>\n"
        )


def ordered_content(cookbook: Cookbook) -> list[ContentRef]:
    if cookbook.content_order:
        return list(cookbook.content_order)
    return [ContentRef(id=recipe.id, type=CONTENT_RECIPE) for recipe in cookbook.recipes]


def render_body(cookbook: Cookbook) -> list[Fragment]:
    recipes = {recipe.id: recipe for recipe in cookbook.recipes}
    dividers = {divider.id: divider for divider in cookbook.dividers}

    body: list[Fragment] = []
    for ref in ordered_content(cookbook):
        if ref.type == CONTENT_RECIPE:
            recipe = recipes.get(ref.id)
            if recipe is not None:
                body.append(render_recipe(recipe))
        elif ref.type == CONTENT_DIVIDER:
            divider = dividers.get(ref.id)
            if divider is not None:
                body.append(render_divider(divider))
    return body


def compose_document(cookbook: Cookbook) -> CookbookDocument:
    front_matter = [render_front_matter_page(page) for page in cookbook.front_matter_pages]
    entries = estimate_toc(cookbook.recipes, cookbook.toc_style)
    cover_title = cookbook.cover.title if cookbook.cover and cookbook.cover.title else cookbook.name
    return CookbookDocument(
        title=cover_title,
        cover=render_cover(cookbook.name, cookbook.author, cookbook.cover),
        front_matter=tuple(fragment for fragment in front_matter if fragment.pages),
        toc_entries=tuple(entries),
        toc=render_toc(entries),
        body=tuple(render_body(cookbook)),
        styles=get_styles(),
    )


def compose(cookbook: Cookbook) -> str:
    return compose_document(cookbook).to_html()
