from __future__ import annotations

from html import escape
from typing import Sequence

from ..domain import Recipe, TocEntry
from .fragments import Fragment, page_block

FIRST_RECIPE_PAGE = 2
PAGES_PER_RECIPE = 2


def estimate_toc(recipes: Sequence[Recipe], toc_style: str | None = None) -> list[TocEntry]:
    """Assign each recipe a page number on a fixed two-page stride.

    The estimate reserves one page for the cover and nothing else: front
    matter, the contents page and dividers are not counted, and neither is
    recipe length. ``toc_style`` is accepted but does not change the result.
    """
    del toc_style
    return [
        TocEntry(title=recipe.title, page_number=FIRST_RECIPE_PAGE + idx * PAGES_PER_RECIPE)
        for idx, recipe in enumerate(recipes)
    ]


def render_toc(entries: Sequence[TocEntry]) -> Fragment:
    inner = ['<h2 class="toc-title">Table of Contents</h2>']
    for entry in entries:
        inner.append(
            '<div class="toc-item">'
            f'<span class="toc-item-title">{escape(entry.title)}</span>'
            f'<span class="toc-item-page">{entry.page_number}</span>'
            "</div>"
        )
    return Fragment(html=page_block("toc-page", inner), pages=1)
