from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

CONTENT_RECIPE = "recipe"
CONTENT_DIVIDER = "divider"


@dataclass(frozen=True)
class Cover:
    photo_url: str | None = None
    title: str | None = None
    author_visible: bool = True
    year: str | None = None
    year_visible: bool = True


@dataclass(frozen=True)
class Recipe:
    id: str
    title: str
    ingredients: tuple[str, ...] = ()
    directions: tuple[str, ...] = ()
    photo_url: str | None = None


@dataclass(frozen=True)
class Divider:
    id: str
    title: str
    subtitle: str | None = None


@dataclass(frozen=True)
class ContentRef:
    id: str
    type: str


FrontMatterContent = tuple[tuple[str, str], ...]


def _content_items(content: Mapping[str, Any]) -> FrontMatterContent:
    return tuple(sorted((str(key), str(value)) for key, value in content.items() if value is not None))


@dataclass(frozen=True)
class FrontMatterPage:
    """A front-matter entry tagged by ``type``.

    ``content`` holds sorted ``(key, text)`` pairs. A mapping passed in is
    converted on construction and ``None`` values are dropped.
    """

    type: str
    content: FrontMatterContent = ()

    def __post_init__(self) -> None:
        if isinstance(self.content, Mapping):
            object.__setattr__(self, "content", _content_items(self.content))

    def text(self, key: str) -> str:
        return dict(self.content).get(key, "")


@dataclass(frozen=True)
class Cookbook:
    name: str
    author: str = ""
    cover: Cover | None = None
    toc_style: str | None = None
    front_matter_pages: tuple[FrontMatterPage, ...] = ()
    recipes: tuple[Recipe, ...] = ()
    content_order: tuple[ContentRef, ...] = ()
    dividers: tuple[Divider, ...] = ()


@dataclass(frozen=True)
class TocEntry:
    title: str
    page_number: int
