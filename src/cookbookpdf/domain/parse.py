from __future__ import annotations

from typing import Any

from ..errors import CompositionError
from .models import ContentRef, Cookbook, Cover, Divider, FrontMatterPage, Recipe

_BOOL_FALSE = {"0", "false", "no", "off"}


def cookbook_from_dict(data: Any) -> Cookbook:
    if not isinstance(data, dict):
        raise CompositionError("cookbook_data must be a mapping")

    return Cookbook(
        name=_string_value(data.get("name")) or "",
        author=_string_value(data.get("author")) or "",
        cover=_cover(data.get("cover")),
        toc_style=_string_value(data.get("toc_style")),
        front_matter_pages=tuple(_front_matter(data.get("front_matter_pages"))),
        recipes=tuple(_recipes(data.get("recipes"))),
        content_order=tuple(_content_order(data.get("content_order"))),
        dividers=tuple(_dividers(data.get("dividers"))),
    )


def _cover(value: Any) -> Cover | None:
    if not isinstance(value, dict):
        return None
    return Cover(
        photo_url=_string_value(value.get("photo_url")),
        title=_string_value(value.get("title")),
        author_visible=_visible(value.get("author_visible")),
        year=_string_value(value.get("year")),
        year_visible=_visible(value.get("year_visible")),
    )


def _recipes(value: Any) -> list[Recipe]:
    recipes: list[Recipe] = []
    for item in _mappings("recipes", value):
        recipes.append(
            Recipe(
                id=_string_value(item.get("id")) or "",
                title=_string_value(item.get("title")) or "",
                ingredients=tuple(_text_items(item.get("ingredients"))),
                directions=tuple(_text_items(item.get("directions"))),
                photo_url=_string_value(item.get("photo_url")),
            )
        )
    return recipes


def _dividers(value: Any) -> list[Divider]:
    return [
        Divider(
            id=_string_value(item.get("id")) or "",
            title=_string_value(item.get("title")) or "",
            subtitle=_string_value(item.get("subtitle")),
        )
        for item in _mappings("dividers", value)
    ]


def _content_order(value: Any) -> list[ContentRef]:
    refs: list[ContentRef] = []
    for item in _mappings("content_order", value):
        item_id = _string_value(item.get("id"))
        item_type = _string_value(item.get("type"))
        if item_id is None or item_type is None:
            continue
        refs.append(ContentRef(id=item_id, type=item_type))
    return refs


def _front_matter(value: Any) -> list[FrontMatterPage]:
    pages: list[FrontMatterPage] = []
    for item in _mappings("front_matter_pages", value):
        content = item.get("content")
        pages.append(
            FrontMatterPage(
                type=_string_value(item.get("type")) or "",
                content=content if isinstance(content, dict) else (),
            )
        )
    return pages


def _mappings(name: str, value: Any) -> list[dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise CompositionError(f"{name} must be a list")
    return [item for item in value if isinstance(item, dict)]


def _text_items(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _string_value(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _visible(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    return str(value).strip().lower() not in _BOOL_FALSE
