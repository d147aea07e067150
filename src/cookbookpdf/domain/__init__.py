from .models import (
    CONTENT_DIVIDER,
    CONTENT_RECIPE,
    ContentRef,
    Cookbook,
    Cover,
    Divider,
    FrontMatterPage,
    Recipe,
    TocEntry,
)
from .parse import cookbook_from_dict

__all__ = [
    "CONTENT_DIVIDER",
    "CONTENT_RECIPE",
    "ContentRef",
    "Cookbook",
    "Cover",
    "Divider",
    "FrontMatterPage",
    "Recipe",
    "TocEntry",
    "cookbook_from_dict",
]
