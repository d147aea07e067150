from .composer import CookbookDocument, compose, compose_document
from .fragments import Fragment
from .styles import get_styles
from .toc import estimate_toc

__all__ = [
    "CookbookDocument",
    "Fragment",
    "compose",
    "compose_document",
    "estimate_toc",
    "get_styles",
]
