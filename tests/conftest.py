from __future__ import annotations

from pathlib import Path
import sys
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("COOKBOOKPDF_CONFIG_DIR", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture()
def soup_data() -> dict[str, Any]:
    return {
        "name": "Family Soups",
        "author": "Ada",
        "recipes": [
            {"id": "r1", "title": "Soup", "ingredients": ["Water", "Salt"], "directions": ["Boil", "Season"]},
        ],
    }


@pytest.fixture()
def full_data() -> dict[str, Any]:
    return {
        "name": "Kitchen Notes",
        "author": "Grace",
        "cover": {"photo_url": "https://img/cover.jpg", "title": "Our Kitchen", "year": "2024"},
        "toc_style": "classic",
        "front_matter_pages": [
            {"type": "dedication", "content": {"text": "For Mum"}},
            {"type": "foreword", "content": {"text": "A few words"}},
            {"type": "photo", "content": {"photo_url": "https://img/family.jpg", "caption": "Sunday lunch"}},
            {"type": "story", "content": {"title": "How it began", "text": "Once upon a time"}},
        ],
        "recipes": [
            {"id": "r1", "title": "Bread", "ingredients": ["Flour"], "directions": ["Knead"], "photo_url": "https://img/bread.jpg"},
            {"id": "r2", "title": "Jam", "ingredients": ["Fruit", "Sugar"], "directions": ["Cook"]},
            {"id": "r3", "title": "Tea", "ingredients": ["Leaves"], "directions": ["Steep"]},
        ],
        "dividers": [
            {"id": "d1", "title": "Breakfast", "subtitle": "Morning things"},
            {"id": "d2", "title": "Drinks"},
        ],
        "content_order": [
            {"id": "d1", "type": "divider"},
            {"id": "r2", "type": "recipe"},
            {"id": "r1", "type": "recipe"},
            {"id": "d2", "type": "divider"},
            {"id": "r3", "type": "recipe"},
        ],
    }
