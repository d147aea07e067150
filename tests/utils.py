from __future__ import annotations

from pathlib import Path

PAGE_MARKER = '<div class="page '


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "cookbookpdf"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def count_pages(markup: str) -> int:
    return markup.count(PAGE_MARKER)
