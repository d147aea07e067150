from __future__ import annotations

from pathlib import Path

import yaml

from .domain import Cookbook, cookbook_from_dict
from .errors import CompositionError, MissingFileError


def load_cookbook(path: str) -> Cookbook:
    """Read a cookbook record from a JSON or YAML file.

    JSON is parsed by the YAML loader, so both formats share one code path.
    A top-level ``cookbook_data`` key (the HTTP request shape) is unwrapped.
    """
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"Cookbook not found: {source}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CompositionError(f"{source}: invalid cookbook data") from exc

    if isinstance(data, dict) and isinstance(data.get("cookbook_data"), dict):
        data = data["cookbook_data"]
    return cookbook_from_dict(data)
