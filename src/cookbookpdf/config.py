from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError

PAGE_FORMATS = ("Letter", "Legal", "Tabloid", "A3", "A4", "A5")


@dataclass(frozen=True)
class RenderConfig:
    page_format: str = "Letter"
    margin: str = "0.5in"
    print_background: bool = True
    timeout_ms: int = 30000


@dataclass(frozen=True)
class StorageConfig:
    bucket: str = "ebook-exports"
    signed_url_ttl: int = 60 * 60 * 24 * 365


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: tuple[str, ...] = ("*",)


@dataclass(frozen=True)
class EffectiveConfig:
    render: RenderConfig
    storage: StorageConfig
    server: ServerConfig
    log_level: str
    project_dir: Optional[str]


def default_config() -> EffectiveConfig:
    return EffectiveConfig(
        render=RenderConfig(),
        storage=StorageConfig(),
        server=ServerConfig(),
        log_level="INFO",
        project_dir=None,
    )


def _config_root() -> Path:
    override = os.environ.get("COOKBOOKPDF_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(os.path.expanduser("~/.config/cookbookpdf"))


def load_global_config(config_dir: str | None = None) -> dict[str, Any]:
    root = Path(config_dir) if config_dir else _config_root()
    path = root / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "cookbookpdf.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config(cli_args.get("config_dir"))
    project_dir = cli_args.get("project")
    project_cfg = load_project_config(project_dir) if project_dir else {}

    merged = merge_config(_cli_to_dict(cli_args), _deep_merge(project_cfg, _env_to_dict()), global_cfg)

    render_cfg = merged.get("render", {})
    storage_cfg = merged.get("storage", {})
    server_cfg = merged.get("server", {})

    return EffectiveConfig(
        render=RenderConfig(
            page_format=_normalize_page_format(render_cfg.get("page_format", "Letter")),
            margin=str(render_cfg.get("margin", "0.5in")),
            print_background=bool(render_cfg.get("print_background", True)),
            timeout_ms=_int_setting("render.timeout_ms", render_cfg.get("timeout_ms", 30000)),
        ),
        storage=StorageConfig(
            bucket=str(storage_cfg.get("bucket", "ebook-exports")),
            signed_url_ttl=_int_setting("storage.signed_url_ttl", storage_cfg.get("signed_url_ttl", 31536000)),
        ),
        server=ServerConfig(
            host=str(server_cfg.get("host", "0.0.0.0")),
            port=_int_setting("server.port", server_cfg.get("port", 3000)),
            cors_origins=_normalize_origins(server_cfg.get("cors_origins", ["*"])),
        ),
        log_level=_normalize_log_level(merged.get("log_level", "INFO")),
        project_dir=str(project_dir) if project_dir else None,
    )


def _env_to_dict() -> dict[str, Any]:
    out: dict[str, Any] = {}
    port = os.environ.get("PORT")
    if port:
        out["server"] = {"port": port}
    level = os.environ.get("LOG_LEVEL")
    if level:
        out["log_level"] = level
    return out


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if cli_args.get("log_level") is not None:
        out["log_level"] = cli_args["log_level"]

    render: dict[str, Any] = {}
    for key in ("page_format", "margin"):
        if cli_args.get(key) is not None:
            render[key] = cli_args[key]
    if render:
        out["render"] = render

    if cli_args.get("bucket") is not None:
        out["storage"] = {"bucket": cli_args["bucket"]}

    server: dict[str, Any] = {}
    for key in ("host", "port"):
        if cli_args.get(key) is not None:
            server[key] = cli_args[key]
    if server:
        out["server"] = server

    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    origins = ", ".join(repr(origin) for origin in cfg.server.cors_origins)
    lines = [
        f"log_level = {cfg.log_level!r}",
        "",
        "[render]",
        f"page_format = {cfg.render.page_format!r}",
        f"margin = {cfg.render.margin!r}",
        f"print_background = {str(cfg.render.print_background).lower()}",
        f"timeout_ms = {cfg.render.timeout_ms}",
        "",
        "[storage]",
        f"bucket = {cfg.storage.bucket!r}",
        f"signed_url_ttl = {cfg.storage.signed_url_ttl}",
        "",
        "[server]",
        f"host = {cfg.server.host!r}",
        f"port = {cfg.server.port}",
        f"cors_origins = [{origins}]",
    ]
    return "\n".join(lines) + "\n"


def _int_setting(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer")
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


def _normalize_page_format(value: Any) -> str:
    text = str(value or "").strip().lower()
    for fmt in PAGE_FORMATS:
        if fmt.lower() == text:
            return fmt
    raise ConfigError(f"Unsupported page format: {value!r}")


def _normalize_origins(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        return ("*",)
    origins = tuple(str(item).strip() for item in value if str(item).strip())
    return origins or ("*",)


def _normalize_log_level(value: Any) -> str:
    text = str(value or "").strip().upper()
    if text in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return text
    return "INFO"
