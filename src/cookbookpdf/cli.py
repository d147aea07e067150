from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable
from pathlib import Path

from .compose import compose_document
from .config import EffectiveConfig, config_to_toml, resolve_config
from .errors import (
    CompositionError,
    ConfigError,
    CookbookPdfError,
    MissingFileError,
    PublishError,
    RenderError,
    RequestValidationError,
)
from .log import configure_logging
from .render import BrowserRenderer, RenderOptions
from .source import load_cookbook

STARTER_CONFIG = """log_level = "INFO"

[render]
page_format = "Letter"
margin = "0.5in"
# timeout_ms = 30000

[storage]
bucket = "ebook-exports"
# signed_url_ttl = 31536000

[server]
# host = "0.0.0.0"
port = 3000
# cors_origins = ["*"]
"""


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "html": _cmd_html,
        "pdf": _cmd_pdf,
        "serve": _cmd_serve,
        "config": _cmd_config,
        "init": _cmd_init,
    }

    handler = handlers[args.command]
    try:
        return handler(args)
    except CookbookPdfError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)
    except FileExistsError as exc:
        print(str(exc), file=sys.stderr)
        return 1


def _common_options(default: object = None) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False, argument_default=default)
    common.add_argument("--config-dir")
    common.add_argument("--project")
    common.add_argument("--page-format")
    common.add_argument("--margin")
    common.add_argument("--bucket")
    common.add_argument("--host")
    common.add_argument("--port", type=int)
    common.add_argument("--log-level")
    return common


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cookbookpdf", parents=[_common_options()])
    # Subcommand copies leave options unset so values given before the subcommand survive.
    common = _common_options(argparse.SUPPRESS)
    sub = parser.add_subparsers(dest="command")

    html = sub.add_parser("html", parents=[common], help="Compose a cookbook file to HTML")
    html.add_argument("source")
    html.add_argument("-o", "--output")
    html.add_argument("--verbose", action="store_true")

    pdf = sub.add_parser("pdf", parents=[common], help="Compose and render a cookbook file to PDF")
    pdf.add_argument("source")
    pdf.add_argument("-o", "--output")
    pdf.add_argument("--html-out")
    pdf.add_argument("--verbose", action="store_true")

    sub.add_parser("serve", parents=[common], help="Run the HTTP service")
    sub.add_parser("config", parents=[common], help="Print the effective configuration")

    init = sub.add_parser("init", help="Write a starter cookbookpdf.toml")
    init.add_argument("path", nargs="?", default=".")
    init.add_argument("--force", action="store_true")

    return parser


def _cmd_html(args: argparse.Namespace) -> int:
    _resolve_cfg(args)
    document = compose_document(load_cookbook(args.source))
    markup = document.to_html()
    if args.output:
        Path(args.output).write_text(markup, encoding="utf-8")
        if args.verbose:
            print(f"{args.output}: {document.page_count} pages")
    else:
        sys.stdout.write(markup)
    return 0


def _cmd_pdf(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    source = Path(args.source)
    document = compose_document(load_cookbook(str(source)))
    markup = document.to_html()
    if args.html_out:
        Path(args.html_out).write_text(markup, encoding="utf-8")

    output = Path(args.output) if args.output else source.with_suffix(".pdf")
    pdf = BrowserRenderer(RenderOptions.from_config(cfg.render)).render(markup)
    output.write_bytes(pdf)
    if args.verbose:
        print(f"{output}: {document.page_count} pages, {len(pdf)} bytes")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from .api import run_server

    cfg = _resolve_cfg(args)
    run_server(cfg)
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = resolve_config(_cli_args_dict(args))
    print(config_to_toml(cfg), end="")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    root = os.path.abspath(args.path)
    os.makedirs(root, exist_ok=True)
    config_path = os.path.join(root, "cookbookpdf.toml")
    if os.path.exists(config_path) and not args.force:
        raise ConfigError(f"{config_path} already exists (use --force to overwrite)")
    with open(config_path, "w", encoding="utf-8") as fh:
        fh.write(STARTER_CONFIG)
    print(config_path)
    return 0


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    cfg = resolve_config(_cli_args_dict(args))
    configure_logging(cfg.log_level)
    return cfg


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: CookbookPdfError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, MissingFileError):
        return 3
    if isinstance(exc, RequestValidationError):
        return 4
    if isinstance(exc, RenderError):
        return 5
    if isinstance(exc, PublishError):
        return 6
    if isinstance(exc, CompositionError):
        return 7
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
