from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Mapping, Protocol

from ..compose import compose
from ..config import EffectiveConfig
from ..domain import cookbook_from_dict
from ..errors import CompositionError, CookbookPdfError, RequestValidationError
from ..publish import PDF_CONTENT_TYPE, StoragePublisher, object_path
from ..render import BrowserRenderer, RenderOptions

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("user_id", "cookbook_id", "cookbook_data", "supabase_url", "supabase_service_key")


class Renderer(Protocol):
    def render(self, markup: str) -> bytes: ...


class Publisher(Protocol):
    def put(self, bucket: str, path: str, data: bytes, content_type: str = ..., overwrite: bool = ...) -> None: ...

    def signed_url(self, bucket: str, path: str, ttl_seconds: int = ...) -> str: ...


PublisherFactory = Callable[[str, str], Publisher]


@dataclass(frozen=True)
class ExportRequest:
    requester_id: str
    document_id: str
    cookbook_data: dict[str, Any]
    storage_url: str
    storage_key: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "ExportRequest":
        payload = payload or {}
        if any(not payload.get(key) for key in REQUIRED_FIELDS):
            raise RequestValidationError("Missing required fields")
        return cls(
            requester_id=str(payload["user_id"]),
            document_id=str(payload["cookbook_id"]),
            cookbook_data=payload["cookbook_data"],
            storage_url=str(payload["supabase_url"]),
            storage_key=str(payload["supabase_service_key"]),
        )


@dataclass(frozen=True)
class ExportResult:
    pdf_url: str
    path: str


def render_markup(cookbook_data: Any) -> str:
    try:
        return compose(cookbook_from_dict(cookbook_data))
    except CookbookPdfError:
        raise
    except Exception as exc:
        raise CompositionError(f"Failed to compose cookbook: {exc}") from exc


def export_cookbook(
    request: ExportRequest,
    cfg: EffectiveConfig,
    renderer: Renderer | None = None,
    publisher_factory: PublisherFactory | None = None,
) -> ExportResult:
    logger.info("Generating PDF for cookbook: %s", request.document_id)

    markup = render_markup(request.cookbook_data)

    renderer = renderer or BrowserRenderer(RenderOptions.from_config(cfg.render))
    pdf = renderer.render(markup)

    factory = publisher_factory or StoragePublisher.connect
    publisher = factory(request.storage_url, request.storage_key)
    path = object_path(request.requester_id, request.document_id)
    publisher.put(cfg.storage.bucket, path, pdf, content_type=PDF_CONTENT_TYPE, overwrite=True)
    url = publisher.signed_url(cfg.storage.bucket, path, ttl_seconds=cfg.storage.signed_url_ttl)

    logger.info("PDF generated and uploaded: %s", path)
    return ExportResult(pdf_url=url, path=path)
