from __future__ import annotations

from typing import Any

import pytest

from cookbookpdf.config import default_config
from cookbookpdf.errors import CompositionError, PublishError, RenderError, RequestValidationError
from cookbookpdf.services import export_service
from cookbookpdf.services.export_service import ExportRequest, export_cookbook, render_markup


class FakeRenderer:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.markup: list[str] = []

    def render(self, markup: str) -> bytes:
        self.markup.append(markup)
        if self.fail:
            raise RenderError("PDF rendering failed: crashed")
        return b"%PDF-1.4 fake"


class FakePublisher:
    def __init__(self, fail_put: bool = False, fail_url: bool = False) -> None:
        self.fail_put = fail_put
        self.fail_url = fail_url
        self.puts: list[tuple[str, str, bytes, str, bool]] = []
        self.urls: list[tuple[str, str, int]] = []

    def put(self, bucket: str, path: str, data: bytes, content_type: str = "application/pdf", overwrite: bool = True) -> None:
        if self.fail_put:
            raise PublishError("Failed to upload PDF")
        self.puts.append((bucket, path, data, content_type, overwrite))

    def signed_url(self, bucket: str, path: str, ttl_seconds: int = 0) -> str:
        if self.fail_url:
            raise PublishError("Failed to get PDF URL")
        self.urls.append((bucket, path, ttl_seconds))
        return f"https://store/{path}?token=t"


def _payload(cookbook_data: dict[str, Any]) -> dict[str, Any]:
    return {
        "user_id": "user-1",
        "cookbook_id": "book-1",
        "cookbook_data": cookbook_data,
        "supabase_url": "https://proj.supabase.co",
        "supabase_service_key": "key",
    }


# Purpose: verify payload mapping and required field checks.
def test_export_request_from_payload(soup_data: dict[str, Any]) -> None:
    request = ExportRequest.from_payload(_payload(soup_data))
    assert request.requester_id == "user-1"
    assert request.document_id == "book-1"
    assert request.storage_url == "https://proj.supabase.co"

    for missing in ("user_id", "cookbook_id", "cookbook_data", "supabase_url", "supabase_service_key"):
        payload = _payload(soup_data)
        payload[missing] = None
        with pytest.raises(RequestValidationError, match="Missing required fields"):
            ExportRequest.from_payload(payload)
    with pytest.raises(RequestValidationError):
        ExportRequest.from_payload(None)


# Purpose: verify the full pipeline renders, uploads and signs the PDF.
def test_export_cookbook_success(soup_data: dict[str, Any]) -> None:
    renderer = FakeRenderer()
    publisher = FakePublisher()
    connected: list[tuple[str, str]] = []

    def factory(url: str, key: str) -> FakePublisher:
        connected.append((url, key))
        return publisher

    result = export_cookbook(ExportRequest.from_payload(_payload(soup_data)), default_config(), renderer, factory)
    assert result.path == "user-1/book-1.pdf"
    assert result.pdf_url == "https://store/user-1/book-1.pdf?token=t"
    assert connected == [("https://proj.supabase.co", "key")]
    assert "Soup" in renderer.markup[0]
    assert publisher.puts == [("ebook-exports", "user-1/book-1.pdf", b"%PDF-1.4 fake", "application/pdf", True)]
    assert publisher.urls == [("ebook-exports", "user-1/book-1.pdf", 31536000)]


# Purpose: verify render failures propagate before anything is uploaded.
def test_export_cookbook_render_failure(soup_data: dict[str, Any]) -> None:
    publisher = FakePublisher()
    with pytest.raises(RenderError):
        export_cookbook(ExportRequest.from_payload(_payload(soup_data)), default_config(), FakeRenderer(fail=True), lambda u, k: publisher)
    assert publisher.puts == []


# Purpose: verify publication failures propagate as publish errors.
def test_export_cookbook_publish_failures(soup_data: dict[str, Any]) -> None:
    request = ExportRequest.from_payload(_payload(soup_data))
    with pytest.raises(PublishError, match="upload"):
        export_cookbook(request, default_config(), FakeRenderer(), lambda u, k: FakePublisher(fail_put=True))
    with pytest.raises(PublishError, match="URL"):
        export_cookbook(request, default_config(), FakeRenderer(), lambda u, k: FakePublisher(fail_url=True))


# Purpose: verify malformed cookbook shapes become composition errors.
def test_render_markup_errors(monkeypatch) -> None:
    with pytest.raises(CompositionError):
        render_markup({"name": "B", "recipes": 5})

    def boom(cookbook: Any) -> str:
        raise TypeError("unexpected shape")

    monkeypatch.setattr(export_service, "compose", boom)
    with pytest.raises(CompositionError, match="unexpected shape"):
        render_markup({"name": "B"})


# Purpose: verify the default renderer and publisher are used when none are given.
def test_export_cookbook_defaults(monkeypatch, soup_data: dict[str, Any]) -> None:
    publisher = FakePublisher()
    monkeypatch.setattr(export_service, "BrowserRenderer", lambda options: FakeRenderer())
    monkeypatch.setattr(export_service.StoragePublisher, "connect", classmethod(lambda cls, url, key: publisher))
    result = export_cookbook(ExportRequest.from_payload(_payload(soup_data)), default_config())
    assert result.path == "user-1/book-1.pdf"
    assert len(publisher.puts) == 1
