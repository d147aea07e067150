from __future__ import annotations

import logging
from typing import Any

from supabase import create_client

from ..errors import PublishError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
SIGNED_URL_TTL = 60 * 60 * 24 * 365


def object_path(requester_id: str, document_id: str) -> str:
    return f"{requester_id}/{document_id}.pdf"


class StoragePublisher:
    """Upload artifacts to a Supabase Storage bucket and hand out signed URLs."""

    def __init__(self, client: Any) -> None:
        self.client = client

    @classmethod
    def connect(cls, url: str, key: str) -> "StoragePublisher":
        try:
            client = create_client(url, key)
        except Exception as exc:
            raise PublishError(f"Failed to connect to storage: {exc}") from exc
        return cls(client)

    def put(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str = PDF_CONTENT_TYPE,
        overwrite: bool = True,
    ) -> None:
        options = {"content-type": content_type, "upsert": "true" if overwrite else "false"}
        try:
            self.client.storage.from_(bucket).upload(path=path, file=data, file_options=options)
        except Exception as exc:
            logger.error("Upload error for %s/%s: %s", bucket, path, exc)
            raise PublishError("Failed to upload PDF") from exc

    def signed_url(self, bucket: str, path: str, ttl_seconds: int = SIGNED_URL_TTL) -> str:
        try:
            result = self.client.storage.from_(bucket).create_signed_url(path, ttl_seconds)
        except Exception as exc:
            logger.error("URL error for %s/%s: %s", bucket, path, exc)
            raise PublishError("Failed to get PDF URL") from exc

        url = _signed_url_value(result)
        if not url:
            logger.error("URL error for %s/%s: no signed URL in response", bucket, path)
            raise PublishError("Failed to get PDF URL")
        return url


def _signed_url_value(result: Any) -> str | None:
    if not isinstance(result, dict):
        return None
    for key in ("signedUrl", "signedURL", "signed_url"):
        value = result.get(key)
        if value:
            return str(value)
    return None
