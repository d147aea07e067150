from .storage import PDF_CONTENT_TYPE, SIGNED_URL_TTL, StoragePublisher, object_path

__all__ = ["PDF_CONTENT_TYPE", "SIGNED_URL_TTL", "StoragePublisher", "object_path"]
