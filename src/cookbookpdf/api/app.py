"""
HTTP transport for the cookbook PDF service.

Run with ``cookbookpdf serve`` or ``uvicorn cookbookpdf.api.app:app``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError as BodyValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import EffectiveConfig, default_config
from ..errors import CookbookPdfError, RequestValidationError
from ..services.export_service import ExportRequest, PublisherFactory, Renderer, export_cookbook

logger = logging.getLogger(__name__)

SERVICE_NAME = "cookbook-pdf-service"


class GeneratePdfRequest(BaseModel):
    """Body of ``POST /generate-pdf``; presence is checked by the handler, not pydantic."""

    user_id: Optional[Union[str, int]] = None
    cookbook_id: Optional[Union[str, int]] = None
    cookbook_data: Optional[dict[str, Any]] = None
    supabase_url: Optional[str] = None
    supabase_service_key: Optional[str] = None


def create_app(
    cfg: EffectiveConfig | None = None,
    renderer: Renderer | None = None,
    publisher_factory: PublisherFactory | None = None,
) -> FastAPI:
    cfg = cfg or default_config()

    app = FastAPI(
        title="Cookbook PDF Service",
        description="Compose cookbooks into print-ready PDFs and publish them to storage",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BodyValidationError)
    def invalid_body(request: Request, exc: BodyValidationError) -> JSONResponse:
        del request
        logger.warning("Rejected request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"success": False, "error": "Invalid request body"})

    @app.get("/")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": SERVICE_NAME}

    # Sync handler: FastAPI runs it in the threadpool, one browser per request.
    @app.post("/generate-pdf")
    def generate_pdf(body: GeneratePdfRequest) -> JSONResponse:
        try:
            request = ExportRequest.from_payload(body.model_dump())
        except RequestValidationError as exc:
            return JSONResponse(status_code=400, content={"success": False, "error": str(exc)})

        try:
            result = export_cookbook(request, cfg, renderer=renderer, publisher_factory=publisher_factory)
        except CookbookPdfError as exc:
            logger.error("PDF generation error: %s", exc)
            return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})
        except Exception as exc:
            logger.exception("Unexpected PDF generation error")
            return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})

        return JSONResponse(content={"success": True, "pdf_url": result.pdf_url})

    return app


def run_server(cfg: EffectiveConfig) -> None:
    import uvicorn

    logger.info("PDF service running on port %d", cfg.server.port)
    uvicorn.run(create_app(cfg), host=cfg.server.host, port=cfg.server.port, log_level=cfg.log_level.lower())


app = create_app()
