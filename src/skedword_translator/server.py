from __future__ import annotations

import os
import time
from contextlib import asynccontextmanager

import structlog

from .api_models import TranslateRequest, TranslateResponse, make_error_response
from .client import CompletionClient
from .config import TranslatorConfig
from .contracts import ClientFailure, FailureKind
from .credentials import ConfigCredential
from .http_security import install_middlewares
from .logging import configure_logging
from .metrics import maybe_start_metrics, server_requests_total
from .translator import Translator

log = structlog.get_logger()

_FAILURE_STATUS = {
    FailureKind.MISSING_CREDENTIAL: 401,
    FailureKind.TRANSPORT_FAILURE: 502,
    FailureKind.MALFORMED_ENVELOPE: 502,
    FailureKind.FORMAT_FAILURE: 422,
}


def create_app(cfg: TranslatorConfig | None = None, translator: Translator | None = None):
    try:
        from fastapi import FastAPI
        from fastapi.exceptions import RequestValidationError
        from fastapi.responses import JSONResponse
    except ImportError as e:  # pragma: no cover
        raise RuntimeError('Install the "server" extra: pip install -e ".[server]"') from e

    cfg = cfg or TranslatorConfig()
    configure_logging(level=cfg.log_level, fmt=cfg.log_format, secrets=cfg.secrets())
    translator = translator or Translator(CompletionClient(cfg=cfg), credentials=ConfigCredential(cfg))

    def _request_id(request) -> str | None:
        return getattr(getattr(request, "state", None), "request_id", None)

    def _error(path: str, status_code: int, kind: str, message: str, request_id: str | None):
        server_requests_total.labels(path=path, status=str(status_code)).inc()
        return JSONResponse(
            status_code=status_code,
            content=make_error_response(kind=kind, message=message, code=request_id).model_dump(),
        )

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        maybe_start_metrics(enable=cfg.enable_metrics, bind=cfg.metrics_bind, port=cfg.metrics_port)
        try:
            yield
        finally:
            await translator.close()

    app = FastAPI(
        title="skedword-translator",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if cfg.enable_api_docs else None,
        redoc_url="/redoc" if cfg.enable_api_docs else None,
        openapi_url="/openapi.json" if cfg.enable_api_docs else None,
    )
    install_middlewares(app, cfg=cfg)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request, exc: RequestValidationError):
        return _error(
            request.url.path, 400, "invalid_request", "Request must include non-empty text.", _request_id(request)
        )

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/v1/translate", response_model=TranslateResponse)
    async def translate(req: TranslateRequest):
        started_at = time.monotonic()
        request_id = structlog.contextvars.get_contextvars().get("request_id")
        if len(req.text) > cfg.max_input_chars:
            return _error("/v1/translate", 400, "invalid_request", "Text is too long.", request_id)

        outcome = await translator.translate(req.text, req.api_key)
        if outcome is None:
            return _error(
                "/v1/translate", 400, "invalid_request", "Request must include non-empty text.", request_id
            )
        if isinstance(outcome, ClientFailure):
            return _error(
                "/v1/translate", _FAILURE_STATUS[outcome.kind], outcome.kind.value, outcome.message, request_id
            )

        server_requests_total.labels(path="/v1/translate", status="200").inc()
        log.info("translate_served", latency_seconds=round(time.monotonic() - started_at, 3))
        return TranslateResponse.from_result(outcome)

    return app


def main() -> None:  # pragma: no cover
    try:
        import uvicorn
    except ImportError as e:
        raise RuntimeError('Install the "server" extra: pip install -e ".[server]"') from e

    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("skedword_translator.server:create_app", host=host, port=port, factory=True)


if __name__ == "__main__":  # pragma: no cover
    main()
