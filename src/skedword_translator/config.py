from __future__ import annotations

import os

from pydantic import BaseModel, Field

GEMINI_DEV_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash-exp"


class TranslatorConfig(BaseModel):
    # Upstream
    gemini_api_key: str | None = Field(default_factory=lambda: os.getenv("GEMINI_API_KEY"))
    gemini_base_url: str = Field(default_factory=lambda: os.getenv("GEMINI_BASE_URL", GEMINI_DEV_API_BASE))
    gemini_model: str = Field(default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL))
    upstream_timeout_seconds: float = Field(
        default_factory=lambda: float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "60"))
    )

    # Observability
    enable_metrics: bool = Field(
        default_factory=lambda: os.getenv("ENABLE_METRICS", "false").lower() == "true"
    )
    metrics_bind: str = Field(default_factory=lambda: os.getenv("METRICS_BIND", "127.0.0.1"))
    metrics_port: int = Field(default_factory=lambda: int(os.getenv("METRICS_PORT", "9109")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = Field(default_factory=lambda: os.getenv("LOG_FORMAT", "json"))

    # Server
    server_auth_token: str | None = Field(default_factory=lambda: os.getenv("SERVER_AUTH_TOKEN"))
    enable_api_docs: bool = Field(
        default_factory=lambda: os.getenv("ENABLE_API_DOCS", "false").lower() == "true"
    )
    max_request_body_bytes: int = Field(
        default_factory=lambda: int(os.getenv("MAX_REQUEST_BODY_BYTES", str(64 * 1024)))
    )
    max_input_chars: int = Field(default_factory=lambda: int(os.getenv("MAX_INPUT_CHARS", "5000")))

    def secrets(self) -> list[str]:
        return [s for s in (self.gemini_api_key, self.server_auth_token) if s]
