from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from .config import DEFAULT_MODEL, GEMINI_DEV_API_BASE
from .contracts import CompletionRequest, RawReply
from .errors import MalformedEnvelopeError, TransportError
from .logging import redact_text
from .metrics import upstream_requests_total

log = structlog.get_logger()


def build_request_body(prompt: str) -> dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}], "role": "user"}]}


def _service_error_message(body_text: str) -> str | None:
    try:
        data = json.loads(body_text)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    if isinstance(message, str) and message:
        return message
    return None


class GeminiSession:
    """
    Single-shot wrapper around the Gemini Developer API `generateContent` call.

    One `send` is exactly one HTTP round-trip: no retries, no circuit breaker.
    Cancelling the awaiting task cancels the in-flight request.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        base_url: str = GEMINI_DEV_API_BASE,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 60,
    ):
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)
        self._base_url = base_url.rstrip("/")
        self.model = model

    async def close(self) -> None:
        await self._client.aclose()

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/models/{self.model}:generateContent"

    async def send(self, request: CompletionRequest) -> RawReply:
        try:
            resp = await self._client.post(
                self.endpoint,
                params={"key": request.credential},
                json=build_request_body(request.prompt_text),
            )
        except httpx.TimeoutException as e:
            upstream_requests_total.labels(status="timeout").inc()
            log.warning("gemini_transport_timeout")
            raise TransportError("Upstream request timed out.") from e
        except httpx.HTTPError as e:
            upstream_requests_total.labels(status="error").inc()
            # httpx error strings can carry the request URL, which carries the key.
            log.warning("gemini_transport_error", error=redact_text(str(e), secrets=[request.credential]))
            raise TransportError() from e

        upstream_requests_total.labels(status=str(resp.status_code)).inc()
        success = resp.is_success
        body_text = resp.text
        reply = RawReply(
            success=success,
            http_status=resp.status_code,
            body_text=body_text,
            service_error_message=None if success else _service_error_message(body_text),
        )
        log.debug("gemini_reply", status_code=resp.status_code, body=body_text[:2000])
        return reply


def extract_completion_text(reply: RawReply) -> str:
    """Return `candidates[0].content.parts[0].text` or raise."""
    if not reply.success:
        raise TransportError(http_status=reply.http_status, service_message=reply.service_error_message)

    try:
        data = json.loads(reply.body_text)
    except (ValueError, RecursionError) as e:
        raise MalformedEnvelopeError("Upstream response is not JSON.") from e
    if not isinstance(data, dict):
        raise MalformedEnvelopeError("Upstream response is not a JSON object.")

    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        raise MalformedEnvelopeError("Missing candidates in upstream response.")

    content = candidates[0].get("content")
    if not isinstance(content, dict):
        raise MalformedEnvelopeError("Missing content in upstream response.")

    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        raise MalformedEnvelopeError("Missing parts in upstream response.")

    text = parts[0].get("text")
    if not isinstance(text, str) or not text:
        raise MalformedEnvelopeError("Missing text in upstream response.")

    return text
