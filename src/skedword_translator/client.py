from __future__ import annotations

import time

import structlog

from .config import TranslatorConfig
from .contracts import ClientFailure, CompletionOutcome, CompletionRequest, FailureKind, RawReply
from .decoding import decode_completion_text
from .errors import FormatError, MalformedEnvelopeError, MissingCredentialError, TransportError
from .gemini_session import GeminiSession, extract_completion_text
from .metrics import translation_request_latency_seconds, translation_requests_total

log = structlog.get_logger()

MISSING_CREDENTIAL_MESSAGE = "Please enter your API key"
GENERIC_FAILURE_MESSAGE = "Oops! Something went wrong. Let's try again! 🎈"
FORMAT_FAILURE_MESSAGE = "Oops! The response format was unexpected. Let's try again! 🎈"


class CompletionClient:
    """
    Sends a prompt to Gemini and turns the reply into a `DecodedResult`.

    Every failure comes back as a `ClientFailure` value; `complete` only raises
    on cancellation or programmer error (a blank prompt).
    """

    def __init__(self, session: GeminiSession | None = None, cfg: TranslatorConfig | None = None):
        cfg = cfg or TranslatorConfig()
        self.session = session or GeminiSession(
            base_url=cfg.gemini_base_url,
            model=cfg.gemini_model,
            timeout_seconds=cfg.upstream_timeout_seconds,
        )

    async def close(self) -> None:
        await self.session.close()

    async def complete(self, prompt_text: str, credential: str | None) -> CompletionOutcome:
        start = time.monotonic()
        reply: RawReply | None = None
        text = ""
        try:
            key = _require_credential(credential)
            request = CompletionRequest(prompt_text=prompt_text, credential=key)
            reply = await self.session.send(request)
            text = extract_completion_text(reply)
            result = decode_completion_text(text)
        except MissingCredentialError:
            log.info("translation_missing_credential")
            return self._fail(FailureKind.MISSING_CREDENTIAL, MISSING_CREDENTIAL_MESSAGE)
        except TransportError as e:
            log.warning("translation_transport_failure", status_code=e.http_status, error=str(e))
            return self._fail(
                FailureKind.TRANSPORT_FAILURE,
                e.service_message or GENERIC_FAILURE_MESSAGE,
                detail=str(e),
                http_status=e.http_status,
            )
        except MalformedEnvelopeError as e:
            log.error("translation_malformed_envelope", error=str(e))
            log.debug("translation_malformed_envelope_body", body=reply.body_text[:2000] if reply else None)
            return self._fail(
                FailureKind.MALFORMED_ENVELOPE,
                GENERIC_FAILURE_MESSAGE,
                detail=str(e),
                http_status=reply.http_status if reply else None,
            )
        except FormatError as e:
            log.warning("translation_format_failure", error=str(e), cause=repr(e.__cause__))
            log.debug("translation_format_failure_text", text=text[:2000])
            return self._fail(FailureKind.FORMAT_FAILURE, FORMAT_FAILURE_MESSAGE, detail=str(e))
        finally:
            translation_request_latency_seconds.observe(max(0.0, time.monotonic() - start))

        translation_requests_total.labels(outcome="success").inc()
        log.debug("translation_ok", tips=len(result.tips))
        return result

    def _fail(
        self,
        kind: FailureKind,
        message: str,
        *,
        detail: str | None = None,
        http_status: int | None = None,
    ) -> ClientFailure:
        translation_requests_total.labels(outcome=kind.value).inc()
        return ClientFailure(kind=kind, message=message, detail=detail, http_status=http_status)


def _require_credential(credential: str | None) -> str:
    if not credential or not credential.strip():
        raise MissingCredentialError("No API key supplied.")
    return credential.strip()
