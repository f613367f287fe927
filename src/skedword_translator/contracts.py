from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class FailureKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_ENVELOPE = "malformed_envelope"
    FORMAT_FAILURE = "format_failure"


@dataclass(frozen=True)
class CompletionRequest:
    prompt_text: str
    credential: str

    def __post_init__(self) -> None:
        if not self.prompt_text.strip():
            raise ValueError("prompt_text must not be blank.")


@dataclass(frozen=True)
class RawReply:
    success: bool
    http_status: int
    body_text: str
    service_error_message: str | None = None


@dataclass(frozen=True)
class DecodedResult:
    translation: str
    tips: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClientFailure:
    kind: FailureKind
    message: str
    detail: str | None = None
    http_status: int | None = None


CompletionOutcome: TypeAlias = DecodedResult | ClientFailure
