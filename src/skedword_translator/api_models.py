from __future__ import annotations

from pydantic import BaseModel, field_validator

from .contracts import DecodedResult


class TranslateRequest(BaseModel):
    text: str
    api_key: str | None = None

    @field_validator("text")
    @classmethod
    def _validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must be non-empty.")
        return v


class TranslateResponse(BaseModel):
    translation: str
    tips: list[str]

    @classmethod
    def from_result(cls, result: DecodedResult) -> "TranslateResponse":
        return cls(translation=result.translation, tips=list(result.tips))


class ErrorBody(BaseModel):
    kind: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody


def make_error_response(*, kind: str, message: str, code: str | None = None) -> ErrorResponse:
    return ErrorResponse(error=ErrorBody(kind=kind, message=message, code=code))
