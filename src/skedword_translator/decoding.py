from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .contracts import DecodedResult
from .errors import FormatError
from .fences import strip_code_fences


class TranslationPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    translation: str = Field(min_length=1)
    # Any length is accepted even though the prompt asks for 2-3 tips.
    tips: list[Any]


def _tip_text(tip: Any) -> str:
    if isinstance(tip, str):
        return tip
    return json.dumps(tip, ensure_ascii=False)


def decode_completion_text(text: str) -> DecodedResult:
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except (ValueError, RecursionError) as e:
        raise FormatError("Completion text is not valid JSON.") from e

    if not isinstance(data, dict):
        raise FormatError("Completion JSON must be an object.")

    try:
        payload = TranslationPayload.model_validate(data)
    except ValidationError as e:
        raise FormatError("Response missing required fields") from e

    return DecodedResult(translation=payload.translation, tips=tuple(_tip_text(t) for t in payload.tips))
