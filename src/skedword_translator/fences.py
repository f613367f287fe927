from __future__ import annotations

import re

_OPENING_FENCE_RE = re.compile(r"```json\n?")
_CLOSING_FENCE_RE = re.compile(r"```\n?")


def strip_code_fences(text: str) -> str:
    """Remove every Markdown code fence marker from `text` and trim it."""
    out = _OPENING_FENCE_RE.sub("", text)
    out = _CLOSING_FENCE_RE.sub("", out)
    return out.strip()
