from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Protocol

from .config import TranslatorConfig


class CredentialSupplier(Protocol):
    def get_credential(self) -> str | None: ...


@dataclass(frozen=True)
class StaticCredential:
    """A key the user typed in."""

    value: str | None

    def get_credential(self) -> str | None:
        return self.value


@dataclass(frozen=True)
class EnvironmentCredential:
    """A key read from the process environment at call time."""

    var: str = "GEMINI_API_KEY"

    def get_credential(self) -> str | None:
        return os.getenv(self.var)


@dataclass(frozen=True)
class ConfigCredential:
    """The key configured through `GEMINI_API_KEY` on `TranslatorConfig`."""

    cfg: TranslatorConfig

    def get_credential(self) -> str | None:
        return self.cfg.gemini_api_key
