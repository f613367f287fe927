from .client import CompletionClient
from .config import TranslatorConfig
from .contracts import ClientFailure, CompletionOutcome, DecodedResult, FailureKind
from .credentials import ConfigCredential, CredentialSupplier, EnvironmentCredential, StaticCredential
from .gemini_session import GeminiSession
from .prompt import build_prompt
from .translator import Translator

__all__ = [
    "ClientFailure",
    "CompletionClient",
    "CompletionOutcome",
    "ConfigCredential",
    "CredentialSupplier",
    "DecodedResult",
    "EnvironmentCredential",
    "FailureKind",
    "GeminiSession",
    "StaticCredential",
    "Translator",
    "TranslatorConfig",
    "build_prompt",
]
