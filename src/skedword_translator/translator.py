from __future__ import annotations

from collections.abc import Callable

import structlog

from .client import CompletionClient
from .contracts import CompletionOutcome
from .credentials import CredentialSupplier
from .prompt import build_prompt

log = structlog.get_logger()

BusyListener = Callable[[bool], None]


class Translator:
    """
    Entry point for a presentation layer.

    `translate` never raises for upstream or model problems: it returns either a
    `DecodedResult` or a `ClientFailure` whose `message` is ready for display.
    `busy` is true exactly while a call is in flight. Concurrent calls are allowed;
    callers that want one-at-a-time should check `busy` first.
    """

    def __init__(self, client: CompletionClient | None = None, credentials: CredentialSupplier | None = None):
        self.client = client or CompletionClient()
        self.credentials = credentials
        self._inflight = 0
        self._listeners: list[BusyListener] = []

    @property
    def busy(self) -> bool:
        return self._inflight > 0

    def subscribe(self, listener: BusyListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        busy = self.busy
        for listener in list(self._listeners):
            listener(busy)

    def _resolve_credential(self, credential: str | None) -> str | None:
        if credential is not None:
            return credential
        if self.credentials is None:
            return None
        return self.credentials.get_credential()

    async def translate(self, input_text: str, credential: str | None = None) -> CompletionOutcome | None:
        if not input_text or not input_text.strip():
            log.debug("translate_skipped_blank_input")
            return None

        prompt = build_prompt(input_text)
        key = self._resolve_credential(credential)

        self._inflight += 1
        if self._inflight == 1:
            self._notify()
        try:
            return await self.client.complete(prompt, key)
        finally:
            self._inflight -= 1
            if self._inflight == 0:
                self._notify()

    async def close(self) -> None:
        await self.client.close()
