import asyncio

import pytest

from skedword_translator.contracts import ClientFailure, DecodedResult, FailureKind
from skedword_translator.credentials import StaticCredential
from skedword_translator.translator import Translator


class FakeClient:
    def __init__(self, outcome=None):
        self.calls = []
        self.outcome = outcome or DecodedResult(translation="cat", tips=("nice try",))
        self.gate: asyncio.Event | None = None

    async def complete(self, prompt_text, credential):
        self.calls.append((prompt_text, credential))
        if self.gate is not None:
            await self.gate.wait()
        return self.outcome

    async def close(self):
        return None


@pytest.mark.asyncio
async def test_translate_builds_prompt_and_returns_result():
    client = FakeClient()
    t = Translator(client=client)
    out = await t.translate("kat", "k")
    assert out == DecodedResult(translation="cat", tips=("nice try",))
    prompt, credential = client.calls[0]
    assert '"kat"' in prompt
    assert credential == "k"


@pytest.mark.asyncio
async def test_translate_blank_input_is_a_no_op():
    client = FakeClient()
    t = Translator(client=client)
    assert await t.translate("   ", "k") is None
    assert client.calls == []


@pytest.mark.asyncio
async def test_explicit_credential_wins_over_supplier():
    client = FakeClient()
    t = Translator(client=client, credentials=StaticCredential("from-supplier"))
    await t.translate("kat", "explicit")
    await t.translate("kat")
    assert [c for _, c in client.calls] == ["explicit", "from-supplier"]


@pytest.mark.asyncio
async def test_failure_outcome_is_returned_not_raised():
    failure = ClientFailure(kind=FailureKind.MISSING_CREDENTIAL, message="Please enter your API key")
    t = Translator(client=FakeClient(outcome=failure))
    out = await t.translate("kat")
    assert out is failure


@pytest.mark.asyncio
async def test_busy_flag_tracks_in_flight_call():
    client = FakeClient()
    client.gate = asyncio.Event()
    t = Translator(client=client)
    events = []
    t.subscribe(events.append)

    assert t.busy is False
    task = asyncio.create_task(t.translate("kat", "k"))
    await asyncio.sleep(0)
    assert t.busy is True
    client.gate.set()
    await task
    assert t.busy is False
    assert events == [True, False]


@pytest.mark.asyncio
async def test_busy_flag_stays_true_until_all_concurrent_calls_finish():
    client = FakeClient()
    client.gate = asyncio.Event()
    t = Translator(client=client)
    events = []
    t.subscribe(events.append)

    tasks = [asyncio.create_task(t.translate("kat", "k")) for _ in range(3)]
    await asyncio.sleep(0)
    assert t.busy is True
    client.gate.set()
    await asyncio.gather(*tasks)
    assert t.busy is False
    assert events == [True, False]


@pytest.mark.asyncio
async def test_busy_flag_resets_on_cancellation():
    client = FakeClient()
    client.gate = asyncio.Event()
    t = Translator(client=client)

    task = asyncio.create_task(t.translate("kat", "k"))
    await asyncio.sleep(0)
    assert t.busy is True
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert t.busy is False


@pytest.mark.asyncio
async def test_unsubscribe_stops_notifications():
    client = FakeClient()
    t = Translator(client=client)
    events = []
    unsubscribe = t.subscribe(events.append)
    unsubscribe()
    await t.translate("kat", "k")
    assert events == []
