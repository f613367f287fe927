import json

import pytest

from skedword_translator.contracts import DecodedResult
from skedword_translator.decoding import decode_completion_text
from skedword_translator.errors import FormatError


def test_decodes_plain_json():
    out = decode_completion_text('{"translation":"cat","tips":["nice try"]}')
    assert out == DecodedResult(translation="cat", tips=("nice try",))


def test_decodes_fenced_json_with_empty_tips():
    out = decode_completion_text('```json\n{"translation":"cat","tips":[]}\n```')
    assert out == DecodedResult(translation="cat", tips=())


def test_any_tip_count_is_accepted():
    tips = [f"tip {i}" for i in range(7)]
    out = decode_completion_text(json.dumps({"translation": "dog", "tips": tips}))
    assert len(out.tips) == 7


def test_extra_fields_are_ignored():
    out = decode_completion_text('{"translation":"cat","tips":["a"],"score":3}')
    assert out.translation == "cat"


@pytest.mark.parametrize(
    "text",
    [
        "not json at all",
        '{"tips":["a"]}',
        '{"translation":"","tips":[]}',
        '{"translation":"cat"}',
        '{"translation":"cat","tips":"a"}',
        '["cat", ["a"]]',
    ],
)
def test_rejects_unparseable_or_wrong_shape(text):
    with pytest.raises(FormatError):
        decode_completion_text(text)


def test_deeply_nested_text_is_format_error():
    with pytest.raises(FormatError):
        decode_completion_text("[" * 200000)


def test_non_string_tips_are_kept_as_text():
    out = decode_completion_text('{"translation":"cat","tips":[{"t":"x"},3,"ok"]}')
    assert out == DecodedResult(translation="cat", tips=('{"t": "x"}', "3", "ok"))
