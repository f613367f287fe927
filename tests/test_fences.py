from skedword_translator.fences import strip_code_fences


def test_strips_json_tagged_fence():
    text = '```json\n{"translation":"cat","tips":[]}\n```'
    assert strip_code_fences(text) == '{"translation":"cat","tips":[]}'


def test_strips_untagged_fence():
    assert strip_code_fences('```\n{"a": 1}\n```\n') == '{"a": 1}'


def test_no_fence_only_trims():
    assert strip_code_fences('  {"a": 1}\n') == '{"a": 1}'


def test_repeated_fences_are_all_removed():
    text = '```json\n```json\n{"a": 1}\n```\n```'
    assert strip_code_fences(text) == '{"a": 1}'


def test_stripping_is_idempotent():
    once = strip_code_fences('```json\n{"a": 1}\n```')
    assert strip_code_fences(once) == once
