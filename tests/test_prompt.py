from skedword_translator.prompt import build_prompt


def test_prompt_embeds_input_verbatim_in_quotes():
    out = build_prompt("i wnt to go hom")
    assert '"i wnt to go hom"' in out


def test_prompt_mentions_both_output_fields_and_example():
    out = build_prompt("kat")
    assert '"translation"' in out
    assert '"tips"' in out
    assert "2-3 encouraging tips" in out
    assert "how to make money really quick" in out


def test_prompt_keeps_braces_quotes_and_newlines():
    text = 'he said "hi" {x}\nand {0} left'
    out = build_prompt(text)
    assert text in out


def test_prompt_is_deterministic():
    assert build_prompt("sed") == build_prompt("sed")
