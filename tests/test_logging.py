from skedword_translator.logging import redact, redact_text


def test_redacts_key_query_parameter_in_urls():
    url = "https://generativelanguage.googleapis.com/v1beta/models/m:generateContent?key=AIzaSecret&alt=json"
    out = redact_text(url)
    assert "AIzaSecret" not in out
    assert "key=[REDACTED]" in out
    assert "alt=json" in out


def test_redacts_known_secrets_and_bearer_tokens():
    out = redact_text("token sekret123 and Bearer abcdef123456", secrets=["sekret123"])
    assert "sekret123" not in out
    assert "abcdef123456" not in out


def test_redacts_sensitive_keys_in_nested_event():
    event = {"event": "x", "key": "k", "payload": {"api_key": "k2", "text": "kat"}}
    out = redact(event)
    assert out["key"] == "[REDACTED]"
    assert out["payload"]["api_key"] == "[REDACTED]"
    assert out["payload"]["text"] == "kat"
    assert out["event"] == "x"
