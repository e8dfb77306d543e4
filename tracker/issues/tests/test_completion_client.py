import json

import pytest
import requests
from unittest.mock import Mock

from issues.clients.completion_client import CompletionClient
from issues.exceptions import CompletionNotConfigured, CompletionServiceError

MESSAGES = [{"role": "user", "content": "hi"}]


def _response(status_code=200, json_body=None, reason="OK"):
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp._content = b"" if json_body is None else json.dumps(json_body).encode()
    return resp


def _client(session, **kwargs):
    kwargs.setdefault("api_key", "sk-test")
    return CompletionClient(session=session, base_url="https://llm.example.com/v1/", **kwargs)


def test_complete_posts_chat_request():
    session = Mock()
    session.post.return_value = _response(json_body={"choices": [{"message": {"content": "Summary!"}}]})
    client = _client(session, model="m1", max_tokens=50, temperature=0.2, timeout=7)

    assert client.complete(MESSAGES) == "Summary!"

    args, kwargs = session.post.call_args
    assert args[0] == "https://llm.example.com/v1/chat/completions"
    assert kwargs["json"] == {"model": "m1", "messages": MESSAGES, "max_tokens": 50, "temperature": 0.2}
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["timeout"] == 7


def test_complete_without_choices_returns_none():
    session = Mock()
    session.post.return_value = _response(json_body={"choices": []})

    assert _client(session).complete(MESSAGES) is None


def test_complete_requires_api_key():
    session = Mock()

    with pytest.raises(CompletionNotConfigured):
        _client(session, api_key="").complete(MESSAGES)

    session.post.assert_not_called()


def test_http_error_carries_upstream_message():
    session = Mock()
    session.post.return_value = _response(
        status_code=401,
        reason="Unauthorized",
        json_body={"error": {"message": "Incorrect API key provided"}},
    )

    with pytest.raises(CompletionServiceError) as excinfo:
        _client(session).complete(MESSAGES)

    assert excinfo.value.error == "401: Incorrect API key provided"


def test_network_error_is_wrapped():
    session = Mock()
    session.post.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(CompletionServiceError) as excinfo:
        _client(session).complete(MESSAGES)

    assert "connection refused" in excinfo.value.error


def test_unexpected_body_is_rejected():
    session = Mock()
    session.post.return_value = _response(json_body=["not", "a", "dict"])

    with pytest.raises(CompletionServiceError):
        _client(session).complete(MESSAGES)


def test_from_settings(settings):
    settings.OPENAI_API_KEY = "sk-from-settings"
    settings.SUMMARY_MODEL = "gpt-test"
    settings.SUMMARY_MAX_TOKENS = 200
    settings.SUMMARY_TEMPERATURE = 0.7

    client = CompletionClient.from_settings()

    assert client.is_configured
    assert client.model == "gpt-test"
    assert client.max_tokens == 200
    assert client.temperature == 0.7


@pytest.mark.parametrize("json_body", [
    {"choices": ["oops"]},
    {"choices": [{"message": "plain text"}]},
    {"choices": {"message": {"content": "x"}}},
])
def test_malformed_choices_are_rejected(json_body):
    session = Mock()
    session.post.return_value = _response(json_body=json_body)

    with pytest.raises(CompletionServiceError):
        _client(session).complete(MESSAGES)


def test_http_error_with_non_object_body():
    session = Mock()
    session.post.return_value = _response(status_code=502, reason="Bad Gateway", json_body=["bad gateway"])

    with pytest.raises(CompletionServiceError) as excinfo:
        _client(session).complete(MESSAGES)

    assert excinfo.value.error == "502: ['bad gateway']"


def test_http_error_with_string_body():
    session = Mock()
    session.post.return_value = _response(status_code=503, reason="Service Unavailable", json_body="overloaded")

    with pytest.raises(CompletionServiceError) as excinfo:
        _client(session).complete(MESSAGES)

    assert excinfo.value.error == "503: overloaded"


def test_http_error_without_body_uses_reason():
    session = Mock()
    session.post.return_value = _response(status_code=504, reason="Gateway Timeout")

    with pytest.raises(CompletionServiceError) as excinfo:
        _client(session).complete(MESSAGES)

    assert excinfo.value.error == "504: Gateway Timeout"
