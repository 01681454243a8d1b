"""Tests for provider model discovery."""

import pytest
import requests

from llm_providers import (
    LISTERS,
    ProviderAPIError,
    fetch_models,
    get_lister,
    supports_model_listing,
)
from llm_providers.anthropic_models import KNOWN_MODELS
from llm_providers.openai_compatible import OpenAIModels


@pytest.mark.parametrize("provider_id", ["ollama", "replicate", "together", "unknown"])
def test_unsupported_provider_makes_no_request(provider_id, session):
    assert fetch_models(provider_id, "key", session=session) is None
    assert session.get.call_count == 0


def test_openai_filters_and_sorts(session, make_response):
    session.get.return_value = make_response(payload={
        "data": [
            {"id": "gpt-4o"},
            {"id": "text-embedding-3-small"},
            {"id": "gpt-3.5-turbo-instruct"},
            {"id": "GPT-4-Vision-preview"},
            {"id": "dall-e-3"},
            {"id": "gpt-4"},
            {"id": "gpt-3.5-turbo"},
        ]
    })

    models = fetch_models("openai", "sk-test", session=session)

    assert models == ["gpt-3.5-turbo", "gpt-4", "gpt-4o"]
    session.get.assert_called_once()
    args, kwargs = session.get.call_args
    assert args[0] == "https://api.openai.com/v1/models"
    assert kwargs["headers"] == {"Authorization": "Bearer sk-test"}
    assert kwargs["timeout"] is None


def test_dispatch_is_case_insensitive(session, make_response):
    session.get.return_value = make_response(payload={"data": [{"id": "grok-beta"}]})

    assert fetch_models("XAI", "key", session=session) == ["grok-beta"]


def test_timeout_is_passed_through(session, make_response):
    session.get.return_value = make_response(payload={"data": [{"id": "grok-beta"}]})

    fetch_models("xai", "key", session=session, timeout=5)

    assert session.get.call_args.kwargs["timeout"] == 5


@pytest.mark.parametrize(
    "provider_id, ids, expected",
    [
        ("groq", ["llama3-70b", "nomic-embedding", "gemma-7b-it"], ["gemma-7b-it", "llama3-70b"]),
        ("mistral", ["mistral-large", "mistral-embed", "codestral"], ["codestral", "mistral-large"]),
        ("fireworks", ["b-model", "nomic-embed-text", "a-model"], ["a-model", "b-model"]),
        ("perplexity", ["sonar-pro", "sonar"], ["sonar", "sonar-pro"]),
    ],
)
def test_openai_compatible_filters(provider_id, ids, expected, session, make_response):
    session.get.return_value = make_response(payload={"data": [{"id": i} for i in ids]})

    assert fetch_models(provider_id, "key", session=session) == expected


def test_google_uses_key_param_and_strips_prefix(session, make_response):
    session.get.return_value = make_response(payload={
        "models": [
            {"name": "models/gemini-1.5-pro"},
            {"name": "models/text-embedding-004"},
            {"name": "models/gemini-embedding-exp"},
            {"name": "models/gemini-1.5-flash"},
            {"name": "models/aqa"},
        ]
    })

    models = fetch_models("google", "g-key", session=session)

    assert models == ["gemini-1.5-flash", "gemini-1.5-pro"]
    assert session.get.call_args.kwargs["params"] == {"key": "g-key"}


def test_cohere_keeps_command_and_chat(session, make_response):
    session.get.return_value = make_response(payload={
        "models": [
            {"name": "command-r"},
            {"name": "embed-english-v3.0"},
            {"name": "c4ai-aya-chat"},
            {"name": "command-r-plus"},
            {"name": "rerank-v3"},
        ]
    })

    assert fetch_models("cohere", "key", session=session) == [
        "c4ai-aya-chat",
        "command-r",
        "command-r-plus",
    ]


def test_anthropic_returns_curated_list_without_request(session):
    models = fetch_models("anthropic", "sk-ant-abc", session=session)

    assert models == sorted(KNOWN_MODELS)
    assert session.get.call_count == 0


def test_anthropic_rejects_bad_key_shape(session):
    assert fetch_models("anthropic", "sk-abc", session=session) is None
    assert session.get.call_count == 0


@pytest.mark.parametrize("status", [401, 404, 500, 503])
def test_error_status_returns_none(status, session, make_response):
    session.get.return_value = make_response(status_code=status, reason="Error")

    assert fetch_models("openai", "key", session=session) is None


def test_lister_raises_provider_api_error(session, make_response):
    session.get.return_value = make_response(status_code=500, reason="Internal Server Error")

    with pytest.raises(ProviderAPIError) as exc_info:
        OpenAIModels("key", session=session).list_models()

    assert exc_info.value.status_code == 500
    assert exc_info.value.provider == "OpenAI"
    assert "500" in str(exc_info.value)


def test_network_error_returns_none(session):
    session.get.side_effect = requests.ConnectionError("unreachable")

    assert fetch_models("groq", "key", session=session) is None


@pytest.mark.parametrize(
    "payload",
    [
        {"models": []},
        {"data": None},
        {"data": [{"name": "no-id"}]},
        ["not", "an", "object"],
        ValueError("not json"),
    ],
)
def test_malformed_response_returns_none(payload, session, make_response):
    session.get.return_value = make_response(payload=payload)

    assert fetch_models("mistral", "key", session=session) is None


def test_empty_list_returns_none(session, make_response):
    session.get.return_value = make_response(payload={"data": [{"id": "text-embedding-ada-002"}]})

    assert fetch_models("openai", "key", session=session) is None


def test_lister_registry():
    assert supports_model_listing("OpenAI")
    assert not supports_model_listing("ollama")
    assert get_lister("ollama", "key") is None
    assert set(LISTERS) == {
        "openai", "groq", "anthropic", "google", "mistral",
        "cohere", "fireworks", "xai", "perplexity",
    }
