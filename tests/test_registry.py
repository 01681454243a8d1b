"""Tests for the provider registry."""

import pytest

from llm_providers import (
    FALLBACK_MODEL,
    PROVIDER_CHOICES,
    PROVIDERS,
    default_model,
    env_var_name,
    get_provider,
    is_known_provider,
    package_name,
    static_models,
)


@pytest.mark.parametrize("provider_id", sorted(PROVIDERS))
@pytest.mark.parametrize("lookup", [package_name, env_var_name, default_model])
def test_lookup_is_case_insensitive(provider_id, lookup):
    assert lookup(provider_id) == lookup(provider_id.upper()) == lookup(provider_id.lower())


@pytest.mark.parametrize("provider_id", ["unknown", "MyVendor", "acme-ai"])
def test_unknown_provider_is_synthesized(provider_id):
    assert package_name(provider_id) == "@ai-sdk/" + provider_id.lower()
    assert env_var_name(provider_id) == provider_id.upper() + "_API_KEY"
    assert default_model(provider_id) == FALLBACK_MODEL
    assert not is_known_provider(provider_id)


def test_known_values():
    assert package_name("openai") == "@ai-sdk/openai"
    assert package_name("Groq") == "@ai-sdk/groq"
    assert env_var_name("OPENAI") == "OPENAI_API_KEY"
    assert env_var_name("azure-openai") == "AZURE_OPENAI_API_KEY"
    assert default_model("anthropic") == "claude-3-5-sonnet-20241022"
    assert default_model("openai") == "gpt-4o-mini"


def test_aliases():
    assert package_name("azure") == "@ai-sdk/azure-openai"
    assert env_var_name("azure") == "AZURE_OPENAI_API_KEY"
    assert package_name("bedrock") == package_name("amazon-bedrock") == "@ai-sdk/amazon-bedrock"
    assert env_var_name("bedrock") == "AWS_ACCESS_KEY_ID"


def test_registry_is_immutable():
    with pytest.raises(TypeError):
        PROVIDERS["openai"] = get_provider("other")


def test_static_models():
    assert static_models("ollama")[0] == "llama3.2"
    assert "gpt-4o-mini" in static_models("OpenAI")
    # no curated list: just the default model
    assert static_models("upstash") == ["meta/llama-3-70b-instruct"]
    assert static_models("unknown") == [FALLBACK_MODEL]


def test_provider_choices_are_registered():
    assert len(PROVIDER_CHOICES) == 14
    for provider_id, _, _ in PROVIDER_CHOICES:
        assert is_known_provider(provider_id)
