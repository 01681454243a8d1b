"""Static provider registry.

Maps a provider identifier (any casing) to the AI SDK package the generated
project depends on, the environment variable holding its credential, and the
model a fresh project starts with. Unknown identifiers are not an error: a
descriptor is synthesized from the identifier so the package manager or the
provider API can reject it later.
"""

from dataclasses import dataclass
from types import MappingProxyType


PACKAGE_PREFIX = "@ai-sdk"
FALLBACK_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class ProviderDescriptor:
    """Package, env var and default model for one provider."""

    id: str
    package: str
    env_var: str
    default_model: str


def _descriptor(
    provider_id: str,
    default_model: str,
    package: str | None = None,
    env_var: str | None = None,
) -> ProviderDescriptor:
    return ProviderDescriptor(
        id=provider_id,
        package=package or f"{PACKAGE_PREFIX}/{provider_id}",
        env_var=env_var or f"{provider_id.upper().replace('-', '_')}_API_KEY",
        default_model=default_model,
    )


_BEDROCK_MODEL = "anthropic.claude-3-5-sonnet-20241022-v2:0"

PROVIDERS: MappingProxyType = MappingProxyType({
    d.id: d
    for d in (
        _descriptor("openai", "gpt-4o-mini"),
        _descriptor("groq", "llama-3.1-70b-versatile"),
        _descriptor("anthropic", "claude-3-5-sonnet-20241022"),
        _descriptor("google", "gemini-1.5-flash"),
        _descriptor("mistral", "mistral-small-latest"),
        _descriptor("cohere", "command-r"),
        _descriptor("vercel", "claude-3-5-sonnet-20241022"),
        _descriptor("azure-openai", "gpt-4o-mini"),
        _descriptor("azure-anthropic", "claude-3-5-sonnet-20241022"),
        _descriptor(
            "azure",
            "gpt-4o-mini",
            package=f"{PACKAGE_PREFIX}/azure-openai",
            env_var="AZURE_OPENAI_API_KEY",
        ),
        _descriptor("fireworks", "llama-v3-70b-instruct"),
        _descriptor("xai", "grok-beta"),
        _descriptor("ollama", "llama3.2"),
        _descriptor("ai21", "j2-ultra"),
        _descriptor("nvidia", "meta/llama-3-70b-instruct"),
        _descriptor(
            "bedrock",
            _BEDROCK_MODEL,
            package=f"{PACKAGE_PREFIX}/amazon-bedrock",
            env_var="AWS_ACCESS_KEY_ID",
        ),
        _descriptor("amazon-bedrock", _BEDROCK_MODEL, env_var="AWS_ACCESS_KEY_ID"),
        _descriptor("cloudflare", "llama-3-70b-instruct"),
        _descriptor("elevenlabs", "eleven_turbo_v2_5"),
        _descriptor("lepton", "llama-3-70b-instruct"),
        _descriptor("perplexity", "llama-3.1-sonar-large-128k-online"),
        _descriptor("replicate", "meta/llama-3-70b-instruct"),
        _descriptor("together", "meta/llama-3-70b-instruct"),
        _descriptor("upstash", "meta/llama-3-70b-instruct"),
    )
})


# Curated model lists offered when no live list can be fetched
STATIC_MODELS: MappingProxyType = MappingProxyType({
    "openai": ("gpt-4o", "gpt-4o-mini", "gpt-4-turbo", "gpt-4", "gpt-3.5-turbo"),
    "groq": (
        "llama-3.1-70b-versatile",
        "llama-3.1-8b-instant",
        "mixtral-8x7b-32768",
        "gemma-7b-it",
    ),
    "anthropic": (
        "claude-3-5-sonnet-20241022",
        "claude-3-opus-20240229",
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
    ),
    "google": ("gemini-1.5-pro", "gemini-1.5-flash", "gemini-pro", "gemini-pro-vision"),
    "mistral": (
        "mistral-large-latest",
        "mistral-medium-latest",
        "mistral-small-latest",
        "pixtral-12b-2409",
    ),
    "cohere": ("command-r-plus", "command-r", "command", "command-light"),
    "vercel": ("claude-3-5-sonnet-20241022",),
    "azure-openai": ("gpt-4o", "gpt-4-turbo", "gpt-4", "gpt-3.5-turbo"),
    "fireworks": (
        "llama-v3-70b-instruct",
        "llama-v3-8b-instruct",
        "llama-v3.1-70b-instruct",
        "llama-v3.1-8b-instruct",
    ),
    "xai": ("grok-beta", "grok-2-vision-1212", "grok-2-1212"),
    "ollama": ("llama3.2", "llama3.1", "llama2", "mistral", "codellama", "phi3"),
    "perplexity": (
        "llama-3.1-sonar-large-128k-online",
        "llama-3.1-sonar-small-128k-online",
        "llama-3.1-sonar-huge-128k-online",
    ),
    "replicate": (
        "meta/llama-3-70b-instruct",
        "meta/llama-3-8b-instruct",
        "meta/llama-3.1-70b-instruct",
        "meta/llama-3.1-8b-instruct",
    ),
    "together": (
        "meta/llama-3-70b-instruct",
        "meta/llama-3-8b-instruct",
        "meta/llama-3.1-70b-instruct",
        "meta/llama-3.1-8b-instruct",
    ),
})


# (id, title, description) in menu order
PROVIDER_CHOICES: tuple[tuple[str, str, str], ...] = (
    ("openai", "OpenAI", "GPT-3.5, GPT-4, and more"),
    ("groq", "Groq", "Fast inference with Llama models"),
    ("anthropic", "Anthropic", "Claude models"),
    ("google", "Google", "Gemini models"),
    ("mistral", "Mistral", "Mistral AI models"),
    ("cohere", "Cohere", "Command models"),
    ("vercel", "Vercel AI", "Vercel AI SDK"),
    ("azure-openai", "Azure OpenAI", "Azure-hosted OpenAI"),
    ("fireworks", "Fireworks", "Fireworks AI"),
    ("xai", "xAI", "Grok models"),
    ("ollama", "Ollama", "Local models"),
    ("perplexity", "Perplexity", "Perplexity AI"),
    ("replicate", "Replicate", "Replicate models"),
    ("together", "Together AI", "Together AI models"),
)


def get_provider(provider_id: str) -> ProviderDescriptor:
    """Look up a provider, synthesizing a descriptor for unknown ids.

    Args:
        provider_id: Provider identifier in any casing

    Returns:
        The registered descriptor, or one derived from the identifier.
    """
    key = provider_id.lower()
    descriptor = PROVIDERS.get(key)
    if descriptor is not None:
        return descriptor
    return ProviderDescriptor(
        id=key,
        package=f"{PACKAGE_PREFIX}/{key}",
        env_var=f"{provider_id.upper()}_API_KEY",
        default_model=FALLBACK_MODEL,
    )


def package_name(provider_id: str) -> str:
    """Get the AI SDK package name for a provider."""
    return get_provider(provider_id).package


def env_var_name(provider_id: str) -> str:
    """Get the credential environment variable for a provider."""
    return get_provider(provider_id).env_var


def default_model(provider_id: str) -> str:
    """Get the default model for a provider."""
    return get_provider(provider_id).default_model


def static_models(provider_id: str) -> list[str]:
    """Get the curated model list for a provider.

    Providers without a curated list get their default model only.
    """
    models = STATIC_MODELS.get(provider_id.lower())
    if models:
        return list(models)
    return [default_model(provider_id)]


def is_known_provider(provider_id: str) -> bool:
    """Check if a provider id is in the registry."""
    return provider_id.lower() in PROVIDERS
