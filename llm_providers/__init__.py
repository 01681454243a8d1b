"""Provider registry and model discovery.

The registry answers "which package, env var and default model does this
provider use" without any I/O. ``fetch_models`` asks a provider's API which
models the given credential can use; it never raises, returning None when the
provider has no listing adapter or the request fails in any way, so callers
always fall back to the static list from ``static_models``.
"""

import logging

import requests

from .anthropic_models import AnthropicModels
from .base import ModelLister, ProviderAPIError
from .cohere_models import CohereModels
from .google_models import GoogleModels
from .openai_compatible import (
    FireworksModels,
    GroqModels,
    MistralModels,
    OpenAIModels,
    PerplexityModels,
    XAIModels,
)
from .registry import (
    FALLBACK_MODEL,
    PACKAGE_PREFIX,
    PROVIDER_CHOICES,
    PROVIDERS,
    ProviderDescriptor,
    default_model,
    env_var_name,
    get_provider,
    is_known_provider,
    package_name,
    static_models,
)

logger = logging.getLogger(__name__)

__all__ = [
    # Registry
    "FALLBACK_MODEL",
    "PACKAGE_PREFIX",
    "PROVIDER_CHOICES",
    "PROVIDERS",
    "ProviderDescriptor",
    "default_model",
    "env_var_name",
    "get_provider",
    "is_known_provider",
    "package_name",
    "static_models",
    # Model discovery
    "LISTERS",
    "ModelLister",
    "ProviderAPIError",
    "fetch_models",
    "get_lister",
    "supports_model_listing",
]


# Providers without an entry (ollama, replicate, together, ...) have no
# simple listing API and are skipped.
LISTERS: dict[str, type[ModelLister]] = {
    "openai": OpenAIModels,
    "groq": GroqModels,
    "anthropic": AnthropicModels,
    "google": GoogleModels,
    "mistral": MistralModels,
    "cohere": CohereModels,
    "fireworks": FireworksModels,
    "xai": XAIModels,
    "perplexity": PerplexityModels,
}


def supports_model_listing(provider_id: str) -> bool:
    """Check if a provider has a model-listing adapter."""
    return provider_id.lower() in LISTERS


def get_lister(
    provider_id: str,
    api_key: str,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> ModelLister | None:
    """Factory function to get the model lister for a provider.

    Returns:
        ModelLister instance, or None if the provider has no adapter.
    """
    cls = LISTERS.get(provider_id.lower())
    if cls is None:
        return None
    return cls(api_key, session=session, timeout=timeout)


def fetch_models(
    provider_id: str,
    api_key: str,
    *,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> list[str] | None:
    """Fetch the models available to a credential.

    Args:
        provider_id: Provider identifier in any casing
        api_key: Provider credential
        session: Optional HTTP session to issue the request with
        timeout: Request timeout in seconds (default: wait indefinitely)

    Returns:
        Sorted, filtered model identifiers, or None when the provider has
        no listing adapter, the request or response failed, or the
        provider reported no models.
    """
    lister = get_lister(provider_id, api_key, session=session, timeout=timeout)
    if lister is None:
        logger.debug("No model listing available for provider %s", provider_id)
        return None

    try:
        models = lister.list_models()
    except ProviderAPIError as e:
        logger.warning("Failed to fetch models: %s", e)
        return None
    except requests.RequestException as e:
        logger.warning("Failed to fetch %s models: %s", lister.name, e)
        return None
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Unexpected %s models response: %r", lister.name, e)
        return None

    if not models:
        logger.warning("%s returned an empty model list", lister.name)
        return None

    logger.info("Found %d available %s models", len(models), lister.name)
    return models
