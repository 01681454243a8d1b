"""Anthropic model lister."""

from .base import ModelLister, ProviderAPIError


KNOWN_MODELS = [
    "claude-3-5-sonnet-20241022",
    "claude-3-opus-20240229",
    "claude-3-sonnet-20240229",
    "claude-3-haiku-20240307",
]


class AnthropicModels(ModelLister):
    """Anthropic models.

    No listing request is made: the key is checked for the ``sk-ant-``
    prefix and a curated list of known models is returned.
    """

    name = "Anthropic"

    def list_models(self) -> list[str]:
        if not self.api_key.startswith("sk-ant-"):
            raise ProviderAPIError(self.name, reason="invalid API key format")
        return sorted(KNOWN_MODELS)
