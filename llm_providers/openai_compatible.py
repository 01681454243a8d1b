"""Model listers for providers exposing an OpenAI-style ``/models`` endpoint.

All of these answer ``GET <base_url>/models`` with ``{"data": [{"id": ...}]}``
and authenticate with a Bearer token. They differ only in base URL and in
which catalog entries are chat models.
"""

from .base import ModelLister


class OpenAICompatibleLister(ModelLister):
    """Lists models from an OpenAI-compatible endpoint.

    Subclasses set ``name`` and ``base_url`` and may override
    ``keep_model`` to drop catalog entries that are not chat models.
    """

    base_url: str = ""

    def keep_model(self, model_id: str) -> bool:
        return True

    def list_models(self) -> list[str]:
        data = self._get_json(f"{self.base_url}/models", headers=self._bearer())
        model_ids = [entry["id"] for entry in data["data"]]
        return sorted(m for m in model_ids if self.keep_model(m))


class OpenAIModels(OpenAICompatibleLister):
    """OpenAI chat models (gpt-*), without instruct/vision/embedding variants."""

    name = "OpenAI"
    base_url = "https://api.openai.com/v1"

    def keep_model(self, model_id: str) -> bool:
        lowered = model_id.lower()
        return lowered.startswith("gpt-") and not any(
            marker in lowered for marker in ("instruct", "vision", "embedding")
        )


class GroqModels(OpenAICompatibleLister):
    name = "Groq"
    base_url = "https://api.groq.com/openai/v1"

    def keep_model(self, model_id: str) -> bool:
        return "embedding" not in model_id


class MistralModels(OpenAICompatibleLister):
    name = "Mistral"
    base_url = "https://api.mistral.ai/v1"

    def keep_model(self, model_id: str) -> bool:
        return "embed" not in model_id


class FireworksModels(OpenAICompatibleLister):
    name = "Fireworks"
    base_url = "https://api.fireworks.ai/inference/v1"

    def keep_model(self, model_id: str) -> bool:
        return "embed" not in model_id


class XAIModels(OpenAICompatibleLister):
    name = "xAI"
    base_url = "https://api.x.ai/v1"


class PerplexityModels(OpenAICompatibleLister):
    name = "Perplexity"
    base_url = "https://api.perplexity.ai"
