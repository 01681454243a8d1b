"""Cohere model lister."""

from .base import ModelLister


class CohereModels(ModelLister):
    """Cohere command/chat models."""

    name = "Cohere"
    base_url = "https://api.cohere.ai/v1"

    def list_models(self) -> list[str]:
        data = self._get_json(f"{self.base_url}/models", headers=self._bearer())
        names = [entry["name"] for entry in data["models"]]
        return sorted(n for n in names if "command" in n.lower() or "chat" in n.lower())
