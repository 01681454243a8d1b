"""Google Generative Language (Gemini) model lister."""

from .base import ModelLister


class GoogleModels(ModelLister):
    """Gemini models from the Generative Language API.

    The API authenticates with a ``key`` query parameter and returns
    ``{"models": [{"name": "models/gemini-1.5-pro", ...}]}``.
    """

    name = "Google"
    base_url = "https://generativelanguage.googleapis.com/v1beta"

    def list_models(self) -> list[str]:
        data = self._get_json(f"{self.base_url}/models", params={"key": self.api_key})
        names = [entry["name"] for entry in data["models"]]
        gemini = [
            name.replace("models/", "", 1)
            for name in names
            if "gemini" in name.lower() and "embedding" not in name.lower()
        ]
        return sorted(gemini)
