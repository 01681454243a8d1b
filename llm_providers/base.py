"""Abstract base class for provider model listers."""

from abc import ABC, abstractmethod
from typing import Any

import requests


class ProviderAPIError(Exception):
    """A provider's model-listing API rejected the request.

    Attributes:
        provider: Display name of the provider
        status_code: HTTP status, or None when the request was never sent
    """

    def __init__(self, provider: str, status_code: int | None = None, reason: str = "") -> None:
        self.provider = provider
        self.status_code = status_code
        self.reason = reason
        detail = f"{status_code} {reason}".strip() if status_code else reason
        super().__init__(f"{provider} API error: {detail}")


class ModelLister(ABC):
    """Interface for listing the models a provider offers.

    Implementations issue at most one HTTP request per call and return
    a sorted list of model identifiers. Failures are raised, not
    swallowed: callers decide how to degrade.
    """

    name: str = "provider"

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize lister.

        Args:
            api_key: Provider credential
            session: HTTP session (a new one is created if not given)
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    @abstractmethod
    def list_models(self) -> list[str]:
        """List available models.

        Returns:
            Sorted list of model identifiers.

        Raises:
            ProviderAPIError: If the provider returns a non-success status
            requests.RequestException: If the request could not be completed
            KeyError, TypeError, ValueError: If the response is malformed
        """
        ...

    def _get_json(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Make GET request and decode the JSON body."""
        response = self.session.get(url, headers=headers, params=params, timeout=self.timeout)
        if not response.ok:
            raise ProviderAPIError(self.name, response.status_code, response.reason or "")
        return response.json()

    def _bearer(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self.timeout!r})"
