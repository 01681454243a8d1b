"""Non-interactive option resolution.

Explicit values win, then configured defaults, then registry defaults.
When a credential is available the provider's live model list is used to
pick a model, falling back to the curated list when the fetch fails.
"""

import logging
from dataclasses import dataclass

from llm_providers import default_model, fetch_models, static_models
from scaffolding import ProjectOptions

from .config import Config, get_config


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelChoices:
    """Models to offer for a provider."""

    models: list[str]
    live: bool  # True if fetched from the provider API


def model_choices(
    provider: str,
    api_key: str | None = None,
    timeout: float | None = None,
) -> ModelChoices:
    """Get the models to offer for a provider.

    Args:
        provider: Provider identifier
        api_key: Credential used to fetch the live list (optional)
        timeout: Fetch timeout in seconds

    Returns:
        The live list when it could be fetched, otherwise the static list.
    """
    if api_key and api_key.strip():
        fetched = fetch_models(provider, api_key.strip(), timeout=timeout)
        if fetched:
            return ModelChoices(models=fetched, live=True)
        logger.info("Using default model list for %s", provider)
    return ModelChoices(models=static_models(provider), live=False)


def pick_model(provider: str, choices: list[str]) -> str:
    """Pick the provider's default model if offered, else the first choice."""
    preferred = default_model(provider)
    if preferred in choices or not choices:
        return preferred
    return choices[0]


def resolve_options(
    project_name: str | None = None,
    provider: str | None = None,
    model: str | None = None,
    api_key: str | None = None,
    include_examples: bool | None = None,
    skip_install: bool = False,
    config: Config | None = None,
) -> ProjectOptions:
    """Resolve command-line values into complete project options.

    Raises:
        InvalidProjectNameError: If the resolved project name is invalid.
    """
    config = config or get_config()
    provider = provider or config.defaults.provider

    if not model:
        choices = model_choices(provider, api_key, timeout=config.models.request_timeout())
        model = pick_model(provider, choices.models)

    if include_examples is None:
        include_examples = config.defaults.include_examples

    return ProjectOptions(
        project_name=project_name or config.defaults.project_name,
        provider=provider,
        model=model,
        api_key=api_key,
        include_examples=include_examples,
        skip_install=skip_install,
    )
