"""create-fred CLI.

Scaffolds a new Fred agent project.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from create_fred import __version__
from create_fred.config import get_config
from create_fred.output import (
    console,
    print_error,
    print_info,
    print_models,
    print_next_steps,
    print_providers,
    print_success,
    print_warning,
    print_welcome,
)
from create_fred.resolve import model_choices, resolve_options
from llm_providers import default_model, env_var_name
from scaffolding import (
    DEFAULT_TEMPLATE_ROOTS,
    InvalidProjectNameError,
    ProjectExistsError,
    ProjectGenerator,
    TemplateNotFoundError,
    ensure_destination_free,
    get_project_path,
    validate_project_name,
)

app = typer.Typer(
    name="create-fred",
    help="Create a new Fred AI agent project.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"create-fred v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Create a new Fred AI agent project."""
    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.WARNING),
        format="%(levelname)s: %(message)s",
    )


@app.command()
def new(
    project: Optional[str] = typer.Argument(None, help="Project name"),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Project name (overrides the positional argument)",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="AI provider (openai, groq, anthropic, etc.)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (e.g., gpt-4o, llama-3.1-70b-versatile)",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        "-k",
        help="API key (will be added to .env)",
    ),
    no_install: bool = typer.Option(
        False,
        "--no-install",
        help="Skip dependency installation",
    ),
    no_examples: bool = typer.Option(
        False,
        "--no-examples",
        help="Do not generate the example tool, agent and script",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Parent directory (default: current directory)",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Use defaults for anything not given",
    ),
) -> None:
    """Create a new project.

    Examples:
        create-fred new my-agent
        create-fred new my-agent --provider groq --model llama-3.1-70b-versatile
        create-fred new my-agent --yes --no-examples
    """
    config = get_config()
    print_welcome()

    project_name = name or project
    if not project_name:
        if not yes:
            print_error("Project name is required (or pass --yes to use the default).")
            raise typer.Exit(1)
        project_name = config.defaults.project_name

    try:
        validate_project_name(project_name)
    except InvalidProjectNameError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1)

    options = resolve_options(
        project_name=project_name,
        provider=provider,
        model=model,
        api_key=api_key,
        include_examples=False if no_examples else None,
        skip_install=no_install,
        config=config,
    )

    project_path = get_project_path(options.project_name, output_dir)
    try:
        ensure_destination_free(project_path)
    except ProjectExistsError:
        print_error(f'Error: Directory "{options.project_name}" already exists.')
        raise typer.Exit(1)

    print_info(f"Provider: {options.provider}, model: {options.model}")

    template_roots = [*config.templates.extra_roots(), *DEFAULT_TEMPLATE_ROOTS]
    generator = ProjectGenerator(project_path, options, template_roots=template_roots, console=console)
    try:
        generator.generate()
    except (TemplateNotFoundError, OSError) as e:
        print_error(f"Failed to create project: {e}")
        raise typer.Exit(1)

    print_success("Project created")

    if options.skip_install:
        print_warning("Skipping dependency installation (--no-install flag used)")

    print_next_steps(
        options.project_name,
        str(project_path),
        env_var_name(options.provider),
        skip_install=options.skip_install,
        has_api_key=options.api_key is not None,
    )


@app.command()
def providers() -> None:
    """List supported AI providers."""
    print_providers()


@app.command()
def models(
    provider: str = typer.Argument(..., help="Provider identifier"),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        "-k",
        help="API key used to fetch the live model list",
    ),
) -> None:
    """List models for a provider.

    Fetches the live list when an API key is given, otherwise shows the
    built-in list.
    """
    config = get_config()
    choices = model_choices(provider, api_key, timeout=config.models.request_timeout())

    if choices.live:
        print_success(f"Found {len(choices.models)} available models")
    elif api_key:
        print_warning("Using default model list (API fetch failed or not supported)")

    print_models(provider, choices.models, default_model(provider))


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
