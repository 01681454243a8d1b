"""Rich console output utilities for the create-fred CLI."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from llm_providers import PROVIDER_CHOICES, get_provider, supports_model_listing


console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]→[/blue] {message}")


def print_welcome() -> None:
    console.print(
        Panel.fit(
            "[bold cyan]Welcome to Fred![/bold cyan]\n[dim]Let's create your AI agent project.[/dim]",
            border_style="cyan",
        )
    )


def print_providers() -> None:
    """Print the provider menu with package and env var."""
    table = Table(title="Providers")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Package", style="green")
    table.add_column("Env var", style="yellow")
    table.add_column("Live models", justify="center")

    for provider_id, title, description in PROVIDER_CHOICES:
        descriptor = get_provider(provider_id)
        table.add_row(
            provider_id,
            f"{title} [dim]({description})[/dim]",
            descriptor.package,
            descriptor.env_var,
            "✓" if supports_model_listing(provider_id) else "",
        )

    console.print(table)


def print_models(provider: str, models: list[str], default: str) -> None:
    """Print a model list, marking the provider default."""
    console.print(f"\n[bold]Models for {provider}:[/bold]")
    for model in models:
        marker = " [dim](default)[/dim]" if model == default else ""
        console.print(f"  [cyan]{model}[/cyan]{marker}")
    console.print()


def print_next_steps(
    project_name: str,
    project_path: str,
    env_var: str,
    skip_install: bool = False,
    has_api_key: bool = False,
) -> None:
    """Print what to do after the project is created."""
    console.print("\n[bold green]Project created successfully![/bold green]")
    console.print("\n[bold]Next steps:[/bold]")
    console.print(f"  cd {project_name}")
    if skip_install:
        console.print("  bun install  [dim]# Install dependencies[/dim]")
    if not has_api_key:
        console.print(f"  [dim]# Set {env_var} in .env[/dim]")
    console.print("  bun run dev  [dim]# Start development chat[/dim]")
    console.print("\n[bold]CLI Commands:[/bold]")
    console.print("  fred provider add <provider>  [dim]# Add an AI provider[/dim]")
    console.print("  fred agent create             [dim]# Create a new agent[/dim]")
    console.print("  fred tool create              [dim]# Create a new tool[/dim]")
    console.print(f"\n[dim]Project location: {project_path}[/dim]\n")
