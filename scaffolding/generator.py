"""Project generator for scaffolding new Fred projects."""

import logging
import sys
from pathlib import Path
from typing import Iterable

from rich.console import Console

from llm_providers import env_var_name, package_name

from .engine import render, write_rendered
from .options import ProjectOptions


logger = logging.getLogger(__name__)

API_KEY_PLACEHOLDER = "your-api-key-here"
FRED_VERSION = "latest"

# Package data location, used both from a source checkout and when installed
PACKAGE_TEMPLATES_DIR = Path(__file__).parent / "templates"
# Shared-data location for installs that ship templates outside the package
SHARED_TEMPLATES_DIR = Path(sys.prefix) / "share" / "create-fred" / "templates"

DEFAULT_TEMPLATE_ROOTS = (PACKAGE_TEMPLATES_DIR, SHARED_TEMPLATES_DIR)

BASE_DIRECTORIES = ["src", "src/tools", "src/agents"]
EXAMPLES_DIRECTORY = "src/examples"

# (template path, destination path) in generation order
CORE_FILES = [
    ("package.json.template", "package.json"),
    ("tsconfig.json.template", "tsconfig.json"),
    ("flox.nix.template", "flox.nix"),
    (".env.example.template", ".env.example"),
    (".gitignore.template", ".gitignore"),
    ("README.md.template", "README.md"),
    ("src/index.ts.template", "src/index.ts"),
    ("src/dev-chat.ts.template", "src/dev-chat.ts"),
    ("src/server.ts.template", "src/server.ts"),
    ("src/config.json.template", "src/config.json"),
]

EXAMPLE_FILES = [
    ("src/tools/example-tool.ts.template", "src/tools/example-tool.ts"),
    ("src/agents/default-agent.ts.template", "src/agents/default-agent.ts"),
    ("src/examples/basic.ts.template", "src/examples/basic.ts"),
]

SECRETS_FILE = ".env"


class TemplateNotFoundError(LookupError):
    """Template file is missing from every template root."""

    def __init__(self, template_path: str, roots: Iterable[Path]) -> None:
        self.template_path = template_path
        self.roots = list(roots)
        searched = ", ".join(str(root) for root in self.roots)
        super().__init__(f"Template file not found: {template_path} (searched: {searched})")


def build_template_variables(options: ProjectOptions) -> dict[str, str]:
    """Derive the template variables for a project."""
    return {
        "PROJECT_NAME": options.project_name,
        "PROVIDER": options.provider,
        "MODEL": options.model,
        "PROVIDER_PACKAGE": package_name(options.provider),
        "ENV_VAR_NAME": env_var_name(options.provider),
        "API_KEY_PLACEHOLDER": options.api_key or API_KEY_PLACEHOLDER,
        "FRED_VERSION": FRED_VERSION,
    }


def build_manifest(include_examples: bool) -> list[tuple[str, str]]:
    """Get the (template, destination) pairs to generate."""
    manifest = list(CORE_FILES)
    if include_examples:
        manifest.extend(EXAMPLE_FILES)
    return manifest


def find_template(template_path: str, roots: Iterable[Path]) -> Path:
    """Find a template under the first root that contains it.

    Raises:
        TemplateNotFoundError: If no root contains the template.
    """
    roots = list(roots)
    for root in roots:
        candidate = root / template_path
        if candidate.is_file():
            return candidate
    raise TemplateNotFoundError(template_path, roots)


class ProjectGenerator:
    """Generates a new Fred project from the bundled templates.

    Creates:
    - Directory structure (src, src/tools, src/agents, src/examples)
    - package.json, tsconfig.json and environment files
    - Entry points, dev chat and server
    - Example tool, agent and script (optional)
    - .env with the provider credential (optional)

    Generation is not atomic: if a template is missing or a write fails,
    files written before the failure stay on disk.
    """

    def __init__(
        self,
        destination: Path,
        options: ProjectOptions,
        template_roots: Iterable[Path] | None = None,
        console: Console | None = None,
    ):
        """Initialize project generator.

        Args:
            destination: Project directory to create
            options: Resolved project options
            template_roots: Directories searched for templates, in order
                (default: packaged templates, then shared-data templates)
            console: Console to report created files on (default: silent)
        """
        self.destination = Path(destination)
        self.options = options
        self.template_roots = list(template_roots or DEFAULT_TEMPLATE_ROOTS)
        self.console = console
        self.variables = build_template_variables(options)

    def generate(self) -> Path:
        """Generate the project.

        Returns:
            Path to the created project directory

        Raises:
            TemplateNotFoundError: If a template is missing from every root
            OSError: If a directory or file cannot be written
        """
        logger.info(
            "Generating %s (provider=%s, model=%s) in %s",
            self.options.project_name,
            self.options.provider,
            self.options.model,
            self.destination,
        )

        self._create_directories()
        self._create_files()

        if self.options.api_key:
            self._write_secrets()

        return self.destination

    def _create_directories(self) -> None:
        """Create directory structure."""
        self.destination.mkdir(parents=True, exist_ok=True)
        directories = list(BASE_DIRECTORIES)
        if self.options.include_examples:
            directories.append(EXAMPLES_DIRECTORY)

        for directory in directories:
            (self.destination / directory).mkdir(parents=True, exist_ok=True)
            self._report(f"{directory}/")

    def _create_files(self) -> None:
        """Create files from templates."""
        for template_path, dest_path in build_manifest(self.options.include_examples):
            source = find_template(template_path, self.template_roots)
            content = render(source.read_text(encoding="utf-8"), self.variables)
            write_rendered(self.destination / dest_path, content)
            self._report(dest_path)

    def _write_secrets(self) -> None:
        """Write the credential to .env (no template backs this file)."""
        content = f"{self.variables['ENV_VAR_NAME']}={self.options.api_key}\n"
        write_rendered(self.destination / SECRETS_FILE, content)
        self._report(SECRETS_FILE)

    def _report(self, relative_path: str) -> None:
        logger.debug("Created %s", self.destination / relative_path)
        if self.console is not None:
            self.console.print(f"[green]Created:[/green] {relative_path}")


def materialize(
    destination: Path,
    options: ProjectOptions,
    template_roots: Iterable[Path] | None = None,
) -> Path:
    """Generate a project at destination. See ProjectGenerator."""
    return ProjectGenerator(destination, options, template_roots=template_roots).generate()
