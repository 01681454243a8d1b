"""Template rendering and writing.

Placeholders are ``{{NAME}}`` tokens. Only names supplied in the variable
mapping are replaced; anything else is left in the output as literal text
so a missing variable shows up in the generated project.
"""

import re
from pathlib import Path


TEMPLATE_VARIABLES = (
    "PROJECT_NAME",
    "PROVIDER",
    "MODEL",
    "PROVIDER_PACKAGE",
    "ENV_VAR_NAME",
    "API_KEY_PLACEHOLDER",
    "FRED_VERSION",
)

# Names are matched exactly; no whitespace inside the braces
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def placeholder(name: str) -> str:
    """Get the placeholder token for a variable name."""
    return "{{" + name + "}}"


def render(content: str, variables: dict[str, str]) -> str:
    """Substitute {{VARIABLE}} placeholders in content.

    Args:
        content: Template text
        variables: Variable name -> replacement value

    Returns:
        Content with every occurrence of each supplied placeholder replaced.
        Substituted values are not scanned again.
    """

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        return str(variables[name])

    return PLACEHOLDER_PATTERN.sub(_substitute, content)


def write_rendered(destination: Path, content: str) -> None:
    """Write content to destination, creating parent directories."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(content, encoding="utf-8")
