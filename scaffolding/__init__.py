"""Project scaffolding module for create-fred.

Creates new Fred agent projects from the bundled templates:
- Placeholder rendering ({{PROJECT_NAME}}, {{MODEL}}, ...)
- Fixed manifest of core files plus optional examples
- Credential file when an API key is supplied
"""

from .engine import TEMPLATE_VARIABLES, placeholder, render, write_rendered
from .generator import (
    CORE_FILES,
    DEFAULT_TEMPLATE_ROOTS,
    EXAMPLE_FILES,
    ProjectGenerator,
    TemplateNotFoundError,
    build_manifest,
    build_template_variables,
    find_template,
    materialize,
)
from .options import ProjectOptions
from .validation import (
    InvalidProjectNameError,
    ProjectExistsError,
    ensure_destination_free,
    get_project_path,
    is_valid_project_name,
    validate_project_name,
)

__all__ = [
    # Engine
    "TEMPLATE_VARIABLES",
    "placeholder",
    "render",
    "write_rendered",
    # Generator
    "CORE_FILES",
    "DEFAULT_TEMPLATE_ROOTS",
    "EXAMPLE_FILES",
    "ProjectGenerator",
    "TemplateNotFoundError",
    "build_manifest",
    "build_template_variables",
    "find_template",
    "materialize",
    # Options and validation
    "ProjectOptions",
    "InvalidProjectNameError",
    "ProjectExistsError",
    "ensure_destination_free",
    "get_project_path",
    "is_valid_project_name",
    "validate_project_name",
]
