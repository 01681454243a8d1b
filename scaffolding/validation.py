"""Project name validation and destination checks."""

import re
from pathlib import Path


# Characters rejected by at least one major filesystem, plus control chars
INVALID_NAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

RESERVED_NAMES = frozenset(
    ["con", "prn", "aux", "nul"]
    + [f"com{i}" for i in range(1, 10)]
    + [f"lpt{i}" for i in range(1, 10)]
)


class InvalidProjectNameError(ValueError):
    """Project name cannot be used as a directory name."""


class ProjectExistsError(FileExistsError):
    """Destination directory for a new project already exists."""


def validate_project_name(name: str) -> str:
    """Validate a project name.

    Args:
        name: Proposed project name

    Returns:
        The name, unchanged.

    Raises:
        InvalidProjectNameError: If the name is empty, contains characters
            that are invalid in a path segment, or is a reserved device name.
    """
    if not name or not name.strip():
        raise InvalidProjectNameError("Project name cannot be empty")

    if INVALID_NAME_CHARS.search(name):
        raise InvalidProjectNameError("Project name contains invalid characters")

    if name.lower() in RESERVED_NAMES:
        raise InvalidProjectNameError("Project name is a reserved name")

    return name


def is_valid_project_name(name: str) -> bool:
    try:
        validate_project_name(name)
    except InvalidProjectNameError:
        return False
    return True


def get_project_path(project_name: str, cwd: Path | None = None) -> Path:
    """Get the directory a project will be created in."""
    return (cwd or Path.cwd()) / project_name


def ensure_destination_free(path: Path) -> None:
    """Raise ProjectExistsError if path already exists."""
    if path.exists():
        raise ProjectExistsError(f'Directory "{path.name}" already exists: {path}')
