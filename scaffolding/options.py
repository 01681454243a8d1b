"""Options for a single project generation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .validation import validate_project_name


class ProjectOptions(BaseModel):
    """Fully resolved options for generating one project.

    The project name is validated on construction, so an instance always
    carries a name that is safe to use as a directory. A bad name raises
    InvalidProjectNameError rather than a pydantic ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Project (and directory) name")
    provider: str = Field(..., min_length=1, description="Provider identifier")
    model: str = Field(..., min_length=1, description="Model identifier")
    api_key: str | None = Field(None, description="Provider credential, written to .env")
    include_examples: bool = Field(True, description="Generate example tool/agent files")
    skip_install: bool = Field(False, description="Skip dependency installation")

    def __init__(self, **data: Any) -> None:
        # pydantic wraps ValueErrors raised by validators, so check the name first
        name = data.get("project_name")
        if isinstance(name, str):
            validate_project_name(name)
        super().__init__(**data)

    @field_validator("api_key")
    @classmethod
    def _blank_key_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()
