"""Configuration management for create-fred.

Loads configuration from:
1. config.toml (defaults)
2. Environment variables (overrides)
"""

import os
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dotenv import load_dotenv


CONFIG_FILENAME = "config.toml"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "CREATE_FRED_PROVIDER": ("defaults", "provider"),
    "CREATE_FRED_FETCH_TIMEOUT": ("models", "timeout"),
    "CREATE_FRED_TEMPLATES_DIR": ("templates", "templates_dir"),
    "CREATE_FRED_LOG_LEVEL": ("logging", "level"),
}


@dataclass
class DefaultsConfig:
    """Defaults used when an option is not given on the command line."""

    provider: str = "openai"
    project_name: str = "my-fred-project"
    include_examples: bool = True


@dataclass
class ModelsConfig:
    """Model discovery configuration."""

    # Seconds to wait for a provider's model list; 0 waits indefinitely
    timeout: float = 0

    def request_timeout(self) -> float | None:
        try:
            timeout = float(self.timeout)
        except (TypeError, ValueError):
            return None
        return timeout if timeout > 0 else None


@dataclass
class TemplatesConfig:
    """Template lookup configuration."""

    # Searched before the bundled templates (empty = bundled only)
    templates_dir: str = ""

    def extra_roots(self) -> list[Path]:
        if not self.templates_dir:
            return []
        return [Path(self.templates_dir).expanduser()]


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration container."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    models: ModelsConfig = field(default_factory=ModelsConfig)
    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        return cls(
            defaults=_section(DefaultsConfig, data.get("defaults", {})),
            models=_section(ModelsConfig, data.get("models", {})),
            templates=_section(TemplatesConfig, data.get("templates", {})),
            logging=_section(LoggingConfig, data.get("logging", {})),
        )


def _section(section_cls: type, values: dict[str, Any]) -> Any:
    known = {f.name for f in fields(section_cls)}
    return section_cls(**{k: v for k, v in values.items() if k in known})


def find_config_file() -> Path | None:
    """Find config.toml in current or parent directories.

    Returns:
        Path to config.toml or None if not found.
    """
    current = Path.cwd()

    for directory in [current, *current.parents]:
        config_path = directory / CONFIG_FILENAME
        if config_path.exists():
            return config_path

    return None


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Optional explicit path to config.toml

    Returns:
        Config object with merged settings.
    """
    load_dotenv()

    config_data: dict[str, Any] = {}

    if config_path is None:
        config_path = find_config_file()

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path, "rb") as f:
                config_data = tomllib.load(f)

    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None:
            config_data.setdefault(section, {})[key] = value

    return Config.from_dict(config_data)


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config object (loaded once, cached).
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Force reload of configuration."""
    global _config
    _config = load_config()
    return _config
