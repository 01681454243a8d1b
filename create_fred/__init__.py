"""create-fred - scaffold Fred AI agent projects.

Command-line interface around the provider registry, model discovery and
project scaffolding packages.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
