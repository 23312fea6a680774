"""CLI command implementations for the elevations application.

This package contains subcommands for the elevations CLI, including:
- validate: Validate an elevation configuration file
"""

from elevations.cli.commands.catalog_options import CatalogOption, resolve_catalog
from elevations.cli.commands.validate import display_load_error, validate_command

__all__ = [
    "CatalogOption",
    "display_load_error",
    "resolve_catalog",
    "validate_command",
]
