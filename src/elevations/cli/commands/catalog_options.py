"""Shared catalog option for commands that match or select BOMs."""

from pathlib import Path
from typing import Annotated

import typer

from elevations.application.config import (
    ElevationConfiguration,
    config_to_catalog,
    load_catalog_file,
)
from elevations.application.data import load_default_catalog
from elevations.domain.entities import BomCatalog

CatalogOption = Annotated[
    Path | None,
    typer.Option(
        "--catalog",
        help="BOM catalog JSON file (default: bundled catalog)",
    ),
]


def resolve_catalog(
    config: ElevationConfiguration | None = None, catalog_file: Path | None = None
) -> BomCatalog:
    """Pick the catalog: --catalog file, then the config's own, then bundled.

    Raises:
        ConfigError: If the catalog file cannot be loaded.
    """
    if catalog_file is not None:
        return config_to_catalog(load_catalog_file(catalog_file))
    if config is not None and config.catalog is not None:
        return config_to_catalog(config.catalog)
    return load_default_catalog()
