"""FastAPI dependency injection for elevation services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from elevations.application import ElevationCatalog, SaveElevationCommand
from elevations.application.data import load_default_catalog, load_sample_elevations
from elevations.domain.entities import BomCatalog


def get_bom_catalog() -> BomCatalog:
    """Dependency for the bundled BOM catalog."""
    return load_default_catalog()


@lru_cache(maxsize=1)
def get_elevation_catalog() -> ElevationCatalog:
    """Process-wide elevation store, seeded with the sample elevations."""
    return ElevationCatalog(load_sample_elevations())


def get_save_command(
    store: Annotated[ElevationCatalog, Depends(get_elevation_catalog)],
) -> SaveElevationCommand:
    """Dependency for SaveElevationCommand."""
    return SaveElevationCommand(store)


BomCatalogDep = Annotated[BomCatalog, Depends(get_bom_catalog)]
ElevationCatalogDep = Annotated[ElevationCatalog, Depends(get_elevation_catalog)]
SaveCommandDep = Annotated[SaveElevationCommand, Depends(get_save_command)]
