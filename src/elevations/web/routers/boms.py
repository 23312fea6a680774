"""BOM catalog endpoints."""

from fastapi import APIRouter, HTTPException

from elevations.domain.services import bom_statistics, filter_bom_catalog
from elevations.domain.value_objects import BomType
from elevations.web.dependencies import BomCatalogDep
from elevations.web.schemas.responses import BomListSchema, BomSchema

router = APIRouter(prefix="/boms", tags=["boms"])


@router.get("", response_model=BomListSchema)
async def list_boms(
    catalog: BomCatalogDep,
    search: str = "",
    bom_type: BomType | None = None,
    series: str = "all",
) -> BomListSchema:
    """List the BOM catalog.

    Args:
        catalog: Injected BOM catalog.
        search: Case-insensitive text matched against code, name, series and system.
        bom_type: Restrict to one BOM type.
        series: Series code, or "all".
    """
    records = catalog.all_records()
    found = filter_bom_catalog(
        records, search, bom_type=bom_type or "all", series=series
    )
    return BomListSchema(
        boms=[BomSchema(**bom.to_dict()) for bom in found],
        statistics=bom_statistics(records),
    )


@router.get("/{bom_type}/{bom_id}", response_model=BomSchema)
async def get_bom(
    bom_type: BomType,
    bom_id: int,
    catalog: BomCatalogDep,
) -> BomSchema:
    """Get one BOM by type and id."""
    bom = catalog.find(bom_type, bom_id)
    if bom is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error": f"No {bom_type.value} BOM with id {bom_id}",
                "error_type": "not_found",
            },
        )
    return BomSchema(**bom.to_dict())
