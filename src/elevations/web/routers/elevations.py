"""Elevation code, matching, validation and catalog endpoints."""

from fastapi import APIRouter, HTTPException, status

from elevations.application.config import (
    UnknownBomError,
    config_to_attributes,
    config_to_catalog,
    load_config_from_dict,
    validate_config,
)
from elevations.domain.entities import BomRecord
from elevations.domain.services import (
    elevation_statistics,
    filter_elevations,
    generate_code,
    match_boms,
    missing_fields,
    search_boms,
)
from elevations.domain.value_objects import BomType
from elevations.web.dependencies import (
    BomCatalogDep,
    ElevationCatalogDep,
    SaveCommandDep,
)
from elevations.web.exceptions import ElevationSaveError
from elevations.web.schemas.requests import (
    CodeRequest,
    ConfigValidateRequest,
    MatchRequest,
    SaveElevationRequest,
)
from elevations.web.schemas.responses import (
    BomSchema,
    CodeResponseSchema,
    ElevationListSchema,
    ElevationSchema,
    MatchResultSchema,
    ValidationResultSchema,
)

router = APIRouter(prefix="/elevations", tags=["elevations"])


def _bom_schemas(records: list[BomRecord]) -> list[BomSchema]:
    return [BomSchema(**bom.to_dict()) for bom in records]


@router.post("/code", response_model=CodeResponseSchema)
async def generate_elevation_code(request: CodeRequest) -> CodeResponseSchema:
    """Generate the elevation code for an attribute set.

    An incomplete attribute set is not an error: the code is empty and the
    unset required fields are listed.
    """
    attrs = config_to_attributes(request)
    code = generate_code(attrs)
    return CodeResponseSchema(
        code=code,
        complete=bool(code),
        missing_fields=missing_fields(attrs),
    )


@router.post("/match", response_model=MatchResultSchema)
async def match_elevation_boms(
    request: MatchRequest,
    catalog: BomCatalogDep,
) -> MatchResultSchema:
    """List outer and inner BOM candidates for the given drivers."""
    found: dict[BomType, list[BomRecord]] = {}
    for bom_type in (BomType.OUTER, BomType.INNER):
        records = catalog.by_type(bom_type)
        if request.auto_match:
            records = match_boms(
                records,
                request.series,
                request.window_system,
                request.open_direction,
            )
        found[bom_type] = search_boms(records, request.search)

    return MatchResultSchema(
        outer=_bom_schemas(found[BomType.OUTER]),
        inner=_bom_schemas(found[BomType.INNER]),
        outer_count=len(found[BomType.OUTER]),
        inner_count=len(found[BomType.INNER]),
    )


@router.post("/validate", response_model=ValidationResultSchema)
async def validate_elevation(
    request: ConfigValidateRequest,
    catalog: BomCatalogDep,
) -> ValidationResultSchema:
    """Check whether a configured elevation could be saved.

    Raises:
        ConfigError: If the configuration does not parse (handled by exception handler).
    """
    config = load_config_from_dict(request.config)
    if config.catalog is not None:
        catalog = config_to_catalog(config.catalog)

    result = validate_config(config, catalog)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            {"path": e.path, "message": e.message, "value": e.value}
            for e in result.errors
        ],
        warnings=[
            {"path": w.path, "message": w.message, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )


@router.post("", response_model=ElevationSchema, status_code=status.HTTP_201_CREATED)
async def save_elevation(
    request: SaveElevationRequest,
    catalog: BomCatalogDep,
    command: SaveCommandDep,
) -> ElevationSchema:
    """Save a new elevation into the catalog.

    Raises:
        UnknownBomError: If a selected BOM id is not in the catalog.
        ElevationSaveError: If the elevation is incomplete or a BOM is unselected.
    """
    selected: dict[BomType, BomRecord | None] = {}
    for bom_type, bom_id in (
        (BomType.OUTER, request.outer_bom_id),
        (BomType.INNER, request.inner_bom_id),
    ):
        bom = None if bom_id is None else catalog.find(bom_type, bom_id)
        if bom_id is not None and bom is None:
            raise UnknownBomError(bom_type, bom_id)
        selected[bom_type] = bom

    result = command.execute(
        config_to_attributes(request),
        request.name,
        selected[BomType.OUTER],
        selected[BomType.INNER],
        status=request.status,
    )
    if not result.saved:
        raise ElevationSaveError(result.validation)

    record = command.catalog.get(result.draft.id)
    return ElevationSchema(**record.to_dict())


@router.get("", response_model=ElevationListSchema)
async def list_elevations(
    store: ElevationCatalogDep,
    search: str = "",
    series: str = "all",
    window_type: str = "all",
) -> ElevationListSchema:
    """List catalog elevations, filtered by search text, series and type."""
    records = store.records()
    found = filter_elevations(records, search, series=series, window_type=window_type)
    return ElevationListSchema(
        elevations=[ElevationSchema(**r.to_dict()) for r in found],
        statistics=elevation_statistics(records),
    )


@router.get("/{elevation_id}", response_model=ElevationSchema)
async def get_elevation(
    elevation_id: int,
    store: ElevationCatalogDep,
) -> ElevationSchema:
    """Get one elevation by id."""
    record = store.get(elevation_id)
    if record is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error": f"Elevation not found: {elevation_id}",
                "error_type": "not_found",
            },
        )
    return ElevationSchema(**record.to_dict())
