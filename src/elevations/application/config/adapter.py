"""Adapters converting configuration schemas into domain objects."""

from __future__ import annotations

from elevations.application.config.schemas import (
    BomRecordConfig,
    CatalogConfig,
    ElevationAttributesConfig,
    ElevationConfig,
    ElevationListConfig,
)
from elevations.domain.entities import BomCatalog, BomRecord, ElevationRecord
from elevations.domain.value_objects import BomType, ElevationAttributes


class UnknownBomError(Exception):
    """Raised when a configuration selects a BOM id the catalog lacks."""

    def __init__(self, bom_type: BomType, bom_id: int) -> None:
        self.bom_type = bom_type
        self.bom_id = bom_id
        super().__init__(f"No {bom_type.value} BOM with id {bom_id} in catalog")


def _value(member: object | None) -> str:
    return "" if member is None else getattr(member, "value", str(member))


def config_to_attributes(config: ElevationAttributesConfig) -> ElevationAttributes:
    """Convert configured attributes to the domain value object.

    Unset enum fields become empty strings.
    """
    return ElevationAttributes(
        series=_value(config.series),
        window_type=_value(config.window_type),
        no_of_leaves=config.no_of_leaves,
        hinge_direction=_value(config.hinge_direction),
        open_direction=_value(config.open_direction),
        sill=_value(config.sill),
        glass_groove=config.glass_groove,
        insect_screen=_value(config.insect_screen),
        interlocking_stile=_value(config.interlocking_stile),
        big_opening=config.big_opening,
    )


def config_to_bom_record(config: BomRecordConfig, bom_type: BomType) -> BomRecord:
    """Convert a BOM record config; ``bom_type`` fills an omitted type."""
    return BomRecord(
        id=config.id,
        bom_code=config.bom_code,
        series_code=config.series_code,
        window_system=config.window_system,
        bom_type=config.bom_type or bom_type,
        frame_depth=config.frame_depth,
        open_direction=config.open_direction.value,
        handle_type=config.handle_type,
        glass_groove=config.glass_groove,
        bom_name=config.bom_name,
        total_parts=config.total_parts,
        status=config.status,
        last_modified=config.last_modified,
    )


def config_to_catalog(config: CatalogConfig) -> BomCatalog:
    """Convert a catalog config to an immutable domain catalog."""
    return BomCatalog(
        outer=tuple(config_to_bom_record(c, BomType.OUTER) for c in config.outer_boms),
        inner=tuple(config_to_bom_record(c, BomType.INNER) for c in config.inner_boms),
        connector=tuple(
            config_to_bom_record(c, BomType.CONNECTOR) for c in config.connector_boms
        ),
    )


def config_to_elevation_records(config: ElevationListConfig) -> list[ElevationRecord]:
    """Convert a stored elevation list to catalog records."""
    return [
        ElevationRecord(
            id=item.id,
            code=item.code,
            name=item.name,
            attributes=config_to_attributes(item),
            status=item.status,
            last_modified=item.last_modified,
            outer_bom=item.outer_bom,
            inner_bom=item.inner_bom,
            wind_pressure=item.wind_pressure,
            waterproof=item.waterproof,
            usage_count=item.usage_count,
            fab_portal_enabled=item.fab_portal_enabled,
        )
        for item in config.elevations
    ]


def resolve_selection(
    config: ElevationConfig, catalog: BomCatalog
) -> tuple[BomRecord | None, BomRecord | None]:
    """Look up the configured outer and inner BOM ids.

    Unselected halves resolve to None.

    Raises:
        UnknownBomError: If an id is given but not present in the catalog.
    """
    selected: list[BomRecord | None] = []
    for bom_type, bom_id in (
        (BomType.OUTER, config.outer_bom_id),
        (BomType.INNER, config.inner_bom_id),
    ):
        if bom_id is None:
            selected.append(None)
            continue
        bom = catalog.find(bom_type, bom_id)
        if bom is None:
            raise UnknownBomError(bom_type, bom_id)
        selected.append(bom)
    return selected[0], selected[1]
