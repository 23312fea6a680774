"""Domain entities for elevations and their bills of materials."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from .value_objects import BomType, ElevationAttributes, RecordStatus


@dataclass(frozen=True)
class BomRecord:
    """A reference catalog entry describing one half of an elevation.

    Records are immutable for the lifetime of a session. ``id`` is unique
    within its own list only, so an outer and an inner record may share one.

    Attributes:
        id: Identifier, unique within the record's catalog list.
        bom_code: Display code (e.g. "U4E-41001").
        series_code: Product line the BOM belongs to.
        window_system: Window system code the BOM applies to.
        bom_type: Outer, inner or connector.
        frame_depth: Frame depth in mm.
        open_direction: Handing, one of "L", "R" or "LR".
        handle_type: Handle hardware description.
        glass_groove: Glass groove in mm (inner BOMs only).
        bom_name: Optional descriptive name.
        total_parts: Optional number of parts in the BOM.
        status: Catalog status.
        last_modified: Date the record last changed, if known.
    """

    id: int
    bom_code: str
    series_code: str
    window_system: str
    bom_type: BomType
    frame_depth: int
    open_direction: str
    handle_type: str
    glass_groove: int | None = None
    bom_name: str | None = None
    total_parts: int | None = None
    status: RecordStatus = RecordStatus.ACTIVE
    last_modified: date | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        data: dict[str, Any] = {
            "id": self.id,
            "bom_code": self.bom_code,
            "series_code": self.series_code,
            "window_system": self.window_system,
            "bom_type": self.bom_type.value,
            "frame_depth": self.frame_depth,
            "open_direction": self.open_direction,
            "handle_type": self.handle_type,
            "status": self.status.value,
        }
        if self.glass_groove is not None:
            data["glass_groove"] = self.glass_groove
        if self.bom_name is not None:
            data["bom_name"] = self.bom_name
        if self.total_parts is not None:
            data["total_parts"] = self.total_parts
        if self.last_modified is not None:
            data["last_modified"] = self.last_modified.isoformat()
        return data


@dataclass(frozen=True)
class BomCatalog:
    """The read-only reference lists BOMs are matched and selected from."""

    outer: tuple[BomRecord, ...] = ()
    inner: tuple[BomRecord, ...] = ()
    connector: tuple[BomRecord, ...] = ()

    def by_type(self, bom_type: BomType) -> tuple[BomRecord, ...]:
        """Records of one type, in catalog order."""
        bom_type = BomType(bom_type)
        if bom_type is BomType.OUTER:
            return self.outer
        if bom_type is BomType.INNER:
            return self.inner
        return self.connector

    def all_records(self) -> list[BomRecord]:
        """Every record: outer, then inner, then connector."""
        return [*self.outer, *self.inner, *self.connector]

    def find(self, bom_type: BomType, bom_id: int) -> BomRecord | None:
        """Look up a record by id within the list of its type."""
        for bom in self.by_type(bom_type):
            if bom.id == bom_id:
                return bom
        return None


@dataclass(frozen=True)
class ElevationDraft:
    """A saved elevation, ready to hand off to the catalog store.

    The draft references its BOMs; it does not own or copy them.
    """

    id: int
    name: str
    code: str
    attributes: ElevationAttributes
    outer_bom: BomRecord
    inner_bom: BomRecord
    status: RecordStatus = RecordStatus.ACTIVE
    created: date = field(default_factory=date.today)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "attributes": self.attributes.to_dict(),
            "status": self.status.value,
            "created": self.created.isoformat(),
            "outer_bom": self.outer_bom.to_dict(),
            "inner_bom": self.inner_bom.to_dict(),
        }


@dataclass(frozen=True)
class ElevationRecord:
    """An elevation as listed in the elevation catalog.

    Attributes:
        id: Catalog identifier.
        code: Elevation code.
        name: Display name.
        attributes: The attribute set the code was derived from.
        status: Catalog status.
        last_modified: Date the record last changed.
        outer_bom: Outer BOM code, if one is attached.
        inner_bom: Inner BOM code, if one is attached.
        wind_pressure: Rated wind pressure in Pa.
        waterproof: Rated water tightness in Pa.
        usage_count: Number of orders that used this elevation.
        fab_portal_enabled: Whether dealers can order it from the fabrication portal.
    """

    id: int
    code: str
    name: str
    attributes: ElevationAttributes
    status: RecordStatus = RecordStatus.ACTIVE
    last_modified: date | None = None
    outer_bom: str | None = None
    inner_bom: str | None = None
    wind_pressure: int | None = None
    waterproof: int | None = None
    usage_count: int = 0
    fab_portal_enabled: bool = False

    @classmethod
    def from_draft(cls, draft: ElevationDraft) -> ElevationRecord:
        """Create a catalog record from a saved draft."""
        return cls(
            id=draft.id,
            code=draft.code,
            name=draft.name,
            attributes=draft.attributes,
            status=draft.status,
            last_modified=draft.created,
            outer_bom=draft.outer_bom.bom_code,
            inner_bom=draft.inner_bom.bom_code,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "attributes": self.attributes.to_dict(),
            "status": self.status.value,
            "last_modified": (
                self.last_modified.isoformat() if self.last_modified else None
            ),
            "outer_bom": self.outer_bom,
            "inner_bom": self.inner_bom,
            "wind_pressure": self.wind_pressure,
            "waterproof": self.waterproof,
            "usage_count": self.usage_count,
            "fab_portal_enabled": self.fab_portal_enabled,
        }
