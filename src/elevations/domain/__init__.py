"""Domain layer - core business logic."""

from .entities import BomCatalog, BomRecord, ElevationDraft, ElevationRecord
from .services import (
    DraftValidation,
    ReasonCode,
    build_draft,
    can_save,
    generate_code,
    match_boms,
    match_inner_boms,
    match_outer_boms,
    search_boms,
    validate_draft,
)
from .value_objects import (
    OPTIONS,
    BomType,
    ElevationAttributes,
    RecordStatus,
)

__all__ = [
    "BomCatalog",
    "BomRecord",
    "BomType",
    "DraftValidation",
    "ElevationAttributes",
    "ElevationDraft",
    "ElevationRecord",
    "OPTIONS",
    "ReasonCode",
    "RecordStatus",
    "build_draft",
    "can_save",
    "generate_code",
    "match_boms",
    "match_inner_boms",
    "match_outer_boms",
    "search_boms",
    "validate_draft",
]
