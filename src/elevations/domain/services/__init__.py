"""Domain services: pure functions over elevation attributes and BOM catalogs."""

from .bom_matcher import (
    candidate_boms,
    match_boms,
    match_inner_boms,
    match_outer_boms,
    search_boms,
)
from .catalog_filter import (
    bom_statistics,
    elevation_statistics,
    filter_bom_catalog,
    filter_elevations,
    unique_values,
)
from .code_synthesizer import generate_code, missing_fields, parse_code
from .save_gate import (
    DraftIdAllocator,
    DraftValidation,
    DraftValidationError,
    ReasonCode,
    build_draft,
    can_save,
    is_complete,
    validate_draft,
)

__all__ = [
    "DraftIdAllocator",
    "DraftValidation",
    "DraftValidationError",
    "ReasonCode",
    "bom_statistics",
    "build_draft",
    "can_save",
    "candidate_boms",
    "elevation_statistics",
    "filter_bom_catalog",
    "filter_elevations",
    "generate_code",
    "is_complete",
    "match_boms",
    "match_inner_boms",
    "match_outer_boms",
    "missing_fields",
    "parse_code",
    "search_boms",
    "unique_values",
    "validate_draft",
]
