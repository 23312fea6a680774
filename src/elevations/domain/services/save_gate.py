"""Save gating for elevation drafts.

A draft may be saved once every required attribute and the display name are
set and both an outer and an inner BOM are selected. Validation outcomes are
returned as values; only ``build_draft`` raises, and only when called with
inputs that did not pass validation.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum

from ..entities import BomRecord, ElevationDraft
from ..value_objects import ElevationAttributes, RecordStatus
from .code_synthesizer import generate_code, missing_fields


class ReasonCode(str, Enum):
    """Why a draft can or cannot be saved."""

    OK = "ok"
    INCOMPLETE_ATTRIBUTES = "incomplete_attributes"
    MISSING_BOM_SELECTION = "missing_bom_selection"


@dataclass(frozen=True)
class DraftValidation:
    """Outcome of validating a draft.

    Attributes:
        reason: Class of requirement that is unmet, or OK.
        missing_fields: Unset required fields; includes "name" when blank.
        missing_selections: "outer" and/or "inner" for unselected BOMs.
    """

    reason: ReasonCode
    missing_fields: tuple[str, ...] = ()
    missing_selections: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.reason is ReasonCode.OK

    @property
    def message(self) -> str:
        if self.reason is ReasonCode.INCOMPLETE_ATTRIBUTES:
            return "Missing required fields: " + ", ".join(self.missing_fields)
        if self.reason is ReasonCode.MISSING_BOM_SELECTION:
            return "Missing BOM selection: " + ", ".join(self.missing_selections)
        return "Elevation is ready to save"


class DraftValidationError(Exception):
    """Raised when a draft is built from inputs that failed validation."""

    def __init__(self, validation: DraftValidation) -> None:
        self.validation = validation
        super().__init__(validation.message)


def _missing_with_name(attrs: ElevationAttributes, name: str) -> list[str]:
    missing = missing_fields(attrs)
    if not name.strip():
        missing.insert(0, "name")
    return missing


def is_complete(attrs: ElevationAttributes, name: str) -> bool:
    """True once the name and all required attributes are set."""
    return not _missing_with_name(attrs, name)


def can_save(
    attrs: ElevationAttributes,
    name: str,
    outer_bom: BomRecord | None,
    inner_bom: BomRecord | None,
) -> bool:
    """True when the draft is complete and both BOMs are selected."""
    return validate_draft(attrs, name, outer_bom, inner_bom).is_valid


def validate_draft(
    attrs: ElevationAttributes,
    name: str,
    outer_bom: BomRecord | None,
    inner_bom: BomRecord | None,
) -> DraftValidation:
    """Check every save requirement and report the first unmet class.

    Missing fields are reported before missing BOM selections.
    """
    missing = _missing_with_name(attrs, name)
    if missing:
        return DraftValidation(
            reason=ReasonCode.INCOMPLETE_ATTRIBUTES,
            missing_fields=tuple(missing),
        )

    selections = []
    if outer_bom is None:
        selections.append("outer")
    if inner_bom is None:
        selections.append("inner")
    if selections:
        return DraftValidation(
            reason=ReasonCode.MISSING_BOM_SELECTION,
            missing_selections=tuple(selections),
        )

    return DraftValidation(reason=ReasonCode.OK)


@dataclass
class DraftIdAllocator:
    """Hands out draft identifiers, unique within one running session."""

    start: int = 1
    _counter: itertools.count = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._counter = itertools.count(self.start)

    def next_id(self) -> int:
        return next(self._counter)


def build_draft(
    attrs: ElevationAttributes,
    name: str,
    outer_bom: BomRecord | None,
    inner_bom: BomRecord | None,
    draft_id: int,
    status: RecordStatus = RecordStatus.ACTIVE,
) -> ElevationDraft:
    """Construct a draft from validated inputs.

    Raises:
        DraftValidationError: If the inputs do not pass ``validate_draft``.
    """
    validation = validate_draft(attrs, name, outer_bom, inner_bom)
    if not validation.is_valid:
        raise DraftValidationError(validation)
    assert outer_bom is not None and inner_bom is not None

    return ElevationDraft(
        id=draft_id,
        name=name.strip(),
        code=generate_code(attrs),
        attributes=attrs,
        outer_bom=outer_bom,
        inner_bom=inner_bom,
        status=status,
    )
