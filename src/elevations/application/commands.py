"""Application commands (use cases) for elevations."""

from __future__ import annotations

import logging

from elevations.application.catalog import ElevationCatalog
from elevations.application.dtos import SaveResult
from elevations.domain.entities import BomRecord
from elevations.domain.services import build_draft, validate_draft
from elevations.domain.value_objects import ElevationAttributes, RecordStatus

logger = logging.getLogger(__name__)


class SaveElevationCommand:
    """Command to save an elevation draft into the catalog.

    The save is all-or-nothing: when validation fails nothing is added and
    the returned result says which class of requirement is unmet.
    """

    def __init__(self, catalog: ElevationCatalog | None = None) -> None:
        self.catalog = catalog or ElevationCatalog()

    def execute(
        self,
        attrs: ElevationAttributes,
        name: str,
        outer_bom: BomRecord | None,
        inner_bom: BomRecord | None,
        status: RecordStatus = RecordStatus.ACTIVE,
    ) -> SaveResult:
        """Validate, build and hand off a draft.

        Args:
            attrs: Attribute snapshot to save.
            name: Display name.
            outer_bom: Selected outer BOM.
            inner_bom: Selected inner BOM.
            status: Status of the saved elevation.

        Returns:
            SaveResult carrying the draft on success, or the failed validation.
        """
        validation = validate_draft(attrs, name, outer_bom, inner_bom)
        if not validation.is_valid:
            logger.debug(f"Save rejected: {validation.message}")
            return SaveResult(validation=validation)

        draft = build_draft(
            attrs,
            name,
            outer_bom,
            inner_bom,
            draft_id=self.catalog.ids.next_id(),
            status=status,
        )
        self.catalog.add(draft)
        return SaveResult(validation=validation, draft=draft)
