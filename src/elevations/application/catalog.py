"""In-memory elevation catalog.

Receives saved drafts and serves the elevation listing. Contents live for
the lifetime of the process only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from elevations.domain.entities import ElevationDraft, ElevationRecord
from elevations.domain.services import DraftIdAllocator

logger = logging.getLogger(__name__)


class ElevationCatalog:
    """Ordered store of elevation records.

    New draft ids continue after the highest id already in the catalog.
    """

    def __init__(self, records: Iterable[ElevationRecord] = ()) -> None:
        self._records: list[ElevationRecord] = list(records)
        start = max((r.id for r in self._records), default=0) + 1
        self.ids = DraftIdAllocator(start=start)

    def add(self, draft: ElevationDraft) -> ElevationRecord:
        """Store a saved draft and return its catalog record."""
        record = ElevationRecord.from_draft(draft)
        self._records.append(record)
        logger.info(f"Added elevation {record.id} '{record.name}' ({record.code})")
        return record

    def get(self, elevation_id: int) -> ElevationRecord | None:
        for record in self._records:
            if record.id == elevation_id:
                return record
        return None

    def find_by_code(self, code: str) -> list[ElevationRecord]:
        """All records sharing an elevation code."""
        return [r for r in self._records if r.code == code]

    def records(self) -> list[ElevationRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)
