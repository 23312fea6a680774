"""JSON exporter for elevation records."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from elevations.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from elevations.domain.entities import ElevationRecord


logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.1"


@ExporterRegistry.register("json")
class ElevationJsonExporter:
    """Writes records in the same shape as the bundled elevation list."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, records: Sequence[ElevationRecord], path: Path) -> None:
        path.write_text(self.export_string(records), encoding="utf-8")
        logger.info(f"Exported {len(records)} elevation(s) to {path}")

    def export_string(self, records: Sequence[ElevationRecord]) -> str:
        data = {
            "schema_version": SCHEMA_VERSION,
            "elevations": [self._flatten(record) for record in records],
        }
        return json.dumps(data, indent=self.indent)

    @staticmethod
    def _flatten(record: ElevationRecord) -> dict:
        data = record.to_dict()
        attributes = data.pop("attributes")
        return {**data, **attributes}
