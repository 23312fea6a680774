"""CSV exporter for elevation records."""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from elevations.domain.value_objects import ElevationAttributes
from elevations.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from elevations.domain.entities import ElevationRecord


logger = logging.getLogger(__name__)

LEADING_COLUMNS = ["id", "code", "name", "status", "last_modified"]
TRAILING_COLUMNS = ["outer_bom", "inner_bom", "usage_count", "fab_portal_enabled"]


@ExporterRegistry.register("csv")
class ElevationCsvExporter:
    """One row per elevation, attributes spread over their own columns."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export(self, records: Sequence[ElevationRecord], path: Path) -> None:
        path.write_text(self.export_string(records), encoding="utf-8", newline="")
        logger.info(f"Exported {len(records)} elevation(s) to {path}")

    def export_string(self, records: Sequence[ElevationRecord]) -> str:
        attribute_columns = list(ElevationAttributes().to_dict())
        columns = LEADING_COLUMNS + attribute_columns + TRAILING_COLUMNS

        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        for record in records:
            row = record.to_dict()
            row.update(row.pop("attributes"))
            row["big_opening"] = "Yes" if row["big_opening"] else "No"
            writer.writerow(row)
        return buffer.getvalue()
