"""Exporter framework for elevation records.

Registered exporters:
- json: Elevation list in the bundled-data JSON shape
- csv: One row per elevation with an attribute per column

Usage:
    from elevations.infrastructure.exporters import ExporterRegistry, ExportManager

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["json", "csv"], records, project_name="elevations")
"""

from elevations.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)
from elevations.infrastructure.exporters.elevation_csv import ElevationCsvExporter
from elevations.infrastructure.exporters.elevation_json import ElevationJsonExporter

__all__ = [
    "ElevationCsvExporter",
    "ElevationJsonExporter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "UnsupportedFormatError",
]
