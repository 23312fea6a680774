"""Infrastructure layer - formatters and exporters."""

from .exporters import (
    ElevationCsvExporter,
    ElevationJsonExporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)
from .formatters import (
    BomTableFormatter,
    DraftFormatter,
    EditorViewFormatter,
    ElevationTableFormatter,
)

__all__ = [
    "BomTableFormatter",
    "DraftFormatter",
    "EditorViewFormatter",
    "ElevationCsvExporter",
    "ElevationJsonExporter",
    "ElevationTableFormatter",
    "ExportManager",
    "ExporterRegistry",
    "UnsupportedFormatError",
]
