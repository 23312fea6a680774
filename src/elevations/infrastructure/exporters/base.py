"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from elevations.domain.entities import ElevationRecord


logger = logging.getLogger(__name__)


class UnsupportedFormatError(KeyError):
    """Raised when no exporter is registered for a format name."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"No exporter registered for format '{format_name}'. "
            f"Available formats: {', '.join(available) or 'none'}"
        )

    def __str__(self) -> str:
        return self.args[0]


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters write a sequence of elevation records in one format.

    Attributes:
        format_name: Registry name of the format (e.g., "json", "csv").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, records: Sequence[ElevationRecord], path: Path) -> None:
        """Export records to a file."""
        ...

    @abstractmethod
    def export_string(self, records: Sequence[ElevationRecord]) -> str:
        """Export records as a string."""
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("json")
        class ElevationJsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            UnsupportedFormatError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            raise UnsupportedFormatError(format_name, cls.available_formats())
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports elevation records to one or more formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        records: Sequence[ElevationRecord],
        project_name: str = "elevations",
    ) -> dict[str, Path]:
        """Export records to every format in ``formats``.

        Files are named ``{project_name}.{extension}``.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            UnsupportedFormatError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{project_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(records, filepath)
            results[format_name] = filepath
        return results
