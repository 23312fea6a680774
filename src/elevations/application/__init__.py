"""Application layer - use cases and orchestration."""

from .catalog import ElevationCatalog
from .commands import SaveElevationCommand
from .dtos import EditorView, SaveResult
from .editor import ElevationEditor

__all__ = [
    "EditorView",
    "ElevationCatalog",
    "ElevationEditor",
    "SaveElevationCommand",
    "SaveResult",
]
