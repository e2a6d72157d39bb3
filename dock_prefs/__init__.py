"""Typed, read-only access to the macOS Dock preferences."""

__version__ = "0.1.0"

from dock_prefs.errors import (
    DockPreferencesError,
    MalformedDocumentError,
    NotFoundError,
    ReadFailureError,
    SchemaMismatchError,
)
from dock_prefs.loader import load, unsafe_load
from dock_prefs.models import (
    DockApp,
    DockFile,
    DockPreferences,
    MinimizeEffect,
    Orientation,
    TrashState,
)

__all__ = [
    "DockApp",
    "DockFile",
    "DockPreferences",
    "DockPreferencesError",
    "MalformedDocumentError",
    "MinimizeEffect",
    "NotFoundError",
    "Orientation",
    "ReadFailureError",
    "SchemaMismatchError",
    "TrashState",
    "load",
    "unsafe_load",
]
