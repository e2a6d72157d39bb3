"""Exceptions raised while loading Dock preferences."""

from pathlib import Path


class DockPreferencesError(Exception):
    """Base class for every failure in the load pipeline."""


class NotFoundError(DockPreferencesError):
    """The preferences file does not exist."""

    def __init__(self, path: Path | str):
        self.path = str(path)
        super().__init__(f"Dock preferences not found: {self.path}")


class ReadFailureError(DockPreferencesError):
    """The preferences file exists but could not be read."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read {self.path}: {reason}")


class MalformedDocumentError(DockPreferencesError):
    """The bytes are not a valid XML or binary property list."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed property list: {reason}")


class SchemaMismatchError(DockPreferencesError):
    """
    The property list parsed, but does not match the Dock schema.

    Attributes:
        field: Dotted wire path of the first offending key
            (e.g. ``persistent-apps[0].bundle-identifier``)
        reason: What was wrong with it
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Schema mismatch at '{field}': {reason}")
