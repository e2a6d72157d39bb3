"""Loading of the Dock preferences file from disk."""

import logging
from pathlib import Path

from dock_prefs.decoder import decode_document
from dock_prefs.errors import DockPreferencesError, NotFoundError, ReadFailureError
from dock_prefs.mapper import map_preferences
from dock_prefs.models import DockPreferences

logger = logging.getLogger(__name__)

DOCK_PLIST_PATH = Path("~/Library/Preferences/com.apple.dock.plist")


def default_plist_path() -> Path:
    """Path of the current user's Dock preferences."""
    return DOCK_PLIST_PATH.expanduser()


def read_document(path: Path | str | None = None) -> bytes:
    """
    Read the raw preferences document.

    Args:
        path: File to read. Defaults to the current user's
            ``~/Library/Preferences/com.apple.dock.plist``.

    Returns:
        File contents

    Raises:
        NotFoundError: If the file does not exist
        ReadFailureError: For any other I/O error
    """
    target = Path(path).expanduser() if path else default_plist_path()
    try:
        with open(target, "rb") as f:
            data = f.read()
    except FileNotFoundError as e:
        raise NotFoundError(target) from e
    except OSError as e:
        raise ReadFailureError(target, e.strerror or str(e)) from e

    logger.debug("Read %d bytes from %s", len(data), target)
    return data


def load(path: Path | str | None = None) -> DockPreferences:
    """
    Read, decode and map the Dock preferences.

    The file is read fresh on every call; nothing is cached.

    Raises:
        NotFoundError, ReadFailureError, MalformedDocumentError,
        SchemaMismatchError: The first failure encountered

    Example:
        >>> prefs = load()
        >>> prefs.orientation
        <Orientation.BOTTOM: 'bottom'>
    """
    data = read_document(path)
    tree = decode_document(data)
    return map_preferences(tree)


def unsafe_load(path: Path | str | None = None) -> DockPreferences:
    """
    Load the Dock preferences, terminating the process on any failure.

    Only for callers that treat a missing or unreadable preferences file
    as unrecoverable.
    """
    try:
        return load(path)
    except DockPreferencesError as e:
        logger.critical("Cannot continue without Dock preferences: %s", e)
        raise SystemExit(f"fatal: {e}") from e
