"""Mapping of decoded plist trees onto the typed Dock model."""

import logging
from typing import Any

from pydantic import ValidationError

from dock_prefs.errors import SchemaMismatchError
from dock_prefs.models import DockPreferences

logger = logging.getLogger(__name__)


def map_preferences(tree: Any) -> DockPreferences:
    """
    Build :class:`DockPreferences` from a generic property list tree.

    Field renames, the ``trash-full`` default, unknown-enum fallback and
    ``tile-data`` unwrapping are declared on the models; this function runs
    the validation and reports the first failure.

    Args:
        tree: Root value returned by :func:`dock_prefs.decoder.decode_document`

    Returns:
        Fully populated, immutable DockPreferences

    Raises:
        SchemaMismatchError: On the first missing or mistyped field
    """
    if not isinstance(tree, dict):
        raise SchemaMismatchError(
            "document",
            f"expected a dictionary at the root, got {type(tree).__name__}",
        )

    try:
        prefs = DockPreferences.model_validate(tree)
    except ValidationError as e:
        first = e.errors()[0]
        raise SchemaMismatchError(_field_path(first), first["msg"]) from e

    logger.debug(
        "Mapped %d persistent apps, %d recent apps, %d files",
        len(prefs.persistent_apps),
        len(prefs.recent_apps),
        len(prefs.files),
    )
    return prefs


def _field_path(error: dict[str, Any]) -> str:
    """Render a pydantic error location as ``persistent-apps[0].file-label``."""
    path = ""
    for part in error.get("loc", ()):
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)

    ctx = error.get("ctx") or {}
    if "index" in ctx:
        path += f"[{ctx['index']}]"
    if "key" in ctx:
        path += f".{ctx['key']}"
    return path or "document"
