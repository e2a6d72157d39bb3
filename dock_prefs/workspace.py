"""Platform collaborators: icon lookup, opening URLs and quitting apps."""

import logging
import plistlib
from pathlib import Path
from typing import Protocol

from dock_prefs.util.shell import run

logger = logging.getLogger(__name__)

OPEN_BINARY = "/usr/bin/open"
OSASCRIPT_BINARY = "/usr/bin/osascript"
CORE_TYPES_RESOURCES = Path("/System/Library/CoreServices/CoreTypes.bundle/Contents/Resources")

# Generic icons shipped in CoreTypes.bundle, keyed by file extension
TYPE_ICONS = {
    "app": "GenericApplicationIcon.icns",
    "txt": "ClippingText.icns",
    "zip": "GenericArchiveIcon.icns",
    "dmg": "GenericDiskImageIcon.icns",
}
GENERIC_DOCUMENT_ICON = "GenericDocumentIcon.icns"


class Workspace(Protocol):
    """Operations the Dock models delegate to the host system."""

    def icon_for_file(self, path: str) -> str | None: ...

    def icon_for_type(self, extension: str) -> str | None: ...

    def open(self, url: str) -> None: ...

    def terminate(self, bundle_identifier: str) -> None: ...


class MacWorkspace:
    """Workspace backed by the stock macOS command-line tools."""

    def __init__(self, timeout: int = 10):
        self.timeout = timeout

    def icon_for_file(self, path: str) -> str | None:
        """
        Locate the ``.icns`` file of an application bundle.

        Reads ``CFBundleIconFile`` from the bundle's Info.plist and resolves
        it under ``Contents/Resources``.

        Args:
            path: Filesystem path of the bundle

        Returns:
            Path to the icon file, or None if the bundle has no usable icon
        """
        bundle = Path(path)
        info_plist_path = bundle / "Contents" / "Info.plist"
        if not info_plist_path.exists():
            return None

        try:
            with open(info_plist_path, "rb") as f:
                info = plistlib.load(f)
        except (OSError, plistlib.InvalidFileException, ValueError) as e:
            logger.debug("Unreadable Info.plist in %s: %s", bundle, e)
            return None

        icon_name = info.get("CFBundleIconFile") if isinstance(info, dict) else None
        if not isinstance(icon_name, str) or not icon_name:
            return None
        if not icon_name.endswith(".icns"):
            icon_name += ".icns"

        icon_path = bundle / "Contents" / "Resources" / icon_name
        return str(icon_path) if icon_path.exists() else None

    def icon_for_type(self, extension: str) -> str | None:
        """Return the generic system icon for a file extension, if present."""
        icon_name = TYPE_ICONS.get(extension.lower(), GENERIC_DOCUMENT_ICON)
        icon_path = CORE_TYPES_RESOURCES / icon_name
        return str(icon_path) if icon_path.exists() else None

    def open(self, url: str) -> None:
        """Open a URL or application with the default handler."""
        self._fire([OPEN_BINARY, url])

    def terminate(self, bundle_identifier: str) -> None:
        """Quit the app with this bundle identifier if it is running."""
        escaped = bundle_identifier.replace("\\", "\\\\").replace('"', '\\"')
        script = (
            f'if application id "{escaped}" is running then '
            f'tell application id "{escaped}" to quit'
        )
        self._fire([OSASCRIPT_BINARY, "-e", script])

    def _fire(self, cmd: list[str]) -> None:
        # Fire-and-forget: callers get no result, failures are only logged
        try:
            result = run(cmd, timeout=self.timeout)
        except (TimeoutError, FileNotFoundError) as e:
            logger.warning("%s failed: %s", cmd[0], e)
            return
        if not result.success:
            logger.warning("%s exited with %d: %s", cmd[0], result.code, result.err)


_default: Workspace | None = None


def default_workspace() -> Workspace:
    """Return the shared :class:`MacWorkspace` instance."""
    global _default
    if _default is None:
        _default = MacWorkspace()
    return _default
