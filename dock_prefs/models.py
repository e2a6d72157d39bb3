"""Typed model of the macOS Dock preferences."""

from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Any
from urllib.parse import unquote, urlparse

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    StrictBool,
    StrictStr,
    ValidationInfo,
    computed_field,
    field_validator,
)
from pydantic_core import PydanticCustomError

from dock_prefs.workspace import Workspace, default_workspace

TILE_DATA_KEY = "tile-data"
DOCK_SETTINGS_URL = "x-apple.systempreferences:com.apple.preference.dock"


class MinimizeEffect(str, Enum):
    """Animation used when a window is minimized into the Dock."""

    GENIE = "genie"
    SCALE = "scale"
    SUCK = "suck"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value: str) -> "MinimizeEffect":
        """Map a raw plist string to a member; unrecognised values become UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class Orientation(str, Enum):
    """Screen edge the Dock is attached to."""

    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value: str) -> "Orientation":
        """Map a raw plist string to a member; unrecognised values become UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class TrashState(str, Enum):
    """Trash state as reported by the Dock, keeping 'not reported' distinct."""

    FULL = "full"
    EMPTY = "empty"
    UNKNOWN = "unknown"


def _url_to_path(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme == "file":
        return unquote(parsed.path)
    return url


class FileReference(BaseModel):
    """Bookmark-style file reference stored under a tile's ``file-data`` key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url_string: StrictStr = Field(alias="_CFURLString")


class DockApp(BaseModel):
    """An application tile in the Dock."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "bundle-identifier": "com.apple.Safari",
                "is-beta": False,
                "file-label": "Safari",
                "file-data": {"_CFURLString": "file:///Applications/Safari.app/"},
            }
        },
    )

    bundle_identifier: StrictStr = Field(alias="bundle-identifier", description="The app's bundle identifier")
    is_beta: StrictBool = Field(alias="is-beta", description="Whether the app is marked as a beta build")
    file_label: StrictStr = Field(alias="file-label", description="Name shown in the Dock")
    file_data: FileReference = Field(alias="file-data", repr=False, exclude=True)

    @computed_field
    @property
    def file_url(self) -> str:
        """URL string pointing at the app bundle."""
        return self.file_data.url_string

    @computed_field
    @property
    def file_path(self) -> str:
        """Filesystem path of the app bundle."""
        return _url_to_path(self.file_data.url_string)

    def icon(self, workspace: Workspace | None = None) -> str | None:
        """Return the path of the app's icon file, or None if it cannot be found."""
        return (workspace or default_workspace()).icon_for_file(self.file_path)

    def launch(self, workspace: Workspace | None = None) -> None:
        """Open the app this tile points at."""
        (workspace or default_workspace()).open(self.file_url)

    def terminate(self, workspace: Workspace | None = None) -> None:
        """Ask the app to quit. Does nothing if it is not running."""
        (workspace or default_workspace()).terminate(self.bundle_identifier)


class DockFile(BaseModel):
    """A file or folder tile from the right-hand side of the Dock."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_label: StrictStr = Field(alias="file-label", description="Name shown in the Dock")
    file_data: FileReference = Field(alias="file-data", repr=False, exclude=True)

    @computed_field
    @property
    def file_url(self) -> str:
        """URL string as stored in the Dock."""
        return self.file_data.url_string

    @computed_field
    @property
    def file_path(self) -> str:
        """Resolved path; non-file URLs are returned unchanged."""
        return _url_to_path(self.file_data.url_string)

    def icon(self, workspace: Workspace | None = None) -> str | None:
        """Return an icon for the file's type, or None when it has no extension."""
        extension = PurePosixPath(self.file_path.rstrip("/")).suffix.lstrip(".")
        if not extension:
            return None
        return (workspace or default_workspace()).icon_for_type(extension)


class DockPreferences(BaseModel):
    """Preferences stored by the Dock in ``com.apple.dock.plist``."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "show-recents": True,
                "autohide": False,
                "show-process-indicators": True,
                "mineffect": "genie",
                "orientation": "bottom",
                "persistent-apps": [],
                "recent-apps": [],
                "persistent-others": [],
            }
        },
    )

    # Aliases are the plist keys
    show_recents: StrictBool = Field(alias="show-recents", description="Show recent apps in the Dock")
    autohide: StrictBool = Field(alias="autohide", description="Automatically hide the Dock")
    shows_process_indicators: StrictBool = Field(
        alias="show-process-indicators",
        description="Show indicator lights for running apps",
    )
    minimize_effect: MinimizeEffect = Field(alias="mineffect", description="Minimize animation")
    orientation: Orientation = Field(alias="orientation", description="Dock position on screen")
    trash_full: StrictBool = Field(
        default=False,
        alias="trash-full",
        description="Whether the Trash is full; False when the key is absent",
    )
    persistent_apps: tuple[DockApp, ...] = Field(alias="persistent-apps", description="Pinned apps in Dock order")
    recent_apps: tuple[DockApp, ...] = Field(alias="recent-apps", description="Recently used apps")
    files: tuple[DockFile, ...] = Field(alias="persistent-others", description="Files and folders")

    @field_validator("minimize_effect", "orientation", mode="before")
    @classmethod
    def _fallback_unknown(cls, value: Any, info: ValidationInfo) -> Any:
        if not isinstance(value, str):
            raise PydanticCustomError(
                "string_type",
                "Input should be a string, got {type_name}",
                {"type_name": type(value).__name__},
            )
        return cls.model_fields[info.field_name].annotation.from_raw(value)

    @field_validator("persistent_apps", "recent_apps", "files", mode="before")
    @classmethod
    def _unwrap_tiles(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        tiles = []
        for index, item in enumerate(value):
            if isinstance(item, dict):
                if TILE_DATA_KEY not in item:
                    raise PydanticCustomError(
                        "missing_tile_data",
                        "Item {index} is missing required key '{key}'",
                        {"index": index, "key": TILE_DATA_KEY},
                    )
                item = item[TILE_DATA_KEY]
            tiles.append(item)
        return tiles

    # Part of equality, so an absent key and an explicit False compare unequal
    _trash_reported: bool = PrivateAttr(default=False)

    def model_post_init(self, __context: Any) -> None:
        self._trash_reported = "trash_full" in self.model_fields_set

    @computed_field
    @property
    def trash_state(self) -> TrashState:
        """Trash state, UNKNOWN when the Dock did not write ``trash-full``."""
        if not self._trash_reported:
            return TrashState.UNKNOWN
        return TrashState.FULL if self.trash_full else TrashState.EMPTY

    @classmethod
    def load(cls, path: Path | str | None = None) -> "DockPreferences":
        """Load the current user's Dock preferences. See :func:`dock_prefs.loader.load`."""
        from dock_prefs.loader import load
        return load(path)

    @classmethod
    def unsafe_load(cls, path: Path | str | None = None) -> "DockPreferences":
        """Like :meth:`load`, but exits the process on failure."""
        from dock_prefs.loader import unsafe_load
        return unsafe_load(path)

    def open_dock_preferences(self, workspace: Workspace | None = None) -> None:
        """Open the Dock pane in System Settings."""
        (workspace or default_workspace()).open(DOCK_SETTINGS_URL)
