"""Configuration file management for dock-prefs."""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from dock_prefs.loader import DOCK_PLIST_PATH

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Configuration for the dock-prefs command-line tool."""

    # Source document
    plist_path: str = str(DOCK_PLIST_PATH)

    # Logging
    log_level: str = "WARNING"

    # Rendering
    json_indent: int = 2
    show_empty_sections: bool = True
    trash_unknown_as_empty: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{self.log_level}'. Must be one of: {', '.join(LOG_LEVELS)}"
            )
        if self.json_indent < 0:
            raise ValueError(f"json_indent must be >= 0, got {self.json_indent}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def default_config_paths() -> list[Path]:
    return [
        Path.home() / ".dock-prefs.yaml",
        Path.home() / ".dock-prefs.yml",
        Path.home() / ".config" / "dock-prefs" / "config.yaml",
        Path.home() / ".config" / "dock-prefs" / "config.yml",
    ]


def load_config(config_path: Path | str | None = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file. If None, the first existing file of
            :func:`default_config_paths` is used.

    Returns:
        Config with loaded settings, or defaults if no config file exists

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If the file cannot be parsed or holds invalid values
    """
    if config_path:
        config_file = Path(config_path).expanduser()
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
    else:
        config_file = next((p for p in default_config_paths() if p.exists()), None)
        if config_file is None:
            return Config()

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("top level must be a mapping")
        return Config(**data)
    except (yaml.YAMLError, AttributeError, TypeError, ValueError) as e:
        raise ValueError(f"Failed to load config from {config_file}: {e}") from e


def save_example_config(output_path: Path | str) -> None:
    """
    Save an example configuration file with all options documented.

    Args:
        output_path: Where to save the example config
    """
    example = f"""# dock-prefs configuration file
# Place at ~/.dock-prefs.yaml or ~/.config/dock-prefs/config.yaml

# Dock preferences file to read
plist_path: {DOCK_PLIST_PATH}

# Log level for messages on stderr (DEBUG, INFO, WARNING, ERROR, CRITICAL)
log_level: WARNING

# Indentation of --json output
json_indent: 2

# Print section headers for empty app/file lists
show_empty_sections: true

# Show "Empty" instead of "Unknown" when the Dock did not record the Trash state
trash_unknown_as_empty: true
"""

    path = Path(output_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(example)
