"""Utility module for dock-prefs."""

from .logger import configure_logging
from .shell import ShellResult, run

__all__ = ["ShellResult", "configure_logging", "run"]
