"""Subprocess execution for macOS command-line tools."""

import logging
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ShellResult:
    """Exit code and captured output of a finished command."""

    code: int
    out: str
    err: str

    @property
    def success(self) -> bool:
        return self.code == 0

    def __bool__(self) -> bool:
        return self.success


def run(cmd: list[str], timeout: int = 10) -> ShellResult:
    """
    Run a command without a shell and capture its output.

    Args:
        cmd: Executable and arguments, e.g. ``['/usr/bin/open', url]``
        timeout: Seconds before the command is abandoned

    Returns:
        ShellResult with exit code and stripped stdout/stderr

    Raises:
        TimeoutError: If the command does not finish in time
        FileNotFoundError: If the executable does not exist
    """
    logger.debug("Running %s", cmd)
    try:
        completed = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            shell=False,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise TimeoutError(f"Command timed out after {timeout}s: {' '.join(cmd)}") from e

    return ShellResult(
        code=completed.returncode,
        out=(completed.stdout or "").strip(),
        err=(completed.stderr or "").strip(),
    )
