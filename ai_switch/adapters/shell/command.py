"""
Shell adapter — PATH probing, installer runs, and tool launches.

The single place where ai-switch spawns processes. Child processes
inherit the terminal (stdin/stdout/stderr). Failures are logged and
reported as exit codes, never raised.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from collections.abc import Sequence

logger = logging.getLogger(__name__)

# Exit code a POSIX shell uses for "command not found"
EXIT_NOT_FOUND = 127


def find_executable(executable: str) -> str | None:
    """Full path of ``executable`` on PATH, or None."""
    return shutil.which(executable)


def is_installed(executable: str) -> bool:
    """Whether ``executable`` is on PATH."""
    return find_executable(executable) is not None


def run_install_command(command: str) -> int:
    """Run a catalog install command through the shell.

    Catalog commands are fixed strings, never built from user input.

    Returns:
        The command's exit code, or 1 if it could not be started.
    """
    logger.info("Installing: %s", command)
    try:
        result = subprocess.run(command, shell=True, check=False)
    except OSError as e:
        logger.error("Install command failed to start: %s", e)
        return 1
    logger.debug("Install exited with %d", result.returncode)
    return result.returncode


def launch_tool(
    executable: str,
    args: Sequence[str],
    platform: str | None = None,
) -> int:
    """Run ``executable`` with ``args`` in the foreground.

    Windows installs npm CLIs as ``.cmd`` shims, which only start
    through the shell, so ``win32`` gets ``shell=True``.

    Returns:
        The tool's exit code; 127 when it is missing, 1 on other
        start-up errors.
    """
    cmd = [executable, *args]
    use_shell = (platform or sys.platform) == "win32"
    logger.debug("Launching %s (shell=%s)", cmd, use_shell)
    try:
        result = subprocess.run(cmd, shell=use_shell, check=False)
    except FileNotFoundError:
        logger.error("Executable not found: %s", executable)
        return EXIT_NOT_FOUND
    except OSError as e:
        logger.error("Failed to launch %s: %s", executable, e)
        return 1
    return result.returncode
