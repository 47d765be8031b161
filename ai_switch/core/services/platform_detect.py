"""
Platform detection — which installer recipes apply here.

Identifiers follow ``sys.platform`` (``darwin``, ``linux``, ``win32``),
refined to ``wsl`` for Linux running under Windows. Only the outermost
caller should detect; everything below takes the platform as a value.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

logger = logging.getLogger(__name__)

_PROC_VERSION = "/proc/version"


def is_wsl(
    environ: Mapping[str, str] | None = None,
    proc_version_path: str = _PROC_VERSION,
    system: str | None = None,
) -> bool:
    """Detect a Linux kernel running inside WSL.

    Args:
        environ: Environment to inspect (default: ``os.environ``).
        proc_version_path: Kernel version file to read.
        system: Platform identifier (default: ``sys.platform``).
    """
    if (system or sys.platform) != "linux":
        return False
    env = os.environ if environ is None else environ
    if "WSL_DISTRO_NAME" in env:
        return True
    try:
        with open(proc_version_path, encoding="utf-8") as f:
            return "microsoft" in f.read().lower()
    except OSError:
        return False


def resolve_platform() -> str:
    """Return the effective platform identifier for installer matching."""
    platform = "wsl" if is_wsl() else sys.platform
    logger.debug("Resolved platform: %s", platform)
    return platform
