"""
Doctor use case — install status of every catalog tool.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ai_switch.adapters.shell.command import find_executable
from ai_switch.core.data.catalog import TOOLS


@dataclass
class ToolStatus:
    """Whether one catalog tool is on PATH."""

    key: str
    executable: str
    path: str | None = None

    @property
    def installed(self) -> bool:
        return self.path is not None

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "executable": self.executable,
            "installed": self.installed,
            "path": self.path,
        }


def check_tools(
    which: Callable[[str], str | None] = find_executable,
) -> list[ToolStatus]:
    """Probe PATH for each tool, in catalog order."""
    return [
        ToolStatus(key=key, executable=tool.executable_name, path=which(tool.executable_name))
        for key, tool in TOOLS.items()
    ]
