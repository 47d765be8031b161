"""
Launch use case — from a tool name and argv to a runnable command.

Resolves which tool to run, then assembles its argument vector from
the fast-mode flag, configured default flags, and pass-through args.
Spawning is left to the shell adapter.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ai_switch.core.models.tool import ProjectConfig, ToolKey
from ai_switch.core.services.command_line import (
    build_launch_args,
    format_shell_command,
)
from ai_switch.core.services.tool_catalog import (
    get_tool_definition,
    normalize_tool_key,
    select_fast_mode_flag,
)

logger = logging.getLogger(__name__)


class UnknownToolError(ValueError):
    """A tool name given on the command line is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


def resolve_tool(tool_arg: str | None, config: ProjectConfig) -> ToolKey | None:
    """Pick the tool to launch.

    An explicit argument wins over the configured default. Returns
    None when neither is given; the caller decides how to ask.

    Raises:
        UnknownToolError: ``tool_arg`` is given but unknown.
    """
    if tool_arg:
        key = normalize_tool_key(tool_arg)
        if key is None:
            raise UnknownToolError(tool_arg)
        return key
    return config.default_tool


@dataclass
class LaunchPlan:
    """Everything needed to echo and spawn one tool invocation."""

    tool_key: ToolKey
    executable: str
    display_name: str
    args: list[str] = field(default_factory=list)
    fast_mode: bool = False
    fast_flag: str | None = None

    @property
    def display(self) -> str:
        return format_shell_command(self.executable, self.args)

    @property
    def fast_flag_missing(self) -> bool:
        return self.fast_mode and self.fast_flag is None

    def to_dict(self) -> dict:
        return {
            "tool": self.tool_key,
            "executable": self.executable,
            "args": list(self.args),
            "command": self.display,
            "fast_mode": self.fast_mode,
            "fast_flag": self.fast_flag,
        }


def plan_launch(
    tool_key: ToolKey,
    *,
    fast_mode: bool = False,
    config: ProjectConfig | None = None,
    passthrough: Sequence[str] = (),
) -> LaunchPlan:
    """Build the launch plan for ``tool_key``."""
    tool = get_tool_definition(tool_key)
    config = config or ProjectConfig()

    fast_flag = select_fast_mode_flag(tool) if fast_mode else None
    args = build_launch_args(
        tool,
        fast_mode=fast_mode,
        default_flags=config.default_flags or (),
        passthrough=passthrough,
    )

    plan = LaunchPlan(
        tool_key=tool_key,
        executable=tool.executable_name,
        display_name=tool.display_name,
        args=args,
        fast_mode=fast_mode,
        fast_flag=fast_flag,
    )
    logger.info("Planned launch: %s", plan.display)
    return plan
