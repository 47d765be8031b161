"""
Command-line helpers — argv splitting and display quoting.

``format_shell_command`` is for echoing the command about to run.
Execution always goes through an argument vector, never this string.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ai_switch.core.models.tool import ToolDefinition
from ai_switch.core.services.tool_catalog import select_fast_mode_flag

PASSTHROUGH_DELIMITER = "--"

_SAFE_TOKEN = re.compile(r"[A-Za-z0-9._@%+=:,/-]+")


def passthrough_args(argv: Sequence[str]) -> list[str]:
    """Tokens after the first ``--``; later ``--`` tokens are kept as-is.

    Returns an empty list when ``argv`` has no ``--``.
    """
    try:
        idx = list(argv).index(PASSTHROUGH_DELIMITER)
    except ValueError:
        return []
    return list(argv[idx + 1:])


def quote_arg(arg: str) -> str:
    """Quote one token as a POSIX shell word."""
    if _SAFE_TOKEN.fullmatch(arg):
        return arg
    return "'" + arg.replace("'", "'\\''") + "'"


def format_shell_command(executable: str, args: Sequence[str]) -> str:
    """Render ``executable args...`` for display."""
    return " ".join(quote_arg(token) for token in [executable, *args])


def build_launch_args(
    tool: ToolDefinition,
    *,
    fast_mode: bool = False,
    default_flags: Sequence[str] = (),
    passthrough: Sequence[str] = (),
) -> list[str]:
    """Assemble the launch argv (without the executable).

    Order: fast-mode flag (when requested and available), configured
    default flags, then pass-through arguments.
    """
    args: list[str] = []
    if fast_mode:
        flag = select_fast_mode_flag(tool)
        if flag:
            args.append(flag)
    args.extend(default_flags)
    args.extend(passthrough)
    return args
