"""
Tool catalog service — lookups and installer selection.

Pure functions over the static catalog in ``core/data/catalog.py``.
Nothing here touches the filesystem or spawns processes; platform
detection happens only when the caller does not pass one.
"""

from __future__ import annotations

import logging
from typing import cast

from ai_switch.core.data.catalog import TOOLS
from ai_switch.core.models.tool import (
    CANCEL_CHOICE,
    InstallerChoice,
    ToolDefinition,
    ToolKey,
)

logger = logging.getLogger(__name__)


def normalize_tool_key(raw: str | None) -> ToolKey | None:
    """Map user input to a canonical tool key.

    Case-insensitive. Returns None for empty, absent, or unknown
    input; never raises.
    """
    if not raw or not isinstance(raw, str):
        return None
    key = raw.lower()
    if key in TOOLS:
        return cast(ToolKey, key)
    return None


def has_tool(raw: str) -> bool:
    """Whether ``raw`` names a catalog tool."""
    return normalize_tool_key(raw) is not None


def tool_keys() -> list[str]:
    """Catalog keys, in catalog order."""
    return list(TOOLS)


def get_tool_definition(key: ToolKey) -> ToolDefinition:
    """Look up an already-normalized key.

    Raises:
        KeyError: ``key`` is not in the catalog (a caller bug).
    """
    return TOOLS[key]


def get_installer_choices(
    tool: ToolDefinition,
    platform: str | None = None,
) -> list[InstallerChoice]:
    """Installer prompt entries for ``tool`` on ``platform``.

    Recipes keep catalog order. A trailing Cancel entry is always
    appended, even when no recipe applies.

    Args:
        tool: The tool to install.
        platform: ``sys.platform``-style identifier or ``"wsl"``.
            Detected when omitted.
    """
    if platform is None:
        from ai_switch.core.services.platform_detect import resolve_platform

        platform = resolve_platform()

    choices = [
        InstallerChoice(
            label=f"{recipe.label}: {recipe.command}",
            command=recipe.command,
        )
        for recipe in tool.installers
        if recipe.applies_to(platform)
    ]
    logger.debug(
        "%d installer(s) for %s on %s",
        len(choices), tool.executable_name, platform,
    )
    return [*choices, CANCEL_CHOICE]


def select_fast_mode_flag(tool: ToolDefinition) -> str | None:
    """The tool's preferred fast-mode flag, or None if it has none."""
    return tool.fast_mode_flags[0] if tool.fast_mode_flags else None
