"""
Tool models — the catalog's records and the per-project config.

ToolDefinitions are static for the process lifetime. ProjectConfig is
read fresh from ``.ai-switch.json`` on every invocation and is never
written back.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ToolKey = Literal["codex", "claude", "gemini"]


class InstallRecipe(BaseModel):
    """A labeled shell command that installs a tool.

    ``applicable_platforms`` holds ``sys.platform`` identifiers plus
    ``"wsl"``. None or empty means every platform.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    command: str
    applicable_platforms: frozenset[str] | None = None

    def applies_to(self, platform: str) -> bool:
        """Whether this recipe is offered on ``platform``."""
        if not self.applicable_platforms:
            return True
        if platform == "wsl":
            return bool(self.applicable_platforms & {"wsl", "linux"})
        return platform in self.applicable_platforms


class ToolDefinition(BaseModel):
    """One supported external CLI."""

    model_config = ConfigDict(frozen=True)

    executable_name: str
    display_name: str
    installers: tuple[InstallRecipe, ...] = ()
    fast_mode_flags: tuple[str, ...] = ()   # most preferred first


class InstallerChoice(BaseModel):
    """A prompt entry: what to show, and the command to run if picked."""

    model_config = ConfigDict(frozen=True)

    label: str
    command: str

    def to_dict(self) -> dict:
        return {"label": self.label, "command": self.command}


CANCEL_CHOICE = InstallerChoice(label="Cancel", command="")


class ProjectConfig(BaseModel):
    """Validated contents of ``.ai-switch.json``.

    Only fields that passed validation are ever set. Absence means
    "not configured"; :meth:`to_dict` emits set fields only, under
    their JSON key names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_tool: ToolKey | None = Field(default=None, alias="defaultTool")
    default_flags: list[str] | None = Field(default=None, alias="defaultFlags")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)
