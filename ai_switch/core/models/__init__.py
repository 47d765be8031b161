"""
Domain models — Pydantic types for the tool catalog and project config.

All models are re-exported here for convenient access:

    from ai_switch.core.models import ToolDefinition, ProjectConfig
"""

from ai_switch.core.models.tool import (
    CANCEL_CHOICE,
    InstallerChoice,
    InstallRecipe,
    ProjectConfig,
    ToolDefinition,
    ToolKey,
)

__all__ = [
    "CANCEL_CHOICE",
    "InstallRecipe",
    "InstallerChoice",
    "ProjectConfig",
    "ToolDefinition",
    "ToolKey",
]
