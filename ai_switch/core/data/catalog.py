"""
Static tool catalog — every supported CLI, all platforms.

Pure data, no logic. Installers are listed in the order they are
offered; fast-mode flags from most to least preferred.
"""

from __future__ import annotations

from types import MappingProxyType

from ai_switch.core.models.tool import InstallRecipe, ToolDefinition

_DARWIN = frozenset({"darwin"})


TOOLS: MappingProxyType[str, ToolDefinition] = MappingProxyType({

    "codex": ToolDefinition(
        executable_name="codex",
        display_name="OpenAI Codex CLI",
        installers=(
            InstallRecipe(label="npm", command="npm install -g @openai/codex"),
            InstallRecipe(
                label="brew",
                command="brew install codex",
                applicable_platforms=_DARWIN,
            ),
        ),
        fast_mode_flags=("--yolo", "--dangerously-bypass-approvals-and-sandbox"),
    ),

    "claude": ToolDefinition(
        executable_name="claude",
        display_name="Anthropic Claude Code",
        installers=(
            InstallRecipe(
                label="npm",
                command="npm install -g @anthropic-ai/claude-code",
            ),
            InstallRecipe(
                label="brew",
                command="brew install --cask claude-code",
                applicable_platforms=_DARWIN,
            ),
        ),
        fast_mode_flags=("--dangerously-skip-permissions",),
    ),

    "gemini": ToolDefinition(
        executable_name="gemini",
        display_name="Google Gemini CLI",
        installers=(
            InstallRecipe(label="npm", command="npm install -g @google/gemini-cli"),
            InstallRecipe(
                label="brew",
                command="brew install gemini-cli",
                applicable_platforms=_DARWIN,
            ),
        ),
        fast_mode_flags=("--yolomode", "--yolo"),
    ),
})
