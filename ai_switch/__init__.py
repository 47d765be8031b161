"""ai-switch — one CLI to run Codex, Claude Code, or Gemini."""

__version__ = "0.1.0"
