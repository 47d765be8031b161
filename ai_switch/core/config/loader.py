"""
Configuration loader — reads .ai-switch.json into a ProjectConfig.

Loading is field-by-field: a bad field is reported and dropped, the
rest of the file still applies. Nothing here raises for malformed
user input; problems go to the caller's warning sink.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from ai_switch.core.models.tool import ProjectConfig
from ai_switch.core.services.tool_catalog import normalize_tool_key

_logger = logging.getLogger(__name__)

# Config filename, looked up in the project directory only
CONFIG_FILENAME = ".ai-switch.json"

FLAGS_WARNING = "Ignoring defaultFlags because it is not an array of strings."


class WarningSink(Protocol):
    """Anything with a ``warning(message)`` method, e.g. a logging.Logger."""

    def warning(self, message: str) -> None: ...


class _NullSink:
    def warning(self, message: str) -> None:
        pass


class ConfigError(Exception):
    """Raised internally when the config file cannot be read or parsed."""


def config_path(project_dir: str | Path) -> Path:
    """Path of the config file for ``project_dir``."""
    return Path(project_dir) / CONFIG_FILENAME


def _read_document(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(str(e)) from e

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        # covers JSONDecodeError and the int-digit limit
        raise ConfigError(str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _string_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return list(value)


def load_config(
    project_dir: str | Path,
    logger: WarningSink | None = None,
) -> ProjectConfig:
    """Load and validate ``<project_dir>/.ai-switch.json``.

    Args:
        project_dir: Directory holding the config file.
        logger: Receives a ``warning`` for every dropped field or
            unreadable file. Defaults to a no-op sink.

    Returns:
        A ProjectConfig whose set fields are all valid. An empty
        config when the file is missing or unusable.
    """
    sink: WarningSink = logger if logger is not None else _NullSink()

    def warn(message: str) -> None:
        _logger.debug(message)
        sink.warning(message)

    path = config_path(project_dir)
    if not path.exists():
        _logger.debug("No %s in %s", CONFIG_FILENAME, project_dir)
        return ProjectConfig()

    _logger.debug("Loading config from %s", path)
    try:
        data = _read_document(path)
    except ConfigError as e:
        warn(f"Failed to load {CONFIG_FILENAME}: {e}")
        return ProjectConfig()

    fields: dict[str, Any] = {}

    tool = data.get("defaultTool")
    if isinstance(tool, str) and tool:
        key = normalize_tool_key(tool)
        if key:
            fields["default_tool"] = key
        else:
            warn(f"Ignoring unknown defaultTool: {tool}")

    if "defaultFlags" in data:
        flags = _string_list(data["defaultFlags"])
        if flags is not None:
            fields["default_flags"] = flags
        else:
            warn(FLAGS_WARNING)

    return ProjectConfig(**fields)

