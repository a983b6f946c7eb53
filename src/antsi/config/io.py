# topmark:header:start
#
#   project      : antsi
#   file         : io.py
#   file_relpath : src/antsi/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Configuration is read from:
- ``antsi.toml`` (top-level keys), and
- ``pyproject.toml`` (the ``[tool.antsi]`` table).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from antsi.config.logging import get_logger
from antsi.constants import PYPROJECT_FILE_NAME, PYPROJECT_TOOL_KEY
from antsi.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from antsi.config.logging import AntsiLogger

TomlTable = dict[str, Any]

logger: AntsiLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_settings(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the antsi settings table of a loaded config document.

    For ``pyproject.toml`` this is ``[tool.antsi]`` (None when absent); for any
    other file the whole document.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_KEY)
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)
