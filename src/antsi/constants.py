# topmark:header:start
#
#   project      : antsi
#   file         : constants.py
#   file_relpath : src/antsi/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ANTSI_VERSION: str = get_version("antsi")

#: Stand-alone configuration file name.
CONFIG_FILE_NAME: str = "antsi.toml"

#: Project file whose ``[tool.antsi]`` table is honored.
PYPROJECT_FILE_NAME: str = "pyproject.toml"

#: Table of ``pyproject.toml`` holding antsi settings.
PYPROJECT_TOOL_KEY: str = "antsi"
