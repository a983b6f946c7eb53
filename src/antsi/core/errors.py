# topmark:header:start
#
#   project      : antsi
#   file         : errors.py
#   file_relpath : src/antsi/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exception hierarchy.

Library code raises these; only the CLI turns them into messages and exit codes.
"""

from __future__ import annotations


class AntsiError(Exception):
    """Base class for all antsi errors."""


class ConfigError(AntsiError):
    """Configuration file is unreadable, malformed, or holds an invalid value."""
