# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for antsi.

Settings are layered, last wins:

1. built-in defaults;
2. ``pyproject.toml`` (``[tool.antsi]``) and ``antsi.toml`` discovered from the
   working directory upward (root-most first);
3. files passed with ``--config``;
4. CLI overrides.

See `antsi.config.model` for the settings model and `antsi.config.logging`
for the logging setup.
"""
