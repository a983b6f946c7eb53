# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi subcommands."""
