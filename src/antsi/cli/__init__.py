# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for antsi (click)."""
