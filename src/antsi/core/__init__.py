# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by all antsi layers (no UI, no I/O)."""
