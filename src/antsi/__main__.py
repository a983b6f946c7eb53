# topmark:header:start
#
#   project      : antsi
#   file         : __main__.py
#   file_relpath : src/antsi/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running antsi via ``python -m antsi``.

Delegates to :func:`antsi.cli.main.main`, the console-script entry point.

Examples:
    Render markup from the command line::

        python -m antsi render "[fg:green](ok)"
"""

from __future__ import annotations

from antsi.cli.main import main

if __name__ == "__main__":
    main()
