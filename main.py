"""CLI entrypoint for serving crossword levels and verifying answers."""

from __future__ import annotations

import sys

from crossboard.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
