"""Application entry point."""

from __future__ import annotations

import sys


def main() -> None:
    """Launch the Quadchess application."""
    from quadchess.ui.bootstrap import run_application

    sys.exit(run_application())


if __name__ == "__main__":
    main()
