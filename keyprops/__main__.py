"""Module entrypoint for running keyprops as ``python -m keyprops``."""

from __future__ import annotations

from keyprops.cli import main


if __name__ == "__main__":
    main()
