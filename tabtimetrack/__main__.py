"""Allow ``python -m tabtimetrack``."""

from tabtimetrack.cli import main

main()
