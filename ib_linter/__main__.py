"""Allow ``python -m ib_linter``."""

from .cli import main

main()
