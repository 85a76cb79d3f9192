"""Allow ``python -m tokensmith``."""

from tokensmith.cli import main

main()
