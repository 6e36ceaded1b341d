"""Allow ``python -m binaryscarf``."""

from binaryscarf.cli.main import main

main()
