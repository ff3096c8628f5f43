"""Allow ``python -m hooklink``."""

from hooklink.main import main

main()
