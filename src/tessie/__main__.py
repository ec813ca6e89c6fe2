"""Allow running Tessie as ``python -m tessie``."""

from tessie.cli import main

if __name__ == "__main__":
    main()
