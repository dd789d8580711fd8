"""Allow running the console with ``python -m pgshell``."""

from pgshell.adapters.inbound.cli import main

if __name__ == "__main__":
    main()
