"""Entry point for ``python -m suggestions``."""

from .cli import main

if __name__ == "__main__":
    main()
