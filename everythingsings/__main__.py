"""Entry point for running the generator with ``python -m everythingsings``."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
