"""Module wrapper so ``python -m preflight.cli`` matches the console script."""

from preflight.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
