"""Allow ``python -m preflight`` to behave like the ``preflight-cli`` script."""

from preflight.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
