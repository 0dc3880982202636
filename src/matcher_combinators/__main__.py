"""Module entry point for `python -m matcher_combinators`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
