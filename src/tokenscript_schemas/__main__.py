"""Module entry point for `python -m tokenscript_schemas`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
