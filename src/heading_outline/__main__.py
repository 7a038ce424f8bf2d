"""Allow ``python -m heading_outline``."""

from heading_outline.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
