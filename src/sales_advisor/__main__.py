"""Package entry point.

Preferred invocation is via the installed console script:

    sales-advisor ...

For convenience we also support:

    python -m sales_advisor ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m sales_advisor`."""

    app()


if __name__ == "__main__":
    main()
