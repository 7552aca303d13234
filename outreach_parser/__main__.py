"""Preview a pasted contact blob with ``python -m outreach_parser INPUT``."""
from __future__ import annotations

import sys

from .cli import build_parser, main as run_preview

PROG = "python -m outreach_parser"


def main(argv: list[str] | None = None) -> int:
    """Print usage when called bare; otherwise hand the arguments to the preview."""

    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        return run_preview(args, prog=PROG)

    build_parser(prog=PROG).print_help()
    return 2


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
