"""claudex: switch the claude CLI between API providers, then launch it."""

import sys


def main() -> int:
    """Console entrypoint (``claudex``).

    Imports lazily so ``import claudex`` stays cheap for tooling that only
    needs the package metadata.
    """
    from .main_flow import main as _main

    try:
        return _main(sys.argv[1:])
    except KeyboardInterrupt:  # pragma: no cover
        return 130


__all__ = ["main"]
