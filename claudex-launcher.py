#!/usr/bin/env python3
"""Single-file launcher for claudex.

Runs the CLI straight from a source checkout (``./claudex-launcher.py -p
moonshot``) and re-exports the package's public names so scripts and tests
can load this file as a flat module.

Strategy:
 - Prefer a static import so installed packages and frozen builds work.
 - Fall back to putting ``./src`` on ``sys.path`` when running from the repo.
"""

import importlib
import sys
from pathlib import Path


def _load_impl():
    try:
        from claudex import impl as _impl  # type: ignore

        return _impl
    except ImportError:
        pass

    _src = Path(__file__).resolve().parent / "src"
    if _src.exists():
        src_str = str(_src)
        if src_str not in sys.path:
            sys.path.insert(0, src_str)
    return importlib.import_module("claudex.impl")


_impl = _load_impl()

for _name in _impl.__all__:
    globals()[_name] = getattr(_impl, _name)

main = _impl.main

__all__ = list(_impl.__all__)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
