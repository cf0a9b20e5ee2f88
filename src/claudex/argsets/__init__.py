"""Aggregated CLI argument groups (argsets).

Small helpers that attach related groups of arguments to an
``argparse.ArgumentParser`` so ``args.py`` stays minimal:
  - add_general_args(parser)
  - add_credential_args(parser)
  - add_config_command_args(parser)
"""

from __future__ import annotations

from .general import add_general_args
from .credentials import add_credential_args
from .commands import add_config_command_args

__all__ = [
    "add_general_args",
    "add_credential_args",
    "add_config_command_args",
]
