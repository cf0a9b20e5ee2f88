"""Argument definitions: the ``config`` subcommand."""

from __future__ import annotations

import argparse


def add_config_command_args(p: argparse.ArgumentParser) -> None:
    """Attach the mutually exclusive ``--show``/``--restore`` actions."""
    actions = p.add_mutually_exclusive_group()
    actions.add_argument(
        "-s", "--show", action="store_true", help="Print the current claude settings"
    )
    actions.add_argument(
        "-r",
        "--restore",
        action="store_true",
        help="Restore claude settings from settings.backup.json",
    )


__all__ = ["add_config_command_args"]
