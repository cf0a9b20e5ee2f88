"""Argument definitions: general flags shared by every command."""

from __future__ import annotations

import argparse


def add_general_args(p: argparse.ArgumentParser) -> None:
    """Attach debug/logging/version flags to the parser."""
    general = p.add_argument_group("General")
    general.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output (same as CLAUDEX_DEBUG=true)",
    )
    general.add_argument("-f", "--log-file", help="Write logs to a file")
    general.add_argument(
        "-J", "--log-json", action="store_true", help="Also log JSON to stdout"
    )
    general.add_argument(
        "-V", "--version", action="store_true", help="Print version and exit"
    )


__all__ = ["add_general_args"]
