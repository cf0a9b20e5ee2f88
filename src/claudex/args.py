"""Argument parsing and normalization.

``claudex`` takes an optional trailing project path, so argparse subparsers
would swallow it as an unknown command. Instead the first token is checked
against :data:`COMMANDS` and a dedicated parser is built for that command.

The returned Namespace always carries:
- ``command``: ``"launch"``, ``"providers"`` or ``"config"``
- ``overrides``: credential fields keyed by resolved-config name
- ``_no_args``: True when invoked without any CLI arguments
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .argsets import add_config_command_args, add_credential_args, add_general_args

COMMANDS = ("providers", "config")


def _launch_parser() -> argparse.ArgumentParser:
    epilog = (
        "Commands:\n"
        "  claudex providers           List providers from providers.json\n"
        "  claudex config --show       Print claude's settings.json\n"
        "  claudex config --restore    Restore settings.json from its backup\n"
    )
    p = argparse.ArgumentParser(
        prog="claudex",
        description="Launch claude with credentials from one of several API providers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    add_general_args(p)
    add_credential_args(p)
    p.add_argument("project_path", nargs="?", help="Project directory passed to claude")
    return p


def _command_parser(command: str) -> argparse.ArgumentParser:
    if command == "providers":
        p = argparse.ArgumentParser(
            prog="claudex providers", description="List configured providers"
        )
    else:
        p = argparse.ArgumentParser(
            prog="claudex config", description="Inspect or restore claude settings"
        )
        add_config_command_args(p)
    add_general_args(p)
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    - ``argv``: Optional list of tokens (defaults to ``sys.argv[1:]``).
    """
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0] in COMMANDS:
        ns = _command_parser(argv[0]).parse_args(argv[1:])
        ns.command = argv[0]
        ns.overrides = {}
        ns.merge_mode = None
    else:
        ns = _launch_parser().parse_args(argv)
        ns.command = "launch"
        ns.overrides = {
            "apiKey": ns.api_key,
            "baseUrl": ns.base_url,
            "authToken": ns.auth_token,
            "model": ns.model,
            "smallFastModel": ns.small_fast_model,
        }
    ns._no_args = len(argv) == 0
    return ns


__all__ = ["parse_args", "COMMANDS"]
