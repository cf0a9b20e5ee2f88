"""Command flows invoked by ``main_flow.main``.

``launch`` carries the provider-switching workflow; ``commands`` holds the
small auxiliary subcommands.
"""

from __future__ import annotations

from .launch import LaunchRequest, ToolRunner, resolve_request, run_launch
from .commands import (
    list_providers,
    show_settings,
    restore_settings,
    print_usage_hints,
)

__all__ = [
    "LaunchRequest",
    "ToolRunner",
    "resolve_request",
    "run_launch",
    "list_providers",
    "show_settings",
    "restore_settings",
    "print_usage_hints",
]
