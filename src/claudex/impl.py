"""Public facade that re-exports the launcher's building blocks.

Collects the commonly used symbols from submodules into one flat namespace
for the single-file launcher (``claudex-launcher.py``) and for tests that
load it.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from .args import parse_args
from .config import LauncherConfig, BUNDLED_PROVIDERS
from .config_utils import ResolvedConfig, resolve_config, validate_config
from .errors import (
    LauncherError,
    RegistryUnreadable,
    ProviderNotFound,
    ValidationFailed,
    ExternalToolMissing,
    ExternalToolNonzeroExit,
    BackupMissing,
    SettingsUnreadable,
)
from .flows import (
    LaunchRequest,
    ToolRunner,
    resolve_request,
    run_launch,
    list_providers,
    show_settings,
    restore_settings,
    print_usage_hints,
)
from .io_safe import SettingsFile, atomic_write, dump_settings, read_json_object
from .logging_utils import configure_logging, log_event, debug_json
from .main_flow import main
from .merge import SettingsDocument, default_settings, merge_settings, supported_env_keys
from .registry import ProviderRecord, ProviderRegistry
from .spec import ENV_KEYS, RECOGNIZED_ENV_KEYS, DEFAULT_ALLOW, MERGE_MODES
from .ui import clear_screen, c, info, ok, warn, err, supports_color
from .utils import (
    get_version,
    pkg_version,
    mask_secret,
    find_claude_cmd,
    check_claude_installed,
    launch_claude,
)

__all__ = [
    "parse_args",
    "LauncherConfig",
    "BUNDLED_PROVIDERS",
    "ResolvedConfig",
    "resolve_config",
    "validate_config",
    "LauncherError",
    "RegistryUnreadable",
    "ProviderNotFound",
    "ValidationFailed",
    "ExternalToolMissing",
    "ExternalToolNonzeroExit",
    "BackupMissing",
    "SettingsUnreadable",
    "LaunchRequest",
    "ToolRunner",
    "resolve_request",
    "run_launch",
    "list_providers",
    "show_settings",
    "restore_settings",
    "print_usage_hints",
    "SettingsFile",
    "atomic_write",
    "dump_settings",
    "read_json_object",
    "configure_logging",
    "log_event",
    "debug_json",
    "main",
    "SettingsDocument",
    "default_settings",
    "merge_settings",
    "supported_env_keys",
    "ProviderRecord",
    "ProviderRegistry",
    "ENV_KEYS",
    "RECOGNIZED_ENV_KEYS",
    "DEFAULT_ALLOW",
    "MERGE_MODES",
    "clear_screen",
    "c",
    "info",
    "ok",
    "warn",
    "err",
    "supports_color",
    "get_version",
    "pkg_version",
    "mask_secret",
    "find_claude_cmd",
    "check_claude_installed",
    "launch_claude",
    "logging",
    "os",
    "shutil",
    "subprocess",
]
