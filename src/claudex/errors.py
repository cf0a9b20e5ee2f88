"""Error kinds raised by the launcher.

Every fatal condition is a :class:`LauncherError` carrying the process exit
code that ``main`` should return. ``SettingsUnreadable`` is the one kind that
callers recover from locally (the settings file falls back to defaults).
"""

from __future__ import annotations
from typing import List, Optional


class LauncherError(Exception):
    """Base class for launcher failures reported to the user."""

    exit_code = 1


class RegistryUnreadable(LauncherError):
    """The provider registry exists but is not a JSON object."""


class ProviderNotFound(LauncherError):
    def __init__(self, provider_id: str):
        super().__init__(f"Provider not found: {provider_id}")
        self.provider_id = provider_id


class ValidationFailed(LauncherError):
    """Required credential fields are missing."""

    def __init__(self, problems: List[str]):
        super().__init__("Configuration validation failed")
        self.problems = list(problems)


class ExternalToolMissing(LauncherError):
    exit_code = 127


class ExternalToolNonzeroExit(LauncherError):
    def __init__(self, returncode: int):
        super().__init__(f"claude exited with status {returncode}")
        self.returncode = returncode
        # Killed by signal N shows up as -N; report it the way shells do.
        self.exit_code = 128 + abs(returncode) if returncode < 0 else returncode


class BackupMissing(LauncherError):
    pass


class SettingsUnreadable(LauncherError):
    def __init__(self, path, reason: Optional[str] = None):
        msg = f"Settings file {path} is not a valid JSON object"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.path = path


__all__ = [
    "LauncherError",
    "RegistryUnreadable",
    "ProviderNotFound",
    "ValidationFailed",
    "ExternalToolMissing",
    "ExternalToolNonzeroExit",
    "BackupMissing",
    "SettingsUnreadable",
]
