"""Auxiliary commands: ``providers``, ``config --show/--restore`` and usage."""

from __future__ import annotations

from ..io_safe import SettingsFile
from ..registry import ProviderRegistry
from ..ui import CYAN, GREEN, c, hint, info, ok, title, warn


def list_providers(registry: ProviderRegistry) -> int:
    """Print every registry entry with its base URL and key status."""
    title("Available providers")
    records = registry.load_all()
    if not records:
        warn(f"No providers configured in {registry.path}")
    for pid, rec in records.items():
        print(c(f"\n• {rec.name} ({pid})", GREEN))
        hint(f"   Base URL: {rec.baseUrl or '(not set)'}")
        hint(f"   Credentials: {'configured' if rec.has_credentials else 'missing'}")
        if rec.model:
            hint(f"   Model: {rec.model}")
    hint(f"\nEdit {registry.path} to add providers or keys.")
    print(c("\nExamples:", CYAN))
    print("  claudex -p moonshot")
    print("  claudex -k <api-key> -u <base-url>")
    return 0


def show_settings(settings: SettingsFile) -> int:
    text = settings.show()
    if text is None:
        warn(f"Settings file does not exist: {settings.path}")
        return 0
    info(f"Current claude settings ({settings.path}):")
    print(text.rstrip("\n"))
    return 0


def restore_settings(settings: SettingsFile) -> int:
    """Restore the backup; :class:`BackupMissing` propagates to ``main``."""
    settings.restore()
    ok(f"Restored {settings.path} from {settings.backup_path.name}")
    return 0


def print_usage_hints() -> int:
    print(c("Usage:", CYAN))
    hint("  With a configured provider:")
    hint("    claudex -p moonshot [project-path]")
    hint("    claudex -p zhipu [project-path]")
    print()
    hint("  With explicit credentials:")
    hint("    claudex -k <api-key> -u <base-url> [project-path]")
    print()
    print(c("More options:", CYAN))
    hint("  claudex --help")
    hint("  claudex providers")
    return 0


__all__ = ["list_providers", "show_settings", "restore_settings", "print_usage_hints"]
