"""The launch flow: pick credentials, rewrite settings, start claude.

Stages run strictly in order::

    resolve provider -> apply overrides -> validate -> check claude
      -> back up settings -> merge and write -> launch claude

Anything that goes wrong while writing or running claude puts the previous
settings file back before the error propagates to ``main``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from ..config import LauncherConfig
from ..config_utils import ResolvedConfig, resolve_config, validate_config
from ..errors import (
    ExternalToolMissing,
    ExternalToolNonzeroExit,
    LauncherError,
    ProviderNotFound,
    ValidationFailed,
)
from ..io_safe import SettingsFile
from ..logging_utils import debug_json, log_event
from ..merge import merge_settings
from ..registry import ProviderRegistry
from ..spec import INSTALL_HINT
from ..ui import clear_screen, info, ok, step, warn
from ..utils import check_claude_installed, launch_claude, mask_secret

logger = logging.getLogger(__name__)


@dataclass
class LaunchRequest:
    """What the user asked for on the command line."""

    provider_id: Optional[str] = None
    overrides: Dict[str, Optional[str]] = field(default_factory=dict)
    project_path: Optional[str] = None


@dataclass
class ToolRunner:
    """Seams for the external claude CLI; tests replace these callables."""

    check: Callable[[], bool] = check_claude_installed
    launch: Callable[[Optional[str]], int] = launch_claude
    clear: Callable[[], None] = clear_screen


def resolve_request(request: LaunchRequest, registry: ProviderRegistry) -> ResolvedConfig:
    """Look up the provider (if any), overlay overrides and validate."""
    record = None
    if request.provider_id:
        step(f"Loading provider {request.provider_id}...")
        record = registry.load(request.provider_id)
        if record is None:
            raise ProviderNotFound(request.provider_id)
    cfg = resolve_config(record, request.overrides, request.provider_id)
    debug_json("Resolved config:", cfg.redacted())

    step("Validating configuration...")
    problems = validate_config(cfg, provider_mode=bool(request.provider_id))
    if problems:
        raise ValidationFailed(problems)
    ok("Configuration is valid")
    return cfg


def _rollback(settings: SettingsFile, backed_up: bool, existed: bool) -> None:
    info("Restoring previous settings...")
    try:
        if backed_up:
            settings.restore()
            ok("Settings restored from backup")
        elif not existed:
            settings.remove()
            ok("Removed newly written settings")
    except (LauncherError, OSError) as e:
        warn(f"Could not restore settings: {e}")


def run_launch(
    cfg: LauncherConfig,
    request: LaunchRequest,
    registry: ProviderRegistry,
    settings: SettingsFile,
    tool: Optional[ToolRunner] = None,
) -> int:
    """Run the full launch flow and return the process exit code.

    Raises :class:`~claudex.errors.LauncherError` subclasses for fatal
    conditions; ``main`` turns them into messages and exit codes.
    """
    tool = tool or ToolRunner()
    logger.debug(
        "Launch requested: provider=%s project=%s", request.provider_id, request.project_path
    )
    resolved = resolve_request(request, registry)

    if cfg.skip_check:
        warn("Skipping claude installation check (test mode)")
    else:
        step("Checking claude installation...")
        if not tool.check():
            raise ExternalToolMissing(f"claude is not installed or not on PATH. {INSTALL_HINT}")
        ok("claude is installed")

    existed = settings.exists()
    backed_up = settings.backup()
    if backed_up:
        ok(f"Backed up {settings.path.name}")

    try:
        step("Updating claude settings...")
        merged = merge_settings(settings.read(), resolved, mode=cfg.merge_mode)
        debug_json("Final claude settings:", _redact_env(merged.to_dict()))
        settings.write(merged)
        log_event(
            "settings_written",
            provider=resolved.provider or "manual",
            path=str(settings.path),
            mode=cfg.merge_mode,
        )
        ok(f"Updated {settings.path}")

        if cfg.skip_launch:
            warn("Skipping claude launch (test mode)")
            ok("Configuration updated")
            return 0

        tool.clear()
        step("Starting claude in this terminal...")
        rc = tool.launch(request.project_path)
        log_event("claude_exited", exit_code=rc)
        if rc != 0:
            raise ExternalToolNonzeroExit(rc)
        return 0
    except BaseException:
        _rollback(settings, backed_up, existed)
        raise


def _redact_env(data: dict) -> dict:
    env = data.get("env")
    if isinstance(env, dict):
        data = dict(data)
        data["env"] = {
            k: mask_secret(v) if k.endswith(("_API_KEY", "_AUTH_TOKEN")) and isinstance(v, str) else v
            for k, v in env.items()
        }
    return data


__all__ = ["LaunchRequest", "ToolRunner", "resolve_request", "run_launch"]
