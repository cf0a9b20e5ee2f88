"""Runtime configuration resolved once at startup.

:class:`LauncherConfig` replaces process-wide flags and home-derived path
constants: ``main`` builds one from the environment (plus CLI flags) and
threads it through the registry, settings manager and launch flow.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from .spec import (
    CLAUDE_DIRNAME,
    CLAUDEX_DIRNAME,
    DEFAULT_MERGE_MODE,
    ENV_CLAUDE_HOME,
    ENV_CLAUDEX_HOME,
    ENV_DEBUG,
    ENV_MERGE_MODE,
    ENV_SKIP_CHECK,
    ENV_SKIP_LAUNCH,
    MERGE_MODES,
    PROVIDERS_FILE,
    SETTINGS_BACKUP_FILE,
    SETTINGS_FILE,
)

BUNDLED_PROVIDERS = Path(__file__).resolve().parent / "data" / PROVIDERS_FILE


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class LauncherConfig:
    """Paths and toggles for a single launcher run."""

    claudex_home: Path
    claude_home: Path
    debug: bool = False
    skip_check: bool = False
    skip_launch: bool = False
    merge_mode: str = DEFAULT_MERGE_MODE
    bundled_providers: Path = BUNDLED_PROVIDERS

    @property
    def providers_path(self) -> Path:
        return self.claudex_home / PROVIDERS_FILE

    @property
    def settings_path(self) -> Path:
        return self.claude_home / SETTINGS_FILE

    @property
    def backup_path(self) -> Path:
        return self.claude_home / SETTINGS_BACKUP_FILE

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, home: Optional[Path] = None
    ) -> "LauncherConfig":
        """Build a config from environment variables.

        ``CLAUDEX_HOME`` and ``CLAUDE_CONFIG_DIR`` override the default
        ``~/.claudex`` and ``~/.claude`` directories. ``SKIP_CLAUDE_CHECK`` and
        ``SKIP_CLAUDE_LAUNCH`` are honored when set to any non-empty value,
        matching how automation scripts export them.
        """
        env = os.environ if environ is None else environ
        base = home or Path.home()
        claudex_home = Path(env.get(ENV_CLAUDEX_HOME) or base / CLAUDEX_DIRNAME)
        claude_home = Path(env.get(ENV_CLAUDE_HOME) or base / CLAUDE_DIRNAME)
        mode = (env.get(ENV_MERGE_MODE) or DEFAULT_MERGE_MODE).strip().lower()
        if mode not in MERGE_MODES:
            mode = DEFAULT_MERGE_MODE
        return cls(
            claudex_home=claudex_home.expanduser(),
            claude_home=claude_home.expanduser(),
            debug=any(_truthy(env.get(k)) for k in ENV_DEBUG),
            skip_check=bool(env.get(ENV_SKIP_CHECK)),
            skip_launch=bool(env.get(ENV_SKIP_LAUNCH)),
            merge_mode=mode,
        )

    def with_overrides(
        self, *, debug: bool = False, merge_mode: Optional[str] = None
    ) -> "LauncherConfig":
        """Return a copy with CLI flags applied on top of the environment."""
        return replace(
            self,
            debug=self.debug or debug,
            merge_mode=merge_mode or self.merge_mode,
        )


__all__ = ["LauncherConfig", "BUNDLED_PROVIDERS"]
