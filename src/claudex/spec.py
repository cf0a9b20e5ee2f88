"""Shared constants and defaults (recognized env keys, file names, toggles)."""

from __future__ import annotations
from typing import Dict, List, Tuple

# Resolved field name -> env var written into the claude settings file.
ENV_KEYS: Dict[str, str] = {
    "baseUrl": "ANTHROPIC_BASE_URL",
    "authToken": "ANTHROPIC_AUTH_TOKEN",
    "apiKey": "ANTHROPIC_API_KEY",
    "smallFastModel": "ANTHROPIC_SMALL_FAST_MODEL",
    "model": "ANTHROPIC_MODEL",
}
RECOGNIZED_ENV_KEYS = frozenset(ENV_KEYS.values())

CREDENTIAL_FIELDS: Tuple[str, ...] = (
    "baseUrl",
    "authToken",
    "apiKey",
    "smallFastModel",
    "model",
)

# Registry spellings accepted for each field; the first one wins.
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "baseUrl": ("baseUrl", "base_url"),
    "apiKey": ("apiKey", "api_key"),
    "authToken": ("authToken", "auth_token"),
    "model": ("model",),
    "smallFastModel": ("smallFastModel", "small_fast_model"),
}

DEFAULT_ALLOW: List[str] = ["WebFetch"]

MERGE_MODES: Tuple[str, ...] = ("strict", "token")
DEFAULT_MERGE_MODE = "strict"

CLAUDEX_DIRNAME = ".claudex"
CLAUDE_DIRNAME = ".claude"
PROVIDERS_FILE = "providers.json"
SETTINGS_FILE = "settings.json"
SETTINGS_BACKUP_FILE = "settings.backup.json"

CLAUDE_CMD = "claude"
INSTALL_HINT = "Install Claude Code first: https://claude.ai/code"

ENV_DEBUG = ("CLAUDEX_DEBUG", "DEBUG")
ENV_SKIP_CHECK = "SKIP_CLAUDE_CHECK"
ENV_SKIP_LAUNCH = "SKIP_CLAUDE_LAUNCH"
ENV_MERGE_MODE = "CLAUDEX_MERGE_MODE"
ENV_CLAUDEX_HOME = "CLAUDEX_HOME"
ENV_CLAUDE_HOME = "CLAUDE_CONFIG_DIR"

__all__ = [
    "ENV_KEYS",
    "RECOGNIZED_ENV_KEYS",
    "CREDENTIAL_FIELDS",
    "FIELD_ALIASES",
    "DEFAULT_ALLOW",
    "MERGE_MODES",
    "DEFAULT_MERGE_MODE",
    "CLAUDEX_DIRNAME",
    "CLAUDE_DIRNAME",
    "PROVIDERS_FILE",
    "SETTINGS_FILE",
    "SETTINGS_BACKUP_FILE",
    "CLAUDE_CMD",
    "INSTALL_HINT",
    "ENV_DEBUG",
    "ENV_SKIP_CHECK",
    "ENV_SKIP_LAUNCH",
    "ENV_MERGE_MODE",
    "ENV_CLAUDEX_HOME",
    "ENV_CLAUDE_HOME",
]
