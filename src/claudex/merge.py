"""Settings merge: fold a resolved provider config into claude's settings.

The claude CLI reads credentials from the ``env`` section of its
``settings.json``. Only the five ``ANTHROPIC_*`` keys listed in
:data:`~claudex.spec.ENV_KEYS` are ever added, overwritten or pruned here;
every other env var, the ``permissions`` block and all unrelated top-level
keys pass through untouched and in their original order.

Two modes are supported:

``strict`` (default)
    A recognized key is present afterwards exactly when its field is defined.
    ``baseUrl`` additionally has to be non-blank, while the other four fields
    are written even as empty strings.

``token``
    Only ``ANTHROPIC_BASE_URL`` and ``ANTHROPIC_AUTH_TOKEN`` are managed. The
    auth token falls back to the API key, and blank values are dropped.

Both are pure functions over :class:`SettingsDocument`; persisting the result
is the caller's job.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config_utils import ResolvedConfig
from .spec import DEFAULT_ALLOW, ENV_KEYS, MERGE_MODES, RECOGNIZED_ENV_KEYS

logger = logging.getLogger(__name__)


@dataclass
class SettingsDocument:
    """Typed view of claude's ``settings.json``.

    ``env`` and ``permissions`` are the sections the launcher understands;
    ``extra`` holds every other top-level key verbatim. ``key_order`` keeps
    the original top-level order so :meth:`to_dict` writes keys back where
    they were, with new sections appended.
    """

    env: Dict[str, Any] = field(default_factory=dict)
    permissions: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    key_order: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SettingsDocument":
        data = copy.deepcopy(data)
        order = list(data)
        env = data.pop("env", None)
        if "permissions" in data:
            perms = data.pop("permissions")
        else:
            perms = None
        if not isinstance(env, dict):
            # A non-object env cannot hold variables; start over.
            if env is not None:
                logger.debug("Replacing non-object env section: %r", env)
            env = {}
        if perms is not None and not isinstance(perms, dict):
            # Keep it opaque rather than guessing at its shape.
            data["permissions"] = perms
            perms = None
        return cls(env=env, permissions=perms, extra=data, key_order=order)

    def to_dict(self) -> Dict[str, Any]:
        sections: Dict[str, Any] = {"env": self.env}
        if self.permissions is not None:
            sections["permissions"] = self.permissions
        out: Dict[str, Any] = {}
        for key in self.key_order:
            if key in sections:
                out[key] = sections.pop(key)
            elif key in self.extra:
                out[key] = self.extra[key]
        for key, value in sections.items():
            out[key] = value
        for key, value in self.extra.items():
            out.setdefault(key, value)
        return out

    def copy(self) -> "SettingsDocument":
        return copy.deepcopy(self)


def default_settings() -> SettingsDocument:
    """Settings used when no prior file exists (or it is unreadable)."""
    return SettingsDocument(
        env={},
        permissions={"allow": list(DEFAULT_ALLOW)},
        key_order=["env", "permissions"],
    )


def _non_blank(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def supported_env_keys(fields: ResolvedConfig) -> List[str]:
    """Recognized env keys that a strict merge will leave present."""
    keys = []
    for name, env_key in ENV_KEYS.items():
        value = getattr(fields, name)
        if name == "baseUrl":
            if _non_blank(value):
                keys.append(env_key)
        elif value is not None:
            keys.append(env_key)
    return keys


def _merge_strict(env: Dict[str, Any], fields: ResolvedConfig) -> None:
    supported = set(supported_env_keys(fields))
    for key in list(env):
        if key in RECOGNIZED_ENV_KEYS and key not in supported:
            logger.debug("Removing stale %s", key)
            del env[key]

    if _non_blank(fields.baseUrl):
        env[ENV_KEYS["baseUrl"]] = fields.baseUrl
    else:
        logger.debug("Skipping ANTHROPIC_BASE_URL (not provided or empty)")

    # Set even when empty: an explicit "" clears the value for claude.
    for name in ("authToken", "apiKey", "smallFastModel", "model"):
        value = getattr(fields, name)
        if value is not None:
            env[ENV_KEYS[name]] = value


def _merge_token(env: Dict[str, Any], fields: ResolvedConfig) -> None:
    base_key = ENV_KEYS["baseUrl"]
    token_key = ENV_KEYS["authToken"]
    env.pop(base_key, None)
    env.pop(token_key, None)

    if _non_blank(fields.baseUrl):
        env[base_key] = fields.baseUrl

    if _non_blank(fields.authToken):
        env[token_key] = fields.authToken
    elif _non_blank(fields.apiKey):
        env[token_key] = fields.apiKey


def merge_settings(
    existing: Optional[SettingsDocument],
    fields: ResolvedConfig,
    mode: str = "strict",
) -> SettingsDocument:
    """Return ``existing`` with its ``env`` section rewritten for ``fields``.

    ``existing`` is not modified. ``None`` is treated as "no prior settings"
    and starts from :func:`default_settings`. Raises ``ValueError`` for an
    unknown ``mode``.
    """
    if mode not in MERGE_MODES:
        raise ValueError(f"Unknown merge mode: {mode!r}")
    doc = default_settings() if existing is None else existing.copy()
    if mode == "token":
        _merge_token(doc.env, fields)
    else:
        _merge_strict(doc.env, fields)
    return doc


__all__ = [
    "SettingsDocument",
    "default_settings",
    "supported_env_keys",
    "merge_settings",
]
