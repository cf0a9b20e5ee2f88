"""Resolve and validate the effective configuration for one launch.

The three sources are layered the way the CLI user expects:
 - a provider record from the registry (when ``--provider`` is given)
 - command-line overrides, which win only when non-empty
 - nothing else: there is no implicit fallback provider

``None`` means "undefined" throughout. An empty string is a defined value,
which matters to the settings merge.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from .registry import ProviderRecord
from .spec import CREDENTIAL_FIELDS
from .utils import mask_secret


@dataclass
class ResolvedConfig:
    """Credential fields that end up in claude's ``env`` section."""

    baseUrl: Optional[str] = None
    apiKey: Optional[str] = None
    authToken: Optional[str] = None
    model: Optional[str] = None
    smallFastModel: Optional[str] = None
    provider: Optional[str] = None

    def defined(self) -> Dict[str, str]:
        """Return credential fields that are defined (not ``None``)."""
        return {k: getattr(self, k) for k in CREDENTIAL_FIELDS if getattr(self, k) is not None}

    def redacted(self) -> Dict[str, Optional[str]]:
        """Dict form with secrets masked, for debug output."""
        out = asdict(self)
        for k in ("apiKey", "authToken"):
            if out[k] is not None:
                out[k] = mask_secret(out[k])
        return out


def resolve_config(
    record: Optional[ProviderRecord],
    overrides: Dict[str, Optional[str]],
    provider_id: Optional[str] = None,
) -> ResolvedConfig:
    """Overlay non-empty ``overrides`` onto ``record``.

    Without a record the overrides are taken as-is, so manual mode only ever
    defines the fields the user typed.
    """
    cfg = ResolvedConfig(provider=provider_id)
    if record is not None:
        for name in CREDENTIAL_FIELDS:
            setattr(cfg, name, getattr(record, name))
    for name in CREDENTIAL_FIELDS:
        value = overrides.get(name)
        if value:
            setattr(cfg, name, value)
    return cfg


def validate_config(cfg: ResolvedConfig, provider_mode: bool) -> List[str]:
    """Return human-readable problems; an empty list means valid.

    Manual mode needs both an API key and a base URL. Provider mode accepts
    partial records as long as one of API key, auth token or base URL is
    defined.
    """
    problems: List[str] = []
    if provider_mode:
        if cfg.apiKey is None and cfg.authToken is None and cfg.baseUrl is None:
            problems.append("At least one of api key, auth token or base URL is required")
        return problems
    if not cfg.apiKey:
        problems.append("An API key is required (--api-key)")
    if not cfg.baseUrl:
        problems.append("A base URL is required (--base-url)")
    return problems


__all__ = ["ResolvedConfig", "resolve_config", "validate_config"]
