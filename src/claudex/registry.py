"""Provider registry (``~/.claudex/providers.json``).

The registry maps a provider id to a flat record of credential fields::

    {
      "moonshot": {
        "name": "Moonshot",
        "baseUrl": "https://api.moonshot.cn/anthropic",
        "authToken": "sk-..."
      }
    }

Both camelCase and snake_case spellings are accepted (``base_url``,
``api_key``, ``auth_token``, ``small_fast_model``). On first use a bundled
default registry is copied into place so users have something to edit.
"""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import RegistryUnreadable
from .spec import FIELD_ALIASES

logger = logging.getLogger(__name__)


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class ProviderRecord:
    """One registry entry. Unknown keys are kept in ``extra``."""

    id: str
    name: str
    baseUrl: Optional[str] = None
    apiKey: Optional[str] = None
    authToken: Optional[str] = None
    model: Optional[str] = None
    smallFastModel: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, provider_id: str, data: Dict[str, Any]) -> "ProviderRecord":
        values: Dict[str, Optional[str]] = {}
        consumed = {"name"}
        for name, aliases in FIELD_ALIASES.items():
            values[name] = None
            for alias in aliases:
                consumed.add(alias)
                if values[name] is None and data.get(alias) is not None:
                    values[name] = _as_str(data[alias])
        extra = {k: v for k, v in data.items() if k not in consumed}
        return cls(
            id=provider_id,
            name=_as_str(data.get("name")) or provider_id,
            extra=extra,
            **values,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.apiKey or self.authToken)


class ProviderRegistry:
    """Reads provider records from a JSON file, provisioning it on demand."""

    def __init__(self, path: Path, default_path: Optional[Path] = None):
        self.path = Path(path)
        self.default_path = Path(default_path) if default_path else None

    def ensure(self) -> bool:
        """Copy the bundled default registry into place when missing.

        Returns ``True`` when a file was provisioned. A missing bundled
        default is logged and otherwise ignored.
        """
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.default_path is None or not self.default_path.exists():
            logger.warning("Default provider registry not found: %s", self.default_path)
            return False
        shutil.copyfile(self.default_path, self.path)
        logger.debug("Provisioned provider registry at %s", self.path)
        return True

    def load_all(self) -> Dict[str, ProviderRecord]:
        """Parse every record. Raises :class:`RegistryUnreadable` on bad JSON."""
        self.ensure()
        if not self.path.exists():
            logger.debug("Provider registry does not exist: %s", self.path)
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise RegistryUnreadable(f"Cannot read provider registry {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise RegistryUnreadable(
                f"Provider registry {self.path} must be a JSON object"
            )
        records: Dict[str, ProviderRecord] = {}
        for pid, entry in data.items():
            if not isinstance(entry, dict):
                logger.warning("Skipping provider %r: entry is not an object", pid)
                continue
            records[pid] = ProviderRecord.from_dict(pid, entry)
        logger.debug("Available providers: %s", ", ".join(records) or "(none)")
        return records

    def load(self, provider_id: str) -> Optional[ProviderRecord]:
        """Return the record for ``provider_id`` or ``None`` when unknown."""
        record = self.load_all().get(provider_id)
        if record is None:
            logger.debug("Provider %r not in registry", provider_id)
        return record


__all__ = ["ProviderRecord", "ProviderRegistry"]
