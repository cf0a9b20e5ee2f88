"""Safe I/O for claude's settings file and its single-slot backup.

Helpers here are deliberately small:
 - Atomic UTF-8 writes (temp file in the same directory, fsync, rename)
 - Reading a JSON object with a clear error when the file is malformed
 - :class:`SettingsFile`, which scopes load/save/backup/restore to one fixed
   pair of paths resolved at startup

The backup is a byte-for-byte copy taken right before each overwrite; there
is no history, each backup replaces the previous one.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import BackupMissing, SettingsUnreadable
from .merge import SettingsDocument, default_settings
from .ui import warn

logger = logging.getLogger(__name__)


def atomic_write(path: Path, text: str) -> None:
    """Atomically write UTF-8 text to ``path`` with fsync.

    Creates parent directories as needed and propagates write errors after
    removing the temporary file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmppath = tempfile.mkstemp(
        prefix=path.name + ".", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError:  # pragma: no cover
                pass
        os.replace(tmppath, path)
    except BaseException:
        try:
            os.remove(tmppath)
        except OSError:  # pragma: no cover
            pass
        raise


def read_json_object(path: Path) -> Dict[str, Any]:
    """Load ``path`` as a JSON object.

    Raises :class:`SettingsUnreadable` when the content is not valid JSON or
    the top level is not an object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise SettingsUnreadable(path, str(e)) from e
    if not isinstance(data, dict):
        raise SettingsUnreadable(path, f"top level is {type(data).__name__}")
    return data


def dump_settings(doc: SettingsDocument) -> str:
    """Serialize with two-space indentation, keeping key order as built."""
    return json.dumps(doc.to_dict(), indent=2, ensure_ascii=False) + "\n"


class SettingsFile:
    """The live settings file plus its backup slot."""

    def __init__(self, path: Path, backup_path: Path):
        self.path = Path(path)
        self.backup_path = Path(backup_path)

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> SettingsDocument:
        """Return the current settings, or defaults when absent or malformed."""
        if not self.path.exists():
            return default_settings()
        try:
            return SettingsDocument.from_dict(read_json_object(self.path))
        except SettingsUnreadable as e:
            logger.debug("%s", e)
            warn(f"{self.path} is not valid JSON; using default settings")
            return default_settings()

    def write(self, doc: SettingsDocument) -> None:
        atomic_write(self.path, dump_settings(doc))
        logger.debug("Wrote %s", self.path)

    def backup(self) -> bool:
        """Copy the live file over the backup slot; ``False`` when absent."""
        if not self.path.exists():
            return False
        self.backup_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.path, self.backup_path)
        logger.debug("Backed up %s -> %s", self.path, self.backup_path)
        return True

    def restore(self) -> None:
        """Copy the backup over the live file.

        Raises :class:`BackupMissing` when there is nothing to restore.
        """
        if not self.backup_path.exists():
            raise BackupMissing(f"No backup found at {self.backup_path}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.backup_path, self.path)
        logger.debug("Restored %s from %s", self.path, self.backup_path)

    def remove(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass

    def show(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")


__all__ = [
    "atomic_write",
    "read_json_object",
    "dump_settings",
    "SettingsFile",
]
