"""Logging configuration helpers (human + JSON + file).

The launcher logs through the stdlib root logger:
 - Plain ``LEVEL: message`` lines to stderr
 - Optional JSON lines to stdout (for piping/collection)
 - Optional file logs

Debug mode (``-d``/``CLAUDEX_DEBUG``) lowers the level to ``DEBUG`` so every
launch step and the final settings document are traced. Configuration is
idempotent so tests and repeated calls do not stack handlers.
"""

from __future__ import annotations
import json
import logging
import sys
from typing import Any, Optional

_STRUCTURED_FIELDS = (
    "event",
    "provider",
    "path",
    "mode",
    "exit_code",
    "error_type",
)


class JSONFormatter(logging.Formatter):
    """Emit ``level`` and ``message`` plus structured fields set via ``extra``."""

    def format(self, record):
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for k in _STRUCTURED_FIELDS:
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        return json.dumps(payload)


def configure_logging(
    debug: bool,
    log_file: Optional[str] = None,
    log_json: bool = False,
) -> None:
    """Configure the root logger according to CLI flags.

    Parameters
    - ``debug``: ``DEBUG`` level when true, ``WARNING`` otherwise.
    - ``log_file``: Optional path to tee plain logs into.
    - ``log_json``: Also emit JSON lines to stdout.

    Handlers added by a previous call are removed first.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger()
    logger.setLevel(level)

    for h in list(logger.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            logger.removeHandler(h)
            h.close()

    fmt = "%(levelname)s: %(message)s"
    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(fmt))
    setattr(stream, "_added_by_configure_logging", True)
    logger.addHandler(stream)

    if log_json:
        json_handler = logging.StreamHandler(sys.stdout)
        json_handler.setFormatter(JSONFormatter())
        setattr(json_handler, "_added_by_configure_logging", True)
        logger.addHandler(json_handler)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter("%(asctime)s " + fmt))
        setattr(fh, "_added_by_configure_logging", True)
        logger.addHandler(fh)

    for handler in logger.handlers:
        handler.setLevel(level)


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured event log at ``level``. Never raises."""
    try:
        logging.getLogger().log(level, event, extra={"event": event, **fields})
    except Exception:
        pass


def debug_json(label: str, data: Any) -> None:
    """Log ``label`` followed by an indented JSON dump at DEBUG level."""
    logger = logging.getLogger()
    if not logger.isEnabledFor(logging.DEBUG):
        return
    try:
        dumped = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        dumped = repr(data)
    logger.debug("%s\n%s", label, dumped)


__all__ = ["configure_logging", "log_event", "debug_json", "JSONFormatter"]
