from __future__ import annotations

import logging
from typing import List, Optional

from .args import parse_args
from .config import LauncherConfig
from .errors import LauncherError, ValidationFailed
from .flows import (
    LaunchRequest,
    ToolRunner,
    list_providers,
    print_usage_hints,
    restore_settings,
    run_launch,
    show_settings,
)
from .io_safe import SettingsFile
from .logging_utils import configure_logging, log_event
from .registry import ProviderRegistry
from .ui import err, title, warn
from .utils import get_version


def _dispatch(args, cfg: LauncherConfig, tool: Optional[ToolRunner]) -> int:
    registry = ProviderRegistry(cfg.providers_path, cfg.bundled_providers)
    settings = SettingsFile(cfg.settings_path, cfg.backup_path)

    if args.command == "providers":
        return list_providers(registry)
    if args.command == "config":
        if args.show:
            return show_settings(settings)
        if args.restore:
            return restore_settings(settings)
        warn("Choose a config action: --show or --restore")
        return 0

    if getattr(args, "_no_args", False) or (
        not args.provider and not any(args.overrides.values())
    ):
        return print_usage_hints()

    title("claudex launcher")
    request = LaunchRequest(
        provider_id=args.provider,
        overrides=args.overrides,
        project_path=args.project_path,
    )
    return run_launch(cfg, request, registry, settings, tool)


def main(argv: Optional[List[str]] = None, tool: Optional[ToolRunner] = None) -> int:
    """Entry point for the CLI tool; returns the process exit code."""
    args = parse_args(argv)
    cfg = LauncherConfig.from_env().with_overrides(
        debug=args.debug, merge_mode=args.merge_mode
    )
    configure_logging(cfg.debug, args.log_file, args.log_json)
    if args.version:
        print(get_version())
        return 0
    logging.getLogger(__name__).debug(
        "claudex %s (settings=%s, providers=%s, mode=%s)",
        args.command,
        cfg.settings_path,
        cfg.providers_path,
        cfg.merge_mode,
    )

    try:
        return _dispatch(args, cfg, tool)
    except ValidationFailed as e:
        err(str(e))
        for problem in e.problems:
            err(f"  • {problem}")
        log_event("launch_failed", error_type=type(e).__name__)
        return e.exit_code
    except LauncherError as e:
        err(str(e))
        log_event("launch_failed", error_type=type(e).__name__)
        return e.exit_code
    except OSError as e:
        err(f"File operation failed: {e}")
        log_event("launch_failed", error_type=type(e).__name__)
        return 1
    except Exception as e:
        logging.getLogger(__name__).debug("Unexpected failure", exc_info=True)
        err(f"Unexpected error: {e}")
        log_event("launch_failed", error_type=type(e).__name__)
        return 1
    except KeyboardInterrupt:
        print()
        warn("Aborted by user.")
        return 130


__all__ = ["main"]
