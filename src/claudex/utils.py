"""Utility helpers for the claudex launcher.

Small, dependency-free helpers used across the tool:
 - Version discovery for the installed/package build
 - Masking secrets before they reach logs or the console
 - Discovery, presence check and launching of the external ``claude`` CLI

The ``claude`` helpers take the command list as a parameter so tests can
swap it out without touching ``PATH``.
"""

from __future__ import annotations
import os
import re
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from .spec import CLAUDE_CMD

try:  # pragma: no cover
    from importlib.metadata import PackageNotFoundError, version as pkg_version
except Exception:  # pragma: no cover
    PackageNotFoundError = Exception  # type: ignore

    def pkg_version(_: str) -> str:  # type: ignore
        raise PackageNotFoundError


def get_version() -> str:
    """Return the tool version string.

    Lookup order (first match wins):
    1) ``importlib.metadata.version('claudex-launcher')`` (installed package)
    2) ``project.version`` from ``pyproject.toml`` (source checkout)
    3) ``"0.0.0+unknown"``
    """
    pv = getattr(sys.modules.get("claudex_launcher"), "pkg_version", pkg_version)
    try:
        return pv("claudex-launcher")
    except Exception:
        pass

    pyproj = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproj.exists():
        try:
            text = pyproj.read_text(encoding="utf-8")
        except OSError:
            text = ""
        m = re.search(r"(?ms)^\[project\].*?^version\s*=\s*\"([^\"]+)\"", text)
        if m:
            return m.group(1)
    return "0.0.0+unknown"


def mask_secret(value: Optional[str]) -> str:
    """Return ``value`` with all but its last four characters hidden."""
    if not value:
        return "(empty)"
    if len(value) <= 8:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def find_claude_cmd() -> Optional[List[str]]:
    """Locate the claude CLI; ``claude.cmd`` is accepted on Windows."""
    for name in (CLAUDE_CMD, CLAUDE_CMD + ".cmd"):
        if shutil.which(name):
            return [name]
    return None


def _platform_cmd(cmd: List[str]) -> List[str]:
    # npm installs claude as a .cmd shim on Windows, which needs a shell.
    if os.name == "nt":
        return ["cmd", "/c", subprocess.list2cmdline(cmd)]
    return cmd


def check_claude_installed(cmd: Optional[List[str]] = None) -> bool:
    """Return True when ``claude --version`` runs and exits 0."""
    cmd = cmd or find_claude_cmd()
    if not cmd:
        return False
    try:
        proc = subprocess.run(
            _platform_cmd(cmd + ["--version"]),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError:
        return False
    return proc.returncode == 0


def launch_claude(
    project_path: Optional[str] = None, cmd: Optional[List[str]] = None
) -> int:
    """Run claude in the current terminal and return its exit code.

    A ``KeyboardInterrupt`` is converted into ``130`` for consistency with
    typical shell semantics.
    """
    cmd = list(cmd or find_claude_cmd() or [CLAUDE_CMD])
    if project_path:
        cmd.append(project_path)
    try:
        return subprocess.run(_platform_cmd(cmd)).returncode
    except KeyboardInterrupt:
        return 130


__all__ = [
    "get_version",
    "pkg_version",
    "mask_secret",
    "find_claude_cmd",
    "check_claude_installed",
    "launch_claude",
    "os",
    "shutil",
    "subprocess",
]
