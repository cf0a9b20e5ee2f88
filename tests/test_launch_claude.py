import importlib.util
import subprocess
import sys
from pathlib import Path


def load_cli():
    spec = importlib.util.spec_from_file_location(
        "claudex_launcher", Path(__file__).resolve().parents[1] / "claudex-launcher.py"
    )
    cli = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = cli
    spec.loader.exec_module(cli)
    return cli


def make_run(monkeypatch, cli, expected_cmd, returncode):
    def fake_run(cmd, **kwargs):
        assert cmd == expected_cmd

        class R:
            pass

        r = R()
        r.returncode = returncode
        return r

    monkeypatch.setattr(cli.subprocess, "run", fake_run)


def test_launch_claude_posix(monkeypatch):
    cli = load_cli()
    monkeypatch.setattr(cli.os, "name", "posix")
    make_run(monkeypatch, cli, ["claude", "/proj"], 0)
    assert cli.launch_claude("/proj", cmd=["claude"]) == 0


def test_launch_claude_without_project(monkeypatch):
    cli = load_cli()
    monkeypatch.setattr(cli.os, "name", "posix")
    make_run(monkeypatch, cli, ["claude"], 4)
    assert cli.launch_claude(cmd=["claude"]) == 4


def test_launch_claude_windows_uses_cmd(monkeypatch):
    cli = load_cli()
    monkeypatch.setattr(cli.os, "name", "nt")
    make_run(monkeypatch, cli, ["cmd", "/c", "claude.cmd \"my proj\""], 0)
    assert cli.launch_claude("my proj", cmd=["claude.cmd"]) == 0


def test_launch_claude_keyboard_interrupt(monkeypatch):
    cli = load_cli()
    monkeypatch.setattr(cli.os, "name", "posix")

    def fake_run(cmd, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli.subprocess, "run", fake_run)
    assert cli.launch_claude(cmd=["claude"]) == 130


def test_check_claude_installed(monkeypatch):
    cli = load_cli()
    monkeypatch.setattr(cli.os, "name", "posix")
    make_run(monkeypatch, cli, ["claude", "--version"], 0)
    assert cli.check_claude_installed(["claude"]) is True
    make_run(monkeypatch, cli, ["claude", "--version"], 1)
    assert cli.check_claude_installed(["claude"]) is False


def test_check_claude_missing_binary(monkeypatch):
    cli = load_cli()
    monkeypatch.setattr(cli.shutil, "which", lambda _: None)
    assert cli.find_claude_cmd() is None
    assert cli.check_claude_installed() is False


def test_check_claude_spawn_error(monkeypatch):
    cli = load_cli()
    monkeypatch.setattr(cli.os, "name", "posix")

    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(cli.subprocess, "run", fake_run)
    assert cli.check_claude_installed(["claude"]) is False


def test_find_claude_cmd_prefers_plain_name(monkeypatch):
    cli = load_cli()
    monkeypatch.setattr(
        cli.shutil, "which", lambda name: "/usr/bin/claude" if name == "claude" else None
    )
    assert cli.find_claude_cmd() == ["claude"]


def test_mask_secret():
    cli = load_cli()
    assert cli.mask_secret(None) == "(empty)"
    assert cli.mask_secret("") == "(empty)"
    assert cli.mask_secret("short") == "*****"
    assert cli.mask_secret("sk-abcdefghijkl") == "***********ijkl"


def test_subprocess_is_stdlib_module():
    cli = load_cli()
    assert cli.subprocess is subprocess
