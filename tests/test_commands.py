import importlib.util
import json
import sys
from pathlib import Path

import pytest


def load_cli():
    spec = importlib.util.spec_from_file_location(
        "claudex_launcher", Path(__file__).resolve().parents[1] / "claudex-launcher.py"
    )
    cli = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = cli
    spec.loader.exec_module(cli)
    return cli


def setup_home(monkeypatch, tmp_path):
    monkeypatch.setenv("CLAUDEX_HOME", str(tmp_path / ".claudex"))
    monkeypatch.setenv("CLAUDE_CONFIG_DIR", str(tmp_path / ".claude"))
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("CLAUDEX_DEBUG", raising=False)
    return tmp_path / ".claude" / "settings.json", tmp_path / ".claude" / "settings.backup.json"


def test_providers_lists_registry(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    setup_home(monkeypatch, tmp_path)
    reg = tmp_path / ".claudex" / "providers.json"
    reg.parent.mkdir(parents=True)
    reg.write_text(
        json.dumps(
            {
                "moonshot": {"name": "Moonshot", "baseUrl": "https://m.test", "authToken": "t"},
                "bare": {"name": "Bare"},
            }
        ),
        encoding="utf-8",
    )
    assert cli.main(["providers"]) == 0
    out = capsys.readouterr().out
    assert "Moonshot (moonshot)" in out
    assert "Base URL: https://m.test" in out
    assert "Credentials: configured" in out
    assert "Bare (bare)" in out and "Credentials: missing" in out
    assert "claudex -p moonshot" in out


def test_providers_provisions_default_registry(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    setup_home(monkeypatch, tmp_path)
    assert cli.main(["providers"]) == 0
    assert (tmp_path / ".claudex" / "providers.json").exists()
    assert "(zhipu)" in capsys.readouterr().out


def test_providers_with_broken_registry(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    setup_home(monkeypatch, tmp_path)
    reg = tmp_path / ".claudex" / "providers.json"
    reg.parent.mkdir(parents=True)
    reg.write_text("nope", encoding="utf-8")
    assert cli.main(["providers"]) == 1
    assert "Cannot read provider registry" in capsys.readouterr().err


def test_config_show(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    settings, _ = setup_home(monkeypatch, tmp_path)
    assert cli.main(["config", "--show"]) == 0
    assert "does not exist" in capsys.readouterr().out
    settings.parent.mkdir(parents=True)
    settings.write_text('{\n  "env": {}\n}\n', encoding="utf-8")
    assert cli.main(["config", "-s"]) == 0
    assert '"env": {}' in capsys.readouterr().out


def test_config_restore(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    settings, backup = setup_home(monkeypatch, tmp_path)
    settings.parent.mkdir(parents=True)
    settings.write_text('{"env": {"A": "new"}}', encoding="utf-8")
    backup.write_text('{"env": {"A": "old"}}', encoding="utf-8")
    assert cli.main(["config", "--restore"]) == 0
    assert settings.read_text(encoding="utf-8") == '{"env": {"A": "old"}}'
    assert "Restored" in capsys.readouterr().out


def test_config_restore_without_backup(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    setup_home(monkeypatch, tmp_path)
    assert cli.main(["config", "--restore"]) == 1
    assert "No backup found" in capsys.readouterr().err


def test_config_requires_action(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    setup_home(monkeypatch, tmp_path)
    assert cli.main(["config"]) == 0
    assert "--show or --restore" in capsys.readouterr().out


def test_config_actions_are_exclusive(monkeypatch, tmp_path):
    cli = load_cli()
    setup_home(monkeypatch, tmp_path)
    with pytest.raises(SystemExit) as exc:
        cli.main(["config", "--show", "--restore"])
    assert exc.value.code == 2


def test_version_flag(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    setup_home(monkeypatch, tmp_path)
    monkeypatch.setattr(cli, "pkg_version", lambda _: "9.9.9")
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "9.9.9"


def test_no_args_flag_routes_to_usage(monkeypatch, tmp_path, capsys):
    cli = load_cli()
    settings, _ = setup_home(monkeypatch, tmp_path)
    args = cli.parse_args([])
    assert args._no_args is True
    assert cli.main([]) == 0
    assert "Usage:" in capsys.readouterr().out
    assert not settings.exists()
