from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
import yaml

from profilekit.cli._dispatcher import build_parser, discover_commands, discover_domains, main


def test_domains_are_discovered() -> None:
    assert set(discover_domains()) == {"config", "profile"}
    assert set(discover_commands("profile")) == {"build", "chain", "export", "list", "locate"}


def test_no_arguments_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "profilekit" in capsys.readouterr().out


def test_domain_without_command_prints_domain_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["profile"]) == 0
    assert "build" in capsys.readouterr().out


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--version"])

    assert excinfo.value.code == 0
    assert "profilekit 1.0.0" in capsys.readouterr().out


def test_save_text_from_input_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "in.txt"
    source.write_text("layer_height = 0.2\n", encoding="utf-8")
    target = tmp_path / "nested" / "out.txt"

    assert main(["save-text", str(target), "--input", str(source)]) == 0

    assert target.read_text(encoding="utf-8") == "layer_height = 0.2\n"
    assert f"Wrote {target}" in capsys.readouterr().out


def test_save_text_from_stdin(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("héllo"))
    target = tmp_path / "out.txt"

    assert main(["save-text", str(target), "--json"]) == 0

    assert target.read_text(encoding="utf-8") == "héllo"
    assert json.loads(capsys.readouterr().out) == {"status": "success", "path": str(target), "bytes": 6}


def test_save_text_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["save-text", str(tmp_path / "out.txt"), "--input", str(tmp_path / "absent.txt")]) == 1

    assert "I/O error on" in capsys.readouterr().err
    assert not (tmp_path / "out.txt").exists()


def test_config_show_key_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["config", "show", "profiles.search_mode", "--json"]) == 0

    assert json.loads(capsys.readouterr().out) == {"profiles": {"search_mode": "tiered"}}


def test_config_show_full_yaml(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["config", "show"]) == 0

    parsed = yaml.safe_load(capsys.readouterr().out)
    assert parsed["profiles"]["system_library"] == "OrcaFilamentLibrary"


def test_config_show_missing_key(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["config", "show", "profiles.nope"]) == 1

    assert "Key not found: profiles.nope" in capsys.readouterr().out


def test_invalid_config_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_dir = tmp_path / "user-config"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("output:\n  indent: many\n", encoding="utf-8")

    assert main(["config", "show"]) == 1

    assert "indent" in capsys.readouterr().err
