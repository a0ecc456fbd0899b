from __future__ import annotations

from pathlib import Path

import pytest

from profilekit.core.config import ProfileSettings, load_settings
from profilekit.core.exceptions import ConfigError
from profilekit.core.utils.paths import get_app_data_dir, get_user_config_dir


def test_unknown_search_mode_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        ProfileSettings(data_root=tmp_path, search_mode="sideways")

    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.context == {"search_mode": "sideways"}


def test_data_root_is_coerced_to_path(tmp_path: Path) -> None:
    assert ProfileSettings(data_root=str(tmp_path)).data_root == tmp_path


def test_from_config_reads_every_section(tmp_path: Path) -> None:
    cfg = {
        "profiles": {
            "data_root": str(tmp_path),
            "category": "process",
            "extension": ".json",
            "system_library": "BBL",
            "base_dir_name": "common",
            "search_mode": "recursive",
            "defaults": {"from": "Vendor", "type": "process", "instantiation": "false"},
        },
        "output": {"indent": 2},
    }

    settings = ProfileSettings.from_config(cfg)

    assert settings == ProfileSettings(
        data_root=tmp_path,
        category="process",
        system_library="BBL",
        base_dir_name="common",
        search_mode="recursive",
        default_from="Vendor",
        default_type="process",
        instantiation="false",
        indent=2,
    )


def test_null_data_root_uses_application_directory() -> None:
    settings = ProfileSettings.from_config({"profiles": {"data_root": None, "app_dir_name": "OrcaSlicer"}})

    assert settings.data_root == get_app_data_dir("OrcaSlicer")


def test_replace_ignores_none(tmp_path: Path) -> None:
    settings = ProfileSettings(data_root=tmp_path)

    assert settings.replace(search_mode=None, data_root=None) == settings
    assert settings.replace(search_mode="recursive").search_mode == "recursive"


def test_load_settings_applies_caller_overrides(tmp_path: Path) -> None:
    settings = load_settings(data_root=tmp_path, search_mode="recursive")

    assert settings.data_root == tmp_path
    assert settings.search_mode == "recursive"
    assert settings.indent == 4


def test_load_settings_reads_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROFILEKIT_PROFILES__DATA_ROOT", str(tmp_path))
    monkeypatch.setenv("PROFILEKIT_PROFILES__SYSTEM_LIBRARY", "BBL")

    settings = load_settings()

    assert settings.data_root == tmp_path
    assert settings.system_library == "BBL"


@pytest.mark.parametrize(
    ("platform", "environ", "expected"),
    [
        ("win32", {"APPDATA": "/appdata"}, Path("/appdata/OrcaSlicer")),
        ("linux", {"XDG_CONFIG_HOME": "/xdg"}, Path("/xdg/OrcaSlicer")),
        ("linux", {}, Path.home() / ".config" / "OrcaSlicer"),
        ("darwin", {}, Path.home() / "Library" / "Application Support" / "OrcaSlicer"),
        ("win32", {}, Path.home() / "AppData" / "Roaming" / "OrcaSlicer"),
    ],
)
def test_app_data_dir_per_platform(platform: str, environ: dict, expected: Path) -> None:
    assert get_app_data_dir("OrcaSlicer", platform=platform, environ=environ) == expected


def test_user_config_dir_from_environment(tmp_path: Path) -> None:
    assert get_user_config_dir() == (tmp_path / "user-config").resolve()


def test_load_settings_rejects_unknown_search_mode() -> None:
    with pytest.raises(ConfigError):
        load_settings(search_mode="sideways")
