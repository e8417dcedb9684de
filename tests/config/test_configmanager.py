import os
import platform
from pathlib import Path

import pytest

from simplereadlink.configmanager import (
    ConfigManager,
    InvalidSettingError,
    default_config_dir,
    forget_config_manager,
    get_config_manager,
)


@pytest.fixture(name="config_manager")
def fixture_config_manager(tmp_path):
    config_manager = get_config_manager("testapp", config_dir=tmp_path)
    yield config_manager
    forget_config_manager("testapp")


def test_shared_instance(config_manager):
    assert get_config_manager("testapp") is config_manager


def test_config_file_location(config_manager, tmp_path):
    assert config_manager.config_file_path == tmp_path / "testapp" / "config.toml"
    assert not config_manager.config_file_path.exists()


def test_max_hops_default_when_unset(config_manager):
    assert config_manager.get_max_hops() == 50


def test_set_max_hops(config_manager):
    config_manager.set("resolver", "max_hops", 12)
    assert config_manager.get("resolver", "max_hops") == 12
    assert config_manager.get_max_hops() == 12
    assert config_manager.config_file_path.exists()


@pytest.mark.parametrize("value", [0, -3, "many", True, [1, 2]])
def test_set_rejects_invalid_max_hops(config_manager, value):
    with pytest.raises(InvalidSettingError):
        config_manager.set("resolver", "max_hops", value)
    assert config_manager.get("resolver", "max_hops") is None
    assert not config_manager.config_file_path.exists()


def test_unknown_settings_are_stored_as_given(config_manager):
    config_manager.set("resolver", "note", "kept")
    assert config_manager.get("resolver", "note") == "kept"


@pytest.mark.parametrize("text", ["max_hops = 0", 'max_hops = "many"', "max_hops = true"])
def test_invalid_max_hops_in_file_falls_back(tmp_path, text):
    config_file = tmp_path / "config.toml"
    config_file.write_text(f"[resolver]\n{text}\n")
    assert ConfigManager(config_file).get_max_hops() == 50


def test_reload_from_disk(config_manager, tmp_path):
    config_manager.set("resolver", "max_hops", 7)
    forget_config_manager("testapp")
    reloaded = get_config_manager("testapp", config_dir=tmp_path)
    assert reloaded is not config_manager
    assert reloaded.get_max_hops() == 7


def test_preserve_comments(config_manager):
    config_manager.set("resolver", "max_hops", 12)
    with open(config_manager.config_file_path, "a") as configfile:
        configfile.write("\n# This is a comment\n")
    reloaded = ConfigManager(config_manager.config_file_path)
    reloaded.set("resolver", "max_hops", 13)
    content = reloaded.config_file_path.read_text()
    assert "# This is a comment" in content
    assert ConfigManager(reloaded.config_file_path).get_max_hops() == 13


@pytest.mark.skipif(platform.system() != "Windows", reason="Test specific to Windows platform")
def test_windows_config_dir():
    expected = Path(os.getenv("APPDATA", str(Path("~\\AppData\\Roaming")))).expanduser()
    assert default_config_dir() == expected


@pytest.mark.skipif(platform.system() == "Windows", reason="Test specific to Unix-like platforms")
def test_unix_config_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_config_dir() == tmp_path
    forget_config_manager("testapp")
    try:
        config_path = get_config_manager("testapp").config_file_path
        assert config_path == tmp_path / "testapp" / "config.toml"
    finally:
        forget_config_manager("testapp")


if __name__ == "__main__":
    pytest.main()
