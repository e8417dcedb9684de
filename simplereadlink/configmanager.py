# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import platform
from pathlib import Path
from threading import Lock
from typing import Any, Callable, Dict, Optional, Tuple, Union

import tomlkit
from loguru import logger

from simplereadlink.resolver import DEFAULT_MAX_HOPS


class InvalidSettingError(ValueError):
    """A value was rejected for a setting with a known type."""


def _check_max_hops(value: Any) -> int:
    # bool is an int subclass, but 'true' is never a hop count
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidSettingError(f"resolver.max_hops must be an integer >= 1, got {value!r}")
    return int(value)


# (section, option) -> validator returning the value to store
KNOWN_SETTINGS: Dict[Tuple[str, str], Callable[[Any], Any]] = {
    ("resolver", "max_hops"): _check_max_hops,
}


def default_config_dir() -> Path:
    """The per-user configuration root: %APPDATA% on Windows, $XDG_CONFIG_HOME elsewhere."""
    if platform.system() == "Windows":
        return Path(os.getenv("APPDATA", str(Path("~\\AppData\\Roaming")))).expanduser()
    return Path(os.getenv("XDG_CONFIG_HOME", str(Path("~/.config")))).expanduser()


class ConfigManager:
    """Settings for the simplereadlink command line, kept in a TOML file.

    The file is read once when the manager is created; comments and formatting in it
    survive later writes. `follow_link` never reads these settings, only the commands do.

    Attributes:
        config_file_path (Path): The TOML file backing this manager.
        config (tomlkit.TOMLDocument): The cached contents of that file.
    """

    def __init__(self, config_file_path: Union[str, Path]) -> None:
        self.config_file_path = Path(config_file_path)
        self.config = tomlkit.document()
        if self.config_file_path.exists():
            self.config = tomlkit.parse(self.config_file_path.read_text())

    def get(self, section: str, option: str, fallback: Optional[Any] = None) -> Any:
        """Gets a configuration value, or `fallback` if it isn't set."""
        return self.config.get(section, {}).get(option, fallback)

    def set(self, section: str, option: str, value: Any) -> None:
        """Sets a configuration value and writes the file.

        Args:
            section (str): The table within the configuration file.
            option (str): The key within the table.
            value (Any): The value to store.

        Raises:
            InvalidSettingError: `value` is not valid for a known setting such as
                ``resolver.max_hops``. Nothing is written in that case.
        """
        check = KNOWN_SETTINGS.get((section, option))
        if check is not None:
            value = check(value)
        if section not in self.config:
            self.config[section] = tomlkit.table()
        self.config[section][option] = value
        self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_file_path.write_text(tomlkit.dumps(self.config))

    def get_max_hops(self) -> int:
        """The ``resolver.max_hops`` setting, or the built-in default if unset or invalid."""
        value = self.get("resolver", "max_hops")
        if value is None:
            return DEFAULT_MAX_HOPS
        try:
            return _check_max_hops(value)
        except InvalidSettingError as e:
            logger.warning(f"Ignoring setting in {self.config_file_path}: {e}")
            return DEFAULT_MAX_HOPS


_managers: Dict[str, ConfigManager] = {}
_managers_lock = Lock()


def get_config_manager(
    app_name: str = "simplereadlink", config_dir: Optional[Union[str, Path]] = None
) -> ConfigManager:
    """Returns the shared manager for `app_name`, creating it on first use.

    Args:
        app_name (str): The application name, used as the directory under `config_dir`.
        config_dir (Optional[Union[str, Path]]): Overrides `default_config_dir()` when
            the manager is first created; ignored afterwards.
    """
    with _managers_lock:
        if app_name not in _managers:
            root = Path(config_dir) if config_dir else default_config_dir()
            _managers[app_name] = ConfigManager(root / app_name / "config.toml")
        return _managers[app_name]


def forget_config_manager(app_name: str) -> None:
    """Drops the shared manager for `app_name`, so the next request reloads from disk."""
    with _managers_lock:
        _managers.pop(app_name, None)
