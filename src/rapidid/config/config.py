import configparser
import logging
from typing import Any


class Config:
    def __init__(self, config_file: str = None, config: dict[Any, Any] = None) -> None:
        self._config = configparser.ConfigParser()
        if config:
            self._config.read_dict(config)
        elif config_file:
            try:
                with open(config_file, "r") as f:
                    self._config.read_file(f)
            except FileNotFoundError:
                self._config.read_dict({})

    def __getattr__(self, section: str) -> Any:
        if section in self._config:
            return _Section(self._config[section])
        raise AttributeError(f"No such section: {section}")

    def has_section(self, section: str) -> bool:
        return self._config.has_section(section)


class _Section:
    def __init__(self, section: configparser.SectionProxy) -> None:
        self._section = section

    def __getattr__(self, key: str) -> str:
        if key in self._section:
            return self._section[key]
        raise AttributeError(f"No such key: {key}")

    @property
    def prefix(self) -> str:
        return self._section.get("prefix", "").strip()

    @property
    def count(self) -> int:
        return self._section.getint("count", fallback=1)

    @property
    def log_level(self) -> int:
        name = self._section.get("log_level", "INFO").strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
        return level
