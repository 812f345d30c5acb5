"""Reader for the reflector's .ini configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_KEY_DELIMITERS = " \t=\r\n"
_VALUE_DELIMITERS = "\r\n"
_INT_RE = re.compile(r"\s*([+-]?\d+)")


class ConfigError(Exception):
    """Raised when the configuration file cannot be read."""


class _Section(Enum):
    NONE = auto()
    GENERAL = auto()
    ID_LOOKUP = auto()
    LOG = auto()
    NETWORK = auto()
    NXCORE = auto()


_SECTION_HEADERS = (
    ("[General]", _Section.GENERAL),
    ("[Id Lookup]", _Section.ID_LOOKUP),
    ("[Log]", _Section.LOG),
    ("[Network]", _Section.NETWORK),
    ("[NXCore]", _Section.NXCORE),
)


@dataclass
class Config:
    """Settings of the reflector, with the defaults used when a key is absent."""

    tg: int = 9999
    daemon: bool = False
    lookup_name: str = ""
    lookup_time: int = 0
    log_display_level: int = 0
    log_file_level: int = 0
    log_file_path: str = ""
    log_file_root: str = ""
    network_port: int = 0
    network_debug: bool = False
    nxcore_enabled: bool = False
    nxcore_address: str = ""
    nxcore_tg_enable: int = 0
    nxcore_tg_disable: int = 0
    nxcore_debug: bool = False


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _u16(text: str) -> int:
    return _atoi(text) & 0xFFFF


def _u32(text: str) -> int:
    return _atoi(text) & 0xFFFFFFFF


def _flag(text: str) -> bool:
    return _atoi(text) == 1


def _split_key_value(line: str) -> tuple[str | None, str]:
    """Split a line into key and value the way the file format expects."""
    start = 0
    while start < len(line) and line[start] in _KEY_DELIMITERS:
        start += 1
    if start == len(line):
        return None, ""
    end = start
    while end < len(line) and line[end] not in _KEY_DELIMITERS:
        end += 1
    key = line[start:end]

    rest = line[end + 1:]
    rest = rest.lstrip(_VALUE_DELIMITERS)
    stop = len(rest)
    for delimiter in _VALUE_DELIMITERS:
        index = rest.find(delimiter)
        if index != -1:
            stop = min(stop, index)
    return key, rest[:stop]


_SETTERS = {
    _Section.GENERAL: {
        "Daemon": ("daemon", _flag),
        "TG": ("tg", _u16),
    },
    _Section.ID_LOOKUP: {
        "Name": ("lookup_name", str),
        "Time": ("lookup_time", _u32),
    },
    _Section.LOG: {
        "FilePath": ("log_file_path", str),
        "FileRoot": ("log_file_root", str),
        "FileLevel": ("log_file_level", _u32),
        "DisplayLevel": ("log_display_level", _u32),
    },
    _Section.NETWORK: {
        "Port": ("network_port", _u32),
        "Debug": ("network_debug", _flag),
    },
    _Section.NXCORE: {
        "Enabled": ("nxcore_enabled", _flag),
        "Address": ("nxcore_address", str),
        "TGEnable": ("nxcore_tg_enable", _u16),
        "TGDisable": ("nxcore_tg_disable", _u16),
        "Debug": ("nxcore_debug", _flag),
    },
}


def load_config(path: str) -> Config:
    """Read the configuration file at ``path``; raise ConfigError if it cannot be opened."""
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        raise ConfigError(f"Couldn't open the .ini file - {path}") from exc

    config = Config()
    section = _Section.NONE
    with handle:
        for line in handle:
            if line.startswith("#"):
                continue
            if line.startswith("["):
                section = next(
                    (sect for header, sect in _SECTION_HEADERS if line.startswith(header)),
                    _Section.NONE,
                )
                continue

            key, value = _split_key_value(line)
            if key is None:
                continue
            setter = _SETTERS.get(section, {}).get(key)
            if setter is not None:
                attribute, convert = setter
                setattr(config, attribute, convert(value))
    return config