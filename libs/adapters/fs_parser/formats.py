from __future__ import annotations

import configparser
import json
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml

MARKER_EXTENSION = "ignore"


class ParseError(RuntimeError):
    """A config file could not be read as its extension claims."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def flatten(value: Any, prefix: str = "") -> dict[str, str]:
    """Nested mappings join with '.', list items get '[i]'."""
    out: dict[str, str] = {}
    if isinstance(value, Mapping):
        for k, v in value.items():
            key = f"{prefix}.{k}" if prefix else str(k)
            out.update(flatten(v, key))
    elif isinstance(value, list):
        if not value and prefix:
            out[prefix] = "[]"
        for i, v in enumerate(value):
            out.update(flatten(v, f"{prefix}[{i}]"))
    elif prefix:
        out[prefix] = _scalar(value)
    return out


def parse_properties(text: str) -> dict[str, str]:
    out: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        # first '=' or ':' separates key from value
        cut = min((i for i in (line.find("="), line.find(":")) if i >= 0), default=-1)
        if cut < 0:
            out[line] = ""
            continue
        out[line[:cut].strip()] = line[cut + 1 :].strip()
    return out


def parse_ini(text: str) -> dict[str, str]:
    cp = configparser.ConfigParser(interpolation=None, strict=False)
    cp.optionxform = str  # type: ignore[assignment,method-assign]
    try:
        cp.read_string(text)
    except configparser.MissingSectionHeaderError:
        # sectionless .conf files are common; treat them as DEFAULT
        cp.read_string("[DEFAULT]\n" + text)
    out: dict[str, str] = dict(cp.defaults())
    for section in cp.sections():
        for k, v in cp.items(section, raw=True):
            if k in cp.defaults() and cp.defaults()[k] == v:
                continue
            out[f"{section}.{k}"] = v
    return out


def parse_json(text: str) -> dict[str, str]:
    return flatten(json.loads(text))


def parse_yaml(text: str) -> dict[str, str]:
    return flatten(yaml.safe_load(text) or {})


def parse_toml(text: str) -> dict[str, str]:
    return flatten(tomllib.loads(text))


def parse_marker(text: str) -> dict[str, str]:
    keys: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if line and not line.startswith("#"):
            keys[line] = ""
    return keys


PARSERS: dict[str, Callable[[str], dict[str, str]]] = {
    "properties": parse_properties,
    "ini": parse_ini,
    "conf": parse_ini,
    "cfg": parse_ini,
    "json": parse_json,
    "yaml": parse_yaml,
    "yml": parse_yaml,
    "toml": parse_toml,
    MARKER_EXTENSION: parse_marker,
}


def parse_file(path: Path, extension: str) -> dict[str, str]:
    parser = PARSERS[extension]
    try:
        return parser(path.read_text("utf-8"))
    except (
        OSError,
        UnicodeDecodeError,
        ValueError,
        configparser.Error,
        tomllib.TOMLDecodeError,
        yaml.YAMLError,
    ) as e:
        raise ParseError(path, str(e)) from e
