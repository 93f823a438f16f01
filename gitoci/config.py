"""Configuration file model, loading and environment helpers."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

GROUP = "gitoci.act3-ai.io"
VERSION = "v1alpha1"
API_VERSION = f"{GROUP}/{VERSION}"
KIND = "Configuration"

DEFAULT_NAME = "None"
REDACTED = "[REDACTED]"

_COMMENT_HEAD = "git-remote-oci Configuration File\nStores configuration for git-remote-oci"
_COMMENT_FOOT = "Comments added by the user will not be preserved in this file"

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


class ConfigError(Exception):
    """Raised when configuration cannot be read, parsed or written."""


def redact_string(value: str) -> str:
    """Hide a sensitive string, leaving empty strings empty."""
    return REDACTED if value else ""


def _comment(text: str) -> list[str]:
    return [f"# {line}" if line else "#" for line in text.splitlines()]


def _yaml_field(key: str, value: Any) -> str:
    return yaml.safe_dump(
        {key: value},
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
    ).rstrip("\n")


@dataclass
class Configuration:
    """A user's configuration settings."""

    name: str = ""
    example_option: bool = False
    api_version: str = ""
    kind: str = ""

    def apply_defaults(self) -> None:
        """Set the type fields and fill in values left unset."""
        self.api_version = API_VERSION
        self.kind = KIND
        if not self.name:
            self.name = DEFAULT_NAME

    def redacted(self) -> Configuration:
        """Return a copy safe to log, with sensitive fields hidden."""
        return dataclasses.replace(self, name=redact_string(self.name))

    def to_dict(self) -> dict[str, Any]:
        """Return the mapping form, omitting empty optional fields."""
        data: dict[str, Any] = {}
        if self.api_version:
            data["apiVersion"] = self.api_version
        if self.kind:
            data["kind"] = self.kind
        data["name"] = self.name
        if self.example_option:
            data["exampleOption"] = True
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Configuration:
        """Build a configuration from its mapping form."""
        if not isinstance(data, Mapping):
            raise ConfigError("configuration must be a mapping")
        api_version = data.get("apiVersion", "")
        if api_version and api_version != API_VERSION:
            raise ConfigError(f"unsupported apiVersion {api_version!r}")
        kind = data.get("kind", "")
        if kind and kind != KIND:
            raise ConfigError(f"unsupported kind {kind!r}")
        name = data.get("name", "")
        if name is None:
            name = ""
        if not isinstance(name, str):
            raise ConfigError("name must be a string")
        example_option = data.get("exampleOption", False)
        if example_option is None:
            example_option = False
        if not isinstance(example_option, bool):
            raise ConfigError("exampleOption must be a boolean")
        return cls(
            name=name,
            example_option=example_option,
            api_version=api_version or "",
            kind=kind or "",
        )

    def to_documented_yaml(self) -> str:
        """Render the configuration as YAML with comments explaining each field."""
        sections = [
            "\n".join(
                [
                    *_comment(_COMMENT_HEAD),
                    "",
                    _yaml_field("kind", KIND),
                    _yaml_field("apiVersion", API_VERSION),
                ]
            ),
            "\n".join([*_comment("Your name"), _yaml_field("name", self.name)]),
            "\n".join(
                [*_comment("Example option"), _yaml_field("exampleOption", self.example_option)]
            ),
            "\n".join(_comment(_COMMENT_FOOT)),
        ]
        return "\n\n".join(sections) + "\n"

    def write(self, path: str | os.PathLike[str]) -> None:
        """Write the documented configuration file to ``path``."""
        content = self.to_documented_yaml()
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"could not write config file {str(path)!r}: {exc}") from exc


def load_config(paths: Iterable[str | os.PathLike[str]]) -> Configuration:
    """Load configuration from files in ascending priority order.

    Missing files are skipped; later files override fields set by earlier ones.
    Defaults are applied to the result.
    """
    merged: dict[str, Any] = {}
    for path in paths:
        file = Path(path)
        try:
            text = file.read_text(encoding="utf-8")
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise ConfigError(f"could not read config file {str(file)!r}: {exc}") from exc
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"could not parse config file {str(file)!r}: {exc}") from exc
        if data is None:
            continue
        if not isinstance(data, Mapping):
            raise ConfigError(f"config file {str(file)!r} must hold a mapping")
        Configuration.from_dict(data)
        merged.update(data)
    config = Configuration.from_dict(merged)
    config.apply_defaults()
    return config


def env_or(name: str, default: str) -> str:
    """Return the environment variable ``name``, or ``default`` when unset or empty."""
    return os.environ.get(name) or default


def env_bool_or(name: str, default: bool) -> bool:
    """Return the environment variable ``name`` as a boolean, or ``default``."""
    value = os.environ.get(name, "")
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def env_list_or(name: str, default: Iterable[str], separator: str) -> list[str]:
    """Return the environment variable ``name`` split on ``separator``, or ``default``."""
    value = os.environ.get(name)
    if not value:
        return list(default)
    return value.split(separator)