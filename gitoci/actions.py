"""Actions behind the command line: locating and loading configuration, greeting."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, TextIO

from .config import Configuration, env_or, load_config

log = logging.getLogger(__name__)

_PARTS = ("gitoci", "config.yaml")

ConfigOverride = Callable[[Configuration], None]
"""A function that edits a loaded configuration in place."""


def _config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def default_search_path() -> list[str]:
    """Return the default config file locations in ascending priority order."""
    system_dirs = os.environ.get("XDG_CONFIG_DIRS") or "/etc/xdg"
    system = [Path(entry) for entry in system_dirs.split(os.pathsep) if entry]
    locations = [*reversed(system), _config_home()]
    return [str(location.joinpath(*_PARTS)) for location in locations]


def default_config_path() -> str:
    """Return the preferred location to save the configuration file to."""
    return env_or("GITOCI_CONFIG", str(_config_home().joinpath(*_PARTS)))


class Tool:
    """Shared state of all actions: version, config locations and overrides."""

    def __init__(self, version: str, config_files: Iterable[str] | None = None) -> None:
        self.version = version
        self.config_files: list[str] = (
            list(config_files) if config_files is not None else default_search_path()
        )
        self.config_overrides: list[ConfigOverride] = []

    def add_config_override(self, *args: ConfigOverride) -> None:
        """Register functions applied, in order, to the configuration after loading."""
        self.config_overrides.extend(args)

    def get_config(self) -> Configuration:
        """Load the configuration from the config files and apply the overrides."""
        config = load_config(self.config_files)
        try:
            for override in self.config_overrides:
                override(config)
        finally:
            log.debug("using config %s", config.redacted())
        return config


@dataclass
class Hello:
    """The action that greets the configured name."""

    tool: Tool

    def run(self, out: TextIO) -> None:
        """Write a greeting for the configured name to ``out``."""
        config = self.tool.get_config()
        try:
            out.write(f"Hello {config.name}\n")
        except OSError:
            log.info("couldn't say hello")
            raise