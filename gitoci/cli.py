"""Command line interface of git-remote-oci."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from importlib import metadata
from typing import Callable, Sequence, TextIO

from .actions import Hello, Tool, default_search_path
from .config import ConfigError, Configuration, env_bool_or, env_list_or, env_or

log = logging.getLogger(__name__)

PROG = "git-remote-oci"
SHORT_DESCRIPTION = "A Git remote helper for syncing Git repositories in OCI Registries."
VERBOSITY_ENV = "GITOCI_VERBOSITY"

Handler = Callable[[Tool, TextIO], None]


def _package_version() -> str:
    try:
        return metadata.version("gitoci")
    except metadata.PackageNotFoundError:
        return "unknown"


def _run_hello(tool: Tool, out: TextIO) -> None:
    Hello(tool).run(out)


def _run_version(tool: Tool, out: TextIO) -> None:
    out.write(f"{tool.version}\n")


def build_parser(version: str) -> argparse.ArgumentParser:
    """Build the argument parser for the root command and its subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        action="append",
        metavar="PATH",
        default=argparse.SUPPRESS,
        help="Config file search locations (env: GITOCI_CONFIG)",
    )
    common.add_argument(
        "--name",
        default=argparse.SUPPRESS,
        help="Your name (overrides config)",
    )

    parser = argparse.ArgumentParser(
        prog=PROG, description=SHORT_DESCRIPTION, parents=[common]
    )
    parser.set_defaults(tool_version=version)
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    hello = commands.add_parser(
        "hello", help="Say hello", description="Say hello", parents=[common]
    )
    hello.set_defaults(handler=_run_hello)

    version_cmd = commands.add_parser(
        "version",
        help="Print the version",
        description="Print the version",
        parents=[common],
    )
    version_cmd.set_defaults(handler=_run_version)
    return parser


def _configure_logging() -> None:
    try:
        verbosity = int(os.environ.get(VERBOSITY_ENV, "0"))
    except ValueError:
        verbosity = 0
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(stream=sys.stderr)
    logging.getLogger("gitoci").setLevel(level)


def _build_tool(args: argparse.Namespace) -> Tool:
    config_files = getattr(args, "config", None) or env_list_or(
        "GITOCI_CONFIG", default_search_path(), ":"
    )
    tool = Tool(args.tool_version, config_files=config_files)

    def env_overrides(config: Configuration) -> None:
        config.example_option = env_bool_or("GITOCI_EXAMPLE_OPTION", config.example_option)
        config.name = env_or("GITOCI_NAME", config.name)

    name_flag: str = getattr(args, "name", "")

    def flag_override(config: Configuration) -> None:
        if name_flag:
            log.info("overriding name with flag value %r", name_flag)
            config.name = name_flag

    tool.add_config_override(env_overrides, flag_override)
    return tool


def main(argv: Sequence[str] | None = None) -> int:
    """Run the git-remote-oci command and return its exit status."""
    version = _package_version()
    parser = build_parser(version)
    args = parser.parse_args(argv)

    _configure_logging()
    log.info("Software version=%s", version)

    handler: Handler | None = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(sys.stdout)
        return 0

    tool = _build_tool(args)
    try:
        handler(tool, sys.stdout)
    except (ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())