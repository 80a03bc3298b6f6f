# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered configuration sources (defaults, environment, argv, overrides)."""

from __future__ import annotations

import logging
import os
import sys
from abc import abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

import click
from click.core import ParameterSource
from pydantic import ValidationError

from .config import (
    ARG_ABSOLUTE_PATHS,
    ARG_BY_ISSUE,
    ARG_FILTER,
    ENV_ABSOLUTE_PATHS,
    ENV_CI,
    ENV_EDITOR_SCHEME,
    ENV_FORCE_COLOR,
    ENV_FORCE_ITERM_HINT,
    ENV_NO_COLOR,
    ENV_NO_GRAY,
    ENV_NO_LINK_RULES,
    FormatOptions,
)
from .console import detect_tty
from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

ConfigFragment = Mapping[str, Any]

ARGV_SEPARATOR: Final[str] = "--"
GULP_MARKER: Final[str] = "gulp"
_DISABLED_FORCE_COLOR: Final[frozenset[str]] = frozenset({"0", "false"})

# Maps parsed argv parameter names onto FormatOptions fields.
_ARGV_FIELDS: Final[dict[str, str]] = {
    "eff_by_issue": "group_by_issue",
    "eff_filter": "filter_rule",
    "eff_absolute_paths": "absolute_paths",
}
_ARG_NO_ABSOLUTE_PATHS: Final[str] = f"--no-{ARG_ABSOLUTE_PATHS.removeprefix('--')}"
_BOOLEAN_FLAGS: Final[frozenset[str]] = frozenset({ARG_BY_ISSUE, ARG_ABSOLUTE_PATHS, _ARG_NO_ABSOLUTE_PATHS})
_RECOGNISED_FLAGS: Final[frozenset[str]] = _BOOLEAN_FLAGS | {ARG_FILTER}


class ConfigSource(Protocol):
    """Provide formatter option values from one configuration medium."""

    name: str

    @abstractmethod
    def load(self) -> ConfigFragment:
        """Return option values keyed by :class:`FormatOptions` field name."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of the source."""


def env_flag(env: Mapping[str, str], name: str) -> bool:
    """Return ``True`` only when ``name`` is set to the literal ``"true"``."""

    return env.get(name) == "true"


class DefaultConfigSource(ConfigSource):
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> ConfigFragment:
        return FormatOptions().model_dump()

    def describe(self) -> str:
        return "Built-in defaults"


class EnvironmentConfigSource(ConfigSource):
    """Read ``EFF_*`` variables and terminal hints from an environment mapping."""

    name = "environment"

    def __init__(self, env: Mapping[str, str], *, interactive: bool) -> None:
        self._env = env
        self._interactive = interactive

    def load(self) -> ConfigFragment:
        env = self._env
        return {
            "no_gray": env_flag(env, ENV_NO_GRAY),
            "no_link_rules": env_flag(env, ENV_NO_LINK_RULES),
            "absolute_paths": env_flag(env, ENV_ABSOLUTE_PATHS),
            "editor_scheme": env.get(ENV_EDITOR_SCHEME) or None,
            "terminal_hint": env_flag(env, ENV_FORCE_ITERM_HINT) or (self._interactive and not env.get(ENV_CI)),
            "color": self._color_enabled(),
        }

    def _color_enabled(self) -> bool:
        env = self._env
        if env.get(ENV_NO_COLOR):
            return False
        forced = env.get(ENV_FORCE_COLOR)
        if forced is not None:
            return forced.lower() not in _DISABLED_FORCE_COLOR
        return self._interactive

    def describe(self) -> str:
        return "Process environment"


def _argv_command() -> click.Command:
    """Return a click command that recognises only the ``--eff-*`` flags."""

    return click.Command(
        "eff",
        params=[
            click.Option([ARG_BY_ISSUE], is_flag=True),
            click.Option([ARG_FILTER], type=str),
            click.Option([f"{ARG_ABSOLUTE_PATHS}/{_ARG_NO_ABSOLUTE_PATHS}"], default=None),
        ],
        context_settings={
            "ignore_unknown_options": True,
            "allow_extra_args": True,
            "help_option_names": [],
        },
    )


def _parse_flag_group(command: click.Command, group: Sequence[str]) -> dict[str, Any]:
    """Return the option values given by one flag group.

    Boolean flags also accept an explicit ``=value`` such as
    ``--eff-by-issue=true``.

    Raises:
        click.ClickException: If the group is malformed.
    """

    name, has_value, raw = group[0].partition("=")
    if has_value and name in _BOOLEAN_FLAGS:
        enabled = click.BOOL.convert(raw, None, None)
        param_name = name.removeprefix("--no-").removeprefix("--").replace("-", "_")
        return {_ARGV_FIELDS[param_name]: enabled if name != _ARG_NO_ABSOLUTE_PATHS else not enabled}
    ctx = command.make_context(command.name, list(group))
    return {
        field_name: ctx.params[param_name]
        for param_name, field_name in _ARGV_FIELDS.items()
        if ctx.get_parameter_source(param_name) is ParameterSource.COMMANDLINE
    }


class ArgvConfigSource(ConfigSource):
    """Parse ``--eff-*`` flags forwarded through a host tool's argv.

    Only arguments after ``--`` are considered when the separator is present;
    otherwise everything after the program name is scanned. Unknown options
    are ignored so the host tool's own flags pass through untouched. Each
    recognised flag is parsed on its own; a malformed one is logged and
    skipped without affecting its neighbours.
    """

    name = "argv"

    def __init__(self, argv: Sequence[str]) -> None:
        self._argv = list(argv)

    def forwarded_args(self) -> list[str]:
        """Return the arguments scanned for ``--eff-*`` flags."""

        if ARGV_SEPARATOR in self._argv:
            return self._argv[self._argv.index(ARGV_SEPARATOR) + 1 :]
        return self._argv[1:]

    def flag_groups(self) -> list[list[str]]:
        """Return each recognised flag together with the value it consumes.

        A bare ``--eff-filter`` takes the following argument unless that
        argument is itself an option.
        """

        args = self.forwarded_args()
        groups: list[list[str]] = []
        index = 0
        while index < len(args):
            token = args[index]
            index += 1
            name, has_value, _ = token.partition("=")
            if name not in _RECOGNISED_FLAGS:
                continue
            group = [token]
            if name == ARG_FILTER and not has_value and index < len(args) and not args[index].startswith("-"):
                group.append(args[index])
                index += 1
            groups.append(group)
        return groups

    def load(self) -> ConfigFragment:
        fragment: dict[str, Any] = {}
        if any(GULP_MARKER in arg for arg in self._argv):
            fragment["from_gulp"] = True
        command = _argv_command()
        for group in self.flag_groups():
            try:
                fragment.update(_parse_flag_group(command, group))
            except click.ClickException as exc:
                LOGGER.warning("Ignoring malformed formatter argument %r: %s", " ".join(group), exc.format_message())
        return fragment

    def describe(self) -> str:
        return "Command-line arguments"


def merge_sources(sources: Sequence[ConfigSource]) -> dict[str, Any]:
    """Merge fragments from ``sources``; later sources win."""

    merged: dict[str, Any] = {}
    for source in sources:
        fragment = source.load()
        LOGGER.debug("Loaded %d option(s) from %s", len(fragment), source.describe())
        merged.update(fragment)
    return merged


def load_format_options(
    *,
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
    interactive: bool | None = None,
    overrides: Mapping[str, Any] | None = None,
    cwd: Path | None = None,
) -> FormatOptions:
    """Resolve formatter options from the process boundary.

    Precedence, lowest to highest: built-in defaults, environment variables,
    ``--eff-*`` argv flags, then explicit ``overrides`` (``None`` values in
    ``overrides`` mean "not provided").

    Args:
        env: Environment mapping; defaults to :data:`os.environ`.
        argv: Full argument vector including the program name; defaults to
            :data:`sys.argv`.
        interactive: Whether stdout is a terminal; detected when omitted.
        overrides: Explicit option values, typically from CLI options.
        cwd: Base directory for relative paths; defaults to the process cwd.

    Returns:
        FormatOptions: Validated options.

    Raises:
        ConfigError: If the merged values fail validation.
    """

    sources: list[ConfigSource] = [
        DefaultConfigSource(),
        EnvironmentConfigSource(
            os.environ if env is None else env,
            interactive=detect_tty() if interactive is None else interactive,
        ),
        ArgvConfigSource(sys.argv if argv is None else argv),
    ]
    merged = merge_sources(sources)
    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})
    if cwd is not None:
        merged["cwd"] = cwd
    try:
        return FormatOptions.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid formatter options: {exc}") from exc


__all__ = [
    "ArgvConfigSource",
    "ConfigSource",
    "DefaultConfigSource",
    "EnvironmentConfigSource",
    "env_flag",
    "load_format_options",
    "merge_sources",
]
