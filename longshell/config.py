"""Locating, loading and rendering the TOML configuration file."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

DEFAULT_CONFIG = "~/.config/long/long.toml"

LineGenerator = Callable[[str, Any], str]


def get_config_file(path: str | None = None) -> Path:
    """Return the configuration path, expanding a leading ``~`` to the home directory."""
    raw_path = DEFAULT_CONFIG if path is None else path
    if not raw_path.startswith("~"):
        return Path(raw_path)
    home = os.environ.get("HOME")
    if home is None:
        home = os.environ.get("USERPROFILE")
    if home is None:
        raise RuntimeError("Failed to get home directory")
    return Path(home + raw_path[1:])


def load_config(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Read and parse a TOML file.

    Raises OSError when the file cannot be read and ValueError
    (``tomllib.TOMLDecodeError`` or ``UnicodeDecodeError``) when it is not valid TOML.
    """
    with open(path, "rb") as handle:
        return tomllib.load(handle)


def _section_lines(
    config: Mapping[str, Any], section: str, generator: LineGenerator | None
) -> str:
    table = config.get(section)
    if generator is None or not isinstance(table, dict):
        return ""
    return "".join(generator(key, value) for key, value in sorted(table.items()))


def render_config(
    config: Mapping[str, Any],
    gen_env: LineGenerator | None,
    gen_alias: LineGenerator | None,
) -> str:
    """Render the ``env_var`` and ``alias`` tables, keys in sorted order, separated by a blank line."""
    return (
        _section_lines(config, "env_var", gen_env)
        + "\n"
        + _section_lines(config, "alias", gen_alias)
    )