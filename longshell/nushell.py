"""Generate Nushell configuration."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import Any

from longshell.config import load_config, render_config
from longshell.entries import alias_skip_comment, command_text, current_os, string_items

SHELL_NAMES = ("nushell",)


def _value_text(raw: Any, splice_before: bool, splice_after: bool) -> str:
    if isinstance(raw, str):
        return raw
    if not isinstance(raw, list):
        return ""
    items = string_items(raw)
    if splice_before:
        return '" | prepend "'.join(items)
    if splice_after:
        return '" | append "'.join(items)
    return '["' + '" "'.join(items) + '"]'


def env_line(key: str, value: Any) -> str:
    """Return the ``$env`` assignment for one environment variable."""
    if isinstance(value, str):
        return f'$env.{key} = "{value}"\n'
    if not isinstance(value, dict):
        return "\n"
    splice_before = value.get("splice_before") is True
    splice_after = value.get("splice_after") is True
    val = _value_text(value.get("value"), splice_before, splice_after)
    if splice_before:
        return f'$env.{key} = ($env.{key} | prepend "{val}")\n'
    if splice_after:
        return f'$env.{key} = ($env.{key} | append "{val}")\n'
    if val.startswith("[") and val.endswith("]"):
        return f"$env.{key} = {val}\n"
    return f'$env.{key} = "{val}"\n'


def alias_line(key: str, value: Any, os_name: str | None = None) -> str:
    """Return the ``alias`` line for one alias entry."""
    if isinstance(value, str):
        return f"alias {key} = {value}\n"
    if not isinstance(value, dict):
        return "\n"
    skip = alias_skip_comment(key, value, SHELL_NAMES, os_name or current_os())
    if skip is not None:
        return skip
    cmd = command_text(value.get("cmd"), "(", ")")
    if cmd:
        return f"alias {key} = {cmd}\n"
    return f"# invalid alias for {key}\n"


def render(config: Mapping[str, Any]) -> str:
    """Render a parsed config as Nushell source."""
    return render_config(config, env_line, alias_line)


def generate(config_path: str | os.PathLike[str]) -> str | None:
    """Print the Nushell config for a file; report read errors on stderr and return None."""
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as exc:
        print(f"Error reading TOML file: {exc}", file=sys.stderr)
        return None
    text = render(config)
    print(text)
    return text