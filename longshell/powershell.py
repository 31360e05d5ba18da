"""Generate PowerShell configuration."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import Any

from longshell.config import load_config, render_config
from longshell.entries import alias_skip_comment, command_text, current_os, joined

SHELL_NAMES = ("powershell",)


def _persistent(key: str, val: str) -> str:
    return (
        f'$env:{key} = "{val}"\n'
        f'[Environment]::SetEnvironmentVariable("{key}", "{val}", "User")\n'
    )


def env_line(key: str, value: Any) -> str:
    """Return the ``$env:`` assignment for one environment variable."""
    if isinstance(value, str):
        return _persistent(key, value)
    if not isinstance(value, dict):
        return "\n"
    val = joined(value.get("value"), ";")
    if value.get("splice_before") is True:
        return f'$env:{key} = "{val};$env:{key}"\n'
    if value.get("splice_after") is True:
        return f'$env:{key} = "$env:{key};{val}"\n'
    return _persistent(key, val)


def alias_line(key: str, value: Any, os_name: str | None = None) -> str:
    """Return the ``function`` definition for one alias entry."""
    if isinstance(value, str):
        return f"function {key} {{ & {value} @args }}\n"
    if not isinstance(value, dict):
        return "\n"
    skip = alias_skip_comment(key, value, SHELL_NAMES, os_name or current_os())
    if skip is not None:
        return skip
    cmd = command_text(value.get("cmd"), "$(", ")")
    if cmd:
        return f"function {key} {{ & {cmd} @args }}\n"
    return f"# invalid alias for {key}\n"


def render(config: Mapping[str, Any]) -> str:
    """Render a parsed config as PowerShell source."""
    return render_config(config, env_line, alias_line)


def generate(config_path: str | os.PathLike[str]) -> str | None:
    """Print the PowerShell config for a file; report read errors on stderr and return None."""
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as exc:
        print(f"Error reading TOML file: {exc}", file=sys.stderr)
        return None
    text = render(config)
    print(text)
    return text