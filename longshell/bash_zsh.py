"""Generate bash and zsh configuration."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import Any

from longshell.config import load_config, render_config
from longshell.entries import alias_skip_comment, command_text, current_os, joined

SHELL_NAMES = ("bash", "zsh")


def env_line(key: str, value: Any) -> str:
    """Return the ``export`` line for one environment variable."""
    if isinstance(value, str):
        return f'export {key}="{value}"\n'
    if not isinstance(value, dict):
        return "\n"
    val = joined(value.get("value"), ":")
    if value.get("splice_before") is True:
        return f'export {key}="{val}:${key}"\n'
    if value.get("splice_after") is True:
        return f'export {key}="${key}:{val}"\n'
    return f'export {key}="{val}"\n'


def alias_line(key: str, value: Any, os_name: str | None = None) -> str:
    """Return the ``alias`` line for one alias entry."""
    if isinstance(value, str):
        return f"alias {key}='{value}'\n"
    if not isinstance(value, dict):
        return "\n"
    skip = alias_skip_comment(key, value, SHELL_NAMES, os_name or current_os())
    if skip is not None:
        return skip
    cmd = command_text(value.get("cmd"), "$(", ")")
    if cmd:
        return f"alias {key}='{cmd}'\n"
    return f"# invalid alias for {key}\n"


def render(config: Mapping[str, Any]) -> str:
    """Render a parsed config as bash/zsh source."""
    return render_config(config, env_line, alias_line)


def generate(config_path: str | os.PathLike[str]) -> str | None:
    """Print the bash/zsh config for a file; report read errors on stderr and return None."""
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as exc:
        print(f"Error reading TOML file: {exc}", file=sys.stderr)
        return None
    text = render(config)
    print(text)
    return text