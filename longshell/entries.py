"""Helpers shared by the shell generators for reading config entries."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from typing import Any

_PLATFORM_NAMES = {
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
    "sunos5": "solaris",
}

_PLATFORM_PREFIXES = ("linux", "freebsd", "openbsd", "netbsd", "dragonfly", "android", "ios")


def current_os() -> str:
    """Return the running operating system's short name (linux, macos, windows, ...)."""
    platform = sys.platform
    if platform in _PLATFORM_NAMES:
        return _PLATFORM_NAMES[platform]
    for prefix in _PLATFORM_PREFIXES:
        if platform.startswith(prefix):
            return prefix
    return platform


def string_items(value: Iterable[Any]) -> list[str]:
    """Return the string members of a sequence, dropping everything else."""
    return [item for item in value if isinstance(item, str)]


def joined(value: Any, separator: str) -> str:
    """Return a string as is, a list's strings joined by ``separator``, or ``""``."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return separator.join(string_items(value))
    return ""


def alias_skip_comment(
    key: str, table: Mapping[str, Any], shell_names: Iterable[str], os_name: str
) -> str | None:
    """Return a comment line when the alias does not apply to this system or shell, else None."""
    systems = joined(table.get("system"), ",")
    if systems and os_name not in systems:
        return f"# alias {key} is not applicable for this system\n"
    shells = joined(table.get("shell"), ",")
    if shells and not any(name in shells for name in shell_names):
        return f"# alias {key} is not applicable for this shell\n"
    return None


def command_text(value: Any, open_sub: str, close_sub: str) -> str:
    """Build an alias command from a string or a ``[command, args...]`` list.

    Arguments after the first element are wrapped in the shell's command
    substitution, delimited by ``open_sub`` and ``close_sub``.
    """
    if isinstance(value, str):
        return value
    if not isinstance(value, list) or not value or not isinstance(value[0], str):
        return ""
    first, *rest = value
    args = string_items(rest)
    if not args:
        return first
    return f"{first} {open_sub}{' '.join(args)}{close_sub}"