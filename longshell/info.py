"""Banner and usage information printed before the generated config."""

from __future__ import annotations

import platform

from longshell.entries import current_os

_COLOR_CODES = {"red": 31, "green": 32, "blue": 34}

_ARCH_NAMES = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "armv7l": "arm",
}

_ASCII_ART = """
▄▄▄     ▄▄▄▄▄▄▄ ▄▄    ▄ ▄▄▄▄▄▄▄
█   █   █       █  █  █ █       █
█   █   █   ▄   █   █▄█ █   ▄▄▄▄█
█   █   █  █ █  █       █  █  ▄▄
█   █▄▄▄█  █▄█  █  ▄    █  █ █  █
█       █       █ █ █   █  █▄▄█ █
█▄▄▄▄▄▄▄█▄▄▄▄▄▄▄█▄█  █▄▄█▄▄▄▄▄▄▄█ 
    """


def styled(text: str, color: str) -> str:
    """Wrap ``text`` in ANSI codes for bold and the given foreground color."""
    try:
        code = _COLOR_CODES[color]
    except KeyError:
        raise ValueError(f"Unknown color: {color}") from None
    return f"\x1b[{code}m\x1b[1m{text}\x1b[0m\x1b[39m"


def _current_arch() -> str:
    machine = platform.machine()
    return _ARCH_NAMES.get(machine.lower(), machine)


def command_hint(shell: str, config_path: str | None = None) -> str:
    """Return the command line that loads the generated config into ``shell``."""
    config_arg = f"--config {config_path}" if config_path is not None else ""
    if shell in ("bash", "zsh"):
        return f'Command: eval "$(long --shell {shell} {config_arg} --no_output)"'
    if shell == "fish":
        return f"Command: long --shell {shell} {config_arg} --no_output | source"
    if shell == "powershell":
        return (
            f"Command: long --shell {shell} {config_arg} --no_output"
            " | Out-String | Invoke-Expression"
        )
    if shell == "nushell":
        return (
            "Command: \n"
            'mkdir ($nu.data-dir | path join "vendor/autoload")\n'
            f"long --shell {shell} {config_arg}  --no_output"
            ' | save -f ($nu.data-dir | path join "vendor/autoload/long.nu")'
        )
    raise ValueError(f"Unsupported shell type: {shell}")


def print_ascii_art() -> str:
    """Print the program banner in bold red and return the printed line."""
    banner = styled(_ASCII_ART, "red")
    print(banner)
    return banner


def print_os_info() -> str:
    """Print the operating system and architecture and return the printed line."""
    os_name = current_os()
    arch = _current_arch()
    line = styled(f"OS: {os_name} {arch}", "green")
    print(line)
    return line


def print_config_path(config_path: str) -> None:
    """Print the configuration file path."""
    print(styled(f"Config: {config_path}", "green"))


def print_command(shell: str, config_path: str | None = None) -> None:
    """Print the command that loads the generated config into ``shell``."""
    try:
        hint = command_hint(shell, config_path)
    except ValueError as exc:
        print(exc)
        hint = ""
    print(styled(hint, "green"))