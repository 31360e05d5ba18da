"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from longshell import bash_zsh, fish, nushell, powershell
from longshell.config import get_config_file
from longshell.info import print_ascii_art, print_command, print_config_path, print_os_info

PROGRAM = "long"
VERSION = "0.1.0"
SHELLS = ("bash", "zsh", "fish", "powershell", "nushell")

_GENERATORS = {
    "bash": bash_zsh.generate,
    "zsh": bash_zsh.generate,
    "fish": fish.generate,
    "powershell": powershell.generate,
    "nushell": nushell.generate,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Generate shell alias and env config from a TOML file.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"{PROGRAM} {VERSION}")
    parser.add_argument(
        "-s",
        "--shell",
        metavar="SHELL",
        required=True,
        choices=SHELLS,
        help="Target shell type: bash, zsh, fish, powershell, nushell",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="Sets a custom config file path, defaults to ~/.config/long/long.toml",
    )
    parser.add_argument(
        "-n",
        "--no_output",
        action="store_true",
        help="don't use output messages, useful for eval/source commands",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and print the generated shell config."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not args_list:
        parser.print_help(sys.stderr)
        return 2
    args = parser.parse_args(args_list)
    config_path = get_config_file(args.config)

    if not args.no_output:
        print_ascii_art()
        print_os_info()
        print_config_path(str(config_path))
        print_command(args.shell, None if args.config is None else str(config_path))
        print("")

    _GENERATORS[args.shell](config_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())