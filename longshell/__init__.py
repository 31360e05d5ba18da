"""Generate bash, zsh, fish, PowerShell and Nushell aliases and environment settings from a TOML file."""

__version__ = "0.1.0"