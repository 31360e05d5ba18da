# longshell

Keep your shell aliases and environment variables in one TOML file and
generate matching configuration for bash, zsh, fish, PowerShell or Nushell.

## Installation

```
pip install .
```

This installs the `long` command. The package needs nothing outside the
Python standard library (Python 3.11 or later).

## Configuration

By default the configuration is read from `~/.config/long/long.toml`; pass
`--config FILE` to use another file. A leading `~` in the path is replaced by
the value of `HOME`, or of `USERPROFILE` when `HOME` is not set.

```toml
[env_var]
EDITOR = "nvim"
PATH = { value = ["~/.local/bin", "~/bin"], splice_before = true }

[alias]
ll = "ls -la"
gs = { cmd = "git status", shell = ["bash", "zsh", "fish"] }
work = { cmd = ["cd", "git rev-parse --show-toplevel"], system = "linux" }
```

Entries under `[env_var]` are either plain strings or tables with:

- `value`: a string or a list of strings. Lists are joined with `:` for
  bash/zsh, `;` for PowerShell, as separate quoted words for fish, and as a
  list (or a chain of `prepend`/`append`) for Nushell;
- `splice_before` / `splice_after`: prepend or append to the existing value
  instead of replacing it. If both are true, `splice_before` wins.

For PowerShell, a variable that is set outright (not spliced) is also stored
as a user environment variable with `[Environment]::SetEnvironmentVariable`.

Entries under `[alias]` are either plain command strings or tables with:

- `cmd`: a string, or a list whose first item is the command and whose
  remaining items are joined with spaces and wrapped in the shell's command
  substitution (`$(...)` for bash, zsh and PowerShell, `(...)` for fish and
  Nushell);
- `system`: an operating system name, or a list of them, the alias applies to
  (for example `linux`, `macos`, `windows`);
- `shell`: a shell name, or a list of them, the alias applies to.

Aliases that do not apply to the current system or shell come out as comments,
and a table without a usable `cmd` comes out as `# invalid alias for NAME`.
PowerShell aliases are written as `function NAME { & CMD @args }`.

Within each table, entries are written in alphabetical order of their names;
the environment section comes first, then a blank line, then the aliases.
Values are written as given, without escaping quotes.

## Usage

```
long --shell SHELL [--config FILE] [--no_output]
```

`SHELL` is one of `bash`, `zsh`, `fish`, `powershell`, `nushell`. Options:

- `-s`, `--shell SHELL`: target shell (required);
- `-c`, `--config FILE`: configuration file;
- `-n`, `--no_output`: print only the generated configuration;
- `-V`, `--version`: print the version.

Run without arguments, `long` prints its help to standard error and exits
with status 2.

Without `--no_output` a banner, the operating system and architecture, the
configuration path and a suggested loading command are printed before the
generated configuration. If the file cannot be read or is not valid TOML, an
`Error reading TOML file: ...` message goes to standard error.

Use `--no_output` when feeding the output straight into the shell:

bash / zsh:

```
eval "$(long --shell zsh --no_output)"
```

fish:

```
long --shell fish --no_output | source
```

PowerShell:

```
long --shell powershell --no_output | Out-String | Invoke-Expression
```

Nushell:

```
mkdir ($nu.data-dir | path join "vendor/autoload")
long --shell nushell --no_output | save -f ($nu.data-dir | path join "vendor/autoload/long.nu")
```

## Using it from Python

Each shell has a module with `env_line`, `alias_line`, `render` and `generate`:
`longshell.bash_zsh`, `longshell.fish`, `longshell.powershell` and
`longshell.nushell`.

```python
from longshell import fish
from longshell.config import load_config

print(fish.render(load_config("long.toml")))
```

`render` takes an already parsed configuration (a dict) and returns the text;
`generate` takes a file path, prints the text and returns it, or returns
`None` after reporting a read error. `alias_line` accepts an `os_name`
argument to check `system` against a name other than the running system's.

## Running the tests

```
pip install ".[test]"
pytest
```