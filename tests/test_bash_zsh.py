from longshell.bash_zsh import alias_line, env_line, generate, render


def test_env_string():
    assert env_line("EDITOR", "nvim") == 'export EDITOR="nvim"\n'


def test_env_array_joined_with_colon():
    line = env_line("PATH", {"value": ["/a", "/b"]})
    assert '"/a:/b"' in line
    assert line.startswith("export PATH=")


def test_env_splice_before():
    line = env_line("PATH", {"value": "/x", "splice_before": True})
    assert line == 'export PATH="/x:$PATH"\n'


def test_env_splice_after():
    line = env_line("PATH", {"value": "/x", "splice_after": True})
    assert line.endswith(':/x"\n')
    assert "$PATH:" in line


def test_env_splice_needs_real_bool():
    assert env_line("P", {"value": "v", "splice_before": "yes"}) == env_line("P", {"value": "v"})


def test_env_other_type():
    assert env_line("N", 3) == "\n"


def test_alias_string():
    assert alias_line("ll", "ls -l") == "alias ll='ls -l'\n"


def test_alias_table_command_substitution():
    line = alias_line("cdr", {"cmd": ["cd", "git", "rev-parse"]}, "linux")
    assert line.startswith("alias cdr='cd $(")
    assert "git rev-parse" in line


def test_alias_wrong_system():
    line = alias_line("ll", {"cmd": "ls", "system": "windows"}, "linux")
    assert line == "# alias ll is not applicable for this system\n"


def test_alias_wrong_shell():
    line = alias_line("ll", {"cmd": "ls", "shell": ["fish"]}, "linux")
    assert line == "# alias ll is not applicable for this shell\n"


def test_alias_zsh_allowed():
    line = alias_line("ll", {"cmd": "ls", "shell": ["zsh"], "system": ["linux"]}, "linux")
    assert line == alias_line("ll", "ls")


def test_alias_invalid():
    assert alias_line("bad", {"cmd": 5}, "linux") == "# invalid alias for bad\n"


def test_render_sections():
    config = {"env_var": {"EDITOR": "nvim"}, "alias": {"ll": "ls -l"}}
    assert render(config) == env_line("EDITOR", "nvim") + "\n" + alias_line("ll", "ls -l")


def test_generate_prints(tmp_path, capsys):
    path = tmp_path / "long.toml"
    path.write_text('[env_var]\nEDITOR = "nvim"\n[alias]\nll = "ls -l"\n', encoding="utf-8")
    text = generate(path)
    assert text == render({"env_var": {"EDITOR": "nvim"}, "alias": {"ll": "ls -l"}})
    assert capsys.readouterr().out == text + "\n"


def test_generate_missing_file(tmp_path, capsys):
    assert generate(tmp_path / "absent.toml") is None
    assert "Error reading TOML file:" in capsys.readouterr().err