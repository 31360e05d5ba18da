import pytest

from longshell import bash_zsh, cli, fish
from longshell.config import load_config


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "long.toml"
    path.write_text('[env_var]\nA = "1"\n[alias]\ng = "git"\n', encoding="utf-8")
    return path


def test_parser_reads_options():
    args = cli.build_parser().parse_args(["-s", "fish", "-c", "x.toml", "-n"])
    assert (args.shell, args.config, args.no_output) == ("fish", "x.toml", True)


def test_parser_defaults():
    args = cli.build_parser().parse_args(["--shell", "zsh"])
    assert args.config is None
    assert args.no_output is False


def test_parser_rejects_unknown_shell():
    with pytest.raises(SystemExit) as exc:
        cli.build_parser().parse_args(["-s", "tcsh"])
    assert exc.value.code == 2


def test_no_arguments_prints_help(capsys):
    assert cli.main([]) == 2
    assert "usage" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert cli.VERSION in capsys.readouterr().out


def test_no_output_prints_only_config(config_file, capsys):
    assert cli.main(["-s", "bash", "-c", str(config_file), "-n"]) == 0
    expected = bash_zsh.render(load_config(config_file))
    assert capsys.readouterr().out == expected + "\n"


def test_with_output_prints_banner(config_file, capsys):
    assert cli.main(["-s", "fish", "-c", str(config_file)]) == 0
    out = capsys.readouterr().out
    assert "Config: " + str(config_file) in out
    assert "Command:" in out
    assert out.endswith(fish.render(load_config(config_file)) + "\n")


def test_missing_config_reports_error(tmp_path, capsys):
    assert cli.main(["-s", "nushell", "-c", str(tmp_path / "none.toml"), "-n"]) == 0
    captured = capsys.readouterr()
    assert "Error reading TOML file" in captured.err
    assert captured.out == ""