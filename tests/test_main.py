"""Test the command-line entrypoint."""
from pathlib import Path

import pytest

from func_calc import main as main_module
from func_calc.main import main, parse_args


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.file_path is None
    assert args.expression is None
    assert args.history_size == 20
    assert args.alternate_screen is True
    assert args.verbose is False


def test_parse_args_missing_file(tmp_path: Path) -> None:
    """A file that does not exist is rejected by the argument parser."""
    with pytest.raises(SystemExit):
        parse_args([str(tmp_path / "missing.txt")])


def test_parse_args_file_and_expression(tmp_path: Path) -> None:
    path = tmp_path / "ops.txt"
    path.write_text("1+1\n")
    with pytest.raises(SystemExit):
        parse_args([str(path), "-e", "1+1"])


def test_parse_args_negative_history_size() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--history-size", "-1"])


def test_main_expression(capsys) -> None:
    main(["-e", "1 + 2"])
    assert capsys.readouterr().out == "=> 3.0\n"


def test_main_invalid_expression(capsys) -> None:
    """A malformed expression prints the error and exits with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        main(["-e", "foo(1)"])
    assert exc_info.value.code == 1
    assert "Unknown function: foo" in capsys.readouterr().err


def test_main_file(tmp_path: Path, capsys) -> None:
    """A file argument runs the batch and prints the results path."""
    path = tmp_path / "ops.txt"
    path.write_text("2^3^2\n")

    main([str(path)])

    output_file = tmp_path / "ops_txt_results.txt"
    assert output_file.read_text() == "2^3^2 = 512.0\n"
    assert capsys.readouterr().out.strip() == str(output_file)


def test_main_starts_shell(monkeypatch) -> None:
    """Without file or expression the shell runs with the CLI settings."""
    created = {}

    class FakeShell:
        def __init__(self, **kwargs):
            created.update(kwargs)

        def run(self):
            created["ran"] = True

    monkeypatch.setattr(main_module, "CalculatorShell", FakeShell)
    main(["--no-alternate-screen", "--history-size", "5"])

    assert created == {"history_size": 5, "alternate_screen": False, "ran": True}
