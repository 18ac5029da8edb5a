"""Tests for the command line interface."""

import json

import pytest

from identgen.main import build_parser, main


@pytest.fixture
def run_cli(clean_env, tmp_path, capsys):
    """Run the CLI against a state file in tmp_path and return (exit_code, stdout lines, stderr)."""
    state = tmp_path / "state.json"

    def run(*args: str) -> tuple[int, list[str], str]:
        code = main(["--state", str(state), *args])
        captured = capsys.readouterr()
        return code, captured.out.splitlines(), captured.err

    run.state = state
    return run


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_advance_takes_signed_offset(self):
        args = build_parser().parse_args(["advance", "-3"])
        assert args.command == "advance"
        assert args.offset == -3


class TestCommands:
    """Tests for the CLI subcommands."""

    def test_next_uses_default_table(self, run_cli):
        assert run_cli("next")[:2] == (0, ["a"])
        assert run_cli("next")[:2] == (0, ["b"])

    def test_table_option(self, run_cli):
        code, out, _ = run_cli("--table", "abc", "take", "4")
        assert code == 0
        assert out == ["a", "b", "c", "ca"]

    def test_advance_and_prev(self, run_cli):
        run_cli("--table", "abc", "advance", "5")
        assert run_cli("prev")[1] == ["ca"]
        assert run_cli("advance", "-2")[1] == ["b"]

    def test_show_and_clear(self, run_cli):
        run_cli("--table", "upper", "advance", "27")
        assert run_cli("show")[1] == ["_A"]
        assert run_cli("clear")[1] == []
        assert run_cli("show")[1] == [""]

    def test_set_table(self, run_cli):
        run_cli("--table", "abc", "advance", "3")
        assert run_cli("set-table", "xyz")[1] == ["xyz"]
        assert run_cli("next")[1] == ["y"]
        assert json.loads(run_cli.state.read_text(encoding="utf-8")) == {"table": "xyz", "ident": "y"}

    def test_set_empty_table_fails(self, run_cli):
        code, out, err = run_cli("set-table", "")
        assert code == 1
        assert out == []
        assert "error: Table cannot be empty" in err

    def test_corrupt_state_fails(self, run_cli):
        run_cli.state.write_text("[]", encoding="utf-8")
        code, _, err = run_cli("next")
        assert code == 1
        assert "Invalid state file" in err

    def test_state_path_from_environment(self, clean_env, monkeypatch, tmp_path, capsys):
        state = tmp_path / "env-state.json"
        monkeypatch.setenv("IDENTGEN_STATE_PATH", str(state))
        monkeypatch.setenv("IDENTGEN_TABLE", "ab")
        assert main(["take", "3"]) == 0
        assert capsys.readouterr().out.splitlines() == ["a", "b", "ba"]
        assert state.exists()
