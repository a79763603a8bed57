from __future__ import annotations

import io
import json

import pytest

from bitonic_tour import geometry
from bitonic_tour.cli import EXIT_INPUT_ERROR, EXIT_OK, main

CORMEN_TEXT = "# Figure 15.9\n0 6\n5 4\n7 5\n8 2\n6 1\n1 0\n2 3\n"


@pytest.fixture
def cormen_file(tmp_path):
    path = tmp_path / "cormen.txt"
    path.write_text(CORMEN_TEXT, encoding="utf-8")
    return path


def test_cli_solves_file(cormen_file, capsys) -> None:
    assert main([str(cormen_file)]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Tour length: 25.5840" in out
    assert "Tour: 0 -> 1 -> 4 -> 6 -> 5 -> 3 -> 2 -> 0" in out


def test_cli_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n1 1\n2 1\n3 0\n"))
    assert main(["-", "--precision", "3"]) == EXIT_OK
    assert "Tour length: 6.828" in capsys.readouterr().out


def test_cli_show_table_and_json(cormen_file, tmp_path, capsys) -> None:
    out_json = tmp_path / "sol.json"
    assert main([str(cormen_file), "--show-table", "--json", str(out_json)]) == EXIT_OK
    out = capsys.readouterr().out
    assert "A[0,1] = 6.0828" in out
    assert out.count("  A[") == 21
    payload = json.loads(out_json.read_text(encoding="utf-8"))
    assert payload["points"][0] == 0
    assert payload["meta"]["source"] == str(cormen_file)


def test_cli_verbose_traces_dp(cormen_file, capsys) -> None:
    assert main([str(cormen_file), "--verbose"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "loaded 7 points" in out
    assert "A[5,6]" in out
    assert "tour = A[" in out
    geometry.VERBOSE = False


@pytest.mark.parametrize(
    "text,needle",
    [
        ("1 2\n1 3\n", "duplicates previous point"),
        ("# nothing here\n\n", "add some points"),
        ("1 2\nfoo bar\n", "not a real number"),
        ("1 2\n3\n", "line 2"),
    ],
)
def test_cli_input_errors_exit_2(tmp_path, capsys, text: str, needle: str) -> None:
    path = tmp_path / "bad.txt"
    path.write_text(text, encoding="utf-8")
    assert main([str(path)]) == EXIT_INPUT_ERROR
    assert needle in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.txt")]) == EXIT_INPUT_ERROR
    assert "error" in capsys.readouterr().err
