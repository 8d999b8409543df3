"""
Tests for the CLI entry point.

Verifies:
1. Argument dispatch to handlers.
2. `tokenize` and `parse` output in each format.
3. Failures are logged and mapped to exit code 1.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from lisp_parser import __version__
from lisp_parser.cli.__main__ import main


@patch("lisp_parser.cli.commands.handle_parse")
def test_parse_dispatch(mock_handle):
  mock_handle.return_value = 0
  assert main(["parse", "-e", "(a)", "--max-depth", "9", "--config", "allow_trailing=true"]) == 0

  mock_handle.assert_called_once()
  args = mock_handle.call_args[0]
  assert args[0] is None
  assert args[1] == "(a)"
  assert args[2] == "text"
  assert args[4] == 9
  assert args[5] is None
  assert args[6] is None
  assert args[7] == {"allow_trailing": True}


@patch("lisp_parser.cli.commands.handle_tokenize")
def test_tokenize_dispatch_lenient(mock_handle):
  mock_handle.return_value = 0
  main(["tokenize", "prog.lisp", "--lenient"])

  args = mock_handle.call_args[0]
  assert args[0] == Path("prog.lisp")
  assert args[2] is False


def test_version(capsys):
  with pytest.raises(SystemExit):
    main(["--version"])
  assert __version__ in capsys.readouterr().out


def test_tokenize_expr(capsys):
  assert main(["tokenize", "-e", "(+ 1)"]) == 0
  out = capsys.readouterr().out.splitlines()
  assert out == ["1:1\tLParen", "1:2\tSymbol('+')", "1:4\tInteger(1)", "1:5\tRParen"]


def test_tokenize_failure(captured_console, capsys):
  assert main(["tokenize", "-e", "(a $)"]) == 1
  assert capsys.readouterr().out == ""
  assert "Unrecognized character '$'" in captured_console.export_text()


def test_parse_text_output(capsys):
  assert main(["parse", "-e", "(first (list 1 (+ 2 3) 9))"]) == 0
  assert capsys.readouterr().out.strip() == "(first (list 1 (+ 2 3) 9))"


def test_parse_json_output(capsys):
  assert main(["parse", "-e", "(+ 1 ())", "--format", "json"]) == 0
  assert json.loads(capsys.readouterr().out) == ["+", 1, [None]]


def test_parse_tree_output(capsys):
  assert main(["parse", "-e", "(+ 1 2)", "--format", "tree"]) == 0
  out = capsys.readouterr().out
  assert "List (3)" in out
  assert "Symbol +" in out
  assert "Integer 2" in out


def test_parse_many_from_file(tmp_path, capsys):
  src = tmp_path / "prog.lisp"
  src.write_text("(define x 1)\n(print x)\n", encoding="utf-8")

  assert main(["parse", str(src), "--many", "--format", "json"]) == 0
  assert json.loads(capsys.readouterr().out) == [["define", "x", 1], ["print", "x"]]


def test_parse_failure_is_logged(captured_console):
  assert main(["parse", "-e", "(+ 1 2"]) == 1
  assert "Unexpected end of input" in captured_console.export_text()


def test_parse_trailing_flag(capsys):
  assert main(["parse", "-e", "(a) (b)"]) == 1
  assert main(["parse", "-e", "(a) (b)", "--allow-trailing"]) == 0
  assert capsys.readouterr().out.strip() == "(a)"


def test_parse_depth_flag(captured_console):
  assert main(["parse", "-e", "((()))", "--max-depth", "2"]) == 1
  assert "maximum depth of 2" in captured_console.export_text()


def test_parse_invalid_config(captured_console):
  assert main(["parse", "-e", "(a)", "--max-depth", "0"]) == 1
  assert "Invalid parser configuration" in captured_console.export_text()


def test_missing_file(tmp_path, captured_console):
  assert main(["parse", str(tmp_path / "nope.lisp")]) == 1
  assert "Path not found" in captured_console.export_text()


def test_missing_input(captured_console):
  assert main(["parse"]) == 1
  assert "Provide a file path or --expr" in captured_console.export_text()


def test_parse_oversized_integer(captured_console):
  assert main(["parse", "-e", "(" + "9" * 5000 + ")"]) == 1
  assert "does not fit in 64 bits" in captured_console.export_text()


def test_parse_non_table_config(tmp_path, monkeypatch, capsys):
  (tmp_path / "pyproject.toml").write_text("[tool]\nlisp_parser = 'x'\n", encoding="utf-8")
  monkeypatch.chdir(tmp_path)

  assert main(["parse", "-e", "(a)"]) == 0
  assert capsys.readouterr().out.strip() == "(a)"
