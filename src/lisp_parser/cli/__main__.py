"""
Main Entry Point for lisp-parser CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `lisp_parser.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from lisp_parser import __version__
from lisp_parser.cli import commands
from lisp_parser.config import parse_cli_key_values
from lisp_parser.utils.console import set_verbosity


def _add_source_args(cmd: argparse.ArgumentParser) -> None:
  cmd.add_argument("path", type=Path, nargs="?", default=None, help="Input program file")
  cmd.add_argument("-e", "--expr", default=None, help="Inline program text (instead of a file)")


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="lisp-parser: S-expression front end")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging from the parser")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: TOKENIZE ---
  cmd_tok = subparsers.add_parser("tokenize", help="Print the token stream of a program")
  _add_source_args(cmd_tok)
  cmd_tok.add_argument(
    "--lenient",
    action="store_true",
    help="Stop at the first unrecognized character instead of failing",
  )

  # --- Command: PARSE ---
  cmd_parse = subparsers.add_parser("parse", help="Parse a program and print its AST")
  _add_source_args(cmd_parse)
  cmd_parse.add_argument(
    "--format",
    choices=commands.OUTPUT_FORMATS,
    default="text",
    help="Output format (default: text)",
  )
  cmd_parse.add_argument("--many", action="store_true", help="Accept several top-level lists")
  cmd_parse.add_argument("--max-depth", type=int, default=None, help="Maximum nesting depth (Overrides config)")
  cmd_parse.add_argument(
    "--allow-trailing",
    action="store_true",
    default=None,
    help="Ignore tokens after the top-level list (Overrides config)",
  )
  cmd_parse.add_argument(
    "--lenient",
    action="store_true",
    help="Stop lexing at the first unrecognized character (Overrides config)",
  )
  cmd_parse.add_argument(
    "--config",
    nargs="*",
    help="Parser settings in key=value format (e.g. max_depth=64 allow_trailing=true)",
  )

  args = parser.parse_args(argv)
  set_verbosity(args.verbose)

  if args.command == "tokenize":
    return commands.handle_tokenize(args.path, args.expr, not args.lenient)

  elif args.command == "parse":
    settings = parse_cli_key_values(args.config)
    return commands.handle_parse(
      args.path,
      args.expr,
      args.format,
      args.many,
      args.max_depth,
      args.allow_trailing,
      False if args.lenient else None,
      settings,
    )

  return 0


if __name__ == "__main__":
  sys.exit(main())
