"""
Parse Command Handler.

Parses a program and renders the resulting AST as S-expression text, JSON,
or a Rich tree.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from lisp_parser.cli.handlers.source import read_source
from lisp_parser.config import ParserConfig
from lisp_parser.core.parser import LispParser
from lisp_parser.errors import ParseError
from lisp_parser.utils.console import log_error, log_success, output_console
from lisp_parser.utils.visualizer import build_tree

OUTPUT_FORMATS = ("text", "json", "tree")


def handle_parse(
  path: Optional[Path],
  expr: Optional[str],
  output_format: str = "text",
  many: bool = False,
  max_depth: Optional[int] = None,
  allow_trailing: Optional[bool] = None,
  strict_lexing: Optional[bool] = None,
  settings: Optional[Dict[str, Any]] = None,
) -> int:
  """
  Parses the input and prints the AST.

  Args:
      path: Input source file.
      expr: Inline program text (overrides `path`).
      output_format: One of 'text', 'json', 'tree'.
      many: If True, accept several top-level lists.
      max_depth: Override for the nesting limit.
      allow_trailing: Override for the trailing-token policy.
      strict_lexing: Override for lexer strictness.
      settings: Loose `key=value` settings from `--config`.

  Returns:
      int: Exit code (0 on success, 1 on failure).
  """
  try:
    config = ParserConfig.load(
      max_depth=max_depth,
      allow_trailing=allow_trailing,
      strict_lexing=strict_lexing,
      overrides=settings,
    )
  except ValidationError as e:
    log_error(f"Invalid parser configuration: {e}")
    return 1

  try:
    text, name = read_source(path, expr)
  except (OSError, ValueError) as e:
    log_error(str(e))
    return 1

  try:
    parser = LispParser(text, config)
    forms = parser.parse_many() if many else [parser.parse()]
  except ParseError as e:
    log_error(f"Failed to parse {name}: {e}")
    return 1

  if output_format == "json":
    data = [form.to_data() for form in forms] if many else forms[0].to_data()
    print(json.dumps(data, indent=2))
  elif output_format == "tree":
    out = output_console()
    for form in forms:
      out.print(build_tree(form))
  else:
    for form in forms:
      print(form.to_text())

  log_success(f"Parsed {len(forms)} form(s) from {name}")
  return 0
