"""
Tokenize Command Handler.

Prints the token stream of a program, one token per line with its position.
"""

from pathlib import Path
from typing import Optional

from lisp_parser.cli.handlers.source import read_source
from lisp_parser.core.tokens import tokenize
from lisp_parser.errors import ParseError
from lisp_parser.utils.console import log_error, log_info


def handle_tokenize(path: Optional[Path], expr: Optional[str], strict: bool = True) -> int:
  """
  Tokenizes the input and prints each token.

  Args:
      path: Input source file.
      expr: Inline program text (overrides `path`).
      strict: If False, scanning stops at the first unrecognized character.

  Returns:
      int: Exit code (0 on success, 1 on failure).
  """
  try:
    text, name = read_source(path, expr)
    tokens = tokenize(text, strict=strict)
  except (OSError, ValueError) as e:
    log_error(str(e))
    return 1
  except ParseError as e:
    log_error(f"Failed to tokenize {name}: {e}")
    return 1

  for token in tokens:
    print(f"{token.line}:{token.column}\t{token!r}")

  log_info(f"{len(tokens)} token(s) in {name}")
  return 0
