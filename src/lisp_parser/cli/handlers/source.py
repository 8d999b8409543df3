"""
Input Acquisition Helpers.

Resolves CLI input from either a file path or an inline expression.
"""

from pathlib import Path
from typing import Optional, Tuple


def read_source(path: Optional[Path], expr: Optional[str]) -> Tuple[str, str]:
  """
  Returns the program text and a display name for it.

  Args:
      path: File to read, if given.
      expr: Inline program text, if given. Takes precedence over `path`.

  Returns:
      Tuple[str, str]: (source text, display name).

  Raises:
      FileNotFoundError: If `path` does not exist.
      ValueError: If neither input was supplied.
  """
  if expr is not None:
    return expr, "<expr>"
  if path is None:
    raise ValueError("Provide a file path or --expr")
  if not path.exists():
    raise FileNotFoundError(f"Path not found: {path}")
  return path.read_text("utf-8"), str(path)
