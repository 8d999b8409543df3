"""
Parse Error Taxonomy.

Every failure raised while turning source text into an AST derives from
`ParseError`, so callers can catch a single exception type. Lexing failures
are `LexError` subclasses and propagate through `parse` unchanged.
"""

from typing import Any, Optional


class ParseError(SyntaxError):
  """Base class for all lexing and parsing failures."""


class LexError(ParseError):
  """Raised when the source text cannot be split into tokens."""

  def __init__(self, message: str, line: int, column: int):
    super().__init__(f"{message} at line {line}:{column}")
    self.line = line
    self.column = column


class UnrecognizedCharacterError(LexError):
  """A character matched none of the lexer rules."""

  def __init__(self, char: str, line: int, column: int):
    super().__init__(f"Unrecognized character {char!r}", line, column)
    self.char = char


class IntegerOverflowError(LexError):
  """A digit run does not fit in a signed 64-bit integer."""

  def __init__(self, text: str, line: int, column: int):
    shown = text if len(text) <= 40 else f"{text[:20]}...({len(text)} digits)"
    super().__init__(f"Integer literal {shown} does not fit in 64 bits", line, column)
    self.text = text


class ExpectedOpenParenError(ParseError):
  """
  A list was required but the cursor is not on '('.

  Attributes:
      found: The offending token, or None when the input was exhausted.
  """

  def __init__(self, found: Optional[Any] = None):
    what = "end of input" if found is None else repr(found)
    super().__init__(f"Expected '(', found {what}")
    self.found = found


class UnexpectedEndOfInputError(ParseError):
  """The token stream ran out while a list was still open."""

  def __init__(self, open_lists: int = 1):
    super().__init__(f"Unexpected end of input: {open_lists} list(s) still open")
    self.open_lists = open_lists


class NestingTooDeepError(ParseError):
  """List nesting exceeded the configured maximum depth."""

  def __init__(self, max_depth: int):
    super().__init__(f"Nesting exceeds maximum depth of {max_depth}")
    self.max_depth = max_depth


class TrailingTokensError(ParseError):
  """Tokens remain after the top-level list was closed."""

  def __init__(self, found: Any):
    super().__init__(f"Unexpected trailing token {found!r} after top-level list")
    self.found = found
