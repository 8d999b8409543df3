"""
S-Expression Tokenizer.

Provides a Regex-based Lexer (`Lexer`) that decomposes raw program text into a
flat stream of typed `Token` objects: parentheses, unsigned integer literals,
and symbols (runs of ASCII letters, or a lone `+`). Whitespace is skipped and
never produces a token.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Generator, List, Optional, Tuple, Union

from lisp_parser.errors import IntegerOverflowError, UnrecognizedCharacterError

logger = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1
_INT64_DIGITS = len(str(INT64_MAX))


class TokenKind(str, Enum):
  """Enumeration of Lexer Token Types."""

  LPAREN = "LPAREN"
  RPAREN = "RPAREN"
  INTEGER = "INTEGER"
  SYMBOL = "SYMBOL"


@dataclass(frozen=True)
class Token:
  """
  Represents a lexical unit.

  Attributes:
      kind: The type of token.
      value: The integer value or symbol name. None for parentheses.
      line: Line number in source (1-based). Ignored by equality.
      column: Column number in source (1-based). Ignored by equality.
  """

  kind: TokenKind
  value: Union[int, str, None] = None
  line: int = field(default=0, compare=False)
  column: int = field(default=0, compare=False)

  @classmethod
  def lparen(cls) -> "Token":
    return cls(TokenKind.LPAREN)

  @classmethod
  def rparen(cls) -> "Token":
    return cls(TokenKind.RPAREN)

  @classmethod
  def integer(cls, value: int) -> "Token":
    return cls(TokenKind.INTEGER, value)

  @classmethod
  def symbol(cls, name: str) -> "Token":
    return cls(TokenKind.SYMBOL, name)

  def __repr__(self) -> str:
    if self.kind == TokenKind.LPAREN:
      return "LParen"
    if self.kind == TokenKind.RPAREN:
      return "RParen"
    if self.kind == TokenKind.INTEGER:
      return f"Integer({self.value})"
    return f"Symbol({self.value!r})"


class Lexer:
  """
  Regex-based Lexer for S-expression programs.

  Attributes:
      strict: If True, an unrecognized character raises. If False, scanning
          stops there and the tokens read so far are returned.
  """

  # Order matters for priority
  PATTERNS = [
    (TokenKind.LPAREN, r"\("),
    (TokenKind.RPAREN, r"\)"),
    (TokenKind.INTEGER, r"[0-9]+"),
    (TokenKind.SYMBOL, r"[A-Za-z]+"),
    (TokenKind.SYMBOL, r"\+"),
  ]

  _WHITESPACE = re.compile(r"[ \t\r\n]+")

  def __init__(self, strict: bool = True) -> None:
    """
    Initializes the lexer with compiled patterns.

    Args:
        strict: Whether unrecognized characters are an error.
    """
    self.strict = strict
    self.regex_pairs = [(kind, re.compile(pattern)) for kind, pattern in self.PATTERNS]

  def tokenize(self, text: str) -> Generator[Token, None, None]:
    """
    Tokenizes the input string.

    Args:
        text: Raw program source.

    Yields:
        Token objects in source order.

    Raises:
        UnrecognizedCharacterError: In strict mode, if a character matches no rule.
        IntegerOverflowError: If a digit run exceeds the signed 64-bit range.
    """
    pos = 0
    line_num = 1
    line_start = 0
    length = len(text)

    while pos < length:
      match_ws = self._WHITESPACE.match(text, pos)
      if match_ws:
        ws_str = match_ws.group(0)
        newlines = ws_str.count("\n")
        if newlines > 0:
          line_num += newlines
          line_start = pos + ws_str.rfind("\n") + 1
        pos = match_ws.end()
        continue

      column = pos - line_start + 1
      matched = self._match_at(text, pos, line_num, column)

      if matched is None:
        if self.strict:
          raise UnrecognizedCharacterError(text[pos], line_num, column)
        logger.warning("Stopped scanning at unrecognized character %r (line %d:%d)", text[pos], line_num, column)
        return

      token, pos = matched
      yield token

  def _match_at(self, text: str, pos: int, line_num: int, column: int) -> Optional[Tuple[Token, int]]:
    """Returns the first token matching at `pos` and the offset just past it."""
    for kind, regex in self.regex_pairs:
      match = regex.match(text, pos)
      if not match:
        continue

      raw = match.group(0)

      if kind == TokenKind.INTEGER:
        # int() rejects strings past the interpreter digit limit; check length first.
        digits = raw.lstrip("0")
        if len(digits) > _INT64_DIGITS:
          raise IntegerOverflowError(raw, line_num, column)
        value = int(digits or "0")
        if value > INT64_MAX:
          raise IntegerOverflowError(raw, line_num, column)
        return Token(kind, value, line_num, column), match.end()

      if kind == TokenKind.SYMBOL:
        return Token(kind, raw, line_num, column), match.end()

      return Token(kind, None, line_num, column), match.end()
    return None


def tokenize(text: str, *, strict: bool = True) -> List[Token]:
  """
  Splits source text into a list of tokens.

  Args:
      text: Raw program source.
      strict: If False, an unrecognized character ends the scan instead of raising.

  Returns:
      The tokens in source order.
  """
  tokens = list(Lexer(strict=strict).tokenize(text))
  logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
  return tokens
