"""
S-Expression Recursive Descent Parser.

This module converts program text into the AST defined in `nodes.py`. The
token list produced by `tokens.py` is read through a forward cursor; one
token of lookahead is enough for the whole grammar:

    program := list
    list    := '(' ')' | '(' item* ')'
    item    := INTEGER | SYMBOL | list

Nesting depth is bounded by `ParserConfig.max_depth`, so pathological input
fails with `NestingTooDeepError` instead of exhausting the call stack.
"""

import logging
from typing import List, Optional

from lisp_parser.config import ParserConfig
from lisp_parser.core.nodes import IntegerNode, LispNode, ListNode, SymbolNode, VoidNode
from lisp_parser.core.tokens import Token, TokenKind, tokenize
from lisp_parser.errors import (
  ExpectedOpenParenError,
  NestingTooDeepError,
  TrailingTokensError,
  UnexpectedEndOfInputError,
)

logger = logging.getLogger(__name__)


class LispParser:
  """
  Recursive descent parser for S-expression programs.
  """

  def __init__(self, text: str, config: Optional[ParserConfig] = None):
    """
    Initialize the parser and tokenize the source.

    Args:
        text: The raw program source.
        config: Parser policy. Defaults to `ParserConfig()`.

    Raises:
        LexError: If the source cannot be tokenized.
    """
    self.config = config or ParserConfig()
    self.tokens: List[Token] = tokenize(text, strict=self.config.strict_lexing)
    self.pos = 0
    self.depth = 0

  def parse(self) -> ListNode:
    """
    Parses a program consisting of exactly one top-level list.

    Returns:
        The root list.

    Raises:
        ParseError: On malformed input, or on trailing tokens unless
            `allow_trailing` is set.
    """
    tree = self.parse_list()

    if not self.at_end():
      extra = self.peek()
      if not self.config.allow_trailing:
        raise TrailingTokensError(extra)
      logger.warning("Ignoring %d trailing token(s) after top-level list", len(self.tokens) - self.pos)

    if logger.isEnabledFor(logging.DEBUG):
      logger.debug("Parsed %d tokens into a tree of depth %d", len(self.tokens), tree.depth())
    return tree

  def parse_many(self) -> List[ListNode]:
    """
    Parses a program of zero or more consecutive top-level lists.

    Returns:
        The root lists in source order.
    """
    forms = []
    while not self.at_end():
      forms.append(self.parse_list())
    logger.debug("Parsed %d tokens into %d top-level form(s)", len(self.tokens), len(forms))
    return forms

  # --- Cursor ---

  def peek(self) -> Optional[Token]:
    """Looks ahead at the pending token without consuming it."""
    if self.pos < len(self.tokens):
      return self.tokens[self.pos]
    return None

  def advance(self) -> Optional[Token]:
    """Consumes and returns the pending token, or None at end of input."""
    token = self.peek()
    if token is not None:
      self.pos += 1
    return token

  def at_end(self) -> bool:
    return self.pos >= len(self.tokens)

  def match(self, kind: TokenKind) -> bool:
    token = self.peek()
    return token is not None and token.kind == kind

  # --- Recursive Descent Implementation ---

  def parse_list(self) -> ListNode:
    """
    Parses one parenthesized list starting at the cursor.

    Returns:
        The list node. `()` yields `ListNode([VoidNode()])`.

    Raises:
        ExpectedOpenParenError: If the cursor is not on '('.
        UnexpectedEndOfInputError: If input ends before the closing ')'.
        NestingTooDeepError: If the list opens past `max_depth`.
    """
    if not self.match(TokenKind.LPAREN):
      raise ExpectedOpenParenError(self.peek())
    self.advance()

    self.depth += 1
    try:
      if self.depth > self.config.max_depth:
        raise NestingTooDeepError(self.config.max_depth)

      if self.match(TokenKind.RPAREN):
        self.advance()
        return ListNode([VoidNode()])

      items: List[LispNode] = []
      while True:
        token = self.peek()

        if token is None:
          raise UnexpectedEndOfInputError(self.depth)

        if token.kind == TokenKind.LPAREN:
          items.append(self.parse_list())
          continue

        self.advance()

        if token.kind == TokenKind.RPAREN:
          return ListNode(items)
        if token.kind == TokenKind.SYMBOL:
          items.append(SymbolNode(token.value))
        elif token.kind == TokenKind.INTEGER:
          items.append(IntegerNode(token.value))
    finally:
      self.depth -= 1


def parse(text: str, config: Optional[ParserConfig] = None) -> ListNode:
  """
  Parses a single S-expression program into an AST.

  Args:
      text: The program source, e.g. ``"(+ 1 2)"``.
      config: Optional parser policy.

  Returns:
      ListNode: The root list.

  Raises:
      ParseError: If lexing or parsing fails.
  """
  return LispParser(text, config).parse()


def parse_many(text: str, config: Optional[ParserConfig] = None) -> List[ListNode]:
  """
  Parses consecutive top-level S-expressions.

  Args:
      text: The program source, e.g. ``"(define x 1) (print x)"``.
      config: Optional parser policy. `allow_trailing` has no effect here.

  Returns:
      List[ListNode]: One tree per top-level list; empty for blank input.
  """
  return LispParser(text, config).parse_many()
