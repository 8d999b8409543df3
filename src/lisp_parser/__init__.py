"""
lisp-parser Package.

A small-language front end that turns S-expression program text into an
abstract syntax tree for a downstream evaluator.

Usage
-----

Simple Parsing
^^^^^^^^^^^^^^

.. code-block:: python

    import lisp_parser as lp
    tree = lp.parse("(+ 1 2)")
    print(tree)
    # ListNode(items=[SymbolNode(name='+'), IntegerNode(value=1), IntegerNode(value=2)])

Custom Policy
^^^^^^^^^^^^^

.. code-block:: python

    from lisp_parser import ParserConfig, ParseError, parse

    config = ParserConfig(max_depth=64, allow_trailing=True)
    try:
        tree = parse("(a (b (c))) leftover", config)
    except ParseError as e:
        print(f"Error: {e}")
"""

from lisp_parser.config import ParserConfig
from lisp_parser.core.nodes import (
  AST,
  BoolNode,
  IntegerNode,
  LambdaNode,
  LispNode,
  ListNode,
  SymbolNode,
  VoidNode,
)
from lisp_parser.core.parser import LispParser, parse, parse_many
from lisp_parser.core.tokens import Lexer, Token, TokenKind, tokenize
from lisp_parser.errors import (
  ExpectedOpenParenError,
  IntegerOverflowError,
  LexError,
  NestingTooDeepError,
  ParseError,
  TrailingTokensError,
  UnexpectedEndOfInputError,
  UnrecognizedCharacterError,
)

__version__ = "0.1.0"

__all__ = [
  "AST",
  "BoolNode",
  "ExpectedOpenParenError",
  "IntegerNode",
  "IntegerOverflowError",
  "LambdaNode",
  "LexError",
  "Lexer",
  "LispNode",
  "LispParser",
  "ListNode",
  "NestingTooDeepError",
  "ParseError",
  "ParserConfig",
  "SymbolNode",
  "Token",
  "TokenKind",
  "TrailingTokensError",
  "UnexpectedEndOfInputError",
  "UnrecognizedCharacterError",
  "VoidNode",
  "__version__",
  "parse",
  "parse_many",
  "tokenize",
]
