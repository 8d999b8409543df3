"""
Tests for the top-level package surface.
"""

import lisp_parser as lp


def test_top_level_parse():
  assert lp.parse("(+ 1 2)") == lp.ListNode([lp.SymbolNode("+"), lp.IntegerNode(1), lp.IntegerNode(2)])


def test_exports_resolve():
  for name in lp.__all__:
    assert hasattr(lp, name), name


def test_error_hierarchy():
  assert issubclass(lp.LexError, lp.ParseError)
  assert issubclass(lp.UnrecognizedCharacterError, lp.LexError)
  assert issubclass(lp.IntegerOverflowError, lp.LexError)
  for cls in [lp.ExpectedOpenParenError, lp.UnexpectedEndOfInputError, lp.NestingTooDeepError, lp.TrailingTokensError]:
    assert issubclass(cls, lp.ParseError)
  assert issubclass(lp.ParseError, SyntaxError)
