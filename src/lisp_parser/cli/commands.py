"""
CLI Command Handlers Facade.

Re-exports handlers from `lisp_parser.cli.handlers` so the dispatcher (and
tests patching it) has a single import point.
"""

from lisp_parser.cli.handlers.parse import handle_parse, OUTPUT_FORMATS
from lisp_parser.cli.handlers.tokenize import handle_tokenize

__all__ = [
  "OUTPUT_FORMATS",
  "handle_parse",
  "handle_tokenize",
]
