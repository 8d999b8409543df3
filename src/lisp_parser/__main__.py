"""
Entry point for module execution (``python -m lisp_parser``).

This module delegates execution to the CLI handler in ``lisp_parser.cli.__main__``.
"""

import sys
from lisp_parser.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
