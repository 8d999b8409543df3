"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so captured log backends do not leak between tests.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'lisp_parser' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from lisp_parser.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Resets the global console (and its logging handler) around every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def captured_console() -> Console:
  """Installs a recording console as the logging backend and returns it."""
  recorder = Console(record=True, file=io.StringIO(), width=200)
  set_console(recorder)
  return recorder
