"""
Parser Configuration Store.

Resolves parser policy from explicit arguments layered over the
`[tool.lisp_parser]` table of the nearest `pyproject.toml`.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

logger = logging.getLogger(__name__)

# Frames reserved for callers of the parser (test runners, CLI dispatch).
_STACK_HEADROOM = 100

TOOL_SECTION = "lisp_parser"


class ParserConfig(BaseModel):
  """
  Policy knobs for tokenizing and parsing.
  """

  max_depth: int = Field(256, ge=1, description="Maximum list nesting depth before parsing fails.")
  allow_trailing: bool = Field(
    False, description="If True, tokens after the top-level list are ignored instead of rejected."
  )
  strict_lexing: bool = Field(
    True, description="If True, unrecognized characters raise. If False, scanning stops at them."
  )

  @field_validator("max_depth")
  @classmethod
  def validate_max_depth(cls, v: int) -> int:
    """
    Ensures the depth limit trips before the interpreter's recursion limit does.

    Args:
        v (int): The requested depth limit.

    Returns:
        int: The validated limit.

    Raises:
        ValueError: If the limit would allow a RecursionError.
    """
    ceiling = sys.getrecursionlimit() - _STACK_HEADROOM
    if v > ceiling:
      raise ValueError(f"max_depth {v} exceeds the supported ceiling of {ceiling}")
    return v

  @classmethod
  def load(
    cls,
    max_depth: Optional[int] = None,
    allow_trailing: Optional[bool] = None,
    strict_lexing: Optional[bool] = None,
    overrides: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "ParserConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Precedence (highest first): keyword arguments, `overrides`, TOML, defaults.

    Args:
        max_depth (Optional[int]): Override for the nesting limit.
        allow_trailing (Optional[bool]): Override for the trailing-token policy.
        strict_lexing (Optional[bool]): Override for lexer strictness.
        overrides (Optional[Dict]): Loose key/value settings, e.g. from `--config`.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        ParserConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = {**toml_config, **(overrides or {})}

    explicit = {"max_depth": max_depth, "allow_trailing": allow_trailing, "strict_lexing": strict_lexing}
    for key, value in explicit.items():
      if value is not None:
        merged[key] = value

    unknown = sorted(set(merged) - set(cls.model_fields))
    for key in unknown:
      logger.warning("Ignoring unknown parser setting '%s'", key)
      del merged[key]

    return cls(**merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s: %s", toml_path, e)
        return {}, None

      tool_section = data.get("tool", {})
      settings = tool_section.get(TOOL_SECTION, {}) if isinstance(tool_section, dict) else None
      if not isinstance(settings, dict):
        logger.warning("Ignoring [tool.%s] in %s: expected a table", TOOL_SECTION, toml_path)
        return {}, None
      return dict(settings), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (int, bool, or string). Dashes in keys become underscores.

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config = {}
  for item in items:
    if "=" not in item:
      logger.warning("Ignoring invalid config format: '%s'. Expected 'key=value'.", item)
      continue

    key, val_str = item.split("=", 1)
    key = key.strip().replace("-", "_")
    val_str = val_str.strip()

    final_val: Any = val_str

    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        final_val = int(val_str)
      except ValueError:
        pass

    config[key] = final_val

  return config
