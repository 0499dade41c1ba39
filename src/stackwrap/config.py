"""
Runtime Configuration Store.

Settings are read from the ``[tool.stackwrap]`` table of the nearest
``pyproject.toml`` and can be overridden programmatically or from the CLI.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

DEFAULT_ERROR_PREFIXES = ["errors.New", "fmt.Errorf", "log.Error"]

DEFAULT_REWRITE_RULES = [
  '"errors" -> "github.com/pkg/errors"',
  "fmt.Errorf -> errors.Errorf",
]


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the rewriting pipeline.
  """

  # Unknown keys (typos in TOML or --config) are validation errors
  model_config = ConfigDict(extra="forbid")

  # Matching
  extension: str = Field(".go", description="File extension of the source files to rewrite.")
  vendor_prefix: str = Field("vendor/", description="Root-relative path prefix that is never rewritten.")

  # Line rewriting
  decorator: str = Field("errors.WithStack", description="Stack-capturing call wrapped around error arguments.")
  error_identifier: str = Field("err", description="Identifier that always denotes an error value.")
  error_prefixes: List[str] = Field(
    default_factory=lambda: list(DEFAULT_ERROR_PREFIXES),
    description="Call prefixes that construct error values.",
  )
  collapse_double_wrap: bool = Field(True, description="Collapse decorator(pkg.Ctor(...)) back into pkg.Ctor(...).")

  # External tools
  rewrite_imports: bool = Field(True, description="Run the formatter's rewrite rules before line rewriting.")
  formatter: str = Field("gofmt", description="Formatter executable used for the rewrite rules.")
  rewrite_rules: List[str] = Field(
    default_factory=lambda: list(DEFAULT_REWRITE_RULES),
    description="Rewrite rules passed to the formatter, one '-r' per rule.",
  )
  import_organizer: str = Field("goimports", description="Import organizer executable. Empty disables the post-pass.")
  strict_tools: bool = Field(True, description="Translate tool failures into ToolError carrying the tool output.")

  # Reporting
  fail_exit_code: bool = Field(False, description="Exit with status 1 when the walk aborts on an error.")

  @field_validator("extension")
  @classmethod
  def validate_extension(cls, v: str) -> str:
    """
    Normalizes the extension to its dotted form.

    Args:
        v (str): Raw extension, with or without the leading dot.

    Returns:
        str: The extension starting with '.'.

    Raises:
        ValueError: If the extension is empty.
    """
    v_clean = v.strip()
    if not v_clean or v_clean == ".":
      raise ValueError("extension must not be empty")
    if not v_clean.startswith("."):
      v_clean = f".{v_clean}"
    return v_clean

  @field_validator("decorator")
  @classmethod
  def validate_decorator(cls, v: str) -> str:
    """
    Ensures the decorator is a bare call name such as ``errors.WithStack``.

    Args:
        v (str): The decorator name.

    Returns:
        str: The stripped decorator name.

    Raises:
        ValueError: If the name is empty or contains call syntax.
    """
    v_clean = v.strip()
    if not v_clean or any(c in v_clean for c in "() ,"):
      raise ValueError(f"Invalid decorator name: '{v}'")
    return v_clean

  @classmethod
  def load(
    cls,
    search_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        overrides (Optional[Dict]): Values that take precedence over the TOML table.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    return cls(**load_settings(search_path, overrides))


def load_settings(search_path: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
  """
  Merges the raw ``[tool.stackwrap]`` table with overrides, without validating.

  Args:
      search_path (Optional[Path]): Directory to start searching for TOML config.
      overrides (Optional[Dict]): Values that take precedence over the TOML table.

  Returns:
      Dict[str, Any]: The merged settings.

  Raises:
      tomllib.TOMLDecodeError: If the pyproject.toml is malformed.
  """
  toml_config, _ = _load_toml_settings(search_path or Path.cwd())
  return {**toml_config, **(overrides or {})}


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)

      tool_section = data.get("tool", {})
      return tool_section.get("stackwrap", {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (int, float, bool, or string).

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
      print(f"⚠️  Ignoring invalid config format: '{item}'. Expected 'key=value'.")
      continue

    key, val_str = item.split("=", 1)
    key = key.strip()
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
        try:
          final_val = float(val_str)
        except ValueError:
          pass

    config[key] = final_val

  return config
