"""
Rewrite Command Handler.

Loads the configuration, walks the tree, and reports the outcome. Errors abort
the walk and are printed as ``ERROR: <message>`` on standard error.
"""

import subprocess
from pathlib import Path
from typing import Any, Dict, Optional

from stackwrap.config import RuntimeConfig, load_settings
from stackwrap.core.errors import StackwrapError
from stackwrap.core.walker import walk_tree
from stackwrap.utils.console import log_info, log_success, log_warning, print_error


def handle_rewrite(root: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None) -> int:
  """
  Handles the default command: rewrite every matching file below ``root``.

  Args:
      root: Directory to walk. Defaults to the current working directory.
      overrides: Settings that take precedence over ``[tool.stackwrap]``.

  Returns:
      int: Exit code. Failures return 0 unless ``fail_exit_code`` is enabled.
  """
  walk_root = root or Path.cwd()
  fail_code = bool((overrides or {}).get("fail_exit_code", False))

  try:
    settings = load_settings(walk_root, overrides)
    # Honor the flag even when other settings fail validation
    fail_code = settings.get("fail_exit_code") is True
    config = RuntimeConfig(**settings)
  except ValueError as e:
    # Covers pydantic.ValidationError and tomllib.TOMLDecodeError
    print_error(str(e))
    return 1 if fail_code else 0

  log_info(f"Rewriting {config.extension} files under {walk_root}")

  try:
    report = walk_tree(walk_root, config)
  except (StackwrapError, OSError, subprocess.SubprocessError) as e:
    print_error(str(e))
    return 1 if config.fail_exit_code else 0

  if not report.processed:
    log_warning(f"No {config.extension} files found under {walk_root}")
  else:
    log_success(f"Processed {len(report.processed)} files, {len(report.changed)} changed.")

  return 0
