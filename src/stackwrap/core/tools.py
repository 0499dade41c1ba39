"""
External Tool Invocation.

Wraps the two collaborators run around the line rewriting:

1.  **Formatter** (``gofmt -r ... -w``): rewrites the ``errors`` import path and
    the formatted-error constructor before the lines are touched.
2.  **Import organizer** (``goimports -w``): adds, removes and sorts imports
    after the rewrite so the new decorator calls resolve.

Both run synchronously with stdout and stderr merged, without timeouts.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Sequence

from stackwrap.config import RuntimeConfig
from stackwrap.core.errors import ToolError

logger = logging.getLogger(__name__)


def run_tool(command: Sequence[str], strict: bool = True) -> str:
  """
  Runs an external command and returns its combined output.

  Args:
      command (Sequence[str]): The argv to execute.
      strict (bool): When True, a non-zero exit raises ``ToolError`` whose
          message is the combined output. When False, the raw
          ``subprocess.CalledProcessError`` propagates instead.

  Returns:
      str: Combined stdout/stderr text of the successful run.

  Raises:
      ToolError: Non-zero exit in strict mode.
      subprocess.CalledProcessError: Non-zero exit in loose mode.
      OSError: The executable could not be started.
  """
  argv = [str(part) for part in command]
  logger.debug(f"Running: {' '.join(argv)}")

  proc = subprocess.run(argv, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)

  if proc.returncode != 0:
    if strict:
      raise ToolError(proc.stdout or "", command=argv, returncode=proc.returncode)
    proc.check_returncode()

  return proc.stdout or ""


def formatter_command(path: Path, config: RuntimeConfig) -> List[str]:
  """
  Builds the formatter argv: one ``-r <rule>`` pair per rule, then ``-w <path>``.

  Args:
      path (Path): File to rewrite in place.
      config (RuntimeConfig): Formatter executable and rewrite rules.

  Returns:
      List[str]: The argv.
  """
  argv = [config.formatter]
  for rule in config.rewrite_rules:
    argv.extend(["-r", rule])
  argv.extend(["-w", str(path)])
  return argv


def rewrite_imports(path: Path, config: RuntimeConfig) -> None:
  """
  Applies the formatter rewrite rules to a file in place.

  Formatter failures are always reported with the formatter's output.

  Args:
      path (Path): The file to rewrite.
      config (RuntimeConfig): Tool settings.

  Raises:
      ToolError: If the formatter exits with a non-zero status.
  """
  run_tool(formatter_command(path, config), strict=True)


def organize_imports(path: Path, config: RuntimeConfig) -> None:
  """
  Runs the import organizer on a file in place.

  Does nothing when ``config.import_organizer`` is empty.

  Args:
      path (Path): The file to fix up.
      config (RuntimeConfig): Tool settings; ``strict_tools`` selects the
          failure type (see ``run_tool``).
  """
  if not config.import_organizer:
    return
  run_tool([config.import_organizer, "-w", str(path)], strict=config.strict_tools)
