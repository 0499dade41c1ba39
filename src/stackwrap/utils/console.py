"""
Logging and Console Output.

Two kinds of output leave the tool:

1.  **Log records** go through the standard `logging` library and are rendered
    by a `rich` handler (`log_info`, `log_success`, `log_warning`, plus the
    per-file DEBUG records emitted by the core with ``--verbose``).
2.  **Plain lines**: ``processing: <path>`` on stdout and ``ERROR: <message>``
    on stderr. These are written as-is, because the error text is usually the
    combined output of gofmt/goimports and must keep its tabs and line endings.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom logging level for Success (higher than INFO, lower than WARNING)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme({"logging.level.success": "green"})


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> RichHandler:
  """
  Installs the rich handler on the root logger, replacing any previous one.

  Args:
      verbose (bool): Lower the threshold to DEBUG so per-file details show.
      console (Optional[Console]): Destination console. Defaults to a themed
          console on stdout.

  Returns:
      RichHandler: The installed handler.
  """
  root_logger = logging.getLogger()
  for handler in list(root_logger.handlers):
    if isinstance(handler, RichHandler):
      root_logger.removeHandler(handler)

  rich_handler = RichHandler(
    console=console or Console(theme=_THEME),
    show_time=False,
    show_path=False,
    markup=False,
    rich_tracebacks=True,
  )

  root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
  root_logger.addHandler(rich_handler)
  return rich_handler


configure_logging()


def print_progress(path: str) -> None:
  """
  Emits the per-file progress line on standard output.

  Args:
      path (str): Path of the file about to be processed, relative to the walk root.
  """
  print(f"processing: {path}", file=sys.stdout)


def print_error(msg: str) -> None:
  """
  Emits a fatal error on standard error, prefixed with ``ERROR: ``.

  Args:
      msg (str): The error text. Written verbatim.
  """
  print(f"ERROR: {msg}", file=sys.stderr)


def log_info(msg: str) -> None:
  """Logs an informational message via standard logging."""
  logging.info(f"ℹ️  {msg}")


def log_success(msg: str) -> None:
  """
  Logs a success message via standard logging.

  Args:
      msg (str): The message content.
  """
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}")


def log_warning(msg: str) -> None:
  """
  Logs a warning message via standard logging.

  Args:
      msg (str): The message content.
  """
  logging.warning(f"⚠️  {msg}")
