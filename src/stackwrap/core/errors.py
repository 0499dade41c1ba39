"""
Exception types raised by the rewriting pipeline.

Filesystem failures surface as the built-in ``OSError`` family; only failures
that originate in this package get their own types.
"""

from typing import Optional, Sequence


class StackwrapError(Exception):
  """Base class for all stackwrap-specific failures."""


class ToolError(StackwrapError):
  """
  An external tool (formatter or import organizer) exited with a non-zero status.

  The exception message is the tool's combined stdout/stderr text, so printing
  the exception reproduces the tool's own diagnostics.

  Attributes:
      command (Sequence[str]): The argv that was executed.
      returncode (Optional[int]): The exit status reported by the process.
  """

  def __init__(self, output: str, command: Sequence[str] = (), returncode: Optional[int] = None) -> None:
    super().__init__(output)
    self.command = list(command)
    self.returncode = returncode
