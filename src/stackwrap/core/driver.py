"""
File Driver.

Runs the full read-modify-write cycle for one source file:

1. Formatter rewrite rules (optional, before the file is read).
2. Read permission bits and content.
3. Rewrite every line, write back, restore the permission bits.
4. Import organizer post-pass.

Content is handled as UTF-8 with surrogate escapes, so bytes that are not
valid UTF-8 are written back unchanged.
"""

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from stackwrap.config import RuntimeConfig
from stackwrap.core.rewriter import LineRewriter
from stackwrap.core.tools import organize_imports, rewrite_imports

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class FileRecord(BaseModel):
  """
  State of one processed file.
  """

  path: Path = Field(..., description="The file that was rewritten.")
  mode: int = Field(..., description="Permission bits of the original file.")
  original_lines: List[str] = Field(default_factory=list, description="Lines as read from disk.")
  rewritten_lines: List[str] = Field(default_factory=list, description="Lines as written back.")

  @property
  def changed(self) -> bool:
    """
    Check if the line rewrite altered the content.

    Returns:
        True if at least one line differs.
    """
    return self.original_lines != self.rewritten_lines

  @property
  def changed_lines(self) -> int:
    """Number of lines whose text differs after rewriting."""
    return sum(1 for old, new in zip(self.original_lines, self.rewritten_lines) if old != new)


class FileDriver:
  """
  Processes individual files according to a ``RuntimeConfig``.

  Attributes:
      config (RuntimeConfig): Tool and rewriting settings.
      rewriter (LineRewriter): The per-line transformer.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
    """
    Initializes the driver.

    Args:
        config: Settings to use. Defaults to a stock ``RuntimeConfig``.
    """
    self.config = config or RuntimeConfig()
    self.rewriter = LineRewriter(self.config)

  def process(self, path: Path) -> FileRecord:
    """
    Rewrites a file in place.

    Args:
        path: The file to process.

    Returns:
        FileRecord: The original and rewritten lines plus permission bits.

    Raises:
        OSError: If the file cannot be stat'ed, read or written.
        ToolError: If an external tool fails (strict mode).
        subprocess.CalledProcessError: If the import organizer fails in loose mode.
    """
    path = Path(path)

    if self.config.rewrite_imports:
      rewrite_imports(path, self.config)

    record = self.rewrite_file(path)

    organize_imports(path, self.config)

    return record

  def rewrite_file(self, path: Path) -> FileRecord:
    """
    Performs only the line rewrite step, without external tools.

    Args:
        path: The file to process.

    Returns:
        FileRecord: The original and rewritten lines plus permission bits.

    Raises:
        OSError: If the file cannot be stat'ed, read or written.
    """
    mode = stat.S_IMODE(os.stat(path).st_mode)
    content = path.read_bytes().decode(_ENCODING, _ERRORS)

    original = content.split("\n")
    rewritten = self.rewriter.rewrite_lines(original)

    path.write_bytes("\n".join(rewritten).encode(_ENCODING, _ERRORS))
    os.chmod(path, mode)

    record = FileRecord(path=path, mode=mode, original_lines=original, rewritten_lines=rewritten)
    logger.debug(f"{path}: {record.changed_lines} line(s) rewritten")
    return record
