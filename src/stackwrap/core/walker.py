"""
Tree Walker.

Visits every entry below a root directory in lexical order and hands matching
source files to the ``FileDriver``. Any exception aborts the walk; files
already rewritten stay rewritten.

Skip rules, in order:
    - directories (symlinked directories are not followed);
    - paths whose extension is not ``config.extension``;
    - paths whose root-relative POSIX form starts with ``config.vendor_prefix``.
      Only a top-level vendor directory matches; ``pkg/vendor/x.go`` is processed.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field

from stackwrap.config import RuntimeConfig
from stackwrap.core.driver import FileDriver
from stackwrap.utils.console import print_progress


class WalkReport(BaseModel):
  """
  Summary of a completed walk.
  """

  processed: List[str] = Field(default_factory=list, description="Root-relative paths handed to the driver.")
  changed: List[str] = Field(default_factory=list, description="Subset of processed paths whose lines changed.")


def iter_entries(root: Path) -> Iterator[Path]:
  """
  Yields root-relative paths of all non-directory entries, depth first, in lexical order.

  Args:
      root (Path): Directory to walk.

  Raises:
      OSError: If a directory cannot be listed.
  """

  def _walk(directory: Path, rel: Path) -> Iterator[Path]:
    with os.scandir(directory) as it:
      entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
      if entry.is_dir(follow_symlinks=False):
        yield from _walk(Path(entry.path), rel / entry.name)
      else:
        yield rel / entry.name

  yield from _walk(root, Path())


def file_extension(name: str) -> str:
  """
  Returns the text from the last dot of a file name, or "" if it has none.

  Unlike ``Path.suffix``, a dotfile such as ``.go`` has the extension ``.go``.
  """
  dot = name.rfind(".")
  return name[dot:] if dot >= 0 else ""


def should_process(rel_path: Path, config: RuntimeConfig) -> bool:
  """
  Applies the extension and vendor-prefix skip rules.

  Args:
      rel_path (Path): Path relative to the walk root.
      config (RuntimeConfig): Matching settings.

  Returns:
      bool: True if the file should be rewritten.
  """
  if file_extension(rel_path.name) != config.extension:
    return False

  if rel_path.as_posix().startswith(config.vendor_prefix):
    return False

  return True


def walk_tree(
  root: Optional[Path] = None,
  config: Optional[RuntimeConfig] = None,
  driver: Optional[FileDriver] = None,
) -> WalkReport:
  """
  Rewrites every matching file below ``root``.

  Prints ``processing: <relative-path>`` before each file is handed to the driver.

  Args:
      root (Optional[Path]): Directory to walk. Defaults to the current working directory.
      config (Optional[RuntimeConfig]): Settings. Defaults to a stock ``RuntimeConfig``.
      driver (Optional[FileDriver]): Driver instance; built from ``config`` when omitted.

  Returns:
      WalkReport: Paths processed and changed.

  Raises:
      OSError: Traversal or file I/O failure.
      StackwrapError: External tool failure.
  """
  root = Path(root) if root is not None else Path.cwd()
  cfg = config or RuntimeConfig()
  drv = driver or FileDriver(cfg)
  report = WalkReport()

  for rel_path in iter_entries(root):
    if not should_process(rel_path, cfg):
      continue

    rel = rel_path.as_posix()
    print_progress(rel)

    record = drv.process(root / rel_path)
    report.processed.append(rel)
    if record.changed:
      report.changed.append(rel)

  return report
