"""
Line Rewriter.

Rewrites a single physical line so that error-valued ``return`` arguments are
wrapped with the stack-capturing decorator::

    return nil, err      ->  return nil, errors.WithStack(err)

The line is reassembled from three parts: the original text before the first
``return `` (indentation, labels), the keyword, and the re-joined arguments.
Trailing whitespace on a rewritten line is not preserved.

Known limitations:
    - Multi-line return statements are only rewritten on their first line.
    - A line that contains ``return `` before the real statement (e.g. inside a
      string on the same line) keeps only the text before that first occurrence.
"""

import re
from typing import List, Optional, Pattern

from stackwrap.config import RuntimeConfig
from stackwrap.core.classifier import is_wrappable
from stackwrap.core.tokenizer import tokenize_args

RETURN_KEYWORD = "return "


def _double_wrap_pattern(decorator: str) -> Optional[Pattern[str]]:
  """
  Builds the regex matching ``<decorator>(<pkg>.<Ctor>(...))``.

  ``<pkg>`` is the package qualifier of the decorator itself, so for the
  default decorator the pattern is ``errors\\.WithStack\\(errors\\.(.*?)\\)\\)``.

  Args:
      decorator (str): Qualified decorator name.

  Returns:
      Optional[Pattern[str]]: The compiled pattern, or None when the decorator
      has no package qualifier.
  """
  pkg, _, _ = decorator.rpartition(".")
  if not pkg:
    return None
  return re.compile(rf"{re.escape(decorator)}\({re.escape(pkg)}\.(.*?)\)\)")


def _collapse(pattern: Pattern[str], pkg: str, line: str) -> str:
  return pattern.sub(lambda m: f"{pkg}.{m.group(1)})", line)


def collapse_double_wrap(line: str, decorator: str = "errors.WithStack") -> str:
  """
  Collapses a decorator applied to a constructor from the decorator's own package.

  ``errors.WithStack(errors.New("x"))`` becomes ``errors.New("x")``. Only this
  one shape is recognized; the match is non-greedy and ends at the first
  ``))``, so it is a textual cleanup rather than an idempotence guarantee.

  Args:
      line (str): A line, usually already passed through the wrapper.
      decorator (str): Qualified decorator name.

  Returns:
      str: The line with every double-wrap occurrence collapsed.
  """
  pattern = _double_wrap_pattern(decorator)
  if pattern is None:
    return line
  return _collapse(pattern, decorator.rpartition(".")[0], line)


class LineRewriter:
  """
  Applies the return-argument wrapping to individual lines.

  Attributes:
      config (RuntimeConfig): Decorator name, classifier settings and cleanup flag.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
    self.config = config or RuntimeConfig()
    self._pkg = self.config.decorator.rpartition(".")[0]
    self._double_wrap = _double_wrap_pattern(self.config.decorator) if self.config.collapse_double_wrap else None

  def wrap(self, arg: str) -> str:
    """Wraps a single argument in the decorator call."""
    return f"{self.config.decorator}({arg})"

  def rewrite(self, line: str) -> str:
    """
    Rewrites one physical line.

    Lines that do not start with ``return `` once stripped are returned
    unchanged, byte for byte.

    Args:
        line (str): The source line, without its trailing newline.

    Returns:
        str: The rewritten line.
    """
    trimmed = line.strip()
    if not trimmed.startswith(RETURN_KEYWORD):
      return line

    args = tokenize_args(trimmed[len(RETURN_KEYWORD) :])
    wrapped = [self.wrap(arg) if is_wrappable(arg, self.config) else arg for arg in args]

    prefix = line.split(RETURN_KEYWORD, 1)[0]
    result = f"{prefix}{RETURN_KEYWORD}{', '.join(wrapped)}"

    if self._double_wrap is not None:
      result = _collapse(self._double_wrap, self._pkg, result)

    return result

  def rewrite_lines(self, lines: List[str]) -> List[str]:
    """
    Rewrites a sequence of lines independently, preserving order.

    Args:
        lines (List[str]): Physical lines of a file.

    Returns:
        List[str]: A new list of rewritten lines.
    """
    return [self.rewrite(line) for line in lines]


def rewrite_line(line: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Convenience wrapper around ``LineRewriter(config).rewrite(line)``.

  Args:
      line (str): The source line.
      config (Optional[RuntimeConfig]): Rewriting settings.

  Returns:
      str: The rewritten line.
  """
  return LineRewriter(config).rewrite(line)
