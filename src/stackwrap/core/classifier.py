"""
Argument Classifier.

Decides whether a ``return`` argument denotes an error value that should be
wrapped. The check is purely textual: nothing is type-resolved, so any token
that starts with a configured constructor prefix is treated as an error.
"""

from typing import Optional

from stackwrap.config import RuntimeConfig


def is_wrappable(arg: str, config: Optional[RuntimeConfig] = None) -> bool:
  """
  Checks if a trimmed argument token should be wrapped with the decorator.

  Args:
      arg (str): A single argument as produced by ``tokenize_args``.
      config (Optional[RuntimeConfig]): Source of the error identifier and
          constructor prefixes. Defaults are used when omitted.

  Returns:
      bool: True for the canonical error identifier (``err``) and for calls
      starting with an error constructor prefix (``errors.New``,
      ``fmt.Errorf``, ``log.Error``).
  """
  cfg = config or RuntimeConfig()

  if arg == cfg.error_identifier:
    return True

  return any(arg.startswith(prefix) for prefix in cfg.error_prefixes)
