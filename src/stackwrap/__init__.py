"""
stackwrap Package.

Rewrites ``return`` statements in Go sources so that returned errors carry a
stack trace, e.g. ``return nil, err`` becomes
``return nil, errors.WithStack(err)``.

Usage
-----

Rewrite a tree (formatter and import organizer included):

.. code-block:: console

    $ cd my/go/module && stackwrap

Rewrite a string in memory (no external tools):

.. code-block:: python

    import stackwrap
    print(stackwrap.wrap_source("func f() error {\\n\\treturn err\\n}"))
"""

from typing import Optional

from stackwrap.config import RuntimeConfig
from stackwrap.core.rewriter import LineRewriter

__version__ = "0.0.1"


def wrap_source(code: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Rewrites every line of a source string.

  Splits on ``\\n``, rewrites each line and joins again, exactly like the
  file driver but without touching disk or running external tools.

  Args:
      code (str): Source text.
      config (Optional[RuntimeConfig]): Rewriting settings.

  Returns:
      str: The rewritten source.
  """
  rewriter = LineRewriter(config)
  return "\n".join(rewriter.rewrite_lines(code.split("\n")))


__all__ = [
  "RuntimeConfig",
  "wrap_source",
  "__version__",
]
