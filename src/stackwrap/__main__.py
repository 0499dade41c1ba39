"""
Entry point for module execution (``python -m stackwrap``).

This module delegates execution to the CLI handler in ``stackwrap.cli.__main__``.
"""

import sys
from stackwrap.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
