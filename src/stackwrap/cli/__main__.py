"""
Main Entry Point for the stackwrap CLI.

Running the tool without arguments rewrites every matching file below the
current working directory.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from stackwrap import __version__
from stackwrap.cli.handlers import handle_rewrite
from stackwrap.config import parse_cli_key_values
from stackwrap.utils.console import configure_logging


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code.
  """
  parser = argparse.ArgumentParser(prog="stackwrap", description="stackwrap: wrap returned errors with stack-capturing calls")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument(
    "path",
    nargs="?",
    type=Path,
    default=None,
    help="Directory to walk (default: current working directory)",
  )
  parser.add_argument("-v", "--verbose", action="store_true", help="Log per-file details and tool invocations")
  parser.add_argument(
    "--config",
    nargs="*",
    help="Setting overrides in key=value format (e.g. extension=.go strict_tools=false)",
  )

  args = parser.parse_args(argv)
  configure_logging(verbose=args.verbose)

  overrides = parse_cli_key_values(args.config)
  return handle_rewrite(args.path, overrides)


if __name__ == "__main__":
  sys.exit(main())
