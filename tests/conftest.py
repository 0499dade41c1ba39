"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A small Go source tree for walker and CLI tests.
- A configuration that never spawns external tools.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'stackwrap' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from stackwrap.config import RuntimeConfig  # noqa: E402


@pytest.fixture
def offline_config():
  """Configuration with both external tool passes disabled."""
  return RuntimeConfig(rewrite_imports=False, import_organizer="")


@pytest.fixture
def go_tree(tmp_path):
  """
  Creates a mock module layout.

  /main.go               (rewritable)
  /README.md             (wrong extension)
  /pkg/store/store.go    (rewritable)
  /pkg/vendor/dep.go     (nested vendor dir, still processed)
  /vendor/lib/lib.go     (top-level vendor, skipped)
  """
  (tmp_path / "main.go").write_text("package main\n\nfunc run() error {\n\treturn err\n}\n")
  (tmp_path / "README.md").write_text("return err\n")

  store = tmp_path / "pkg" / "store"
  store.mkdir(parents=True)
  (store / "store.go").write_text("package store\n\nfunc Get() (int, error) {\n\treturn 0, errors.New(\"missing\")\n}\n")

  nested_vendor = tmp_path / "pkg" / "vendor"
  nested_vendor.mkdir(parents=True)
  (nested_vendor / "dep.go").write_text("package dep\n")

  lib = tmp_path / "vendor" / "lib"
  lib.mkdir(parents=True)
  (lib / "lib.go").write_text("package lib\n\nfunc f() error {\n\treturn err\n}\n")

  return tmp_path
