"""
Tests for Config Persistence (TOML) and CLI key=value parsing.

Verifies that:
1. RuntimeConfig.load() picks up [tool.stackwrap] from pyproject.toml.
2. Overrides take precedence over TOML settings.
3. File traversal finds toml in parent directories.
4. Validators normalize or reject bad values.
"""

import pytest
from pydantic import ValidationError

from stackwrap.config import RuntimeConfig, load_settings, parse_cli_key_values


@pytest.fixture
def toml_file(tmp_path):
  """Creates a dummy pyproject.toml in the temp dir."""
  fpath = tmp_path / "pyproject.toml"
  content = """
[tool.stackwrap]
decorator = "xerrors.Trace"
vendor_prefix = "third_party/"
error_prefixes = ["xerrors.New"]
strict_tools = false
"""
  fpath.write_text(content, encoding="utf-8")
  return fpath


def test_defaults():
  cfg = RuntimeConfig()
  assert cfg.extension == ".go"
  assert cfg.vendor_prefix == "vendor/"
  assert cfg.decorator == "errors.WithStack"
  assert cfg.error_identifier == "err"
  assert cfg.error_prefixes == ["errors.New", "fmt.Errorf", "log.Error"]
  assert cfg.formatter == "gofmt"
  assert cfg.import_organizer == "goimports"
  assert cfg.rewrite_imports is True
  assert cfg.collapse_double_wrap is True
  assert cfg.strict_tools is True
  assert cfg.fail_exit_code is False


def test_default_lists_are_not_shared():
  a = RuntimeConfig()
  a.error_prefixes.append("custom.New")
  assert RuntimeConfig().error_prefixes == ["errors.New", "fmt.Errorf", "log.Error"]


def test_load_from_toml(tmp_path, toml_file):
  cfg = RuntimeConfig.load(search_path=tmp_path)

  assert cfg.decorator == "xerrors.Trace"
  assert cfg.vendor_prefix == "third_party/"
  assert cfg.error_prefixes == ["xerrors.New"]
  assert cfg.strict_tools is False
  assert cfg.extension == ".go"


def test_overrides_win(tmp_path, toml_file):
  cfg = RuntimeConfig.load(search_path=tmp_path, overrides={"decorator": "errors.WithStack"})

  assert cfg.decorator == "errors.WithStack"
  assert cfg.vendor_prefix == "third_party/"


def test_hierarchical_search(tmp_path, toml_file):
  subdir = tmp_path / "cmd" / "server"
  subdir.mkdir(parents=True)

  cfg = RuntimeConfig.load(search_path=subdir)

  assert cfg.decorator == "xerrors.Trace"


def test_missing_toml_section_uses_defaults(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')

  assert RuntimeConfig.load(search_path=tmp_path) == RuntimeConfig()


@pytest.mark.parametrize("raw, expected", [("go", ".go"), (".rs", ".rs"), (" .go ", ".go")])
def test_extension_normalized(raw, expected):
  assert RuntimeConfig(extension=raw).extension == expected


@pytest.mark.parametrize("field, value", [("extension", ""), ("extension", "."), ("decorator", "errors.WithStack()"), ("decorator", "")])
def test_invalid_values_rejected(field, value):
  with pytest.raises(ValidationError):
    RuntimeConfig(**{field: value})


def test_parse_cli_key_values():
  parsed = parse_cli_key_values(["strict_tools=false", "extension=.rs", "decorator = pkgerr.Stack", "n=3", "junk"])

  assert parsed == {"strict_tools": False, "extension": ".rs", "decorator": "pkgerr.Stack", "n": 3}


def test_parse_cli_key_values_empty():
  assert parse_cli_key_values(None) == {}


def test_unknown_keys_rejected():
  with pytest.raises(ValidationError):
    RuntimeConfig(strict_tool=False)


def test_unknown_toml_key_rejected(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[tool.stackwrap]\nvendor_dir = "third_party/"\n')

  with pytest.raises(ValidationError):
    RuntimeConfig.load(search_path=tmp_path)


def test_load_settings_is_unvalidated(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[tool.stackwrap]\nextension = "."\nfail_exit_code = true\n')

  settings = load_settings(tmp_path, {"strict_tools": False})

  assert settings == {"extension": ".", "fail_exit_code": True, "strict_tools": False}
