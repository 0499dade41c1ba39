"""
Tests for the Argument Classifier.
"""

import pytest

from stackwrap.config import RuntimeConfig
from stackwrap.core.classifier import is_wrappable


@pytest.mark.parametrize(
  "arg, expected",
  [
    ("err", True),
    ("nil", False),
    ('errors.New("x")', True),
    ('fmt.Errorf("x: %w", err)', True),
    ('log.Error("boom")', True),
    ("someStruct{}", False),
    ("errFoo", False),
    ("e", False),
    ("", False),
    ("0", False),
    ('errors.Wrap(err, "x")', False),
  ],
)
def test_default_rules(arg, expected):
  assert is_wrappable(arg) is expected


def test_prefix_match_is_purely_textual():
  """A call that merely starts with a constructor prefix still matches."""
  assert is_wrappable("errors.NewReader(buf)") is True
  assert is_wrappable("log.Errorf") is True


def test_custom_identifier_and_prefixes():
  cfg = RuntimeConfig(error_identifier="e", error_prefixes=["xerrors.Errorf"])

  assert is_wrappable("e", cfg) is True
  assert is_wrappable("err", cfg) is False
  assert is_wrappable('xerrors.Errorf("x")', cfg) is True
  assert is_wrappable('errors.New("x")', cfg) is False
