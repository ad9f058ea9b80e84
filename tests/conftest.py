"""Shared test fixtures for yaml-error-context."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from yaml_error_context.parser.analyzer import ErrorContextAnalyzer, reset_default_analyzer
from yaml_error_context.parser.markers import MarkerFormatRegistry
from yaml_error_context.settings import Settings

# ``field_2`` is reported missing on the first character of ``field_1`` (line 3 column 3).
MISSING_FIELD_YAML = """\
---
outer:
  field_1: 123
# ^
# '--- field_2 missing the first character of the first type that has `#[serde(flatten)]`.
"""

# Flattened struct: the mapping that holds ``field_1`` starts at line 4 column 3.
FLATTENED_FIELD_YAML = """\
---
outer:
  # inner
  field_1: 123
"""

# The unknown ``~`` variant is at line 3 column 10.
NULL_VARIANT_YAML = """\
---
outer:
  inner: ~ # null variant
#        ^
#        '-- source offset is here.
"""

FLOW_MAPPING_YAML = """\
---
outer: {inner: 1}
"""

MULTIBYTE_YAML = "név: ü\nkey: 値\n# ☃ snowman\n"

# PyYAML reports the second ":" at line 2 column 5 (byte 10).
LINE_SEPARATOR_YAML = "# c\u2028a: b: c\nxxxxxxxxxxxx: 1\n"

# PyYAML skips the BOM, so the second ":" is column 5 (byte 7).
BOM_YAML = "\ufeffa: b: c\n"

# PyYAML rendering of a ParserError with a context mark and a problem mark.
PYYAML_MESSAGE = (
    "while parsing a block mapping\n"
    '  in "<unicode string>", line 1, column 1:\n'
    "    a: 1\n"
    "    ^\n"
    "expected <block end>, but found '<block mapping start>'\n"
    '  in "<unicode string>", line 3, column 2:\n'
    "     c: 2\n"
    "     ^"
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep a developer's .env or YAML_ERROR_CONTEXT_* variables out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("YAML_ERROR_CONTEXT_MARKER_FORMAT", raising=False)
    monkeypatch.delenv("YAML_ERROR_CONTEXT_LOG_LEVEL", raising=False)
    reset_default_analyzer()
    yield
    reset_default_analyzer()


@pytest.fixture
def marker_registry() -> Iterator[type[MarkerFormatRegistry]]:
    """The marker format registry, restored to the built-in formats afterwards."""
    yield MarkerFormatRegistry
    MarkerFormatRegistry.reset()


@pytest.fixture
def analyzer() -> ErrorContextAnalyzer:
    return ErrorContextAnalyzer(Settings())
