"""Recover YAML error locations and messages from error display strings."""

__version__ = "0.1.0"

from yaml_error_context.models import ErrorAnalysis, ErrorAndContext, SourceOffset
from yaml_error_context.parser import (
    ContextLoader,
    ErrorContextAnalyzer,
    OffsetOutOfRangeError,
    YAMLContextError,
    analyze,
    analyze_exception,
    source_offset_from_location,
)

__all__ = [
    "ContextLoader",
    "ErrorAnalysis",
    "ErrorAndContext",
    "ErrorContextAnalyzer",
    "OffsetOutOfRangeError",
    "SourceOffset",
    "YAMLContextError",
    "__version__",
    "analyze",
    "analyze_exception",
    "source_offset_from_location",
]
