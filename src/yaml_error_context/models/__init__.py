"""Pydantic models for recovered YAML error locations."""

from yaml_error_context.models.errors import (
    ErrorAnalysis,
    ErrorAndContext,
    ResolvedSpan,
    SourceOffset,
    SpanResolution,
    UnresolvedReason,
    UnresolvedSpan,
)

__all__ = [
    "ErrorAnalysis",
    "ErrorAndContext",
    "ResolvedSpan",
    "SourceOffset",
    "SpanResolution",
    "UnresolvedReason",
    "UnresolvedSpan",
]
