"""Result models for YAML error locations recovered from error text."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SourceOffset(BaseModel):
    """A 0-based byte offset into the UTF-8 encoding of a YAML document."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(ge=0)


class ErrorAndContext(BaseModel):
    """Error location, cleaned message and enclosing context of a YAML error.

    ``error_message`` is the error's display string with the location markers
    removed, e.g. ``"outer: missing field `field_2`"`` for
    ``"outer: missing field `field_2` at line 3 column 3"``.
    """

    model_config = ConfigDict(frozen=True)

    error_span: SourceOffset | None = None
    error_message: str
    context_span: SourceOffset | None = None


class UnresolvedReason(StrEnum):
    OUT_OF_RANGE = "out_of_range"
    MALFORMED_MARKER = "malformed_marker"


class ResolvedSpan(BaseModel):
    """A location marker that maps onto a character of the document."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["resolved"] = "resolved"
    marker: str
    line: int
    column: int
    span: SourceOffset


class UnresolvedSpan(BaseModel):
    """A location marker that was found but could not be turned into an offset."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unresolved"] = "unresolved"
    marker: str
    reason: UnresolvedReason
    line: int | None = None
    column: int | None = None


SpanResolution = ResolvedSpan | UnresolvedSpan


def _span_of(resolution: SpanResolution | None) -> SourceOffset | None:
    if isinstance(resolution, ResolvedSpan):
        return resolution.span
    return None


class ErrorAnalysis(BaseModel):
    """Per-span detail behind an :class:`ErrorAndContext`.

    ``error`` / ``context`` are ``None`` when the message has no marker for
    that role, and an :class:`UnresolvedSpan` when a marker exists but does
    not point into the document.
    """

    model_config = ConfigDict(frozen=True)

    error: ResolvedSpan | UnresolvedSpan | None = None
    context: ResolvedSpan | UnresolvedSpan | None = None
    error_message: str
    markers_found: int = 0

    @property
    def error_span(self) -> SourceOffset | None:
        return _span_of(self.error)

    @property
    def context_span(self) -> SourceOffset | None:
        return _span_of(self.context)

    def to_error_and_context(self) -> ErrorAndContext:
        return ErrorAndContext(
            error_span=self.error_span,
            error_message=self.error_message,
            context_span=self.context_span,
        )
