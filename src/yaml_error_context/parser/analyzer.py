"""Recover error and context offsets from the display string of a YAML error.

The structured location some YAML libraries attach to their errors can point
at the wrong byte (see serde-yaml#153), while the rendered message reliably
names the line and column.  Offsets are therefore re-derived from the text.
"""

from __future__ import annotations

import logging

import yaml
from ruamel.yaml.error import MarkedYAMLError as RuamelMarkedYAMLError

from yaml_error_context.models.errors import (
    ErrorAnalysis,
    ErrorAndContext,
    ResolvedSpan,
    SpanResolution,
    UnresolvedReason,
    UnresolvedSpan,
)
from yaml_error_context.parser.markers import (
    PYYAML,
    LocationMarker,
    MarkerFormat,
    MarkerFormatRegistry,
)
from yaml_error_context.parser.offsets import OffsetOutOfRangeError, source_offset_from_location
from yaml_error_context.settings import Settings

logger = logging.getLogger("yaml_error_context.analyzer")

_MARKED_ERRORS: tuple[type[BaseException], ...] = (
    yaml.MarkedYAMLError,
    RuamelMarkedYAMLError,
)


def _resolve(text: str, marker: LocationMarker) -> SpanResolution:
    if marker.line is None or marker.column is None:
        logger.debug("Malformed location marker %r", marker.text)
        return UnresolvedSpan(
            marker=marker.text,
            reason=UnresolvedReason.MALFORMED_MARKER,
            line=marker.line,
            column=marker.column,
        )
    try:
        span = source_offset_from_location(text, marker.line, marker.column)
    except OffsetOutOfRangeError as exc:
        logger.debug("Location marker %r is outside the document: %s", marker.text, exc)
        return UnresolvedSpan(
            marker=marker.text,
            reason=UnresolvedReason.OUT_OF_RANGE,
            line=marker.line,
            column=marker.column,
        )
    return ResolvedSpan(marker=marker.text, line=marker.line, column=marker.column, span=span)


def _classify(
    markers: list[LocationMarker], marker_format: MarkerFormat
) -> tuple[LocationMarker | None, LocationMarker | None]:
    """Split markers into ``(error, context)``.

    Only the last two markers count: serde_yaml repeats the innermost
    location, e.g. ``at line 2 column 11 at line 2 column 11 at line 2 column 3``,
    and the outermost one is the enclosing context.
    """
    if not markers:
        return None, None
    if len(markers) == 1:
        return markers[0], None
    first, second = markers[-2:]
    if marker_format.context_first:
        return second, first
    return first, second


class ErrorContextAnalyzer:
    """Turns YAML error messages into :class:`ErrorAndContext` records.

    Stateless apart from the default marker format, so one instance can be
    shared between threads.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        if settings is None:
            settings = Settings()
        self._marker_format = MarkerFormatRegistry.get(settings.marker_format)

    @property
    def marker_format(self) -> MarkerFormat:
        return self._marker_format

    def analyze_markers(
        self, text: str, message: str, marker_format: MarkerFormat | None = None
    ) -> ErrorAnalysis:
        """Find, strip and resolve the location markers of ``message``."""
        marker_format = marker_format or self._marker_format
        markers = marker_format.find(message)
        if not markers:
            return ErrorAnalysis(error_message=message)

        error_marker, context_marker = _classify(markers, marker_format)
        return ErrorAnalysis(
            error=_resolve(text, error_marker) if error_marker else None,
            context=_resolve(text, context_marker) if context_marker else None,
            error_message=marker_format.strip(message, markers),
            markers_found=len(markers),
        )

    def analyze(
        self, text: str, message: str, marker_format: MarkerFormat | None = None
    ) -> ErrorAndContext:
        """Return the error span, cleaned message and context span of ``message``."""
        return self.analyze_markers(text, message, marker_format).to_error_and_context()

    def analyze_exception(self, text: str, error: BaseException) -> ErrorAndContext:
        """Analyze ``str(error)``; the error's own mark attributes are not used."""
        marker_format = PYYAML if isinstance(error, _MARKED_ERRORS) else None
        return self.analyze(text, str(error), marker_format)


_default_analyzer: ErrorContextAnalyzer | None = None


def get_default_analyzer() -> ErrorContextAnalyzer:
    """Shared analyzer built from ``Settings()`` on first use."""
    global _default_analyzer  # noqa: PLW0603
    if _default_analyzer is None:
        _default_analyzer = ErrorContextAnalyzer()
    return _default_analyzer


def reset_default_analyzer() -> None:
    """Drop the shared analyzer so the next call re-reads settings (for tests)."""
    global _default_analyzer  # noqa: PLW0603
    _default_analyzer = None


def analyze_markers(
    text: str, message: str, marker_format: MarkerFormat | None = None
) -> ErrorAnalysis:
    return get_default_analyzer().analyze_markers(text, message, marker_format)


def analyze(text: str, message: str, marker_format: MarkerFormat | None = None) -> ErrorAndContext:
    return get_default_analyzer().analyze(text, message, marker_format)


def analyze_exception(text: str, error: BaseException) -> ErrorAndContext:
    return get_default_analyzer().analyze_exception(text, error)
