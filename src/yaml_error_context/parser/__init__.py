"""Error-text analysis and offset resolution for YAML documents."""

from yaml_error_context.parser.analyzer import (
    ErrorContextAnalyzer,
    analyze,
    analyze_exception,
    analyze_markers,
    get_default_analyzer,
    reset_default_analyzer,
)
from yaml_error_context.parser.loader import ContextLoader, YAMLContextError
from yaml_error_context.parser.markers import (
    PYYAML,
    SERDE_YAML,
    LocationMarker,
    MarkerFormat,
    MarkerFormatRegistry,
    UnsupportedMarkerFormatError,
)
from yaml_error_context.parser.offsets import (
    OffsetOutOfRangeError,
    location_from_source_offset,
    source_offset_from_location,
)

__all__ = [
    "PYYAML",
    "SERDE_YAML",
    "ContextLoader",
    "ErrorContextAnalyzer",
    "LocationMarker",
    "MarkerFormat",
    "MarkerFormatRegistry",
    "OffsetOutOfRangeError",
    "UnsupportedMarkerFormatError",
    "YAMLContextError",
    "analyze",
    "analyze_exception",
    "analyze_markers",
    "get_default_analyzer",
    "location_from_source_offset",
    "reset_default_analyzer",
    "source_offset_from_location",
]
