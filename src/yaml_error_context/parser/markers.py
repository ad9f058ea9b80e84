"""Recognition of line/column location markers in YAML error messages.

The wording of a marker belongs to the library that rendered the error, so
every pattern lives here and nowhere else.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LocationMarker:
    """A marker phrase found in a message.

    ``line`` / ``column`` are ``None`` when the component is missing, not a
    number, or not positive.
    """

    text: str
    start: int
    end: int
    line: int | None
    column: int | None

    @property
    def is_malformed(self) -> bool:
        return self.line is None or self.column is None


def _parse_positive(value: str | None) -> int | None:
    if not value or not (value.isascii() and value.isdigit()):
        return None
    number = int(value)
    return number if number > 0 else None


@dataclass(frozen=True, slots=True)
class MarkerFormat:
    """A marker pattern with ``line`` and ``column`` groups and its ordering.

    With ``context_first`` the enclosing context is rendered before the
    problem location; otherwise the problem location comes first.
    """

    name: str
    pattern: re.Pattern[str]
    context_first: bool = False

    def find(self, message: str) -> list[LocationMarker]:
        """Return every marker in ``message``, left to right."""
        return [
            LocationMarker(
                text=match.group(),
                start=match.start(),
                end=match.end(),
                line=_parse_positive(match.group("line")),
                column=_parse_positive(match.group("column")),
            )
            for match in self.pattern.finditer(message)
        ]

    def strip(self, message: str, markers: list[LocationMarker] | None = None) -> str:
        """Return ``message`` with the marker phrases cut out."""
        if markers is None:
            markers = self.find(message)
        parts: list[str] = []
        position = 0
        for marker in markers:
            parts.append(message[position : marker.start])
            position = marker.end
        parts.append(message[position:])
        return "".join(parts)


# serde_yaml / libyaml: "missing field `path` at line 2 column 12 at line 2 column 3"
SERDE_YAML = MarkerFormat(
    name="serde_yaml",
    pattern=re.compile(
        r"(?:^|\s)at line(?: (?P<line>\w+))? column(?: (?P<column>\w+))?\b"
    ),
)

# PyYAML / ruamel.yaml marks, optionally followed by the source snippet:
#   '\n  in "<unicode string>", line 3, column 5:\n        b: 2\n        ^'
PYYAML = MarkerFormat(
    name="pyyaml",
    pattern=re.compile(
        r'\n?  in "[^"\n]*", line(?: (?P<line>\w+))?, column(?: (?P<column>\w+))?'
        r"(?::\n {4}[^\n]*\n *\^)?"
    ),
    context_first=True,
)


class UnsupportedMarkerFormatError(ValueError):
    """Raised when a requested marker format is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.format_name = name
        self.available = available
        super().__init__(
            f"Unsupported marker format '{name}'. Available: {', '.join(available)}"
        )


class MarkerFormatRegistry:
    """Registry of the marker formats the analyzer can recognise."""

    _formats: dict[str, MarkerFormat] = {}

    @classmethod
    def register(cls, marker_format: MarkerFormat) -> MarkerFormat:
        cls._formats[marker_format.name] = marker_format
        return marker_format

    @classmethod
    def get(cls, name: str) -> MarkerFormat:
        if name not in cls._formats:
            raise UnsupportedMarkerFormatError(name, available=cls.available())
        return cls._formats[name]

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._formats.keys())

    @classmethod
    def reset(cls) -> None:
        """Restore the built-in formats only (for testing)."""
        cls._formats.clear()
        cls.register(SERDE_YAML)
        cls.register(PYYAML)


MarkerFormatRegistry.register(SERDE_YAML)
MarkerFormatRegistry.register(PYYAML)
