"""YAML loader that attaches recovered error locations to parse failures."""

from __future__ import annotations

import logging
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError

from yaml_error_context.models.errors import ErrorAndContext
from yaml_error_context.parser.analyzer import ErrorContextAnalyzer

logger = logging.getLogger("yaml_error_context.loader")


class YAMLContextError(Exception):
    """Raised when a document fails to parse.

    Carries the document text and the :class:`ErrorAndContext` recovered from
    the parser's message; the parser's exception is chained as ``__cause__``.
    """

    def __init__(self, filename: str, content: str, context: ErrorAndContext) -> None:
        self.filename = filename
        self.content = content
        self.context = context
        super().__init__(f"{filename}: {context.error_message}")


class ContextLoader:
    """Loads YAML with ruamel.yaml and reports failures as ``YAMLContextError``."""

    def __init__(self, analyzer: ErrorContextAnalyzer | None = None) -> None:
        self._yaml = YAML(typ="safe", pure=True)
        self._analyzer = analyzer or ErrorContextAnalyzer()

    def load_string(self, content: str, filename: str = "<string>") -> Any:
        """Load YAML from a string. Empty documents load as ``None``."""
        try:
            return self._yaml.load(content)
        except MarkedYAMLError as exc:
            context = self._analyzer.analyze_exception(content, exc)
            logger.debug(
                "Failed to parse %s (error_span=%s, context_span=%s)",
                filename,
                context.error_span,
                context.context_span,
            )
            raise YAMLContextError(filename, content, context) from exc
