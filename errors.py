"""
Error taxonomy for the incident notice service.

ConfigError is fatal at startup: the process never serves a request against a
partially loaded configuration. RenderError is per request and is answered
with an internal server error.
"""

from enum import Enum
from typing import Optional


class ConfigErrorKind(Enum):
    """Why an incident configuration file could not be loaded."""
    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    PARSE_ERROR = "parse_error"
    SCHEMA_ERROR = "schema_error"
    INVALID_TIMESTAMP = "invalid_timestamp"


class RenderErrorKind(Enum):
    """Why the notice page could not be rendered."""
    MISSING_TEMPLATE = "missing_template"
    BAD_CONTEXT_TYPE = "bad_context_type"
    TEMPLATE_ERROR = "template_error"


class ConfigError(Exception):
    """Raised by the configuration loader for any malformed input."""

    def __init__(self, kind: ConfigErrorKind, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.kind.value}: {self.message} ({self.path})"
        return f"{self.kind.value}: {self.message}"


class RenderError(Exception):
    """Raised by the page renderer when the notice page cannot be produced."""

    def __init__(self, kind: RenderErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
