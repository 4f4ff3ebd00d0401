"""
Incident configuration loader.

Reads the HCL settings file named on the command line and turns it into an
immutable IncidentConfiguration. Any problem with the file raises ConfigError;
callers treat every kind as fatal.

Expected layout::

    scope {
      start    = "2024-01-01 00:00:00 +0900"
      end      = "2024-01-31 23:59:59 +0900"
      affected = "Example Corp customers"
    }
    breach {
      defaced_malware = false
      address         = true
      ...
    }
    web {
      endpoint = "/sorry"
    }
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import hcl
from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from errors import ConfigError, ConfigErrorKind
from models import BreachCategories, IncidentConfiguration, IncidentWindow, WebSettings

logger = logging.getLogger(__name__)

# Timestamp layout used by scope.start / scope.end
TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"
_TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}$", re.ASCII)

SectionModel = TypeVar("SectionModel", bound=BaseModel)


class ScopeSection(BaseModel):
    """Raw ``scope`` section; timestamps are still text here."""
    model_config = ConfigDict(extra="ignore")

    start: StrictStr
    end: StrictStr
    affected: StrictStr


def parse_timestamp(value: str, field: str = "timestamp") -> datetime:
    """
    Parse ``YYYY-MM-DD HH:MM:SS +HHMM`` into an aware datetime.

    Args:
        value: Text from the config file
        field: Field name used in the error message

    Returns:
        Timezone-aware datetime carrying the offset from the text

    Raises:
        ConfigError: INVALID_TIMESTAMP if the text does not match the format
            or names an impossible date or time
    """
    if not _TIMESTAMP_PATTERN.match(value):
        raise ConfigError(
            ConfigErrorKind.INVALID_TIMESTAMP,
            f"{field} {value!r} does not match 'YYYY-MM-DD HH:MM:SS +HHMM'"
        )
    try:
        return datetime.strptime(value, TIME_FORMAT)
    except ValueError as e:
        raise ConfigError(ConfigErrorKind.INVALID_TIMESTAMP, f"{field} {value!r}: {e}") from e


def _read_text(path: str) -> str:
    resolved = Path(path).expanduser().resolve()
    if not resolved.is_file():
        raise ConfigError(ConfigErrorKind.NOT_FOUND, "configuration file does not exist", str(resolved))
    try:
        return resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(ConfigErrorKind.UNREADABLE, f"cannot read configuration file: {e}", str(resolved)) from e


def _decode_section(document: Dict[str, Any], name: str, model: Type[SectionModel], path: str) -> SectionModel:
    section = document.get(name)
    if section is None:
        raise ConfigError(ConfigErrorKind.SCHEMA_ERROR, f"missing '{name}' section", path)
    if not isinstance(section, dict):
        raise ConfigError(ConfigErrorKind.SCHEMA_ERROR, f"'{name}' must be a single block", path)
    try:
        return model.model_validate(section)
    except ValidationError as e:
        problems = "; ".join(
            f"{name}.{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(ConfigErrorKind.SCHEMA_ERROR, problems, path) from e


def load_incident_config(path: str) -> IncidentConfiguration:
    """
    Load an incident configuration file.

    Args:
        path: Path to the HCL settings file

    Returns:
        Frozen IncidentConfiguration

    Raises:
        ConfigError: NOT_FOUND, UNREADABLE, PARSE_ERROR, SCHEMA_ERROR or
            INVALID_TIMESTAMP
    """
    logger.debug(f"Parse config start: {path}")

    text = _read_text(path)

    try:
        document = hcl.loads(text)
    except ValueError as e:
        raise ConfigError(ConfigErrorKind.PARSE_ERROR, f"invalid HCL: {e}", path) from e
    if not isinstance(document, dict):
        raise ConfigError(ConfigErrorKind.PARSE_ERROR, "top level must be an object", path)

    scope = _decode_section(document, "scope", ScopeSection, path)
    breach = _decode_section(document, "breach", BreachCategories, path)
    web = _decode_section(document, "web", WebSettings, path)

    try:
        window = IncidentWindow(
            start=parse_timestamp(scope.start, "scope.start"),
            end=parse_timestamp(scope.end, "scope.end"),
        )
    except ConfigError as e:
        e.path = path
        raise

    if window.is_inverted:
        logger.warning(
            f"Disclosure window start {window.start} is not before end {window.end}; "
            "the notice page will never be served"
        )

    config = IncidentConfiguration(window=window, affected=scope.affected, breach=breach, web=web)

    logger.debug(f"Config: {config}")
    logger.debug(f"Parse config end: {path}")
    return config
