"""
Page renderer for the incident notice.

Binds the selected breach labels and the incident configuration into the
``sorry.html`` Jinja2 template. The renderer owns its template environment, so
the ``localdate`` filter and the display timezone are injected per instance
instead of being registered on a process-wide template engine.
"""

import logging
from datetime import datetime, tzinfo
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound, select_autoescape

from errors import RenderError, RenderErrorKind
from models import IncidentConfiguration

logger = logging.getLogger(__name__)

NOTICE_TEMPLATE = "sorry.html"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M %Z"


class PageRenderer:
    """Renders the notice page from an incident configuration."""

    def __init__(self, templates_dir: str = "templates", display_timezone: Optional[str] = None):
        """
        Initialize the renderer.

        Args:
            templates_dir: Directory containing ``sorry.html``
            display_timezone: IANA zone name used by ``localdate``; the host's
                local zone when None
        """
        self.templates_dir = templates_dir
        self.display_timezone: Optional[tzinfo] = ZoneInfo(display_timezone) if display_timezone else None
        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(['html', 'xml']),
        )
        self.env.filters['localdate'] = self.localdate

    def localdate(self, value, format: Optional[str] = None) -> str:
        """Template filter: show a datetime in the display timezone."""
        if not isinstance(value, datetime):
            raise RenderError(
                RenderErrorKind.BAD_CONTEXT_TYPE,
                f"Date must be of type datetime not {type(value).__name__} ({value!r})"
            )
        return value.astimezone(self.display_timezone).strftime(format or DEFAULT_DATE_FORMAT)

    def render(self, config: IncidentConfiguration, categories: Sequence[str]) -> bytes:
        """
        Render the notice page.

        Args:
            config: Incident configuration, exposed to the template as ``config``
            categories: Selected breach labels, exposed as ``breach``

        Returns:
            UTF-8 encoded HTML

        Raises:
            RenderError: if the template is missing, broken, or a filter
                received a value of the wrong type
        """
        breach: List[str] = list(categories)
        try:
            template = self.env.get_template(NOTICE_TEMPLATE)
            html = template.render(breach=breach, config=config)
        except TemplateNotFound as e:
            raise RenderError(RenderErrorKind.MISSING_TEMPLATE, f"template not found: {e.name}") from e
        except TemplateError as e:
            raise RenderError(RenderErrorKind.TEMPLATE_ERROR, str(e)) from e

        logger.debug(f"Rendered {NOTICE_TEMPLATE} with {len(breach)} breach categories")
        return html.encode('utf-8')
