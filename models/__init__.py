"""
Data models for the incident notice service.

This package contains Pydantic models describing one security incident.
"""

from .incident_window import IncidentWindow
from .breach_categories import BreachCategories
from .web_settings import WebSettings
from .incident_configuration import IncidentConfiguration

__all__ = [
    'IncidentWindow',
    'BreachCategories',
    'WebSettings',
    'IncidentConfiguration',
]
