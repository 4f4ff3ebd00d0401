"""Aggregate model for a loaded incident configuration."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .breach_categories import BreachCategories
from .incident_window import IncidentWindow
from .web_settings import WebSettings


class IncidentConfiguration(BaseModel):
    """Immutable incident description shared by every request."""
    model_config = ConfigDict(frozen=True)

    window: IncidentWindow = Field(..., description="Disclosure window")
    affected: str = Field(..., description="Who or what is affected by the incident")
    breach: BreachCategories = Field(default_factory=BreachCategories, description="Exposed data categories")
    web: WebSettings = Field(..., description="Publishing settings")

    @property
    def start(self) -> datetime:
        return self.window.start

    @property
    def end(self) -> datetime:
        return self.window.end

    def __str__(self) -> str:
        return f"IncidentConfiguration(start={self.start}, end={self.end}, affected={self.affected})"
