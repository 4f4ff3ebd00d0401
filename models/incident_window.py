"""Model for the disclosure window of an incident notice."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class IncidentWindow(BaseModel):
    """Interval during which the notice page may be served (both ends exclusive)."""
    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Disclosure start, timezone-aware")
    end: datetime = Field(..., description="Disclosure end, timezone-aware")

    @property
    def is_inverted(self) -> bool:
        """True when the window can never be open (start is not before end)."""
        return self.start >= self.end
