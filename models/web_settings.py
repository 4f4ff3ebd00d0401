"""Model for the web section of the incident configuration."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

# Paths already served by the application next to the notice
RESERVED_PREFIXES = ('/assets', '/api/health')


class WebSettings(BaseModel):
    """Where the notice page is published."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    endpoint: StrictStr = Field(..., description="URL path of the notice page")

    @field_validator('endpoint')
    @classmethod
    def check_path(cls, v):
        """Endpoint must be a literal absolute URL path outside the reserved routes."""
        if not v.startswith('/'):
            raise ValueError("endpoint must start with '/'")
        if '<' in v or '>' in v:
            raise ValueError("endpoint must not contain '<' or '>'")
        for prefix in RESERVED_PREFIXES:
            if v.rstrip('/') == prefix or v.startswith(prefix + '/'):
                raise ValueError(f"endpoint must not be under {prefix}")
        return v
