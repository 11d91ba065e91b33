"""API server configuration model."""

from pydantic import BaseModel, Field


class APIConfig(BaseModel):
    """Configuration for the HTTP hosting surface."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, gt=0, lt=65536, description="Bind port")
    title: str = Field(default="Scorekeeper API", description="OpenAPI title")
