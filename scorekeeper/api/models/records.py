"""Request bodies for record endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RecordBody(BaseModel):
    """Full record contents for a direct write; the name comes from the path."""

    model_config = ConfigDict(extra="allow")

    score: int = Field(default=0, description="Score to store")
