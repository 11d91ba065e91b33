"""Record domain models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """A scored record keyed by its unique name.

    Attributes beyond ``name`` and ``score`` are accepted and stored
    as-is; they carry no functional meaning here.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, description="Unique record key")
    score: int = Field(default=0, description="Accumulated score")

    @property
    def attributes(self) -> dict[str, Any]:
        """Additional attributes stored with the record."""
        return dict(self.model_extra or {})


class ScoreUpdate(BaseModel):
    """Score contribution to add to an existing record."""

    delta: int = Field(..., description="Amount added to the current score")
