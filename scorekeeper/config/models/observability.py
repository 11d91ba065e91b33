"""Observability configuration model."""

from typing import Literal

from pydantic import BaseModel, Field


class ObservabilityConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_format: Literal["json", "console"] = Field(
        default="json",
        description="json for production, console for development",
    )
    redact_pii: bool = Field(
        default=True,
        description="Redact secrets and PII from log events",
    )
    metrics_enabled: bool = Field(
        default=True,
        description="Expose Prometheus metrics on /metrics",
    )
