"""Storage backend configuration models."""

import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

BackendType = Literal["inmemory", "dynamodb"]

# DynamoDB table naming rules
TABLE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]{3,255}$")


class RecordStoreConfig(BaseModel):
    """Configuration for the record store backend.

    Credentials are never part of this model: the DynamoDB backend
    resolves them through the standard AWS provider chain.
    """

    backend: BackendType = Field(
        default="dynamodb",
        description="Backend type",
    )
    table_name: str = Field(
        default="scores",
        description="Table holding records, selectable per environment",
    )
    region: str | None = Field(
        default=None,
        description="AWS region (None defers to the provider chain)",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Endpoint override, e.g. http://localhost:8000 for DynamoDB Local",
    )
    connect_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Connection timeout per request (seconds)",
    )
    read_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Read timeout per request (seconds)",
    )
    read_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts for reads on transient errors; writes are never retried",
    )
    retry_base_delay: float = Field(
        default=0.1,
        ge=0,
        description="Initial backoff delay between read attempts (seconds)",
    )
    retry_max_delay: float = Field(
        default=2.0,
        ge=0,
        description="Upper bound for the backoff delay (seconds)",
    )
    consistent_read: bool = Field(
        default=False,
        description="Use strongly consistent point reads",
    )
    allow_full_scan: bool = Field(
        default=False,
        description="Opt in to full-table scans (cost grows with table size)",
    )
    verify_on_startup: bool = Field(
        default=True,
        description="Check that the table is reachable when the store connects",
    )

    @field_validator("table_name")
    @classmethod
    def validate_table_name(cls, v: str) -> str:
        """Reject names DynamoDB would refuse."""
        if not TABLE_NAME_PATTERN.match(v):
            raise ValueError(
                f"Invalid table name {v!r}: expected 3-255 characters of [a-zA-Z0-9_.-]"
            )
        return v

    @model_validator(mode="after")
    def validate_retry_delays(self) -> "RecordStoreConfig":
        """Ensure the backoff cap is not below the base delay."""
        if self.retry_max_delay < self.retry_base_delay:
            raise ValueError("retry_max_delay must be >= retry_base_delay")
        return self


class StorageConfig(BaseModel):
    """Configuration for all storage backends."""

    records: RecordStoreConfig = Field(
        default_factory=RecordStoreConfig,
        description="RecordStore backend",
    )
