"""RecordStore factory for creating backend instances.

The DynamoDB backend takes everything but credentials from configuration;
credentials come from the standard AWS provider chain
(AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY / AWS_REGION for local
development, or the execution role when deployed).
"""

from scorekeeper.config.models.storage import RecordStoreConfig
from scorekeeper.observability.logging import get_logger
from scorekeeper.records.store import RecordStore
from scorekeeper.records.stores.dynamodb import DynamoDBRecordStore
from scorekeeper.records.stores.inmemory import InMemoryRecordStore

logger = get_logger(__name__)


def create_record_store(config: RecordStoreConfig) -> RecordStore:
    """Create a RecordStore instance based on configuration.

    The returned store is not connected yet; call ``connect()`` at
    startup and ``close()`` at shutdown.

    Raises:
        ValueError: If backend type is not supported
    """
    backend = config.backend

    if backend == "inmemory":
        logger.info(
            "creating_record_store",
            backend="inmemory",
            allow_full_scan=config.allow_full_scan,
        )
        return InMemoryRecordStore(allow_full_scan=config.allow_full_scan)

    elif backend == "dynamodb":
        logger.info(
            "creating_record_store",
            backend="dynamodb",
            table=config.table_name,
            region=config.region,
            endpoint_url=config.endpoint_url,
            allow_full_scan=config.allow_full_scan,
        )
        return DynamoDBRecordStore.from_config(config)

    else:
        raise ValueError(f"Unsupported record store backend: {backend}")
