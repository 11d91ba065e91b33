"""DynamoDB implementation of RecordStore.

Uses the low-level botocore client, which is safe to share between
threads, and runs every blocking call in the default executor. One
client is created per store in connect() and closed in close().

Credentials are resolved by the standard AWS provider chain
(environment variables, shared config files, or an attached role);
the store never accepts them directly.

Retry policy: SDK retries are disabled. Reads (GetItem, Scan pages and
the DescribeTable startup check) are retried with exponential backoff
on transient errors. Writes are never retried, since a timed-out write
may already have been applied and ADD is not idempotent.
"""

import asyncio
import functools
from collections.abc import AsyncIterator
from decimal import Decimal, DecimalException
from typing import Any

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    HTTPClientError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
)
from botocore.exceptions import ConnectionError as BotoConnectionError

from scorekeeper.config.models.storage import RecordStoreConfig
from scorekeeper.observability.logging import get_logger
from scorekeeper.observability.metrics import STORE_RETRIES
from scorekeeper.records.errors import (
    CredentialsUnavailableError,
    FullScanDisabledError,
    InvalidRecordValueError,
    RecordStoreError,
    StoreAuthorizationError,
    StoreConfigurationError,
    StoreUnavailableError,
)
from scorekeeper.records.instrumentation import observe_operation
from scorekeeper.records.models import Record
from scorekeeper.records.store import (
    RecordStore,
    validate_name,
    validate_number,
    validate_record,
)

logger = get_logger(__name__)

AUTHORIZATION_ERROR_CODES: frozenset[str] = frozenset({
    "AccessDeniedException",
    "UnrecognizedClientException",
    "InvalidSignatureException",
})

CREDENTIALS_ERROR_CODES: frozenset[str] = frozenset({
    "ExpiredTokenException",
    "MissingAuthenticationTokenException",
})

CONFIGURATION_ERROR_CODES: frozenset[str] = frozenset({
    "ResourceNotFoundException",
})

TRANSIENT_ERROR_CODES: frozenset[str] = frozenset({
    "ProvisionedThroughputExceededException",
    "ThrottlingException",
    "RequestLimitExceeded",
    "InternalServerError",
    "ServiceUnavailable",
})

# Rejected request values, such as numbers past 38 digits or an ADD that overflows
VALIDATION_ERROR_CODES: frozenset[str] = frozenset({
    "ValidationException",
})

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def map_client_error(err: ClientError, operation: str) -> RecordStoreError:
    """Translate a DynamoDB ClientError into the store's error taxonomy."""
    error = err.response.get("Error", {})
    code = error.get("Code", "Unknown")
    message = f"{operation} failed: {code}"
    if error.get("Message"):
        message = f"{message}: {error['Message']}"
    status = err.response.get("ResponseMetadata", {}).get("HTTPStatusCode", 0)

    if code in AUTHORIZATION_ERROR_CODES:
        return StoreAuthorizationError(message, operation=operation, code=code)
    if code in CREDENTIALS_ERROR_CODES:
        return CredentialsUnavailableError(message, operation=operation, code=code)
    if code in CONFIGURATION_ERROR_CODES:
        return StoreConfigurationError(message, operation=operation, code=code)
    if code in VALIDATION_ERROR_CODES:
        return InvalidRecordValueError(message, operation=operation, code=code)
    if code in TRANSIENT_ERROR_CODES or status >= 500:
        return StoreUnavailableError(message, operation=operation, code=code)
    return RecordStoreError(message, operation=operation, code=code)


def map_botocore_error(err: BotoCoreError, operation: str) -> RecordStoreError:
    """Translate a client-side botocore failure into the store's error taxonomy."""
    message = f"{operation} failed: {err}"
    code = type(err).__name__

    if isinstance(err, NoCredentialsError | PartialCredentialsError):
        return CredentialsUnavailableError(message, operation=operation, code=code)
    if isinstance(err, NoRegionError):
        return StoreConfigurationError(message, operation=operation, code=code)
    if isinstance(err, BotoConnectionError | HTTPClientError):
        return StoreUnavailableError(message, operation=operation, code=code)
    return RecordStoreError(message, operation=operation, code=code)


def _to_dynamo_value(value: Any) -> Any:
    """Convert floats (which DynamoDB rejects) to Decimal, recursively."""
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: _to_dynamo_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_to_dynamo_value(v) for v in value]
    return value


def _from_dynamo_value(value: Any) -> Any:
    """Convert Decimal numbers back to int or float, recursively."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _from_dynamo_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_from_dynamo_value(v) for v in value]
    if isinstance(value, set):
        return {_from_dynamo_value(v) for v in value}
    return value


def record_to_item(record: Record, operation: str = "save") -> dict[str, Any]:
    """Serialize a record to DynamoDB attribute values.

    Raises:
        InvalidRecordValueError: A value has no DynamoDB representation
    """
    try:
        return {
            key: _serializer.serialize(_to_dynamo_value(value))
            for key, value in record.model_dump().items()
        }
    except (DecimalException, TypeError) as e:
        raise InvalidRecordValueError(
            f"{operation} failed: record {record.name!r} cannot be stored: {e!r}",
            operation=operation,
        ) from e


def item_to_record(item: dict[str, Any]) -> Record:
    """Deserialize DynamoDB attribute values into a record."""
    data = {
        key: _from_dynamo_value(_deserializer.deserialize(value))
        for key, value in item.items()
    }
    return Record.model_validate(data)


def _key(name: str) -> dict[str, Any]:
    return {"name": {"S": name}}


class DynamoDBRecordStore(RecordStore):
    """DynamoDB-backed record store keyed by the "name" attribute.

    update_score is a single conditional UpdateItem (ADD on score,
    guarded by attribute_exists on name), so concurrent updates to the
    same record are applied atomically by DynamoDB and none are lost.
    """

    backend = "dynamodb"

    def __init__(
        self,
        table_name: str = "scores",
        *,
        region: str | None = None,
        endpoint_url: str | None = None,
        connect_timeout: float = 5.0,
        read_timeout: float = 10.0,
        read_max_attempts: int = 3,
        retry_base_delay: float = 0.1,
        retry_max_delay: float = 2.0,
        consistent_read: bool = False,
        allow_full_scan: bool = False,
        verify_on_startup: bool = True,
        session: boto3.session.Session | None = None,
    ) -> None:
        self._table_name = table_name
        self._region = region
        self._endpoint_url = endpoint_url
        self._connect_timeout = connect_timeout
        self._read_timeout = read_timeout
        self._read_max_attempts = max(1, read_max_attempts)
        self._retry_base_delay = retry_base_delay
        self._retry_max_delay = retry_max_delay
        self._consistent_read = consistent_read
        self._allow_full_scan = allow_full_scan
        self._verify_on_startup = verify_on_startup
        self._session = session
        self._client: Any = None

    @classmethod
    def from_config(cls, config: RecordStoreConfig) -> "DynamoDBRecordStore":
        """Create a store from the storage.records settings section."""
        return cls(
            table_name=config.table_name,
            region=config.region,
            endpoint_url=config.endpoint_url,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            read_max_attempts=config.read_max_attempts,
            retry_base_delay=config.retry_base_delay,
            retry_max_delay=config.retry_max_delay,
            consistent_read=config.consistent_read,
            allow_full_scan=config.allow_full_scan,
            verify_on_startup=config.verify_on_startup,
        )

    @property
    def table_name(self) -> str:
        return self._table_name

    async def connect(self) -> None:
        """Create the shared client and check the table is reachable.

        Raises:
            CredentialsUnavailableError: No credentials in the provider chain
            StoreConfigurationError: Bad region, endpoint or missing table
            StoreAuthorizationError: The caller may not describe the table
        """
        if self._client is not None:
            return

        session = self._session or boto3.session.Session(region_name=self._region)
        # Resolution may query the instance metadata service
        loop = asyncio.get_running_loop()
        credentials = await loop.run_in_executor(None, session.get_credentials)
        if credentials is None:
            raise CredentialsUnavailableError(
                "No AWS credentials found in the provider chain",
                operation="connect",
            )

        try:
            self._client = session.client(
                "dynamodb",
                endpoint_url=self._endpoint_url,
                config=Config(
                    connect_timeout=self._connect_timeout,
                    read_timeout=self._read_timeout,
                    retries={"total_max_attempts": 1, "mode": "standard"},
                ),
            )
        except BotoCoreError as e:
            raise map_botocore_error(e, "connect") from e
        except ValueError as e:
            # botocore rejects malformed endpoint URLs with ValueError
            raise StoreConfigurationError(
                f"connect failed: {e}", operation="connect"
            ) from e

        if self._verify_on_startup:
            try:
                await self._read("connect", "describe_table", TableName=self._table_name)
            except RecordStoreError:
                await self.close()
                raise

        logger.info(
            "record_store_connected",
            backend=self.backend,
            table=self._table_name,
            region=self._client.meta.region_name,
            endpoint_url=self._endpoint_url,
        )

    async def close(self) -> None:
        if self._client is None:
            return
        client, self._client = self._client, None
        client.close()
        logger.info("record_store_closed", backend=self.backend, table=self._table_name)

    async def _call(self, operation: str, method: str, **kwargs: Any) -> dict[str, Any]:
        """Run one client method in the executor, mapping its errors."""
        if self._client is None:
            raise RecordStoreError(
                "Record store is not connected; call connect() first",
                operation=operation,
            )
        call = functools.partial(getattr(self._client, method), **kwargs)
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, call)
        except ClientError as e:
            raise map_client_error(e, operation) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, operation) from e

    async def _read(self, operation: str, method: str, **kwargs: Any) -> dict[str, Any]:
        """Run an idempotent read, retrying transient failures with backoff."""
        delay = self._retry_base_delay
        attempt = 1
        while True:
            try:
                return await self._call(operation, method, **kwargs)
            except StoreUnavailableError as e:
                if attempt >= self._read_max_attempts:
                    logger.error(
                        "record_store_retries_exhausted",
                        operation=operation,
                        attempts=attempt,
                        code=e.code,
                    )
                    raise
                STORE_RETRIES.labels(backend=self.backend, operation=operation).inc()
                logger.warning(
                    "record_store_retry",
                    operation=operation,
                    attempt=attempt,
                    delay=delay,
                    code=e.code,
                )
                await asyncio.sleep(delay)
                delay = min(self._retry_max_delay, delay * 2)
                attempt += 1

    async def get_by_name(self, name: str) -> Record | None:
        validate_name(name, "get_by_name")
        with observe_operation(self.backend, "get_by_name") as result:
            response = await self._read(
                "get_by_name",
                "get_item",
                TableName=self._table_name,
                Key=_key(name),
                ConsistentRead=self._consistent_read,
            )
            item = response.get("Item")
            if item is None:
                result.outcome = "not_found"
                logger.debug("record_not_found", name=name)
                return None
            return item_to_record(item)

    async def save(self, record: Record) -> Record:
        validate_record(record, "save")
        with observe_operation(self.backend, "save"):
            await self._call(
                "save",
                "put_item",
                TableName=self._table_name,
                Item=record_to_item(record),
            )
            logger.debug("record_saved", name=record.name, score=record.score)
            return record

    async def update_score(self, name: str, delta: int) -> Record | None:
        validate_name(name, "update_score")
        validate_number(delta, "update_score", "delta")
        with observe_operation(self.backend, "update_score") as result:
            try:
                response = await self._call(
                    "update_score",
                    "update_item",
                    TableName=self._table_name,
                    Key=_key(name),
                    UpdateExpression="ADD #score :delta",
                    ConditionExpression="attribute_exists(#name)",
                    ExpressionAttributeNames={"#name": "name", "#score": "score"},
                    ExpressionAttributeValues={":delta": {"N": str(delta)}},
                    ReturnValues="ALL_NEW",
                )
            except RecordStoreError as e:
                if e.code != CONDITIONAL_CHECK_FAILED:
                    raise
                result.outcome = "not_found"
                logger.info("record_update_skipped_absent", name=name)
                return None

            record = item_to_record(response["Attributes"])
            logger.info(
                "record_score_updated",
                name=name,
                delta=delta,
                score=record.score,
            )
            return record

    async def remove_by_name(self, name: str) -> bool:
        validate_name(name, "remove_by_name")
        with observe_operation(self.backend, "remove_by_name") as result:
            response = await self._call(
                "remove_by_name",
                "delete_item",
                TableName=self._table_name,
                Key=_key(name),
                ReturnValues="ALL_OLD",
            )
            if not response.get("Attributes"):
                result.outcome = "not_found"
                return False
            logger.info("record_removed", name=name)
            return True

    async def list_all(self) -> AsyncIterator[Record]:
        if not self._allow_full_scan:
            raise FullScanDisabledError(
                "Full scan is disabled for this store; set allow_full_scan to opt in",
                operation="list_all",
            )

        request: dict[str, Any] = {
            "TableName": self._table_name,
            "ConsistentRead": self._consistent_read,
        }
        with observe_operation(self.backend, "list_all"):
            count = 0
            pages = 0
            while True:
                response = await self._read("list_all", "scan", **request)
                pages += 1
                for item in response.get("Items", []):
                    count += 1
                    yield item_to_record(item)

                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                request["ExclusiveStartKey"] = last_key

            logger.info(
                "record_scan_completed",
                table=self._table_name,
                count=count,
                pages=pages,
            )
