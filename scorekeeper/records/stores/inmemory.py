"""In-memory implementation of RecordStore."""

from collections.abc import AsyncIterator

from scorekeeper.observability.logging import get_logger
from scorekeeper.records.errors import FullScanDisabledError
from scorekeeper.records.instrumentation import observe_operation
from scorekeeper.records.models import Record
from scorekeeper.records.store import (
    RecordStore,
    validate_name,
    validate_number,
    validate_record,
)

logger = get_logger(__name__)


class InMemoryRecordStore(RecordStore):
    """In-memory implementation of RecordStore for testing and development.

    Records are copied on the way in and out so callers never share
    state with the store. update_score does not await between reading
    and writing, so it cannot interleave with other coroutines.
    """

    backend = "inmemory"

    def __init__(self, *, allow_full_scan: bool = False) -> None:
        self._records: dict[str, Record] = {}
        self._allow_full_scan = allow_full_scan

    async def get_by_name(self, name: str) -> Record | None:
        validate_name(name, "get_by_name")
        with observe_operation(self.backend, "get_by_name") as result:
            record = self._records.get(name)
            if record is None:
                result.outcome = "not_found"
                logger.debug("record_not_found", name=name)
                return None
            return record.model_copy(deep=True)

    async def save(self, record: Record) -> Record:
        validate_record(record, "save")
        with observe_operation(self.backend, "save"):
            self._records[record.name] = record.model_copy(deep=True)
            logger.debug("record_saved", name=record.name, score=record.score)
            return record.model_copy(deep=True)

    async def update_score(self, name: str, delta: int) -> Record | None:
        validate_name(name, "update_score")
        validate_number(delta, "update_score", "delta")
        with observe_operation(self.backend, "update_score") as result:
            current = self._records.get(name)
            if current is None:
                result.outcome = "not_found"
                logger.info("record_update_skipped_absent", name=name)
                return None

            score = validate_number(current.score + delta, "update_score", "score")
            updated = current.model_copy(update={"score": score}, deep=True)
            self._records[name] = updated
            logger.info(
                "record_score_updated",
                name=name,
                delta=delta,
                score=updated.score,
            )
            return updated.model_copy(deep=True)

    async def remove_by_name(self, name: str) -> bool:
        validate_name(name, "remove_by_name")
        with observe_operation(self.backend, "remove_by_name") as result:
            if self._records.pop(name, None) is None:
                result.outcome = "not_found"
                return False
            logger.info("record_removed", name=name)
            return True

    async def list_all(self) -> AsyncIterator[Record]:
        if not self._allow_full_scan:
            raise FullScanDisabledError(
                "Full scan is disabled for this store",
                operation="list_all",
            )

        with observe_operation(self.backend, "list_all"):
            # Snapshot so writes during iteration do not break it
            snapshot = list(self._records.values())
            for record in snapshot:
                yield record.model_copy(deep=True)
            logger.info("record_scan_completed", count=len(snapshot))
