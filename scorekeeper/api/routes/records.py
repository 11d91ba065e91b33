"""Record endpoints.

Thin pass-through to the record store: absent records become 404
responses, store errors are translated by the global handlers.
"""

from fastapi import APIRouter, status

from scorekeeper.api.dependencies import RecordStoreDep
from scorekeeper.api.exceptions import RecordNotFoundError
from scorekeeper.api.models.records import RecordBody
from scorekeeper.records.models import Record, ScoreUpdate

router = APIRouter(prefix="/records")


@router.get("", response_model=list[Record])
async def list_records(store: RecordStoreDep) -> list[Record]:
    """Return every record. Disabled unless the store allows full scans."""
    return [record async for record in store.list_all()]


@router.get("/{name}", response_model=Record)
async def get_record(name: str, store: RecordStoreDep) -> Record:
    record = await store.get_by_name(name)
    if record is None:
        raise RecordNotFoundError(f"Record {name!r} not found")
    return record


@router.put("/{name}", response_model=Record)
async def put_record(name: str, body: RecordBody, store: RecordStoreDep) -> Record:
    """Create or replace a record."""
    record = Record.model_validate({**body.model_dump(), "name": name})
    return await store.save(record)


@router.post("/{name}/score", response_model=Record)
async def add_score(name: str, update: ScoreUpdate, store: RecordStoreDep) -> Record:
    """Add to the score of an existing record; absent records are not created."""
    record = await store.update_score(name, update.delta)
    if record is None:
        raise RecordNotFoundError(f"Record {name!r} not found")
    return record


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(name: str, store: RecordStoreDep) -> None:
    if not await store.remove_by_name(name):
        raise RecordNotFoundError(f"Record {name!r} not found")
