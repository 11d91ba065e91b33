"""Dependency injection for API routes.

The record store is built and connected by the application lifespan and
kept on app.state; routes receive it through RecordStoreDep. Tests can
override get_record_store or pass a store to create_app().
"""

from typing import Annotated

from fastapi import Depends, Request

from scorekeeper.records.store import RecordStore


def get_record_store(request: Request) -> RecordStore:
    """Return the store created at application startup."""
    return request.app.state.record_store


RecordStoreDep = Annotated[RecordStore, Depends(get_record_store)]