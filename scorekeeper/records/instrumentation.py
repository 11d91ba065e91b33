"""Metrics and timing for record store operations."""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from scorekeeper.observability.metrics import STORE_OPERATION_LATENCY, STORE_OPERATIONS


@dataclass
class OperationResult:
    """Outcome label for one store operation, set by the caller."""

    outcome: str = "ok"


@contextmanager
def observe_operation(backend: str, operation: str) -> Iterator[OperationResult]:
    """Count and time a store operation.

    The outcome defaults to "ok", becomes "error" if the block raises,
    and can be set to anything else (e.g. "not_found") by the caller.
    """
    result = OperationResult()
    start = time.perf_counter()
    try:
        yield result
    except Exception:
        result.outcome = "error"
        raise
    finally:
        STORE_OPERATION_LATENCY.labels(backend=backend, operation=operation).observe(
            time.perf_counter() - start
        )
        STORE_OPERATIONS.labels(
            backend=backend, operation=operation, outcome=result.outcome
        ).inc()
