"""Tests for the store-independent validation helpers."""

import pytest

from scorekeeper.records.errors import InvalidRecordValueError
from scorekeeper.records.models import Record
from scorekeeper.records.store import number_in_range, validate_number, validate_record


class TestNumberInRange:
    """Numbers must fit DynamoDB's 38 digits and exponent range."""

    @pytest.mark.parametrize(
        "value",
        [0, 0.0, True, 10**38 - 1, -(10**38 - 1), 0.5, 1e125, 1e-130, -2.5e-7],
    )
    def test_storable(self, value) -> None:
        assert number_in_range(value)

    @pytest.mark.parametrize(
        "value",
        [10**38, -(10**40), 1e126, 1e-131, float("inf"), float("-inf"), float("nan")],
    )
    def test_not_storable(self, value) -> None:
        assert not number_in_range(value)


class TestValidateNumber:
    def test_returns_value(self) -> None:
        assert validate_number(7, "update_score", "delta") == 7

    def test_error_names_field_and_operation(self) -> None:
        with pytest.raises(InvalidRecordValueError, match="delta") as exc_info:
            validate_number(10**40, "update_score", "delta")
        assert exc_info.value.operation == "update_score"
        assert isinstance(exc_info.value, ValueError)


class TestValidateRecord:
    def test_accepts_nested_numbers_in_range(self) -> None:
        record = Record(name="alice", score=3, stats={"best": 10, "ratios": [0.5, 1.5]})
        assert validate_record(record, "save") is record

    def test_rejects_nested_number_out_of_range(self) -> None:
        record = Record(name="alice", stats={"ratios": [0.5, 1e200]})
        with pytest.raises(InvalidRecordValueError, match="stats.ratios"):
            validate_record(record, "save")
