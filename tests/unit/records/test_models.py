"""Tests for record models."""

import pytest
from pydantic import ValidationError

from scorekeeper.records.models import Record, ScoreUpdate


class TestRecord:
    """Tests for Record model."""

    def test_score_defaults_to_zero(self) -> None:
        assert Record(name="alice").score == 0

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            Record(score=1)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Record(name="")

    def test_extra_attributes_kept(self) -> None:
        record = Record(name="alice", score=2, team="red")
        assert record.attributes == {"team": "red"}
        assert record.model_dump() == {"name": "alice", "score": 2, "team": "red"}

    def test_attributes_is_a_copy(self) -> None:
        record = Record(name="alice", team="red")
        record.attributes["team"] = "blue"
        assert record.attributes == {"team": "red"}


class TestScoreUpdate:
    """Tests for ScoreUpdate model."""

    def test_delta_required(self) -> None:
        with pytest.raises(ValidationError):
            ScoreUpdate()

    def test_rejects_fractional_delta(self) -> None:
        with pytest.raises(ValidationError):
            ScoreUpdate(delta=1.5)
