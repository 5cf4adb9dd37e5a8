"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from itemctl.domain.errors import IndexOutOfRangeError, MissingInputError
from itemctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="sort", data={"items": []})
        assert result.ok is True
        assert result.op == "sort"
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_items_property_rebuilds_collection(self) -> None:
        result = ServiceResult(
            ok=True,
            op="sort",
            data={"items": [{"identity": "a", "metadata": {"k": "v"}}, "b"]},
        )
        items = result.items
        assert items is not None
        assert items.identities() == ("a", "b")
        assert items[0].metadata == {"k": "v"}

    def test_items_and_count_absent(self) -> None:
        result = ServiceResult(ok=True, op="escape", data={"out_string": "x"})
        assert result.items is None
        assert result.count is None

    def test_count_property(self) -> None:
        assert ServiceResult(ok=True, op="get_item_count", data={"count": 4}).count == 4

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="get_item_count", data={"count": 2}, meta={"t": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 2
        assert parsed["meta"]["t"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="sort")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_from_missing_input(self) -> None:
        error = ServiceError.from_exception(MissingInputError("items2"))
        assert error.code == "MISSING_INPUT"
        assert error.message == "items2 is required"
        assert error.detail == {"input": "items2"}

    def test_from_index_error(self) -> None:
        error = ServiceError.from_exception(IndexOutOfRangeError(5, 3))
        assert error.code == "INDEX_OUT_OF_RANGE"
        assert error.detail == {"position": 5, "size": 3}
        assert "5" in error.message and "3" in error.message
