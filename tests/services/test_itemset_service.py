"""Tests for ItemSetService: per-operation methods and run() dispatch."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from itemctl.domain.items import Item, ItemCollection
from itemctl.domain.operations import Operation
from itemctl.services.itemset import ItemSetService
from itemctl.services.telemetry import enable_telemetry

ids = ItemCollection.from_identities


@pytest.fixture
def service() -> ItemSetService:
    return ItemSetService()


class TestCollectionOperations:
    def test_sort(self, service: ItemSetService) -> None:
        result = service.sort(ids("how", "hello", "are"))
        assert result.ok
        assert result.op == "sort"
        assert result.items == ids("are", "hello", "how")
        assert "count" not in result.data

    def test_get_item(self, service: ItemSetService) -> None:
        result = service.get_item(ids("hello", "how", "are"), 1)
        assert result.ok
        assert result.data["items"] == [{"identity": "how", "metadata": {}}]

    def test_get_item_out_of_range_has_no_output(self, service: ItemSetService) -> None:
        result = service.get_item(ids("hello", "how", "are"), 5)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INDEX_OUT_OF_RANGE"
        assert result.data == {}

    def test_get_last_item(self, service: ItemSetService) -> None:
        assert service.get_last_item(ids("a", "b")).items == ids("b")

    def test_get_last_item_empty(self, service: ItemSetService) -> None:
        result = service.get_last_item(ItemCollection())
        assert result.error is not None
        assert result.error.code == "INDEX_OUT_OF_RANGE"

    def test_get_item_count(self, service: ItemSetService) -> None:
        result = service.get_item_count(ids("a", "b", "c"))
        assert result.data == {"count": 3}

    def test_remove_duplicate_files(self, service: ItemSetService) -> None:
        result = service.remove_duplicate_files(
            ids("C:\\a\\x.txt", "C:\\b\\x.txt", "C:\\a\\y.txt")
        )
        assert result.items == ids("C:\\a\\x.txt", "C:\\a\\y.txt")
        assert result.count == 2

    def test_metadata_survives_serialization(self, service: ItemSetService) -> None:
        items = ItemCollection.of(
            [Item(identity="b", metadata={"Copy": "true"}), Item(identity="a")]
        )
        result = service.sort(items)
        assert result.data["items"][1] == {"identity": "b", "metadata": {"Copy": "true"}}


class TestSetOperations:
    def test_common(self, service: ItemSetService) -> None:
        result = service.get_common_items(ids("hello", "how", "are"), ids("hello", "bye"))
        assert result.items == ids("hello")
        assert result.count == 1

    def test_distinct(self, service: ItemSetService) -> None:
        result = service.get_distinct_items(ids("hello", "how", "are"), ids("hello", "bye"))
        assert result.items == ids("how", "are", "bye")
        assert result.count == 3

    def test_missing_first_input(self, service: ItemSetService) -> None:
        result = service.get_common_items(None, None)
        assert result.error is not None
        assert result.error.code == "MISSING_INPUT"
        assert result.error.detail == {"input": "items1"}

    def test_missing_second_input(self, service: ItemSetService) -> None:
        result = service.get_distinct_items(ids("a"), None)
        assert result.error is not None
        assert result.error.detail == {"input": "items2"}


class TestStringOperations:
    def test_string_to_item_collection(self, service: ItemSetService) -> None:
        result = service.string_to_item_collection("how,how,are,you", ",")
        assert result.items == ids("how", "how", "are", "you")
        assert result.count == 4

    def test_string_to_item_collection_missing_separator(self, service: ItemSetService) -> None:
        result = service.string_to_item_collection("a,b", None)
        assert result.error is not None
        assert result.error.message == "separator is required"

    def test_escape(self, service: ItemSetService) -> None:
        result = service.escape("hello how;are *you")
        assert result.data == {"out_string": "hello how%3Bare %2Ayou"}

    def test_unescape(self, service: ItemSetService) -> None:
        result = service.escape("hello how%3Bare %2Ayou", reverse=True)
        assert result.op == "escape"
        assert result.data == {"out_string": "hello how;are *you"}

    def test_unescape_empty(self, service: ItemSetService) -> None:
        result = service.escape("", reverse=True)
        assert result.error is not None
        assert result.error.code == "MISSING_INPUT"

    def test_get_current_directory(self, service: ItemSetService) -> None:
        result = service.get_current_directory("app.proj")
        assert result.data == {"current_directory": str(Path.cwd())}


class TestRun:
    def test_dispatch_by_build_script_name(self, service: ItemSetService) -> None:
        result = service.run("GetCommonItems", items1=ids("a", "b"), items2=ids("b"))
        assert result.op == "get_common_items"
        assert result.items == ids("b")

    def test_dispatch_by_enum(self, service: ItemSetService) -> None:
        result = service.run(Operation.GET_ITEM_COUNT, items1=ids("a"))
        assert result.count == 1

    def test_legacy_name(self, service: ItemSetService) -> None:
        result = service.run("StringToItemCol", item_string="a;b", separator=";")
        assert result.count == 2

    def test_unknown_operation(self, service: ItemSetService) -> None:
        result = service.run("Shuffle", items1=ids("a"))
        assert result.ok is False
        assert result.op == "Shuffle"
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED_OPERATION"

    def test_absent_inputs_reported_by_operation(self, service: ItemSetService) -> None:
        result = service.run("GetItem", position=0)
        assert result.error is not None
        assert result.error.detail == {"input": "items1"}

    def test_unused_inputs_warn(self, service: ItemSetService) -> None:
        result = service.run("Sort", items1=ids("b", "a"), items2=ids("x"), separator=",")
        assert result.ok
        assert result.warnings == ["Ignored inputs for Sort: items2, separator"]

    def test_none_inputs_do_not_warn(self, service: ItemSetService) -> None:
        result = service.run("Sort", items1=ids("a"), items2=None)
        assert result.warnings == []

    @pytest.mark.parametrize("operation", list(Operation))
    def test_every_operation_dispatches(
        self, service: ItemSetService, operation: Operation
    ) -> None:
        result = service.run(operation)
        assert result.op == operation.value
        assert result.error is not None
        assert result.error.code == "MISSING_INPUT"

    @pytest.mark.parametrize(
        ("operation", "keys"),
        [
            (Operation.SORT, {"items"}),
            (Operation.GET_ITEM, {"items"}),
            (Operation.GET_LAST_ITEM, {"items"}),
            (Operation.GET_COMMON_ITEMS, {"items", "count"}),
            (Operation.GET_DISTINCT_ITEMS, {"items", "count"}),
            (Operation.REMOVE_DUPLICATE_FILES, {"items", "count"}),
            (Operation.STRING_TO_ITEM_COLLECTION, {"items", "count"}),
            (Operation.GET_ITEM_COUNT, {"count"}),
            (Operation.ESCAPE, {"out_string"}),
            (Operation.GET_CURRENT_DIRECTORY, {"current_directory"}),
        ],
    )
    def test_output_keys(
        self, service: ItemSetService, operation: Operation, keys: set[str]
    ) -> None:
        result = service.run(
            operation,
            items1=ids("a"),
            items2=ids("b"),
            position=0,
            item_string="a;b",
            separator=";",
            in_string="x",
            project_file="app.proj",
        )
        assert result.ok
        assert set(result.data) == keys


class TestLoggingAndTelemetry:
    def test_logs_operation_start(
        self, service: ItemSetService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="itemctl"):
            service.remove_duplicate_files(ids("a"))
        assert "Removing duplicates" in caplog.text

    def test_meta_absent_when_disabled(self, service: ItemSetService) -> None:
        assert service.sort(ids("a")).meta is None

    def test_meta_carries_span_when_enabled(self, service: ItemSetService) -> None:
        enable_telemetry()
        result = service.get_common_items(ids("a", "b"), ids("b"))
        assert result.meta is not None
        telemetry = result.meta["telemetry"]
        assert telemetry["name"] == "ItemSetService.get_common_items"
        compute = telemetry["children"][0]
        assert compute["name"] == "get_common_items"
        assert compute["annotations"] == {"count": 1}

    def test_failed_result_still_traced(self, service: ItemSetService) -> None:
        enable_telemetry()
        result = service.sort(None)
        assert result.ok is False
        assert result.meta is not None
        compute = result.meta["telemetry"]["children"][0]
        assert compute["annotations"] == {"error": "MISSING_INPUT"}
