"""Tests for Rich renderers and quiet rendering."""

from __future__ import annotations

from itemctl.output.renderers import render_quiet, render_result
from itemctl.services.result import ServiceError, ServiceResult


def _items_result(op: str, *identities: str, count: int | None = None) -> ServiceResult:
    data: dict[str, object] = {
        "items": [{"identity": i, "metadata": {}} for i in identities],
    }
    if count is not None:
        data["count"] = count
    return ServiceResult(ok=True, op=op, data=data)


class TestRenderResult:
    def test_items_table(self) -> None:
        output = render_result(_items_result("sort", "are", "hello"))
        assert "OK" in output
        assert "sort" in output
        assert "Identity" in output
        assert "are" in output and "hello" in output
        assert "2 items" in output

    def test_metadata_column_only_when_present(self) -> None:
        plain = render_result(_items_result("sort", "a"))
        assert "Metadata" not in plain
        rich_result = ServiceResult(
            ok=True,
            op="sort",
            data={"items": [{"identity": "a", "metadata": {"Kind": "doc", "Copy": "1"}}]},
        )
        output = render_result(rich_result)
        assert "Metadata" in output
        assert "Copy=1, Kind=doc" in output

    def test_singular_count(self) -> None:
        output = render_result(_items_result("get_common_items", "hello", count=1))
        assert "1 item" in output
        assert "1 items" not in output

    def test_empty_items(self) -> None:
        output = render_result(_items_result("get_distinct_items", count=0))
        assert "0 items" in output
        assert "Identity" not in output

    def test_count_renderer(self) -> None:
        output = render_result(ServiceResult(ok=True, op="get_item_count", data={"count": 9}))
        assert "count: 9" in output

    def test_generic_renderer(self) -> None:
        output = render_result(ServiceResult(ok=True, op="escape", data={"out_string": "a%3Bb"}))
        assert "out_string: a%3Bb" in output

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="get_item",
            error=ServiceError(
                code="INDEX_OUT_OF_RANGE",
                message="Position: 5 is outside the size of the item collection: 3",
                detail={"position": 5, "size": 3},
            ),
        )
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "get_item" in output
        assert "detail" not in output
        assert "position: 5" in render_result(result, verbose=True)

    def test_verbose_shows_telemetry(self) -> None:
        result = ServiceResult(
            ok=True,
            op="sort",
            data={"items": []},
            meta={"telemetry": {"name": "ItemSetService.sort", "duration_ms": 0.5}},
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "ItemSetService.sort" in output
        assert "ItemSetService.sort" not in render_result(result)


class TestRenderQuiet:
    def test_identities_one_per_line(self) -> None:
        assert render_quiet(_items_result("sort", "a", "b", "c")) == "a\nb\nc"

    def test_empty_items(self) -> None:
        assert render_quiet(_items_result("get_common_items", count=0)) == ""

    def test_count(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="get_item_count", data={"count": 0})) == "0"

    def test_out_string(self) -> None:
        result = ServiceResult(ok=True, op="escape", data={"out_string": "%2A"})
        assert render_quiet(result) == "%2A"

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="sort",
            error=ServiceError(code="MISSING_INPUT", message="items1 is required"),
        )
        assert render_quiet(result) == "ERROR: sort — items1 is required"
