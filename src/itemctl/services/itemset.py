"""ItemSetService — named entry points over the item set algorithms.

One method per operation plus :meth:`ItemSetService.run`, which resolves an
operation name and dispatches through a lookup table.  Every method returns
a :class:`ServiceResult`; domain errors become failed results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from itemctl.domain import itemset
from itemctl.domain.errors import ItemSetError
from itemctl.domain.escape import escape as escape_string
from itemctl.domain.escape import unescape as unescape_string
from itemctl.domain.items import ItemCollection
from itemctl.domain.operations import REQUIRED_INPUTS, Operation
from itemctl.services.result import ServiceError, ServiceResult
from itemctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ItemSetService:
    """Stateless facade; a single instance may serve any number of calls."""

    def _execute(
        self,
        op: Operation,
        message: str,
        compute: Callable[[], dict[str, Any]],
    ) -> ServiceResult:
        logger.debug(message)
        with trace_span(op.value) as span:
            try:
                data = compute()
            except ItemSetError as exc:
                logger.debug("%s failed: %s", op.display_name, exc.message)
                if span is not None:
                    span.annotate("error", exc.code)
                return ServiceResult(
                    ok=False,
                    op=op.value,
                    error=ServiceError.from_exception(exc),
                )
            if span is not None and "count" in data:
                span.annotate("count", data["count"])
        return ServiceResult(ok=True, op=op.value, data=data)

    @staticmethod
    def _items(collection: ItemCollection, *, with_count: bool = False) -> dict[str, Any]:
        data: dict[str, Any] = {"items": collection.to_list()}
        if with_count:
            data["count"] = len(collection)
        return data

    # ------------------------------------------------------------------
    # Ordering and position
    # ------------------------------------------------------------------

    @traced
    def sort(self, items1: ItemCollection | None) -> ServiceResult:
        return self._execute(
            Operation.SORT,
            "Sorting items",
            lambda: self._items(itemset.sort_items(items1)),
        )

    @traced
    def get_item(self, items1: ItemCollection | None, position: int | None) -> ServiceResult:
        return self._execute(
            Operation.GET_ITEM,
            "Getting item",
            lambda: self._items(itemset.get_item(items1, position)),
        )

    @traced
    def get_last_item(self, items1: ItemCollection | None) -> ServiceResult:
        return self._execute(
            Operation.GET_LAST_ITEM,
            "Getting last item",
            lambda: self._items(itemset.get_last_item(items1)),
        )

    @traced
    def get_item_count(self, items1: ItemCollection | None) -> ServiceResult:
        return self._execute(
            Operation.GET_ITEM_COUNT,
            "Getting item count",
            lambda: {"count": itemset.get_item_count(items1)},
        )

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    @traced
    def get_common_items(
        self,
        items1: ItemCollection | None,
        items2: ItemCollection | None,
    ) -> ServiceResult:
        return self._execute(
            Operation.GET_COMMON_ITEMS,
            "Getting common items",
            lambda: self._items(itemset.get_common_items(items1, items2), with_count=True),
        )

    @traced
    def get_distinct_items(
        self,
        items1: ItemCollection | None,
        items2: ItemCollection | None,
    ) -> ServiceResult:
        return self._execute(
            Operation.GET_DISTINCT_ITEMS,
            "Getting distinct items",
            lambda: self._items(itemset.get_distinct_items(items1, items2), with_count=True),
        )

    @traced
    def remove_duplicate_files(self, items1: ItemCollection | None) -> ServiceResult:
        return self._execute(
            Operation.REMOVE_DUPLICATE_FILES,
            "Removing duplicates",
            lambda: self._items(itemset.remove_duplicate_files(items1), with_count=True),
        )

    # ------------------------------------------------------------------
    # Strings and paths
    # ------------------------------------------------------------------

    @traced
    def string_to_item_collection(
        self,
        item_string: str | None,
        separator: str | None,
    ) -> ServiceResult:
        return self._execute(
            Operation.STRING_TO_ITEM_COLLECTION,
            "Converting string to item collection",
            lambda: self._items(itemset.string_to_items(item_string, separator), with_count=True),
        )

    @traced
    def escape(self, in_string: str | None, *, reverse: bool = False) -> ServiceResult:
        """Escape *in_string*, or decode its ``%XX`` sequences when *reverse*."""
        if reverse:
            return self._execute(
                Operation.ESCAPE,
                "Unescaping string",
                lambda: {"out_string": unescape_string(in_string)},
            )
        return self._execute(
            Operation.ESCAPE,
            "Escaping string",
            lambda: {"out_string": escape_string(in_string)},
        )

    @traced
    def get_current_directory(self, project_file: str | None) -> ServiceResult:
        return self._execute(
            Operation.GET_CURRENT_DIRECTORY,
            "Getting current directory",
            lambda: {"current_directory": itemset.project_directory(project_file)},
        )

    # ------------------------------------------------------------------
    # run — dispatch by name
    # ------------------------------------------------------------------

    def run(self, operation: Operation | str, **inputs: Any) -> ServiceResult:
        """Run *operation* with named *inputs*.

        Inputs an operation does not take are ignored and reported as a
        warning.  Missing inputs are passed as None so the operation itself
        reports them in declaration order.
        """
        if isinstance(operation, Operation):
            op = operation
        else:
            try:
                op = Operation.parse(operation)
            except ItemSetError as exc:
                logger.debug("Rejected operation %r", operation)
                return ServiceResult(
                    ok=False,
                    op=str(operation),
                    error=ServiceError.from_exception(exc),
                )

        accepted = REQUIRED_INPUTS[op]
        ignored = sorted(
            name for name, value in inputs.items() if name not in accepted and value is not None
        )
        result = _DISPATCH[op](self, *(inputs.get(name) for name in accepted))
        if ignored:
            warning = f"Ignored inputs for {op.display_name}: {', '.join(ignored)}"
            result = result.model_copy(update={"warnings": [*result.warnings, warning]})
        return result


_DISPATCH: dict[Operation, Callable[..., ServiceResult]] = {
    Operation.SORT: ItemSetService.sort,
    Operation.GET_ITEM: ItemSetService.get_item,
    Operation.GET_LAST_ITEM: ItemSetService.get_last_item,
    Operation.GET_COMMON_ITEMS: ItemSetService.get_common_items,
    Operation.GET_DISTINCT_ITEMS: ItemSetService.get_distinct_items,
    Operation.REMOVE_DUPLICATE_FILES: ItemSetService.remove_duplicate_files,
    Operation.STRING_TO_ITEM_COLLECTION: ItemSetService.string_to_item_collection,
    Operation.GET_ITEM_COUNT: ItemSetService.get_item_count,
    Operation.ESCAPE: ItemSetService.escape,
    Operation.GET_CURRENT_DIRECTORY: ItemSetService.get_current_directory,
}
