# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Row operations namespace."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Union, TYPE_CHECKING

from ..core._error_codes import VALIDATION_UNSUPPORTED_TYPE
from ..core.errors import ValidationError
from ..core.results import PagedResult
from ..models.pagination import PaginationParameters
from ..models.row import Row
from ..models.sheet import Column, Sheet
from ._validation import require_id, require_non_empty
from .sheets import _sheet_params

# Rows per page the service uses when only a page number is given
_DEFAULT_PAGE_SIZE = 100

if TYPE_CHECKING:
    import pandas as pd

    from ..client import SmartsheetClient


def _as_row_list(rows: Union[Row, Sequence[Row]]) -> List[Row]:
    if isinstance(rows, Row):
        return [rows]
    if isinstance(rows, (list, tuple)):
        rows = require_non_empty(rows, "rows")
        if not all(isinstance(r, Row) for r in rows):
            raise ValidationError("rows must contain Row instances", subcode=VALIDATION_UNSUPPORTED_TYPE)
        return rows
    raise ValidationError("rows must be Row or list[Row]", subcode=VALIDATION_UNSUPPORTED_TYPE)


class RowOperations:
    """
    Row operations within a sheet.

    Accessed via ``client.rows``. Accepts a single :class:`~smartsheet_client.models.row.Row`
    or a list wherever the endpoint supports bulk writes.

    Example::

        added = client.rows.add(sheet_id, [
            Row(to_bottom=True, cells=[Cell(column_id=col_id, value="Task 1")]),
            Row(to_bottom=True, cells=[Cell(column_id=col_id, value="Task 2")]),
        ])
        row = client.rows.get(sheet_id, added[0].id)
        client.rows.update(sheet_id, Row(id=row.id, cells=[Cell(column_id=col_id, value="Done")]))
        client.rows.delete(sheet_id, [r.id for r in added])
    """

    def __init__(self, client: "SmartsheetClient") -> None:
        self._client = client

    def add(self, sheet_id: int, rows: Union[Row, Sequence[Row]]) -> List[Row]:
        """
        Insert rows into a sheet.

        :param sheet_id: Sheet id.
        :type sheet_id: int
        :param rows: Row or rows to insert; location hints (``to_top``, ``parent_id`` ...) apply per row.
        :type rows: Row | list[Row]
        :return: Inserted rows with their service-assigned ids.
        :rtype: list[Row]
        :raises ValidationError: If ``rows`` is empty or not made of :class:`Row`.
        """
        require_id(sheet_id, "sheet_id")
        rows = _as_row_list(rows)
        transport = self._client._get_transport()
        body = transport._post(f"sheets/{sheet_id}/rows", [r.to_create_payload() for r in rows])
        return self._rows_from_body(transport._expect_list(body, "rows"), sheet_id)

    def create(self, sheet_id: int, row: Row) -> Row:
        """Insert a single row and return it."""
        return self.add(sheet_id, row)[0]

    def get(self, sheet_id: int, row_id: int, *, include: Optional[List[str]] = None) -> Row:
        """
        Fetch one row.

        :param include: Extra elements, e.g. ``["columns", "discussions"]``.
            ``columns`` enables :meth:`Row.get_column_by_id`.
        :type include: list[str] | None
        """
        require_id(sheet_id, "sheet_id")
        require_id(row_id, "row_id")
        transport = self._client._get_transport()
        body = transport._get(f"sheets/{sheet_id}/rows/{row_id}", _sheet_params(include=include))
        row = Row.from_api_response(transport._expect_dict(body, "row"))
        if row.sheet_id is None:
            row.sheet_id = sheet_id
        return row

    def list(self, sheet_id: int, pagination: Optional[PaginationParameters] = None) -> PagedResult[Row]:
        """
        Page through the rows of a sheet.

        There is no row index endpoint; this fetches the sheet with row paging and wraps
        the rows with the sheet's total row count.

        :param pagination: Page selection; ``include_all`` (or no pagination) returns every row.
            A ``page`` without ``page_size`` uses the service default of 100 rows per page.
        :type pagination: PaginationParameters | None
        :rtype: PagedResult[Row]
        """
        require_id(sheet_id, "sheet_id")
        pagination = pagination or PaginationParameters(include_all=True)
        page_size = page = None
        if not pagination.include_all:
            page = pagination.page
            page_size = pagination.page_size
            if page_size is None and page is not None:
                page_size = _DEFAULT_PAGE_SIZE
        transport = self._client._get_transport()
        body = transport._get(f"sheets/{sheet_id}", _sheet_params(page_size=page_size, page=page))
        sheet = Sheet.from_api_response(transport._expect_dict(body, "sheet"))

        total = sheet.total_row_count if sheet.total_row_count is not None else len(sheet.rows)
        if page_size is None:
            return PagedResult(data=sheet.rows, page_number=1, page_size=total, total_pages=1, total_count=total)
        total_pages = math.ceil(total / page_size) if page_size > 0 else 0
        # The service answers an out-of-range page with the last page
        page_number = max(1, min(page or 1, total_pages))
        return PagedResult(
            data=sheet.rows,
            page_number=page_number,
            page_size=page_size,
            total_pages=total_pages,
            total_count=total,
        )

    def update(self, sheet_id: int, rows: Union[Row, Sequence[Row]]) -> List[Row]:
        """
        Update cells, location or format of existing rows.

        :raises ValidationError: If any row has no ``id``.
        """
        require_id(sheet_id, "sheet_id")
        rows = _as_row_list(rows)
        for row in rows:
            require_id(row.id, "row.id")
        transport = self._client._get_transport()
        body = transport._put(f"sheets/{sheet_id}/rows", [r.to_update_payload() for r in rows])
        return self._rows_from_body(transport._expect_list(body, "rows"), sheet_id)

    def delete(
        self,
        sheet_id: int,
        row_ids: Union[int, Sequence[int]],
        *,
        ignore_rows_not_found: bool = False,
    ) -> List[int]:
        """
        Delete rows. Child rows are deleted with their parents.

        :param row_ids: Row id or ids.
        :type row_ids: int | list[int]
        :param ignore_rows_not_found: Skip missing ids instead of failing the whole call.
        :type ignore_rows_not_found: bool
        :return: Ids of the deleted rows.
        :rtype: list[int]
        """
        require_id(sheet_id, "sheet_id")
        if isinstance(row_ids, int) and not isinstance(row_ids, bool):
            row_ids = [row_ids]
        row_ids = require_non_empty(row_ids, "row_ids")
        for rid in row_ids:
            require_id(rid, "row_ids[]")
        params = {
            "ids": ",".join(str(rid) for rid in row_ids),
            "ignoreRowsNotFound": "true" if ignore_rows_not_found else "false",
        }
        transport = self._client._get_transport()
        body = transport._delete(f"sheets/{sheet_id}/rows", params)
        if body is None:
            return []
        if not isinstance(body, list):
            body = [body]
        return [rid for rid in body if isinstance(rid, int)]

    def add_dataframe(self, sheet_id: int, df: "pd.DataFrame", *, na_as_null: bool = False) -> List[Row]:
        """
        Append one row per DataFrame row.

        DataFrame columns are matched to sheet columns by title.

        :param df: Rows to append.
        :type df: pandas.DataFrame
        :param na_as_null: Send missing values as empty cells instead of omitting them.
        :type na_as_null: bool
        :return: Inserted rows, in DataFrame order. Empty when ``df`` has no rows.
        :rtype: list[Row]
        """
        from ..utils._pandas import dataframe_to_rows

        require_id(sheet_id, "sheet_id")
        transport = self._client._get_transport()
        body = transport._get(f"sheets/{sheet_id}/columns", {"includeAll": "true"})
        columns = PagedResult.from_api_response(body, Column.from_api_response)
        rows = dataframe_to_rows(df, columns.data, na_as_null=na_as_null)
        if not rows:
            return []
        return self.add(sheet_id, rows)

    @staticmethod
    def _rows_from_body(items: list, sheet_id: int) -> List[Row]:
        rows = [Row.from_api_response(item) for item in items]
        for row in rows:
            if row.sheet_id is None:
                row.sheet_id = sheet_id
        return rows


__all__ = ["RowOperations"]
