# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Sheet operations namespace."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..core.results import PagedResult
from ..models.pagination import PaginationParameters
from ..models.sheet import Sheet
from ._validation import require_id

if TYPE_CHECKING:
    import pandas as pd

    from ..client import SmartsheetClient


def _sheet_params(
    page_size: Optional[int] = None,
    page: Optional[int] = None,
    include: Optional[List[str]] = None,
    row_ids: Optional[List[int]] = None,
) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if page_size is not None:
        params["pageSize"] = str(page_size)
    if page is not None:
        params["page"] = str(page)
    if include:
        params["include"] = ",".join(include)
    if row_ids:
        params["rowIds"] = ",".join(str(r) for r in row_ids)
    return params


class SheetOperations:
    """
    Sheet CRUD operations.

    Accessed via ``client.sheets``.

    Example::

        sheet = client.sheets.create(
            Sheet(name="Project Plan", columns=[Column(title="Task", type=ColumnType.TEXT_NUMBER, primary=True)])
        )
        fetched = client.sheets.get(sheet.id)
        client.sheets.update(Sheet(id=sheet.id, name="Renamed Plan"))
        df = client.sheets.get_dataframe(sheet.id)
        client.sheets.delete(sheet.id)
    """

    def __init__(self, client: "SmartsheetClient") -> None:
        self._client = client

    def create(self, sheet: Sheet) -> Sheet:
        """
        Create a sheet in the user's "Sheets" folder.

        :param sheet: Name and column definitions; exactly one column must be primary.
        :type sheet: Sheet
        :return: The created sheet with service-assigned sheet and column ids.
        :rtype: Sheet
        """
        transport = self._client._get_transport()
        body = transport._post("sheets", sheet.to_create_payload())
        return Sheet.from_api_response(transport._expect_dict(body, "sheet"))

    def get(
        self,
        sheet_id: int,
        *,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
        include: Optional[List[str]] = None,
        row_ids: Optional[List[int]] = None,
    ) -> Sheet:
        """
        Fetch a sheet with its columns and rows.

        :param sheet_id: Sheet id.
        :type sheet_id: int
        :param page_size: Rows per page; all rows when omitted.
        :type page_size: int | None
        :param page: 1-based row page.
        :type page: int | None
        :param include: Extra elements, e.g. ``["attachments", "discussions", "format"]``.
        :type include: list[str] | None
        :param row_ids: Restrict the response to these rows.
        :type row_ids: list[int] | None
        :rtype: Sheet
        """
        require_id(sheet_id, "sheet_id")
        transport = self._client._get_transport()
        body = transport._get(f"sheets/{sheet_id}", _sheet_params(page_size, page, include, row_ids))
        return Sheet.from_api_response(transport._expect_dict(body, "sheet"))

    def list(self, pagination: Optional[PaginationParameters] = None) -> PagedResult[Sheet]:
        """
        List the sheets the user can access (without columns or rows).

        :param pagination: Page selection; defaults to the first page.
        :type pagination: PaginationParameters | None
        :rtype: PagedResult[Sheet]
        """
        params = (pagination or PaginationParameters()).to_query_params()
        body = self._client._get_transport()._get("sheets", params)
        return PagedResult.from_api_response(body, Sheet.from_api_response)

    def update(self, sheet: Sheet) -> Sheet:
        """
        Rename a sheet.

        :raises ValidationError: If ``sheet.id`` is missing.
        """
        sheet_id = require_id(sheet.id, "sheet.id")
        transport = self._client._get_transport()
        body = transport._put(f"sheets/{sheet_id}", sheet.to_update_payload())
        return Sheet.from_api_response(transport._expect_dict(body, "sheet"))

    def delete(self, sheet_id: int) -> None:
        require_id(sheet_id, "sheet_id")
        self._client._get_transport()._delete(f"sheets/{sheet_id}")

    def get_dataframe(self, sheet_id: int) -> "pd.DataFrame":
        """
        Fetch a sheet and return its rows as a DataFrame.

        Columns are the sheet column titles in sheet order; the index holds row ids.

        :param sheet_id: Sheet id.
        :type sheet_id: int
        :rtype: pandas.DataFrame
        """
        from ..utils._pandas import sheet_to_dataframe

        return sheet_to_dataframe(self.get(sheet_id))


__all__ = ["SheetOperations"]
