# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Row and cell models.

A :class:`Row` belongs to exactly one sheet and holds a sequence of cells. Any
object satisfying :class:`CellLike` can be placed in ``Row.cells``; :class:`Cell`
is the concrete implementation used for service responses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable

from ._parsing import compact, format_timestamp, parse_timestamp
from .sheet import AccessLevel, Column, _parse_access_level
from .user import User


@runtime_checkable
class CellLike(Protocol):
    """Anything that can be sent as a row cell."""

    column_id: Optional[int]
    value: Any

    def to_dict(self) -> Dict[str, Any]: ...


@dataclass
class Cell:
    """
    A single cell value in a row.

    :param column_id: Id of the column the cell belongs to.
    :type column_id: int | None
    :param value: Cell value (str, number, bool or None).
    :param display_value: Formatted value as shown in the UI (read only).
    :type display_value: str | None
    :param formula: Formula such as ``"=SUM([Cost]1:[Cost]5)"``; sent instead of ``value`` when set.
    :type formula: str | None
    :param strict: When False the service parses strings leniently (e.g. "1/2/2024" as a date).
    :type strict: bool | None
    """

    column_id: Optional[int] = None
    value: Any = None
    display_value: Optional[str] = None
    formula: Optional[str] = None
    hyperlink: Optional[Dict[str, Any]] = None
    strict: Optional[bool] = None
    format: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"columnId": self.column_id}
        if self.formula is not None:
            payload["formula"] = self.formula
        else:
            payload["value"] = format_timestamp(self.value)
        payload.update(compact({"hyperlink": self.hyperlink, "strict": self.strict, "format": self.format}))
        return payload

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Cell":
        return cls(
            column_id=response_data.get("columnId"),
            value=response_data.get("value"),
            display_value=response_data.get("displayValue"),
            formula=response_data.get("formula"),
            hyperlink=response_data.get("hyperlink"),
            strict=response_data.get("strict"),
            format=response_data.get("format"),
        )


# Location hints understood by add/update; exactly which combinations are legal is
# decided by the service.
_LOCATION_FIELDS = (
    ("parent_id", "parentId"),
    ("sibling_id", "siblingId"),
    ("to_top", "toTop"),
    ("to_bottom", "toBottom"),
    ("above", "above"),
    ("indent", "indent"),
    ("outdent", "outdent"),
)


@dataclass
class Row:
    """
    A sheet row.

    :param cells: Cells to write, or the cells returned by the service.
    :type cells: list[CellLike]
    :param id: Row id (assigned by the service).
    :type id: int | None
    :param sheet_id: Id of the owning sheet.
    :type sheet_id: int | None
    :param parent_id: Make the row a child of this row.
    :type parent_id: int | None
    :param sibling_id: Place the row directly below this row.
    :type sibling_id: int | None
    :param to_top: Place the row at the top of the sheet (or of its parent's children).
    :type to_top: bool | None
    :param to_bottom: Place the row at the bottom.
    :type to_bottom: bool | None
    :param above: With ``sibling_id``, place above the sibling instead of below.
    :type above: bool | None

    Example::

        row = Row(
            to_bottom=True,
            cells=[Cell(column_id=primary_col_id, value="Task 1"), Cell(column_id=done_col_id, value=False)],
        )
        added = client.rows.add(sheet_id, [row])
    """

    cells: List[CellLike] = field(default_factory=list)
    id: Optional[int] = None
    sheet_id: Optional[int] = None
    row_number: Optional[int] = None
    parent_row_number: Optional[int] = None
    columns: Optional[List[Column]] = None
    discussions: Optional[List[Dict[str, Any]]] = None
    attachments: Optional[List[Dict[str, Any]]] = None
    created_at: Optional[Union[datetime, str]] = None
    modified_at: Optional[Union[datetime, str]] = None
    expanded: Optional[bool] = None
    version: Optional[int] = None
    access_level: Optional[Union[AccessLevel, str]] = None
    locked: Optional[bool] = None
    locked_for_user: Optional[bool] = None
    format: Optional[str] = None
    conditional_format: Optional[str] = None
    parent_id: Optional[int] = None
    sibling_id: Optional[int] = None
    permalink: Optional[str] = None
    filtered_out: Optional[bool] = None
    in_critical_path: Optional[bool] = None
    to_top: Optional[bool] = None
    to_bottom: Optional[bool] = None
    above: Optional[bool] = None
    indent: Optional[int] = None
    outdent: Optional[int] = None
    created_by: Optional[User] = None
    modified_by: Optional[User] = None

    def get_column_by_index(self, index: int) -> Optional[Column]:
        """Return the column whose ``index`` matches, or None. Requires ``include=columns`` on fetch."""
        for column in self.columns or []:
            if column.index == index:
                return column
        return None

    def get_column_by_id(self, column_id: int) -> Optional[Column]:
        for column in self.columns or []:
            if column.id == column_id:
                return column
        return None

    def get_cell(self, column_id: int) -> Optional[CellLike]:
        for cell in self.cells:
            if cell.column_id == column_id:
                return cell
        return None

    def _location_payload(self) -> Dict[str, Any]:
        return compact({wire: getattr(self, attr) for attr, wire in _LOCATION_FIELDS})

    def to_create_payload(self) -> Dict[str, Any]:
        """Body item for ``POST /sheets/{id}/rows``: cells, location hints, format, expanded, locked."""
        payload = self._location_payload()
        payload.update(compact({"expanded": self.expanded, "format": self.format, "locked": self.locked}))
        if self.cells:
            payload["cells"] = [c.to_dict() for c in self.cells]
        return payload

    def to_update_payload(self) -> Dict[str, Any]:
        """Body item for ``PUT /sheets/{id}/rows``: like create, plus the row ``id``."""
        payload = {"id": self.id}
        payload.update(self.to_create_payload())
        return payload

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Row":
        columns = response_data.get("columns")
        created_by = response_data.get("createdBy")
        modified_by = response_data.get("modifiedBy")
        return cls(
            cells=[Cell.from_api_response(c) for c in response_data.get("cells") or []],
            id=response_data.get("id"),
            sheet_id=response_data.get("sheetId"),
            row_number=response_data.get("rowNumber"),
            parent_row_number=response_data.get("parentRowNumber"),
            columns=[Column.from_api_response(c) for c in columns] if columns is not None else None,
            discussions=response_data.get("discussions"),
            attachments=response_data.get("attachments"),
            created_at=parse_timestamp(response_data.get("createdAt")),
            modified_at=parse_timestamp(response_data.get("modifiedAt")),
            expanded=response_data.get("expanded"),
            version=response_data.get("version"),
            access_level=_parse_access_level(response_data.get("accessLevel")),
            locked=response_data.get("locked"),
            locked_for_user=response_data.get("lockedForUser"),
            format=response_data.get("format"),
            conditional_format=response_data.get("conditionalFormat"),
            parent_id=response_data.get("parentId"),
            sibling_id=response_data.get("siblingId"),
            permalink=response_data.get("permalink"),
            filtered_out=response_data.get("filteredOut"),
            in_critical_path=response_data.get("inCriticalPath"),
            indent=response_data.get("indent"),
            outdent=response_data.get("outdent"),
            created_by=User.from_api_response(created_by) if isinstance(created_by, dict) else None,
            modified_by=User.from_api_response(modified_by) if isinstance(modified_by, dict) else None,
        )


__all__ = ["Cell", "CellLike", "Row"]
