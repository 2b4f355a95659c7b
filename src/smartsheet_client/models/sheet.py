# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Sheet and column models.

Provides :class:`Sheet`, :class:`Column` and the :class:`AccessLevel` /
:class:`ColumnType` enumerations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from ._parsing import compact, parse_timestamp

if TYPE_CHECKING:
    from .row import Row


class AccessLevel(str, Enum):
    """Permission level the current user holds on an object."""

    VIEWER = "VIEWER"
    COMMENTER = "COMMENTER"
    EDITOR = "EDITOR"
    EDITOR_SHARE = "EDITOR_SHARE"
    ADMIN = "ADMIN"
    OWNER = "OWNER"


class ColumnType(str, Enum):
    """Column types. Values the SDK does not know are kept as plain strings."""

    TEXT_NUMBER = "TEXT_NUMBER"
    DATE = "DATE"
    DATETIME = "DATETIME"
    ABSTRACT_DATETIME = "ABSTRACT_DATETIME"
    CONTACT_LIST = "CONTACT_LIST"
    MULTI_CONTACT_LIST = "MULTI_CONTACT_LIST"
    CHECKBOX = "CHECKBOX"
    PICKLIST = "PICKLIST"
    MULTI_PICKLIST = "MULTI_PICKLIST"
    DURATION = "DURATION"
    PREDECESSOR = "PREDECESSOR"


def _parse_access_level(value: Any) -> Optional[Union[AccessLevel, str]]:
    if value is None:
        return None
    try:
        return AccessLevel(value)
    except ValueError:
        return value


def _parse_column_type(value: Any) -> Optional[Union[ColumnType, str]]:
    if value is None:
        return None
    try:
        return ColumnType(value)
    except ValueError:
        return value


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass
class Column:
    """
    Column metadata.

    :param title: Column title, unique within the sheet.
    :type title: str | None
    :param type: Column type.
    :type type: ColumnType | str | None
    :param primary: Whether this is the primary column. Every new sheet needs exactly one.
    :type primary: bool | None
    :param options: Choices for ``PICKLIST`` / ``MULTI_PICKLIST`` columns.
    :type options: list[str] | None
    :param id: Column id (assigned by the service).
    :type id: int | None
    :param index: 0-based column position.
    :type index: int | None
    """

    title: Optional[str] = None
    type: Optional[Union[ColumnType, str]] = None
    primary: Optional[bool] = None
    options: Optional[List[str]] = None
    id: Optional[int] = None
    index: Optional[int] = None
    width: Optional[int] = None
    hidden: Optional[bool] = None
    locked: Optional[bool] = None
    version: Optional[int] = None

    def to_create_payload(self) -> Dict[str, Any]:
        return compact(
            {
                "title": self.title,
                "type": _enum_value(self.type),
                "primary": self.primary,
                "options": self.options,
                "width": self.width,
                "hidden": self.hidden,
            }
        )

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Column":
        return cls(
            title=response_data.get("title"),
            type=_parse_column_type(response_data.get("type")),
            primary=response_data.get("primary"),
            options=response_data.get("options"),
            id=response_data.get("id"),
            index=response_data.get("index"),
            width=response_data.get("width"),
            hidden=response_data.get("hidden"),
            locked=response_data.get("locked"),
            version=response_data.get("version"),
        )


@dataclass
class Sheet:
    """
    A sheet with its columns and (when fetched) rows.

    :param name: Sheet name.
    :type name: str | None
    :param columns: Column definitions. On create, exactly one column must be primary.
    :type columns: list[Column]
    :param rows: Rows returned by ``sheets.get``; ignored on create and update.
    :type rows: list[Row]
    :param id: Sheet id (assigned by the service).
    :type id: int | None
    :param total_row_count: Number of rows in the whole sheet (not just this page).
    :type total_row_count: int | None

    Example::

        sheet = Sheet(
            name="Project Plan",
            columns=[
                Column(title="Task", type=ColumnType.TEXT_NUMBER, primary=True),
                Column(title="Done", type=ColumnType.CHECKBOX),
            ],
        )
        created = client.sheets.create(sheet)
    """

    name: Optional[str] = None
    columns: List[Column] = field(default_factory=list)
    rows: List["Row"] = field(default_factory=list)
    id: Optional[int] = None
    access_level: Optional[Union[AccessLevel, str]] = None
    permalink: Optional[str] = None
    version: Optional[int] = None
    total_row_count: Optional[int] = None
    owner: Optional[str] = None
    owner_id: Optional[int] = None
    created_at: Optional[Union[datetime, str]] = None
    modified_at: Optional[Union[datetime, str]] = None

    def get_column_by_title(self, title: str) -> Optional[Column]:
        for column in self.columns:
            if column.title == title:
                return column
        return None

    def get_row(self, row_id: int) -> Optional["Row"]:
        for row in self.rows:
            if row.id == row_id:
                return row
        return None

    def to_create_payload(self) -> Dict[str, Any]:
        """Body for ``POST /sheets``: name and column definitions."""
        payload = compact({"name": self.name})
        payload["columns"] = [c.to_create_payload() for c in self.columns]
        return payload

    def to_update_payload(self) -> Dict[str, Any]:
        return compact({"name": self.name})

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Sheet":
        from .row import Row

        sheet_id = response_data.get("id")
        rows = [Row.from_api_response(r) for r in response_data.get("rows") or []]
        for row in rows:
            if row.sheet_id is None:
                row.sheet_id = sheet_id
        return cls(
            name=response_data.get("name"),
            columns=[Column.from_api_response(c) for c in response_data.get("columns") or []],
            rows=rows,
            id=sheet_id,
            access_level=_parse_access_level(response_data.get("accessLevel")),
            permalink=response_data.get("permalink"),
            version=response_data.get("version"),
            total_row_count=response_data.get("totalRowCount"),
            owner=response_data.get("owner"),
            owner_id=response_data.get("ownerId"),
            created_at=parse_timestamp(response_data.get("createdAt")),
            modified_at=parse_timestamp(response_data.get("modifiedAt")),
        )


__all__ = ["AccessLevel", "ColumnType", "Column", "Sheet"]
