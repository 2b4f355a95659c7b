# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pandas as pd
import pytest

from smartsheet_client.core.errors import ValidationError
from smartsheet_client.models.pagination import PaginationParameters
from smartsheet_client.models.sheet import Column, ColumnType, Sheet

from conftest import success


def test_create(make_client, sample_sheet_data):
    created_body = dict(sample_sheet_data, rows=[])
    client, http = make_client((200, {}, success(created_body)))
    sheet = Sheet(
        name="Project Plan",
        columns=[
            Column(title="Task", type=ColumnType.TEXT_NUMBER, primary=True),
            Column(title="Done", type=ColumnType.CHECKBOX),
        ],
    )

    created = client.sheets.create(sheet)

    assert created.id == sample_sheet_data["id"]
    assert created.get_column_by_title("Task").id == 101
    assert http.calls[0]["url"].endswith("/sheets")
    assert http.calls[0]["json"]["columns"][0] == {"title": "Task", "type": "TEXT_NUMBER", "primary": True}


def test_get_with_options(make_client, sample_sheet_data):
    client, http = make_client((200, {}, sample_sheet_data))
    sheet = client.sheets.get(sample_sheet_data["id"], page_size=50, page=2, include=["attachments", "format"])
    assert sheet.id == sample_sheet_data["id"]
    assert len(sheet.rows) == 2
    assert http.calls[0]["params"] == {"pageSize": "50", "page": "2", "include": "attachments,format"}


def test_get_plain_sends_no_params(make_client, sample_sheet_data):
    client, http = make_client((200, {}, sample_sheet_data))
    client.sheets.get(sample_sheet_data["id"])
    assert http.calls[0]["params"] is None


def test_list(make_client):
    client, http = make_client(
        (200, {}, {"pageNumber": 2, "pageSize": 1, "totalPages": 3, "totalCount": 3, "data": [{"id": 8, "name": "B"}]})
    )
    page = client.sheets.list(PaginationParameters(page_size=1, page=2))
    assert page.page_number == 2
    assert page.has_more is True
    assert page[0].name == "B"
    assert http.calls[0]["params"] == {"pageSize": "1", "page": "2"}


def test_update(make_client):
    client, http = make_client((200, {}, success({"id": 8, "name": "Renamed"})))
    updated = client.sheets.update(Sheet(id=8, name="Renamed"))
    assert updated.name == "Renamed"
    assert http.calls[0]["method"] == "put"
    assert http.calls[0]["json"] == {"name": "Renamed"}


def test_update_requires_id(make_client):
    client, _ = make_client()
    with pytest.raises(ValidationError):
        client.sheets.update(Sheet(name="Renamed"))


def test_delete(make_client):
    client, http = make_client((200, {}, {"message": "SUCCESS", "resultCode": 0}))
    assert client.sheets.delete(8) is None
    assert http.calls[0]["url"].endswith("/sheets/8")


def test_get_dataframe(make_client, sample_sheet_data):
    client, _ = make_client((200, {}, sample_sheet_data))
    df = client.sheets.get_dataframe(sample_sheet_data["id"])
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["Task", "Done"]
    assert list(df.index) == [1001, 1002]
    assert df.loc[1001, "Task"] == "Write docs"
    assert pd.isna(df.loc[1002, "Done"])
