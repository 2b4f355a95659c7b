# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pandas as pd
import pytest

from smartsheet_client.core.errors import ValidationError
from smartsheet_client.models.pagination import PaginationParameters
from smartsheet_client.models.row import Cell, Row

from conftest import success


SHEET_ID = 4583173393803140


def test_add_rows(make_client):
    client, http = make_client(
        (200, {}, success([{"id": 1, "rowNumber": 1, "cells": [{"columnId": 101, "value": "a"}]}, {"id": 2, "rowNumber": 2}]))
    )
    rows = [
        Row(to_bottom=True, cells=[Cell(column_id=101, value="a")]),
        Row(to_bottom=True, cells=[Cell(column_id=101, value="b")]),
    ]

    added = client.rows.add(SHEET_ID, rows)

    assert [r.id for r in added] == [1, 2]
    assert all(r.sheet_id == SHEET_ID for r in added)
    call = http.calls[0]
    assert call["method"] == "post"
    assert call["url"].endswith(f"/sheets/{SHEET_ID}/rows")
    assert call["json"][1] == {"toBottom": True, "cells": [{"columnId": 101, "value": "b"}]}


def test_create_single_row(make_client):
    client, http = make_client((200, {}, success({"id": 3, "rowNumber": 1})))
    row = client.rows.create(SHEET_ID, Row(to_top=True))
    assert row.id == 3
    assert http.calls[0]["json"] == [{"toTop": True}]


@pytest.mark.parametrize("rows", [[], "row", [{"cells": []}]])
def test_add_rejects_bad_rows(make_client, rows):
    client, http = make_client()
    with pytest.raises(ValidationError):
        client.rows.add(SHEET_ID, rows)
    assert http.calls == []


def test_get_row(make_client):
    client, http = make_client(
        (200, {}, {"id": 1001, "rowNumber": 1, "columns": [{"id": 101, "index": 0, "title": "Task"}], "cells": []})
    )
    row = client.rows.get(SHEET_ID, 1001, include=["columns"])
    assert row.id == 1001
    assert row.sheet_id == SHEET_ID
    assert row.get_column_by_index(0).title == "Task"
    assert http.calls[0]["url"].endswith(f"/sheets/{SHEET_ID}/rows/1001")
    assert http.calls[0]["params"] == {"include": "columns"}


def test_list_rows_include_all(make_client, sample_sheet_data):
    client, http = make_client((200, {}, sample_sheet_data))
    page = client.rows.list(SHEET_ID)
    assert [r.id for r in page] == [1001, 1002]
    assert page.total_count == 2
    assert page.page_size == 2
    assert page.has_more is False
    assert http.calls[0]["params"] is None


def test_list_rows_paged(make_client, sample_sheet_data):
    body = dict(sample_sheet_data, totalRowCount=5, rows=sample_sheet_data["rows"][:1])
    client, http = make_client((200, {}, body))
    page = client.rows.list(SHEET_ID, PaginationParameters(page_size=2, page=2))
    assert page.page_number == 2
    assert page.total_pages == 3
    assert page.total_count == 5
    assert page.has_more is True
    assert http.calls[0]["params"] == {"pageSize": "2", "page": "2"}


def test_list_rows_page_without_size_uses_default_page_size(make_client, sample_sheet_data):
    body = dict(sample_sheet_data, totalRowCount=250, rows=sample_sheet_data["rows"][:1])
    client, http = make_client((200, {}, body))
    page = client.rows.list(SHEET_ID, PaginationParameters(page=3))
    assert http.calls[0]["params"] == {"pageSize": "100", "page": "3"}
    assert page.page_number == 3
    assert page.page_size == 100
    assert page.total_pages == 3
    assert page.total_count == 250
    assert page.has_more is False


def test_list_rows_out_of_range_page_clamped(make_client, sample_sheet_data):
    client, _ = make_client((200, {}, sample_sheet_data))
    page = client.rows.list(SHEET_ID, PaginationParameters(page_size=100, page=9))
    assert page.page_number == 1
    assert page.total_pages == 1


def test_update_rows(make_client):
    client, http = make_client((200, {}, success([{"id": 1001, "cells": [{"columnId": 102, "value": True}]}])))
    updated = client.rows.update(SHEET_ID, Row(id=1001, cells=[Cell(column_id=102, value=True)]))
    assert updated[0].cells[0].value is True
    assert http.calls[0]["method"] == "put"
    assert http.calls[0]["json"] == [{"id": 1001, "cells": [{"columnId": 102, "value": True}]}]


def test_update_requires_row_ids(make_client):
    client, http = make_client()
    with pytest.raises(ValidationError):
        client.rows.update(SHEET_ID, [Row(id=1), Row(cells=[Cell(column_id=1, value="x")])])
    assert http.calls == []


def test_delete_rows(make_client):
    client, http = make_client((200, {}, success([1001, 1002])))
    deleted = client.rows.delete(SHEET_ID, [1001, 1002], ignore_rows_not_found=True)
    assert deleted == [1001, 1002]
    assert http.calls[0]["method"] == "delete"
    assert http.calls[0]["params"] == {"ids": "1001,1002", "ignoreRowsNotFound": "true"}


def test_delete_single_row_id(make_client):
    client, http = make_client((200, {}, success([1001])))
    assert client.rows.delete(SHEET_ID, 1001) == [1001]
    assert http.calls[0]["params"]["ignoreRowsNotFound"] == "false"


def test_delete_requires_ids(make_client):
    client, _ = make_client()
    with pytest.raises(ValidationError):
        client.rows.delete(SHEET_ID, [])
    with pytest.raises(ValidationError):
        client.rows.delete(SHEET_ID, [1, None])


def _column_page(sample_sheet_data):
    columns = sample_sheet_data["columns"]
    return {"pageNumber": 1, "pageSize": len(columns), "totalPages": 1, "totalCount": len(columns), "data": columns}


def test_add_dataframe(make_client, sample_sheet_data):
    client, http = make_client(
        (200, {}, _column_page(sample_sheet_data)),
        (200, {}, success([{"id": 7}, {"id": 8}])),
    )
    df = pd.DataFrame({"Task": ["a", "b"], "Done": [True, None]})

    added = client.rows.add_dataframe(SHEET_ID, df)

    assert [r.id for r in added] == [7, 8]
    assert http.calls[0]["url"].endswith(f"/sheets/{SHEET_ID}/columns")
    assert http.calls[0]["params"] == {"includeAll": "true"}
    posted = http.calls[1]["json"]
    assert posted[0]["cells"] == [{"columnId": 101, "value": "a"}, {"columnId": 102, "value": True}]
    assert posted[1]["cells"] == [{"columnId": 101, "value": "b"}]


def test_add_empty_dataframe_sends_nothing(make_client, sample_sheet_data):
    client, http = make_client((200, {}, _column_page(sample_sheet_data)))
    assert client.rows.add_dataframe(SHEET_ID, pd.DataFrame(columns=["Task"])) == []
    assert len(http.calls) == 1
