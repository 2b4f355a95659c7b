# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import logging

import pytest

from smartsheet_client.client import SmartsheetClient
from smartsheet_client.core._error_codes import MALFORMED_RESPONSE
from smartsheet_client.core.config import SmartsheetConfig
from smartsheet_client.core.errors import HttpError
from smartsheet_client.data._transport import _SmartsheetTransport

from conftest import ScriptedHTTP, success


def test_url_and_standard_headers(make_client):
    client, http = make_client((200, {}, {"data": []}))
    client._get_transport()._get("groups", {"includeAll": "true"})

    call = http.calls[0]
    assert call["method"] == "get"
    assert call["url"] == "https://api.example.com/2.0/groups"
    assert call["params"] == {"includeAll": "true"}
    headers = call["headers"]
    assert headers["Authorization"] == "Bearer test_token_12345"
    assert headers["Accept"] == "application/json"
    assert headers["Content-Type"] == "application/json"
    assert headers["User-Agent"] == "smartsheet-client-python"
    assert "Assume-User" not in headers


def test_each_request_gets_new_client_request_id(make_client):
    client, http = make_client((200, {}, {}), (200, {}, {}))
    transport = client._get_transport()
    transport._get("sheets")
    transport._get("sheets")
    h1, h2 = (c["headers"] for c in http.calls)
    assert h1["x-client-request-id"] != h2["x-client-request-id"]


def test_assume_user_and_user_agent_headers():
    config = SmartsheetConfig(
        base_url="https://api.example.com/2.0/",
        user_agent="my-integration/1.0",
        assume_user="jane.doe@example.com",
    )
    client = SmartsheetClient("tok", config)
    http = ScriptedHTTP([(200, {}, {})])
    transport = client._get_transport()
    transport._http = http

    transport._get("/sheets")

    call = http.calls[0]
    assert call["url"] == "https://api.example.com/2.0/sheets"
    assert call["headers"]["Assume-User"] == "jane.doe@example.com"
    assert call["headers"]["User-Agent"] == "my-integration/1.0"


def test_post_unwraps_result_envelope(make_client):
    client, http = make_client((200, {}, success({"id": 7, "name": "G"})))
    body = client._get_transport()._post("groups", {"name": "G"})
    assert body == {"id": 7, "name": "G"}
    assert http.calls[0]["json"] == {"name": "G"}


def test_partial_success_envelope_unwrapped(make_client):
    client, _ = make_client((200, {}, {"message": "PARTIAL_SUCCESS", "resultCode": 3, "result": [1, 2]}))
    assert client._get_transport()._delete("sheets/1/rows", {"ids": "1,2,3"}) == [1, 2]


def test_get_does_not_unwrap(make_client):
    client, _ = make_client((200, {}, {"pageNumber": 1, "data": []}))
    assert client._get_transport()._get("sheets") == {"pageNumber": 1, "data": []}


def test_empty_body_returns_none(make_client):
    client, _ = make_client((200, {}, ""))
    assert client._get_transport()._delete("groups/1") is None


def test_expect_dict_rejects_lists():
    with pytest.raises(HttpError) as ei:
        _SmartsheetTransport._expect_dict([], "group")
    assert ei.value.subcode == MALFORMED_RESPONSE


def test_expect_list_accepts_single_object():
    assert _SmartsheetTransport._expect_list({"id": 1}, "rows") == [{"id": 1}]
    assert _SmartsheetTransport._expect_list(None, "rows") == []
    with pytest.raises(HttpError):
        _SmartsheetTransport._expect_list("oops", "rows")


def test_error_status_logged_as_warning(make_client, caplog):
    client, _ = make_client((404, {}, {"errorCode": 1006, "message": "Not Found"}))
    with caplog.at_level(logging.DEBUG, logger="smartsheet_client.data._transport"):
        with pytest.raises(HttpError):
            client._get_transport()._get("sheets/1")
    records = [r for r in caplog.records if r.name == "smartsheet_client.data._transport"]
    assert records and records[-1].levelno == logging.WARNING
    assert "404" in records[-1].getMessage()
    assert "test_token_12345" not in records[-1].getMessage()


def test_success_logged_at_debug(make_client, caplog):
    client, _ = make_client((200, {}, {}))
    with caplog.at_level(logging.DEBUG, logger="smartsheet_client.data._transport"):
        client._get_transport()._get("sheets")
    records = [r for r in caplog.records if r.name == "smartsheet_client.data._transport"]
    assert records[-1].levelno == logging.DEBUG
    assert records[-1].client_request_id


def test_close_closes_http(make_client):
    client, http = make_client()
    client._get_transport().close()
    assert http.closed is True
