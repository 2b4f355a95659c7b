# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Smartsheet SDK tests.

Transport-level tests swap the transport's ``_http`` for :class:`ScriptedHTTP`,
which replays canned ``(status, headers, body)`` tuples and records every call.
"""

import json

import pytest

from smartsheet_client.client import SmartsheetClient
from smartsheet_client.core.config import SmartsheetConfig


class FakeResponse:
    def __init__(self, status, headers, body):
        self.status_code = status
        self.headers = headers or {}
        self._body = body
        if isinstance(body, (dict, list)):
            self.text = json.dumps(body)
        else:
            self.text = body or ""

    def json(self):
        if isinstance(self._body, (dict, list)):
            return self._body
        raise ValueError("non-json")


class ScriptedHTTP:
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []
        self.closed = False

    def _request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise AssertionError("No more responses")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        status, headers, body = item
        return FakeResponse(status, headers, body)

    def close(self):
        self.closed = True


def success(result):
    """Wrap ``result`` in the service's write envelope."""
    return {"message": "SUCCESS", "resultCode": 0, "result": result}


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return SmartsheetConfig(
        base_url="https://api.example.com/2.0",
        http_retries=0,
        http_backoff=0.1,
        http_timeout=5,
    )


@pytest.fixture
def make_client(test_config):
    """Return a factory building ``(client, http)`` with scripted responses."""

    def _make(*responses):
        client = SmartsheetClient("test_token_12345", test_config)
        http = ScriptedHTTP(responses)
        client._get_transport()._http = http
        return client, http

    return _make


@pytest.fixture
def sample_group_data():
    return {
        "id": 2331373580117892,
        "name": "Test Group",
        "description": "Test group",
        "owner": "admin@example.com",
        "ownerId": 94094820842,
        "createdAt": "2024-05-01T10:00:00Z",
        "modifiedAt": "2024-05-02T11:30:00Z",
        "members": [
            {"id": 48569348493401200, "email": "jane.doe@example.com", "firstName": "Jane", "lastName": "Doe", "name": "Jane Doe"}
        ],
    }


@pytest.fixture
def sample_sheet_data():
    return {
        "id": 4583173393803140,
        "name": "Project Plan",
        "accessLevel": "OWNER",
        "permalink": "https://app.smartsheet.com/sheets/abc",
        "totalRowCount": 2,
        "columns": [
            {"id": 101, "index": 0, "title": "Task", "type": "TEXT_NUMBER", "primary": True},
            {"id": 102, "index": 1, "title": "Done", "type": "CHECKBOX"},
        ],
        "rows": [
            {
                "id": 1001,
                "rowNumber": 1,
                "cells": [{"columnId": 101, "value": "Write docs"}, {"columnId": 102, "value": True}],
            },
            {
                "id": 1002,
                "rowNumber": 2,
                "parentId": 1001,
                "cells": [{"columnId": 101, "value": "Review"}],
            },
        ],
    }
