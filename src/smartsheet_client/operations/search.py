# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Search operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.search import SearchResult
from ._validation import require_id, require_query

if TYPE_CHECKING:
    from ..client import SmartsheetClient


class SearchOperations:
    """
    Full-text search.

    Accessed via ``client.search``.

    Example::

        result = client.search.search("budget")
        for item in result.results:
            print(item.object_type, item.text)

        hits = client.search.search_sheet(sheet_id, "test")
    """

    def __init__(self, client: "SmartsheetClient") -> None:
        self._client = client

    def search(self, query: str) -> SearchResult:
        """
        Search every object the user can access.

        :param query: Text to search for. Wrap in double quotes for an exact phrase.
        :type query: str
        :rtype: SearchResult
        :raises ValidationError: If ``query`` is empty.
        """
        query = require_query(query)
        transport = self._client._get_transport()
        body = transport._get("search", {"query": query})
        return SearchResult.from_api_response(transport._expect_dict(body, "search result"))

    def search_sheet(self, sheet_id: int, query: str) -> SearchResult:
        """Search within a single sheet."""
        require_id(sheet_id, "sheet_id")
        query = require_query(query)
        transport = self._client._get_transport()
        body = transport._get(f"search/sheets/{sheet_id}", {"query": query})
        return SearchResult.from_api_response(transport._expect_dict(body, "search result"))


__all__ = ["SearchOperations"]
