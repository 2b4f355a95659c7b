# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Search result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SearchResultItem:
    """
    One search hit.

    :param text: Matched text.
    :type text: str | None
    :param object_type: Kind of object matched (``"sheet"``, ``"row"``, ``"discussion"``, ``"attachment"`` ...).
    :type object_type: str | None
    :param object_id: Id of the matched object.
    :type object_id: int | None
    :param parent_object_id: Id of the containing object (e.g. the sheet of a matched row).
    :type parent_object_id: int | None
    """

    text: Optional[str] = None
    object_type: Optional[str] = None
    object_id: Optional[int] = None
    parent_object_type: Optional[str] = None
    parent_object_id: Optional[int] = None
    parent_object_name: Optional[str] = None
    context_data: List[str] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "SearchResultItem":
        return cls(
            text=response_data.get("text"),
            object_type=response_data.get("objectType"),
            object_id=response_data.get("objectId"),
            parent_object_type=response_data.get("parentObjectType"),
            parent_object_id=response_data.get("parentObjectId"),
            parent_object_name=response_data.get("parentObjectName"),
            context_data=list(response_data.get("contextData") or []),
        )


@dataclass
class SearchResult:
    """
    Search response.

    ``results`` is always a list, empty when nothing matched.
    """

    total_count: int = 0
    results: List[SearchResultItem] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "SearchResult":
        return cls(
            total_count=response_data.get("totalCount") or 0,
            results=[SearchResultItem.from_api_response(r) for r in response_data.get("results") or []],
        )


__all__ = ["SearchResult", "SearchResultItem"]
