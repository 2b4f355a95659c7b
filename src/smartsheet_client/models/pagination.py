# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Pagination request parameters for list operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class PaginationParameters:
    """
    Which page of a list operation to return.

    :param include_all: Return every item in one response; ``page_size`` and ``page`` are ignored by the service.
    :type include_all: bool
    :param page_size: Items per page (service default is 100).
    :type page_size: int | None
    :param page: 1-based page to return.
    :type page: int | None

    Example::

        client.groups.list(PaginationParameters(include_all=True))
        client.sheets.list(PaginationParameters(page_size=50, page=2))
    """

    include_all: bool = False
    page_size: Optional[int] = None
    page: Optional[int] = None

    def to_query_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.include_all:
            params["includeAll"] = "true"
        if self.page_size is not None:
            params["pageSize"] = str(self.page_size)
        if self.page is not None:
            params["page"] = str(self.page)
        return params


__all__ = ["PaginationParameters"]
