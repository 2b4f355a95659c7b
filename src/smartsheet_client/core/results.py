# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Result types for Smartsheet list operations.

- :class:`PagedResult`: one page of an ordered entity sequence plus the pagination
  metadata reported by the service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from ._error_codes import MALFORMED_RESPONSE
from .errors import HttpError

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """
    A bounded page of entities.

    Acts like a read-only list of its ``data`` (iteration, indexing, ``len``).

    :param data: Entities on this page, in service order.
    :type data: :class:`list`
    :param page_number: 1-based page number.
    :type page_number: :class:`int`
    :param page_size: Requested page size (equals ``total_count`` when all items were requested).
    :type page_size: :class:`int`
    :param total_pages: Number of pages available.
    :type total_pages: :class:`int`
    :param total_count: Number of entities across all pages.
    :type total_count: :class:`int`

    Example:
        Walk every group in the organization::

            groups = client.groups.list(PaginationParameters(include_all=True))
            for group in groups:
                print(group.id, group.name)
    """

    data: List[T] = field(default_factory=list)
    page_number: int = 1
    page_size: int = 0
    total_pages: int = 0
    total_count: int = 0

    def __post_init__(self) -> None:
        if self.page_number < 1 or self.page_size * (self.page_number - 1) > self.total_count:
            raise ValueError(
                f"Inconsistent pagination: page_number={self.page_number}, "
                f"page_size={self.page_size}, total_count={self.total_count}"
            )

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]

    @property
    def has_more(self) -> bool:
        """Whether pages exist after this one."""
        return self.page_number < self.total_pages

    @classmethod
    def from_api_response(
        cls,
        body: Dict[str, Any],
        item_factory: Callable[[Dict[str, Any]], T],
        *,
        items_key: str = "data",
    ) -> "PagedResult[T]":
        """
        Build a page from an ``IndexResult`` response body.

        :param body: Decoded JSON body with ``pageNumber``, ``pageSize``, ``totalPages``,
            ``totalCount`` and the item list.
        :type body: dict
        :param item_factory: Converts each raw item to a model.
        :param items_key: Key holding the item list (``"data"`` for index endpoints).
        :type items_key: str
        :raises HttpError: With subcode ``malformed_response`` when the body is not a page
            or its metadata is inconsistent.
        """
        if not isinstance(body, dict):
            raise HttpError("Expected a paged JSON object", subcode=MALFORMED_RESPONSE)
        items = body.get(items_key) or []
        if not isinstance(items, list):
            raise HttpError(f"Expected '{items_key}' to be a list", subcode=MALFORMED_RESPONSE)
        data = [item_factory(item) for item in items]
        total_count = _as_int(body.get("totalCount"), len(data))
        try:
            return cls(
                data=data,
                page_number=_as_int(body.get("pageNumber"), 1),
                page_size=_as_int(body.get("pageSize"), len(data)),
                total_pages=_as_int(body.get("totalPages"), 1 if data else 0),
                total_count=total_count,
            )
        except ValueError as exc:
            raise HttpError(str(exc), subcode=MALFORMED_RESPONSE) from exc


def _as_int(value: Optional[Any], default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


__all__ = ["PagedResult"]
