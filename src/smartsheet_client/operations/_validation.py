# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Shape checks applied before a request is sent."""

from __future__ import annotations

from typing import Any, List, Sequence

from ..core._error_codes import (
    VALIDATION_EMPTY_COLLECTION,
    VALIDATION_ID_NOT_INT,
    VALIDATION_ID_REQUIRED,
    VALIDATION_QUERY_EMPTY,
)
from ..core.errors import ValidationError


def require_id(value: Any, name: str) -> int:
    """Return ``value`` if it is an int identifier, else raise :class:`ValidationError`."""
    if value is None:
        raise ValidationError(f"{name} is required", subcode=VALIDATION_ID_REQUIRED)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be int, got {type(value).__name__}",
            subcode=VALIDATION_ID_NOT_INT,
            details={"name": name},
        )
    return value


def require_non_empty(items: Sequence[Any], name: str) -> List[Any]:
    if not items:
        raise ValidationError(f"{name} must not be empty", subcode=VALIDATION_EMPTY_COLLECTION)
    return list(items)


def require_query(query: Any) -> str:
    if not isinstance(query, str) or not query.strip():
        raise ValidationError("query must be a non-empty string", subcode=VALIDATION_QUERY_EMPTY)
    return query
