# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal helpers shared by the model ``from_api_response`` constructors."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Union


def parse_timestamp(value: Any) -> Optional[Union[datetime, str]]:
    """Parse an ISO-8601 timestamp; unparseable values are returned unchanged."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return value
    return value


def format_timestamp(value: Any) -> Any:
    """Inverse of :func:`parse_timestamp` for outgoing payloads."""
    # datetime is a date subclass; DATE columns take plain dates
    if isinstance(value, date):
        return value.isoformat()
    return value


def compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is ``None``; the service treats absent and null differently."""
    return {k: v for k, v in payload.items() if v is not None}
