# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""User model referenced by owners and row authorship fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class User:
    """
    A Smartsheet user as embedded in other entities.

    :param id: User id.
    :type id: int | None
    :param email: Primary email address.
    :type email: str | None
    :param name: Display name.
    :type name: str | None
    """

    id: Optional[int] = None
    email: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    admin: Optional[bool] = None
    licensed_sheet_creator: Optional[bool] = None
    status: Optional[str] = None

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "User":
        return cls(
            id=response_data.get("id"),
            email=response_data.get("email"),
            name=response_data.get("name"),
            first_name=response_data.get("firstName"),
            last_name=response_data.get("lastName"),
            admin=response_data.get("admin"),
            licensed_sheet_creator=response_data.get("licensedSheetCreator"),
            status=response_data.get("status"),
        )


__all__ = ["User"]
