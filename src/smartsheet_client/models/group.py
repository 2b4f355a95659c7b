# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Group and group member models.

Groups are organization-level collections of users used for sharing. Creating and
modifying groups requires a system administrator token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from ._parsing import compact, parse_timestamp


@dataclass
class GroupMember:
    """
    A member of a group.

    Only ``email`` is sent when adding a member; the remaining fields are filled
    in by the service.

    :param email: Member email address.
    :type email: str | None
    :param id: User id of the member (assigned by the service).
    :type id: int | None

    Example::

        member = GroupMember(email="jane.doe@example.com")
    """

    email: Optional[str] = None
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None

    def to_create_payload(self) -> Dict[str, Any]:
        return compact({"email": self.email})

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "GroupMember":
        return cls(
            email=response_data.get("email"),
            id=response_data.get("id"),
            first_name=response_data.get("firstName"),
            last_name=response_data.get("lastName"),
            name=response_data.get("name"),
        )


@dataclass
class Group:
    """
    An organization group.

    :param name: Group name, unique within the organization.
    :type name: str | None
    :param description: Free-text description.
    :type description: str | None
    :param members: Members to create the group with, or the members returned by the service.
    :type members: list[GroupMember]
    :param id: Group id (assigned by the service).
    :type id: int | None
    :param owner_id: User id of the owner. Settable on update to transfer ownership.
    :type owner_id: int | None

    Example:
        Create payload::

            group = Group(
                name="Test Group",
                description="Test group",
                members=[GroupMember(email="jane.doe@example.com")],
            )
            created = client.groups.create(group)

        Update payload (the id is required)::

            client.groups.update(Group(id=created.id, name="Renamed Group"))
    """

    name: Optional[str] = None
    description: Optional[str] = None
    members: List[GroupMember] = field(default_factory=list)
    id: Optional[int] = None
    owner: Optional[str] = None
    owner_id: Optional[int] = None
    created_at: Optional[Union[datetime, str]] = None
    modified_at: Optional[Union[datetime, str]] = None

    def to_create_payload(self) -> Dict[str, Any]:
        """
        Fields accepted by ``POST /groups``.

        :return: JSON-ready body. ``members`` is omitted when empty.
        :rtype: dict[str, Any]
        """
        payload = compact({"name": self.name, "description": self.description})
        if self.members:
            payload["members"] = [m.to_create_payload() for m in self.members]
        return payload

    def to_update_payload(self) -> Dict[str, Any]:
        """Fields accepted by ``PUT /groups/{id}``; members are managed through ``groups.members``."""
        return compact({"name": self.name, "description": self.description, "ownerId": self.owner_id})

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Group":
        return cls(
            name=response_data.get("name"),
            description=response_data.get("description"),
            members=[GroupMember.from_api_response(m) for m in response_data.get("members") or []],
            id=response_data.get("id"),
            owner=response_data.get("owner"),
            owner_id=response_data.get("ownerId"),
            created_at=parse_timestamp(response_data.get("createdAt")),
            modified_at=parse_timestamp(response_data.get("modifiedAt")),
        )


__all__ = ["Group", "GroupMember"]
