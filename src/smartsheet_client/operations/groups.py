# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Group and group membership operations namespace."""

from __future__ import annotations

from typing import List, Optional, Sequence, TYPE_CHECKING

from ..core.results import PagedResult
from ..models.group import Group, GroupMember
from ..models.pagination import PaginationParameters
from ._validation import require_id, require_non_empty

if TYPE_CHECKING:
    from ..client import SmartsheetClient


class GroupMemberOperations:
    """
    Group membership operations.

    Accessed via ``client.groups.members``.

    Example::

        added = client.groups.members.add(group_id, [GroupMember(email="jane.doe@example.com")])
        client.groups.members.delete(group_id, added[0].id)
    """

    def __init__(self, client: "SmartsheetClient") -> None:
        self._client = client

    def add(self, group_id: int, members: Sequence[GroupMember]) -> List[GroupMember]:
        """
        Add members to a group.

        Members that already belong to the group are ignored by the service.

        :param group_id: Group id.
        :type group_id: int
        :param members: Members to add; only ``email`` is sent.
        :type members: list[GroupMember]
        :return: The members as stored by the service.
        :rtype: list[GroupMember]

        :raises ValidationError: If ``group_id`` is not an int or ``members`` is empty.
        """
        require_id(group_id, "group_id")
        members = require_non_empty(members, "members")
        transport = self._client._get_transport()
        body = transport._post(f"groups/{group_id}/members", [m.to_create_payload() for m in members])
        return [GroupMember.from_api_response(m) for m in transport._expect_list(body, "group members")]

    def delete(self, group_id: int, user_id: int) -> None:
        """
        Remove a member from a group.

        :param group_id: Group id.
        :type group_id: int
        :param user_id: User id of the member (``GroupMember.id``).
        :type user_id: int
        """
        require_id(group_id, "group_id")
        require_id(user_id, "user_id")
        self._client._get_transport()._delete(f"groups/{group_id}/members/{user_id}")


class GroupOperations:
    """
    Group CRUD operations.

    Accessed via ``client.groups``. Creating, updating and deleting groups
    requires a system administrator; other users get an
    :class:`~smartsheet_client.core.errors.AuthorizationError`.

    Example::

        group = client.groups.create(
            Group(name="Test Group", members=[GroupMember(email="jane.doe@example.com")])
        )
        groups = client.groups.list(PaginationParameters(include_all=True))
        same = client.groups.get(group.id)
        client.groups.update(Group(id=group.id, description="Some description"))
        client.groups.delete(group.id)
    """

    def __init__(self, client: "SmartsheetClient") -> None:
        self._client = client
        self.members = GroupMemberOperations(client)

    def create(self, group: Group) -> Group:
        """
        Create a group.

        :param group: Group to create; ``name`` is required by the service.
        :type group: Group
        :return: The created group with its service-assigned ``id``.
        :rtype: Group
        """
        transport = self._client._get_transport()
        body = transport._post("groups", group.to_create_payload())
        return Group.from_api_response(transport._expect_dict(body, "group"))

    def get(self, group_id: int) -> Group:
        """
        Fetch a group, including its members.

        :raises HttpError: With subcode ``http_404`` if the group does not exist.
        """
        require_id(group_id, "group_id")
        transport = self._client._get_transport()
        return Group.from_api_response(transport._expect_dict(transport._get(f"groups/{group_id}"), "group"))

    def list(self, pagination: Optional[PaginationParameters] = None) -> PagedResult[Group]:
        """
        List the groups in the organization (members are not included).

        :param pagination: Page selection; defaults to the first page.
        :type pagination: PaginationParameters | None
        :rtype: PagedResult[Group]
        """
        params = (pagination or PaginationParameters()).to_query_params()
        body = self._client._get_transport()._get("groups", params)
        return PagedResult.from_api_response(body, Group.from_api_response)

    def update(self, group: Group) -> Group:
        """
        Update name, description or owner of a group.

        :param group: Group carrying the ``id`` and the fields to change.
        :type group: Group
        :raises ValidationError: If ``group.id`` is missing.
        """
        group_id = require_id(group.id, "group.id")
        transport = self._client._get_transport()
        body = transport._put(f"groups/{group_id}", group.to_update_payload())
        return Group.from_api_response(transport._expect_dict(body, "group"))

    def delete(self, group_id: int) -> None:
        require_id(group_id, "group_id")
        self._client._get_transport()._delete(f"groups/{group_id}")


__all__ = ["GroupOperations", "GroupMemberOperations"]
